# src/ternplot/plot/ternary.py

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Tuple, Union

from ..config import TernarySettings
from ..logutil import get_logger
from .data import DataPlots
from .frame import Frame
from .labels import Labels
from .layout import Layout

if TYPE_CHECKING:  # pragma: no cover - import for typing only
	from matplotlib.axes import Axes

LOG = get_logger(__name__)

StyleArgs = Optional[Mapping[str, Any]]


class TernaryAxes(DataPlots, Layout, Labels, Frame):
	"""
	Ternary frame (outline, gridlines, tick labels, titles) on a Matplotlib axes.

	The created artists are reachable through handle groups::

		tern = TernaryAxes({"titlelabels": ["SiO2", "CaO", "Al2O3"]})
		tern.outline.lines[0]      # left edge (axis A)
		tern.grid.lines[1]         # gridlines of axis B
		tern.tick.text[2]          # tick labels of axis C
		tern.title.text[0]         # title of axis A
		tern.set_axis_color("B", "tab:blue")

	:param general: General options, as :class:`TernarySettings`, a mapping, or a
		flat ``[name, value, ...]`` list.
	:param outline: Keywords for the outline lines (:meth:`Axes.plot`).
	:param grid: Keywords for the gridlines (:meth:`Axes.plot`).
	:param tick: Keywords for the tick labels (:meth:`Axes.text`).
	:param label: Keywords for the axis titles (:meth:`Axes.text`).
	:param ax: Existing axes to draw on; a new figure is created when ``None``.
	:param figsize: Size of the new figure.
	"""

	def __init__(
			self,
			general: Union[TernarySettings, Mapping[str, Any], list, None] = None,
			outline: StyleArgs = None,
			grid: StyleArgs = None,
			tick: StyleArgs = None,
			label: StyleArgs = None,
			*,
			ax: Optional["Axes"] = None,
			figsize: Tuple[float, float] = (7, 6)
	) -> None:
		settings = general if isinstance(general, TernarySettings) else TernarySettings.from_options(general)
		super().__init__(settings, ax=ax, figsize=figsize)

		self.compute_grid_points()
		self.draw_outline(**dict(outline or {}))
		self.draw_grid_lines(**dict(grid or {}))
		self.draw_tick_labels(**dict(tick or {}))
		self.draw_axes_titles(**dict(label or {}))
		self.link_colors()
		self.apply_default_shifts()
		self.finalize()
		LOG.debug(
			"Ternary axes ready: %s gridlines per axis",
			[len(points) for points in self.grid.grid_pnts]
		)

	def __repr__(self) -> str:
		return f"{self.__class__.__name__}(titles={self.title.titlelabels!r}, data_layers={len(self.dataplots)})"


def ternary_axes(
		general: Union[TernarySettings, Mapping[str, Any], list, None] = None,
		outline: StyleArgs = None,
		grid: StyleArgs = None,
		tick: StyleArgs = None,
		label: StyleArgs = None,
		**kwargs: Any
) -> TernaryAxes:
	"""Functional shortcut for :class:`TernaryAxes`."""
	return TernaryAxes(general, outline, grid, tick, label, **kwargs)
