# src/ternplot/plot/base.py
"""Shared building blocks for :class:`~ternplot.plot.TernaryAxes`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Tuple

from ..config import TernarySettings
from ..geometry.coords import HEIGHT, identify_axis, validate_limits
from ..imports import numpy as np  # type: ignore
from ..imports import pyplot as plt  # type: ignore
from ..logutil import get_logger
from .handles import ColorLink, GridHandle, OutlineHandle, TickHandle, TitleHandle, as_shift_array

if TYPE_CHECKING:  # pragma: no cover - only for static typing
	from matplotlib.artist import Artist
	from matplotlib.axes import Axes

LOG = get_logger(__name__)

# Outward unit vectors of the tick extensions, one per axis (A, B, C)
TICK_DIRECTIONS = np.array([
	[-1.0, 0.0],
	[0.5, -HEIGHT],
	[0.5, HEIGHT],
])

# Midpoints of the labeled edges (left, bottom, right)
EDGE_MIDPOINTS = np.array([
	[0.25, HEIGHT / 2.0],
	[0.5, 0.0],
	[0.75, HEIGHT / 2.0],
])


def merge_style(defaults: Mapping[str, Any], overrides: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
	"""Return ``defaults`` updated with ``overrides`` (user keywords win)."""
	params = dict(defaults)
	if overrides:
		params.update(overrides)
	return params


class BaseTernary:
	"""Provide axes lifecycle, handle groups and the edge geometry."""

	def __init__(
			self,
			settings: Optional[TernarySettings] = None,
			*,
			ax: Optional["Axes"] = None,
			figsize: Tuple[float, float] = (7, 6)
	) -> None:
		self.settings = settings if settings is not None else TernarySettings()
		if ax is None:
			self.fig, self.ax = plt.subplots(figsize=figsize)
			self.ax.set_position(self.settings.ternarypos)
		else:
			self.ax = ax
			self.fig = ax.figure

		wlimits = validate_limits(self.settings.wlimits)
		self.link_color: List[str] = list(self.settings.link_color)
		self.dataplots: List["Artist"] = []
		self.datacursors: List[Any] = []
		self.colorbars: List[Any] = []
		self.axes_color_links: List[ColorLink] = []

		self.outline = OutlineHandle()
		self.grid = GridHandle(
			usegridspace=self.settings.usegridspace,
			gridspaceunit=self.settings.gridspaceunit,
			wlimits=wlimits,
		)
		self.tick = TickHandle(
			ticklinelength=float(self.settings.ticklinelength),
			tick_fmt=self.settings.tick_fmt,
			shift=as_shift_array(self.settings.tickshift),
		)
		self.title = TitleHandle(
			titlelabels=list(self.settings.titlelabels),
			shift=as_shift_array(self.settings.titleshift),
			rotation=[float(r) for r in self.settings.titlerotation],
		)
		LOG.debug("Initialized ternary handle on %r", self.ax)

	@property
	def wlimits(self) -> "np.ndarray":
		return self.grid.wlimits

	# --- Geometry helpers ---
	@staticmethod
	def _gridline_ends(axis: int, value: float) -> Tuple["np.ndarray", "np.ndarray"]:
		"""
		Return the two ends of the gridline ``axis == value``.

		The first end lies on the edge carrying the labels of ``axis``.
		"""
		start = np.zeros(3)
		end = np.zeros(3)
		start[axis] = end[axis] = value
		start[(axis + 1) % 3] = 1.0 - value
		end[(axis + 2) % 3] = 1.0 - value

		def to_xy(abc: "np.ndarray") -> "np.ndarray":
			return np.array([abc[2] + 0.5 * abc[0], HEIGHT * abc[0]])

		return to_xy(start), to_xy(end)

	@staticmethod
	def _edge_ends(axis: int) -> Tuple["np.ndarray", "np.ndarray"]:
		"""Ends of the outline edge that carries the labels of ``axis``."""
		return BaseTernary._gridline_ends(axis, 0.0)[0], BaseTernary._gridline_ends(axis, 1.0)[0]

	@staticmethod
	def _axis_index(axis: Any) -> int:
		return identify_axis(axis)

	@staticmethod
	def show_plot() -> None:
		"""Display all open figures."""
		plt.show()

	def save_plot(self, filename: str, *, dpi: int = 300, fig_format: str = "png") -> str:
		"""
		Persist the current figure to disk and return the resolved path.

		:param filename: Base filename or path; the extension is appended when missing.
		:param dpi: Rendering resolution in dots per inch.
		:param fig_format: Output format passed to :meth:`matplotlib.figure.Figure.savefig`.
		:return: The filename with the ensured extension.
		:raises ValueError: If ``dpi`` is not positive or ``fig_format`` is empty.
		"""
		if dpi <= 0:
			raise ValueError("dpi must be a positive integer.")
		fig_format = fig_format.lstrip(".")
		if not fig_format:
			raise ValueError("fig_format must be a non-empty string.")

		if not filename.lower().endswith(f".{fig_format.lower()}"):
			filename = f"{filename}.{fig_format}"
		self.fig.savefig(filename, dpi=dpi, format=fig_format, bbox_inches="tight")
		LOG.info("Saved ternary figure to %s", filename)
		return filename
