# src/ternplot/plot/labels.py
"""Tick labels and axis titles."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

from ..geometry.spacing import format_tick, tick_values
from .base import EDGE_MIDPOINTS, TICK_DIRECTIONS, BaseTernary, merge_style

if TYPE_CHECKING:  # pragma: no cover - import for typing only
	from matplotlib.text import Text

# Alignment of tick text around the tick tip, per axis (A, B, C)
_TICK_ALIGN = (
	{"ha": "right", "va": "center"},
	{"ha": "center", "va": "top"},
	{"ha": "left", "va": "bottom"},
)

TICK_STYLE = {"color": "black", "fontsize": 9}
TITLE_STYLE = {"color": "black", "fontsize": 12, "fontweight": "bold", "ha": "center", "va": "center"}


class Labels(BaseTernary):
	"""Text elements of the ternary frame."""

	def draw_tick_labels(self, **kwargs: Any) -> List[List["Text"]]:
		"""
		Label every gridline at the tip of its tick extension.

		Values are shown in data units (``wlimits``) with ``tick_fmt``.

		:param kwargs: Keyword arguments forwarded to :meth:`matplotlib.axes.Axes.text`.
		:return: ``text[i]`` holds the tick labels of axis ``i``.
		"""
		if not self.grid.grid_pnts:
			raise RuntimeError("Grid positions missing; call compute_grid_points() first.")

		self.tick.values = tick_values(self.grid.grid_pnts, self.grid.wlimits)
		length = self.tick.ticklinelength
		texts: List[List["Text"]] = [[], [], []]
		for i in range(3):
			params = merge_style(merge_style(TICK_STYLE, _TICK_ALIGN[i]), kwargs)
			direction = TICK_DIRECTIONS[i]
			for value, label in zip(self.grid.grid_pnts[i], self.tick.values[i]):
				start, _end = self._gridline_ends(i, float(value))
				tip = start + length * direction
				texts[i].append(self.ax.text(tip[0], tip[1], format_tick(label, self.tick.tick_fmt), **params))
		self.tick.text = texts
		return texts

	def draw_axes_titles(self, **kwargs: Any) -> List["Text"]:
		"""
		Place the axis titles at the middle of their edges.

		Rotation comes from the settings (``titlerotation``) unless given here.

		:param kwargs: Keyword arguments forwarded to :meth:`matplotlib.axes.Axes.text`.
		:return: The three title texts.
		"""
		texts = []
		for i in range(3):
			params = merge_style(TITLE_STYLE, {"rotation": self.title.rotation[i], "rotation_mode": "anchor"})
			params = merge_style(params, kwargs)
			x, y = EDGE_MIDPOINTS[i]
			texts.append(self.ax.text(x, y, self.title.titlelabels[i], **params))
		self.title.text = texts
		return texts
