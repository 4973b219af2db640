# src/ternplot/plot/frame.py
"""Triangle outline and gridlines."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

from ..geometry.spacing import grid_spacing
from .base import TICK_DIRECTIONS, BaseTernary, merge_style

if TYPE_CHECKING:  # pragma: no cover - import for typing only
	from matplotlib.lines import Line2D

OUTLINE_STYLE = {"color": "black", "linewidth": 1.5, "solid_capstyle": "round", "zorder": 3}
GRID_STYLE = {"color": "0.75", "linewidth": 0.6, "linestyle": "-", "zorder": 1}


class Frame(BaseTernary):
	"""Draw the triangle and the per-axis gridlines with their tick extensions."""

	def compute_grid_points(self) -> List[Any]:
		"""Compute and store the gridline positions of all three axes."""
		self.grid.grid_pnts = grid_spacing(
			self.grid.wlimits,
			usegridspace=self.grid.usegridspace,
			gridspaceunit=self.grid.gridspaceunit,
		)
		return self.grid.grid_pnts

	def draw_outline(self, **kwargs: Any) -> List["Line2D"]:
		"""
		Draw the three triangle edges.

		:param kwargs: Keyword arguments forwarded to :meth:`matplotlib.axes.Axes.plot`.
		:return: The edge lines, ordered left (A), bottom (B), right (C).
		"""
		params = merge_style(OUTLINE_STYLE, kwargs)
		lines = []
		for i in range(3):
			p0, p1 = self._edge_ends(i)
			(line,) = self.ax.plot([p0[0], p1[0]], [p0[1], p1[1]], **params)
			lines.append(line)
		self.outline.lines = lines
		return lines

	def draw_grid_lines(self, **kwargs: Any) -> List[List["Line2D"]]:
		"""
		Draw one line per grid position on every axis.

		Each line crosses the triangle and continues ``ticklinelength`` beyond
		the labeled edge, which gives the tick marks.

		:param kwargs: Keyword arguments forwarded to :meth:`matplotlib.axes.Axes.plot`.
		:return: ``lines[i]`` holds the gridlines of axis ``i``.
		"""
		if not self.grid.grid_pnts:
			self.compute_grid_points()

		params = merge_style(GRID_STYLE, kwargs)
		length = self.tick.ticklinelength
		grid_lines: List[List["Line2D"]] = [[], [], []]
		for i in range(3):
			direction = TICK_DIRECTIONS[i]
			for value in self.grid.grid_pnts[i]:
				start, end = self._gridline_ends(i, float(value))
				tip = start + length * direction
				(line,) = self.ax.plot([end[0], tip[0]], [end[1], tip[1]], **params)
				grid_lines[i].append(line)
		self.grid.lines = grid_lines
		return grid_lines
