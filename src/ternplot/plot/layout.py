# src/ternplot/plot/layout.py
"""Color linking, label shifts and final axes framing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional, Sequence

from ..config.schema import LINK_FIELDS
from ..imports import numpy as np  # type: ignore
from ..logutil import get_logger
from .base import BaseTernary
from .handles import ColorLink

if TYPE_CHECKING:  # pragma: no cover - import for typing only
	from matplotlib.artist import Artist

LOG = get_logger(__name__)

SHIFT_KINDS = ("title", "tick")


class Layout(BaseTernary):
	"""Methods adjusting label placement, linked colors and axes framing."""

	def _link_members(self, axis: int, fields: Sequence[str]) -> List["Artist"]:
		members: List["Artist"] = []
		for name in fields:
			if name == "title":
				members.append(self.title.text[axis])
			elif name == "tick":
				members.extend(self.tick.text[axis])
			elif name == "grid":
				members.extend(self.grid.lines[axis])
			elif name == "outline":
				members.append(self.outline.lines[axis])
			else:
				raise ValueError(f"Bad color link field name: {name!r} (use one of {', '.join(LINK_FIELDS)}).")
		return members

	def link_colors(self, fields: Optional[Sequence[str]] = None) -> List[ColorLink]:
		"""
		Synchronize colors of the chosen element groups, separately per axis.

		Existing links are released first.

		:param fields: Any of ``"title"``, ``"tick"``, ``"grid"``, ``"outline"``.
			Defaults to the ``link_color`` setting.
		:return: One :class:`ColorLink` per axis.
		:raises ValueError: On an unknown field name.
		"""
		chosen = list(self.link_color if fields is None else fields)
		# validate all names before touching current links
		for i in range(3):
			self._link_members(i, chosen)

		for link in self.axes_color_links:
			link.remove()
		self.link_color = chosen
		self.axes_color_links = [ColorLink(self._link_members(i, chosen)) for i in range(3)]
		return self.axes_color_links

	def set_axis_color(self, axis: Any, color: Any) -> ColorLink:
		"""
		Recolor every linked element of one ternary axis.

		:param axis: Axis identifier (``"A"``, ``1``, ``"bottom"``...).
		:param color: Any Matplotlib color.
		:return: The axis color link.
		:raises RuntimeError: When colors have not been linked yet.
		"""
		idx = self._axis_index(axis)
		if not self.axes_color_links:
			raise RuntimeError("No color links present; call link_colors() first.")
		link = self.axes_color_links[idx]
		link.set_color(color)
		self.fig.canvas.draw_idle()
		return link

	def shift_xy(self, axis: Any, kind: str, shift: Sequence[float]) -> List["Artist"]:
		"""
		Move the title or the tick labels of one axis by an X/Y offset.

		Offsets are in plot units and accumulate over repeated calls.

		:param axis: Axis identifier.
		:param kind: ``"title"`` or ``"tick"``.
		:param shift: ``(dx, dy)``.
		:return: The moved text artists.
		:raises ValueError: On an unknown ``kind`` or a malformed shift.
		"""
		idx = self._axis_index(axis)
		offset = np.asarray(shift, dtype=float).reshape(-1)
		if offset.shape != (2,):
			raise ValueError(f"shift must hold exactly two values (dx, dy); got {offset.shape[0]}.")

		if kind == "title":
			texts = [self.title.text[idx]]
		elif kind == "tick":
			texts = list(self.tick.text[idx])
		else:
			raise ValueError(f"kind must be one of {SHIFT_KINDS}; got {kind!r}.")

		for text in texts:
			x, y = text.get_position()
			text.set_position((x + offset[0], y + offset[1]))
		return texts

	def apply_default_shifts(self) -> None:
		"""Apply the configured ``titleshift`` and ``tickshift`` to every axis."""
		for i in range(3):
			self.shift_xy(i, "title", self.title.shift[:, i])
			self.shift_xy(i, "tick", self.tick.shift[:, i])

	def _artist_points(self, artist: "Artist") -> "np.ndarray":
		if hasattr(artist, "get_xydata"):
			points = np.asarray(artist.get_xydata(), dtype=float).reshape(-1, 2)
		else:
			points = artist.get_datalim(self.ax.transData).get_points()
		return points[np.all(np.isfinite(points), axis=1)]

	def finalize(self, margin: float = 0.02) -> None:
		"""
		Fit the view to the frame and the data layers, lock the aspect ratio
		and hide the Cartesian axes.

		Call again after adding data plots, since Matplotlib autoscaling may
		have changed the limits.

		:param margin: Padding around the plotted content in plot units.
		"""
		frame = [*self.outline.lines, *(ln for group in self.grid.lines for ln in group)]
		chunks = [self._artist_points(artist) for artist in [*frame, *self.dataplots]]
		chunks = [c for c in chunks if c.size]
		if chunks:
			points = np.vstack(chunks)
			lower, upper = points.min(axis=0), points.max(axis=0)
			self.ax.set_xlim(lower[0] - margin, upper[0] + margin)
			self.ax.set_ylim(lower[1] - margin, upper[1] + margin)
		self.ax.set_aspect("equal", adjustable="box")
		self.ax.set_axis_off()
		self.fig.canvas.draw_idle()
