# src/ternplot/plot/datatip.py
"""Click-to-inspect data cursor reporting ternary values."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Sequence

from ..geometry.coords import AXIS_NAMES, cart_to_tern, validate_limits
from ..geometry.spacing import format_tick
from ..imports import numpy as np  # type: ignore
from ..logutil import get_logger

if TYPE_CHECKING:  # pragma: no cover - import for typing only
	from matplotlib.artist import Artist
	from matplotlib.axes import Axes
	from matplotlib.backend_bases import PickEvent
	from matplotlib.text import Annotation

LOG = get_logger(__name__)


def format_datatip(
		x: float,
		y: float,
		z: Optional[float],
		wlimits: Any,
		labels: Optional[Sequence[str]] = None,
		fmt: str = "%.4g"
) -> str:
	"""
	Describe the point at Cartesian ``(x, y)`` in ternary data units.

	:param x: Cartesian X of the point.
	:param y: Cartesian Y of the point.
	:param z: Value carried by the point (color data); omitted when ``None``.
	:param wlimits: ``2x3`` axis limits used to convert plot units to data units.
	:param labels: Axis names; defaults to ``A``, ``B``, ``C``.
	:param fmt: Number format for every value.
	:return: Multi-line text, one line per ternary axis plus ``Z``.
	"""
	lim = validate_limits(wlimits)
	names = list(labels) if labels else list(AXIS_NAMES)
	fractions = cart_to_tern(x, y)
	lines = []
	for i in range(3):
		value = lim[0, i] + float(fractions[i]) * (lim[1, i] - lim[0, i])
		lines.append(f"{names[i]}: {format_tick(value, fmt)}")
	if z is not None:
		lines.append(f"Z: {format_tick(float(z), fmt)}")
	return "\n".join(lines)


class DataCursor:
	"""Show a ternary readout next to a picked data point."""

	def __init__(
			self,
			ax: "Axes",
			artist: "Artist",
			zdata: Optional[Sequence[float]],
			wlimits: Any,
			labels: Optional[Sequence[str]] = None,
			fmt: str = "%.4g"
	) -> None:
		self.ax = ax
		self.artist = artist
		self.zdata = None if zdata is None else np.asarray(zdata, dtype=float).ravel()
		self.wlimits = validate_limits(wlimits)
		self.labels = list(labels) if labels else list(AXIS_NAMES)
		self.fmt = fmt
		self.annotation: Optional["Annotation"] = None
		if artist.get_picker() is None:
			artist.set_picker(True)
		self._cid: Optional[int] = ax.figure.canvas.mpl_connect("pick_event", self._on_pick)

	def _point(self, index: int):
		offsets = getattr(self.artist, "get_offsets", None)
		if offsets is not None:
			x, y = np.asarray(offsets())[index]
		else:
			x = np.asarray(self.artist.get_xdata(), dtype=float)[index]
			y = np.asarray(self.artist.get_ydata(), dtype=float)[index]
		return float(x), float(y)

	def show(self, index: int) -> str:
		"""Annotate point ``index`` of the artist and return the text shown."""
		x, y = self._point(index)
		z = None if self.zdata is None or self.zdata.size <= index else self.zdata[index]
		text = format_datatip(x, y, z, self.wlimits, self.labels, self.fmt)
		if self.annotation is None:
			self.annotation = self.ax.annotate(
				text,
				xy=(x, y),
				xytext=(12, 12),
				textcoords="offset points",
				bbox={"boxstyle": "round", "fc": "white", "alpha": 0.9},
				arrowprops={"arrowstyle": "->"},
				zorder=10,
			)
		else:
			self.annotation.xy = (x, y)
			self.annotation.set_text(text)
		self.annotation.set_visible(True)
		self.ax.figure.canvas.draw_idle()
		return text

	def _on_pick(self, event: "PickEvent") -> None:
		if event.artist is not self.artist or not len(getattr(event, "ind", [])):
			return
		index = int(event.ind[0])
		LOG.debug("Data cursor picked point %d", index)
		self.show(index)

	def hide(self) -> None:
		if self.annotation is not None:
			self.annotation.set_visible(False)
			self.ax.figure.canvas.draw_idle()

	def disconnect(self) -> None:
		"""Remove the pick callback and the annotation."""
		if self._cid is not None:
			self.ax.figure.canvas.mpl_disconnect(self._cid)
			self._cid = None
		if self.annotation is not None:
			self.annotation.remove()
			self.annotation = None
