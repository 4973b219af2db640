# src/ternplot/plot/handles.py
"""Artist groups of a ternary plot and color linking between them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, List, Optional, Tuple

from ..imports import matplotlib as mpl  # type: ignore
from ..imports import numpy as np  # type: ignore
from ..logutil import get_logger

if TYPE_CHECKING:  # pragma: no cover - only for static typing
	from matplotlib.artist import Artist
	from matplotlib.lines import Line2D
	from matplotlib.text import Text

LOG = get_logger(__name__)


@dataclass
class OutlineHandle:
	"""The three triangle edges; ``lines[i]`` borders the labels of axis ``i``."""

	lines: List["Line2D"] = field(default_factory=list)


@dataclass
class GridHandle:
	"""Gridlines per axis plus the spacing inputs they were built from."""

	usegridspace: bool = False
	gridspaceunit: float = 6
	wlimits: Any = None
	grid_pnts: List[Any] = field(default_factory=list)
	lines: List[List["Line2D"]] = field(default_factory=lambda: [[], [], []])


@dataclass
class TickHandle:
	ticklinelength: float = 0.08
	tick_fmt: str = "%2.0f"
	shift: Any = None
	text: List[List["Text"]] = field(default_factory=lambda: [[], [], []])
	values: List[Any] = field(default_factory=list)


@dataclass
class TitleHandle:
	titlelabels: List[str] = field(default_factory=list)
	shift: Any = None
	rotation: List[float] = field(default_factory=list)
	text: List["Text"] = field(default_factory=list)


class ColorLink:
	"""
	Keep the color of several line/text artists in sync.

	Calling :meth:`set_color` recolors every member. Changing one member through
	``artist.set(color=...)`` (or ``plt.setp``) is picked up by the artist's
	property-change callback and pushed to the others. Plain ``set_color`` on a
	member does not notify Matplotlib callbacks, so use the link or ``set``.
	"""

	def __init__(self, artists: Iterable["Artist"], color: Optional[Any] = None) -> None:
		self.artists: List["Artist"] = list(artists)
		self._color: Optional[Any] = None
		self._syncing = False
		self._cids: List[Tuple["Artist", int]] = [
			(artist, artist.add_callback(self._on_change)) for artist in self.artists
		]
		if color is None and self.artists:
			color = self.artists[0].get_color()
		if color is not None:
			self.set_color(color)

	def __len__(self) -> int:
		return len(self.artists)

	def __repr__(self) -> str:
		return f"{self.__class__.__name__}(artists={len(self.artists)}, color={self._color!r})"

	@property
	def color(self) -> Optional[Any]:
		return self._color

	def set_color(self, color: Any) -> None:
		"""Apply ``color`` to every linked artist."""
		mpl.colors.to_rgba(color)  # raises ValueError on unknown colors
		self._syncing = True
		try:
			for artist in self.artists:
				artist.set_color(color)
		finally:
			self._syncing = False
		self._color = color

	def _on_change(self, artist: "Artist") -> None:
		if self._syncing:
			return
		current = artist.get_color()
		if self._color is not None and mpl.colors.same_color(current, self._color):
			return
		LOG.debug("Color link update from %r to %r", artist, current)
		self.set_color(current)

	def remove(self) -> None:
		"""Stop synchronizing; the artists keep their current colors."""
		for artist, cid in self._cids:
			artist.remove_callback(cid)
		self._cids.clear()


def as_shift_array(value: Any) -> "np.ndarray":
	"""Coerce a ``2x3`` shift specification to a float array."""
	arr = np.asarray(value, dtype=float)
	if arr.shape != (2, 3):
		raise ValueError(f"Shift arrays must have shape (2, 3); got {arr.shape}.")
	return arr
