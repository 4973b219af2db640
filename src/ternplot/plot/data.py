# src/ternplot/plot/data.py

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from ..geometry.coords import identify_axis, normalize, tern_to_cart
from ..imports import mtri  # type: ignore
from ..imports import numpy as np  # type: ignore
from ..logutil import get_logger
from .base import BaseTernary, merge_style
from .datatip import DataCursor

if TYPE_CHECKING:  # pragma: no cover - import for typing only
	from matplotlib.collections import PathCollection
	from matplotlib.colorbar import Colorbar
	from matplotlib.contour import QuadContourSet
	from matplotlib.lines import Line2D

LOG = get_logger(__name__)

ColorbarSpec = Union[bool, str, Mapping[str, Any], None]

COLORBAR_STYLE = {"position": [0.83, 0.12, 0.04, 0.7], "fontweight": "bold"}

# scatter keywords that fix the marker color and exclude ``c``
FIXED_COLOR_KEYS = ("c", "color", "facecolor", "facecolors")


class DataPlots(BaseTernary):
	"""Data layers drawn in ternary coordinates on top of the frame."""

	datacursors: List[DataCursor]

	def to_cartesian(self, name_e: Any, e: Sequence[float], name_f: Any, f: Sequence[float]) -> Tuple["np.ndarray", "np.ndarray"]:
		"""
		Convert data-unit values on two ternary axes to Cartesian coordinates.

		:param name_e: Axis of ``e`` (``"A"``, ``"B"``, ``"C"``...).
		:param e: Values in data units.
		:param name_f: Axis of ``f``; must differ from ``name_e``.
		:param f: Values in data units.
		:return: ``(x, y)`` arrays.
		:raises ValueError: If the sizes of ``e`` and ``f`` differ or the axes coincide.
		"""
		e_arr = np.asarray(e, dtype=float)
		f_arr = np.asarray(f, dtype=float)
		if e_arr.shape != f_arr.shape:
			raise ValueError(f"E/F inputs must be the same size: {e_arr.shape} vs {f_arr.shape}.")
		idx_e, idx_f = identify_axis(name_e), identify_axis(name_f)
		e_norm = normalize(e_arr, self.wlimits, idx_e)
		f_norm = normalize(f_arr, self.wlimits, idx_f)
		return tern_to_cart(idx_e, e_norm, idx_f, f_norm)

	def _register(self, artist: Any) -> None:
		self.dataplots.append(artist)
		self.finalize()

	def _remove_colorbars(self) -> None:
		for cbar in self.colorbars:
			cbar.remove()
		self.colorbars.clear()

	def _colorbar(self, mappable: Any, colorbar: ColorbarSpec) -> Optional["Colorbar"]:
		"""Create the colorbar of ``mappable``, replacing any previous one."""
		if colorbar is None or colorbar is False or (isinstance(colorbar, str) and colorbar.lower() == "none"):
			return None
		if mappable.get_array() is None:
			LOG.debug("Skipping colorbar: %r carries no color values", mappable)
			return None
		self._remove_colorbars()
		overrides: Optional[Mapping[str, Any]] = colorbar if isinstance(colorbar, Mapping) else None
		params: Dict[str, Any] = merge_style(COLORBAR_STYLE, overrides)
		position = params.pop("position", None)
		fontweight = params.pop("fontweight", None)
		if position is not None:
			cax = self.fig.add_axes(position)
			cbar = self.fig.colorbar(mappable, cax=cax, **params)
		else:
			cbar = self.fig.colorbar(mappable, ax=self.ax, **params)
		if fontweight is not None:
			for label in cbar.ax.get_yticklabels():
				label.set_fontweight(fontweight)
		self.colorbars.append(cbar)
		return cbar

	def scatter(
			self,
			name_e: Any,
			e: Sequence[float],
			name_f: Any,
			f: Sequence[float],
			zdata: Optional[Sequence[float]] = None,
			colorbar: ColorbarSpec = True,
			**kwargs: Any
	) -> Tuple["PathCollection", Optional["Colorbar"]]:
		"""
		Scatter points colored by ``zdata`` at ternary positions.

		:param name_e: Axis of ``e``.
		:param e: Values in data units.
		:param name_f: Axis of ``f``.
		:param f: Values in data units.
		:param zdata: Color values; zeros when omitted. Without ``zdata`` a fixed
			``color``/``facecolor`` keyword takes over the marker color.
		:param colorbar: ``True`` for the default colorbar, ``False``/``"none"`` for
			none, or a mapping of colorbar options (``position`` as a figure
			rectangle, ``fontweight``, and :meth:`Figure.colorbar` keywords).
			A new colorbar replaces the previous one.
		:param kwargs: Keyword arguments forwarded to :meth:`matplotlib.axes.Axes.scatter`.
		:return: ``(scatter, colorbar)``; the colorbar is ``None`` when disabled.
		:raises ValueError: On mismatched sizes of ``e``, ``f`` and ``zdata``.
		"""
		e_arr = np.asarray(e, dtype=float)
		if zdata is None:
			z_arr = np.zeros(e_arr.shape)
		else:
			z_arr = np.asarray(zdata, dtype=float)
			if z_arr.shape != e_arr.shape:
				raise ValueError(f"E/F and Z inputs must be the same size: {e_arr.shape} vs {z_arr.shape}.")
		x, y = self.to_cartesian(name_e, e_arr, name_f, f)

		defaults: Dict[str, Any] = {"s": 40, "picker": True, "zorder": 4}
		if zdata is not None or not any(key in kwargs for key in FIXED_COLOR_KEYS):
			defaults["c"] = z_arr.ravel()
		params = merge_style(defaults, kwargs)
		collection = self.ax.scatter(x.ravel(), y.ravel(), **params)
		cbar = self._colorbar(collection, colorbar)

		cursor = DataCursor(self.ax, collection, z_arr, self.wlimits, self.title.titlelabels)
		self.datacursors.append(cursor)
		self._register(collection)
		LOG.debug("Added ternary scatter with %d points", x.size)
		return collection, cbar

	def plot(self, name_e: Any, e: Sequence[float], name_f: Any, f: Sequence[float], **kwargs: Any) -> "Line2D":
		"""
		Draw a polyline through ternary positions.

		:param kwargs: Keyword arguments forwarded to :meth:`matplotlib.axes.Axes.plot`.
		:return: The line.
		"""
		x, y = self.to_cartesian(name_e, e, name_f, f)
		params = merge_style({"zorder": 4}, kwargs)
		(line,) = self.ax.plot(x.ravel(), y.ravel(), **params)
		self._register(line)
		return line

	def surface(
			self,
			name_e: Any,
			e: Sequence[float],
			name_f: Any,
			f: Sequence[float],
			zdata: Sequence[float],
			*,
			levels: Union[int, Sequence[float]] = 10,
			colorbar: ColorbarSpec = True,
			**kwargs: Any
	) -> Tuple[Any, Optional["Colorbar"]]:
		"""
		Fill a triangulated contour map of ``zdata`` over scattered ternary points.

		:param levels: Number of contour levels or explicit boundaries.
		:param colorbar: As for :meth:`scatter`.
		:param kwargs: Keyword arguments forwarded to :meth:`matplotlib.axes.Axes.tricontourf`.
		:return: ``(contour_set, colorbar)``.
		:raises ValueError: On mismatched sizes or fewer than three points.
		"""
		z_arr = np.asarray(zdata, dtype=float)
		if z_arr.shape != np.shape(e):
			raise ValueError(f"E/F and Z inputs must be the same size: {np.shape(e)} vs {z_arr.shape}.")
		x, y = self.to_cartesian(name_e, e, name_f, f)
		if x.size < 3:
			raise ValueError("A surface needs at least three points.")

		triangulation = mtri.Triangulation(x.ravel(), y.ravel())
		params = merge_style({"levels": levels, "zorder": 0}, kwargs)
		contours = self.ax.tricontourf(triangulation, z_arr.ravel(), **params)
		cbar = self._colorbar(contours, colorbar)
		self._register(contours)
		return contours, cbar

	def clear_data(self) -> None:
		"""Remove every data layer, data cursor and colorbar, keeping the frame."""
		for cursor in self.datacursors:
			cursor.disconnect()
		self.datacursors.clear()
		self._remove_colorbars()
		for artist in self.dataplots:
			artist.remove()
		self.dataplots.clear()
		self.fig.canvas.draw_idle()
