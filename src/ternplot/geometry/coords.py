# src/ternplot/geometry/coords.py
"""
Conversions between ternary (A/B/C) and Cartesian (X/Y) coordinates.

The triangle has unit side length with the vertices

* A = 1 at the top ``(0.5, sqrt(3)/2)``,
* B = 1 at the bottom left ``(0, 0)``,
* C = 1 at the bottom right ``(1, 0)``.

Ternary values in *plot units* lie in ``0..1`` and sum to one. Values in *data
units* are mapped to plot units through the per-axis limits ``wlimits``, a
``2x3`` array whose first row holds the minima and second row the maxima of the
A, B and C axes.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple, Union

from ..imports import numpy as np  # type: ignore

AXIS_NAMES: Tuple[str, str, str] = ("A", "B", "C")
HEIGHT = math.sqrt(3.0) / 2.0

_ALIASES = {
	"a": 0, "1": 0, "left": 0,
	"b": 1, "2": 1, "bottom": 1,
	"c": 2, "3": 2, "right": 2,
}

AxisName = Union[str, int]


def identify_axis(name: AxisName) -> int:
	"""
	Resolve a ternary axis identifier to its index.

	Accepts ``"A"/"B"/"C"`` (any case), the 1-based strings ``"1"/"2"/"3"``, the
	edge names ``"left"/"bottom"/"right"`` and integer indices ``0..2``.

	:param name: Axis identifier.
	:return: Index ``0``, ``1`` or ``2``.
	:raises ValueError: If ``name`` does not denote a ternary axis.
	"""
	if isinstance(name, bool):
		raise ValueError(f"Not a ternary axis: {name!r}")
	if isinstance(name, (int, np.integer)):
		if 0 <= int(name) <= 2:
			return int(name)
		raise ValueError(f"Ternary axis index must be 0, 1 or 2; got {name}.")
	key = str(name).strip().lower()
	if key in _ALIASES:
		return _ALIASES[key]
	raise ValueError(f"Not a ternary axis: {name!r}")


def default_limits() -> "np.ndarray":
	"""Return the default ``2x3`` limits: every axis spans ``0..100``."""
	return np.array([[0.0, 0.0, 0.0], [100.0, 100.0, 100.0]])


def validate_limits(wlimits: Sequence[Sequence[float]]) -> "np.ndarray":
	"""
	Coerce ``wlimits`` to a float ``2x3`` array.

	:raises ValueError: On a wrong shape, non-finite entries or a zero-width axis.
	"""
	arr = np.asarray(wlimits, dtype=float)
	if arr.shape != (2, 3):
		raise ValueError(f"wlimits must have shape (2, 3); got {arr.shape}.")
	if not np.all(np.isfinite(arr)):
		raise ValueError("wlimits must contain finite values only.")
	span = arr[1] - arr[0]
	if np.any(span == 0):
		bad = [AXIS_NAMES[i] for i in np.flatnonzero(span == 0)]
		raise ValueError(f"wlimits span is zero on axis {', '.join(bad)}.")
	return arr


def normalize(values, wlimits, axis: AxisName) -> "np.ndarray":
	"""Map data-unit ``values`` of ``axis`` to ``0..1`` plot units."""
	idx = identify_axis(axis)
	lim = validate_limits(wlimits)
	return (np.asarray(values, dtype=float) - lim[0, idx]) / (lim[1, idx] - lim[0, idx])


def denormalize(fractions, wlimits, axis: AxisName) -> "np.ndarray":
	"""Map ``0..1`` plot units of ``axis`` back to data units."""
	idx = identify_axis(axis)
	lim = validate_limits(wlimits)
	return lim[0, idx] + np.asarray(fractions, dtype=float) * (lim[1, idx] - lim[0, idx])


def _ac_to_xy(a, c) -> Tuple["np.ndarray", "np.ndarray"]:
	return c + 0.5 * a, HEIGHT * a


def tern_to_cart(idx_e: AxisName, e, idx_f: AxisName, f) -> Tuple["np.ndarray", "np.ndarray"]:
	"""
	Convert two plot-unit ternary components to Cartesian coordinates.

	The third component is ``1 - e - f``.

	:param idx_e: Axis of ``e``.
	:param e: Plot-unit values on that axis.
	:param idx_f: Axis of ``f``; must differ from ``idx_e``.
	:param f: Plot-unit values on that axis.
	:return: ``(x, y)`` arrays shaped like the inputs.
	:raises ValueError: If both indices name the same axis or the shapes differ.
	"""
	ie, jf = identify_axis(idx_e), identify_axis(idx_f)
	if ie == jf:
		raise ValueError(f"Two distinct ternary axes are required; got {AXIS_NAMES[ie]} twice.")
	e_arr = np.asarray(e, dtype=float)
	f_arr = np.asarray(f, dtype=float)
	if e_arr.shape != f_arr.shape:
		raise ValueError(f"Ternary components must share a shape: {e_arr.shape} vs {f_arr.shape}.")

	parts = [None, None, None]
	parts[ie] = e_arr
	parts[jf] = f_arr
	parts[3 - ie - jf] = 1.0 - e_arr - f_arr
	return _ac_to_xy(parts[0], parts[2])


def tern_to_cart_abc(a, b, c) -> Tuple["np.ndarray", "np.ndarray"]:
	"""
	Convert three ternary components to Cartesian coordinates.

	Components are closed to a unit sum first, so any positive scale works
	(percentages, molar amounts, ...).

	:raises ValueError: On mismatched shapes or a zero component sum.
	"""
	arrs = [np.asarray(v, dtype=float) for v in (a, b, c)]
	if not (arrs[0].shape == arrs[1].shape == arrs[2].shape):
		raise ValueError("a, b and c must share identical shapes.")
	total = arrs[0] + arrs[1] + arrs[2]
	if np.any(total == 0):
		raise ValueError("Ternary components sum to zero; cannot close composition.")
	return _ac_to_xy(arrs[0] / total, arrs[2] / total)


def cart_to_tern(x, y) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
	"""Inverse of :func:`tern_to_cart`: return plot-unit ``(a, b, c)``."""
	x_arr = np.asarray(x, dtype=float)
	y_arr = np.asarray(y, dtype=float)
	if x_arr.shape != y_arr.shape:
		raise ValueError(f"x and y must share a shape: {x_arr.shape} vs {y_arr.shape}.")
	a = y_arr / HEIGHT
	c = x_arr - 0.5 * a
	b = 1.0 - a - c
	return a, b, c


def vertices() -> "np.ndarray":
	"""Cartesian corners of the triangle in A, B, C order."""
	return np.array([[0.5, HEIGHT], [0.0, 0.0], [1.0, 0.0]])
