# src/ternplot/geometry/spacing.py
"""Gridline positions and tick text for the three ternary axes."""

from __future__ import annotations

from typing import List, Sequence

from ..imports import numpy as np  # type: ignore
from ..logutil import get_logger
from .coords import AXIS_NAMES, validate_limits

LOG = get_logger(__name__)

DEFAULT_GRID_COUNT = 6
_EPS = 1e-9


def _increment_points(step: float) -> "np.ndarray":
	"""Return ``0, step, 2*step, ...`` up to and including ``1`` (within rounding)."""
	if not np.isfinite(step) or step <= 0:
		return np.array([0.0])
	count = int(np.floor(1.0 / step + _EPS))
	return np.arange(count + 1, dtype=float) * step


def grid_spacing(
		wlimits: Sequence[Sequence[float]],
		usegridspace: bool = False,
		gridspaceunit: float = DEFAULT_GRID_COUNT
) -> List["np.ndarray"]:
	"""
	Compute gridline positions (plot units ``0..1``) for each ternary axis.

	With ``usegridspace`` the gridlines are ``gridspaceunit`` data units apart, so
	an axis spanning ``0..100`` with a unit of ``10`` gets lines at ``0, 0.1, ...
	1.0``. An axis where this yields a single point (unit wider than the axis, or
	non-positive) falls back to ``linspace(0, 1, 6)`` and a warning is logged.

	Without ``usegridspace`` every axis gets ``linspace(0, 1, gridspaceunit)``.

	:param wlimits: ``2x3`` axis limits.
	:param usegridspace: Treat ``gridspaceunit`` as an increment instead of a count.
	:param gridspaceunit: Increment in data units, or number of gridlines.
	:return: List with one position array per axis (A, B, C).
	:raises ValueError: If ``gridspaceunit`` is not a usable count in count mode.
	"""
	lim = validate_limits(wlimits)
	points: List["np.ndarray"] = []

	for i in range(3):
		if usegridspace:
			step = float(gridspaceunit) / (lim[1, i] - lim[0, i])
			values = _increment_points(step)
			if values.size > 1:
				points.append(values)
				continue
			LOG.warning(
				"gridspaceunit %s failed as increment on axis %s, reverting to linspace",
				gridspaceunit, AXIS_NAMES[i]
			)
			points.append(np.linspace(0.0, 1.0, DEFAULT_GRID_COUNT))
			continue

		count = int(gridspaceunit)
		if count < 2:
			raise ValueError(f"gridspaceunit must be >= 2 when used as a line count; got {gridspaceunit}.")
		points.append(np.linspace(0.0, 1.0, count))

	return points


def tick_values(grid_pnts: Sequence[Sequence[float]], wlimits: Sequence[Sequence[float]]) -> List["np.ndarray"]:
	"""Convert per-axis grid positions back to data units for labeling."""
	lim = validate_limits(wlimits)
	return [
		lim[0, i] + np.asarray(grid_pnts[i], dtype=float) * (lim[1, i] - lim[0, i])
		for i in range(3)
	]


def format_tick(value: float, fmt: str = "%2.0f") -> str:
	"""
	Render a tick value with a printf-style format.

	``str.format`` specs (``"{:.1f}"``) are accepted as well.
	"""
	if "{" in fmt:
		text = fmt.format(value)
	else:
		text = fmt % value
	return text.strip()
