# src/ternplot/geometry/__init__.py
"""
Ternary coordinate geometry: conversions and grid spacing.
"""

from importlib import import_module
from typing import TYPE_CHECKING

__all__ = [
	# coordinates
	"AXIS_NAMES", "HEIGHT",
	"identify_axis", "default_limits", "validate_limits",
	"normalize", "denormalize",
	"tern_to_cart", "tern_to_cart_abc", "cart_to_tern", "vertices",
	# spacing
	"grid_spacing", "tick_values", "format_tick",
]


def __getattr__(name: str):
	mod_of = {
		"AXIS_NAMES": "ternplot.geometry.coords",
		"HEIGHT": "ternplot.geometry.coords",
		"identify_axis": "ternplot.geometry.coords",
		"default_limits": "ternplot.geometry.coords",
		"validate_limits": "ternplot.geometry.coords",
		"normalize": "ternplot.geometry.coords",
		"denormalize": "ternplot.geometry.coords",
		"tern_to_cart": "ternplot.geometry.coords",
		"tern_to_cart_abc": "ternplot.geometry.coords",
		"cart_to_tern": "ternplot.geometry.coords",
		"vertices": "ternplot.geometry.coords",
		"grid_spacing": "ternplot.geometry.spacing",
		"tick_values": "ternplot.geometry.spacing",
		"format_tick": "ternplot.geometry.spacing",
	}
	if name in mod_of:
		mod = import_module(mod_of[name])
		return getattr(mod, name)
	raise AttributeError(f"module 'ternplot.geometry' has no attribute {name!r}")


if TYPE_CHECKING:
	from .coords import (
		AXIS_NAMES, HEIGHT, identify_axis, default_limits, validate_limits,
		normalize, denormalize, tern_to_cart, tern_to_cart_abc, cart_to_tern, vertices,
	)
	from .spacing import grid_spacing, tick_values, format_tick
