"""
ternplot: ternary (three-component simplex) plots on Matplotlib.

Top-level API keeps imports lazy (no Matplotlib import until first use):

    from ternplot import TernaryAxes
    tern = TernaryAxes({"titlelabels": ["SiO2", "CaO", "Al2O3"]})
    tern.scatter("A", [20, 40], "B", [30, 10], zdata=[1.0, 2.0])

    from ternplot import tern_to_cart
    x, y = tern_to_cart("A", 0.2, "B", 0.3)
"""

from importlib import import_module
from importlib.metadata import version, PackageNotFoundError as _PNF
from typing import TYPE_CHECKING

try:
	__version__ = version("ternplot")
except _PNF:
	__version__ = "0.0.0+local"

__all__ = [
	"__version__",
	# main facades
	"TernaryAxes", "ternary_axes", "TernarySettings", "load_settings", "configure_logging",
	# namespaces
	"imports", "config", "geometry", "logutil", "plot",
	# geometry convenience (lazy)
	"tern_to_cart", "tern_to_cart_abc", "cart_to_tern", "grid_spacing",
]

_PLOT_EXPORTS = {"TernaryAxes", "ternary_axes", "ColorLink", "DataCursor"}
_CONFIG_EXPORTS = {"TernarySettings", "load_settings", "ConfigError"}
_GEOMETRY_EXPORTS = {"tern_to_cart", "tern_to_cart_abc", "cart_to_tern", "grid_spacing", "identify_axis"}
_NAMESPACES = {"imports", "config", "geometry", "logutil", "plot"}


def __getattr__(name: str):
	if name == "configure_logging":
		return import_module("ternplot.logutil").configure_logging
	if name in _NAMESPACES:
		return import_module(f"ternplot.{name}")
	if name in _PLOT_EXPORTS:
		return getattr(import_module("ternplot.plot"), name)
	if name in _CONFIG_EXPORTS:
		return getattr(import_module("ternplot.config"), name)
	if name in _GEOMETRY_EXPORTS:
		return getattr(import_module("ternplot.geometry"), name)

	raise AttributeError(f"module 'ternplot' has no attribute {name!r}")


# Help type-checkers without eager imports
if TYPE_CHECKING:
	from . import imports, config, geometry, logutil, plot  # noqa: F401
	from .logutil import configure_logging  # noqa: F401
	from .config import TernarySettings, load_settings, ConfigError  # noqa: F401
	from .geometry import tern_to_cart, tern_to_cart_abc, cart_to_tern, grid_spacing, identify_axis  # noqa: F401
	from .plot import TernaryAxes, ternary_axes, ColorLink, DataCursor  # noqa: F401
