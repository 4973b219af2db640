# src/ternplot/imports/__init__.py

from __future__ import annotations

from .lazyproxy import LazyModule, lazy_module

# Convenience lazy proxies for the plotting stack
np = numpy = lazy_module("numpy", install="pip install numpy", reason="numerical arrays")
mpl = matplotlib = lazy_module("matplotlib", install="pip install matplotlib", reason="plotting")
plt = pyplot = lazy_module("matplotlib.pyplot", install="pip install matplotlib", reason="figure management")
mtri = tri = lazy_module("matplotlib.tri", install="pip install matplotlib", reason="triangulated surfaces")

__all__ = [
	"LazyModule", "lazy_module",
	# arrays
	"np", "numpy",
	# plotting
	"mpl", "matplotlib", "plt", "pyplot", "mtri", "tri",
]
