# src/ternplot/imports/lazyproxy.py
"""Deferred imports for the numerical and plotting stack."""

from __future__ import annotations

import importlib
from types import ModuleType
from typing import Any, List, Optional

__all__ = ["LazyModule", "lazy_module"]


class LazyModule:
	"""
	Stand-in for a module that is imported when first used.

	``import ternplot`` therefore neither pulls in NumPy nor selects a
	Matplotlib backend. A missing dependency surfaces as an ``ImportError``
	naming the package to install.

	:param name: Dotted module name, e.g. ``"matplotlib.tri"``.
	:param install: Install command quoted in the error message.
	:param reason: What ternplot needs the module for.
	"""

	def __init__(self, name: str, *, install: Optional[str] = None, reason: Optional[str] = None) -> None:
		self._name = name
		self._install = install
		self._reason = reason
		self._mod: Optional[ModuleType] = None

	@property
	def loaded(self) -> bool:
		"""``True`` once the target module has been imported."""
		return self._mod is not None

	def _missing_message(self) -> str:
		message = f"ternplot requires '{self._name}'"
		if self._reason:
			message += f" for {self._reason}"
		message += ", but it could not be imported."
		if self._install:
			message += f" Try: {self._install}"
		return message

	def _load(self) -> ModuleType:
		if self._mod is not None:
			return self._mod
		try:
			self._mod = importlib.import_module(self._name)
		except ImportError as exc:
			raise ImportError(self._missing_message()) from exc
		return self._mod

	def _submodule(self, item: str) -> ModuleType:
		# matplotlib.colors and friends only become attributes once imported
		dotted = f"{self._name}.{item}"
		try:
			return importlib.import_module(dotted)
		except ImportError as exc:
			raise AttributeError(f"{self._name!r} has neither an attribute nor a submodule {item!r}") from exc

	def __getattr__(self, item: str) -> Any:
		if item.startswith("__"):
			raise AttributeError(item)
		mod = self._load()
		if hasattr(mod, item):
			return getattr(mod, item)
		submod = self._submodule(item)
		setattr(mod, item, submod)
		return submod

	def __dir__(self) -> List[str]:
		return dir(self._load())

	def __repr__(self) -> str:
		if self._mod is None:
			return f"<LazyModule {self._name!r} (pending)>"
		return f"<LazyModule {self._name!r} -> {self._mod!r}>"


def lazy_module(name: str, *, install: Optional[str] = None, reason: Optional[str] = None) -> LazyModule:
	"""Return a :class:`LazyModule` for ``name``."""
	return LazyModule(name, install=install, reason=reason)
