# src/ternplot/config/settings.py
"""General ternary settings with defaults, overrides and file loading."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from ..logutil import get_logger
from .loader import load_options
from .schema import SETTINGS_SCHEMA

LOG = get_logger(__name__)

PathLike = Union[str, Path]
Options = Union[Mapping[str, Any], Sequence[Any], None]


def _default_wlimits() -> List[List[float]]:
	return [[0.0, 0.0, 0.0], [100.0, 100.0, 100.0]]


@dataclass
class TernarySettings:
	"""
	General options of a ternary plot.

	Shift arrays are ``2x3``: row 0 holds X offsets, row 1 Y offsets, one column
	per ternary axis (A, B, C).
	"""

	wlimits: Any = field(default_factory=_default_wlimits)
	usegridspace: bool = False
	gridspaceunit: float = 6
	ticklinelength: float = 0.08
	tick_fmt: str = "%2.0f"
	titlelabels: List[str] = field(default_factory=lambda: ["Variable 1", "Variable 2", "Variable 3"])
	titlerotation: List[float] = field(default_factory=lambda: [60.0, 0.0, -60.0])
	ternarypos: List[float] = field(default_factory=lambda: [0.12, 0.08, 0.7, 0.8])
	link_color: List[str] = field(default_factory=lambda: ["tick", "title", "outline"])
	titleshift: Any = field(default_factory=lambda: [[-0.15, 0.0, 0.15], [0.075, -0.11, 0.075]])
	tickshift: Any = field(default_factory=lambda: [[-0.03, -0.03, 0.0], [0.0, 0.0, 0.0]])

	@staticmethod
	def _as_pairs(options: Options) -> List[Tuple[str, Any]]:
		"""Accept a mapping or a flat ``[name, value, name, value, ...]`` sequence."""
		if options is None:
			return []
		if isinstance(options, Mapping):
			return [(str(k), v) for k, v in options.items()]
		items = list(options)
		if len(items) % 2:
			raise ValueError("Option list must hold name/value pairs.")
		return [(str(items[i]), items[i + 1]) for i in range(0, len(items), 2)]

	@classmethod
	def from_options(cls, options: Options = None, **overrides: Any) -> "TernarySettings":
		"""
		Overlay user options on the defaults.

		Unknown names are logged and ignored. Enabling ``usegridspace`` without
		passing ``gridspaceunit`` logs a warning, since the default unit is a
		line count rather than an increment.

		:param options: Mapping or flat name/value sequence.
		:param overrides: Extra options as keyword arguments (win over ``options``).
		:return: New settings instance.
		:raises ValueError: If a known option has an invalid value.
		"""
		pairs = cls._as_pairs(options) + list(overrides.items())
		settings = cls()
		names = {key.lower() for key, _ in pairs}
		if "usegridspace" in names and "gridspaceunit" not in names:
			LOG.warning('Must specify a grid spacing increment with "usegridspace" activated!')

		for key, value in pairs:
			settings.update(key, value)
		return settings

	def update(self, key: str, value: Any) -> bool:
		"""
		Set one option after validation.

		:return: ``True`` when applied, ``False`` when the name is unknown.
		:raises ValueError: If the value fails validation.
		"""
		name = key.lower()
		spec = SETTINGS_SCHEMA.get(name)
		if spec is None:
			LOG.warning("Field %s was not valid. Entry ignored!", key)
			return False
		spec.check(name, value)
		setattr(self, name, copy.deepcopy(value))
		return True

	@classmethod
	def from_file(cls, path: PathLike, *, section: Optional[str] = "ternary", **overrides: Any) -> "TernarySettings":
		"""Build settings from a JSON/INI file, then apply keyword ``overrides``."""
		return cls.from_options(load_options(path, section=section), **overrides)

	def to_dict(self) -> Dict[str, Any]:
		return {f.name: copy.deepcopy(getattr(self, f.name)) for f in fields(self)}


def load_settings(path: PathLike, *, section: Optional[str] = "ternary", **overrides: Any) -> TernarySettings:
	"""
	Convenience wrapper around :meth:`TernarySettings.from_file`.

	:param path: JSON or INI settings file.
	:param section: Section (INI) or nested object (JSON) holding the options.
	:param overrides: Options applied after the file contents.
	:return: Validated settings.
	:raises ConfigError: If the file cannot be read.
	:raises ValueError: If an option value is invalid.
	"""
	return TernarySettings.from_file(path, section=section, **overrides)
