from __future__ import annotations

import ast
import configparser
import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..logutil import get_logger

LOG = get_logger(__name__)

PathLike = Union[str, Path]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------
class ConfigError(Exception):
	"""Raised when a settings file cannot be read or has an invalid shape."""


# ---------------------------------------------------------------------------
# Value parsing
# ---------------------------------------------------------------------------
def parse_value(raw: str) -> Any:
	"""
	Parse a raw INI string into a typed Python value.

	The parser attempts, in order:
	  1) ``ast.literal_eval`` for safe Python literals (numbers, strings, lists, booleans, None).
	  2) Common textual None markers: ``none``, ``null``.
	  3) Booleans: ``true/yes/on`` → ``True``, ``false/no/off`` → ``False``.
	  4) Otherwise the stripped string (so ``tick_fmt = %%2.0f`` stays text).

	Tuples are normalized to lists, nested ones included, so ``wlimits =
	(0, 0, 0), (100, 100, 100)`` reads as a ``2x3`` nested list.

	:param raw: Source text as read from ConfigParser.
	:return: Best-effort typed value.
	"""
	s = raw.strip()

	try:
		return _tuples_to_lists(ast.literal_eval(s))
	except (ValueError, SyntaxError):
		pass

	lower = s.lower()
	if lower in {"none", "null"}:
		return None
	if lower in {"true", "yes", "on"}:
		return True
	if lower in {"false", "no", "off"}:
		return False
	return s


def _tuples_to_lists(value: Any) -> Any:
	if isinstance(value, (tuple, list)):
		return [_tuples_to_lists(v) for v in value]
	return value


# ---------------------------------------------------------------------------
# File loading
# ---------------------------------------------------------------------------
def _read_ini_section(path: Path, section: str) -> Dict[str, Any]:
	# percent signs are common in tick formats, so interpolation stays off
	cp = configparser.ConfigParser(interpolation=None)
	try:
		with path.open("r", encoding="utf-8") as fh:
			cp.read_file(fh)
	except (OSError, configparser.Error) as exc:
		raise ConfigError(f"Failed reading '{path}': {exc}") from exc

	sections = {s.lower(): s for s in cp.sections()}
	if section.lower() not in sections:
		raise ConfigError(f"Section [{section}] not found in '{path}'.")
	return {
		key.lower(): parse_value(value)
		for key, value in cp.items(sections[section.lower()])
	}


def _read_json_section(path: Path, section: Optional[str]) -> Dict[str, Any]:
	try:
		with path.open("r", encoding="utf-8") as fh:
			obj = json.load(fh)
	except (OSError, json.JSONDecodeError) as exc:
		raise ConfigError(f"Failed reading JSON '{path}': {exc}") from exc

	if not isinstance(obj, dict):
		raise ConfigError(f"Top-level JSON in '{path}' must be an object.")

	lowered = {str(k).lower(): v for k, v in obj.items()}
	if section is not None and section.lower() in lowered and isinstance(lowered[section.lower()], dict):
		body = lowered[section.lower()]
	else:
		# flat file: settings at the top level
		body = obj
	return {str(k).lower(): v for k, v in body.items()}


def load_options(path: PathLike, *, section: Optional[str] = "ternary") -> Dict[str, Any]:
	"""
	Read ternary options from a JSON or INI file.

	JSON files may either hold the options at the top level or nest them in an
	object named ``section``. INI files must contain ``[section]``.

	:param path: ``.json`` or ``.ini``/``.cfg`` file.
	:param section: Section holding the options.
	:return: Mapping of lowercased option names to parsed values.
	:raises ConfigError: On missing files, unknown suffixes or parse errors.
	"""
	p = Path(path)
	if not p.exists():
		raise ConfigError(f"Missing settings file: {p}")

	suffix = p.suffix.lower()
	if suffix == ".json":
		data = _read_json_section(p, section)
	elif suffix in {".ini", ".cfg", ".conf"}:
		data = _read_ini_section(p, section or "ternary")
	else:
		raise ConfigError(f"Unsupported settings file type '{suffix}' (use .json or .ini).")

	LOG.info("Loaded ternary settings: %s", p.resolve())
	return data


__all__ = [
	"ConfigError",
	"parse_value",
	"load_options",
]
