# src/ternplot/logutil.py

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal, Optional, Union

PathLike = Union[str, Path]

ROOT_LOGGER = "ternplot"

ConsoleLevelName = Literal[
	"CRITICAL",
	"ERROR",
	"WARNING",
	"INFO",
	"DEBUG",
	"NOTSET",
]

LevelLike = Union[int, ConsoleLevelName]


def _normalize_level(value: LevelLike, *, param_name: str) -> int:
	if isinstance(value, int):
		return value

	resolved = logging.getLevelName(str(value).upper())
	if isinstance(resolved, int):
		return resolved

	raise ValueError(f"Unknown logging level name for {param_name}: {value}")


def _package_root() -> logging.Logger:
	"""Return the ``ternplot`` logger, attaching the console handler on first use."""
	root = logging.getLogger(ROOT_LOGGER)
	if not root.handlers:
		handler = logging.StreamHandler()
		handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
		root.addHandler(handler)
		root.setLevel(logging.INFO)
		root.propagate = False
	return root


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
	"""
	Return a logger living under the shared ``ternplot`` hierarchy.

	Module loggers (``ternplot.plot.ternary`` etc.) carry no handlers of their own;
	records propagate to the package logger which owns the console handler.

	:param name: Logger name, usually ``__name__``.
	:return: The logger.
	"""
	root = _package_root()
	if name == ROOT_LOGGER:
		return root
	if not name.startswith(ROOT_LOGGER + "."):
		name = f"{ROOT_LOGGER}.{name}"
	return logging.getLogger(name)


def configure_logging(
		*,
		console_level: LevelLike = "INFO",
		file_path: Optional[PathLike] = None,
		file_level: Optional[LevelLike] = None,
		mode: str = "w",
		rotate: bool = False,
		max_bytes: int = 1_000_000,
		backup_count: int = 2,
		formatter: Optional[logging.Formatter] = None,
		capture_warnings: bool = False,
		propagate: bool = False
) -> logging.Logger:
	"""
	Configure the package logger used by every ternplot module.

	:param console_level: Console handler level.
	:param file_path: Optional log file path to add a file handler.
	:param file_level: File handler level (int or level name,
					   defaults to console-level if None).
	:param mode: 'w' for overwriting or 'a' for appending.
	:param rotate: Use RotatingFileHandler when True.
	:param max_bytes: Rotation threshold per file.
	:param backup_count: Number of rotated backups.
	:param formatter: Custom formatter; default includes timestamp.
	:param capture_warnings: Route :mod:`warnings` (e.g. Matplotlib's) through logging.
	:param propagate: Whether to propagate to the root logger.
	:return: The configured package logger.
	"""
	console_value = _normalize_level(console_level, param_name="console_level")
	file_value = (
		_normalize_level(file_level, param_name="file_level")
		if file_level is not None
		else console_value
	)

	log = _package_root()
	log.setLevel(min(console_value, file_value) if file_path else console_value)
	log.propagate = propagate

	fmt = formatter or logging.Formatter(
		"%(asctime)s [%(levelname)s] %(name)s: %(message)s"
	)

	for handler in log.handlers:
		# FileHandler subclasses StreamHandler; only restyle the console ones here
		if type(handler) is logging.StreamHandler:
			handler.setLevel(console_value)
			handler.setFormatter(fmt)

	if file_path:
		path = Path(file_path)
		path.parent.mkdir(parents=True, exist_ok=True)
		already = any(
			getattr(handler, "baseFilename", None) == os.path.abspath(path)
			for handler in log.handlers
		)
		if not already:
			file_handler: logging.Handler
			if rotate:
				file_handler = RotatingFileHandler(
					path,
					mode=mode,
					maxBytes=max_bytes,
					backupCount=backup_count,
					encoding="utf-8"
				)
			else:
				file_handler = logging.FileHandler(path, mode=mode, encoding="utf-8")
			file_handler.setLevel(file_value)
			file_handler.setFormatter(fmt)
			log.addHandler(file_handler)

	if capture_warnings:
		logging.captureWarnings(True)
		py_warnings = logging.getLogger("py.warnings")
		for handler in log.handlers:
			if handler not in py_warnings.handlers:
				py_warnings.addHandler(handler)

	return log
