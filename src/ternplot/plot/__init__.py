# src/ternplot/plot/__init__.py
"""Ternary frame construction, color linking and data layers on Matplotlib axes."""

from .datatip import DataCursor, format_datatip
from .handles import ColorLink, GridHandle, OutlineHandle, TickHandle, TitleHandle
from .ternary import TernaryAxes, ternary_axes

__all__ = [
	"TernaryAxes", "ternary_axes",
	"ColorLink", "OutlineHandle", "GridHandle", "TickHandle", "TitleHandle",
	"DataCursor", "format_datatip",
]
