"""
Utility helpers for Docwright: enumerations, unit conversion and logging.
"""

from .units import UnitsConverter, format_number
from .logging_setup import setup_logging
from .enums import (
    Alignment,
    BorderStyle,
    BreakKind,
    BreakPosition,
    CollectionKind,
    DocumentFormat,
    FontUsage,
    StyleFamily,
)

__all__ = [
    "UnitsConverter",
    "format_number",
    "setup_logging",
    "Alignment",
    "BorderStyle",
    "BreakKind",
    "BreakPosition",
    "CollectionKind",
    "DocumentFormat",
    "FontUsage",
    "StyleFamily",
]
