"""ReportLab style mapping for the PDF writer."""

from .font import FontStyleWriter, RunFormat, base_font_family, font_attributes
from .paragraph import ParagraphStyleWriter

__all__ = [
    "FontStyleWriter",
    "ParagraphStyleWriter",
    "RunFormat",
    "base_font_family",
    "font_attributes",
]
