"""
Elements module: sections and the text elements they contain.
"""

from .text import Element, PageBreak, Text, TextBreak, TextRun, Title, style_reference
from .section import Section, SectionSettings

__all__ = [
    "Element",
    "PageBreak",
    "Text",
    "TextBreak",
    "TextRun",
    "Title",
    "style_reference",
    "Section",
    "SectionSettings",
]
