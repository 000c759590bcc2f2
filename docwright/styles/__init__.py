"""
Styles module for Docwright documents.

Style value objects (paragraph, font, table, numbering) and the style bag
that registers them by name.
"""

from .abstract_style import AbstractStyle, normalize_style_key
from .borders import Border, BorderSide, Padding
from .tab import Tab
from .paragraph import ParagraphStyle
from .font import FontStyle
from .table import TableStyle
from .numbering import NumberingLevel, NumberingStyle
from .style_bag import StyleBag, title_style_name

__all__ = [
    "AbstractStyle",
    "normalize_style_key",
    "Border",
    "BorderSide",
    "Padding",
    "Tab",
    "ParagraphStyle",
    "FontStyle",
    "TableStyle",
    "NumberingLevel",
    "NumberingStyle",
    "StyleBag",
    "title_style_name",
]
