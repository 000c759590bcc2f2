"""CSS style writers for the HTML writer."""

from .css import class_name, format_declarations
from .font import FontStyleWriter
from .numbering import NumberingStyleWriter
from .paragraph import ParagraphStyleWriter
from .table import TableStyleWriter

__all__ = [
    "FontStyleWriter",
    "NumberingStyleWriter",
    "ParagraphStyleWriter",
    "TableStyleWriter",
    "class_name",
    "format_declarations",
]
