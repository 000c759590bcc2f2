"""
ODF style writers.

``STYLE_WRITERS`` maps each style family to its writer class.
"""

from ....utils.enums import StyleFamily
from .border import write_border_attributes, write_padding_attributes
from .font import FontStyleWriter, is_paragraph_font
from .names import encode_style_name, write_style_name
from .numbering import NumberingStyleWriter
from .paragraph import ParagraphStyleWriter
from .tab import TabStyleWriter
from .table import TableStyleWriter

STYLE_WRITERS = {
    StyleFamily.PARAGRAPH: ParagraphStyleWriter,
    StyleFamily.FONT: FontStyleWriter,
    StyleFamily.TABLE: TableStyleWriter,
    StyleFamily.NUMBERING: NumberingStyleWriter,
}

__all__ = [
    "STYLE_WRITERS",
    "FontStyleWriter",
    "NumberingStyleWriter",
    "ParagraphStyleWriter",
    "TabStyleWriter",
    "TableStyleWriter",
    "encode_style_name",
    "is_paragraph_font",
    "write_style_name",
    "write_border_attributes",
    "write_padding_attributes",
]
