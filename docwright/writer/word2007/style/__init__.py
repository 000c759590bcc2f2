"""
OOXML style writers.

``STYLE_WRITERS`` maps the families written to ``word/styles.xml`` to
their writer classes; numbering styles go to ``word/numbering.xml``.
"""

from ....utils.enums import StyleFamily
from .font import FontStyleWriter
from .numbering import NumberingStyleWriter
from .paragraph import ParagraphStyleWriter
from .properties import style_id
from .table import TableStyleWriter

STYLE_WRITERS = {
    StyleFamily.PARAGRAPH: ParagraphStyleWriter,
    StyleFamily.FONT: FontStyleWriter,
    StyleFamily.TABLE: TableStyleWriter,
}

__all__ = [
    "STYLE_WRITERS",
    "FontStyleWriter",
    "NumberingStyleWriter",
    "ParagraphStyleWriter",
    "TableStyleWriter",
    "style_id",
]
