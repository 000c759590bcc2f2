"""RTF style writers. Table and numbering styles have no RTF rendering."""

from ....utils.enums import StyleFamily
from .font import FontStyleWriter
from .paragraph import ParagraphStyleWriter

STYLE_WRITERS = {
    StyleFamily.PARAGRAPH: ParagraphStyleWriter,
    StyleFamily.FONT: FontStyleWriter,
}

__all__ = ["STYLE_WRITERS", "FontStyleWriter", "ParagraphStyleWriter"]
