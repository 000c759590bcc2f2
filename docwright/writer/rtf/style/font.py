"""RTF font style writer."""

from typing import List
import logging

from ....styles.font import FontStyle
from ....utils.enums import UnderlineType
from ...base_writer import AbstractStyleWriter
from ..tables import RTFTables

logger = logging.getLogger(__name__)

UNDERLINES = {
    UnderlineType.NONE: "\\ulnone",
    UnderlineType.SINGLE: "\\ul",
    UnderlineType.DOUBLE: "\\uldb",
    UnderlineType.DOTTED: "\\uld",
    UnderlineType.DASH: "\\uldash",
    UnderlineType.WAVE: "\\ulwave",
}


def toggle(word: str, value) -> str:
    """``\\b`` for True, ``\\b0`` for False, nothing when unset."""
    if value is None:
        return ""
    return word if value else f"{word}0"


class FontStyleWriter(AbstractStyleWriter):
    """
    Renders a font style as RTF character control words.
    """

    style_class = FontStyle

    def __init__(self, style, tables: RTFTables, style_bag=None):
        super().__init__(style, style_bag)
        self.tables = tables

    def _write(self) -> str:
        style = self.style
        words: List[str] = []

        if style.name is not None:
            words.append(f"\\f{self.tables.font_index(style.name)}")
        if style.size is not None:
            words.append(f"\\fs{int(round(style.size * 2))}")
        if style.color is not None:
            words.append(f"\\cf{self.tables.color_index(style.color)}")
        words.append(toggle("\\b", style.bold))
        words.append(toggle("\\i", style.italic))
        if style.underline is not None:
            words.append(UNDERLINES[style.underline])
        words.append(toggle("\\strike", style.strikethrough))
        if style.double_strikethrough:
            words.append("\\striked1")
        if style.superscript:
            words.append("\\super")
        elif style.subscript:
            words.append("\\sub")
        words.append(toggle("\\scaps", style.small_caps))
        words.append(toggle("\\caps", style.all_caps))
        if style.bg_color is not None:
            words.append(f"\\chcbpat{self.tables.color_index(style.bg_color)}")
        words.append(toggle("\\v", style.hidden))
        if style.rtl:
            words.append("\\rtlch")
        if style.spacing:
            words.append(f"\\expndtw{int(round(style.spacing))}")
        if style.scale is not None:
            words.append(f"\\charscalex{style.scale}")
        return "".join(words)
