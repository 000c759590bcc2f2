"""RTF paragraph style writer."""

from typing import List
import logging

from ....styles.borders import SIDES
from ....styles.paragraph import ParagraphStyle
from ....utils.enums import Alignment, BorderStyle, BreakKind, BreakPosition, TabLeader, TabType
from ...base_writer import AbstractStyleWriter
from ..tables import RTFTables

logger = logging.getLogger(__name__)

ALIGNMENTS = {
    Alignment.LEFT: "\\ql",
    Alignment.START: "\\ql",
    Alignment.CENTER: "\\qc",
    Alignment.RIGHT: "\\qr",
    Alignment.END: "\\qr",
    Alignment.JUSTIFY: "\\qj",
    Alignment.DISTRIBUTE: "\\qd",
}

BORDER_SIDES = {"top": "\\brdrt", "left": "\\brdrl", "bottom": "\\brdrb", "right": "\\brdrr"}

BORDER_STYLES = {
    BorderStyle.NONE: "\\brdrnone",
    BorderStyle.SINGLE: "\\brdrs",
    BorderStyle.DOUBLE: "\\brdrdb",
    BorderStyle.DOTTED: "\\brdrdot",
    BorderStyle.DASHED: "\\brdrdash",
}

TAB_TYPES = {
    TabType.RIGHT: "\\tqr",
    TabType.CENTER: "\\tqc",
    TabType.DECIMAL: "\\tqdec",
}

TAB_LEADERS = {
    TabLeader.DOT: "\\tldot",
    TabLeader.MIDDLE_DOT: "\\tlmdot",
    TabLeader.HYPHEN: "\\tlhyph",
    TabLeader.UNDERSCORE: "\\tlul",
    TabLeader.HEAVY: "\\tlth",
}


def twips(value) -> int:
    return int(round(value))


class ParagraphStyleWriter(AbstractStyleWriter):
    """
    Renders a paragraph style as RTF control words.
    """

    style_class = ParagraphStyle

    def __init__(self, style, tables: RTFTables, style_bag=None):
        super().__init__(style, style_bag)
        self.tables = tables

    def _write(self) -> str:
        style = self.style
        words: List[str] = []

        if style.alignment is not None:
            words.append(ALIGNMENTS[style.alignment])
        for word, value in (("\\sb", style.space_above), ("\\sa", style.space_below),
                            ("\\li", style.space_before), ("\\ri", style.space_after),
                            ("\\fi", style.indent)):
            if value:
                words.append(f"{word}{twips(value)}")
        if style.line_height:
            words.append(f"\\sl{twips(style.line_height * 240 / 100)}\\slmult1")
        if style.keep_next:
            words.append("\\keepn")
        if style.keep_lines:
            words.append("\\keep")
        if style.widow_control is not None:
            words.append("\\widctlpar" if style.widow_control else "\\nowidctlpar")
        if style.break_position is BreakPosition.BEFORE and style.break_kind is BreakKind.PAGE:
            words.append("\\pagebb")
        if style.bidi:
            words.append("\\rtlpar")
        if style.background_color is not None:
            words.append(f"\\cbpat{self.tables.color_index(style.background_color)}")
        words.extend(self.border_words())
        words.extend(self.tab_words())
        return "".join(words)

    def border_words(self) -> List[str]:
        style = self.style
        words: List[str] = []
        for side in SIDES:
            border = style.border.side(side)
            if border.is_empty():
                continue
            words.append(BORDER_SIDES[side])
            words.append(BORDER_STYLES.get(border.style, "\\brdrs"))
            if border.size:
                words.append(f"\\brdrw{twips(border.size)}")
            if border.color is not None:
                words.append(f"\\brdrcf{self.tables.color_index(border.color)}")
            padding = style.padding.get(side)
            if padding:
                words.append(f"\\brsp{twips(padding)}")
        return words

    def tab_words(self) -> List[str]:
        words: List[str] = []
        for tab in self.style.tabs:
            if tab.type is TabType.BAR:
                words.append(f"\\tb{twips(tab.position)}")
                continue
            if tab.type in (TabType.CLEAR, TabType.NUM):
                logger.debug(f"Tab type {tab.type.value!r} has no RTF equivalent, skipping")
                continue
            words.append(TAB_LEADERS.get(tab.leader, ""))
            words.append(TAB_TYPES.get(tab.type, ""))
            words.append(f"\\tx{twips(tab.position)}")
        return words
