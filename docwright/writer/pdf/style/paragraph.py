"""Paragraph style mapping for the PDF writer."""

import logging

from reportlab.lib.colors import HexColor
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT, TA_RIGHT
from reportlab.lib.styles import ParagraphStyle as RLParagraphStyle

from ....styles.borders import SIDES
from ....styles.paragraph import ParagraphStyle
from ....utils.enums import Alignment
from ...base_writer import AbstractStyleWriter
from .font import LEADING_FACTOR, font_attributes

logger = logging.getLogger(__name__)

ALIGNMENTS = {
    Alignment.LEFT: TA_LEFT,
    Alignment.START: TA_LEFT,
    Alignment.CENTER: TA_CENTER,
    Alignment.RIGHT: TA_RIGHT,
    Alignment.END: TA_RIGHT,
    Alignment.JUSTIFY: TA_JUSTIFY,
    Alignment.DISTRIBUTE: TA_JUSTIFY,
}

DEFAULT_BORDER_WIDTH = 0.5


def points(twips) -> float:
    return twips / 20


class ParagraphStyleWriter(AbstractStyleWriter):
    """
    Builds a ReportLab ``ParagraphStyle`` from a paragraph style.

    The parent ReportLab style supplies every value the paragraph style
    leaves unset, so a ``based_on`` chain maps onto ReportLab's own style
    inheritance.
    """

    style_class = ParagraphStyle

    def __init__(self, style, parent: RLParagraphStyle, style_bag=None):
        super().__init__(style, style_bag)
        self.parent = parent

    def _write(self) -> RLParagraphStyle:
        style = self.style
        attributes = {}
        if style.font is not None:
            attributes.update(font_attributes(style.font, self.parent))

        if style.alignment is not None:
            attributes["alignment"] = ALIGNMENTS[style.alignment]
        if style.space_above:
            attributes["spaceBefore"] = points(style.space_above)
        if style.space_below:
            attributes["spaceAfter"] = points(style.space_below)
        if style.space_before:
            attributes["leftIndent"] = points(style.space_before)
        if style.space_after:
            attributes["rightIndent"] = points(style.space_after)
        if style.indent:
            attributes["firstLineIndent"] = points(style.indent)
        if style.line_height:
            font_size = attributes.get("fontSize", self.parent.fontSize)
            attributes["leading"] = font_size * LEADING_FACTOR * style.line_height / 100
        if style.keep_next is not None:
            attributes["keepWithNext"] = int(style.keep_next)
        if style.widow_control is not None:
            attributes["allowWidows"] = 0 if style.widow_control else 1
            attributes["allowOrphans"] = 0 if style.widow_control else 1
        if style.background_color is not None:
            attributes["backColor"] = HexColor(f"#{style.background_color}")
        if style.bidi:
            attributes["wordWrap"] = "RTL"
        attributes.update(self._border_attributes())

        if style.tabs:
            logger.debug(f"Tab stops of {style.style_name!r} are not rendered in PDF")
        return RLParagraphStyle(style.style_name or "inline", parent=self.parent, **attributes)

    def _border_attributes(self):
        """
        ReportLab draws one border around the paragraph: the first side
        that is set gives its width and color.
        """
        border = self.style.border
        sides = [border.side(name) for name in SIDES if not border.side(name).is_empty()]
        attributes = {}
        if sides:
            side = sides[0]
            attributes["borderWidth"] = points(side.size) if side.size else DEFAULT_BORDER_WIDTH
            if side.color is not None:
                attributes["borderColor"] = HexColor(f"#{side.color}")
            elif self.parent.borderColor is None:
                attributes["borderColor"] = HexColor("#000000")
        padding = [self.style.padding.get(name) for name in SIDES if self.style.padding.get(name)]
        if padding:
            attributes["borderPadding"] = points(max(padding))
        return attributes
