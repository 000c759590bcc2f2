"""CSS paragraph style writer."""

import logging

from ....styles.paragraph import ParagraphStyle
from ....utils.enums import Alignment, BreakKind, BreakPosition
from ....utils.units import format_number
from ...base_writer import AbstractStyleWriter
from .css import Declarations, border_declarations, measure, padding_declarations

logger = logging.getLogger(__name__)

ALIGNMENTS = {
    Alignment.LEFT: "left",
    Alignment.CENTER: "center",
    Alignment.RIGHT: "right",
    Alignment.JUSTIFY: "justify",
    Alignment.START: "start",
    Alignment.END: "end",
    Alignment.DISTRIBUTE: "justify",
}


class ParagraphStyleWriter(AbstractStyleWriter):
    """
    Renders a paragraph style as a list of CSS declarations.
    """

    style_class = ParagraphStyle

    def _write(self) -> Declarations:
        style = self.style
        declarations: Declarations = []

        measure(declarations, "margin-top", style.space_above)
        measure(declarations, "margin-bottom", style.space_below)
        measure(declarations, "margin-left", style.space_before)
        measure(declarations, "margin-right", style.space_after)
        measure(declarations, "text-indent", style.indent)
        if style.alignment is not None:
            declarations.append(("text-align", ALIGNMENTS[style.alignment]))
        if style.line_height:
            declarations.append(("line-height", f"{format_number(style.line_height)}%"))
        if style.keep_next:
            declarations.append(("page-break-after", "avoid"))
        if style.keep_lines:
            declarations.append(("page-break-inside", "avoid"))
        if style.widow_control is not None:
            lines = "2" if style.widow_control else "1"
            declarations.extend([("widows", lines), ("orphans", lines)])
        if style.break_position is not BreakPosition.UNSET and style.break_kind is not BreakKind.AUTO:
            declarations.append((f"break-{style.break_position.value}", style.break_kind.value))
        if style.background_color is not None:
            declarations.append(("background-color", f"#{style.background_color}"))
        declarations.extend(border_declarations(style.border))
        declarations.extend(padding_declarations(style.padding))
        if style.bidi:
            declarations.append(("direction", "rtl"))
        if style.font is not None:
            from .font import FontStyleWriter

            declarations.extend(FontStyleWriter(style.font, self.style_bag).write())
        return declarations
