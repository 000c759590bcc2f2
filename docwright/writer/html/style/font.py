"""CSS font style writer."""

import logging

from ....styles.font import FontStyle
from ....utils.enums import UnderlineType
from ....utils.units import format_number
from ...base_writer import AbstractStyleWriter
from .css import Declarations, measure

logger = logging.getLogger(__name__)

DECORATION_STYLES = {
    UnderlineType.DOUBLE: "double",
    UnderlineType.DOTTED: "dotted",
    UnderlineType.DASH: "dashed",
    UnderlineType.WAVE: "wavy",
}


class FontStyleWriter(AbstractStyleWriter):
    """
    Renders a font style as a list of CSS declarations.
    """

    style_class = FontStyle

    def _write(self) -> Declarations:
        style = self.style
        declarations: Declarations = []

        if style.name is not None:
            declarations.append(("font-family", f"'{style.name}'"))
        if style.size is not None:
            declarations.append(("font-size", f"{format_number(style.size)}pt"))
        if style.color is not None:
            declarations.append(("color", f"#{style.color}"))
        if style.bold is not None:
            declarations.append(("font-weight", "bold" if style.bold else "normal"))
        if style.italic is not None:
            declarations.append(("font-style", "italic" if style.italic else "normal"))

        lines = []
        if style.underline is not None and style.underline is not UnderlineType.NONE:
            lines.append("underline")
        if style.strikethrough or style.double_strikethrough:
            lines.append("line-through")
        if lines:
            declarations.append(("text-decoration-line", " ".join(lines)))
            line_style = DECORATION_STYLES.get(style.underline)
            if style.double_strikethrough:
                line_style = "double"
            if line_style is not None:
                declarations.append(("text-decoration-style", line_style))
        elif style.underline is UnderlineType.NONE:
            declarations.append(("text-decoration-line", "none"))

        if style.superscript:
            declarations.append(("vertical-align", "super"))
        elif style.subscript:
            declarations.append(("vertical-align", "sub"))
        if style.small_caps:
            declarations.append(("font-variant", "small-caps"))
        elif style.all_caps:
            declarations.append(("text-transform", "uppercase"))
        if style.bg_color is not None:
            declarations.append(("background-color", f"#{style.bg_color}"))
        if style.hidden:
            declarations.append(("display", "none"))
        if style.rtl:
            declarations.append(("direction", "rtl"))
        measure(declarations, "letter-spacing", style.spacing)
        if style.scale is not None:
            declarations.append(("font-stretch", f"{style.scale}%"))
        return declarations
