"""
Font style mapping for the PDF writer.

Font families are mapped onto the standard PDF fonts (Helvetica, Times,
Courier). Paragraph-level fonts become ``ParagraphStyle`` attributes;
run-level fonts become ReportLab inline markup.
"""

from typing import Any, Dict, List, Optional, Tuple
from xml.sax.saxutils import quoteattr
import logging

from reportlab.lib.colors import HexColor
from reportlab.lib.fonts import ps2tt, tt2ps

from ....styles.font import FontStyle
from ....utils.enums import UnderlineType
from ....utils.units import format_number
from ...base_writer import AbstractStyleWriter

logger = logging.getLogger(__name__)

SERIF_HINTS = ("times", "serif", "georgia", "cambria", "garamond", "book")
MONOSPACE_HINTS = ("courier", "mono", "consolas", "code")

LEADING_FACTOR = 1.2


def base_font_family(name: Optional[str]) -> str:
    """Standard PDF font family closest to a font name."""
    lowered = (name or "").lower()
    if any(hint in lowered for hint in MONOSPACE_HINTS):
        return "Courier"
    if any(hint in lowered for hint in SERIF_HINTS) and "sans" not in lowered:
        return "Times-Roman"
    return "Helvetica"


def font_attributes(font: FontStyle, parent) -> Dict[str, Any]:
    """
    ``ParagraphStyle`` attributes for a font applied to a whole paragraph.

    Args:
        font: Font style
        parent: ReportLab style the attributes override

    Returns:
        Keyword arguments for ``ParagraphStyle``
    """
    family, bold, italic = ps2tt(parent.fontName)
    if font.name is not None:
        family = base_font_family(font.name)
    if font.bold is not None:
        bold = int(font.bold)
    if font.italic is not None:
        italic = int(font.italic)
    attributes: Dict[str, Any] = {"fontName": tt2ps(family, bold, italic)}
    if font.size is not None:
        attributes["fontSize"] = font.size
        attributes["leading"] = font.size * LEADING_FACTOR
    if font.color is not None:
        attributes["textColor"] = HexColor(f"#{font.color}")
    if font.bg_color is not None:
        attributes["backColor"] = HexColor(f"#{font.bg_color}")
    if font.all_caps:
        attributes["textTransform"] = "uppercase"
    return attributes


class RunFormat:
    """Inline markup wrapped around a run of text."""

    def __init__(self):
        self.tags: List[Tuple[str, Dict[str, str]]] = []
        self.uppercase = False
        self.hidden = False

    def extend(self, other: "RunFormat") -> "RunFormat":
        self.tags.extend(other.tags)
        self.uppercase = self.uppercase or other.uppercase
        self.hidden = self.hidden or other.hidden
        return self

    def apply(self, markup: str) -> str:
        """Wrap escaped markup in the run's tags, outermost first."""
        if self.hidden:
            return ""
        for tag, attributes in reversed(self.tags):
            attribute_text = "".join(f" {name}={quoteattr(value)}" for name, value in attributes.items())
            markup = f"<{tag}{attribute_text}>{markup}</{tag}>"
        return markup


class FontStyleWriter(AbstractStyleWriter):
    """
    Renders a font style as a ``RunFormat``.
    """

    style_class = FontStyle

    def _write(self) -> RunFormat:
        style = self.style
        run_format = RunFormat()

        font_attributes = {}
        if style.name is not None:
            font_attributes["face"] = base_font_family(style.name)
        if style.size is not None:
            font_attributes["size"] = format_number(style.size)
        if style.color is not None:
            font_attributes["color"] = f"#{style.color}"
        if style.bg_color is not None:
            font_attributes["backColor"] = f"#{style.bg_color}"
        if font_attributes:
            run_format.tags.append(("font", font_attributes))

        if style.bold:
            run_format.tags.append(("b", {}))
        if style.italic:
            run_format.tags.append(("i", {}))
        if style.underline is not None and style.underline is not UnderlineType.NONE:
            run_format.tags.append(("u", {}))
        if style.strikethrough or style.double_strikethrough:
            run_format.tags.append(("strike", {}))
        if style.superscript:
            run_format.tags.append(("super", {}))
        elif style.subscript:
            run_format.tags.append(("sub", {}))
        run_format.uppercase = bool(style.all_caps or style.small_caps)
        run_format.hidden = bool(style.hidden)
        return run_format
