"""
OOXML paragraph style writer.

Lengths stay in twips, the native OOXML unit; unset and zero lengths are
not written.
"""

from typing import Optional
import logging

from ....styles.paragraph import ParagraphStyle
from ....utils.enums import Alignment, BreakKind, BreakPosition
from ...base_writer import XMLStyleWriter
from .properties import style_id, write_borders, write_on_off, write_shading

logger = logging.getLogger(__name__)

ALIGNMENTS = {
    Alignment.LEFT: "left",
    Alignment.CENTER: "center",
    Alignment.RIGHT: "right",
    Alignment.JUSTIFY: "both",
    Alignment.START: "start",
    Alignment.END: "end",
    Alignment.DISTRIBUTE: "distribute",
}

# Line spacing unit: 240 = single
LINE_UNIT = 240


def twips(value) -> int:
    return int(round(value))


class ParagraphStyleWriter(XMLStyleWriter):
    """
    Writes a ``w:style`` element of type ``paragraph``.
    """

    style_class = ParagraphStyle

    def __init__(self, xml_writer, style, style_bag=None, is_default: bool = False):
        super().__init__(xml_writer, style, style_bag)
        self.is_default = is_default

    def _write(self):
        style = self.style
        xml_writer = self.xml_writer
        name = style.get_style_name()

        xml_writer.start_element("w:style")
        xml_writer.write_attribute("w:type", "paragraph")
        xml_writer.write_attribute_if(self.is_default, "w:default", "1")
        xml_writer.write_attribute("w:styleId", style_id(name))
        xml_writer.start_element("w:name")
        xml_writer.write_attribute("w:val", name)
        xml_writer.end_element()

        parent = self.lookup(style.based_on, ParagraphStyle)
        if parent is not None:
            xml_writer.start_element("w:basedOn")
            xml_writer.write_attribute("w:val", style_id(parent.get_style_name()))
            xml_writer.end_element()
        following = self.lookup(style.next, ParagraphStyle)
        if following is not None:
            xml_writer.start_element("w:next")
            xml_writer.write_attribute("w:val", style_id(following.get_style_name()))
            xml_writer.end_element()
        xml_writer.write_element("w:qFormat")

        self.write_properties()

        if style.font is not None:
            from .font import FontStyleWriter

            FontStyleWriter(xml_writer, style.font, self.style_bag, nested=True).write()

        xml_writer.end_element()

    def write_properties(self, paragraph_style_id: Optional[str] = None,
                         outline_level: Optional[int] = None) -> None:
        """
        Write the ``w:pPr`` element.

        Args:
            paragraph_style_id: Style id for ``w:pStyle`` (direct formatting only)
            outline_level: Zero-based outline level for headings
        """
        style = self.style
        xml_writer = self.xml_writer

        xml_writer.start_element("w:pPr")
        if paragraph_style_id is not None:
            xml_writer.start_element("w:pStyle")
            xml_writer.write_attribute("w:val", paragraph_style_id)
            xml_writer.end_element()
        write_on_off(xml_writer, "w:keepNext", style.keep_next)
        write_on_off(xml_writer, "w:keepLines", style.keep_lines)
        self.write_break()
        write_on_off(xml_writer, "w:widowControl", style.widow_control)
        write_borders(xml_writer, "w:pBdr", style.border, self.units, padding=style.padding)
        write_shading(xml_writer, style.background_color)
        self.write_tabs()
        write_on_off(xml_writer, "w:bidi", style.bidi)
        self.write_spacing()
        self.write_indentation()
        if style.alignment is not None:
            xml_writer.start_element("w:jc")
            xml_writer.write_attribute("w:val", ALIGNMENTS[style.alignment])
            xml_writer.end_element()
        if outline_level is not None:
            xml_writer.start_element("w:outlineLvl")
            xml_writer.write_attribute("w:val", outline_level)
            xml_writer.end_element()
        xml_writer.end_element()

    def write_break(self) -> None:
        """
        Page breaks before the paragraph map to ``w:pageBreakBefore``. An
        unset position writes nothing.
        """
        style = self.style
        if style.break_position is BreakPosition.UNSET:
            return
        if style.break_position is BreakPosition.BEFORE and style.break_kind is BreakKind.PAGE:
            self.xml_writer.write_element("w:pageBreakBefore")
        elif style.break_kind is not BreakKind.AUTO:
            logger.debug(
                f"{style.break_kind.value} break {style.break_position.value} paragraph "
                f"has no OOXML paragraph property, skipping"
            )

    def write_tabs(self) -> None:
        tabs = self.style.tabs
        if not tabs:
            return
        xml_writer = self.xml_writer
        xml_writer.start_element("w:tabs")
        for tab in tabs:
            xml_writer.start_element("w:tab")
            xml_writer.write_attribute("w:val", tab.type.value)
            if tab.leader.value != "none":
                xml_writer.write_attribute("w:leader", tab.leader.value)
            xml_writer.write_attribute("w:pos", twips(tab.position))
            xml_writer.end_element()
        xml_writer.end_element()

    def write_spacing(self) -> None:
        style = self.style
        if not (style.space_above or style.space_below or style.line_height):
            return
        xml_writer = self.xml_writer
        xml_writer.start_element("w:spacing")
        xml_writer.write_attribute_if(style.space_above, "w:before", twips(style.space_above or 0))
        xml_writer.write_attribute_if(style.space_below, "w:after", twips(style.space_below or 0))
        if style.line_height:
            xml_writer.write_attribute("w:line", twips(style.line_height * LINE_UNIT / 100))
            xml_writer.write_attribute("w:lineRule", "auto")
        xml_writer.end_element()

    def write_indentation(self) -> None:
        style = self.style
        if not (style.space_before or style.space_after or style.indent):
            return
        xml_writer = self.xml_writer
        xml_writer.start_element("w:ind")
        xml_writer.write_attribute_if(style.space_before, "w:left", twips(style.space_before or 0))
        xml_writer.write_attribute_if(style.space_after, "w:right", twips(style.space_after or 0))
        if style.indent:
            if style.indent > 0:
                xml_writer.write_attribute("w:firstLine", twips(style.indent))
            else:
                xml_writer.write_attribute("w:hanging", twips(-style.indent))
        xml_writer.end_element()
