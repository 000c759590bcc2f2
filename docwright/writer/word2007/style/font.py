"""
OOXML font style writer.

Text and link styles become character styles. Title styles and font
styles carrying a paragraph become paragraph styles holding both
``w:pPr`` and ``w:rPr``.
"""

from typing import Optional
import logging
import re

from ....styles.font import FontStyle
from ....styles.paragraph import ParagraphStyle
from ....utils.enums import FontUsage
from ...base_writer import XMLStyleWriter, is_paragraph_font
from .properties import style_id, write_on_off, write_shading

logger = logging.getLogger(__name__)

HEADING_NAME = re.compile(r"^Heading_(\d+)$")


class FontStyleWriter(XMLStyleWriter):
    """
    Font style writer.

    With ``nested=True`` only the ``w:rPr`` element is written.
    """

    style_class = FontStyle

    def __init__(self, xml_writer, style, style_bag=None, nested: bool = False):
        super().__init__(xml_writer, style, style_bag)
        self.nested = nested

    def _write(self):
        if self.nested:
            self.write_properties()
            return

        style = self.style
        xml_writer = self.xml_writer
        name = style.get_style_name()
        paragraph_type = is_paragraph_font(style)

        xml_writer.start_element("w:style")
        xml_writer.write_attribute("w:type", "paragraph" if paragraph_type else "character")
        xml_writer.write_attribute("w:styleId", style_id(name))
        xml_writer.start_element("w:name")
        xml_writer.write_attribute("w:val", name)
        xml_writer.end_element()

        if paragraph_type:
            parent = self.lookup(style.paragraph_style_name, ParagraphStyle)
        else:
            parent = self.lookup(style.based_on, FontStyle)
            if parent is not None and is_paragraph_font(parent):
                parent = None
        if parent is not None:
            xml_writer.start_element("w:basedOn")
            xml_writer.write_attribute("w:val", style_id(parent.get_style_name()))
            xml_writer.end_element()
        if style.usage is FontUsage.LINK:
            xml_writer.start_element("w:uiPriority")
            xml_writer.write_attribute("w:val", "99")
            xml_writer.end_element()
            xml_writer.write_element("w:unhideWhenUsed")
        xml_writer.write_element("w:qFormat")

        if paragraph_type:
            self.write_paragraph_properties()
        self.write_properties()
        xml_writer.end_element()

    def outline_level(self) -> Optional[int]:
        if self.style.usage is not FontUsage.TITLE:
            return None
        match = HEADING_NAME.match(self.style.get_style_name() or "")
        return int(match.group(1)) - 1 if match else 0

    def write_paragraph_properties(self) -> None:
        from .paragraph import ParagraphStyleWriter

        level = self.outline_level()
        if self.style.paragraph is not None:
            ParagraphStyleWriter(self.xml_writer, self.style.paragraph, self.style_bag).write_properties(
                outline_level=level
            )
        elif level is not None:
            self.xml_writer.start_element("w:pPr")
            self.xml_writer.start_element("w:outlineLvl")
            self.xml_writer.write_attribute("w:val", level)
            self.xml_writer.end_element()
            self.xml_writer.end_element()

    def write_properties(self) -> None:
        """Write the ``w:rPr`` element."""
        style = self.style
        xml_writer = self.xml_writer

        xml_writer.start_element("w:rPr")
        if style.name is not None:
            xml_writer.start_element("w:rFonts")
            for attribute in ("w:ascii", "w:hAnsi", "w:eastAsia", "w:cs"):
                xml_writer.write_attribute(attribute, style.name)
            xml_writer.end_element()
        write_on_off(xml_writer, "w:b", style.bold)
        write_on_off(xml_writer, "w:i", style.italic)
        write_on_off(xml_writer, "w:caps", style.all_caps)
        write_on_off(xml_writer, "w:smallCaps", style.small_caps)
        write_on_off(xml_writer, "w:strike", style.strikethrough)
        write_on_off(xml_writer, "w:dstrike", style.double_strikethrough)
        write_on_off(xml_writer, "w:vanish", style.hidden)
        if style.color is not None:
            xml_writer.start_element("w:color")
            xml_writer.write_attribute("w:val", style.color)
            xml_writer.end_element()
        if style.spacing:
            xml_writer.start_element("w:spacing")
            xml_writer.write_attribute("w:val", int(round(style.spacing)))
            xml_writer.end_element()
        if style.scale is not None:
            xml_writer.start_element("w:w")
            xml_writer.write_attribute("w:val", style.scale)
            xml_writer.end_element()
        if style.size is not None:
            half_points = int(round(style.size * 2))
            for element in ("w:sz", "w:szCs"):
                xml_writer.start_element(element)
                xml_writer.write_attribute("w:val", half_points)
                xml_writer.end_element()
        if style.underline is not None:
            xml_writer.start_element("w:u")
            xml_writer.write_attribute("w:val", style.underline.value)
            xml_writer.end_element()
        write_shading(xml_writer, style.bg_color)
        if style.superscript or style.subscript:
            xml_writer.start_element("w:vertAlign")
            xml_writer.write_attribute("w:val", "superscript" if style.superscript else "subscript")
            xml_writer.end_element()
        write_on_off(xml_writer, "w:rtl", style.rtl)
        if style.lang is not None:
            xml_writer.start_element("w:lang")
            xml_writer.write_attribute("w:val", style.lang)
            xml_writer.end_element()
        xml_writer.end_element()
