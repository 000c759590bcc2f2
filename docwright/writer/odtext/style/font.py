"""
ODF font style writer.

Plain text and link styles become ``text`` family styles. Title styles
and font styles that carry a paragraph become ``paragraph`` family
styles, since ODF has no character style that sets paragraph formatting.
"""

from typing import Optional
import logging
import re

from ....styles.font import FontStyle
from ....styles.paragraph import ParagraphStyle
from ....utils.enums import FontUsage, UnderlineType
from ....utils.units import format_number
from ...base_writer import XMLStyleWriter, is_paragraph_font
from .names import encode_style_name, write_style_name

logger = logging.getLogger(__name__)

HEADING_NAME = re.compile(r"^Heading_(\d+)$")

UNDERLINES = {
    UnderlineType.SINGLE: ("solid", None),
    UnderlineType.DOUBLE: ("solid", "double"),
    UnderlineType.DOTTED: ("dotted", None),
    UnderlineType.DASH: ("dash", None),
    UnderlineType.WAVE: ("wave", None),
}


class FontStyleWriter(XMLStyleWriter):
    """
    Font style writer.

    With ``nested=True`` only the ``style:text-properties`` element is
    written, for use inside an enclosing paragraph style.
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
        paragraph_family = is_paragraph_font(style)

        xml_writer.start_element("style:style")
        write_style_name(xml_writer, style.get_style_name())
        xml_writer.write_attribute("style:family", "paragraph" if paragraph_family else "text")

        if paragraph_family:
            parent = self.lookup(style.paragraph_style_name, ParagraphStyle)
            if parent is not None:
                xml_writer.write_attribute(
                    "style:parent-style-name", encode_style_name(parent.get_style_name())
                )
            level = self.outline_level()
            if level is not None:
                xml_writer.write_attribute("style:default-outline-level", level)
            if style.paragraph is not None:
                from .paragraph import ParagraphStyleWriter

                ParagraphStyleWriter(xml_writer, style.paragraph, self.style_bag).write_properties()
        else:
            parent = self.lookup(style.based_on, FontStyle)
            if parent is not None and not is_paragraph_font(parent):
                xml_writer.write_attribute(
                    "style:parent-style-name", encode_style_name(parent.get_style_name())
                )

        self.write_properties()
        xml_writer.end_element()

    def outline_level(self) -> Optional[int]:
        if self.style.usage is not FontUsage.TITLE:
            return None
        match = HEADING_NAME.match(self.style.get_style_name() or "")
        return int(match.group(1)) if match else None

    def write_properties(self) -> None:
        """Write the ``style:text-properties`` element."""
        style = self.style
        xml_writer = self.xml_writer

        xml_writer.start_element("style:text-properties")
        if style.name is not None:
            xml_writer.write_attribute("style:font-name", style.name)
            xml_writer.write_attribute("fo:font-family", style.name)
        if style.size is not None:
            xml_writer.write_attribute("fo:font-size", f"{format_number(style.size)}pt")
        if style.color is not None:
            xml_writer.write_attribute("fo:color", f"#{style.color}")
        if style.bold is not None:
            xml_writer.write_attribute("fo:font-weight", "bold" if style.bold else "normal")
        if style.italic is not None:
            xml_writer.write_attribute("fo:font-style", "italic" if style.italic else "normal")
        self.write_underline()
        if style.strikethrough:
            xml_writer.write_attribute("style:text-line-through-style", "solid")
        elif style.double_strikethrough:
            xml_writer.write_attribute("style:text-line-through-style", "solid")
            xml_writer.write_attribute("style:text-line-through-type", "double")
        if style.superscript:
            xml_writer.write_attribute("style:text-position", "super 58%")
        elif style.subscript:
            xml_writer.write_attribute("style:text-position", "sub 58%")
        if style.small_caps:
            xml_writer.write_attribute("fo:font-variant", "small-caps")
        elif style.all_caps:
            xml_writer.write_attribute("fo:text-transform", "uppercase")
        if style.bg_color is not None:
            xml_writer.write_attribute("fo:background-color", f"#{style.bg_color}")
        if style.hidden:
            xml_writer.write_attribute("text:display", "none")
        if style.lang is not None:
            language, _, country = style.lang.partition("-")
            xml_writer.write_attribute("fo:language", language)
            xml_writer.write_attribute_if(country, "fo:country", country)
        self.write_measure("fo:letter-spacing", style.spacing)
        if style.scale is not None:
            xml_writer.write_attribute("style:text-scale", f"{style.scale}%")
        xml_writer.end_element()

    def write_underline(self) -> None:
        underline = self.style.underline
        if underline is None:
            return
        if underline is UnderlineType.NONE:
            self.xml_writer.write_attribute("style:text-underline-style", "none")
            return
        line_style, line_type = UNDERLINES[underline]
        self.xml_writer.write_attribute("style:text-underline-style", line_style)
        self.xml_writer.write_attribute_if(line_type, "style:text-underline-type", line_type)
        self.xml_writer.write_attribute("style:text-underline-width", "auto")
        self.xml_writer.write_attribute("style:text-underline-color", "font-color")
