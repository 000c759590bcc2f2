"""
ODF paragraph style writer.

Writes one ``style:style`` element of family ``paragraph``. Lengths are
stored in twips and written in inches; a length that is unset or zero is
not written, so the value is inherited from the parent style.
"""

from typing import Optional
import logging

from ....styles.paragraph import ParagraphStyle
from ....utils.enums import BreakKind, BreakPosition
from ....utils.units import format_number
from ...base_writer import XMLStyleWriter
from .border import write_border_attributes, write_padding_attributes
from .names import encode_style_name, write_style_name
from .tab import TabStyleWriter

logger = logging.getLogger(__name__)

MASTER_PAGE = "Standard"


class ParagraphStyleWriter(XMLStyleWriter):
    """
    Paragraph style writer.

    Auto styles (``is_auto``) only link the paragraph to the standard
    master page and restart page numbering; their spacing, alignment
    and break values are not written.
    """

    style_class = ParagraphStyle

    def _write(self):
        style = self.style
        xml_writer = self.xml_writer

        xml_writer.start_element("style:style")
        write_style_name(xml_writer, style.get_style_name())
        xml_writer.write_attribute("style:family", "paragraph")
        if style.is_auto:
            xml_writer.write_attribute("style:parent-style-name", MASTER_PAGE)
            xml_writer.write_attribute("style:master-page-name", MASTER_PAGE)
        else:
            if style.has_page_break() and style.page_style is not None:
                xml_writer.write_attribute("style:master-page-name", encode_style_name(style.page_style))
            parent = self.parent_style_name()
            if parent is not None:
                xml_writer.write_attribute("style:parent-style-name", encode_style_name(parent))
            if style.next is not None:
                xml_writer.write_attribute("style:next-style-name", encode_style_name(style.next))

        self.write_properties()

        if style.font is not None:
            from .font import FontStyleWriter

            FontStyleWriter(xml_writer, style.font, self.style_bag, nested=True).write()

        xml_writer.end_element()

    def parent_style_name(self) -> Optional[str]:
        """``based_on`` if it can be used as parent; unchecked without a style bag."""
        based_on = self.style.based_on
        if based_on is None or self.style_bag is None:
            return based_on
        parent = self.lookup(based_on, ParagraphStyle)
        return parent.get_style_name() if parent is not None else None

    def write_properties(self) -> None:
        """Write the ``style:paragraph-properties`` element."""
        style = self.style
        xml_writer = self.xml_writer

        xml_writer.start_element("style:paragraph-properties")
        if style.is_auto:
            xml_writer.write_attribute("style:page-number", "auto")
        else:
            self.write_measure("fo:margin-top", style.space_above)
            self.write_measure("fo:margin-bottom", style.space_below)
            self.write_measure("fo:margin-left", style.space_before)
            self.write_measure("fo:margin-right", style.space_after)

            if style.alignment is not None:
                xml_writer.write_attribute("fo:text-align", style.alignment.value)
            if style.line_height is not None:
                xml_writer.write_attribute("fo:line-height", f"{format_number(style.line_height)}%")
            if style.justify_single_word is not None:
                xml_writer.write_attribute("style:justify-single-word", style.justify_single_word)
            if style.keep_next is not None:
                xml_writer.write_attribute("fo:keep-with-next", "always" if style.keep_next else "auto")
            if style.keep_lines is not None:
                xml_writer.write_attribute("fo:keep-together", "always" if style.keep_lines else "auto")
            if style.widow_control is not None:
                lines = "2" if style.widow_control else "0"
                xml_writer.write_attribute("fo:widows", lines)
                xml_writer.write_attribute("fo:orphans", lines)
            if style.hyphenation_ladder_count is not None:
                xml_writer.write_attribute("fo:hyphenation-ladder-count", style.hyphenation_ladder_count)
            self.write_measure("fo:text-indent", style.indent)

            self.write_break()

            if style.background_color is not None:
                xml_writer.write_attribute("fo:background-color", f"#{style.background_color}")

            write_padding_attributes(xml_writer, style, self.units)
            write_border_attributes(xml_writer, style)

        xml_writer.write_attribute_if(style.bidi, "style:writing-mode", "rl-tb")
        self.write_tabs()
        xml_writer.end_element()

    def write_break(self) -> None:
        """
        Write ``fo:break-<position>``. An unset position writes nothing,
        whatever the break kind.
        """
        style = self.style
        if style.break_position is BreakPosition.UNSET:
            return
        self.xml_writer.write_attribute(f"fo:break-{style.break_position.value}", style.break_kind.value)
        if style.break_kind is BreakKind.PAGE and style.page_number is not None:
            self.xml_writer.write_attribute("style:page-number", style.page_number)

    def write_tabs(self) -> None:
        tabs = self.style.tabs
        if not tabs:
            return
        self.xml_writer.start_element("style:tab-stops")
        for tab in tabs:
            TabStyleWriter(self.xml_writer, tab).write()
        self.xml_writer.end_element()
