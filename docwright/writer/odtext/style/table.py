"""
ODF table style writer.

Writes the table style plus a ``<name>.Cell`` cell style carrying borders
and cell margins, and a ``<name>.FirstRow`` cell style when the table has
a first-row override.
"""

import logging

from ....styles.table import TableStyle
from ....utils.enums import WidthUnit
from ....utils.units import format_number
from ...base_writer import XMLStyleWriter
from .border import border_value, write_border_attributes, write_padding_attributes
from .names import write_style_name

logger = logging.getLogger(__name__)


class TableStyleWriter(XMLStyleWriter):
    """Table style writer."""

    style_class = TableStyle

    def _write(self):
        style = self.style
        xml_writer = self.xml_writer
        name = style.get_style_name()

        xml_writer.start_element("style:style")
        write_style_name(xml_writer, name)
        xml_writer.write_attribute("style:family", "table")
        xml_writer.start_element("style:table-properties")
        if style.width:
            if style.unit is WidthUnit.PERCENT:
                xml_writer.write_attribute("style:rel-width", f"{format_number(style.width / 50)}%")
            elif style.unit is WidthUnit.TWIP:
                xml_writer.write_attribute("style:width", self.units.to_inch_string(style.width))
        if style.alignment is not None:
            xml_writer.write_attribute("table:align", style.alignment.value)
        self.write_measure("fo:margin-left", style.indent)
        if style.bg_color is not None:
            xml_writer.write_attribute("fo:background-color", f"#{style.bg_color}")
        xml_writer.write_attribute("table:border-model", "separating" if style.cell_spacing else "collapsing")
        xml_writer.write_attribute_if(style.bidi, "style:writing-mode", "rl-tb")
        xml_writer.end_element()
        xml_writer.end_element()

        self.write_cell_style(f"{name}.Cell", style)
        if style.first_row is not None:
            self.write_cell_style(f"{name}.FirstRow", style.first_row)

    def write_cell_style(self, cell_style_name: str, style: TableStyle) -> None:
        xml_writer = self.xml_writer
        xml_writer.start_element("style:style")
        write_style_name(xml_writer, cell_style_name)
        xml_writer.write_attribute("style:family", "table-cell")
        xml_writer.start_element("style:table-cell-properties")
        if style.is_first_row and style.bg_color is not None:
            xml_writer.write_attribute("fo:background-color", f"#{style.bg_color}")
        write_border_attributes(xml_writer, style)
        write_padding_attributes(xml_writer, style, self.units, attribute="cell_margin")
        xml_writer.end_element()
        xml_writer.end_element()
