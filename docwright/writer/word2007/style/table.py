"""OOXML table style writer."""

import logging

from ....styles.table import TableStyle
from ....utils.enums import WidthUnit
from ...base_writer import XMLStyleWriter
from .properties import BORDER_SIDES, style_id, write_borders, write_on_off, write_shading

logger = logging.getLogger(__name__)

WIDTH_TYPES = {
    WidthUnit.AUTO: "auto",
    WidthUnit.PERCENT: "pct",
    WidthUnit.TWIP: "dxa",
}


class TableStyleWriter(XMLStyleWriter):
    """
    Writes a ``w:style`` of type ``table`` with an optional ``firstRow``
    conditional format.
    """

    style_class = TableStyle

    def _write(self):
        style = self.style
        xml_writer = self.xml_writer
        name = style.get_style_name()

        xml_writer.start_element("w:style")
        xml_writer.write_attribute("w:type", "table")
        xml_writer.write_attribute("w:styleId", style_id(name))
        xml_writer.start_element("w:name")
        xml_writer.write_attribute("w:val", name)
        xml_writer.end_element()
        xml_writer.write_element("w:qFormat")

        self.write_table_properties()
        if style.first_row is not None:
            self.write_first_row(style.first_row)
        xml_writer.end_element()

    def write_table_properties(self) -> None:
        style = self.style
        xml_writer = self.xml_writer

        xml_writer.start_element("w:tblPr")
        write_on_off(xml_writer, "w:bidiVisual", style.bidi)
        if style.width or style.unit is WidthUnit.AUTO:
            xml_writer.start_element("w:tblW")
            xml_writer.write_attribute("w:w", int(round(style.width or 0)))
            xml_writer.write_attribute("w:type", WIDTH_TYPES[style.unit])
            xml_writer.end_element()
        if style.alignment is not None:
            xml_writer.start_element("w:jc")
            xml_writer.write_attribute("w:val", style.alignment.value)
            xml_writer.end_element()
        if style.cell_spacing:
            xml_writer.start_element("w:tblCellSpacing")
            xml_writer.write_attribute("w:w", int(round(style.cell_spacing)))
            xml_writer.write_attribute("w:type", "dxa")
            xml_writer.end_element()
        if style.indent:
            xml_writer.start_element("w:tblInd")
            xml_writer.write_attribute("w:w", int(round(style.indent)))
            xml_writer.write_attribute("w:type", "dxa")
            xml_writer.end_element()
        write_borders(
            xml_writer, "w:tblBorders", style.border, self.units,
            extra=(("insideH", style.border_inside_h), ("insideV", style.border_inside_v)),
        )
        write_shading(xml_writer, style.bg_color)
        if style.layout is not None:
            xml_writer.start_element("w:tblLayout")
            xml_writer.write_attribute("w:type", style.layout.value)
            xml_writer.end_element()
        self.write_cell_margins()
        xml_writer.end_element()

    def write_cell_margins(self) -> None:
        margins = self.style.cell_margin
        if margins.is_empty():
            return
        xml_writer = self.xml_writer
        xml_writer.start_element("w:tblCellMar")
        for side in BORDER_SIDES:
            value = margins.get(side)
            if value:
                xml_writer.start_element(f"w:{side}")
                xml_writer.write_attribute("w:w", int(round(value)))
                xml_writer.write_attribute("w:type", "dxa")
                xml_writer.end_element()
        xml_writer.end_element()

    def write_first_row(self, first_row: TableStyle) -> None:
        xml_writer = self.xml_writer
        xml_writer.start_element("w:tblStylePr")
        xml_writer.write_attribute("w:type", "firstRow")
        xml_writer.start_element("w:tcPr")
        write_borders(xml_writer, "w:tcBorders", first_row.border, self.units)
        write_shading(xml_writer, first_row.bg_color)
        xml_writer.end_element()
        xml_writer.end_element()
