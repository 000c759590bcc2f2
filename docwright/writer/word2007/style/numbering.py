"""
OOXML numbering writer.

A numbering style becomes one ``w:abstractNum``. The matching ``w:num``
instance is written by ``write_instance`` after all abstract definitions,
as the numbering part requires. Both ids are the style's index.
"""

import logging

from ....styles.numbering import NumberingLevel, NumberingStyle
from ....utils.enums import Alignment, NumberingType
from ...base_writer import XMLStyleWriter
from .properties import style_id

logger = logging.getLogger(__name__)

LEVEL_ALIGNMENTS = {
    Alignment.LEFT: "left",
    Alignment.START: "left",
    Alignment.CENTER: "center",
    Alignment.RIGHT: "right",
    Alignment.END: "right",
}


class NumberingStyleWriter(XMLStyleWriter):
    """Numbering style writer."""

    style_class = NumberingStyle

    def _write(self):
        style = self.style
        xml_writer = self.xml_writer

        xml_writer.start_element("w:abstractNum")
        xml_writer.write_attribute("w:abstractNumId", style.num_id)
        xml_writer.start_element("w:multiLevelType")
        xml_writer.write_attribute("w:val", (style.type or NumberingType.HYBRID_MULTILEVEL).value)
        xml_writer.end_element()
        xml_writer.start_element("w:name")
        xml_writer.write_attribute("w:val", style.get_style_name())
        xml_writer.end_element()
        for level in style.get_levels():
            self.write_level(level)
        xml_writer.end_element()

    def write_level(self, level: NumberingLevel) -> None:
        xml_writer = self.xml_writer
        xml_writer.start_element("w:lvl")
        xml_writer.write_attribute("w:ilvl", level.level)

        def value_element(name, value):
            xml_writer.start_element(name)
            xml_writer.write_attribute("w:val", value)
            xml_writer.end_element()

        if level.start is not None:
            value_element("w:start", level.start)
        if level.format is not None:
            value_element("w:numFmt", level.format.value)
        if level.restart is not None:
            value_element("w:lvlRestart", level.restart)
        if level.p_style is not None:
            value_element("w:pStyle", style_id(level.p_style))
        if level.suffix is not None:
            value_element("w:suff", level.suffix.value)
        value_element("w:lvlText", level.label_text())
        if level.alignment is not None:
            value_element("w:lvlJc", LEVEL_ALIGNMENTS.get(level.alignment, "left"))

        if level.tab_pos or level.left or level.hanging:
            xml_writer.start_element("w:pPr")
            if level.tab_pos:
                xml_writer.start_element("w:tabs")
                xml_writer.start_element("w:tab")
                xml_writer.write_attribute("w:val", "num")
                xml_writer.write_attribute("w:pos", int(round(level.tab_pos)))
                xml_writer.end_element()
                xml_writer.end_element()
            if level.left or level.hanging:
                xml_writer.start_element("w:ind")
                xml_writer.write_attribute_if(level.left, "w:left", int(round(level.left or 0)))
                xml_writer.write_attribute_if(level.hanging, "w:hanging", int(round(level.hanging or 0)))
                xml_writer.end_element()
            xml_writer.end_element()

        if level.font is not None:
            xml_writer.start_element("w:rPr")
            xml_writer.start_element("w:rFonts")
            xml_writer.write_attribute("w:ascii", level.font)
            xml_writer.write_attribute("w:hAnsi", level.font)
            xml_writer.write_attribute("w:hint", "default")
            xml_writer.end_element()
            xml_writer.end_element()
        xml_writer.end_element()

    def write_instance(self) -> None:
        """Write the ``w:num`` element pointing at this style's definition."""
        xml_writer = self.xml_writer
        xml_writer.start_element("w:num")
        xml_writer.write_attribute("w:numId", self.style.num_id)
        xml_writer.start_element("w:abstractNumId")
        xml_writer.write_attribute("w:val", self.style.num_id)
        xml_writer.end_element()
        xml_writer.end_element()
