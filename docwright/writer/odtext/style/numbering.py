"""ODF numbering style writer (``text:list-style``)."""

import logging
import re

from ....styles.numbering import NumberingLevel, NumberingStyle
from ....utils.enums import LevelSuffix, NumberFormat
from ...base_writer import XMLStyleWriter
from .names import write_style_name

logger = logging.getLogger(__name__)

NUM_FORMATS = {
    NumberFormat.DECIMAL: "1",
    NumberFormat.UPPER_ROMAN: "I",
    NumberFormat.LOWER_ROMAN: "i",
    NumberFormat.UPPER_LETTER: "A",
    NumberFormat.LOWER_LETTER: "a",
    NumberFormat.NONE: "",
}

FOLLOWED_BY = {
    LevelSuffix.TAB: "listtab",
    LevelSuffix.SPACE: "space",
    LevelSuffix.NOTHING: "nothing",
}

_PLACEHOLDER = re.compile(r"%\d")


class NumberingStyleWriter(XMLStyleWriter):
    """Numbering style writer."""

    style_class = NumberingStyle

    def _write(self):
        xml_writer = self.xml_writer
        xml_writer.start_element("text:list-style")
        write_style_name(xml_writer, self.style.get_style_name())
        for level in self.style.get_levels():
            if level.format is NumberFormat.BULLET:
                xml_writer.start_element("text:list-level-style-bullet")
                xml_writer.write_attribute("text:level", level.level + 1)
                xml_writer.write_attribute("text:bullet-char", level.label_text() or "•")
            else:
                xml_writer.start_element("text:list-level-style-number")
                xml_writer.write_attribute("text:level", level.level + 1)
                self.write_label(level)
            self.write_level_properties(level)
            xml_writer.end_element()
        xml_writer.end_element()

    def write_label(self, level: NumberingLevel) -> None:
        """Split the label template around its placeholder into prefix and suffix."""
        xml_writer = self.xml_writer
        parts = _PLACEHOLDER.split(level.label_text())
        prefix, suffix = parts[0], parts[-1] if len(parts) > 1 else ""
        xml_writer.write_attribute_if(prefix, "style:num-prefix", prefix)
        xml_writer.write_attribute_if(suffix, "style:num-suffix", suffix)
        xml_writer.write_attribute("style:num-format", NUM_FORMATS.get(level.format or NumberFormat.DECIMAL, "1"))
        if level.start is not None and level.start != 1:
            xml_writer.write_attribute("text:start-value", level.start)
        if len(parts) > 2:
            xml_writer.write_attribute("text:display-levels", len(parts) - 1)

    def write_level_properties(self, level: NumberingLevel) -> None:
        xml_writer = self.xml_writer
        xml_writer.start_element("style:list-level-properties")
        xml_writer.write_attribute("text:list-level-position-and-space-mode", "label-alignment")
        if level.alignment is not None:
            xml_writer.write_attribute("fo:text-align", level.alignment.value)
        xml_writer.start_element("style:list-level-label-alignment")
        xml_writer.write_attribute("text:label-followed-by", FOLLOWED_BY[level.suffix or LevelSuffix.TAB])
        self.write_measure("text:list-tab-stop-position", level.tab_pos)
        if level.hanging:
            xml_writer.write_attribute("fo:text-indent", self.units.to_inch_string(-level.hanging))
        self.write_measure("fo:margin-left", level.left)
        xml_writer.end_element()
        xml_writer.end_element()
