"""CSS numbering style writer."""

import logging

from ....styles.numbering import NumberingStyle
from ....utils.enums import NumberFormat
from ...base_writer import AbstractStyleWriter
from .css import measure

logger = logging.getLogger(__name__)

LIST_STYLE_TYPES = {
    NumberFormat.DECIMAL: "decimal",
    NumberFormat.UPPER_ROMAN: "upper-roman",
    NumberFormat.LOWER_ROMAN: "lower-roman",
    NumberFormat.UPPER_LETTER: "upper-alpha",
    NumberFormat.LOWER_LETTER: "lower-alpha",
    NumberFormat.BULLET: "disc",
    NumberFormat.NONE: "none",
}


class NumberingStyleWriter(AbstractStyleWriter):
    """
    Renders a numbering style as CSS rules, one per level. Level n
    applies to lists nested n deep inside the styled list.
    """

    style_class = NumberingStyle

    def _write(self):
        rules = {}
        for level in self.style.get_levels():
            declarations = [("list-style-type", LIST_STYLE_TYPES[level.format or NumberFormat.DECIMAL])]
            measure(declarations, "padding-left", level.left)
            rules[" ol" * level.level] = declarations
        return rules
