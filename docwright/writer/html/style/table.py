"""CSS table style writer."""

from typing import Dict, List
import logging

from ....styles.table import TableStyle
from ....utils.enums import WidthUnit
from ....utils.units import format_number
from ...base_writer import AbstractStyleWriter
from .css import Declarations, border_declarations, border_value, measure, padding_declarations

logger = logging.getLogger(__name__)

MARGINS = {"left": ("0", "auto"), "center": ("auto", "auto"), "right": ("auto", "0")}


class TableStyleWriter(AbstractStyleWriter):
    """
    Renders a table style as CSS rules.

    ``write`` returns a mapping of selector suffix (appended to the class
    selector) to declarations.
    """

    style_class = TableStyle

    def _write(self) -> Dict[str, Declarations]:
        style = self.style
        table: Declarations = []
        if style.width:
            if style.unit is WidthUnit.PERCENT:
                table.append(("width", f"{format_number(style.width / 50)}%"))
            elif style.unit is WidthUnit.TWIP:
                table.append(("width", f"{format_number(style.width / 20)}pt"))
        if style.alignment is not None:
            left, right = MARGINS[style.alignment.value]
            table.extend([("margin-left", left), ("margin-right", right)])
        measure(table, "margin-left", style.indent)
        if style.cell_spacing:
            table.append(("border-spacing", f"{format_number(style.cell_spacing / 20)}pt"))
        else:
            table.append(("border-collapse", "collapse"))
        if style.bg_color is not None:
            table.append(("background-color", f"#{style.bg_color}"))
        table.extend(border_declarations(style.border))
        if style.bidi:
            table.append(("direction", "rtl"))

        cell: Declarations = padding_declarations(style.cell_margin)
        if not style.border_inside_h.is_empty():
            cell.append(("border-bottom", border_value(style.border_inside_h)))
        if not style.border_inside_v.is_empty():
            cell.append(("border-right", border_value(style.border_inside_v)))

        rules: Dict[str, Declarations] = {"": table}
        if cell:
            rules[" td"] = cell
        if style.first_row is not None:
            first_row: List = border_declarations(style.first_row.border)
            if style.first_row.bg_color is not None:
                first_row.append(("background-color", f"#{style.first_row.bg_color}"))
            if first_row:
                rules[" tr:first-child td"] = first_row
        return rules
