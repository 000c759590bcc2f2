"""
Table style for Docwright documents.

A table style is built from two maps at construction: the table-wide
values and, optionally, the values for the first row. The first row is
kept as a nested table style.
"""

from typing import Any, Callable, Mapping, Optional
import logging
import re

from ..exceptions import InvalidStyleValueError
from ..utils.enums import StyleFamily, TableAlignment, TableLayout, WidthUnit
from .abstract_style import AbstractStyle, to_bool, to_color, to_enum, to_measure
from .borders import BORDER_KEY, Border, BorderSide, Padding

logger = logging.getLogger(__name__)

INSIDE_BORDER_KEY = re.compile(r"^border_inside_(h|v)_(size|color|style)$")
CELL_MARGIN_KEY = re.compile(r"^cell_margin(?:_(top|left|right|bottom))?$")


class TableStyle(AbstractStyle):
    """
    Represents table formatting and an optional first-row override.
    """

    family = StyleFamily.TABLE

    STYLE_KEYS = {
        "alignment": "set_alignment",
        "width": "set_width",
        "unit": "set_unit",
        "layout": "set_layout",
        "bg_color": "set_bg_color",
        "cell_spacing": "set_cell_spacing",
        "indent": "set_indent",
        "bidi": "set_bidi",
    }

    def __init__(self, table_style: Optional[Mapping[str, Any]] = None,
                 first_row_style: Optional[Mapping[str, Any]] = None):
        """
        Initialize table style.

        Args:
            table_style: Table-wide style values
            first_row_style: First row style values
        """
        super().__init__()
        self.alignment: Optional[TableAlignment] = None
        self.width = None
        self.unit: WidthUnit = WidthUnit.AUTO
        self.layout: Optional[TableLayout] = None
        self.bg_color: Optional[str] = None
        self.border = Border()
        self.border_inside_h = BorderSide()
        self.border_inside_v = BorderSide()
        self.cell_margin = Padding()
        self.cell_spacing = None
        self.indent = None
        self.bidi: Optional[bool] = None
        self.first_row: Optional["TableStyle"] = None
        self.is_first_row = False

        if table_style is not None:
            self.set_style_by_array(table_style)
        if first_row_style is not None:
            self.set_first_row(first_row_style)

    def _find_setter(self, key: Optional[str]) -> Optional[Callable[[Any], Any]]:
        setter = super()._find_setter(key)
        if setter is not None or key is None:
            return setter

        match = INSIDE_BORDER_KEY.match(key)
        if match:
            direction, attribute = match.groups()
            side = self.border_inside_h if direction == "h" else self.border_inside_v
            return lambda value: side.set(attribute, value)

        match = BORDER_KEY.match(key)
        if match:
            side, attribute = match.groups()
            return lambda value: self.border.set(side, attribute, value)

        match = CELL_MARGIN_KEY.match(key)
        if match:
            side = match.group(1)
            return lambda value: self.cell_margin.set(side, value)

        return None

    def set_first_row(self, values: Mapping[str, Any]):
        """
        Build the first-row style. Borders the first row leaves unset are
        taken from the table.
        """
        if not isinstance(values, Mapping):
            raise InvalidStyleValueError("First row style must be a mapping", details=repr(values))
        first_row = TableStyle(values)
        first_row.is_first_row = True
        first_row.border.copy_missing_from(self.border)
        self.first_row = first_row
        return self

    def set_alignment(self, value):
        self.alignment = None if value is None else to_enum(TableAlignment, value, "table alignment")
        return self

    def set_width(self, value):
        """Table width, in twips or fiftieths of a percent depending on ``unit``."""
        self.width = to_measure(value, "Table width")
        return self

    def set_unit(self, value):
        self.unit = to_enum(WidthUnit, WidthUnit.AUTO if value is None else value, "width unit")
        return self

    def set_layout(self, value):
        self.layout = None if value is None else to_enum(TableLayout, value, "table layout")
        return self

    def set_bg_color(self, value):
        self.bg_color = to_color(value, "Background color")
        return self

    def set_cell_spacing(self, value):
        self.cell_spacing = to_measure(value, "Cell spacing")
        return self

    def set_indent(self, value):
        self.indent = to_measure(value, "Table indent", allow_negative=True)
        return self

    def set_bidi(self, value):
        self.bidi = to_bool(value, "Bidi")
        return self
