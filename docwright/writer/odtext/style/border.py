"""
Padding and border attributes for ODF formatting properties.

Both routines receive the whole style object and decide on their own
whether anything is written; an empty structure writes nothing.
"""

from typing import Optional

from ....styles.borders import SIDES, BorderSide
from ....utils.enums import BorderStyle
from ....utils.units import UnitsConverter, format_number, is_zero_length
from ...markup import XMLWriter

DEFAULT_BORDER_WIDTH = "0.06pt"

LINE_STYLES = {
    BorderStyle.SINGLE: "solid",
    BorderStyle.DOUBLE: "double",
    BorderStyle.DOTTED: "dotted",
    BorderStyle.DASHED: "dashed",
}


def border_value(side: BorderSide) -> str:
    """Render one side as an XSL-FO border shorthand, e.g. ``0.5pt solid #FF0000``."""
    if side.style is BorderStyle.NONE:
        return "none"
    width = f"{format_number(side.size / 20)}pt" if side.size else DEFAULT_BORDER_WIDTH
    line = LINE_STYLES.get(side.style, "solid")
    return f"{width} {line} #{side.color or '000000'}"


def write_padding_attributes(xml_writer: XMLWriter, style, units: Optional[UnitsConverter] = None,
                             attribute: str = "padding") -> None:
    """
    Write ``fo:padding`` (all sides equal) or per-side padding attributes.

    Args:
        xml_writer: Markup sink
        style: Style carrying a Padding structure
        units: Units converter
        attribute: Name of the Padding attribute on the style
    """
    padding = getattr(style, attribute)
    if padding.is_empty():
        return
    units = units or UnitsConverter()
    values = {side: units.to_inch_string(padding.get(side) or 0) for side in SIDES}
    if len(set(values.values())) == 1:
        if not is_zero_length(values["top"]):
            xml_writer.write_attribute("fo:padding", values["top"])
        return
    for side, value in values.items():
        if not is_zero_length(value):
            xml_writer.write_attribute(f"fo:padding-{side}", value)


def write_border_attributes(xml_writer: XMLWriter, style, attribute: str = "border") -> None:
    """
    Write ``fo:border`` (all sides identical) or per-side border attributes.

    Args:
        xml_writer: Markup sink
        style: Style carrying a Border structure
        attribute: Name of the Border attribute on the style
    """
    border = getattr(style, attribute)
    if border.is_empty():
        return
    if border.is_uniform():
        xml_writer.write_attribute("fo:border", border_value(border.top))
        return
    for side in SIDES:
        value = border.side(side)
        if not value.is_empty():
            xml_writer.write_attribute(f"fo:border-{side}", border_value(value))
