"""Shared pieces of OOXML properties: style ids, toggles, borders and shading."""

from typing import Optional, Sequence
import re

from ....styles.borders import Border, BorderSide, Padding
from ....utils.enums import BorderStyle
from ....utils.units import UnitsConverter
from ...markup import XMLWriter

# OOXML element order for paragraph and table borders
BORDER_SIDES = ("top", "left", "bottom", "right")

BORDER_VALUES = {
    BorderStyle.NONE: "nil",
    BorderStyle.SINGLE: "single",
    BorderStyle.DOUBLE: "double",
    BorderStyle.DOTTED: "dotted",
    BorderStyle.DASHED: "dashed",
}

_STYLE_ID_UNSAFE = re.compile(r"[^A-Za-z0-9_-]")


def style_id(style_name: str) -> str:
    """Style id for a style name: the name without characters OOXML ids cannot hold."""
    return _STYLE_ID_UNSAFE.sub("", style_name) or "Style"


def write_border_side(xml_writer: XMLWriter, name: str, side: BorderSide,
                      units: UnitsConverter, space=None) -> None:
    """Write one ``w:<side>`` border element; sizes in eighths of a point."""
    xml_writer.start_element(f"w:{name}")
    xml_writer.write_attribute("w:val", BORDER_VALUES.get(side.style, "single"))
    if side.size:
        xml_writer.write_attribute("w:sz", units.twip_to_eighth_point(side.size))
    xml_writer.write_attribute("w:space", int(round(units.twip_to_point(space))) if space else 0)
    xml_writer.write_attribute("w:color", side.color or "auto")
    xml_writer.end_element()


def write_borders(xml_writer: XMLWriter, element_name: str, border: Border, units: UnitsConverter,
                  padding: Optional[Padding] = None,
                  extra: Sequence = ()) -> None:
    """
    Write a border container (``w:pBdr``, ``w:tblBorders``, ``w:tcBorders``).

    Args:
        xml_writer: Markup sink
        element_name: Container element name
        border: Four outer sides
        units: Units converter
        padding: Padding written as the border's ``w:space``
        extra: Additional ``(name, BorderSide)`` pairs such as insideH
    """
    sides = [(name, border.side(name)) for name in BORDER_SIDES if not border.side(name).is_empty()]
    sides.extend((name, side) for name, side in extra if not side.is_empty())
    if not sides:
        return
    xml_writer.start_element(element_name)
    for name, side in sides:
        space = padding.get(name) if padding is not None and name in BORDER_SIDES else None
        write_border_side(xml_writer, name, side, units, space)
    xml_writer.end_element()


def write_shading(xml_writer: XMLWriter, fill: Optional[str]) -> None:
    if fill is None:
        return
    xml_writer.start_element("w:shd")
    xml_writer.write_attribute("w:val", "clear")
    xml_writer.write_attribute("w:color", "auto")
    xml_writer.write_attribute("w:fill", fill)
    xml_writer.end_element()


def write_on_off(xml_writer: XMLWriter, name: str, value: Optional[bool]) -> None:
    """Write an OOXML toggle: ``<w:b/>`` for True, ``<w:b w:val="0"/>`` for False."""
    if value is None:
        return
    xml_writer.start_element(name)
    if not value:
        xml_writer.write_attribute("w:val", "0")
    xml_writer.end_element()
