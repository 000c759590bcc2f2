"""Helpers shared by the CSS style writers."""

from typing import List, Optional, Tuple
import re

from ....styles.borders import SIDES, BorderSide
from ....utils.enums import BorderStyle
from ....utils.units import format_number

_CLASS_UNSAFE = re.compile(r"[^A-Za-z0-9_-]")

BORDER_STYLES = {
    BorderStyle.NONE: "none",
    BorderStyle.SINGLE: "solid",
    BorderStyle.DOUBLE: "double",
    BorderStyle.DOTTED: "dotted",
    BorderStyle.DASHED: "dashed",
}

Declarations = List[Tuple[str, str]]


def class_name(style_name: str) -> str:
    """CSS class for a style name."""
    name = _CLASS_UNSAFE.sub("_", style_name)
    return f"s{name}" if not name or name[0].isdigit() or name[0] == "-" else name


def points(twips) -> str:
    return f"{format_number(twips / 20)}pt"


def border_value(side: BorderSide) -> str:
    if side.style is BorderStyle.NONE:
        return "none"
    width = points(side.size) if side.size else "1px"
    return f"{width} {BORDER_STYLES.get(side.style, 'solid')} #{side.color or '000000'}"


def border_declarations(border, prefix: str = "border") -> Declarations:
    declarations: Declarations = []
    for side in SIDES:
        value = border.side(side)
        if not value.is_empty():
            declarations.append((f"{prefix}-{side}", border_value(value)))
    return declarations


def padding_declarations(padding, prefix: str = "padding") -> Declarations:
    return [(f"{prefix}-{side}", points(padding.get(side))) for side in SIDES if padding.get(side)]


def format_declarations(declarations: Declarations) -> str:
    return "; ".join(f"{name}: {value}" for name, value in declarations)


def measure(declarations: Declarations, name: str, twips: Optional[float]) -> None:
    """Append a length declaration when the value is set and non-zero."""
    if twips:
        declarations.append((name, points(twips)))
