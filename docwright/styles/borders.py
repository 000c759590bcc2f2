"""
Border and padding sub-structures shared by paragraph and table styles.

Every side is nullable; a structure with no side set produces no markup.
"""

from typing import Any, Dict, Optional
import re

from ..exceptions import InvalidStyleValueError
from ..utils.enums import BorderStyle
from .abstract_style import to_color, to_enum, to_measure

SIDES = ("top", "left", "right", "bottom")

BORDER_KEY = re.compile(r"^border(?:_(top|left|right|bottom))?_(size|color|style)$")
PADDING_KEY = re.compile(r"^padding(?:_(top|left|right|bottom))?$")


class BorderSide:
    """One border edge: width in twips, hex color and line style."""

    def __init__(self, size=None, color: Optional[str] = None, style=None):
        self.size = None
        self.color: Optional[str] = None
        self.style: Optional[BorderStyle] = None
        self.set_size(size)
        self.set_color(color)
        self.set_style(style)

    def set_size(self, size) -> None:
        self.size = to_measure(size, "Border size")

    def set_color(self, color: Optional[str]) -> None:
        self.color = to_color(color, "Border color")

    def set_style(self, style) -> None:
        self.style = None if style is None else to_enum(BorderStyle, style, "border style")

    def set(self, attribute: str, value: Any) -> None:
        getattr(self, f"set_{attribute}")(value)

    def is_empty(self) -> bool:
        return self.size is None and self.color is None and self.style is None

    def key(self):
        return (self.size, self.color, self.style)

    def copy(self) -> "BorderSide":
        return BorderSide(self.size, self.color, self.style)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "color": self.color,
            "style": self.style.value if self.style else None,
        }


class Border:
    """Four border sides."""

    def __init__(self):
        self.top = BorderSide()
        self.left = BorderSide()
        self.right = BorderSide()
        self.bottom = BorderSide()

    def side(self, name: str) -> BorderSide:
        if name not in SIDES:
            raise InvalidStyleValueError("Invalid border side", details=repr(name))
        return getattr(self, name)

    def set(self, side: Optional[str], attribute: str, value: Any) -> None:
        """
        Set one attribute on one side, or on all sides when ``side`` is None.

        Args:
            side: top/left/right/bottom or None
            attribute: size, color or style
            value: Attribute value
        """
        for name in (SIDES if side is None else (side,)):
            self.side(name).set(attribute, value)

    def is_empty(self) -> bool:
        return all(self.side(name).is_empty() for name in SIDES)

    def is_uniform(self) -> bool:
        """True when all four sides are set and identical."""
        keys = {self.side(name).key() for name in SIDES}
        return len(keys) == 1 and not self.top.is_empty()

    def copy_missing_from(self, other: "Border") -> None:
        for name in SIDES:
            if self.side(name).is_empty():
                setattr(self, name, other.side(name).copy())

    def to_dict(self) -> Dict[str, Any]:
        return {name: self.side(name).to_dict() for name in SIDES}


class Padding:
    """Four nullable padding widths in twips."""

    def __init__(self):
        self.top = None
        self.left = None
        self.right = None
        self.bottom = None

    def set(self, side: Optional[str], value: Any) -> None:
        value = to_measure(value, "Padding")
        for name in (SIDES if side is None else (side,)):
            if name not in SIDES:
                raise InvalidStyleValueError("Invalid padding side", details=repr(name))
            setattr(self, name, value)

    def get(self, side: str):
        return getattr(self, side)

    def is_empty(self) -> bool:
        return all(not self.get(name) for name in SIDES)

    def to_dict(self) -> Dict[str, Any]:
        return {name: self.get(name) for name in SIDES}
