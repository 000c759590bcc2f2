"""
Abstract style for Docwright documents.

Holds the identity every registered style carries (name and one-based
index) and the generic "apply a map of key -> value" operation that routes
each recognized key to a validating setter.
"""

from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Type
import logging
import math
import re

from ..exceptions import InvalidStyleValueError
from ..utils.enums import StyleFamily

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")
_HEX_COLOR = re.compile(r"^[0-9A-Fa-f]{6}$")


def normalize_style_key(key: Any) -> Optional[str]:
    """
    Normalize a style key to snake_case.

    ``space-above``, ``space_above`` and ``spaceAbove`` all map to
    ``space_above``. Non-string keys normalize to None.
    """
    if not isinstance(key, str) or not key:
        return None
    return _CAMEL_BOUNDARY.sub(r"_\1", key).replace("-", "_").lower()


def to_enum(enum_cls: Type[Enum], value: Any, label: str) -> Enum:
    """Coerce ``value`` into ``enum_cls`` or raise InvalidStyleValueError."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidStyleValueError(
            f"Invalid {label}", details=f"{value!r} (expected one of: {allowed})"
        ) from None


def to_measure(value: Any, label: str, allow_negative: bool = False):
    """Validate a twip measurement. None means unset."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidStyleValueError(f"{label} must be a number", details=repr(value))
    if not math.isfinite(value):
        raise InvalidStyleValueError(f"{label} must be finite", details=repr(value))
    if value < 0 and not allow_negative:
        raise InvalidStyleValueError(f"{label} must not be negative", details=repr(value))
    return value


def to_int(value: Any, label: str, minimum: int = 0) -> Optional[int]:
    """Validate an integer with a lower bound. None means unset."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidStyleValueError(f"{label} must be an integer", details=repr(value))
    if value < minimum:
        raise InvalidStyleValueError(f"{label} must be >= {minimum}", details=repr(value))
    return value


def to_bool(value: Any, label: str) -> Optional[bool]:
    """Validate a tri-state flag. None means unset."""
    if value is None or isinstance(value, bool):
        return value
    raise InvalidStyleValueError(f"{label} must be a boolean", details=repr(value))


def to_color(value: Any, label: str) -> Optional[str]:
    """Validate a 6-digit hex color; a leading ``#`` is accepted and dropped."""
    if value is None:
        return None
    if not isinstance(value, str) or not _HEX_COLOR.match(value.lstrip("#")):
        raise InvalidStyleValueError(f"{label} must be a 6-digit hex color", details=repr(value))
    return value.lstrip("#").upper()


def to_name(value: Any, label: str) -> Optional[str]:
    """Validate a non-empty name. None means unset."""
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise InvalidStyleValueError(f"{label} must be a non-empty string", details=repr(value))
    return value


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    return value


class StyleValues:
    """
    Generic map application shared by styles and their sub-objects.

    Subclasses declare ``STYLE_KEYS``, a mapping of normalized key to the
    name of the setter that handles it.
    """

    STYLE_KEYS: Dict[str, str] = {}

    def set_style_by_array(self, values: Mapping[str, Any]):
        """
        Apply a map of style values.

        Recognized keys go through their setter; unrecognized keys are
        ignored and traced at DEBUG level.

        Args:
            values: Mapping of style key to value

        Returns:
            self
        """
        if not isinstance(values, Mapping):
            raise InvalidStyleValueError(
                "Style values must be a mapping", details=type(values).__name__
            )
        for key, value in values.items():
            self.set_style_value(key, value)
        return self

    def set_style_value(self, key: str, value: Any) -> bool:
        """
        Apply a single style value.

        Returns:
            True if the key was recognized, False if it was ignored
        """
        setter = self._find_setter(normalize_style_key(key))
        if setter is None:
            logger.debug(f"Ignoring unrecognized style key {key!r} on {self.__class__.__name__}")
            return False
        setter(value)
        return True

    def _find_setter(self, key: Optional[str]) -> Optional[Callable[[Any], Any]]:
        method_name = self.STYLE_KEYS.get(key) if key else None
        return getattr(self, method_name) if method_name else None

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data snapshot of the public attributes."""
        return {
            key: _plain(value)
            for key, value in vars(self).items()
            if not key.startswith("_")
        }


class AbstractStyle(StyleValues):
    """
    Base class for every style family kept in a style bag.
    """

    family: Optional[StyleFamily] = None

    def __init__(self):
        self.style_name: Optional[str] = None
        self.index: Optional[int] = None
        self.is_auto: bool = False

    def get_style_name(self) -> Optional[str]:
        return self.style_name

    def set_style_name(self, style_name: str):
        """
        Set style name.

        Args:
            style_name: Non-empty style name
        """
        self.style_name = to_name(style_name, "Style name")
        if self.style_name is None:
            raise InvalidStyleValueError("Style name must be a non-empty string")
        return self

    def get_index(self) -> Optional[int]:
        return self.index

    def set_index(self, index: int):
        """
        Set the one-based registration index.

        Args:
            index: Positive index
        """
        self.index = to_int(index, "Style index", minimum=1)
        if self.index is None:
            raise InvalidStyleValueError("Style index must be an integer")
        return self

    def set_auto(self, value: bool):
        """Mark the style as synthetic (not authored by the user)."""
        self.is_auto = bool(to_bool(value, "Auto flag"))
        return self

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["family"] = self.family.value if self.family else None
        return data

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.style_name!r}, index={self.index})"
