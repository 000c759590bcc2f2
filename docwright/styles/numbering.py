"""
Numbering (list) style for Docwright documents.
"""

from typing import Any, Dict, List, Mapping, Optional
import logging

from ..exceptions import InvalidStyleValueError
from ..utils.enums import Alignment, LevelSuffix, NumberFormat, NumberingType, StyleFamily
from .abstract_style import (
    AbstractStyle,
    StyleValues,
    to_enum,
    to_int,
    to_measure,
    to_name,
)

logger = logging.getLogger(__name__)

MAX_LEVEL = 8


class NumberingLevel(StyleValues):
    """One level (0-8) of a numbering definition."""

    STYLE_KEYS = {
        "level": "set_level",
        "start": "set_start",
        "format": "set_format",
        "restart": "set_restart",
        "p_style": "set_p_style",
        "suffix": "set_suffix",
        "text": "set_text",
        "alignment": "set_alignment",
        "left": "set_left",
        "hanging": "set_hanging",
        "tab_pos": "set_tab_pos",
        "font": "set_font",
    }

    def __init__(self, level: int = 0):
        self.level = 0
        self.start = 1
        self.format: Optional[NumberFormat] = None
        self.restart: Optional[int] = None
        self.p_style: Optional[str] = None
        self.suffix: Optional[LevelSuffix] = None
        self.text: Optional[str] = None
        self.alignment: Optional[Alignment] = None
        self.left = None
        self.hanging = None
        self.tab_pos = None
        self.font: Optional[str] = None
        self.set_level(level)

    def set_level(self, value):
        level = to_int(value, "Numbering level", minimum=0)
        if level is None or level > MAX_LEVEL:
            raise InvalidStyleValueError(f"Numbering level must be between 0 and {MAX_LEVEL}", details=repr(value))
        self.level = level
        return self

    def set_start(self, value):
        self.start = to_int(value, "Start value", minimum=0)
        return self

    def set_format(self, value):
        self.format = None if value is None else to_enum(NumberFormat, value, "number format")
        return self

    def set_restart(self, value):
        self.restart = to_int(value, "Restart level", minimum=0)
        return self

    def set_p_style(self, value):
        self.p_style = to_name(value, "Paragraph style")
        return self

    def set_suffix(self, value):
        self.suffix = None if value is None else to_enum(LevelSuffix, value, "level suffix")
        return self

    def set_text(self, value):
        """Label template such as ``%1.`` (``%N`` is replaced by level N's number)."""
        if value is not None and not isinstance(value, str):
            raise InvalidStyleValueError("Level text must be a string", details=repr(value))
        self.text = value
        return self

    def set_alignment(self, value):
        self.alignment = None if value is None else to_enum(Alignment, value, "alignment")
        return self

    def set_left(self, value):
        self.left = to_measure(value, "Left indent")
        return self

    def set_hanging(self, value):
        self.hanging = to_measure(value, "Hanging indent")
        return self

    def set_tab_pos(self, value):
        self.tab_pos = to_measure(value, "Tab position")
        return self

    def set_font(self, value):
        self.font = to_name(value, "Font name")
        return self

    def label_text(self) -> str:
        """Label template, defaulting to ``%N.`` for numbers and a bullet otherwise."""
        if self.text is not None:
            return self.text
        if self.format is NumberFormat.BULLET:
            return "•"
        return f"%{self.level + 1}."


class NumberingStyle(AbstractStyle):
    """
    Represents a list definition with up to nine levels.

    Writers use the style index as the numbering id.
    """

    family = StyleFamily.NUMBERING

    STYLE_KEYS = {
        "type": "set_type",
        "levels": "set_levels",
    }

    def __init__(self):
        super().__init__()
        self.type: Optional[NumberingType] = None
        self.levels: Dict[int, NumberingLevel] = {}

    def set_type(self, value):
        self.type = None if value is None else to_enum(NumberingType, value, "numbering type")
        return self

    def set_levels(self, values):
        """
        Set levels.

        Args:
            values: Sequence of NumberingLevel objects or mappings; a mapping
                without ``level`` takes its position in the sequence
        """
        if isinstance(values, (str, bytes, Mapping)) or not hasattr(values, "__iter__"):
            raise InvalidStyleValueError("Levels must be a sequence", details=repr(values))
        levels: Dict[int, NumberingLevel] = {}
        for position, value in enumerate(values):
            if isinstance(value, NumberingLevel):
                level = value
            elif isinstance(value, Mapping):
                level = NumberingLevel(position).set_style_by_array(value)
            else:
                raise InvalidStyleValueError("Invalid numbering level", details=repr(value))
            levels[level.level] = level
        self.levels = dict(sorted(levels.items()))
        return self

    def get_levels(self) -> List[NumberingLevel]:
        return list(self.levels.values())

    @property
    def num_id(self) -> Optional[int]:
        return self.index
