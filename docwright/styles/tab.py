"""Tab stop definition for paragraph styles."""

from typing import Any, Mapping, Sequence, Union

from ..exceptions import InvalidStyleValueError
from ..utils.enums import TabLeader, TabType
from .abstract_style import StyleValues, to_enum, to_measure


class Tab(StyleValues):
    """A single tab stop: alignment type, position in twips and leader."""

    STYLE_KEYS = {
        "type": "set_type",
        "position": "set_position",
        "leader": "set_leader",
    }

    def __init__(self, type=TabType.LEFT, position=0, leader=TabLeader.NONE):
        self.type = TabType.LEFT
        self.position = 0
        self.leader = TabLeader.NONE
        self.set_type(type)
        self.set_position(position)
        self.set_leader(leader)

    def set_type(self, value) -> None:
        self.type = to_enum(TabType, value, "tab type")

    def set_position(self, value) -> None:
        position = to_measure(value, "Tab position")
        if position is None:
            raise InvalidStyleValueError("Tab position is required")
        self.position = position

    def set_leader(self, value) -> None:
        self.leader = to_enum(TabLeader, TabLeader.NONE if value is None else value, "tab leader")

    @classmethod
    def from_value(cls, value: Union["Tab", Mapping[str, Any], Sequence[Any]]) -> "Tab":
        """Build a tab from a Tab, a mapping or a (type, position, leader) sequence."""
        if isinstance(value, Tab):
            return value
        if isinstance(value, Mapping):
            return cls().set_style_by_array(value)
        if isinstance(value, (list, tuple)) and 1 <= len(value) <= 3:
            return cls(*value)
        raise InvalidStyleValueError("Invalid tab definition", details=repr(value))

    def __repr__(self) -> str:
        return f"Tab({self.type.value!r}, {self.position}, {self.leader.value!r})"
