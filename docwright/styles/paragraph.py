"""
Paragraph style for Docwright documents.

Every measurement is stored in twips. An attribute left at None means
"not set here, inherit from the parent style".
"""

from typing import Any, Callable, List, Mapping, Optional
import logging

from ..exceptions import InvalidStyleValueError
from ..utils.enums import Alignment, BreakKind, BreakPosition, StyleFamily
from .abstract_style import (
    AbstractStyle,
    to_bool,
    to_color,
    to_enum,
    to_int,
    to_measure,
    to_name,
)
from .borders import BORDER_KEY, PADDING_KEY, Border, Padding
from .tab import Tab

logger = logging.getLogger(__name__)


class ParagraphStyle(AbstractStyle):
    """
    Represents paragraph formatting: spacing, alignment, breaks, borders,
    padding and tab stops.

    Spacing naming follows the document model: ``space_above`` and
    ``space_below`` are the vertical gaps, ``space_before`` and
    ``space_after`` the start and end margins.
    """

    family = StyleFamily.PARAGRAPH

    STYLE_KEYS = {
        "based_on": "set_based_on",
        "next": "set_next",
        "alignment": "set_alignment",
        "space_above": "set_space_above",
        "space_below": "set_space_below",
        "space_before": "set_space_before",
        "space_after": "set_space_after",
        "indent": "set_indent",
        "line_height": "set_line_height",
        "justify_single_word": "set_justify_single_word",
        "keep_next": "set_keep_next",
        "keep_lines": "set_keep_lines",
        "widow_control": "set_widow_control",
        "hyphenation_ladder_count": "set_hyphenation_ladder_count",
        "break_kind": "set_break_kind",
        "break_position": "set_break_position",
        "page_break_before": "set_page_break_before",
        "page_number": "set_page_number",
        "page_style": "set_page_style",
        "background_color": "set_background_color",
        "bg_color": "set_background_color",
        "tabs": "set_tabs",
        "bidi": "set_bidi",
        "auto": "set_auto",
        "font": "set_font",
    }

    def __init__(self):
        super().__init__()
        self.based_on: Optional[str] = None
        self.next: Optional[str] = None
        self.alignment: Optional[Alignment] = None
        self.space_above = None
        self.space_below = None
        self.space_before = None
        self.space_after = None
        self.indent = None
        self.line_height = None
        self.justify_single_word: Optional[bool] = None
        self.keep_next: Optional[bool] = None
        self.keep_lines: Optional[bool] = None
        self.widow_control: Optional[bool] = None
        self.hyphenation_ladder_count: Optional[int] = None
        self.break_kind: BreakKind = BreakKind.AUTO
        self.break_position: BreakPosition = BreakPosition.UNSET
        self.page_number: Optional[int] = None
        self.page_style: Optional[str] = None
        self.background_color: Optional[str] = None
        self.border = Border()
        self.padding = Padding()
        self.tabs: List[Tab] = []
        self.bidi: Optional[bool] = None
        self.font = None

    def _find_setter(self, key: Optional[str]) -> Optional[Callable[[Any], Any]]:
        setter = super()._find_setter(key)
        if setter is not None or key is None:
            return setter

        match = BORDER_KEY.match(key)
        if match:
            side, attribute = match.groups()
            return lambda value: self.border.set(side, attribute, value)

        match = PADDING_KEY.match(key)
        if match:
            side = match.group(1)
            return lambda value: self.padding.set(side, value)

        return None

    def set_based_on(self, value: Optional[str]):
        """Set the parent style name (a lookup key, resolved at write time)."""
        self.based_on = to_name(value, "Based-on style")
        return self

    def set_next(self, value: Optional[str]):
        self.next = to_name(value, "Next style")
        return self

    def set_alignment(self, value):
        """
        Set paragraph alignment.

        Args:
            value: Alignment enum or one of left, center, right, justify,
                start, end, distribute (None clears it)
        """
        self.alignment = None if value is None else to_enum(Alignment, value, "alignment")
        return self

    def set_space_above(self, value):
        self.space_above = to_measure(value, "Space above")
        return self

    def set_space_below(self, value):
        self.space_below = to_measure(value, "Space below")
        return self

    def set_space_before(self, value):
        self.space_before = to_measure(value, "Space before")
        return self

    def set_space_after(self, value):
        self.space_after = to_measure(value, "Space after")
        return self

    def set_indent(self, value):
        """First-line indent in twips; negative values hang."""
        self.indent = to_measure(value, "Indent", allow_negative=True)
        return self

    def set_line_height(self, value):
        """Line height as a percentage of single spacing."""
        value = to_measure(value, "Line height")
        if value == 0:
            raise InvalidStyleValueError("Line height must be positive", details="0")
        self.line_height = value
        return self

    def set_justify_single_word(self, value):
        self.justify_single_word = to_bool(value, "Justify single word")
        return self

    def set_keep_next(self, value):
        self.keep_next = to_bool(value, "Keep with next")
        return self

    def set_keep_lines(self, value):
        self.keep_lines = to_bool(value, "Keep lines together")
        return self

    def set_widow_control(self, value):
        self.widow_control = to_bool(value, "Widow control")
        return self

    def set_hyphenation_ladder_count(self, value):
        self.hyphenation_ladder_count = to_int(value, "Hyphenation ladder count", minimum=0)
        return self

    def set_break_kind(self, value):
        self.break_kind = to_enum(BreakKind, BreakKind.AUTO if value is None else value, "break kind")
        return self

    def set_break_position(self, value):
        self.break_position = to_enum(
            BreakPosition, BreakPosition.UNSET if value is None else value, "break position"
        )
        return self

    def set_page_break_before(self, value):
        """Shortcut for a page break before the paragraph."""
        if to_bool(value, "Page break before"):
            self.break_kind = BreakKind.PAGE
            self.break_position = BreakPosition.BEFORE
        elif self.break_position is BreakPosition.BEFORE:
            self.break_kind = BreakKind.AUTO
            self.break_position = BreakPosition.UNSET
        return self

    def has_page_break(self) -> bool:
        return self.break_position is not BreakPosition.UNSET and self.break_kind is BreakKind.PAGE

    def set_page_number(self, value):
        """Restart page numbering at ``value`` when the paragraph breaks a page."""
        self.page_number = to_int(value, "Page number", minimum=1)
        return self

    def set_page_style(self, value):
        self.page_style = to_name(value, "Page style")
        return self

    def set_background_color(self, value):
        self.background_color = to_color(value, "Background color")
        return self

    def set_tabs(self, value):
        """
        Set tab stops.

        Args:
            value: Sequence of Tab objects, mappings or (type, position, leader) tuples
        """
        if value is None:
            self.tabs = []
            return self
        if isinstance(value, (str, bytes)) or not hasattr(value, "__iter__"):
            raise InvalidStyleValueError("Tabs must be a sequence", details=repr(value))
        self.tabs = [Tab.from_value(tab) for tab in value]
        return self

    def set_bidi(self, value):
        self.bidi = to_bool(value, "Bidi")
        return self

    def set_font(self, value):
        """
        Attach a font sub-style written inside this paragraph style.

        Args:
            value: FontStyle, mapping of font values, or None
        """
        from .font import FontStyle

        if value is None or isinstance(value, FontStyle):
            self.font = value
        elif isinstance(value, Mapping):
            self.font = FontStyle().set_style_by_array(value)
        else:
            raise InvalidStyleValueError("Font must be a FontStyle or a mapping", details=repr(value))
        return self
