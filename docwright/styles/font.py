"""
Font (character) style for Docwright documents.

A font style is registered for a usage (plain text, hyperlinks or titles)
and may point at a paragraph style. The pointer is either a style name,
looked up in the style bag when the document is written, or an inline
paragraph style owned by this font style.
"""

from typing import Any, Mapping, Optional, Union
import logging
import re

from ..exceptions import InvalidStyleValueError
from ..utils.enums import FontUsage, StyleFamily, UnderlineType
from .abstract_style import (
    AbstractStyle,
    to_bool,
    to_color,
    to_enum,
    to_int,
    to_measure,
    to_name,
)

logger = logging.getLogger(__name__)

_LANGUAGE_TAG = re.compile(r"^[A-Za-z]{2,3}(-[A-Za-z0-9]{2,8})*$")


class FontStyle(AbstractStyle):
    """
    Represents character formatting.
    """

    family = StyleFamily.FONT

    STYLE_KEYS = {
        "based_on": "set_based_on",
        "paragraph": "set_paragraph",
        "paragraph_style": "set_paragraph",
        "name": "set_name",
        "size": "set_size",
        "color": "set_color",
        "bold": "set_bold",
        "italic": "set_italic",
        "underline": "set_underline",
        "strikethrough": "set_strikethrough",
        "double_strikethrough": "set_double_strikethrough",
        "superscript": "set_superscript",
        "subscript": "set_subscript",
        "small_caps": "set_small_caps",
        "all_caps": "set_all_caps",
        "bg_color": "set_bg_color",
        "hidden": "set_hidden",
        "rtl": "set_rtl",
        "lang": "set_lang",
        "spacing": "set_spacing",
        "scale": "set_scale",
    }

    def __init__(self, usage: Union[FontUsage, str] = FontUsage.TEXT, paragraph=None):
        """
        Initialize font style.

        Args:
            usage: text, link or title
            paragraph: Paragraph style name, ParagraphStyle, mapping or None
        """
        super().__init__()
        self.usage: FontUsage = to_enum(FontUsage, usage, "font usage")
        self.based_on: Optional[str] = None
        self.paragraph_style_name: Optional[str] = None
        self.paragraph = None
        self.name: Optional[str] = None
        self.size = None
        self.color: Optional[str] = None
        self.bold: Optional[bool] = None
        self.italic: Optional[bool] = None
        self.underline: Optional[UnderlineType] = None
        self.strikethrough: Optional[bool] = None
        self.double_strikethrough: Optional[bool] = None
        self.superscript: Optional[bool] = None
        self.subscript: Optional[bool] = None
        self.small_caps: Optional[bool] = None
        self.all_caps: Optional[bool] = None
        self.bg_color: Optional[str] = None
        self.hidden: Optional[bool] = None
        self.rtl: Optional[bool] = None
        self.lang: Optional[str] = None
        self.spacing = None
        self.scale: Optional[int] = None

        if paragraph is not None:
            self.set_paragraph(paragraph)

    def set_based_on(self, value: Optional[str]):
        self.based_on = to_name(value, "Based-on style")
        return self

    def set_paragraph(self, value):
        """
        Set the paragraph style this font style applies with.

        Args:
            value: Style name (weak reference), ParagraphStyle or mapping
                (inline paragraph style), or None to clear
        """
        from .paragraph import ParagraphStyle

        self.paragraph_style_name = None
        self.paragraph = None
        if value is None:
            return self
        if isinstance(value, str):
            self.paragraph_style_name = to_name(value, "Paragraph style name")
        elif isinstance(value, ParagraphStyle):
            self.paragraph = value
        elif isinstance(value, Mapping):
            self.paragraph = ParagraphStyle().set_style_by_array(value)
        else:
            raise InvalidStyleValueError(
                "Paragraph must be a style name, ParagraphStyle or mapping", details=repr(value)
            )
        return self

    def has_paragraph(self) -> bool:
        return self.paragraph is not None or self.paragraph_style_name is not None

    def set_name(self, value: Optional[str]):
        """Set the font family name."""
        self.name = to_name(value, "Font name")
        return self

    def set_size(self, value):
        """Set the font size in points."""
        value = to_measure(value, "Font size")
        if value == 0:
            raise InvalidStyleValueError("Font size must be positive", details="0")
        self.size = value
        return self

    def set_color(self, value):
        self.color = to_color(value, "Font color")
        return self

    def set_bold(self, value):
        self.bold = to_bool(value, "Bold")
        return self

    def set_italic(self, value):
        self.italic = to_bool(value, "Italic")
        return self

    def set_underline(self, value):
        """
        Set underline kind.

        Args:
            value: UnderlineType, its string value, True (single) or False (none)
        """
        if isinstance(value, bool):
            value = UnderlineType.SINGLE if value else UnderlineType.NONE
        self.underline = None if value is None else to_enum(UnderlineType, value, "underline")
        return self

    def set_strikethrough(self, value):
        self.strikethrough = to_bool(value, "Strikethrough")
        if self.strikethrough:
            self.double_strikethrough = False
        return self

    def set_double_strikethrough(self, value):
        self.double_strikethrough = to_bool(value, "Double strikethrough")
        if self.double_strikethrough:
            self.strikethrough = False
        return self

    def set_superscript(self, value):
        self.superscript = to_bool(value, "Superscript")
        if self.superscript:
            self.subscript = False
        return self

    def set_subscript(self, value):
        self.subscript = to_bool(value, "Subscript")
        if self.subscript:
            self.superscript = False
        return self

    def set_small_caps(self, value):
        self.small_caps = to_bool(value, "Small caps")
        if self.small_caps:
            self.all_caps = False
        return self

    def set_all_caps(self, value):
        self.all_caps = to_bool(value, "All caps")
        if self.all_caps:
            self.small_caps = False
        return self

    def set_bg_color(self, value):
        self.bg_color = to_color(value, "Background color")
        return self

    def set_hidden(self, value):
        self.hidden = to_bool(value, "Hidden")
        return self

    def set_rtl(self, value):
        self.rtl = to_bool(value, "Right to left")
        return self

    def set_lang(self, value):
        """Set the language tag, e.g. ``en-US``."""
        value = to_name(value, "Language")
        if value is not None and not _LANGUAGE_TAG.match(value):
            raise InvalidStyleValueError("Invalid language tag", details=repr(value))
        self.lang = value
        return self

    def set_spacing(self, value):
        """Character spacing in twips; negative values condense."""
        self.spacing = to_measure(value, "Character spacing", allow_negative=True)
        return self

    def set_scale(self, value):
        """Horizontal scale in percent."""
        self.scale = to_int(value, "Scale", minimum=1)
        return self

    def to_dict(self):
        data = super().to_dict()
        data["usage"] = self.usage.value
        return data
