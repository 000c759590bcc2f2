"""
Tests for FontStyle.
"""

import pytest

from docwright.exceptions import InvalidStyleValueError
from docwright.styles import FontStyle, ParagraphStyle
from docwright.utils.enums import FontUsage, UnderlineType


class TestFontStyle:
    """Test cases for FontStyle."""

    def test_defaults(self):
        style = FontStyle()

        assert style.usage is FontUsage.TEXT
        assert style.paragraph is None
        assert style.paragraph_style_name is None
        assert not style.has_paragraph()

    def test_paragraph_by_name(self):
        style = FontStyle(FontUsage.TITLE, "Heading")

        assert style.paragraph_style_name == "Heading"
        assert style.paragraph is None
        assert style.has_paragraph()

    def test_paragraph_inline_mapping(self):
        style = FontStyle(FontUsage.TEXT, {"alignment": "center"})

        assert isinstance(style.paragraph, ParagraphStyle)
        assert style.paragraph_style_name is None

    def test_invalid_paragraph(self):
        with pytest.raises(InvalidStyleValueError):
            FontStyle(FontUsage.TEXT, 42)

    def test_set_style_by_array(self):
        style = FontStyle().set_style_by_array({
            "name": "Georgia",
            "size": 11.5,
            "color": "#00ff00",
            "bold": True,
            "underline": "wave",
            "lang": "en-US",
        })

        assert style.name == "Georgia"
        assert style.size == 11.5
        assert style.color == "00FF00"
        assert style.underline is UnderlineType.WAVE
        assert style.lang == "en-US"

    def test_underline_from_bool(self):
        assert FontStyle().set_underline(True).underline is UnderlineType.SINGLE
        assert FontStyle().set_underline(False).underline is UnderlineType.NONE

    def test_superscript_and_subscript_exclusive(self):
        style = FontStyle().set_superscript(True).set_subscript(True)

        assert style.subscript is True
        assert style.superscript is False

    def test_caps_exclusive(self):
        style = FontStyle().set_all_caps(True).set_small_caps(True)

        assert style.small_caps is True
        assert style.all_caps is False

    def test_strike_variants_exclusive(self):
        style = FontStyle().set_double_strikethrough(True).set_strikethrough(True)

        assert style.strikethrough is True
        assert style.double_strikethrough is False

    @pytest.mark.parametrize("size", [0, -2, "12"])
    def test_invalid_size(self, size):
        with pytest.raises(InvalidStyleValueError):
            FontStyle().set_size(size)

    def test_invalid_language(self):
        with pytest.raises(InvalidStyleValueError):
            FontStyle().set_lang("english please")

    def test_bool_flags_reject_strings(self):
        with pytest.raises(InvalidStyleValueError):
            FontStyle().set_bold("yes")

    def test_to_dict_includes_usage(self):
        data = FontStyle(FontUsage.LINK).to_dict()

        assert data["usage"] == "link"
        assert data["family"] == "font"
