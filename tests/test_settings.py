"""
Tests for Settings.
"""

import pytest

from docwright import Settings
from docwright.exceptions import InvalidStyleValueError


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self):
        settings = Settings()

        assert settings.get_default_font_name() == "Arial"
        assert settings.get_default_font_size() == 10
        assert settings.default_font_color == "000000"
        assert settings.pdf_page_size == "A4"
        assert settings.pretty_print is False

    def test_page_size_is_case_insensitive(self):
        assert Settings(pdf_page_size="letter").pdf_page_size == "LETTER"

    def test_invalid_page_size(self):
        with pytest.raises(InvalidStyleValueError):
            Settings(pdf_page_size="A3")

    @pytest.mark.parametrize("size", [0, -1, "10", float("nan"), float("inf")])
    def test_invalid_font_size(self, size):
        with pytest.raises(InvalidStyleValueError):
            Settings(default_font_size=size)

    def test_invalid_font_name(self):
        with pytest.raises(InvalidStyleValueError):
            Settings(default_font_name=" ")

    def test_color_normalized(self):
        settings = Settings(default_font_color="#336699")

        assert settings.default_font_color == "336699"

    def test_to_dict(self):
        data = Settings(default_font_name="Georgia").to_dict()

        assert data["default_font_name"] == "Georgia"
        assert data["pdf_page_size"] == "A4"
