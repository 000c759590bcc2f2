"""
Tests for sections and text elements.
"""

import pytest

from docwright.elements import PageBreak, Section, SectionSettings, Text, TextBreak, TextRun, Title
from docwright.exceptions import DocumentError, InvalidStyleValueError
from docwright.styles import ParagraphStyle
from docwright.utils.enums import Orientation


class TestTextElements:
    """Test cases for text elements."""

    def test_text(self):
        text = Text("Hello", font_style="Strong", paragraph_style="Quote")

        assert text.text == "Hello"
        assert text.font_style == "Strong"
        assert text.paragraph_style == "Quote"
        assert text.to_dict()["type"] == "text"

    def test_empty_style_reference_is_none(self):
        assert Text("Hello", font_style="").font_style is None

    def test_style_objects_are_rejected(self):
        with pytest.raises(DocumentError):
            Text("Hello", paragraph_style=ParagraphStyle())

    def test_text_must_be_string(self):
        with pytest.raises(DocumentError):
            Text(42)

    @pytest.mark.parametrize("count", [0, -1, 1.5, True])
    def test_text_break_count(self, count):
        with pytest.raises(DocumentError):
            TextBreak(count)

    def test_text_run(self):
        text_run = TextRun("Quote")
        first = text_run.add_text("Hello ", font_style="Strong")
        text_run.add_text_break(2)
        text_run.add_text("world")

        assert first.parent is text_run
        assert len(text_run.elements) == 3
        assert text_run.get_text() == "Hello \n\nworld"
        assert text_run.to_dict()["elements"][0]["font_style"] == "Strong"

    def test_title_style_name(self):
        assert Title("Cover", 0).style_name == "Title"
        assert Title("Intro", 2).style_name == "Heading_2"

    @pytest.mark.parametrize("depth", [-1, 10, "1"])
    def test_title_depth(self, depth):
        with pytest.raises(DocumentError):
            Title("Intro", depth)

    def test_page_break(self):
        assert PageBreak().to_dict() == {"type": "page_break"}


class TestSection:
    """Test cases for Section and SectionSettings."""

    def test_default_settings(self):
        settings = SectionSettings()

        assert settings.orientation is Orientation.PORTRAIT
        assert settings.page_width == 11906
        assert settings.page_height == 16838
        assert settings.margin_left == 1440
        assert settings.column_count == 1

    def test_landscape_swaps_page_size(self):
        settings = SectionSettings().set_orientation("landscape")

        assert settings.page_width == 16838
        assert settings.page_height == 11906

    def test_same_orientation_does_not_swap(self):
        settings = SectionSettings().set_orientation("portrait")

        assert settings.page_width == 11906

    def test_page_size_must_be_positive(self):
        with pytest.raises(InvalidStyleValueError):
            SectionSettings().set_page_width(0)

    def test_section_from_mapping(self):
        section = Section(1, {"margin_top": 720, "columnCount": 2})

        assert section.get_settings().margin_top == 720
        assert section.get_settings().column_count == 2

    def test_adding_elements_keeps_order(self):
        section = Section(1)
        section.add_text("one")
        section.add_text_run()
        section.add_text_break()
        section.add_page_break()
        section.add_title("Title", 0)

        types = [element.element_type for element in section.get_elements()]
        assert types == ["text", "text_run", "text_break", "page_break", "title"]
        assert all(element.parent is section for element in section.get_elements())

    def test_add_element_requires_element(self):
        with pytest.raises(DocumentError):
            Section(1).add_element("text")

    def test_title_without_document_has_no_bookmark(self):
        title = Section(1).add_title("Loose")

        assert title.bookmark_id is None

    def test_to_dict(self):
        section = Section(3)
        section.add_text("x")

        data = section.to_dict()

        assert data["section_id"] == 3
        assert data["elements"][0]["text"] == "x"
