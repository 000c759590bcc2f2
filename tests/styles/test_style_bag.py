"""
Tests for StyleBag.
"""

import logging

import pytest

from docwright.exceptions import InvalidStyleValueError, StyleNotFoundError
from docwright.styles import FontStyle, ParagraphStyle, StyleBag, TableStyle, title_style_name
from docwright.utils.enums import Alignment, FontUsage, StyleFamily


class TestStyleBag:
    """Test cases for StyleBag."""

    @pytest.fixture
    def bag(self):
        """Create an empty StyleBag."""
        return StyleBag()

    def test_init(self, bag):
        assert bag.count_styles() == 0
        assert len(bag) == 0
        assert bag.get_styles() == {}

    def test_resolve_registers_with_index(self, bag):
        style = bag.resolve("Quote", ParagraphStyle, {"alignment": "center"})

        assert bag.has("Quote")
        assert "Quote" in bag
        assert style.style_name == "Quote"
        assert style.index == 1
        assert style.alignment is Alignment.CENTER

    def test_first_write_wins(self, bag):
        first = bag.add_paragraph_style("Quote", {"alignment": "center", "space-above": 120})
        second = bag.add_paragraph_style("Quote", {"alignment": "left"})

        assert second is first
        assert bag.get("Quote").alignment is Alignment.CENTER
        assert bag.get("Quote").index == 1
        assert bag.count_styles() == 1

    def test_indices_follow_registration_order(self, bag):
        bag.add_paragraph_style("A", None)
        bag.add_font_style("B", {"bold": True})
        bag.add_table_style("C", {"width": 100})

        assert [style.index for _, style in bag] == [1, 2, 3]
        assert list(bag.get_styles()) == ["A", "B", "C"]

    def test_get_unknown_raises(self, bag):
        with pytest.raises(StyleNotFoundError) as exc_info:
            bag.get("Missing")

        assert exc_info.value.style_name == "Missing"
        assert isinstance(exc_info.value, LookupError)

    def test_get_style_unknown_returns_none(self, bag):
        assert bag.get_style("Missing") is None

    def test_resolve_adopts_style_object(self, bag):
        style = ParagraphStyle().set_alignment("right")

        registered = bag.add_paragraph_style("Right", style)

        assert registered is style
        assert style.style_name == "Right"
        assert style.index == 1

    def test_type_mismatch_uses_defaults(self, bag, caplog):
        with caplog.at_level(logging.WARNING):
            style = bag.add_paragraph_style("Odd", FontStyle().set_bold(True))

        assert isinstance(style, ParagraphStyle)
        assert style.alignment is None
        assert "Type mismatch" in caplog.text

    def test_invalid_value_type(self, bag):
        with pytest.raises(InvalidStyleValueError):
            bag.add_paragraph_style("Odd", 42)

    def test_add_replaces_and_keeps_index(self, bag):
        bag.add_paragraph_style("A", None)
        bag.add_paragraph_style("B", None)
        replacement = ParagraphStyle().set_style_name("A").set_alignment("justify")

        bag.add(replacement)

        assert bag.get("A") is replacement
        assert replacement.index == 1
        assert bag.count_styles() == 2

    def test_adopting_a_registered_style_copies_it(self, bag):
        first = bag.add_paragraph_style("A", {"alignment": "center"})
        second = bag.add_paragraph_style("B", first)

        assert second is not first
        assert bag.get("A") is first
        assert (first.style_name, first.index) == ("A", 1)
        assert (second.style_name, second.index) == ("B", 2)
        assert second.alignment is first.alignment

    def test_adopting_an_unregistered_style(self, bag):
        style = ParagraphStyle().set_alignment("right")

        assert bag.add_paragraph_style("A", style) is style
        assert style.style_name == "A"

    def test_add_requires_name(self, bag):
        with pytest.raises(InvalidStyleValueError):
            bag.add(ParagraphStyle())

    def test_add_requires_style(self, bag):
        with pytest.raises(InvalidStyleValueError):
            bag.add({"name": "A"})

    def test_reset_restarts_indices(self, bag):
        bag.add_paragraph_style("A", None)
        bag.add_paragraph_style("B", None)

        bag.reset_styles()
        assert list(bag) == []
        assert list(bag.items()) == []

        style = bag.add_paragraph_style("C", None)

        assert bag.count_styles() == 1
        assert style.index == 1
        assert not bag.has("A")

    def test_font_style_usages(self, bag):
        text = bag.add_font_style("Body", {"size": 10}, "Normal")
        link = bag.add_link_style("Link", {"color": "0000FF"})

        assert text.usage is FontUsage.TEXT
        assert text.paragraph_style_name == "Normal"
        assert link.usage is FontUsage.LINK

    def test_title_style_names(self, bag):
        title = bag.add_title_style(0, {"size": 20})
        heading = bag.add_title_style(2, {"size": 14}, {"keep_next": True})

        assert title.style_name == "Title"
        assert heading.style_name == "Heading_2"
        assert heading.usage is FontUsage.TITLE
        assert heading.paragraph.keep_next is True

    def test_title_style_name_helper(self):
        assert title_style_name(None) == "Title"
        assert title_style_name(0) == "Title"
        assert title_style_name(3) == "Heading_3"

    def test_table_style_with_first_row(self, bag):
        style = bag.add_table_style("Grid", {"width": 100}, {"bg_color": "DDDDDD"})

        assert isinstance(style, TableStyle)
        assert style.first_row.bg_color == "DDDDDD"

    def test_default_paragraph_style(self, bag):
        style = bag.set_default_paragraph_style({"space_below": 120})

        assert style.style_name == "Normal"
        assert bag.get("Normal") is style

    def test_get_styles_by_family(self, bag):
        bag.add_paragraph_style("P", None)
        bag.add_font_style("F", None)
        bag.add_numbering_style("N", {"levels": [{}]})

        assert [style.style_name for style in bag.get_styles_by_family(StyleFamily.FONT)] == ["F"]
        assert [style.style_name for style in bag.get_styles_by_family(StyleFamily.NUMBERING)] == ["N"]

    def test_get_styles_is_a_copy(self, bag):
        bag.add_paragraph_style("P", None)

        bag.get_styles().clear()

        assert bag.has("P")
