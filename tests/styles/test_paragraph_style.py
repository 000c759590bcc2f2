"""
Tests for ParagraphStyle.
"""

import pytest

from docwright.exceptions import InvalidStyleValueError
from docwright.styles import FontStyle, ParagraphStyle, Tab, normalize_style_key
from docwright.utils.enums import Alignment, BorderStyle, BreakKind, BreakPosition, TabLeader, TabType


class TestNormalizeStyleKey:
    """Test cases for style key normalization."""

    @pytest.mark.parametrize("key", ["space_above", "space-above", "spaceAbove"])
    def test_spellings_normalize_to_snake_case(self, key):
        assert normalize_style_key(key) == "space_above"

    def test_non_string_key(self):
        assert normalize_style_key(None) is None
        assert normalize_style_key(3) is None


class TestParagraphStyle:
    """Test cases for ParagraphStyle."""

    def test_defaults(self):
        style = ParagraphStyle()

        assert style.style_name is None
        assert style.index is None
        assert style.is_auto is False
        assert style.alignment is None
        assert style.break_kind is BreakKind.AUTO
        assert style.break_position is BreakPosition.UNSET
        assert style.border.is_empty()
        assert style.padding.is_empty()
        assert style.tabs == []

    def test_set_style_by_array(self):
        style = ParagraphStyle().set_style_by_array({
            "alignment": "center",
            "space-above": 120,
            "spaceBelow": 240,
            "indent": -360,
            "lineHeight": 150,
            "keep_next": True,
        })

        assert style.alignment is Alignment.CENTER
        assert style.space_above == 120
        assert style.space_below == 240
        assert style.indent == -360
        assert style.line_height == 150
        assert style.keep_next is True

    def test_unknown_keys_are_ignored(self):
        style = ParagraphStyle()

        assert style.set_style_value("no_such_key", 1) is False
        assert style.set_style_value("alignment", "left") is True
        assert style.alignment is Alignment.LEFT

    def test_invalid_alignment(self):
        with pytest.raises(InvalidStyleValueError):
            ParagraphStyle().set_alignment("middle")

    def test_invalid_alignment_is_also_value_error(self):
        with pytest.raises(ValueError):
            ParagraphStyle().set_alignment("middle")

    @pytest.mark.parametrize("key", ["space_above", "space_below", "space_before", "space_after"])
    def test_negative_spacing_rejected(self, key):
        with pytest.raises(InvalidStyleValueError):
            ParagraphStyle().set_style_by_array({key: -1})

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_measures_rejected(self, value):
        style = ParagraphStyle()

        with pytest.raises(InvalidStyleValueError):
            style.set_space_above(value)
        with pytest.raises(InvalidStyleValueError):
            style.set_indent(value)
        with pytest.raises(InvalidStyleValueError):
            style.set_line_height(value)
        assert style.space_above is None

    def test_zero_line_height_rejected(self):
        with pytest.raises(InvalidStyleValueError):
            ParagraphStyle().set_line_height(0)

    def test_page_break_before_shortcut(self):
        style = ParagraphStyle().set_page_break_before(True)

        assert style.break_kind is BreakKind.PAGE
        assert style.break_position is BreakPosition.BEFORE
        assert style.has_page_break()

        style.set_page_break_before(False)
        assert style.break_position is BreakPosition.UNSET
        assert not style.has_page_break()

    def test_break_kind_without_position_is_not_a_page_break(self):
        style = ParagraphStyle().set_break_kind("page")

        assert style.break_position is BreakPosition.UNSET
        assert not style.has_page_break()

    def test_background_color_normalized(self):
        style = ParagraphStyle().set_background_color("#ffcc00")

        assert style.background_color == "FFCC00"

    def test_invalid_color(self):
        with pytest.raises(InvalidStyleValueError):
            ParagraphStyle().set_background_color("red")

    def test_borders_per_side_and_all_sides(self):
        style = ParagraphStyle().set_style_by_array({
            "border_size": 20,
            "border_top_color": "FF0000",
            "border_style": "double",
        })

        assert style.border.top.size == 20
        assert style.border.bottom.size == 20
        assert style.border.top.color == "FF0000"
        assert style.border.left.color is None
        assert style.border.right.style is BorderStyle.DOUBLE

    def test_padding_keys(self):
        style = ParagraphStyle().set_style_by_array({"padding": 60, "padding_left": 120})

        assert style.padding.top == 60
        assert style.padding.left == 120

    def test_tabs_from_mappings_and_tuples(self):
        style = ParagraphStyle().set_tabs([
            {"type": "right", "position": 9000, "leader": "dot"},
            ("center", 4500),
        ])

        assert [tab.type for tab in style.tabs] == [TabType.RIGHT, TabType.CENTER]
        assert style.tabs[0].leader is TabLeader.DOT
        assert style.tabs[1].position == 4500

    def test_invalid_tab(self):
        with pytest.raises(InvalidStyleValueError):
            Tab.from_value("left")

    def test_nested_font_from_mapping(self):
        style = ParagraphStyle().set_style_by_array({"font": {"bold": True, "size": 12}})

        assert isinstance(style.font, FontStyle)
        assert style.font.bold is True
        assert style.font.size == 12

    def test_auto_flag(self):
        style = ParagraphStyle().set_style_by_array({"auto": True})

        assert style.is_auto is True

    def test_style_name_validation(self):
        with pytest.raises(InvalidStyleValueError):
            ParagraphStyle().set_style_name("")

    def test_index_validation(self):
        with pytest.raises(InvalidStyleValueError):
            ParagraphStyle().set_index(0)

    def test_to_dict(self):
        style = ParagraphStyle().set_style_name("Quote").set_style_by_array({"alignment": "right"})

        data = style.to_dict()

        assert data["style_name"] == "Quote"
        assert data["alignment"] == "right"
        assert data["family"] == "paragraph"
        assert data["break_position"] == "unset"
