"""
Tests for TableStyle and NumberingStyle.
"""

import pytest

from docwright.exceptions import InvalidStyleValueError
from docwright.styles import NumberingLevel, NumberingStyle, TableStyle
from docwright.utils.enums import BorderStyle, NumberFormat, NumberingType, TableAlignment, WidthUnit


class TestTableStyle:
    """Test cases for TableStyle."""

    def test_table_values(self):
        style = TableStyle({
            "alignment": "center",
            "width": 5000,
            "unit": "pct",
            "bg_color": "EEEEEE",
            "cell_margin": 80,
            "border_inside_h_size": 4,
        })

        assert style.alignment is TableAlignment.CENTER
        assert style.width == 5000
        assert style.unit is WidthUnit.PERCENT
        assert style.bg_color == "EEEEEE"
        assert style.cell_margin.left == 80
        assert style.border_inside_h.size == 4
        assert style.first_row is None

    def test_first_row_copies_missing_borders(self):
        style = TableStyle(
            {"border_size": 8, "border_color": "000000", "border_style": "single"},
            {"bg_color": "CCCCCC", "border_bottom_size": 16},
        )

        first_row = style.first_row
        assert first_row.is_first_row is True
        assert first_row.bg_color == "CCCCCC"
        assert first_row.border.bottom.size == 16
        assert first_row.border.top.size == 8
        assert first_row.border.top.style is BorderStyle.SINGLE

    def test_first_row_must_be_mapping(self):
        with pytest.raises(InvalidStyleValueError):
            TableStyle({}, "bold")

    def test_negative_indent_allowed(self):
        assert TableStyle({"indent": -100}).indent == -100


class TestNumberingStyle:
    """Test cases for NumberingStyle."""

    def test_levels_from_mappings(self):
        style = NumberingStyle().set_style_by_array({
            "type": "multilevel",
            "levels": [
                {"format": "decimal", "text": "%1.", "left": 720, "hanging": 360},
                {"format": "lowerLetter", "text": "%2)"},
            ],
        })

        assert style.type is NumberingType.MULTILEVEL
        levels = style.get_levels()
        assert [level.level for level in levels] == [0, 1]
        assert levels[1].format is NumberFormat.LOWER_LETTER

    def test_explicit_level_numbers_sorted(self):
        style = NumberingStyle().set_levels([{"level": 2}, {"level": 0}])

        assert [level.level for level in style.get_levels()] == [0, 2]

    def test_level_out_of_range(self):
        with pytest.raises(InvalidStyleValueError):
            NumberingLevel(9)

    def test_label_text_defaults(self):
        assert NumberingLevel(0).label_text() == "%1."
        assert NumberingLevel(1).set_format("bullet").label_text() == "•"
        assert NumberingLevel(0).set_text("(%1)").label_text() == "(%1)"

    def test_num_id_is_index(self):
        style = NumberingStyle().set_index(4)

        assert style.num_id == 4

    def test_levels_must_be_sequence(self):
        with pytest.raises(InvalidStyleValueError):
            NumberingStyle().set_levels({"level": 0})
