"""
Tests for units conversion and number formatting.
"""

import pytest

from docwright.utils.units import UnitsConverter, format_number, is_zero_length


class TestFormatNumber:
    """Test cases for format_number."""

    @pytest.mark.parametrize("value, expected", [
        (0.0833333, "0.0833"),
        (1.0, "1"),
        (1.5, "1.5"),
        (20, "20"),
        (-0.00001, "0"),
        (0, "0"),
        (-0.25, "-0.25"),
    ])
    def test_format(self, value, expected):
        assert format_number(value) == expected

    def test_precision(self):
        assert format_number(2.345, precision=1) == "2.3"
        assert format_number(20, precision=0) == "20"

    @pytest.mark.parametrize("text, expected", [
        ("0in", True),
        ("0", True),
        ("0pt", True),
        ("0.0001in", False),
        ("1in", False),
        ("10pt", False),
        ("-0.5in", False),
    ])
    def test_is_zero_length(self, text, expected):
        assert is_zero_length(text) is expected


class TestUnitsConverter:
    """Test cases for UnitsConverter."""

    @pytest.fixture
    def units(self):
        return UnitsConverter()

    def test_twip_conversions(self, units):
        assert units.twip_to_inch(1440) == 1
        assert units.twip_to_point(240) == 12
        assert units.twip_to_pixels(1440) == 96
        assert units.twip_to_eighth_point(20) == 8
        assert units.twip_to_cm(1440) == pytest.approx(2.54)

    def test_to_twip(self, units):
        assert units.point_to_twip(12) == 240
        assert units.inch_to_twip(0.5) == 720
        assert units.cm_to_twip(2.54) == 1440

    def test_inch_string(self, units):
        assert units.to_inch_string(120) == "0.0833in"
        assert units.to_inch_string(1440) == "1in"

    def test_point_string(self, units):
        assert units.to_point_string(30) == "1.5pt"

    def test_rejects_non_numbers(self, units):
        with pytest.raises(ValueError):
            units.twip_to_inch("1440")
        with pytest.raises(ValueError):
            units.twip_to_inch(True)

    def test_invalid_dpi(self):
        with pytest.raises(ValueError):
            UnitsConverter(dpi=0)
