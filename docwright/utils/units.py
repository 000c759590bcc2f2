"""
Units converter for Docwright documents.

Styles store every measurement in twips (twentieths of a point). Writers
convert to the unit their output format expects.
"""

from typing import Union
import logging
import re

logger = logging.getLogger(__name__)

Number = Union[int, float]

TWIPS_PER_INCH = 1440
TWIPS_PER_POINT = 20
TWIPS_PER_CM = 1440 / 2.54

ZERO_LENGTH = re.compile(r"^0[a-z%]*$")


def format_number(value: Number, precision: int = 4) -> str:
    """
    Format a number for markup output.

    Rounds to ``precision`` decimals and strips trailing zeros, so
    ``0.08333`` becomes ``"0.0833"`` and ``1.0`` becomes ``"1"``.

    Args:
        value: Number to format
        precision: Maximum number of decimals

    Returns:
        Formatted number
    """
    text = f"{round(float(value), precision):.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def is_zero_length(text: str) -> bool:
    """True for a rendered length such as ``0in``, including values that rounded to zero."""
    return bool(ZERO_LENGTH.match(text))


class UnitsConverter:
    """
    Converts between twips and the units used by output formats.
    """

    def __init__(self, dpi: int = 96):
        """
        Initialize units converter.

        Args:
            dpi: Dots per inch for pixel conversions
        """
        if not isinstance(dpi, int) or dpi <= 0:
            raise ValueError("DPI must be a positive integer")
        self.dpi = dpi

    @staticmethod
    def _check(value: Number, label: str) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{label} value must be a number")

    def twip_to_inch(self, twip_value: Number) -> float:
        """
        Convert twips to inches.

        Args:
            twip_value: TWIP value to convert

        Returns:
            Inches value
        """
        self._check(twip_value, "TWIP")
        return twip_value / TWIPS_PER_INCH

    def twip_to_cm(self, twip_value: Number) -> float:
        """Convert twips to centimeters."""
        self._check(twip_value, "TWIP")
        return twip_value / TWIPS_PER_CM

    def twip_to_point(self, twip_value: Number) -> float:
        """Convert twips to points."""
        self._check(twip_value, "TWIP")
        return twip_value / TWIPS_PER_POINT

    def twip_to_pixels(self, twip_value: Number, dpi: int = None) -> float:
        """
        Convert twips to pixels.

        Args:
            twip_value: TWIP value to convert
            dpi: Dots per inch (uses instance DPI if not provided)

        Returns:
            Pixels value
        """
        self._check(twip_value, "TWIP")
        if dpi is None:
            dpi = self.dpi
        return twip_value / TWIPS_PER_INCH * dpi

    def twip_to_eighth_point(self, twip_value: Number) -> int:
        """Convert twips to eighths of a point (OOXML border widths)."""
        self._check(twip_value, "TWIP")
        return int(round(twip_value * 8 / TWIPS_PER_POINT))

    def point_to_twip(self, point_value: Number) -> int:
        """Convert points to twips."""
        self._check(point_value, "Point")
        return int(round(point_value * TWIPS_PER_POINT))

    def inch_to_twip(self, inch_value: Number) -> int:
        """Convert inches to twips."""
        self._check(inch_value, "Inch")
        return int(round(inch_value * TWIPS_PER_INCH))

    def cm_to_twip(self, cm_value: Number) -> int:
        """Convert centimeters to twips."""
        self._check(cm_value, "Centimeter")
        return int(round(cm_value * TWIPS_PER_CM))

    def to_inch_string(self, twip_value: Number) -> str:
        """Render a twip measurement as an ODF/XSL-FO inch length."""
        return f"{format_number(self.twip_to_inch(twip_value))}in"

    def to_point_string(self, twip_value: Number) -> str:
        """Render a twip measurement as a point length."""
        return f"{format_number(self.twip_to_point(twip_value))}pt"
