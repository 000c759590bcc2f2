"""
Library settings for a Docwright document.

Each document owns its own Settings instance; nothing here is shared
between documents.
"""

from typing import Any, Dict, Optional
import logging
import math

from .exceptions import InvalidStyleValueError

logger = logging.getLogger(__name__)

DEFAULT_FONT_NAME = "Arial"
DEFAULT_FONT_SIZE = 10
DEFAULT_FONT_COLOR = "000000"
PDF_PAGE_SIZES = ("A4", "LETTER", "LEGAL")


class Settings:
    """
    Document-level defaults consumed by the writers.
    """

    def __init__(self, default_font_name: str = DEFAULT_FONT_NAME,
                 default_font_size: float = DEFAULT_FONT_SIZE,
                 default_font_color: str = DEFAULT_FONT_COLOR,
                 pdf_page_size: str = "A4", pretty_print: bool = False):
        """
        Initialize settings.

        Args:
            default_font_name: Font family used when no style sets one
            default_font_size: Font size in points
            default_font_color: 6-digit hex color
            pdf_page_size: Page size for the PDF writer (A4, LETTER, LEGAL)
            pretty_print: Indent XML parts
        """
        self.default_font_name = DEFAULT_FONT_NAME
        self.default_font_size = DEFAULT_FONT_SIZE
        self.default_font_color = DEFAULT_FONT_COLOR
        self.pdf_page_size = "A4"
        self.pretty_print = bool(pretty_print)

        self.set_default_font_name(default_font_name)
        self.set_default_font_size(default_font_size)
        self.set_default_font_color(default_font_color)
        self.set_pdf_page_size(pdf_page_size)

    def get_default_font_name(self) -> str:
        return self.default_font_name

    def set_default_font_name(self, font_name: str) -> None:
        if not isinstance(font_name, str) or not font_name.strip():
            raise InvalidStyleValueError("Default font name must be a non-empty string")
        self.default_font_name = font_name
        logger.debug(f"Default font name set: {font_name}")

    def get_default_font_size(self) -> float:
        return self.default_font_size

    def set_default_font_size(self, font_size: float) -> None:
        if (isinstance(font_size, bool) or not isinstance(font_size, (int, float))
                or not math.isfinite(font_size) or font_size <= 0):
            raise InvalidStyleValueError("Default font size must be a positive number", details=repr(font_size))
        self.default_font_size = font_size
        logger.debug(f"Default font size set: {font_size}")

    def set_default_font_color(self, color: str) -> None:
        if not isinstance(color, str) or len(color.lstrip("#")) != 6:
            raise InvalidStyleValueError("Default font color must be a 6-digit hex color", details=repr(color))
        try:
            int(color.lstrip("#"), 16)
        except ValueError:
            raise InvalidStyleValueError("Default font color must be a 6-digit hex color", details=repr(color)) from None
        self.default_font_color = color.lstrip("#").upper()

    def set_pdf_page_size(self, page_size: str) -> None:
        if not isinstance(page_size, str) or page_size.upper() not in PDF_PAGE_SIZES:
            raise InvalidStyleValueError(
                "Invalid PDF page size", details=f"{page_size!r} (expected one of: {', '.join(PDF_PAGE_SIZES)})"
            )
        self.pdf_page_size = page_size.upper()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "default_font_name": self.default_font_name,
            "default_font_size": self.default_font_size,
            "default_font_color": self.default_font_color,
            "pdf_page_size": self.pdf_page_size,
            "pretty_print": self.pretty_print,
        }
