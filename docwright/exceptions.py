"""Custom exceptions for Docwright."""

from typing import Optional


class DocwrightError(Exception):
    """Base exception for Docwright errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class StyleError(DocwrightError):
    """Exception raised during style registration or resolution."""

    pass


class StyleNotFoundError(StyleError, LookupError):
    """Exception raised when a style name is not registered."""

    def __init__(self, style_name: str):
        super().__init__("Style not found", details=style_name)
        self.style_name = style_name


class InvalidStyleValueError(StyleError, ValueError):
    """Exception raised when a style setter receives an out-of-domain value."""

    pass


class DocumentError(DocwrightError):
    """Exception raised on document tree misuse."""

    pass


class WriterError(DocwrightError):
    """Exception raised while producing output markup or files."""

    pass


class UnsupportedFormatError(WriterError):
    """Exception raised for an unknown output format."""

    pass
