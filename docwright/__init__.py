"""
Docwright - document authoring library.

Build documents from named styles and sections, and write them as
Word2007 (.docx), ODText (.odt), RTF, HTML or PDF.
"""

from .document import Document
from .exceptions import (
    DocumentError,
    DocwrightError,
    InvalidStyleValueError,
    StyleError,
    StyleNotFoundError,
    UnsupportedFormatError,
    WriterError,
)
from .settings import Settings
from .styles import FontStyle, NumberingStyle, ParagraphStyle, StyleBag, TableStyle
from .utils.enums import DocumentFormat

from .version import __version__, __version_info__

__all__ = [
    "Document",
    "Settings",
    "StyleBag",
    "ParagraphStyle",
    "FontStyle",
    "TableStyle",
    "NumberingStyle",
    "DocumentFormat",
    "DocwrightError",
    "StyleError",
    "StyleNotFoundError",
    "InvalidStyleValueError",
    "DocumentError",
    "WriterError",
    "UnsupportedFormatError",
    "__version__",
]
