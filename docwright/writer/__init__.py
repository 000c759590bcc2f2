"""
Writers module: one writer per output format.

``create_writer`` looks a format up in ``WRITERS`` and builds its writer.
"""

from typing import Any, Dict, Optional, Type, Union
import logging

from ..exceptions import UnsupportedFormatError
from ..utils.enums import DocumentFormat
from .base_writer import AbstractStyleWriter, BaseWriter, PackageWriter, XMLStyleWriter
from .html import HTMLWriter
from .markup import XMLWriter
from .odtext import ODTextWriter
from .pdf import PDFWriter
from .rtf import RTFWriter
from .word2007 import Word2007Writer

logger = logging.getLogger(__name__)

WRITERS: Dict[DocumentFormat, Type[BaseWriter]] = {
    DocumentFormat.WORD2007: Word2007Writer,
    DocumentFormat.ODTEXT: ODTextWriter,
    DocumentFormat.RTF: RTFWriter,
    DocumentFormat.HTML: HTMLWriter,
    DocumentFormat.PDF: PDFWriter,
}


def resolve_format(fmt: Union[DocumentFormat, str]) -> DocumentFormat:
    """
    Resolve a format name. Names match case-insensitively.

    Raises:
        UnsupportedFormatError: If the name is not a known format
    """
    if isinstance(fmt, DocumentFormat):
        return fmt
    if isinstance(fmt, str):
        for candidate in DocumentFormat:
            if candidate.value.lower() == fmt.lower():
                return candidate
    supported = ", ".join(candidate.value for candidate in DocumentFormat)
    raise UnsupportedFormatError(f"Unsupported format: {fmt}", details=f"expected one of: {supported}")


def create_writer(fmt: Union[DocumentFormat, str], document,
                  export_options: Optional[Dict[str, Any]] = None) -> BaseWriter:
    """
    Create the writer for a format.

    Args:
        fmt: Output format
        document: Document to write
        export_options: Writer options

    Returns:
        Writer instance
    """
    document_format = resolve_format(fmt)
    logger.debug(f"Creating {document_format.value} writer")
    return WRITERS[document_format](document, export_options)


__all__ = [
    "WRITERS",
    "create_writer",
    "resolve_format",
    "AbstractStyleWriter",
    "BaseWriter",
    "PackageWriter",
    "XMLStyleWriter",
    "XMLWriter",
    "HTMLWriter",
    "ODTextWriter",
    "PDFWriter",
    "RTFWriter",
    "Word2007Writer",
]
