"""PDF writer."""

from .pdf_writer import PDFWriter

__all__ = ["PDFWriter"]
