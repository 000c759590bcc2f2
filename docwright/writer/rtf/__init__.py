"""RTF writer."""

from .rtf_writer import RTFWriter

__all__ = ["RTFWriter"]
