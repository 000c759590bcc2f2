"""ODText (OpenDocument Text) writer."""

from .odtext_writer import ODTextWriter

__all__ = ["ODTextWriter"]
