"""Word2007 (OOXML) writer."""

from .word2007_writer import Word2007Writer

__all__ = ["Word2007Writer"]
