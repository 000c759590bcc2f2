"""HTML writer."""

from .html_writer import HTMLWriter

__all__ = ["HTMLWriter"]
