"""
Text elements for Docwright documents.

Elements carry style references by name only. The names are looked up in
the document's style bag when the document is written.
"""

from typing import List, Optional, Union
import logging

from ..exceptions import DocumentError
from ..styles.style_bag import title_style_name

logger = logging.getLogger(__name__)


def style_reference(value, label: str) -> Optional[str]:
    """
    Validate a style reference.

    Args:
        value: Style name or None
        label: Name used in the error message

    Returns:
        The style name

    Raises:
        DocumentError: If the reference is not a string
    """
    if value is None or isinstance(value, str):
        return value or None
    raise DocumentError(f"{label} must be referenced by name", details=type(value).__name__)


class Element:
    """Base class for section content."""

    element_type = "element"

    def __init__(self):
        self.parent = None

    def to_dict(self):
        return {"type": self.element_type}


class Text(Element):
    """A paragraph holding one piece of text."""

    element_type = "text"

    def __init__(self, text: str = "", font_style: Optional[str] = None,
                 paragraph_style: Optional[str] = None):
        super().__init__()
        if not isinstance(text, str):
            raise DocumentError("Text must be a string", details=type(text).__name__)
        self.text = text
        self.font_style = style_reference(font_style, "Font style")
        self.paragraph_style = style_reference(paragraph_style, "Paragraph style")

    def to_dict(self):
        return {
            "type": self.element_type,
            "text": self.text,
            "font_style": self.font_style,
            "paragraph_style": self.paragraph_style,
        }


class TextBreak(Element):
    """One or more empty lines."""

    element_type = "text_break"

    def __init__(self, count: int = 1, font_style: Optional[str] = None,
                 paragraph_style: Optional[str] = None):
        super().__init__()
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise DocumentError("Text break count must be a positive integer", details=repr(count))
        self.count = count
        self.font_style = style_reference(font_style, "Font style")
        self.paragraph_style = style_reference(paragraph_style, "Paragraph style")


class PageBreak(Element):
    """Forces the following content onto a new page."""

    element_type = "page_break"


class TextRun(Element):
    """
    A paragraph made of several differently styled pieces of text.
    """

    element_type = "text_run"

    def __init__(self, paragraph_style: Optional[str] = None):
        super().__init__()
        self.paragraph_style = style_reference(paragraph_style, "Paragraph style")
        self.elements: List[Union[Text, TextBreak]] = []

    def add_text(self, text: str, font_style: Optional[str] = None) -> Text:
        """
        Add a piece of text to the run.

        Args:
            text: Text content
            font_style: Font style name

        Returns:
            The created Text element
        """
        element = Text(text, font_style=font_style)
        element.parent = self
        self.elements.append(element)
        return element

    def add_text_break(self, count: int = 1) -> TextBreak:
        """Add a line break inside the run."""
        element = TextBreak(count)
        element.parent = self
        self.elements.append(element)
        return element

    def get_text(self) -> str:
        return "".join(element.text if isinstance(element, Text) else "\n" * element.count
                       for element in self.elements)

    def to_dict(self):
        return {
            "type": self.element_type,
            "paragraph_style": self.paragraph_style,
            "elements": [element.to_dict() for element in self.elements],
        }


class Title(Element):
    """
    A heading. Its style name is derived from the depth: ``Title`` for
    depth 0, ``Heading_<depth>`` otherwise.
    """

    element_type = "title"

    def __init__(self, text: str, depth: int = 1):
        super().__init__()
        if not isinstance(text, str):
            raise DocumentError("Title text must be a string", details=type(text).__name__)
        if isinstance(depth, bool) or not isinstance(depth, int) or not 0 <= depth <= 9:
            raise DocumentError("Title depth must be an integer between 0 and 9", details=repr(depth))
        self.text = text
        self.depth = depth
        self.bookmark_id: Optional[int] = None

    @property
    def style_name(self) -> str:
        return title_style_name(self.depth)

    def to_dict(self):
        return {"type": self.element_type, "text": self.text, "depth": self.depth}
