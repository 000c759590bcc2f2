"""
Section model for Docwright documents.

A section owns its page setup and an ordered list of content elements.
"""

from typing import Any, List, Mapping, Optional
import logging

from ..exceptions import DocumentError, InvalidStyleValueError
from ..styles.abstract_style import StyleValues, to_enum, to_int, to_measure
from ..utils.enums import Orientation
from .text import Element, PageBreak, Text, TextBreak, TextRun, Title

logger = logging.getLogger(__name__)

# A4 portrait, 1 inch margins
DEFAULT_PAGE_WIDTH = 11906
DEFAULT_PAGE_HEIGHT = 16838
DEFAULT_MARGIN = 1440


class SectionSettings(StyleValues):
    """
    Page setup of a section. Measurements are in twips.
    """

    STYLE_KEYS = {
        "orientation": "set_orientation",
        "page_width": "set_page_width",
        "page_height": "set_page_height",
        "margin_top": "set_margin_top",
        "margin_bottom": "set_margin_bottom",
        "margin_left": "set_margin_left",
        "margin_right": "set_margin_right",
        "column_count": "set_column_count",
        "column_spacing": "set_column_spacing",
        "page_number_start": "set_page_number_start",
    }

    def __init__(self):
        self.orientation = Orientation.PORTRAIT
        self.page_width = DEFAULT_PAGE_WIDTH
        self.page_height = DEFAULT_PAGE_HEIGHT
        self.margin_top = DEFAULT_MARGIN
        self.margin_bottom = DEFAULT_MARGIN
        self.margin_left = DEFAULT_MARGIN
        self.margin_right = DEFAULT_MARGIN
        self.column_count = 1
        self.column_spacing = 720
        self.page_number_start: Optional[int] = None

    def set_orientation(self, value):
        """
        Set orientation. Switching orientation swaps page width and height
        so the long edge follows the orientation.
        """
        orientation = to_enum(Orientation, value, "orientation")
        if orientation is not self.orientation:
            self.page_width, self.page_height = self.page_height, self.page_width
        self.orientation = orientation
        return self

    def _page_measure(self, value, label):
        value = to_measure(value, label)
        if not value:
            raise InvalidStyleValueError(f"{label} must be positive", details=repr(value))
        return value

    def set_page_width(self, value):
        self.page_width = self._page_measure(value, "Page width")
        return self

    def set_page_height(self, value):
        self.page_height = self._page_measure(value, "Page height")
        return self

    def set_margin_top(self, value):
        self.margin_top = to_measure(value, "Top margin") or 0
        return self

    def set_margin_bottom(self, value):
        self.margin_bottom = to_measure(value, "Bottom margin") or 0
        return self

    def set_margin_left(self, value):
        self.margin_left = to_measure(value, "Left margin") or 0
        return self

    def set_margin_right(self, value):
        self.margin_right = to_measure(value, "Right margin") or 0
        return self

    def set_column_count(self, value):
        self.column_count = to_int(value, "Column count", minimum=1) or 1
        return self

    def set_column_spacing(self, value):
        self.column_spacing = to_measure(value, "Column spacing") or 0
        return self

    def set_page_number_start(self, value):
        self.page_number_start = to_int(value, "Page number start", minimum=1)
        return self


class Section:
    """
    Represents a document section.
    """

    def __init__(self, section_id: int, settings: Optional[Mapping[str, Any]] = None,
                 document=None):
        """
        Initialize section.

        Args:
            section_id: One-based section number
            settings: Page setup values
            document: Owning document (used to register titles)
        """
        self.section_id = section_id
        self.document = document
        self.settings = SectionSettings()
        self.elements: List[Element] = []
        if settings is not None:
            self.settings.set_style_by_array(settings)

    def get_settings(self) -> SectionSettings:
        return self.settings

    def get_elements(self) -> List[Element]:
        return list(self.elements)

    def _append(self, element: Element) -> Element:
        element.parent = self
        self.elements.append(element)
        return element

    def add_text(self, text: str, font_style: Optional[str] = None,
                 paragraph_style: Optional[str] = None) -> Text:
        """
        Add a text paragraph.

        Args:
            text: Text content
            font_style: Font style name
            paragraph_style: Paragraph style name

        Returns:
            The created Text element
        """
        return self._append(Text(text, font_style, paragraph_style))

    def add_text_run(self, paragraph_style: Optional[str] = None) -> TextRun:
        return self._append(TextRun(paragraph_style))

    def add_text_break(self, count: int = 1, font_style: Optional[str] = None,
                       paragraph_style: Optional[str] = None) -> TextBreak:
        return self._append(TextBreak(count, font_style, paragraph_style))

    def add_page_break(self) -> PageBreak:
        return self._append(PageBreak())

    def add_title(self, text: str, depth: int = 1) -> Title:
        """
        Add a heading. The heading is also registered in the document's
        titles collection, whose index becomes its bookmark id.
        """
        title = Title(text, depth)
        if self.document is not None:
            self.document.add_title(title)
        return self._append(title)

    def add_element(self, element: Element) -> Element:
        if not isinstance(element, Element):
            raise DocumentError("Only elements can be added to a section", details=type(element).__name__)
        return self._append(element)

    def to_dict(self):
        return {
            "section_id": self.section_id,
            "settings": self.settings.to_dict(),
            "elements": [element.to_dict() for element in self.elements],
        }
