"""
Document API - high-level entry point for building documents.

A Document owns its style bag, metadata, item collections and sections,
and hands itself to a format writer on save.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Union
from pathlib import Path
import logging

from .collections import (
    Bookmark,
    Chart,
    Comment,
    Endnote,
    Footnote,
    ItemCollection,
    create_collections,
)
from .elements.section import Section
from .elements.text import Title
from .exceptions import DocumentError
from .metadata import Compatibility, DocInfo, DocumentSettings
from .settings import Settings
from .styles.font import FontStyle
from .styles.numbering import NumberingStyle
from .styles.paragraph import ParagraphStyle
from .styles.style_bag import StyleBag, StyleInput
from .styles.table import TableStyle
from .utils.enums import CollectionKind, DocumentFormat

logger = logging.getLogger(__name__)


class Document:
    """
    A document being authored.

    Style registration goes through the style bag with first-write-wins
    semantics: registering a name twice returns the first style and
    ignores the new values.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize an empty document.

        Args:
            settings: Document settings (fresh defaults if not provided)
        """
        self.settings = settings or Settings()
        self.styles = StyleBag()
        self.doc_info = DocInfo()
        self.compatibility = Compatibility()
        self.document_settings = DocumentSettings()
        self.collections: Dict[CollectionKind, ItemCollection] = create_collections()
        self.sections: List[Section] = []
        logger.debug("Document created")

    # Styles

    def add_paragraph_style(self, style_name: str, styles: StyleInput) -> ParagraphStyle:
        """
        Register a paragraph style.

        Args:
            style_name: Style name
            styles: Mapping of paragraph values, ParagraphStyle or None

        Returns:
            The registered (or previously registered) style
        """
        return self.styles.add_paragraph_style(style_name, styles)

    def add_font_style(self, style_name: str, font_style: StyleInput,
                       paragraph_style=None) -> FontStyle:
        """
        Register a text font style.

        Args:
            style_name: Style name
            font_style: Mapping of font values, FontStyle or None
            paragraph_style: Paragraph style name, ParagraphStyle or mapping

        Returns:
            The registered (or previously registered) style
        """
        return self.styles.add_font_style(style_name, font_style, paragraph_style)

    def add_link_style(self, style_name: str, styles: StyleInput) -> FontStyle:
        """Register a hyperlink font style."""
        return self.styles.add_link_style(style_name, styles)

    def add_title_style(self, depth: Optional[int], font_style: StyleInput,
                        paragraph_style=None) -> FontStyle:
        """
        Register the font style of a heading level.

        Depth 0 (or None) registers ``Title``; depth n registers ``Heading_n``.
        """
        return self.styles.add_title_style(depth, font_style, paragraph_style)

    def add_table_style(self, style_name: str, style_table: Optional[Mapping[str, Any]],
                        style_first_row: Optional[Mapping[str, Any]] = None) -> TableStyle:
        """
        Register a table style.

        Args:
            style_name: Style name
            style_table: Table-wide values
            style_first_row: First row values
        """
        return self.styles.add_table_style(style_name, style_table, style_first_row)

    def add_numbering_style(self, style_name: str, style_values: StyleInput) -> NumberingStyle:
        """Register a numbering (list) style."""
        return self.styles.add_numbering_style(style_name, style_values)

    def set_default_paragraph_style(self, styles: StyleInput) -> ParagraphStyle:
        """Register the ``Normal`` paragraph style."""
        return self.styles.set_default_paragraph_style(styles)

    def get_styles(self) -> StyleBag:
        return self.styles

    # Metadata

    def get_doc_info(self) -> DocInfo:
        return self.doc_info

    def get_compatibility(self) -> Compatibility:
        return self.compatibility

    def get_document_settings(self) -> DocumentSettings:
        return self.document_settings

    def get_settings(self) -> Settings:
        return self.settings

    # Collections

    def get_collection(self, kind: Union[CollectionKind, str]) -> ItemCollection:
        """
        Get an item collection.

        Args:
            kind: CollectionKind or its value (bookmarks, titles, ...)

        Returns:
            The collection
        """
        try:
            return self.collections[CollectionKind(kind)]
        except ValueError:
            raise DocumentError("Unknown collection", details=repr(kind)) from None

    def _add_to(self, kind: CollectionKind, item: Any) -> int:
        return self.collections[kind].add_item(item)

    def add_bookmark(self, bookmark: Union[Bookmark, str]) -> int:
        if isinstance(bookmark, str):
            bookmark = Bookmark(bookmark)
        return self._add_to(CollectionKind.BOOKMARKS, bookmark)

    def add_title(self, title: Title) -> int:
        """
        Add a heading to the titles collection.

        The collection index becomes the heading's bookmark id. Sections
        call this from ``add_title``.
        """
        index = self._add_to(CollectionKind.TITLES, title)
        title.bookmark_id = index
        return index

    def add_footnote(self, footnote: Union[Footnote, str]) -> int:
        if isinstance(footnote, str):
            footnote = Footnote(footnote)
        return self._add_to(CollectionKind.FOOTNOTES, footnote)

    def add_endnote(self, endnote: Union[Endnote, str]) -> int:
        if isinstance(endnote, str):
            endnote = Endnote(endnote)
        return self._add_to(CollectionKind.ENDNOTES, endnote)

    def add_chart(self, chart: Chart) -> int:
        return self._add_to(CollectionKind.CHARTS, chart)

    def add_comment(self, comment: Comment) -> int:
        return self._add_to(CollectionKind.COMMENTS, comment)

    def get_bookmarks(self) -> ItemCollection:
        return self.collections[CollectionKind.BOOKMARKS]

    def get_titles(self) -> ItemCollection:
        return self.collections[CollectionKind.TITLES]

    def get_footnotes(self) -> ItemCollection:
        return self.collections[CollectionKind.FOOTNOTES]

    def get_endnotes(self) -> ItemCollection:
        return self.collections[CollectionKind.ENDNOTES]

    def get_charts(self) -> ItemCollection:
        return self.collections[CollectionKind.CHARTS]

    def get_comments(self) -> ItemCollection:
        return self.collections[CollectionKind.COMMENTS]

    # Sections

    def add_section(self, settings: Optional[Mapping[str, Any]] = None) -> Section:
        """
        Append a section.

        Args:
            settings: Page setup values for the section

        Returns:
            The new section
        """
        section = Section(len(self.sections) + 1, settings, document=self)
        self.sections.append(section)
        logger.debug(f"Added section {section.section_id}")
        return section

    def get_sections(self) -> List[Section]:
        return list(self.sections)

    def get_section(self, index: int) -> Optional[Section]:
        """Get a section by zero-based position, or None when out of range."""
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self.sections):
            return None
        return self.sections[index]

    def sort_sections(self, key: Optional[Callable[[Section], Any]] = None) -> None:
        """Sort sections in place, by section id unless ``key`` is given."""
        self.sections.sort(key=key or (lambda section: section.section_id))

    # Defaults

    def get_default_font_name(self) -> str:
        return self.settings.get_default_font_name()

    def set_default_font_name(self, font_name: str) -> None:
        self.settings.set_default_font_name(font_name)

    def get_default_font_size(self) -> float:
        return self.settings.get_default_font_size()

    def set_default_font_size(self, font_size: float) -> None:
        self.settings.set_default_font_size(font_size)

    # Output

    def write(self, fmt: Union[DocumentFormat, str] = DocumentFormat.WORD2007,
              export_options: Optional[Dict[str, Any]] = None) -> bytes:
        """
        Render the document.

        Args:
            fmt: Output format (Word2007, ODText, RTF, HTML, PDF)
            export_options: Writer options

        Returns:
            The rendered document
        """
        from .writer import create_writer

        return create_writer(fmt, self, export_options).write()

    def save(self, path: Union[str, Path], fmt: Union[DocumentFormat, str] = DocumentFormat.WORD2007,
             export_options: Optional[Dict[str, Any]] = None) -> Path:
        """
        Render the document and save it.

        Args:
            path: Output file path
            fmt: Output format (Word2007, ODText, RTF, HTML, PDF)
            export_options: Writer options

        Returns:
            The written path
        """
        from .writer import create_writer

        return create_writer(fmt, self, export_options).save(path)
