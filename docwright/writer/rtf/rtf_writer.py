"""
RTF writer - creates Rich Text Format documents.

The body is rendered first so style writers can fill the font and color
tables; the header (tables, stylesheet, info group) is assembled last.
"""

from datetime import datetime
from typing import Dict, List, Optional, Set
import logging

from ...elements.section import SectionSettings
from ...elements.text import PageBreak, Text, TextBreak, TextRun, Title
from ...styles.abstract_style import AbstractStyle
from ...styles.font import FontStyle
from ...styles.paragraph import ParagraphStyle
from ...utils.enums import DocumentFormat, Orientation
from ..base_writer import BaseWriter, is_paragraph_font
from .style import FontStyleWriter, ParagraphStyleWriter
from .tables import RTFTables, escape_text

logger = logging.getLogger(__name__)


class RTFWriter(BaseWriter):
    """
    Writes a document as RTF.
    """

    format = DocumentFormat.RTF
    file_extension = ".rtf"

    def __init__(self, document, export_options=None):
        super().__init__(document, export_options)
        settings = document.settings
        self.tables = RTFTables(settings.default_font_name, settings.default_font_color)
        self._paragraph_words: Dict[str, str] = {}
        self._font_words: Dict[str, str] = {}

    def write(self) -> bytes:
        body = self._render_body()
        stylesheet = self._render_stylesheet()
        header = [
            "{\\rtf1\\ansi\\ansicpg1252\\deff0\\deflang1033",
            self.tables.font_table(),
            self.tables.color_table(),
            stylesheet,
            self._render_info(),
            self._render_page_setup(),
            f"\\f0\\fs{int(round(self.document.settings.default_font_size * 2))}\\cf1",
        ]
        return ("".join(header) + "\n" + body + "}").encode("ascii")

    def style_number(self, style: AbstractStyle) -> int:
        return style.get_index()

    def paragraph_words(self, style_name: str, seen: Optional[Set[str]] = None) -> str:
        """
        Control words of a paragraph style, ancestors first.

        A font style written as a paragraph style contributes its
        paragraph's words followed by its own character words.
        """
        if style_name in self._paragraph_words:
            return self._paragraph_words[style_name]
        seen = seen or set()
        if style_name in seen:
            logger.warning(f"Style {style_name!r} inherits from itself")
            return ""
        seen.add(style_name)

        style = self.style_bag.get_style(style_name)
        words = ""
        if isinstance(style, ParagraphStyle):
            parent = ""
            if style.based_on is not None:
                if isinstance(self.style_bag.get_style(style.based_on), ParagraphStyle):
                    parent = self.paragraph_words(style.based_on, seen)
                else:
                    logger.warning(f"Style {style_name!r} references unknown style {style.based_on!r}")
            words = parent + ParagraphStyleWriter(style, self.tables, self.style_bag).write()
            if style.font is not None:
                words += FontStyleWriter(style.font, self.tables, self.style_bag).write()
        elif isinstance(style, FontStyle):
            if style.paragraph is not None:
                words = ParagraphStyleWriter(style.paragraph, self.tables, self.style_bag).write()
            elif style.paragraph_style_name is not None:
                if isinstance(self.style_bag.get_style(style.paragraph_style_name), ParagraphStyle):
                    words = self.paragraph_words(style.paragraph_style_name, seen)
                else:
                    logger.warning(
                        f"Style {style_name!r} references unknown style {style.paragraph_style_name!r}"
                    )
            words += self.font_words(style_name)
        self._paragraph_words[style_name] = words
        return words

    def font_words(self, style_name: str) -> str:
        if style_name not in self._font_words:
            style = self.style_bag.get_style(style_name)
            words = ""
            if isinstance(style, FontStyle):
                parent = self.style_bag.get_style(style.based_on) if style.based_on else None
                if isinstance(parent, FontStyle) and parent is not style:
                    words = self.font_words(style.based_on)
                words += FontStyleWriter(style, self.tables, self.style_bag).write()
            self._font_words[style_name] = words
        return self._font_words[style_name]

    def _paragraph_open(self, paragraph_name: Optional[str], extra: str = "") -> str:
        words = "\\pard\\plain"
        if paragraph_name:
            style = self.style_bag.get(paragraph_name)
            words += f"\\s{self.style_number(style)}{self.paragraph_words(paragraph_name)}"
        return words + extra + " "

    def _run(self, text: str, font_name: Optional[str]) -> str:
        if not font_name:
            return escape_text(text)
        style = self.style_bag.get(font_name)
        return f"{{\\cs{self.style_number(style)}{self.font_words(font_name)} {escape_text(text)}}}"

    def _render_element(self, element) -> str:
        if isinstance(element, Text):
            paragraph_name, font_name = self.element_styles(element)
            return self._paragraph_open(paragraph_name) + self._run(element.text, font_name) + "\\par\n"
        if isinstance(element, TextRun):
            paragraph_name, _ = self.element_styles(element)
            parts = [self._paragraph_open(paragraph_name)]
            for child in element.elements:
                if isinstance(child, Text):
                    parts.append(self._run(child.text, self.element_styles(child)[1]))
                else:
                    parts.append("\\line " * child.count)
            return "".join(parts) + "\\par\n"
        if isinstance(element, TextBreak):
            paragraph_name, _ = self.element_styles(element)
            return (self._paragraph_open(paragraph_name) + "\\par\n") * element.count
        if isinstance(element, PageBreak):
            return "\\pard\\plain\\page\\par\n"
        if isinstance(element, Title):
            paragraph_name = element.style_name if self.style_bag.has(element.style_name) else None
            level = f"\\outlinelevel{max(element.depth - 1, 0)}"
            bookmark = ""
            if element.bookmark_id is not None:
                name = f"_Toc{element.bookmark_id}"
                bookmark = f"{{\\*\\bkmkstart {name}}}{{\\*\\bkmkend {name}}}"
            return self._paragraph_open(paragraph_name, level) + bookmark + escape_text(element.text) + "\\par\n"
        logger.debug(f"Skipping unsupported element {element.element_type!r}")
        return ""

    def _render_body(self) -> str:
        parts: List[str] = []
        for position, section in enumerate(self.document.get_sections()):
            if position:
                parts.append("\\sect\\sectd" + self._section_words(section.get_settings()) + "\n")
            for element in section.get_elements():
                parts.append(self._render_element(element))
        return "".join(parts)

    def _section_words(self, settings: SectionSettings) -> str:
        words = (
            f"\\pgwsxn{int(settings.page_width)}\\pghsxn{int(settings.page_height)}"
            f"\\marglsxn{int(settings.margin_left)}\\margrsxn{int(settings.margin_right)}"
            f"\\margtsxn{int(settings.margin_top)}\\margbsxn{int(settings.margin_bottom)}"
        )
        if settings.orientation is Orientation.LANDSCAPE:
            words += "\\lndscpsxn"
        if settings.column_count > 1:
            words += f"\\cols{settings.column_count}\\colsx{int(settings.column_spacing)}"
        if settings.page_number_start is not None:
            words += f"\\pgnrestart\\pgnstarts{settings.page_number_start}"
        return words

    def _render_page_setup(self) -> str:
        sections = self.document.get_sections()
        settings = sections[0].get_settings() if sections else SectionSettings()
        words = (
            f"\\paperw{int(settings.page_width)}\\paperh{int(settings.page_height)}"
            f"\\margl{int(settings.margin_left)}\\margr{int(settings.margin_right)}"
            f"\\margt{int(settings.margin_top)}\\margb{int(settings.margin_bottom)}"
        )
        if settings.orientation is Orientation.LANDSCAPE:
            words += "\\landscape"
        if sections:
            words += "\\sectd" + self._section_words(settings)
        return words

    def _render_stylesheet(self) -> str:
        entries: List[str] = []
        for style_name, style in self.style_bag.items():
            number = self.style_number(style)
            name = escape_text(style_name)
            if isinstance(style, ParagraphStyle) or (isinstance(style, FontStyle) and is_paragraph_font(style)):
                based_on = ""
                parent = None
                if isinstance(style, ParagraphStyle) and style.based_on:
                    parent = self.style_bag.get_style(style.based_on)
                if isinstance(parent, ParagraphStyle):
                    based_on = f"\\sbasedon{self.style_number(parent)}"
                entries.append(f"{{\\s{number}{self.paragraph_words(style_name)}{based_on} {name};}}")
            elif isinstance(style, FontStyle):
                entries.append(f"{{\\*\\cs{number}\\additive{self.font_words(style_name)} {name};}}")
            else:
                logger.debug(f"Style {style_name!r} ({style.family.value}) has no RTF rendering")
        return f"{{\\stylesheet{''.join(entries)}}}"

    @staticmethod
    def _time_words(value: datetime) -> str:
        return f"\\yr{value.year}\\mo{value.month}\\dy{value.day}\\hr{value.hour}\\min{value.minute}"

    def _render_info(self) -> str:
        doc_info = self.document.get_doc_info()
        fields = [
            ("title", doc_info.title),
            ("subject", doc_info.subject),
            ("author", doc_info.creator),
            ("operator", doc_info.last_modified_by),
            ("keywords", doc_info.keywords),
            ("doccomm", doc_info.description),
            ("category", doc_info.category),
            ("company", doc_info.company),
        ]
        groups = "".join(f"{{\\{word} {escape_text(value)}}}" for word, value in fields if value)
        groups += f"{{\\creatim{self._time_words(doc_info.created)}}}"
        groups += f"{{\\revtim{self._time_words(doc_info.modified)}}}"
        return f"{{\\info{groups}}}"
