"""
HTML writer - creates a standalone HTML page.

Styles become CSS classes in a ``<style>`` block. An element carries the
classes of its style and of every style it inherits from, ancestors first,
so the cascade reproduces style inheritance.
"""

from typing import Dict, List, Optional, Set
import logging

from lxml import html as lxml_html

from ...elements.text import PageBreak, Text, TextBreak, TextRun, Title
from ...styles.font import FontStyle
from ...styles.numbering import NumberingStyle
from ...styles.paragraph import ParagraphStyle
from ...styles.table import TableStyle
from ...utils.enums import DocumentFormat
from ...utils.units import format_number
from ...version import __version__
from ..base_writer import BaseWriter, is_paragraph_font
from ..markup import XMLWriter
from .style import (
    FontStyleWriter,
    NumberingStyleWriter,
    ParagraphStyleWriter,
    TableStyleWriter,
    class_name,
    format_declarations,
)

logger = logging.getLogger(__name__)

MAX_HEADING = 6


class HTMLWriter(BaseWriter):
    """
    Writes a document as a single HTML page.
    """

    format = DocumentFormat.HTML
    file_extension = ".html"

    def __init__(self, document, export_options=None):
        super().__init__(document, export_options)
        self._classes: Dict[str, List[str]] = {}

    def write(self) -> bytes:
        self._classes = {}
        xml_writer = XMLWriter()
        xml_writer.start_element("html")
        self._write_head(xml_writer)
        self._write_body(xml_writer)
        xml_writer.end_element()
        return lxml_html.tostring(
            xml_writer.get_root(),
            doctype="<!DOCTYPE html>",
            encoding="utf-8",
            method="html",
            pretty_print=self.pretty_print,
        )

    def _write_head(self, xml_writer: XMLWriter) -> None:
        doc_info = self.document.get_doc_info()
        xml_writer.start_element("head")
        xml_writer.start_element("meta")
        xml_writer.write_attribute("charset", "utf-8")
        xml_writer.end_element()
        metas = [
            ("generator", f"Docwright/{__version__}"),
            ("author", doc_info.creator),
            ("description", doc_info.description),
            ("keywords", doc_info.keywords),
        ]
        for name, content in metas:
            if content:
                xml_writer.start_element("meta")
                xml_writer.write_attribute("name", name)
                xml_writer.write_attribute("content", content)
                xml_writer.end_element()
        xml_writer.write_element("title", doc_info.title or "")
        xml_writer.write_element("style", self.render_css())
        xml_writer.end_element()

    def render_css(self) -> str:
        """
        Build the style sheet: a body rule for the document defaults, then
        one rule per registered style in registration order.
        """
        settings = self.document.settings
        rules = [
            "body { "
            + format_declarations([
                ("font-family", f"'{settings.default_font_name}'"),
                ("font-size", f"{format_number(settings.default_font_size)}pt"),
                ("color", f"#{settings.default_font_color}"),
            ])
            + " }"
        ]
        for style_name, style in self.style_bag.items():
            selector = f".{class_name(style_name)}"
            if isinstance(style, ParagraphStyle):
                declarations = ParagraphStyleWriter(style, self.style_bag).write()
                if declarations:
                    rules.append(f"{selector} {{ {format_declarations(declarations)} }}")
            elif isinstance(style, FontStyle):
                declarations = []
                if style.paragraph is not None:
                    declarations.extend(ParagraphStyleWriter(style.paragraph, self.style_bag).write())
                declarations.extend(FontStyleWriter(style, self.style_bag).write())
                if declarations:
                    rules.append(f"{selector} {{ {format_declarations(declarations)} }}")
            elif isinstance(style, (TableStyle, NumberingStyle)):
                writer_class = TableStyleWriter if isinstance(style, TableStyle) else NumberingStyleWriter
                for suffix, declarations in writer_class(style, self.style_bag).write().items():
                    if declarations:
                        rules.append(f"{selector}{suffix} {{ {format_declarations(declarations)} }}")
        return "\n" + "\n".join(rules) + "\n"

    def style_classes(self, style_name: Optional[str], seen: Optional[Set[str]] = None) -> List[str]:
        """
        CSS classes of a style: its ancestors' classes, then its own.

        Paragraph styles follow ``based_on``; font styles follow their
        paragraph style name (for paragraph-bound fonts) and ``based_on``.
        """
        if not style_name:
            return []
        if style_name in self._classes:
            return self._classes[style_name]
        seen = seen or set()
        if style_name in seen:
            logger.warning(f"Style {style_name!r} inherits from itself")
            return []
        seen.add(style_name)

        style = self.style_bag.get_style(style_name)
        parents: List[Optional[str]] = []
        if isinstance(style, ParagraphStyle):
            parents.append(style.based_on)
        elif isinstance(style, FontStyle):
            if is_paragraph_font(style):
                parents.append(style.paragraph_style_name)
            parents.append(style.based_on)

        classes: List[str] = []
        for parent in parents:
            if parent is None:
                continue
            if not self.style_bag.has(parent):
                logger.warning(f"Style {style_name!r} references unknown style {parent!r}")
                continue
            classes.extend(name for name in self.style_classes(parent, seen) if name not in classes)
        classes.append(class_name(style_name))
        self._classes[style_name] = classes
        return classes

    def _write_class(self, xml_writer: XMLWriter, style_name: Optional[str]) -> None:
        classes = self.style_classes(style_name)
        xml_writer.write_attribute_if(classes, "class", " ".join(classes))

    def _write_text(self, xml_writer: XMLWriter, text: str) -> None:
        for position, line in enumerate(text.split("\n")):
            if position:
                xml_writer.write_element("br")
            xml_writer.text(line)

    def _write_run(self, xml_writer: XMLWriter, text: str, font_name: Optional[str]) -> None:
        if font_name is None:
            self._write_text(xml_writer, text)
            return
        xml_writer.start_element("span")
        self._write_class(xml_writer, font_name)
        self._write_text(xml_writer, text)
        xml_writer.end_element()

    def _write_element(self, xml_writer: XMLWriter, element) -> None:
        if isinstance(element, Text):
            paragraph_name, font_name = self.element_styles(element)
            xml_writer.start_element("p")
            self._write_class(xml_writer, paragraph_name)
            self._write_run(xml_writer, element.text, font_name)
            xml_writer.end_element()
        elif isinstance(element, TextRun):
            paragraph_name, _ = self.element_styles(element)
            xml_writer.start_element("p")
            self._write_class(xml_writer, paragraph_name)
            for child in element.elements:
                if isinstance(child, Text):
                    self._write_run(xml_writer, child.text, self.element_styles(child)[1])
                else:
                    for _ in range(child.count):
                        xml_writer.write_element("br")
            xml_writer.end_element()
        elif isinstance(element, TextBreak):
            paragraph_name, _ = self.element_styles(element)
            for _ in range(element.count):
                xml_writer.start_element("p")
                self._write_class(xml_writer, paragraph_name)
                xml_writer.write_element("br")
                xml_writer.end_element()
        elif isinstance(element, PageBreak):
            xml_writer.start_element("div")
            xml_writer.write_attribute("style", "page-break-before: always")
            xml_writer.end_element()
        elif isinstance(element, Title):
            xml_writer.start_element(f"h{min(max(element.depth, 1), MAX_HEADING)}")
            if element.bookmark_id is not None:
                xml_writer.write_attribute("id", f"_Toc{element.bookmark_id}")
            if self.style_bag.has(element.style_name):
                self._write_class(xml_writer, element.style_name)
            self._write_text(xml_writer, element.text)
            xml_writer.end_element()
        else:
            logger.debug(f"Skipping unsupported element {element.element_type!r}")

    def _write_body(self, xml_writer: XMLWriter) -> None:
        xml_writer.start_element("body")
        for section in self.document.get_sections():
            xml_writer.start_element("div")
            xml_writer.write_attribute("class", "section")
            xml_writer.write_attribute("id", f"section-{section.section_id}")
            for element in section.get_elements():
                self._write_element(xml_writer, element)
            xml_writer.end_element()
        self._write_notes(xml_writer, "footnotes", "fn", self.document.get_footnotes())
        self._write_notes(xml_writer, "endnotes", "en", self.document.get_endnotes())
        xml_writer.end_element()

    def _write_notes(self, xml_writer: XMLWriter, css_class: str, id_prefix: str, notes) -> None:
        if not len(notes):
            return
        xml_writer.start_element("div")
        xml_writer.write_attribute("class", css_class)
        xml_writer.write_element("hr")
        xml_writer.start_element("ol")
        for index, note in notes.items():
            xml_writer.start_element("li")
            xml_writer.write_attribute("id", f"{id_prefix}{index}")
            self._write_text(xml_writer, note.text)
            xml_writer.end_element()
        xml_writer.end_element()
        xml_writer.end_element()
