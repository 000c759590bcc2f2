"""
ODText writer - creates OpenDocument Text (.odt) packages.

Package layout: ``mimetype`` (stored, first), ``META-INF/manifest.xml``,
``content.xml``, ``styles.xml`` and ``meta.xml``.
"""

from typing import List, Optional
import logging

from ...version import __version__
from ...elements.text import PageBreak, Text, TextBreak, TextRun, Title
from ...styles.paragraph import ParagraphStyle
from ...utils.enums import DocumentFormat, StyleFamily
from ...utils.units import format_number
from ..base_writer import PackageWriter
from ..markup import XMLWriter
from .namespaces import DOCUMENT_NSMAP, MANIFEST_NSMAP, ODF_VERSION
from .style import STYLE_WRITERS, ParagraphStyleWriter, encode_style_name

logger = logging.getLogger(__name__)

FIRST_PARAGRAPH_STYLE = "P1"
PAGE_BREAK_STYLE = "PageBreak"
PAGE_LAYOUT = "pm1"
STANDARD_STYLE = "Standard"


class ODTextWriter(PackageWriter):
    """
    Writes a document as an ODText package.
    """

    format = DocumentFormat.ODTEXT
    file_extension = ".odt"
    STORED_PARTS = ("mimetype",)

    def _prepare_parts(self) -> None:
        self.add_part("mimetype", self.format.mime_type)
        self.add_part("META-INF/manifest.xml", self._generate_manifest_xml())
        self.add_part("content.xml", self._generate_content_xml())
        self.add_part("styles.xml", self._generate_styles_xml())
        self.add_part("meta.xml", self._generate_meta_xml())

    def _generate_manifest_xml(self) -> bytes:
        xml_writer = self.new_xml_writer(MANIFEST_NSMAP)
        xml_writer.start_element("manifest:manifest")
        xml_writer.write_attribute("manifest:version", ODF_VERSION)
        entries = [
            ("/", self.format.mime_type),
            ("content.xml", "text/xml"),
            ("styles.xml", "text/xml"),
            ("meta.xml", "text/xml"),
        ]
        for path, media_type in entries:
            xml_writer.start_element("manifest:file-entry")
            xml_writer.write_attribute("manifest:full-path", path)
            xml_writer.write_attribute("manifest:media-type", media_type)
            if path == "/":
                xml_writer.write_attribute("manifest:version", ODF_VERSION)
            xml_writer.end_element()
        xml_writer.end_element()
        return self.finish_xml(xml_writer)

    def _font_names(self) -> List[str]:
        names = [self.document.settings.default_font_name]
        for style in self.style_bag.get_styles_by_family(StyleFamily.FONT):
            if style.name and style.name not in names:
                names.append(style.name)
        for style in self.style_bag.get_styles_by_family(StyleFamily.PARAGRAPH):
            if style.font is not None and style.font.name and style.font.name not in names:
                names.append(style.font.name)
        return names

    def _write_font_face_decls(self, xml_writer: XMLWriter) -> None:
        xml_writer.start_element("office:font-face-decls")
        for name in self._font_names():
            xml_writer.start_element("style:font-face")
            xml_writer.write_attribute("style:name", name)
            xml_writer.write_attribute("svg:font-family", name)
            xml_writer.end_element()
        xml_writer.end_element()

    def _generate_content_xml(self) -> bytes:
        xml_writer = self.new_xml_writer(DOCUMENT_NSMAP)
        xml_writer.start_element("office:document-content")
        xml_writer.write_attribute("office:version", ODF_VERSION)
        self._write_font_face_decls(xml_writer)

        xml_writer.start_element("office:automatic-styles")
        for style in self._automatic_styles():
            ParagraphStyleWriter(xml_writer, style).write()
        xml_writer.end_element()

        xml_writer.start_element("office:body")
        xml_writer.start_element("office:text")
        first_paragraph = True
        for _, element in self.iter_elements():
            first_paragraph = self._write_element(xml_writer, element, first_paragraph)
        xml_writer.end_element()
        xml_writer.end_element()

        xml_writer.end_element()
        return self.finish_xml(xml_writer)

    def _automatic_styles(self) -> List[ParagraphStyle]:
        """
        Synthetic styles: the first paragraph links the standard master
        page, page breaks use a break-before paragraph.
        """
        first = ParagraphStyle().set_style_name(FIRST_PARAGRAPH_STYLE).set_auto(True)
        page_break = ParagraphStyle().set_style_name(PAGE_BREAK_STYLE).set_page_break_before(True)
        page_break.set_based_on(STANDARD_STYLE)
        return [first, page_break]

    def _paragraph_attributes(self, xml_writer: XMLWriter, element, first_paragraph: bool) -> Optional[str]:
        paragraph_name, font_name = self.element_styles(element)
        if paragraph_name is None and first_paragraph:
            paragraph_name = FIRST_PARAGRAPH_STYLE
        xml_writer.write_attribute_if(paragraph_name, "text:style-name", encode_style_name(paragraph_name))
        return font_name

    def _write_text(self, xml_writer: XMLWriter, text: str, font_name: Optional[str]) -> None:
        if font_name:
            xml_writer.start_element("text:span")
            xml_writer.write_attribute("text:style-name", encode_style_name(font_name))
        lines = text.split("\n")
        for position, line in enumerate(lines):
            if position:
                xml_writer.write_element("text:line-break")
            if line:
                xml_writer.text(line)
        if font_name:
            xml_writer.end_element()

    def _write_element(self, xml_writer: XMLWriter, element, first_paragraph: bool) -> bool:
        """Write one element; returns whether the next paragraph is still the first one."""
        if isinstance(element, Text):
            xml_writer.start_element("text:p")
            font_name = self._paragraph_attributes(xml_writer, element, first_paragraph)
            self._write_text(xml_writer, element.text, font_name)
            xml_writer.end_element()
        elif isinstance(element, TextRun):
            xml_writer.start_element("text:p")
            self._paragraph_attributes(xml_writer, element, first_paragraph)
            for child in element.elements:
                if isinstance(child, Text):
                    _, font_name = self.element_styles(child)
                    self._write_text(xml_writer, child.text, font_name)
                else:
                    for _ in range(child.count):
                        xml_writer.write_element("text:line-break")
            xml_writer.end_element()
        elif isinstance(element, TextBreak):
            for _ in range(element.count):
                xml_writer.start_element("text:p")
                self._paragraph_attributes(xml_writer, element, first_paragraph)
                xml_writer.end_element()
                first_paragraph = False
        elif isinstance(element, PageBreak):
            xml_writer.start_element("text:p")
            xml_writer.write_attribute("text:style-name", PAGE_BREAK_STYLE)
            xml_writer.end_element()
        elif isinstance(element, Title):
            self._write_title(xml_writer, element)
        else:
            logger.debug(f"Skipping unsupported element {element.element_type!r}")
            return first_paragraph
        return False

    def _write_title(self, xml_writer: XMLWriter, title: Title) -> None:
        xml_writer.start_element("text:h")
        if self.style_bag.has(title.style_name):
            xml_writer.write_attribute("text:style-name", encode_style_name(title.style_name))
        xml_writer.write_attribute("text:outline-level", max(title.depth, 1))
        if title.bookmark_id is not None:
            xml_writer.start_element("text:bookmark")
            xml_writer.write_attribute("text:name", f"_Toc{title.bookmark_id}")
            xml_writer.end_element()
        self._write_text(xml_writer, title.text, None)
        xml_writer.end_element()

    def _generate_styles_xml(self) -> bytes:
        xml_writer = self.new_xml_writer(DOCUMENT_NSMAP)
        xml_writer.start_element("office:document-styles")
        xml_writer.write_attribute("office:version", ODF_VERSION)
        self._write_font_face_decls(xml_writer)

        xml_writer.start_element("office:styles")
        self._write_default_style(xml_writer)
        for style_name, style in self.style_bag.items():
            writer_class = STYLE_WRITERS.get(style.family)
            if writer_class is None:
                logger.debug(f"No ODF writer for style {style_name!r}")
                continue
            writer_class(xml_writer, style, self.style_bag).write()
        xml_writer.end_element()

        xml_writer.start_element("office:automatic-styles")
        self._write_page_layout(xml_writer)
        xml_writer.end_element()

        xml_writer.start_element("office:master-styles")
        xml_writer.start_element("style:master-page")
        xml_writer.write_attribute("style:name", STANDARD_STYLE)
        xml_writer.write_attribute("style:page-layout-name", PAGE_LAYOUT)
        xml_writer.end_element()
        xml_writer.end_element()

        xml_writer.end_element()
        return self.finish_xml(xml_writer)

    def _write_default_style(self, xml_writer: XMLWriter) -> None:
        settings = self.document.settings
        xml_writer.start_element("style:default-style")
        xml_writer.write_attribute("style:family", "paragraph")
        xml_writer.start_element("style:text-properties")
        xml_writer.write_attribute("style:font-name", settings.default_font_name)
        xml_writer.write_attribute("fo:font-size", f"{format_number(settings.default_font_size)}pt")
        xml_writer.write_attribute("fo:color", f"#{settings.default_font_color}")
        xml_writer.end_element()
        xml_writer.end_element()

        if not self.style_bag.has(STANDARD_STYLE):
            xml_writer.start_element("style:style")
            xml_writer.write_attribute("style:name", STANDARD_STYLE)
            xml_writer.write_attribute("style:family", "paragraph")
            xml_writer.write_attribute("style:class", "text")
            xml_writer.end_element()

    def _write_page_layout(self, xml_writer: XMLWriter) -> None:
        """Page layout of the standard master page, taken from the first section."""
        sections = self.document.get_sections()
        settings = sections[0].get_settings() if sections else None

        xml_writer.start_element("style:page-layout")
        xml_writer.write_attribute("style:name", PAGE_LAYOUT)
        xml_writer.start_element("style:page-layout-properties")
        if settings is not None:
            to_inch = self.units.to_inch_string
            xml_writer.write_attribute("fo:page-width", to_inch(settings.page_width))
            xml_writer.write_attribute("fo:page-height", to_inch(settings.page_height))
            xml_writer.write_attribute("style:print-orientation", settings.orientation.value)
            xml_writer.write_attribute("fo:margin-top", to_inch(settings.margin_top))
            xml_writer.write_attribute("fo:margin-bottom", to_inch(settings.margin_bottom))
            xml_writer.write_attribute("fo:margin-left", to_inch(settings.margin_left))
            xml_writer.write_attribute("fo:margin-right", to_inch(settings.margin_right))
            if settings.column_count > 1:
                xml_writer.start_element("style:columns")
                xml_writer.write_attribute("fo:column-count", settings.column_count)
                xml_writer.write_attribute("fo:column-gap", to_inch(settings.column_spacing))
                xml_writer.end_element()
        xml_writer.end_element()
        xml_writer.end_element()

    def _generate_meta_xml(self) -> bytes:
        doc_info = self.document.get_doc_info()
        xml_writer = self.new_xml_writer(DOCUMENT_NSMAP)
        xml_writer.start_element("office:document-meta")
        xml_writer.write_attribute("office:version", ODF_VERSION)
        xml_writer.start_element("office:meta")
        xml_writer.write_element("meta:generator", f"Docwright/{__version__}")
        fields = [
            ("dc:title", doc_info.title),
            ("dc:subject", doc_info.subject),
            ("dc:description", doc_info.description),
            ("meta:keyword", doc_info.keywords),
            ("meta:initial-creator", doc_info.creator),
            ("dc:creator", doc_info.last_modified_by),
        ]
        for name, value in fields:
            if value:
                xml_writer.write_element(name, value)
        xml_writer.write_element("meta:creation-date", doc_info.format_date(doc_info.created))
        xml_writer.write_element("dc:date", doc_info.format_date(doc_info.modified))
        if doc_info.category or doc_info.company:
            for name, value in (("Category", doc_info.category), ("Company", doc_info.company)):
                if value:
                    xml_writer.start_element("meta:user-defined")
                    xml_writer.write_attribute("meta:name", name)
                    xml_writer.text(value)
                    xml_writer.end_element()
        xml_writer.end_element()
        xml_writer.end_element()
        return self.finish_xml(xml_writer)
