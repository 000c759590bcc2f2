"""
Word2007 writer - creates OOXML (.docx) packages.

Builds the WordprocessingML parts, their relationships and
``[Content_Types].xml``, and zips them into a package.
"""

from typing import List, Optional, Tuple
import logging

from ...elements.section import Section, SectionSettings
from ...elements.text import PageBreak, Text, TextBreak, TextRun, Title
from ...styles.style_bag import DEFAULT_PARAGRAPH_STYLE
from ...utils.enums import DocumentFormat, Orientation, StyleFamily
from ...version import __version__
from ..base_writer import PackageWriter
from ..markup import XMLWriter
from .namespaces import (
    CONTENT_TYPES,
    CONTENT_TYPES_NS,
    CORE_NSMAP,
    DEFAULT_CONTENT_TYPES,
    EXTENDED_PROPERTIES_NS,
    OPC_NS,
    RELATIONSHIP_TYPES,
    WORD_NSMAP,
)
from .style import STYLE_WRITERS, NumberingStyleWriter, style_id

logger = logging.getLogger(__name__)

# Twips
DEFAULT_HEADER_DISTANCE = 720


class Word2007Writer(PackageWriter):
    """
    Writes a document as an OOXML package.
    """

    format = DocumentFormat.WORD2007
    file_extension = ".docx"

    def _prepare_parts(self) -> None:
        numbering_styles = self.style_bag.get_styles_by_family(StyleFamily.NUMBERING)

        document_relationships = [
            ("rId1", RELATIONSHIP_TYPES["styles"], "styles.xml"),
            ("rId2", RELATIONSHIP_TYPES["settings"], "settings.xml"),
        ]
        if numbering_styles:
            document_relationships.append(("rId3", RELATIONSHIP_TYPES["numbering"], "numbering.xml"))

        self.add_part("_rels/.rels", self._generate_relationships_xml([
            ("rId1", RELATIONSHIP_TYPES["officeDocument"], "word/document.xml"),
            ("rId2", RELATIONSHIP_TYPES["core-properties"], "docProps/core.xml"),
            ("rId3", RELATIONSHIP_TYPES["extended-properties"], "docProps/app.xml"),
        ]))
        self.add_part("docProps/core.xml", self._generate_core_xml())
        self.add_part("docProps/app.xml", self._generate_app_xml())
        self.add_part("word/document.xml", self._generate_document_xml())
        self.add_part("word/styles.xml", self._generate_styles_xml())
        self.add_part("word/settings.xml", self._generate_settings_xml())
        if numbering_styles:
            self.add_part("word/numbering.xml", self._generate_numbering_xml(numbering_styles))
        self.add_part("word/_rels/document.xml.rels", self._generate_relationships_xml(document_relationships))
        self._parts = {"[Content_Types].xml": self._generate_content_types_xml(), **self._parts}

    def _generate_content_types_xml(self) -> bytes:
        xml_writer = self.new_xml_writer({None: CONTENT_TYPES_NS})
        xml_writer.start_element("Types")
        for extension, content_type in DEFAULT_CONTENT_TYPES.items():
            xml_writer.start_element("Default")
            xml_writer.write_attribute("Extension", extension)
            xml_writer.write_attribute("ContentType", content_type)
            xml_writer.end_element()
        for part_name in self._parts:
            content_type = CONTENT_TYPES.get(part_name)
            if content_type is None:
                continue
            xml_writer.start_element("Override")
            xml_writer.write_attribute("PartName", f"/{part_name}")
            xml_writer.write_attribute("ContentType", content_type)
            xml_writer.end_element()
        xml_writer.end_element()
        return self.finish_xml(xml_writer, standalone=True)

    def _generate_relationships_xml(self, relationships: List[Tuple[str, str, str]]) -> bytes:
        xml_writer = self.new_xml_writer({None: OPC_NS})
        xml_writer.start_element("Relationships")
        for rel_id, rel_type, target in relationships:
            xml_writer.start_element("Relationship")
            xml_writer.write_attribute("Id", rel_id)
            xml_writer.write_attribute("Type", rel_type)
            xml_writer.write_attribute("Target", target)
            xml_writer.end_element()
        xml_writer.end_element()
        return self.finish_xml(xml_writer, standalone=True)

    def _generate_core_xml(self) -> bytes:
        doc_info = self.document.get_doc_info()
        xml_writer = self.new_xml_writer(CORE_NSMAP)
        xml_writer.start_element("cp:coreProperties")
        fields = [
            ("dc:title", doc_info.title),
            ("dc:subject", doc_info.subject),
            ("dc:creator", doc_info.creator),
            ("cp:keywords", doc_info.keywords),
            ("dc:description", doc_info.description),
            ("cp:lastModifiedBy", doc_info.last_modified_by),
            ("cp:category", doc_info.category),
        ]
        for name, value in fields:
            if value:
                xml_writer.write_element(name, value)
        for name, value in (("dcterms:created", doc_info.created), ("dcterms:modified", doc_info.modified)):
            xml_writer.start_element(name)
            xml_writer.write_attribute("xsi:type", "dcterms:W3CDTF")
            xml_writer.text(doc_info.format_date(value))
            xml_writer.end_element()
        xml_writer.end_element()
        return self.finish_xml(xml_writer, standalone=True)

    def _generate_app_xml(self) -> bytes:
        doc_info = self.document.get_doc_info()
        xml_writer = self.new_xml_writer({None: EXTENDED_PROPERTIES_NS})
        xml_writer.start_element("Properties")
        xml_writer.write_element("Application", f"Docwright/{__version__}")
        if doc_info.company:
            xml_writer.write_element("Company", doc_info.company)
        xml_writer.end_element()
        return self.finish_xml(xml_writer, standalone=True)

    def _generate_document_xml(self) -> bytes:
        xml_writer = self.new_xml_writer(WORD_NSMAP)
        xml_writer.start_element("w:document")
        xml_writer.start_element("w:body")

        sections = self.document.get_sections()
        for position, section in enumerate(sections):
            for element in section.get_elements():
                self._write_element(xml_writer, element)
            if position < len(sections) - 1:
                # A section ends with the paragraph carrying its properties
                xml_writer.start_element("w:p")
                xml_writer.start_element("w:pPr")
                self._write_section_properties(xml_writer, section)
                xml_writer.end_element()
                xml_writer.end_element()
        if sections:
            self._write_section_properties(xml_writer, sections[-1])
        else:
            self._write_section_properties(xml_writer, None)

        xml_writer.end_element()
        xml_writer.end_element()
        return self.finish_xml(xml_writer, standalone=True)

    def _write_paragraph_start(self, xml_writer: XMLWriter, paragraph_name: Optional[str]) -> None:
        xml_writer.start_element("w:p")
        if paragraph_name:
            xml_writer.start_element("w:pPr")
            xml_writer.start_element("w:pStyle")
            xml_writer.write_attribute("w:val", style_id(paragraph_name))
            xml_writer.end_element()
            xml_writer.end_element()

    def _write_run(self, xml_writer: XMLWriter, text: str, font_name: Optional[str]) -> None:
        xml_writer.start_element("w:r")
        if font_name:
            xml_writer.start_element("w:rPr")
            xml_writer.start_element("w:rStyle")
            xml_writer.write_attribute("w:val", style_id(font_name))
            xml_writer.end_element()
            xml_writer.end_element()
        for position, line in enumerate(text.split("\n")):
            if position:
                xml_writer.write_element("w:br")
            if line:
                xml_writer.start_element("w:t")
                xml_writer.write_attribute("xml:space", "preserve")
                xml_writer.text(line)
                xml_writer.end_element()
        xml_writer.end_element()

    def _write_element(self, xml_writer: XMLWriter, element) -> None:
        if isinstance(element, Text):
            paragraph_name, font_name = self.element_styles(element)
            self._write_paragraph_start(xml_writer, paragraph_name)
            self._write_run(xml_writer, element.text, font_name)
            xml_writer.end_element()
        elif isinstance(element, TextRun):
            paragraph_name, _ = self.element_styles(element)
            self._write_paragraph_start(xml_writer, paragraph_name)
            for child in element.elements:
                if isinstance(child, Text):
                    _, font_name = self.element_styles(child)
                    self._write_run(xml_writer, child.text, font_name)
                else:
                    self._write_run(xml_writer, "\n" * child.count, None)
            xml_writer.end_element()
        elif isinstance(element, TextBreak):
            paragraph_name, _ = self.element_styles(element)
            for _ in range(element.count):
                self._write_paragraph_start(xml_writer, paragraph_name)
                xml_writer.end_element()
        elif isinstance(element, PageBreak):
            xml_writer.start_element("w:p")
            xml_writer.start_element("w:r")
            xml_writer.start_element("w:br")
            xml_writer.write_attribute("w:type", "page")
            xml_writer.end_element()
            xml_writer.end_element()
            xml_writer.end_element()
        elif isinstance(element, Title):
            self._write_title(xml_writer, element)
        else:
            logger.debug(f"Skipping unsupported element {element.element_type!r}")

    def _write_title(self, xml_writer: XMLWriter, title: Title) -> None:
        paragraph_name = title.style_name if self.style_bag.has(title.style_name) else None
        self._write_paragraph_start(xml_writer, paragraph_name)
        if title.bookmark_id is not None:
            xml_writer.start_element("w:bookmarkStart")
            xml_writer.write_attribute("w:id", title.bookmark_id)
            xml_writer.write_attribute("w:name", f"_Toc{title.bookmark_id}")
            xml_writer.end_element()
        self._write_run(xml_writer, title.text, None)
        if title.bookmark_id is not None:
            xml_writer.start_element("w:bookmarkEnd")
            xml_writer.write_attribute("w:id", title.bookmark_id)
            xml_writer.end_element()
        xml_writer.end_element()

    def _write_section_properties(self, xml_writer: XMLWriter, section: Optional[Section]) -> None:
        settings = section.get_settings() if section is not None else SectionSettings()
        xml_writer.start_element("w:sectPr")
        xml_writer.start_element("w:pgSz")
        xml_writer.write_attribute("w:w", int(settings.page_width))
        xml_writer.write_attribute("w:h", int(settings.page_height))
        if settings.orientation is Orientation.LANDSCAPE:
            xml_writer.write_attribute("w:orient", "landscape")
        xml_writer.end_element()
        xml_writer.start_element("w:pgMar")
        xml_writer.write_attribute("w:top", int(settings.margin_top))
        xml_writer.write_attribute("w:right", int(settings.margin_right))
        xml_writer.write_attribute("w:bottom", int(settings.margin_bottom))
        xml_writer.write_attribute("w:left", int(settings.margin_left))
        xml_writer.write_attribute("w:header", DEFAULT_HEADER_DISTANCE)
        xml_writer.write_attribute("w:footer", DEFAULT_HEADER_DISTANCE)
        xml_writer.write_attribute("w:gutter", 0)
        xml_writer.end_element()
        if settings.page_number_start is not None:
            xml_writer.start_element("w:pgNumType")
            xml_writer.write_attribute("w:start", settings.page_number_start)
            xml_writer.end_element()
        xml_writer.start_element("w:cols")
        xml_writer.write_attribute("w:num", settings.column_count)
        xml_writer.write_attribute("w:space", int(settings.column_spacing))
        xml_writer.end_element()
        xml_writer.end_element()

    def _generate_styles_xml(self) -> bytes:
        settings = self.document.settings
        xml_writer = self.new_xml_writer(WORD_NSMAP)
        xml_writer.start_element("w:styles")

        xml_writer.start_element("w:docDefaults")
        xml_writer.start_element("w:rPrDefault")
        xml_writer.start_element("w:rPr")
        xml_writer.start_element("w:rFonts")
        for attribute in ("w:ascii", "w:hAnsi", "w:eastAsia", "w:cs"):
            xml_writer.write_attribute(attribute, settings.default_font_name)
        xml_writer.end_element()
        xml_writer.start_element("w:color")
        xml_writer.write_attribute("w:val", settings.default_font_color)
        xml_writer.end_element()
        for element in ("w:sz", "w:szCs"):
            xml_writer.start_element(element)
            xml_writer.write_attribute("w:val", int(round(settings.default_font_size * 2)))
            xml_writer.end_element()
        xml_writer.end_element()
        xml_writer.end_element()
        xml_writer.write_element("w:pPrDefault")
        xml_writer.end_element()

        if not self.style_bag.has(DEFAULT_PARAGRAPH_STYLE):
            xml_writer.start_element("w:style")
            xml_writer.write_attribute("w:type", "paragraph")
            xml_writer.write_attribute("w:default", "1")
            xml_writer.write_attribute("w:styleId", DEFAULT_PARAGRAPH_STYLE)
            xml_writer.start_element("w:name")
            xml_writer.write_attribute("w:val", DEFAULT_PARAGRAPH_STYLE)
            xml_writer.end_element()
            xml_writer.write_element("w:qFormat")
            xml_writer.end_element()

        for style_name, style in self.style_bag.items():
            writer_class = STYLE_WRITERS.get(style.family)
            if writer_class is None:
                continue
            if style.family is StyleFamily.PARAGRAPH:
                writer = writer_class(
                    xml_writer, style, self.style_bag, is_default=style_name == DEFAULT_PARAGRAPH_STYLE
                )
            else:
                writer = writer_class(xml_writer, style, self.style_bag)
            writer.write()

        xml_writer.end_element()
        return self.finish_xml(xml_writer, standalone=True)

    def _generate_numbering_xml(self, numbering_styles) -> bytes:
        xml_writer = self.new_xml_writer(WORD_NSMAP)
        xml_writer.start_element("w:numbering")
        writers = [NumberingStyleWriter(xml_writer, style, self.style_bag) for style in numbering_styles]
        for writer in writers:
            writer.write()
        for writer in writers:
            writer.write_instance()
        xml_writer.end_element()
        return self.finish_xml(xml_writer, standalone=True)

    def _generate_settings_xml(self) -> bytes:
        document_settings = self.document.get_document_settings()
        compatibility = self.document.get_compatibility()
        xml_writer = self.new_xml_writer(WORD_NSMAP)
        xml_writer.start_element("w:settings")

        if document_settings.zoom is not None:
            xml_writer.start_element("w:zoom")
            xml_writer.write_attribute("w:percent", document_settings.zoom)
            xml_writer.end_element()
        flags = [
            ("w:mirrorMargins", document_settings.mirror_margins),
            ("w:hideSpellingErrors", document_settings.hide_spelling_errors),
            ("w:hideGrammaticalErrors", document_settings.hide_grammatical_errors),
            ("w:trackRevisions", document_settings.track_revisions),
        ]
        for name, enabled in flags:
            if enabled:
                xml_writer.write_element(name)
        xml_writer.start_element("w:defaultTabStop")
        xml_writer.write_attribute("w:val", 720)
        xml_writer.end_element()
        if document_settings.even_and_odd_headers:
            xml_writer.write_element("w:evenAndOddHeaders")
        if document_settings.update_fields:
            xml_writer.start_element("w:updateFields")
            xml_writer.write_attribute("w:val", "true")
            xml_writer.end_element()

        xml_writer.start_element("w:compat")
        xml_writer.start_element("w:compatSetting")
        xml_writer.write_attribute("w:name", "compatibilityMode")
        xml_writer.write_attribute("w:uri", "http://schemas.microsoft.com/office/word")
        xml_writer.write_attribute("w:val", compatibility.get_ooxml_version())
        xml_writer.end_element()
        xml_writer.end_element()

        xml_writer.start_element("w:decimalSymbol")
        xml_writer.write_attribute("w:val", document_settings.decimal_symbol)
        xml_writer.end_element()

        xml_writer.end_element()
        return self.finish_xml(xml_writer, standalone=True)
