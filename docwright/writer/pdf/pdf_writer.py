"""
PDF writer - lays the document out with ReportLab platypus.

Each section gets its own page template (orientation, margins and
columns); the page size comes from the ``pdf_page_size`` setting.
"""

from typing import Dict, List, Optional, Set
from xml.sax.saxutils import escape
import io
import logging

from reportlab.lib.colors import HexColor
from reportlab.lib.fonts import tt2ps
from reportlab.lib.pagesizes import A4, LEGAL, LETTER, landscape, portrait
from reportlab.lib.styles import ParagraphStyle as RLParagraphStyle
from reportlab.platypus import (
    BaseDocTemplate,
    Frame,
    FrameBreak,
    KeepTogether,
    NextPageTemplate,
    PageBreak as RLPageBreak,
    PageTemplate,
    Paragraph,
    Spacer,
)

from ...elements.section import Section, SectionSettings
from ...elements.text import PageBreak, Text, TextBreak, TextRun, Title
from ...styles.font import FontStyle
from ...styles.paragraph import ParagraphStyle
from ...utils.enums import BreakKind, BreakPosition, DocumentFormat, Orientation
from ...version import __version__
from ..base_writer import BaseWriter, is_paragraph_font
from .style import FontStyleWriter, ParagraphStyleWriter, RunFormat, base_font_family, font_attributes
from .style.font import LEADING_FACTOR

logger = logging.getLogger(__name__)

PAGE_SIZES = {
    "A4": A4,
    "LETTER": LETTER,
    "LEGAL": LEGAL,
}

HEADING_SIZE_STEP = 2
MAX_HEADING = 6


def points(twips) -> float:
    return twips / 20


class PDFWriter(BaseWriter):
    """
    Writes a document as PDF.
    """

    format = DocumentFormat.PDF
    file_extension = ".pdf"

    def __init__(self, document, export_options=None):
        super().__init__(document, export_options)
        settings = document.settings
        self.base_style = RLParagraphStyle(
            "Document",
            fontName=tt2ps(base_font_family(settings.default_font_name), 0, 0),
            fontSize=settings.default_font_size,
            leading=settings.default_font_size * LEADING_FACTOR,
            textColor=HexColor(f"#{settings.default_font_color}"),
            autoLeading="max",
        )
        self._styles: Dict[str, RLParagraphStyle] = {}
        self._runs: Dict[str, RunFormat] = {}

    def write(self) -> bytes:
        self._styles = {}
        self._runs = {}
        buffer = io.BytesIO()
        doc_info = self.document.get_doc_info()
        sections = self.document.get_sections() or [Section(0)]
        page_size = PAGE_SIZES[self.document.settings.pdf_page_size]
        template = BaseDocTemplate(
            buffer,
            pagesize=page_size,
            pageTemplates=[self._page_template(section, page_size) for section in sections],
            title=doc_info.title,
            author=doc_info.creator,
            subject=doc_info.subject,
            keywords=doc_info.keywords,
            creator=f"Docwright/{__version__}",
        )
        story = self.build_story(sections)
        template.build(story)
        logger.debug(f"Laid out {len(story)} flowables over {len(sections)} sections")
        return buffer.getvalue()

    def _page_template(self, section: Section, page_size) -> PageTemplate:
        settings: SectionSettings = section.get_settings()
        if settings.orientation is Orientation.LANDSCAPE:
            page_size = landscape(page_size)
        else:
            page_size = portrait(page_size)
        width, height = page_size
        left, right = points(settings.margin_left), points(settings.margin_right)
        top, bottom = points(settings.margin_top), points(settings.margin_bottom)
        columns = max(settings.column_count, 1)
        spacing = points(settings.column_spacing)
        column_width = (width - left - right - spacing * (columns - 1)) / columns
        frames = [
            Frame(
                left + column * (column_width + spacing),
                bottom,
                column_width,
                height - top - bottom,
                id=f"section-{section.section_id}-column-{column + 1}",
                leftPadding=0,
                rightPadding=0,
                topPadding=0,
                bottomPadding=0,
            )
            for column in range(columns)
        ]
        return PageTemplate(id=f"section-{section.section_id}", frames=frames, pagesize=page_size)

    def build_story(self, sections: List[Section]) -> List:
        """Flowables for every section, then the notes."""
        story: List = []
        for position, section in enumerate(sections):
            if position:
                story.append(NextPageTemplate(f"section-{section.section_id}"))
                story.append(RLPageBreak())
            for element in section.get_elements():
                story.extend(self._flowables(element))
        story.extend(self._notes("Footnotes", self.document.get_footnotes()))
        story.extend(self._notes("Endnotes", self.document.get_endnotes()))
        if not story:
            story.append(Spacer(0, 0))
        return story

    def paragraph_style(self, style_name: Optional[str], seen: Optional[Set[str]] = None) -> RLParagraphStyle:
        """
        ReportLab style of a registered paragraph style (or paragraph-bound
        font style), built on its parent's ReportLab style.
        """
        if not style_name:
            return self.base_style
        if style_name in self._styles:
            return self._styles[style_name]
        seen = seen or set()
        if style_name in seen:
            logger.warning(f"Style {style_name!r} inherits from itself")
            return self.base_style
        seen.add(style_name)

        style = self.style_bag.get_style(style_name)
        result = self.base_style
        if isinstance(style, ParagraphStyle):
            parent = self._parent_style(style_name, style.based_on, seen)
            result = ParagraphStyleWriter(style, parent, self.style_bag).write()
        elif isinstance(style, FontStyle) and is_paragraph_font(style):
            parent = self._parent_style(style_name, style.paragraph_style_name, seen)
            if style.paragraph is not None:
                parent = ParagraphStyleWriter(style.paragraph, parent, self.style_bag).write()
            result = RLParagraphStyle(style_name, parent=parent, **font_attributes(style, parent))
        self._styles[style_name] = result
        return result

    def _parent_style(self, style_name: str, parent_name: Optional[str], seen: Set[str]) -> RLParagraphStyle:
        if parent_name is None:
            return self.base_style
        if not isinstance(self.style_bag.get_style(parent_name), ParagraphStyle):
            logger.warning(f"Style {style_name!r} references unknown style {parent_name!r}")
            return self.base_style
        return self.paragraph_style(parent_name, seen)

    def paragraph_chain(self, style_name: Optional[str]) -> List[ParagraphStyle]:
        """Paragraph styles applying to a paragraph, ancestors first."""
        chain: List[ParagraphStyle] = []
        seen: Set[str] = set()
        while style_name and style_name not in seen:
            seen.add(style_name)
            style = self.style_bag.get_style(style_name)
            if isinstance(style, FontStyle):
                if style.paragraph is not None:
                    chain.insert(0, style.paragraph)
                style_name = style.paragraph_style_name
            elif isinstance(style, ParagraphStyle):
                chain.insert(0, style)
                style_name = style.based_on
            else:
                break
        return chain

    def run_format(self, style_name: Optional[str], seen: Optional[Set[str]] = None) -> RunFormat:
        """Inline markup of a font style, ancestors' tags first."""
        if not style_name:
            return RunFormat()
        if style_name in self._runs:
            return self._runs[style_name]
        seen = seen or set()
        style = self.style_bag.get_style(style_name)
        run_format = RunFormat()
        if isinstance(style, FontStyle) and style_name not in seen:
            seen.add(style_name)
            if style.based_on and isinstance(self.style_bag.get_style(style.based_on), FontStyle):
                run_format.extend(self.run_format(style.based_on, seen))
            run_format.extend(FontStyleWriter(style, self.style_bag).write())
        self._runs[style_name] = run_format
        return run_format

    @staticmethod
    def text_markup(text: str, run_format: Optional[RunFormat] = None) -> str:
        if run_format is not None and run_format.uppercase:
            text = text.upper()
        markup = escape(text).replace("\n", "<br/>")
        return run_format.apply(markup) if run_format is not None else markup

    def _paragraph(self, markup: str, paragraph_name: Optional[str]) -> List:
        """Paragraph flowable plus the breaks and grouping its style declares."""
        flowable = Paragraph(markup, self.paragraph_style(paragraph_name))
        chain = self.paragraph_chain(paragraph_name)
        keep_lines = next((style.keep_lines for style in reversed(chain) if style.keep_lines is not None), None)
        if keep_lines:
            flowable = KeepTogether([flowable])

        flowables = [flowable]
        breaking = next(
            (style for style in reversed(chain) if style.break_position is not BreakPosition.UNSET), None
        )
        if breaking is not None and breaking.break_kind is not BreakKind.AUTO:
            page_break = RLPageBreak() if breaking.break_kind is BreakKind.PAGE else FrameBreak()
            if breaking.break_position is BreakPosition.BEFORE:
                flowables.insert(0, page_break)
            else:
                flowables.append(page_break)
        return flowables

    def _flowables(self, element) -> List:
        if isinstance(element, Text):
            paragraph_name, font_name = self.element_styles(element)
            markup = self.text_markup(element.text, self.run_format(font_name))
            return self._paragraph(markup, paragraph_name)
        if isinstance(element, TextRun):
            paragraph_name, _ = self.element_styles(element)
            parts = []
            for child in element.elements:
                if isinstance(child, Text):
                    parts.append(self.text_markup(child.text, self.run_format(self.element_styles(child)[1])))
                else:
                    parts.append("<br/>" * child.count)
            return self._paragraph("".join(parts), paragraph_name)
        if isinstance(element, TextBreak):
            paragraph_name, _ = self.element_styles(element)
            return [Spacer(1, self.paragraph_style(paragraph_name).leading * element.count)]
        if isinstance(element, PageBreak):
            return [RLPageBreak()]
        if isinstance(element, Title):
            return self._title(element)
        logger.debug(f"Skipping unsupported element {element.element_type!r}")
        return []

    def _title(self, title: Title) -> List:
        if self.style_bag.has(title.style_name):
            style_name = title.style_name
            run_format = self.run_format(style_name)
            markup = self.text_markup(title.text, run_format)
        else:
            style_name = None
            markup = f"<b>{self.text_markup(title.text)}</b>"
        if title.bookmark_id is not None:
            markup = f'<a name="_Toc{title.bookmark_id}"/>{markup}'
        flowables = self._paragraph(markup, style_name)
        if style_name is None:
            depth = min(max(title.depth, 1), MAX_HEADING)
            size = self.base_style.fontSize + (MAX_HEADING - depth + 1) * HEADING_SIZE_STEP
            heading = RLParagraphStyle(
                f"Heading{depth}",
                parent=self.base_style,
                fontSize=size,
                leading=size * LEADING_FACTOR,
                spaceBefore=size / 2,
                spaceAfter=size / 4,
                keepWithNext=1,
            )
            flowables = [Paragraph(markup, heading)]
        return flowables

    def _notes(self, heading: str, notes) -> List:
        if not len(notes):
            return []
        flowables: List = [Spacer(1, self.base_style.leading), Paragraph(f"<b>{heading}</b>", self.base_style)]
        for index, note in notes.items():
            flowables.append(Paragraph(f"{index}. {self.text_markup(note.text)}", self.base_style))
        return flowables
