"""
Tests for the PDF writer.
"""

from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4, LETTER, landscape
from reportlab.platypus import KeepTogether, PageBreak, Paragraph, Spacer
from reportlab.platypus.doctemplate import ActionFlowable

from docwright import Document, Settings
from docwright.elements.section import Section
from docwright.styles import FontStyle, ParagraphStyle
from docwright.writer.pdf import PDFWriter
from docwright.writer.pdf.style import FontStyleWriter, RunFormat, base_font_family, font_attributes


class TestFontMapping:
    """Test cases for the PDF font mapping."""

    def test_base_font_family(self):
        assert base_font_family("Arial") == "Helvetica"
        assert base_font_family("Times New Roman") == "Times-Roman"
        assert base_font_family("PT Sans Serif") == "Helvetica"
        assert base_font_family("Courier New") == "Courier"
        assert base_font_family(None) == "Helvetica"

    def test_font_attributes(self):
        writer = PDFWriter(Document())
        font = FontStyle().set_style_by_array({"name": "Georgia", "bold": True, "size": 14, "color": "336699"})

        attributes = font_attributes(font, writer.base_style)

        assert attributes["fontName"] == "Times-Bold"
        assert attributes["fontSize"] == 14
        assert attributes["leading"] == 14 * 1.2
        assert attributes["textColor"].hexval().lower() == "0x336699"

    def test_run_format(self):
        style = FontStyle().set_style_by_array({"bold": True, "italic": True, "color": "ff0000", "underline": True})

        run_format = FontStyleWriter(style).write()

        assert run_format.apply("x") == '<font color="#FF0000"><b><i><u>x</u></i></b></font>'

    def test_hidden_run(self):
        style = FontStyle().set_style_by_array({"hidden": True})

        assert FontStyleWriter(style).write().apply("secret") == ""

    def test_empty_run_format(self):
        assert RunFormat().apply("plain") == "plain"


class TestPDFWriter:
    """Test cases for PDFWriter."""

    def test_write(self, styled_document):
        data = PDFWriter(styled_document).write()

        assert data.startswith(b"%PDF")
        assert b"Quarterly report" in data

    def test_empty_document(self, document):
        assert PDFWriter(document).write().startswith(b"%PDF")

    def test_page_template(self):
        doc = Document(Settings(pdf_page_size="letter"))
        section = doc.add_section({"orientation": "landscape", "column_count": 2, "column_spacing": 720})
        writer = PDFWriter(doc)

        template = writer._page_template(section, LETTER)

        assert tuple(template.pagesize) == tuple(landscape(LETTER))
        assert len(template.frames) == 2
        assert template.frames[1]._x1 > template.frames[0]._x1

    def test_portrait_template(self):
        writer = PDFWriter(Document())

        template = writer._page_template(Section(1), A4)

        assert tuple(template.pagesize) == tuple(A4)
        assert len(template.frames) == 1

    def test_paragraph_style_inheritance(self, styled_document):
        writer = PDFWriter(styled_document)

        normal = writer.paragraph_style("Normal")
        quote = writer.paragraph_style("Quote")

        assert normal.spaceAfter == 6
        assert quote.parent is normal
        assert quote.spaceAfter == 6
        assert quote.spaceBefore == 6
        assert quote.alignment == TA_CENTER
        assert writer.paragraph_style(None) is writer.base_style

    def test_title_style(self, styled_document):
        writer = PDFWriter(styled_document)

        heading = writer.paragraph_style("Heading_1")

        assert heading.fontSize == 16
        assert heading.fontName == "Helvetica-Bold"
        assert heading.keepWithNext == 1

    def test_unknown_parent(self, caplog):
        doc = Document()
        doc.add_paragraph_style("Orphan", {"based_on": "Missing"})

        style = PDFWriter(doc).paragraph_style("Orphan")

        assert style.parent.name == "Document"
        assert "Missing" in caplog.text

    def test_run_format_inheritance(self):
        doc = Document()
        doc.add_font_style("Base", {"bold": True})
        doc.add_font_style("Child", {"based_on": "Base", "italic": True})

        run_format = PDFWriter(doc).run_format("Child")

        assert run_format.apply("x") == "<b><i>x</i></b>"

    def test_text_markup(self):
        assert PDFWriter.text_markup("a < b\nc") == "a &lt; b<br/>c"

    def test_uppercase_markup(self):
        run_format = RunFormat()
        run_format.uppercase = True

        assert PDFWriter.text_markup("loud", run_format) == "LOUD"

    def test_breaks_and_grouping(self):
        doc = Document()
        doc.add_paragraph_style("Chapter", {"page_break_before": True, "keep_lines": True})
        doc.add_paragraph_style("Column", {"break_kind": "column", "break_position": "after"})
        doc.add_paragraph_style("Unset", {"break_kind": "page"})
        section = doc.add_section()
        section.add_text("chapter", paragraph_style="Chapter")
        section.add_text("column", paragraph_style="Column")
        section.add_text("plain", paragraph_style="Unset")

        story = PDFWriter(doc).build_story(doc.get_sections())

        assert isinstance(story[0], PageBreak)
        assert isinstance(story[1], KeepTogether)
        assert isinstance(story[2], Paragraph)
        assert isinstance(story[3], ActionFlowable)
        assert story[3].action[0] == "frameEnd"
        assert isinstance(story[4], Paragraph)
        assert len(story) == 5

    def test_story_elements(self, styled_document):
        story = PDFWriter(styled_document).build_story(styled_document.get_sections())

        assert any(isinstance(flowable, Spacer) for flowable in story)
        assert any(type(flowable) is PageBreak for flowable in story)
        assert isinstance(story[0], Paragraph)
        assert story[0].getPlainText() == "Introduction"

    def test_notes(self):
        doc = Document()
        doc.add_section().add_text("body")
        doc.add_footnote("see here")

        story = PDFWriter(doc).build_story(doc.get_sections())
        texts = [flowable.getPlainText() for flowable in story if isinstance(flowable, Paragraph)]

        assert "Footnotes" in texts
        assert "1. see here" in texts

    def test_save(self, styled_document, temp_dir):
        path = styled_document.save(temp_dir / "report.pdf", "PDF")

        assert path.read_bytes().startswith(b"%PDF")
