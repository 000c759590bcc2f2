"""
Tests for the Word2007 package writer and its style writers.
"""

import pytest

from docwright import Document
from docwright.styles import NumberingStyle, ParagraphStyle, StyleBag
from docwright.writer.markup import XMLWriter
from docwright.writer.word2007 import Word2007Writer
from docwright.writer.word2007.namespaces import WORD_NS, WORD_NSMAP
from docwright.writer.word2007.style import FontStyleWriter, ParagraphStyleWriter, style_id

from tests.conftest import parse_part, read_zip

W = f"{{{WORD_NS}}}"


def w(name):
    return f"{W}{name}"


def val(element):
    return element.get(w("val"))


def render(writer_class, style, style_bag=None, **kwargs):
    xml_writer = XMLWriter(WORD_NSMAP)
    xml_writer.start_element("w:styles")
    writer_class(xml_writer, style, style_bag, **kwargs).write()
    xml_writer.end_element()
    return xml_writer.get_root()


class TestStyleId:
    """Test cases for style_id."""

    @pytest.mark.parametrize("name, expected", [
        ("Heading_1", "Heading_1"),
        ("Block Quote", "BlockQuote"),
        ("***", "Style"),
    ])
    def test_style_id(self, name, expected):
        assert style_id(name) == expected


class TestParagraphStyleWriter:
    """Test cases for the OOXML paragraph style writer."""

    def test_properties(self):
        bag = StyleBag()
        bag.set_default_paragraph_style({})
        style = bag.add_paragraph_style("Body Text", {
            "based_on": "Normal",
            "alignment": "justify",
            "space_above": 120,
            "space_below": 0,
            "line_height": 150,
            "indent": -360,
            "space_before": 720,
            "keep_next": True,
            "widow_control": False,
            "page_break_before": True,
            "background_color": "eeeeee",
        })

        element = render(ParagraphStyleWriter, style, bag)[0]
        ppr = element.find(w("pPr"))

        assert element.get(w("styleId")) == "BodyText"
        assert val(element.find(w("name"))) == "Body Text"
        assert val(element.find(w("basedOn"))) == "Normal"
        assert val(ppr.find(w("jc"))) == "both"
        spacing = ppr.find(w("spacing"))
        assert spacing.get(w("before")) == "120"
        assert spacing.get(w("after")) is None
        assert spacing.get(w("line")) == "360"
        indentation = ppr.find(w("ind"))
        assert indentation.get(w("left")) == "720"
        assert indentation.get(w("hanging")) == "360"
        assert ppr.find(w("keepNext")) is not None
        assert val(ppr.find(w("widowControl"))) == "0"
        assert ppr.find(w("pageBreakBefore")) is not None
        assert ppr.find(w("shd")).get(w("fill")) == "EEEEEE"

    def test_default_flag(self):
        style = ParagraphStyle().set_style_name("Normal")

        element = render(ParagraphStyleWriter, style, is_default=True)[0]

        assert element.get(w("default")) == "1"

    def test_unset_break_position(self):
        style = ParagraphStyle().set_style_by_array({"break_kind": "page"})
        style.set_style_name("P")

        ppr = render(ParagraphStyleWriter, style)[0].find(w("pPr"))

        assert ppr.find(w("pageBreakBefore")) is None

    def test_border_with_padding(self):
        style = ParagraphStyle().set_style_by_array({
            "border_top_size": 20, "border_top_color": "ff0000", "padding_top": 80,
        })
        style.set_style_name("Boxed")

        border = render(ParagraphStyleWriter, style)[0].find(w("pPr")).find(w("pBdr"))
        top = border.find(w("top"))

        assert len(border) == 1
        assert val(top) == "single"
        assert top.get(w("sz")) == "8"
        assert top.get(w("space")) == "4"
        assert top.get(w("color")) == "FF0000"


class TestFontStyleWriter:
    """Test cases for the OOXML font style writer."""

    def test_character_style(self):
        bag = StyleBag()
        style = bag.add_font_style("Strong", {"bold": True, "size": 10.5, "underline": True, "color": "aa0000"})

        element = render(FontStyleWriter, style, bag)[0]
        rpr = element.find(w("rPr"))

        assert element.get(w("type")) == "character"
        assert rpr.find(w("b")) is not None
        assert val(rpr.find(w("sz"))) == "21"
        assert val(rpr.find(w("u"))) == "single"
        assert val(rpr.find(w("color"))) == "AA0000"

    def test_title_style(self):
        bag = StyleBag()
        style = bag.add_title_style(2, {"bold": True}, {"keep_next": True})

        element = render(FontStyleWriter, style, bag)[0]
        ppr = element.find(w("pPr"))

        assert element.get(w("type")) == "paragraph"
        assert element.get(w("styleId")) == "Heading_2"
        assert val(ppr.find(w("outlineLvl"))) == "1"
        assert ppr.find(w("keepNext")) is not None
        assert element.find(w("rPr")).find(w("b")) is not None

    def test_link_style(self):
        bag = StyleBag()
        style = bag.add_link_style("Hyperlink", {"color": "0000ff", "underline": "single"})

        element = render(FontStyleWriter, style, bag)[0]

        assert element.get(w("type")) == "character"
        assert element.find(w("unhideWhenUsed")) is not None


class TestWord2007Package:
    """Test cases for the Word2007 package."""

    def test_parts(self, styled_document):
        data = Word2007Writer(styled_document).write()

        with read_zip(data) as package:
            names = package.namelist()

        assert names[0] == "[Content_Types].xml"
        assert {
            "_rels/.rels", "docProps/core.xml", "docProps/app.xml", "word/document.xml",
            "word/styles.xml", "word/settings.xml", "word/_rels/document.xml.rels",
        } <= set(names)
        assert "word/numbering.xml" not in names

    def test_content_types(self, styled_document):
        types = parse_part(Word2007Writer(styled_document).write(), "[Content_Types].xml")
        overrides = {element.get("PartName") for element in types if element.get("PartName")}

        assert "/word/document.xml" in overrides
        assert "/word/styles.xml" in overrides
        defaults = {element.get("Extension"): element.get("ContentType") for element in types if element.get("Extension")}
        assert defaults["rels"] == "application/vnd.openxmlformats-package.relationships+xml"

    def test_package_relationships(self, styled_document):
        rels = parse_part(Word2007Writer(styled_document).write(), "_rels/.rels")

        assert {rel.get("Target") for rel in rels} >= {"word/document.xml", "docProps/core.xml"}
        assert all(rel.get("Id") and rel.get("Type") for rel in rels)

    def test_document_body(self, styled_document):
        document = parse_part(Word2007Writer(styled_document).write(), "word/document.xml")
        body = document.find(w("body"))
        paragraphs = body.findall(w("p"))

        def style_of(paragraph):
            pstyle = paragraph.find(f"{w('pPr')}/{w('pStyle')}")
            return val(pstyle) if pstyle is not None else None

        def text_of(paragraph):
            return "".join(t.text or "" for t in paragraph.iter(w("t")))

        assert style_of(paragraphs[0]) == "Heading_1"
        assert paragraphs[0].find(w("bookmarkStart")).get(w("name")) == "_Toc1"
        assert text_of(paragraphs[1]) == "Plain paragraph"
        assert style_of(paragraphs[2]) == "Quote"
        assert text_of(paragraphs[3]) == "Mixed boldafter break"
        assert paragraphs[3].find(f".//{w('br')}") is not None
        run_styles = [val(r) for r in paragraphs[3].iter(w("rStyle"))]
        assert run_styles == ["Strong"]
        page_break = [br for br in body.iter(w("br")) if br.get(w("type")) == "page"]
        assert len(page_break) == 1
        assert body[-1].tag == w("sectPr")

    def test_section_properties(self):
        doc = Document()
        doc.add_section({"orientation": "landscape", "page_number_start": 5})
        doc.add_section()

        body = parse_part(Word2007Writer(doc).write(), "word/document.xml").find(w("body"))
        section_properties = list(body.iter(w("sectPr")))

        assert len(section_properties) == 2
        first_size = section_properties[0].find(w("pgSz"))
        assert first_size.get(w("orient")) == "landscape"
        assert section_properties[0].find(w("pgNumType")).get(w("start")) == "5"
        assert section_properties[1].find(w("pgSz")).get(w("orient")) is None

    def test_styles_xml(self, styled_document):
        styles = parse_part(Word2007Writer(styled_document).write(), "word/styles.xml")
        by_id = {style.get(w("styleId")): style for style in styles.iter(w("style"))}

        assert by_id["Normal"].get(w("default")) == "1"
        assert val(by_id["Quote"].find(w("basedOn"))) == "Normal"
        assert by_id["Strong"].get(w("type")) == "character"
        fonts = styles.find(w("docDefaults")).find(f".//{w('rFonts')}")
        assert fonts.get(w("ascii")) == "Arial"

    def test_default_normal_style_added(self):
        doc = Document()
        doc.add_section().add_text("x")

        styles = parse_part(Word2007Writer(doc).write(), "word/styles.xml")
        ids = [style.get(w("styleId")) for style in styles.iter(w("style"))]

        assert ids == ["Normal"]

    def test_numbering(self):
        doc = Document()
        doc.add_paragraph_style("Body", {})
        doc.add_numbering_style("Bullets", {"type": "singleLevel", "levels": [
            {"format": "bullet", "left": 720, "hanging": 360},
        ]})
        doc.add_section().add_text("item")

        data = Word2007Writer(doc).write()
        numbering = parse_part(data, "word/numbering.xml")
        rels = parse_part(data, "word/_rels/document.xml.rels")

        abstract = numbering.find(w("abstractNum"))
        instance = numbering.find(w("num"))
        assert abstract.get(w("abstractNumId")) == "2"
        assert val(abstract.find(f"{w('lvl')}/{w('numFmt')}")) == "bullet"
        assert val(abstract.find(f"{w('lvl')}/{w('lvlText')}")) == "•"
        assert instance.get(w("numId")) == "2"
        assert list(numbering).index(abstract) < list(numbering).index(instance)
        assert any(rel.get("Target") == "numbering.xml" for rel in rels)

    def test_settings(self):
        doc = Document()
        doc.get_document_settings().set_zoom(150)
        doc.get_document_settings().set_flag("track_revisions", True)
        doc.get_compatibility().set_ooxml_version(15)

        settings = parse_part(Word2007Writer(doc).write(), "word/settings.xml")

        assert settings.find(w("zoom")).get(w("percent")) == "150"
        assert settings.find(w("trackRevisions")) is not None
        assert val(settings.find(f"{w('compat')}/{w('compatSetting')}")) == "15"

    def test_core_properties(self, styled_document):
        core = parse_part(Word2007Writer(styled_document).write(), "docProps/core.xml")

        assert core.findtext("{http://purl.org/dc/elements/1.1/}title") == "Quarterly report"
        assert core.findtext("{http://purl.org/dc/elements/1.1/}creator") == "Jane Doe"

    def test_save(self, styled_document, temp_dir):
        path = Word2007Writer(styled_document).save(temp_dir / "out" / "report.docx")

        assert path.exists()
        assert path.read_bytes().startswith(b"PK")
