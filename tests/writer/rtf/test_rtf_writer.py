"""
Tests for the RTF writer.
"""

import pytest

from docwright import Document
from docwright.styles import FontStyle, ParagraphStyle
from docwright.writer.rtf import RTFWriter
from docwright.writer.rtf.style import FontStyleWriter, ParagraphStyleWriter
from docwright.writer.rtf.tables import RTFTables, escape_text


class TestEscapeText:
    """Test cases for escape_text."""

    @pytest.mark.parametrize("text, expected", [
        ("plain", "plain"),
        ("a{b}c\\d", "a\\{b\\}c\\\\d"),
        ("one\ntwo", "one\\line two"),
        ("a\tb", "a\\tab b"),
        ("café", "caf\\u233?"),
        ("😀", "\\u-10179?\\u-8704?"),
    ])
    def test_escape(self, text, expected):
        assert escape_text(text) == expected


class TestRTFTables:
    """Test cases for RTFTables."""

    def test_font_table(self):
        tables = RTFTables("Arial")

        assert tables.font_index("Arial") == 0
        assert tables.font_index("Georgia") == 1
        assert tables.font_index("Georgia") == 1
        assert tables.font_table() == "{\\fonttbl{\\f0\\fnil\\fcharset0 Arial;}{\\f1\\fnil\\fcharset0 Georgia;}}"

    def test_color_table(self):
        tables = RTFTables()

        assert tables.color_index("ff0000") == 2
        assert tables.color_index("FF0000") == 2
        assert tables.color_table() == "{\\colortbl;\\red0\\green0\\blue0;\\red255\\green0\\blue0;}"


class TestRTFStyleWriters:
    """Test cases for the RTF style writers."""

    def test_paragraph_words(self):
        style = ParagraphStyle().set_style_by_array({
            "alignment": "center",
            "space_above": 120,
            "space_below": 0,
            "indent": -360,
            "line_height": 150,
            "keep_next": True,
            "page_break_before": True,
            "tabs": [("right", 9000, "dot"), ("clear", 100)],
        })

        words = ParagraphStyleWriter(style, RTFTables()).write()

        assert words == "\\qc\\sb120\\fi-360\\sl360\\slmult1\\keepn\\pagebb\\tldot\\tqr\\tx9000"

    def test_paragraph_border(self):
        tables = RTFTables()
        style = ParagraphStyle().set_style_by_array({
            "border_bottom_style": "double", "border_bottom_size": 15, "border_bottom_color": "00ff00",
            "padding_bottom": 40,
        })

        words = ParagraphStyleWriter(style, tables).write()

        assert words == "\\brdrb\\brdrdb\\brdrw15\\brdrcf2\\brsp40"

    def test_font_words(self):
        tables = RTFTables()
        style = FontStyle().set_style_by_array({
            "name": "Georgia", "size": 12, "color": "aa0000", "bold": True, "italic": False, "underline": True,
        })

        words = FontStyleWriter(style, tables).write()

        assert words == "\\f1\\fs24\\cf2\\b\\i0\\ul"
        assert tables.fonts == ["Arial", "Georgia"]

    def test_type_mismatch(self):
        assert FontStyleWriter(ParagraphStyle(), RTFTables()).write() is None


class TestRTFWriter:
    """Test cases for RTFWriter."""

    def test_header(self, styled_document):
        data = RTFWriter(styled_document).write()

        assert data.startswith(b"{\\rtf1\\ansi")
        assert data.rstrip().endswith(b"}")
        text = data.decode("ascii")
        assert text.index("\\fonttbl") < text.index("\\colortbl") < text.index("\\stylesheet")
        assert "{\\info{\\title Quarterly report}" in text
        assert "{\\author Jane Doe}" in text

    def test_stylesheet(self, styled_document):
        text = RTFWriter(styled_document).write().decode("ascii")

        assert "{\\s1\\sa120 Normal;}" in text
        assert "{\\s2\\sa120\\qc\\sb120\\sbasedon1 Quote;}" in text
        assert "{\\*\\cs3\\additive\\cf2\\b Strong;}" in text
        assert "Heading_1;}" in text

    def test_body(self, styled_document):
        text = RTFWriter(styled_document).write().decode("ascii")

        assert "\\pard\\plain Plain paragraph\\par" in text
        assert "\\pard\\plain\\s2\\sa120\\qc\\sb120 Quoted text\\par" in text
        assert "{\\cs3\\cf2\\b bold}" in text
        assert "\\line " in text
        assert "\\page\\par" in text
        assert "{\\*\\bkmkstart _Toc1}" in text
        assert "\\outlinelevel0" in text

    def test_sections(self):
        doc = Document()
        doc.add_section().add_text("first")
        doc.add_section({"orientation": "landscape"}).add_text("second")

        text = RTFWriter(doc).write().decode("ascii")

        assert text.count("\\sect\\sectd") == 1
        assert "\\lndscpsxn" in text

    def test_unicode_output_is_ascii(self):
        doc = Document()
        doc.add_section().add_text("Zürich")

        data = RTFWriter(doc).write()

        assert b"Z\\u252?rich" in data
