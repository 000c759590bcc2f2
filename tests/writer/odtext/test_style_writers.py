"""
Tests for the ODF font, table and numbering style writers.
"""

import pytest

from docwright.styles import NumberingStyle, ParagraphStyle, StyleBag, TableStyle
from docwright.styles.font import FontStyle
from docwright.writer.odtext.style import (
    FontStyleWriter,
    NumberingStyleWriter,
    TableStyleWriter,
    encode_style_name,
)

from .helpers import attr, qname, render


def write_font(style, style_bag=None, **kwargs):
    root, _ = render(FontStyleWriter, style, style_bag, **kwargs)
    return root[0]


class TestFontStyleWriter:
    """Test cases for the ODF FontStyleWriter."""

    def test_text_style(self):
        bag = StyleBag()
        style = bag.add_font_style("Strong", {
            "name": "Georgia", "size": 11.5, "color": "aa0000", "bold": True, "italic": False,
        })

        element = write_font(style, bag)
        props = element.find(qname("style:text-properties"))

        assert attr(element, "style:family") == "text"
        assert attr(props, "style:font-name") == "Georgia"
        assert attr(props, "fo:font-size") == "11.5pt"
        assert attr(props, "fo:color") == "#AA0000"
        assert attr(props, "fo:font-weight") == "bold"
        assert attr(props, "fo:font-style") == "normal"

    def test_title_style_is_paragraph_family(self):
        bag = StyleBag()
        style = bag.add_title_style(2, {"bold": True}, {"space_above": 240})

        element = write_font(style, bag)
        props = element.find(qname("style:paragraph-properties"))

        assert attr(element, "style:name") == "Heading_2"
        assert attr(element, "style:family") == "paragraph"
        assert attr(element, "style:default-outline-level") == "2"
        assert attr(props, "fo:margin-top") == "0.1667in"

    def test_font_with_named_paragraph(self):
        bag = StyleBag()
        bag.add_paragraph_style("Centered", {"alignment": "center"})
        style = bag.add_font_style("Caption", {"italic": True}, "Centered")

        element = write_font(style, bag)

        assert attr(element, "style:family") == "paragraph"
        assert attr(element, "style:parent-style-name") == "Centered"

    def test_text_parent(self):
        bag = StyleBag()
        bag.add_font_style("Base", {"name": "Arial"})
        style = bag.add_font_style("Child", {"based_on": "Base", "bold": True})

        assert attr(write_font(style, bag), "style:parent-style-name") == "Base"

    def test_decorations(self):
        style = FontStyle().set_style_by_array({
            "underline": "double",
            "strikethrough": True,
            "superscript": True,
            "small_caps": True,
            "bg_color": "ffff00",
            "hidden": True,
            "lang": "en-US",
            "spacing": 20,
            "scale": 90,
        })
        style.set_style_name("Fancy")

        props = write_font(style).find(qname("style:text-properties"))

        assert attr(props, "style:text-underline-style") == "solid"
        assert attr(props, "style:text-underline-type") == "double"
        assert attr(props, "style:text-line-through-style") == "solid"
        assert attr(props, "style:text-position") == "super 58%"
        assert attr(props, "fo:font-variant") == "small-caps"
        assert attr(props, "fo:background-color") == "#FFFF00"
        assert attr(props, "text:display") == "none"
        assert attr(props, "fo:language") == "en"
        assert attr(props, "fo:country") == "US"
        assert attr(props, "fo:letter-spacing") == "0.0139in"
        assert attr(props, "style:text-scale") == "90%"

    def test_underline_none(self):
        style = FontStyle().set_style_by_array({"underline": False})
        style.set_style_name("Plain")

        props = write_font(style).find(qname("style:text-properties"))

        assert attr(props, "style:text-underline-style") == "none"

    def test_nested_writes_only_properties(self):
        style = FontStyle().set_style_by_array({"bold": True})

        element = write_font(style, nested=True)

        assert element.tag == qname("style:text-properties")

    def test_names_encoded_as_ncname(self):
        bag = StyleBag()
        bag.add_font_style("Base Text", {"size": 10})
        style = bag.add_font_style("Red Text", {"color": "ff0000", "based_on": "Base Text"})

        element = write_font(style, bag)

        assert attr(element, "style:name") == "Red_20_Text"
        assert attr(element, "style:display-name") == "Red Text"
        assert attr(element, "style:parent-style-name") == "Base_20_Text"

    def test_paragraph_style_is_skipped(self):
        root, result = render(FontStyleWriter, ParagraphStyle())

        assert result is None
        assert len(root) == 0


class TestTableStyleWriter:
    """Test cases for the ODF TableStyleWriter."""

    def test_table_and_cell_styles(self):
        bag = StyleBag()
        style = bag.add_table_style(
            "Grid",
            {"width": 5000, "unit": "pct", "alignment": "center", "border_size": 6, "cell_margin": 80},
            {"bg_color": "cccccc"},
        )

        root, _ = render(TableStyleWriter, style, bag)
        table, cell, first_row = list(root)
        table_props = table.find(qname("style:table-properties"))
        cell_props = cell.find(qname("style:table-cell-properties"))
        first_props = first_row.find(qname("style:table-cell-properties"))

        assert attr(table, "style:family") == "table"
        assert attr(table_props, "style:rel-width") == "100%"
        assert attr(table_props, "table:align") == "center"
        assert attr(table_props, "table:border-model") == "collapsing"
        assert attr(cell, "style:name") == "Grid.Cell"
        assert attr(cell_props, "fo:border") == "0.3pt solid #000000"
        assert attr(cell_props, "fo:padding") == "0.0556in"
        assert attr(first_row, "style:name") == "Grid.FirstRow"
        assert attr(first_props, "fo:background-color") == "#CCCCCC"
        assert attr(first_props, "fo:border") == "0.3pt solid #000000"

    def test_twip_width_and_spacing(self):
        style = TableStyle({"width": 2880, "unit": "twip", "cell_spacing": 20})
        style.set_style_name("Fixed")

        root, _ = render(TableStyleWriter, style)
        table_props = root[0].find(qname("style:table-properties"))

        assert attr(table_props, "style:width") == "2in"
        assert attr(table_props, "table:border-model") == "separating"
        assert len(root) == 2


class TestNumberingStyleWriter:
    """Test cases for the ODF NumberingStyleWriter."""

    def test_levels(self):
        style = NumberingStyle().set_style_by_array({"type": "multilevel", "levels": [
            {"format": "decimal", "text": "%1.", "left": 720, "hanging": 360, "tab_pos": 720},
            {"format": "bullet", "text": "-"},
            {"format": "lowerLetter", "text": "(%3)", "start": 2},
        ]})
        style.set_style_name("Outline")

        root, _ = render(NumberingStyleWriter, style)
        list_style = root[0]
        first, second, third = list(list_style)
        label = first.find(qname("style:list-level-properties")).find(
            qname("style:list-level-label-alignment")
        )

        assert list_style.tag == qname("text:list-style")
        assert attr(list_style, "style:name") == "Outline"
        assert first.tag == qname("text:list-level-style-number")
        assert attr(first, "text:level") == "1"
        assert attr(first, "style:num-format") == "1"
        assert attr(first, "style:num-suffix") == "."
        assert attr(label, "fo:margin-left") == "0.5in"
        assert attr(label, "fo:text-indent") == "-0.25in"
        assert attr(label, "text:label-followed-by") == "listtab"
        assert second.tag == qname("text:list-level-style-bullet")
        assert attr(second, "text:bullet-char") == "-"
        assert attr(third, "style:num-prefix") == "("
        assert attr(third, "style:num-suffix") == ")"
        assert attr(third, "style:num-format") == "a"
        assert attr(third, "text:start-value") == "2"


class TestStyleNames:
    """Test cases for ODF style name encoding."""

    @pytest.mark.parametrize("name, expected", [
        ("Quote", "Quote"),
        ("Heading_1", "Heading_1"),
        ("Grid.Cell", "Grid.Cell"),
        ("My Quote", "My_20_Quote"),
        ("A&B", "A_26_B"),
        ("1st", "_31_st"),
        ("Überschrift", "Überschrift"),
        (None, None),
    ])
    def test_encode_style_name(self, name, expected):
        assert encode_style_name(name) == expected

    def test_numbering_and_table_names(self):
        bag = StyleBag()
        numbering = bag.add_numbering_style("My List", {"levels": [{"format": "decimal"}]})
        table = bag.add_table_style("My Grid", {"border_size": 4})

        list_root, _ = render(NumberingStyleWriter, numbering, bag)
        table_root, _ = render(TableStyleWriter, table, bag)

        assert attr(list_root[0], "style:name") == "My_20_List"
        assert attr(list_root[0], "style:display-name") == "My List"
        assert [attr(element, "style:name") for element in table_root] == ["My_20_Grid", "My_20_Grid.Cell"]
        assert attr(table_root[1], "style:display-name") == "My Grid.Cell"
