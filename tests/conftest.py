"""
Pytest configuration for Docwright
"""

import io
import logging
import sys
import zipfile
from pathlib import Path

import pytest
from lxml import etree

from docwright import Document


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests: console only, warnings and above."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(name)s - %(levelname)s - %(message)s"))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    import tempfile
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def document():
    """Empty document."""
    return Document()


@pytest.fixture
def styled_document():
    """Document with paragraph, font and title styles and one section of content."""
    doc = Document()
    doc.get_doc_info().update({"title": "Quarterly report", "creator": "Jane Doe", "keywords": "report"})
    doc.set_default_paragraph_style({"space_below": 120})
    doc.add_paragraph_style("Quote", {"alignment": "center", "space-above": 120, "based_on": "Normal"})
    doc.add_font_style("Strong", {"bold": True, "color": "aa0000"})
    doc.add_title_style(1, {"size": 16, "bold": True}, {"keep_next": True, "space_above": 240})

    section = doc.add_section()
    section.add_title("Introduction", 1)
    section.add_text("Plain paragraph")
    section.add_text("Quoted text", paragraph_style="Quote")
    text_run = section.add_text_run("Quote")
    text_run.add_text("Mixed ")
    text_run.add_text("bold", font_style="Strong")
    text_run.add_text_break()
    text_run.add_text("after break")
    section.add_text_break(2)
    section.add_page_break()
    section.add_text("Last page", font_style="Strong")
    return doc


def read_zip(data: bytes) -> zipfile.ZipFile:
    return zipfile.ZipFile(io.BytesIO(data))


def parse_part(data: bytes, part_name: str):
    """Parse one XML part of a zipped package."""
    with read_zip(data) as package:
        return etree.fromstring(package.read(part_name))
