"""
Command-line interface for Docwright.

Usage:
    docwright build description.json --format ODText --output out.odt
    docwright formats
    docwright version

A description is a JSON object::

    {
      "settings": {"default_font_name": "Arial"},
      "doc_info": {"title": "Report", "creator": "Jane"},
      "default_paragraph_style": {"space_below": 120},
      "styles": {
        "paragraph": [{"name": "Quote", "alignment": "center"}],
        "font": [{"name": "Strong", "bold": true, "paragraph": "Quote"}],
        "link": [{"name": "Link", "color": "0000FF"}],
        "title": [{"depth": 1, "size": 16}],
        "table": [{"name": "Grid", "table": {}, "first_row": {}}],
        "numbering": [{"name": "Bullets", "levels": [{"format": "bullet"}]}]
      },
      "footnotes": ["..."],
      "endnotes": ["..."],
      "sections": [{"settings": {}, "elements": [{"type": "text", "text": "Hello"}]}]
    }
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence
import argparse
import json
import logging
import sys

from .document import Document
from .elements.section import Section
from .exceptions import DocumentError, DocwrightError
from .settings import Settings
from .utils.enums import DocumentFormat
from .utils.logging_setup import setup_logging
from .version import __version__

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _style_values(entry: Mapping[str, Any], *keys: str) -> Dict[str, Any]:
    return {key: value for key, value in entry.items() if key not in keys}


def _add_styles(document: Document, styles: Mapping[str, Sequence[Mapping[str, Any]]]) -> None:
    for entry in styles.get("paragraph", []):
        document.add_paragraph_style(entry["name"], _style_values(entry, "name"))
    for entry in styles.get("font", []):
        document.add_font_style(entry["name"], _style_values(entry, "name", "paragraph"), entry.get("paragraph"))
    for entry in styles.get("link", []):
        document.add_link_style(entry["name"], _style_values(entry, "name"))
    for entry in styles.get("title", []):
        document.add_title_style(entry.get("depth"), _style_values(entry, "depth", "paragraph"), entry.get("paragraph"))
    for entry in styles.get("table", []):
        document.add_table_style(entry["name"], entry.get("table"), entry.get("first_row"))
    for entry in styles.get("numbering", []):
        document.add_numbering_style(entry["name"], _style_values(entry, "name"))


def _add_elements(section: Section, elements: Sequence[Mapping[str, Any]]) -> None:
    for entry in elements:
        element_type = entry.get("type")
        if element_type == "text":
            section.add_text(entry.get("text", ""), entry.get("font_style"), entry.get("paragraph_style"))
        elif element_type == "text_run":
            text_run = section.add_text_run(entry.get("paragraph_style"))
            for child in entry.get("elements", []):
                if child.get("type") == "text_break":
                    text_run.add_text_break(child.get("count", 1))
                else:
                    text_run.add_text(child.get("text", ""), child.get("font_style"))
        elif element_type == "title":
            section.add_title(entry.get("text", ""), entry.get("depth", 1))
        elif element_type == "text_break":
            section.add_text_break(entry.get("count", 1), entry.get("font_style"), entry.get("paragraph_style"))
        elif element_type == "page_break":
            section.add_page_break()
        else:
            raise DocumentError("Unknown element type", details=repr(element_type))


def build_document(description: Mapping[str, Any]) -> Document:
    """
    Build a document from a JSON description.

    Args:
        description: Parsed description (see module docstring)

    Returns:
        The populated document
    """
    document = Document(Settings(**description.get("settings", {})))
    document.get_doc_info().update(description.get("doc_info", {}))
    if "default_paragraph_style" in description:
        document.set_default_paragraph_style(description["default_paragraph_style"])
    _add_styles(document, description.get("styles", {}))
    for text in description.get("footnotes", []):
        document.add_footnote(text)
    for text in description.get("endnotes", []):
        document.add_endnote(text)
    for entry in description.get("sections", []):
        section = document.add_section(entry.get("settings"))
        _add_elements(section, entry.get("elements", []))
    logger.info(
        f"Built document with {len(document.get_sections())} sections "
        f"and {document.get_styles().count_styles()} styles"
    )
    return document


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="docwright",
        description="Docwright - write styled documents as DOCX, ODT, RTF, HTML or PDF",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  docwright build report.json --format ODText --output report.odt
  docwright build report.json -f PDF
  docwright formats
        """,
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    build_parser = subparsers.add_parser(
        "build", parents=[common], help="Write a document from a JSON description"
    )
    build_parser.add_argument("input", help="JSON description file")
    build_parser.add_argument(
        "-f", "--format",
        default=DocumentFormat.WORD2007.value,
        help="Output format (default: Word2007)",
    )
    build_parser.add_argument(
        "-o", "--output",
        help="Output file path (default: input name with the format's extension)",
    )
    build_parser.add_argument(
        "--pretty-print",
        action="store_true",
        help="Indent XML parts",
    )

    subparsers.add_parser("formats", parents=[common], help="List output formats")
    subparsers.add_parser("version", parents=[common], help="Show version information")
    return parser


def cmd_build(args) -> int:
    """Handle build command."""
    from .writer import create_writer

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    try:
        description = json.loads(input_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        print(f"Error: Invalid JSON in {input_path}: {exc}", file=sys.stderr)
        return 1

    try:
        document = build_document(description)
        writer = create_writer(args.format, document, {"pretty_print": args.pretty_print})
        output_path = Path(args.output) if args.output else input_path.with_suffix(writer.file_extension)
        writer.save(output_path)
    except (DocwrightError, ValueError, KeyError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Saved: {output_path}")
    return 0


def cmd_formats(args=None) -> int:
    """Handle formats command."""
    from .writer import WRITERS

    for document_format, writer_class in WRITERS.items():
        print(f"{document_format.value:<10} {writer_class.file_extension:<6} {document_format.mime_type}")
    return 0


def cmd_version(args=None) -> int:
    """Handle version command."""
    print(f"Docwright v{__version__}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(args, "log_level", "WARNING"))

    if args.command == "build":
        return cmd_build(args)
    if args.command == "formats":
        return cmd_formats(args)
    if args.command == "version":
        return cmd_version(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
