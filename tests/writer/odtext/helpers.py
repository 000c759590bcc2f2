"""Shared helpers for the ODF style writer tests."""

from docwright.writer.markup import XMLWriter
from docwright.writer.odtext.namespaces import DOCUMENT_NSMAP


def qname(name: str) -> str:
    """``prefix:local`` to Clark notation."""
    prefix, local = name.split(":", 1)
    return f"{{{DOCUMENT_NSMAP[prefix]}}}{local}"


def attr(element, name: str):
    return element.get(qname(name))


def render(writer_class, style, style_bag=None, **kwargs):
    """
    Run a style writer inside an ``office:styles`` element.

    Returns:
        ``(container, result)``: the container element and the value returned by ``write``
    """
    xml_writer = XMLWriter(DOCUMENT_NSMAP)
    xml_writer.start_element("office:styles")
    result = writer_class(xml_writer, style, style_bag, **kwargs).write()
    xml_writer.end_element()
    return xml_writer.get_root(), result
