"""
XML markup sink used by the format writers.

Wraps lxml element construction behind a streaming interface: open an
element, write its attributes, write nested content, close it. Qualified
names such as ``style:name`` are resolved through the writer's namespace
map.
"""

from typing import Any, Dict, List, Optional
import logging

from lxml import etree

from ..exceptions import WriterError

logger = logging.getLogger(__name__)

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


class XMLWriter:
    """
    Streaming XML builder on top of lxml.
    """

    def __init__(self, nsmap: Optional[Dict[Optional[str], str]] = None):
        """
        Initialize XML writer.

        Args:
            nsmap: Prefix to namespace URI map; the None key is the default namespace
        """
        self.nsmap: Dict[Optional[str], str] = dict(nsmap or {})
        self._root: Optional[etree._Element] = None
        self._stack: List[etree._Element] = []

    def qualify(self, name: str) -> str:
        """
        Resolve a prefixed name to lxml's ``{uri}local`` form.

        Args:
            name: ``prefix:local`` or a plain local name

        Returns:
            Clark-notation name

        Raises:
            WriterError: If the prefix is not in the namespace map
        """
        if ":" in name:
            prefix, local = name.split(":", 1)
            if prefix == "xml":
                return f"{{{XML_NAMESPACE}}}{local}"
            uri = self.nsmap.get(prefix)
            if uri is None:
                raise WriterError("Unknown namespace prefix", details=name)
            return f"{{{uri}}}{local}"
        default = self.nsmap.get(None)
        return f"{{{default}}}{name}" if default else name

    def qualify_attribute(self, name: str) -> str:
        """Resolve an attribute name. Unprefixed attributes belong to no namespace."""
        if ":" in name:
            return self.qualify(name)
        return name

    @property
    def current(self) -> etree._Element:
        if not self._stack:
            raise WriterError("No open element")
        return self._stack[-1]

    @property
    def depth(self) -> int:
        return len(self._stack)

    def start_element(self, name: str) -> "XMLWriter":
        """Open an element as a child of the current one (or as the root)."""
        tag = self.qualify(name)
        if self._stack:
            element = etree.SubElement(self._stack[-1], tag)
        elif self._root is None:
            element = etree.Element(tag, nsmap=self.nsmap)
            self._root = element
        else:
            raise WriterError("Document already has a root element", details=name)
        self._stack.append(element)
        return self

    def write_attribute(self, name: str, value: Any) -> "XMLWriter":
        """
        Write an attribute on the current element.

        Booleans are written as ``true``/``false``; other values through ``str``.
        """
        if isinstance(value, bool):
            value = "true" if value else "false"
        self.current.set(self.qualify_attribute(name), str(value))
        return self

    def write_attribute_if(self, condition: Any, name: str, value: Any) -> "XMLWriter":
        """Write an attribute only when ``condition`` is truthy."""
        if condition:
            self.write_attribute(name, value)
        return self

    def text(self, content: str) -> "XMLWriter":
        """Append character data to the current element."""
        element = self.current
        if len(element):
            last = element[-1]
            last.tail = (last.tail or "") + content
        else:
            element.text = (element.text or "") + content
        return self

    def write_element(self, name: str, content: Optional[str] = None) -> "XMLWriter":
        """Write a complete element with optional text content."""
        self.start_element(name)
        if content is not None:
            self.text(content)
        return self.end_element()

    def end_element(self) -> "XMLWriter":
        """
        Close the current element.

        Raises:
            WriterError: If no element is open
        """
        if not self._stack:
            raise WriterError("end_element called without an open element")
        self._stack.pop()
        return self

    def get_root(self) -> Optional[etree._Element]:
        return self._root

    def to_bytes(self, pretty_print: bool = False, standalone: Optional[bool] = None) -> bytes:
        """
        Serialize the finished document.

        Args:
            pretty_print: Indent the output
            standalone: Value of the XML declaration's standalone flag

        Returns:
            UTF-8 encoded XML with declaration

        Raises:
            WriterError: If nothing was written or elements are still open
        """
        if self._root is None:
            raise WriterError("Nothing written")
        if self._stack:
            raise WriterError("Unclosed elements", details=", ".join(el.tag for el in self._stack))
        kwargs = {"xml_declaration": True, "encoding": "UTF-8", "pretty_print": pretty_print}
        if standalone is not None:
            kwargs["standalone"] = standalone
        return etree.tostring(self._root, **kwargs)
