"""
Base writers for Docwright documents.

``BaseWriter`` holds what every format writer shares: the document, the
export options and file saving. ``PackageWriter`` assembles ZIP based
formats from named parts. ``AbstractStyleWriter`` is the base of the
per-format style writers.
"""

from typing import Any, Dict, Iterator, Optional, Tuple, Type, Union
from pathlib import Path
import io
import logging
import zipfile

from ..exceptions import WriterError
from ..styles.abstract_style import AbstractStyle
from ..styles.font import FontStyle
from ..styles.paragraph import ParagraphStyle
from ..styles.style_bag import StyleBag
from ..utils.enums import DocumentFormat, FontUsage
from ..utils.units import UnitsConverter, is_zero_length
from .markup import XMLWriter

logger = logging.getLogger(__name__)


def is_paragraph_font(style: FontStyle) -> bool:
    """
    True when a font style is written as a paragraph style: title styles
    and font styles that carry a paragraph.
    """
    return style.usage is FontUsage.TITLE or style.has_paragraph()


class BaseWriter:
    """
    Base class for all format writers.
    """

    format: Optional[DocumentFormat] = None
    file_extension = ""

    def __init__(self, document, export_options: Optional[Dict[str, Any]] = None):
        """
        Initialize base writer.

        Args:
            document: Document to write
            export_options: Export options
        """
        self.document = document
        self.export_options = dict(export_options or {})
        self.units = UnitsConverter()

    def get_export_option(self, key: str, default: Any = None) -> Any:
        """
        Get export option value.

        Args:
            key: Option key
            default: Default value if key not found

        Returns:
            Option value
        """
        return self.export_options.get(key, default)

    def set_export_option(self, key: str, value: Any):
        self.export_options[key] = value

    def update_export_options(self, options: Dict[str, Any]):
        self.export_options.update(options)

    @property
    def pretty_print(self) -> bool:
        return bool(self.get_export_option("pretty_print", self.document.settings.pretty_print))

    @property
    def style_bag(self) -> StyleBag:
        return self.document.styles

    def get_export_info(self) -> Dict[str, Any]:
        """
        Get export information.

        Returns:
            Format name, MIME type and file extension
        """
        return {
            "format": self.format.value,
            "mime_type": self.format.mime_type,
            "extension": self.file_extension,
        }

    def write(self) -> bytes:
        """
        Render the document.

        Returns:
            Rendered document bytes
        """
        raise NotImplementedError("Subclasses must implement write")

    def save(self, file_path: Union[str, Path]) -> Path:
        """
        Render the document and write it to a file.

        Args:
            file_path: Output file path

        Returns:
            The written path

        Raises:
            WriterError: If the file cannot be written
        """
        data = self.write()
        output_path = Path(file_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(data)
        except OSError as exc:
            raise WriterError("Failed to save document", details=f"{output_path}: {exc}") from exc
        logger.info(f"Document exported to {self.format.value}: {output_path}")
        return output_path

    def iter_elements(self) -> Iterator[Tuple[Any, Any]]:
        """Iterate ``(section, element)`` pairs in document order."""
        for section in self.document.get_sections():
            for element in section.get_elements():
                yield section, element

    def find_style(self, style_name: Optional[str], style_class: Type[AbstractStyle]) -> Optional[AbstractStyle]:
        """
        Look up a style referenced by an element.

        Unknown names and names of another family are logged and give None.
        """
        if not style_name:
            return None
        style = self.style_bag.get_style(style_name)
        if style is None:
            logger.warning(f"Element references unknown style {style_name!r}")
            return None
        if not isinstance(style, style_class):
            logger.warning(f"Element references {style_name!r}, which is not a {style_class.__name__}")
            return None
        return style

    def element_styles(self, element) -> Tuple[Optional[str], Optional[str]]:
        """
        Resolve the paragraph and font style names an element is written with.

        A font style written as a paragraph style (see ``is_paragraph_font``)
        becomes the paragraph style of an element that has none.

        Returns:
            ``(paragraph_style_name, font_style_name)``; unresolvable names are None
        """
        paragraph = self.find_style(getattr(element, "paragraph_style", None), ParagraphStyle)
        font = self.find_style(getattr(element, "font_style", None), FontStyle)
        paragraph_name = paragraph.get_style_name() if paragraph is not None else None
        font_name = font.get_style_name() if font is not None else None
        if font is not None and is_paragraph_font(font):
            if paragraph_name is None:
                paragraph_name = font_name
            else:
                logger.debug(f"Font style {font_name!r} is a paragraph style; {paragraph_name!r} takes precedence")
            font_name = None
        return paragraph_name, font_name


class PackageWriter(BaseWriter):
    """
    Writer for ZIP packaged formats.

    Subclasses fill ``self._parts`` in ``_prepare_parts``; parts named in
    ``STORED_PARTS`` are written uncompressed and before all others.
    """

    STORED_PARTS: Tuple[str, ...] = ()

    def __init__(self, document, export_options: Optional[Dict[str, Any]] = None):
        super().__init__(document, export_options)
        self._parts: Dict[str, bytes] = {}

    def add_part(self, part_name: str, content: Union[bytes, str]) -> None:
        if isinstance(content, str):
            content = content.encode("utf-8")
        self._parts[part_name] = content

    def new_xml_writer(self, nsmap: Dict[Optional[str], str]) -> XMLWriter:
        return XMLWriter(nsmap)

    def finish_xml(self, xml_writer: XMLWriter, standalone: Optional[bool] = None) -> bytes:
        return xml_writer.to_bytes(pretty_print=self.pretty_print, standalone=standalone)

    def _prepare_parts(self) -> None:
        raise NotImplementedError("Subclasses must implement _prepare_parts")

    def write(self) -> bytes:
        self._parts = {}
        self._prepare_parts()
        return self._write_package()

    def _write_package(self) -> bytes:
        """Zip the prepared parts."""
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zip_file:
            for part_name in self.STORED_PARTS:
                if part_name in self._parts:
                    zip_file.writestr(part_name, self._parts[part_name], compress_type=zipfile.ZIP_STORED)
            for part_name, content in self._parts.items():
                if part_name not in self.STORED_PARTS:
                    zip_file.writestr(part_name, content)
        logger.debug(f"Packaged {len(self._parts)} parts for {self.format.value}")
        return buffer.getvalue()


class AbstractStyleWriter:
    """
    Base class for format style writers.

    A style writer serializes one style. It is single-use: ``write`` may
    be called once. A style of another family than ``style_class`` makes
    ``write`` a no-op so one loop can dispatch over a mixed style bag.
    """

    style_class: Type[AbstractStyle] = AbstractStyle

    def __init__(self, style: AbstractStyle, style_bag: Optional[StyleBag] = None):
        """
        Initialize style writer.

        Args:
            style: Style to write
            style_bag: Registry used to resolve style name references
        """
        self.style = style
        self.style_bag = style_bag
        self.units = UnitsConverter()
        self._written = False

    def write(self):
        """
        Write the style.

        Returns:
            Whatever the format writer produces (None for markup sinks)

        Raises:
            WriterError: If the writer was already used
        """
        if self._written:
            raise WriterError(
                "Style writer is single-use", details=getattr(self.style, "style_name", None)
            )
        self._written = True
        if not isinstance(self.style, self.style_class):
            logger.debug(
                f"{self.__class__.__name__} skipping {type(self.style).__name__}: "
                f"expected {self.style_class.__name__}"
            )
            return None
        return self._write()

    def _write(self):
        raise NotImplementedError("Subclasses must implement _write")

    def lookup(self, style_name: Optional[str], style_class: Type[AbstractStyle],
               referenced_by: str = "") -> Optional[AbstractStyle]:
        """
        Resolve a style name reference against the style bag.

        Dangling references and references to another family are logged
        and resolve to None.
        """
        if not style_name or self.style_bag is None:
            return None
        style = self.style_bag.get_style(style_name)
        if style is None:
            logger.warning(f"Style {referenced_by or self.style.style_name!r} references unknown style {style_name!r}")
            return None
        if not isinstance(style, style_class):
            logger.warning(
                f"Style {referenced_by or self.style.style_name!r} references {style_name!r}, "
                f"which is not a {style_class.__name__}"
            )
            return None
        return style

    def paragraph_of(self, font_style: FontStyle) -> Optional[ParagraphStyle]:
        """Paragraph style a font style applies with: inline first, then by name."""
        if font_style.paragraph is not None:
            return font_style.paragraph
        return self.lookup(font_style.paragraph_style_name, ParagraphStyle, font_style.style_name or "")


class XMLStyleWriter(AbstractStyleWriter):
    """Style writer emitting into an XML markup sink."""

    def __init__(self, xml_writer: XMLWriter, style: AbstractStyle,
                 style_bag: Optional[StyleBag] = None):
        super().__init__(style, style_bag)
        self.xml_writer = xml_writer

    def write_measure(self, name: str, twips, to_string=None) -> None:
        """Write a length attribute only when the value is set and non-zero once rounded."""
        if not twips:
            return
        value = (to_string or self.units.to_inch_string)(twips)
        if not is_zero_length(value):
            self.xml_writer.write_attribute(name, value)
