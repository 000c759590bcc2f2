"""
Style bag: the named-style registry of one document.

Names are unique, iteration follows registration order and every style
receives a one-based index when it first enters the bag.
"""

from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Tuple, Union
import copy
import logging

from ..exceptions import InvalidStyleValueError, StyleNotFoundError
from ..utils.enums import FontUsage, StyleFamily
from .abstract_style import AbstractStyle
from .font import FontStyle
from .numbering import NumberingStyle
from .paragraph import ParagraphStyle
from .table import TableStyle

logger = logging.getLogger(__name__)

StyleInput = Union[Mapping[str, Any], AbstractStyle, None]

DEFAULT_PARAGRAPH_STYLE = "Normal"


def title_style_name(depth: Optional[int]) -> str:
    """Style name used for titles: ``Title`` for depth 0/None, else ``Heading_<depth>``."""
    if not depth:
        return "Title"
    return f"Heading_{depth}"


class StyleBag:
    """
    Ordered registry of named styles.

    ``add`` is an unconditional upsert used for bootstrap and explicit
    imports. ``resolve`` (and every ``add_*_style`` helper built on it)
    is first-write-wins: once a name is registered, later calls return
    the stored object and discard their values.
    """

    def __init__(self):
        self._styles: Dict[str, AbstractStyle] = {}
        logger.debug("Style bag initialized")

    def has(self, style_name: str) -> bool:
        """
        Check whether a style is registered.

        Args:
            style_name: Style name

        Returns:
            True if registered
        """
        return style_name in self._styles

    def get(self, style_name: str) -> AbstractStyle:
        """
        Get a registered style.

        Args:
            style_name: Style name

        Returns:
            The stored style

        Raises:
            StyleNotFoundError: If the name is not registered
        """
        try:
            return self._styles[style_name]
        except KeyError:
            raise StyleNotFoundError(style_name) from None

    def get_style(self, style_name: str) -> Optional[AbstractStyle]:
        """Get a registered style, or None when the name is unknown."""
        return self._styles.get(style_name)

    def add(self, style: AbstractStyle) -> "StyleBag":
        """
        Register a pre-built style, replacing any style stored under its name.

        A new name gets the next one-based index. A replacement takes over
        the index of the style it replaces, so indices are never reassigned.

        Args:
            style: Style with a name set

        Returns:
            self
        """
        if not isinstance(style, AbstractStyle):
            raise InvalidStyleValueError("Only styles can be added", details=type(style).__name__)
        style_name = style.get_style_name()
        if not style_name:
            raise InvalidStyleValueError("Style must have a name before it is added")

        existing = self._styles.get(style_name)
        if existing is not None:
            if existing is not style:
                style.set_index(existing.get_index())
                logger.debug(f"Replacing style {style_name!r}")
        else:
            style.set_index(self.count_styles() + 1)

        self._styles[style_name] = style
        return self

    def resolve(self, style_name: str, factory: Callable[[], AbstractStyle],
                value: StyleInput = None) -> AbstractStyle:
        """
        Get or create a named style.

        1. A registered name returns the stored style unchanged.
        2. Otherwise a blank style is built with ``factory``.
        3. A mapping is applied to the blank style; a style object of the
           same class replaces it; None keeps the defaults. A style object
           of another class is not adopted (logged as a type mismatch).
        4. The style gets its name and the next one-based index and is added.

        Args:
            style_name: Style name
            factory: Callable returning a blank style of the wanted family
            value: Mapping of style values, style object or None

        Returns:
            The registered style
        """
        if self.has(style_name):
            existing = self._styles[style_name]
            if value is not None:
                logger.debug(f"Style {style_name!r} already registered, keeping the first definition")
            return existing

        style = factory()
        if isinstance(value, Mapping):
            style.set_style_by_array(value)
        elif isinstance(value, AbstractStyle):
            if type(value) is type(style):
                # a style already stored in this bag keeps its name and index
                style = copy.deepcopy(value) if self._styles.get(value.style_name) is value else value
            else:
                logger.warning(
                    f"Type mismatch for style {style_name!r}: expected {type(style).__name__}, "
                    f"got {type(value).__name__}; using defaults"
                )
        elif value is not None:
            raise InvalidStyleValueError(
                "Style values must be a mapping or a style object", details=type(value).__name__
            )

        style.set_style_name(style_name)
        self.add(style)

        logger.debug(f"Registered {style.family.value} style {style_name!r} with index {style.get_index()}")
        return style

    def add_paragraph_style(self, style_name: str, styles: StyleInput) -> ParagraphStyle:
        """Register (or fetch) a paragraph style."""
        return self.resolve(style_name, ParagraphStyle, styles)

    def add_font_style(self, style_name: str, font_style: StyleInput,
                       paragraph_style=None) -> FontStyle:
        """
        Register (or fetch) a text font style.

        Args:
            style_name: Style name
            font_style: Font values or FontStyle
            paragraph_style: Paragraph style name, ParagraphStyle or mapping
        """
        return self.resolve(style_name, lambda: FontStyle(FontUsage.TEXT, paragraph_style), font_style)

    def add_link_style(self, style_name: str, styles: StyleInput) -> FontStyle:
        """Register (or fetch) a hyperlink font style."""
        return self.resolve(style_name, lambda: FontStyle(FontUsage.LINK), styles)

    def add_numbering_style(self, style_name: str, style_values: StyleInput) -> NumberingStyle:
        """Register (or fetch) a numbering style."""
        return self.resolve(style_name, NumberingStyle, style_values)

    def add_title_style(self, depth: Optional[int], font_style: StyleInput,
                        paragraph_style=None) -> FontStyle:
        """
        Register (or fetch) a title font style.

        Args:
            depth: Heading depth; 0 or None registers ``Title``
            font_style: Font values or FontStyle
            paragraph_style: Paragraph style name, ParagraphStyle or mapping
        """
        return self.resolve(
            title_style_name(depth), lambda: FontStyle(FontUsage.TITLE, paragraph_style), font_style
        )

    def add_table_style(self, style_name: str, style_table: Optional[Mapping[str, Any]],
                        style_first_row: Optional[Mapping[str, Any]] = None) -> TableStyle:
        """
        Register (or fetch) a table style.

        The table style consumes both maps at construction, so no values
        are passed on to ``resolve``.
        """
        return self.resolve(style_name, lambda: TableStyle(style_table, style_first_row), None)

    def set_default_paragraph_style(self, styles: StyleInput) -> ParagraphStyle:
        """Register the ``Normal`` paragraph style."""
        return self.add_paragraph_style(DEFAULT_PARAGRAPH_STYLE, styles)

    def count_styles(self) -> int:
        return len(self._styles)

    def reset_styles(self) -> None:
        """Remove every style; indices start again from 1."""
        self._styles.clear()
        logger.debug("Style bag reset")

    def get_styles(self) -> Dict[str, AbstractStyle]:
        """Copy of the registry in registration order."""
        return dict(self._styles)

    def get_styles_by_family(self, family: StyleFamily) -> List[AbstractStyle]:
        return [style for style in self._styles.values() if style.family is family]

    def items(self) -> Iterator[Tuple[str, AbstractStyle]]:
        """Iterate ``(name, style)`` pairs in registration order."""
        return iter(list(self._styles.items()))

    def __iter__(self) -> Iterator[Tuple[str, AbstractStyle]]:
        return self.items()

    def __len__(self) -> int:
        return self.count_styles()

    def __contains__(self, style_name: object) -> bool:
        return style_name in self._styles
