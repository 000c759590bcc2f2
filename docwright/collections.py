"""
Item collections owned by a Docwright document.

Bookmarks, titles, notes, charts and comments are numbered from 1 in the
order they are added. The number is what writers use as the item id.
"""

from typing import Any, Dict, Iterator, Optional, Sequence, Tuple
import logging

from .elements.text import Title
from .exceptions import DocumentError
from .utils.enums import CollectionKind

logger = logging.getLogger(__name__)


class Bookmark:
    """Named anchor."""

    def __init__(self, name: str):
        if not isinstance(name, str) or not name.strip():
            raise DocumentError("Bookmark name must be a non-empty string")
        self.name = name
        self.relation_id: Optional[int] = None


class Note:
    """Footnote or endnote text."""

    def __init__(self, text: str):
        if not isinstance(text, str):
            raise DocumentError("Note text must be a string", details=type(text).__name__)
        self.text = text
        self.relation_id: Optional[int] = None


class Footnote(Note):
    pass


class Endnote(Note):
    pass


class Comment:
    """Reviewer comment."""

    def __init__(self, text: str, author: str = "", initials: str = ""):
        if not isinstance(text, str):
            raise DocumentError("Comment text must be a string", details=type(text).__name__)
        self.text = text
        self.author = author
        self.initials = initials
        self.relation_id: Optional[int] = None


class Chart:
    """
    Chart data: a chart type plus categories and their values.
    """

    TYPES = ("pie", "bar", "column", "line", "area", "scatter")

    def __init__(self, chart_type: str, categories: Sequence[str], values: Sequence[float]):
        if chart_type not in self.TYPES:
            raise DocumentError(f"Invalid chart type: {chart_type}. Must be one of: {', '.join(self.TYPES)}")
        if len(categories) != len(values):
            raise DocumentError("Chart categories and values must have the same length")
        self.chart_type = chart_type
        self.categories = list(categories)
        self.values = list(values)
        self.relation_id: Optional[int] = None


class ItemCollection:
    """
    One-based collection of document items.
    """

    item_class: Optional[type] = None

    def __init__(self):
        self._items: Dict[int, Any] = {}

    def add_item(self, item: Any) -> int:
        """
        Add an item.

        Args:
            item: Item of the collection's item class

        Returns:
            The one-based index assigned to the item
        """
        if self.item_class is not None and not isinstance(item, self.item_class):
            raise DocumentError(
                f"{self.__class__.__name__} only accepts {self.item_class.__name__} items",
                details=type(item).__name__,
            )
        index = self.count_items() + 1
        self._items[index] = item
        if hasattr(item, "relation_id"):
            item.relation_id = index
        logger.debug(f"Added item {index} to {self.__class__.__name__}")
        return index

    def get_item(self, index: int) -> Optional[Any]:
        return self._items.get(index)

    def set_item(self, index: int, item: Any) -> None:
        """Replace the item stored at an existing index."""
        if index not in self._items:
            raise DocumentError(f"No item at index {index} in {self.__class__.__name__}")
        self._items[index] = item

    def get_items(self) -> Dict[int, Any]:
        return dict(self._items)

    def count_items(self) -> int:
        return len(self._items)

    def items(self) -> Iterator[Tuple[int, Any]]:
        return iter(list(self._items.items()))

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return self.count_items()


class Bookmarks(ItemCollection):
    item_class = Bookmark


class Titles(ItemCollection):
    item_class = Title


class Footnotes(ItemCollection):
    item_class = Footnote


class Endnotes(ItemCollection):
    item_class = Endnote


class Charts(ItemCollection):
    item_class = Chart


class Comments(ItemCollection):
    item_class = Comment


COLLECTION_CLASSES = {
    CollectionKind.BOOKMARKS: Bookmarks,
    CollectionKind.TITLES: Titles,
    CollectionKind.FOOTNOTES: Footnotes,
    CollectionKind.ENDNOTES: Endnotes,
    CollectionKind.CHARTS: Charts,
    CollectionKind.COMMENTS: Comments,
}


def create_collections() -> Dict[CollectionKind, ItemCollection]:
    """Fresh, empty collections for a new document."""
    return {kind: collection_class() for kind, collection_class in COLLECTION_CLASSES.items()}


__all__ = [
    "Bookmark",
    "Footnote",
    "Endnote",
    "Comment",
    "Chart",
    "ItemCollection",
    "COLLECTION_CLASSES",
    "create_collections",
]
