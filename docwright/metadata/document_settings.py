"""
Document settings for Docwright documents.

Editor-facing options (proofing marks, zoom, revision tracking) stored in
the document itself.
"""

from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


class DocumentSettings:
    """
    Represents editor settings saved with the document.
    """

    FLAGS = (
        "hide_spelling_errors",
        "hide_grammatical_errors",
        "even_and_odd_headers",
        "mirror_margins",
        "track_revisions",
        "update_fields",
    )

    def __init__(self):
        self.hide_spelling_errors = False
        self.hide_grammatical_errors = False
        self.even_and_odd_headers = False
        self.mirror_margins = False
        self.track_revisions = False
        self.update_fields = False
        self.zoom: Optional[int] = None
        self.decimal_symbol = "."

    def set_flag(self, name: str, value: bool) -> None:
        if name not in self.FLAGS:
            raise ValueError(f"Invalid document setting: {name}")
        if not isinstance(value, bool):
            raise ValueError(f"Document setting {name} must be a boolean")
        setattr(self, name, value)
        logger.debug(f"Document setting set: {name} = {value}")

    def set_zoom(self, zoom: Optional[int]) -> None:
        """Zoom percentage (10-500) or None for the application default."""
        if zoom is not None and (isinstance(zoom, bool) or not isinstance(zoom, int) or not 10 <= zoom <= 500):
            raise ValueError("Zoom must be an integer between 10 and 500")
        self.zoom = zoom

    def set_decimal_symbol(self, symbol: str) -> None:
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise ValueError("Decimal symbol must be a single character")
        self.decimal_symbol = symbol

    def to_dict(self) -> Dict[str, Any]:
        data = {name: getattr(self, name) for name in self.FLAGS}
        data["zoom"] = self.zoom
        data["decimal_symbol"] = self.decimal_symbol
        return data
