"""
Metadata module: document information, compatibility and editor settings.
"""

from .doc_info import DocInfo
from .compatibility import Compatibility
from .document_settings import DocumentSettings

__all__ = ["DocInfo", "Compatibility", "DocumentSettings"]
