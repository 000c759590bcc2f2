"""
Document information (core properties) for Docwright documents.
"""

from typing import Any, Dict, Optional
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)


class DocInfo:
    """
    Represents core document properties written into every output format.
    """

    FIELDS = (
        "creator",
        "company",
        "title",
        "description",
        "category",
        "last_modified_by",
        "subject",
        "keywords",
    )

    def __init__(self, creator: str = "", title: str = "", subject: str = "",
                 description: str = "", keywords: str = "", category: str = "",
                 company: str = "", last_modified_by: str = "",
                 created: Optional[datetime] = None, modified: Optional[datetime] = None):
        """
        Initialize document information.

        Args:
            creator: Document author
            title: Document title
            subject: Document subject
            description: Document description
            keywords: Document keywords
            category: Document category
            company: Company name
            last_modified_by: Last editor
            created: Creation time (now if not provided)
            modified: Modification time (creation time if not provided)
        """
        self.creator = creator
        self.title = title
        self.subject = subject
        self.description = description
        self.keywords = keywords
        self.category = category
        self.company = company
        self.last_modified_by = last_modified_by or creator
        self.created = created or datetime.now(timezone.utc).replace(microsecond=0)
        self.modified = modified or self.created

    def set(self, field: str, value: str) -> None:
        """
        Set a text property.

        Args:
            field: One of FIELDS
            value: Property value
        """
        if field not in self.FIELDS:
            raise ValueError(f"Invalid document property: {field}")
        if not isinstance(value, str):
            raise ValueError(f"Document property {field} must be a string")
        setattr(self, field, value)
        logger.debug(f"Document property set: {field} = {value}")

    def set_created(self, value: datetime) -> None:
        if not isinstance(value, datetime):
            raise ValueError("Created must be a datetime")
        self.created = value

    def set_modified(self, value: datetime) -> None:
        if not isinstance(value, datetime):
            raise ValueError("Modified must be a datetime")
        self.modified = value

    @staticmethod
    def format_date(value: datetime) -> str:
        """W3CDTF timestamp as used by OOXML core properties and ODF meta."""
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value.strftime("%Y-%m-%dT%H:%M:%SZ")

    def update(self, values: Dict[str, Any]) -> None:
        for field, value in values.items():
            self.set(field, value)

    def to_dict(self) -> Dict[str, Any]:
        data = {field: getattr(self, field) for field in self.FIELDS}
        data["created"] = self.format_date(self.created)
        data["modified"] = self.format_date(self.modified)
        return data
