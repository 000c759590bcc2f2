"""Compatibility settings for Docwright documents."""

import logging

logger = logging.getLogger(__name__)

OOXML_VERSIONS = {
    12: "Word 2007",
    14: "Word 2010",
    15: "Word 2013 and later",
}


class Compatibility:
    """
    Holds the OOXML compatibility mode written into word/settings.xml.
    """

    def __init__(self, ooxml_version: int = 12):
        self.ooxml_version = 12
        self.set_ooxml_version(ooxml_version)

    def get_ooxml_version(self) -> int:
        return self.ooxml_version

    def set_ooxml_version(self, version: int) -> None:
        if version not in OOXML_VERSIONS:
            raise ValueError(f"Invalid OOXML version: {version}. Must be one of: {sorted(OOXML_VERSIONS)}")
        self.ooxml_version = version
        logger.debug(f"Compatibility mode set: {OOXML_VERSIONS[version]}")
