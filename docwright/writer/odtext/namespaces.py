"""OpenDocument namespaces used by the ODText writer."""

OFFICE_NS = "urn:oasis:names:tc:opendocument:xmlns:office:1.0"
STYLE_NS = "urn:oasis:names:tc:opendocument:xmlns:style:1.0"
TEXT_NS = "urn:oasis:names:tc:opendocument:xmlns:text:1.0"
TABLE_NS = "urn:oasis:names:tc:opendocument:xmlns:table:1.0"
FO_NS = "urn:oasis:names:tc:opendocument:xmlns:xsl-fo-compatible:1.0"
SVG_NS = "urn:oasis:names:tc:opendocument:xmlns:svg-compatible:1.0"
META_NS = "urn:oasis:names:tc:opendocument:xmlns:meta:1.0"
DC_NS = "http://purl.org/dc/elements/1.1/"
XLINK_NS = "http://www.w3.org/1999/xlink"
MANIFEST_NS = "urn:oasis:names:tc:opendocument:xmlns:manifest:1.0"

ODF_VERSION = "1.2"

DOCUMENT_NSMAP = {
    "office": OFFICE_NS,
    "style": STYLE_NS,
    "text": TEXT_NS,
    "table": TABLE_NS,
    "fo": FO_NS,
    "svg": SVG_NS,
    "xlink": XLINK_NS,
    "dc": DC_NS,
    "meta": META_NS,
}

MANIFEST_NSMAP = {"manifest": MANIFEST_NS}
