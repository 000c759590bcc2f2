"""Common enumerations used across the Docwright style model."""

from __future__ import annotations

from enum import Enum


class StyleFamily(str, Enum):
    """Closed set of style families kept in a style bag."""

    PARAGRAPH = "paragraph"
    FONT = "font"
    TABLE = "table"
    NUMBERING = "numbering"


class FontUsage(str, Enum):
    """What a font style is registered for."""

    TEXT = "text"
    LINK = "link"
    TITLE = "title"


class Alignment(str, Enum):
    """Paragraph alignment values."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"
    START = "start"
    END = "end"
    DISTRIBUTE = "distribute"


class TableAlignment(str, Enum):
    """Table alignment values."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class BreakKind(str, Enum):
    """Kind of break a paragraph style declares. AUTO means no break."""

    AUTO = "auto"
    COLUMN = "column"
    PAGE = "page"


class BreakPosition(str, Enum):
    """Where a declared break sits. UNSET suppresses break output entirely."""

    UNSET = "unset"
    BEFORE = "before"
    AFTER = "after"


class BorderStyle(str, Enum):
    """Border line styles."""

    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"
    DOTTED = "dotted"
    DASHED = "dashed"


class UnderlineType(str, Enum):
    """Underline kinds for font styles."""

    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"
    DOTTED = "dotted"
    DASH = "dash"
    WAVE = "wave"


class TabType(str, Enum):
    """Tab stop alignment."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    DECIMAL = "decimal"
    BAR = "bar"
    CLEAR = "clear"
    NUM = "num"


class TabLeader(str, Enum):
    """Tab stop leader characters."""

    NONE = "none"
    DOT = "dot"
    HYPHEN = "hyphen"
    UNDERSCORE = "underscore"
    HEAVY = "heavy"
    MIDDLE_DOT = "middleDot"


class WidthUnit(str, Enum):
    """Table width units."""

    AUTO = "auto"
    PERCENT = "pct"
    TWIP = "twip"


class TableLayout(str, Enum):
    """Table layout algorithm."""

    AUTOFIT = "autofit"
    FIXED = "fixed"


class NumberingType(str, Enum):
    """Numbering definition kinds."""

    SINGLE_LEVEL = "singleLevel"
    MULTILEVEL = "multilevel"
    HYBRID_MULTILEVEL = "hybridMultilevel"


class NumberFormat(str, Enum):
    """Numbering level formats."""

    DECIMAL = "decimal"
    UPPER_ROMAN = "upperRoman"
    LOWER_ROMAN = "lowerRoman"
    UPPER_LETTER = "upperLetter"
    LOWER_LETTER = "lowerLetter"
    BULLET = "bullet"
    NONE = "none"


class LevelSuffix(str, Enum):
    """What follows a numbering label."""

    TAB = "tab"
    SPACE = "space"
    NOTHING = "nothing"


class Orientation(str, Enum):
    """Page orientation for sections."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class CollectionKind(str, Enum):
    """Auxiliary document part collections owned by a document."""

    BOOKMARKS = "bookmarks"
    TITLES = "titles"
    FOOTNOTES = "footnotes"
    ENDNOTES = "endnotes"
    CHARTS = "charts"
    COMMENTS = "comments"


class MetadataKind(str, Enum):
    """Metadata objects owned by a document."""

    DOC_INFO = "doc_info"
    SETTINGS = "settings"
    COMPATIBILITY = "compatibility"


class DocumentFormat(str, Enum):
    """Output formats a document can be written to."""

    WORD2007 = "Word2007"
    ODTEXT = "ODText"
    RTF = "RTF"
    HTML = "HTML"
    PDF = "PDF"

    @property
    def mime_type(self) -> str:
        return MIME_TYPES[self]


MIME_TYPES = {
    DocumentFormat.WORD2007: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    DocumentFormat.ODTEXT: "application/vnd.oasis.opendocument.text",
    DocumentFormat.RTF: "application/rtf",
    DocumentFormat.HTML: "text/html",
    DocumentFormat.PDF: "application/pdf",
}
