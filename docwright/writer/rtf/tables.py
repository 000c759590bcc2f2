"""
Font and color tables of an RTF document.

Style writers register fonts and colors as they use them; the document
writer emits both tables in the header once the body is written.
"""

from typing import List


def escape_text(text: str) -> str:
    """
    Escape text for an RTF body.

    Backslashes and braces are escaped, newlines become ``\\line`` and
    characters outside ASCII become ``\\uN?`` escapes.
    """
    parts: List[str] = []
    for char in text:
        code = ord(char)
        if char in "\\{}":
            parts.append("\\" + char)
        elif char == "\n":
            parts.append("\\line ")
        elif char == "\t":
            parts.append("\\tab ")
        elif code > 127:
            # Signed 16-bit code units
            data = char.encode("utf-16-le")
            for offset in range(0, len(data), 2):
                value = int.from_bytes(data[offset:offset + 2], "little")
                parts.append(f"\\u{value - 65536 if value > 32767 else value}?")
        else:
            parts.append(char)
    return "".join(parts)


class RTFTables:
    """
    Font table and color table.
    """

    def __init__(self, default_font: str = "Arial", default_color: str = "000000"):
        self.fonts: List[str] = [default_font]
        self.colors: List[str] = [default_color]

    def font_index(self, name: str) -> int:
        """Index of a font in the font table, adding it when new."""
        if name not in self.fonts:
            self.fonts.append(name)
        return self.fonts.index(name)

    def color_index(self, color: str) -> int:
        """
        Index of a color in the color table, adding it when new. Index 0 is
        the automatic color, so the first listed color is 1.
        """
        color = color.upper()
        if color not in self.colors:
            self.colors.append(color)
        return self.colors.index(color) + 1

    def font_table(self) -> str:
        entries = "".join(
            f"{{\\f{index}\\fnil\\fcharset0 {escape_text(name)};}}" for index, name in enumerate(self.fonts)
        )
        return f"{{\\fonttbl{entries}}}"

    def color_table(self) -> str:
        entries = "".join(
            f"\\red{int(color[0:2], 16)}\\green{int(color[2:4], 16)}\\blue{int(color[4:6], 16)};"
            for color in self.colors
        )
        return f"{{\\colortbl;{entries}}}"
