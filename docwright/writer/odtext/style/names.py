"""
ODF style names.

``style:name`` and every attribute referring to a style must be an
NCName. A character that cannot appear at its position is written as
``_<hex>_``, so ``My Quote`` becomes ``My_20_Quote``; the readable name
goes to ``style:display-name``.
"""

from typing import Optional

from ...markup import XMLWriter


def _is_name_char(char: str, position: int) -> bool:
    if char.isalpha() or char == "_":
        return True
    return position > 0 and (char.isdigit() or char in ".-")


def encode_style_name(name: Optional[str]) -> Optional[str]:
    """Encode a style name as an NCName; None stays None."""
    if name is None:
        return None
    return "".join(
        char if _is_name_char(char, position) else f"_{ord(char):x}_"
        for position, char in enumerate(name)
    )


def write_style_name(xml_writer: XMLWriter, name: str) -> None:
    """Write ``style:name``, plus ``style:display-name`` when the name had to be encoded."""
    encoded = encode_style_name(name)
    xml_writer.write_attribute("style:name", encoded)
    if encoded != name:
        xml_writer.write_attribute("style:display-name", name)
