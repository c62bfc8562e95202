"""
Enumerated paragraph style attributes.

Font styles and alignments are written in style sheets as single tokens.
Both enums parse case-insensitively and render back to their canonical
lower-case token.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from ..errors import InvalidAttributeError


def _parse_token(enum_cls: type[Enum], attribute: str, token: Any) -> Any:
    allowed = [member.value for member in enum_cls]
    if not isinstance(token, str):
        raise InvalidAttributeError(attribute, token, allowed)
    try:
        return enum_cls(token.lower())
    except ValueError:
        raise InvalidAttributeError(attribute, token, allowed) from None


class FontStyle(Enum):
    """Font emphasis of a paragraph style.

    Each member maps to an independent (bold, italic) pair used to pick a
    face out of a font family.

    Example:
        >>> FontStyle.parse("BoldItalic")
        <FontStyle.BOLD_ITALIC: 'bolditalic'>
        >>> FontStyle.BOLD_ITALIC.italic
        True
    """

    REGULAR = "regular"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bolditalic"

    @classmethod
    def parse(cls, token: str) -> FontStyle:
        """Parse a font style token.

        Raises:
            InvalidAttributeError: If the token is not regular, bold, italic
                or bolditalic (in any letter case)
        """
        return _parse_token(cls, "font style", token)

    @classmethod
    def from_flags(cls, bold: bool, italic: bool) -> FontStyle:
        if bold and italic:
            return cls.BOLD_ITALIC
        if bold:
            return cls.BOLD
        if italic:
            return cls.ITALIC
        return cls.REGULAR

    @property
    def bold(self) -> bool:
        return self in (FontStyle.BOLD, FontStyle.BOLD_ITALIC)

    @property
    def italic(self) -> bool:
        return self in (FontStyle.ITALIC, FontStyle.BOLD_ITALIC)

    def render(self) -> str:
        """Return the canonical token."""
        return self.value


class Alignment(Enum):
    """Horizontal alignment of a paragraph.

    ``code`` is the integer handed to renderers. The values match
    python-docx's ``WD_ALIGN_PARAGRAPH`` members (LEFT=0, CENTER=1, RIGHT=2,
    JUSTIFY=3). ``ooxml`` is the WordprocessingML ``w:jc`` value.
    """

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFIED = "justified"

    @classmethod
    def parse(cls, token: str) -> Alignment:
        """Parse an alignment token.

        Raises:
            InvalidAttributeError: If the token is not left, center, right or
                justified (in any letter case)
        """
        return _parse_token(cls, "alignment", token)

    @property
    def code(self) -> int:
        return _ALIGNMENT_CODES[self]

    @property
    def ooxml(self) -> str:
        return _ALIGNMENT_JC[self]

    def render(self) -> str:
        """Return the canonical token."""
        return self.value


_ALIGNMENT_CODES = {
    Alignment.LEFT: 0,
    Alignment.CENTER: 1,
    Alignment.RIGHT: 2,
    Alignment.JUSTIFIED: 3,
}

_ALIGNMENT_JC = {
    Alignment.LEFT: "left",
    Alignment.CENTER: "center",
    Alignment.RIGHT: "right",
    Alignment.JUSTIFIED: "both",
}
