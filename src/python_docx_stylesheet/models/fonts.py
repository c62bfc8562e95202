"""
Font family and font handle models.

A font family groups the four faces needed to realize every font style.
Resolution hands renderers a ``Font``: the selected face plus a size in
points.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FontFace:
    """A concrete typeface variant.

    Attributes:
        name: Typeface name as the renderer knows it (e.g., "Liberation Serif")
        bold: Whether the face should be rendered bold
        italic: Whether the face should be rendered italic
        path: Optional font file backing the face
    """

    name: str
    bold: bool = False
    italic: bool = False
    path: str | None = None


@dataclass(frozen=True)
class Font:
    """Renderer-facing font handle: a face at a size.

    Attributes:
        face: The selected typeface variant
        size: Font size in points
    """

    face: FontFace
    size: float

    @property
    def name(self) -> str:
        return self.face.name

    @property
    def bold(self) -> bool:
        return self.face.bold

    @property
    def italic(self) -> bool:
        return self.face.italic


class FontFamily:
    """Named set of regular, bold, italic and bold-italic faces.

    Variants that are not given are synthesized from the regular face: same
    typeface name and file, with the bold/italic flags of the variant, so the
    renderer applies the emphasis itself.

    Example:
        >>> family = FontFamily("Serif", FontFace("Liberation Serif"))
        >>> family.get_face(bold=True, italic=False)
        FontFace(name='Liberation Serif', bold=True, italic=False, path=None)
    """

    def __init__(
        self,
        name: str,
        regular: FontFace,
        bold: FontFace | None = None,
        italic: FontFace | None = None,
        bold_italic: FontFace | None = None,
    ) -> None:
        if not name:
            raise ValueError("Font family name must not be empty")
        self.name = name
        self.regular = regular
        self.bold = bold or self._synthesize(regular, bold=True, italic=False)
        self.italic = italic or self._synthesize(regular, bold=False, italic=True)
        self.bold_italic = bold_italic or self._synthesize(regular, bold=True, italic=True)

    @staticmethod
    def _synthesize(regular: FontFace, *, bold: bool, italic: bool) -> FontFace:
        return FontFace(name=regular.name, bold=bold, italic=italic, path=regular.path)

    def get_face(self, bold: bool, italic: bool) -> FontFace:
        """Return the face for a bold/italic combination."""
        if italic:
            return self.bold_italic if bold else self.italic
        return self.bold if bold else self.regular

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FontFamily):
            return NotImplemented
        return (self.name, self.regular, self.bold, self.italic, self.bold_italic) == (
            other.name,
            other.regular,
            other.bold,
            other.italic,
            other.bold_italic,
        )

    def __hash__(self) -> int:
        return hash((self.name, self.regular))

    def __repr__(self) -> str:
        return f"<FontFamily name={self.name!r} regular={self.regular.name!r}>"
