"""
Paragraph style model and cascading attribute resolution.

A ParagraphStyle holds optional overrides for every typeset attribute and an
optional base style name. Attributes it does not override are looked up on
its base style through the stylesheet it belongs to, and so on up the chain;
when the chain ends without an override, a fixed default applies (or, for the
font family and size, resolution fails).

Resolution is recomputed on every call and never mutates anything.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

from ..constants import (
    DEFAULT_ALIGNMENT,
    DEFAULT_FONT_STYLE,
    DEFAULT_INDENT,
    DEFAULT_LEADING,
    DEFAULT_SPACING,
)
from ..errors import (
    CyclicInheritanceError,
    MissingRequiredAttributeError,
    RegistryNotBoundError,
    UnknownBaseStyleError,
    UnknownFontFamilyError,
)
from .attributes import Alignment, FontStyle
from .dimension import Dimension
from .fonts import Font, FontFamily

logger = logging.getLogger(__name__)

# Attribute name -> (label used in messages, default). A default of None means
# the attribute is required somewhere in the chain.
_ATTRIBUTES: dict[str, tuple[str, Any]] = {
    "font_family": ("font family", None),
    "font_style": ("font style", FontStyle(DEFAULT_FONT_STYLE)),
    "font_size": ("font size", None),
    "leading": ("leading", Dimension.parse(DEFAULT_LEADING)),
    "alignment": ("alignment", Alignment(DEFAULT_ALIGNMENT)),
    "spacing_before": ("spacing before", Dimension.parse(DEFAULT_SPACING)),
    "spacing_after": ("spacing after", Dimension.parse(DEFAULT_SPACING)),
    "left_indent": ("left indent", Dimension.parse(DEFAULT_INDENT)),
    "first_line_indent": ("first line indent", Dimension.parse(DEFAULT_INDENT)),
}


class StyleRegistry(Protocol):
    """Lookup contract a paragraph style needs from its stylesheet."""

    def get_paragraph_style(self, name: str) -> ParagraphStyle | None: ...

    def get_font_family(self, name: str) -> FontFamily | None: ...


@dataclass(frozen=True)
class RunFormatting:
    """Character formatting handed to renderers for runs of a paragraph.

    Attributes:
        font: The resolved font (face and size)
    """

    font: Font


@dataclass(frozen=True)
class ParagraphFormatting:
    """Paragraph formatting handed to renderers, all lengths in points.

    Attributes:
        leading: Absolute distance between baselines
        relative_leading: Font-relative leading factor (always 0.0; leading
            is expressed in absolute points)
        alignment: Horizontal alignment
        spacing_before: Space above the paragraph
        spacing_after: Space below the paragraph
        left_indent: Indent of every line from the left margin
        first_line_indent: Additional indent of the first line
    """

    leading: float
    relative_leading: float
    alignment: Alignment
    spacing_before: float
    spacing_after: float
    left_indent: float
    first_line_indent: float


@dataclass(frozen=True)
class ResolvedStyle:
    """Fully concrete attributes of a paragraph style, lengths in points."""

    name: str
    font: Font
    font_size: float
    leading: float
    alignment: Alignment
    spacing_before: float
    spacing_after: float
    left_indent: float
    first_line_indent: float

    @property
    def run_formatting(self) -> RunFormatting:
        return RunFormatting(font=self.font)

    @property
    def paragraph_formatting(self) -> ParagraphFormatting:
        return ParagraphFormatting(
            leading=self.leading,
            relative_leading=0.0,
            alignment=self.alignment,
            spacing_before=self.spacing_before,
            spacing_after=self.spacing_after,
            left_indent=self.left_indent,
            first_line_indent=self.first_line_indent,
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain representation suitable for JSON output."""
        return {
            "name": self.name,
            "font": {
                "name": self.font.name,
                "bold": self.font.bold,
                "italic": self.font.italic,
                "path": self.font.face.path,
                "size": self.font.size,
            },
            "fontSize": self.font_size,
            "leading": self.leading,
            "alignment": self.alignment.render(),
            "spacingBefore": self.spacing_before,
            "spacingAfter": self.spacing_after,
            "leftIndent": self.left_indent,
            "firstLineIndent": self.first_line_indent,
        }


@dataclass(frozen=True)
class ParagraphStyle:
    """A named paragraph style with optional overrides and a base style.

    Every override is optional: None means "inherit from the base style, or
    use the default", which is distinct from an explicit value equal to the
    default. Dimensions may be relative (em, %) to the style's resolved font
    size.

    Styles are immutable. The only assignment after construction is the
    one-time binding to the owning stylesheet.

    Attributes:
        name: Unique name of the style within its stylesheet
        base_style: Name of the style to inherit unset attributes from
        font_family: Name of a font family registered in the stylesheet
        font_style: Regular, bold, italic or bold-italic
        font_size: Font size (must resolve to an absolute length)
        leading: Distance between baselines
        alignment: Horizontal alignment
        spacing_before: Space above the paragraph
        spacing_after: Space below the paragraph
        left_indent: Left indent of every line
        first_line_indent: Additional indent of the first line
        text: Literal text carried by this style itself (not inherited)

    Example:
        >>> body = ParagraphStyle("body", font_family="Serif", font_size=Dimension.pt(12))
        >>> quote = ParagraphStyle(
        ...     "quote",
        ...     base_style="body",
        ...     alignment=Alignment.CENTER,
        ...     left_indent=Dimension.em(1),
        ... )
        >>> sheet.add_paragraph_style(body)
        >>> sheet.add_paragraph_style(quote)
        >>> quote.get_left_indent()
        12.0
    """

    name: str
    base_style: str | None = None
    font_family: str | None = None
    font_style: FontStyle | None = None
    font_size: Dimension | None = None
    leading: Dimension | None = None
    alignment: Alignment | None = None
    spacing_before: Dimension | None = None
    spacing_after: Dimension | None = None
    left_indent: Dimension | None = None
    first_line_indent: Dimension | None = None
    text: str | None = None
    _stylesheet: StyleRegistry | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Paragraph style name must be a non-empty string")

    # -------------------------------------------------------------------------
    # Stylesheet binding
    # -------------------------------------------------------------------------

    def bind(self, stylesheet: StyleRegistry) -> None:
        """Attach the style to the stylesheet that owns it.

        Called once by the stylesheet when the style is added.

        Raises:
            ValueError: If the style already belongs to another stylesheet
        """
        if self._stylesheet is not None and self._stylesheet is not stylesheet:
            raise ValueError(f"Paragraph style '{self.name}' already belongs to another stylesheet")
        object.__setattr__(self, "_stylesheet", stylesheet)

    @property
    def stylesheet(self) -> StyleRegistry | None:
        return self._stylesheet

    def _require_stylesheet(self) -> StyleRegistry:
        if self._stylesheet is None:
            raise RegistryNotBoundError(self.name)
        return self._stylesheet

    def get_base_style(self) -> ParagraphStyle | None:
        """Return the base style, or None if this style has no base.

        Raises:
            RegistryNotBoundError: If a base is declared but the style was
                never added to a stylesheet
            UnknownBaseStyleError: If the stylesheet has no such style
        """
        if self.base_style is None:
            return None
        base = self._require_stylesheet().get_paragraph_style(self.base_style)
        if base is None:
            raise UnknownBaseStyleError(self.name, self.base_style)
        return base

    # -------------------------------------------------------------------------
    # Cascade
    # -------------------------------------------------------------------------

    def _cascade(self, attribute: str) -> Any:
        """Walk the base chain for the nearest override of ``attribute``.

        Falls back to the attribute's default when no style in the chain sets
        it. Styles already visited on this walk are tracked so a cyclic chain
        fails instead of looping.
        """
        label, default = _ATTRIBUTES[attribute]
        chain: list[str] = []
        style: ParagraphStyle | None = self
        while style is not None:
            if style.name in chain:
                raise CyclicInheritanceError(chain + [style.name])
            chain.append(style.name)
            value = getattr(style, attribute)
            if value is not None:
                return value
            style = style.get_base_style()

        if default is None:
            raise MissingRequiredAttributeError(label, self.name)
        logger.debug(f"Style '{self.name}': {label} defaults to {default}")
        return default

    def _length_points(self, attribute: str) -> float:
        # Font size first: relative lengths are measured against it
        reference = self.get_font_size_points()
        return self._cascade(attribute).to_points(reference)

    # -------------------------------------------------------------------------
    # Font
    # -------------------------------------------------------------------------

    def get_font_family_name(self) -> str:
        """Return the name of the resolved font family.

        Raises:
            MissingRequiredAttributeError: If no style in the chain sets one
        """
        return self._cascade("font_family")

    def get_font_family(self) -> FontFamily:
        """Return the resolved font family from the stylesheet.

        Raises:
            RegistryNotBoundError: If the style was never added to a stylesheet
            UnknownFontFamilyError: If the family is not registered
            MissingRequiredAttributeError: If no style in the chain sets one
        """
        stylesheet = self._require_stylesheet()
        family_name = self.get_font_family_name()
        family = stylesheet.get_font_family(family_name)
        if family is None:
            raise UnknownFontFamilyError(self.name, family_name)
        return family

    def get_font_style(self) -> FontStyle:
        return self._cascade("font_style")

    def get_font_size(self) -> Dimension:
        """Return the resolved font size as written in the style sheet.

        Raises:
            MissingRequiredAttributeError: If no style in the chain sets one
        """
        return self._cascade("font_size")

    def get_font_size_points(self) -> float:
        """Return the resolved font size in points.

        Raises:
            MissingRequiredAttributeError: If no style in the chain sets one
            RelativeLengthNeedsReferenceError: If the resolved font size is
                relative
        """
        return self.get_font_size().to_points()

    def get_font(self) -> Font:
        """Return the font handle: the family face for the font style, at the font size."""
        family = self.get_font_family()
        font_style = self.get_font_style()
        face = family.get_face(bold=font_style.bold, italic=font_style.italic)
        return Font(face=face, size=self.get_font_size_points())

    # -------------------------------------------------------------------------
    # Paragraph attributes
    # -------------------------------------------------------------------------

    def get_leading(self) -> Dimension:
        return self._cascade("leading")

    def get_absolute_leading(self) -> float:
        """Return the leading in points, evaluated against the font size."""
        reference = self.get_font_size_points()
        return self.get_leading().to_points(reference)

    def get_relative_leading(self) -> float:
        return 0.0

    def get_alignment(self) -> Alignment:
        return self._cascade("alignment")

    def get_spacing_before(self) -> float:
        return self._length_points("spacing_before")

    def get_spacing_after(self) -> float:
        return self._length_points("spacing_after")

    def get_left_indent(self) -> float:
        return self._length_points("left_indent")

    def get_first_line_indent(self) -> float:
        return self._length_points("first_line_indent")

    # -------------------------------------------------------------------------
    # Renderer bundles
    # -------------------------------------------------------------------------

    def create_run_formatting(self) -> RunFormatting:
        return RunFormatting(font=self.get_font())

    def create_paragraph_formatting(self) -> ParagraphFormatting:
        """Resolve every paragraph-level attribute into a ParagraphFormatting."""
        return ParagraphFormatting(
            leading=self.get_absolute_leading(),
            relative_leading=self.get_relative_leading(),
            alignment=self.get_alignment(),
            spacing_before=self.get_spacing_before(),
            spacing_after=self.get_spacing_after(),
            left_indent=self.get_left_indent(),
            first_line_indent=self.get_first_line_indent(),
        )

    def resolve(self) -> ResolvedStyle:
        """Resolve every attribute of the style.

        The font size is resolved first since every length depends on it.
        The first failure propagates unchanged.

        Returns:
            A fully concrete ResolvedStyle

        Raises:
            StylesheetError: Any resolution failure (see the individual
                getters)
        """
        font_size = self.get_font_size_points()
        paragraph = self.create_paragraph_formatting()
        return ResolvedStyle(
            name=self.name,
            font=self.get_font(),
            font_size=font_size,
            leading=paragraph.leading,
            alignment=paragraph.alignment,
            spacing_before=paragraph.spacing_before,
            spacing_after=paragraph.spacing_after,
            left_indent=paragraph.left_indent,
            first_line_indent=paragraph.first_line_indent,
        )

    def __repr__(self) -> str:
        return f"<ParagraphStyle name={self.name!r} base_style={self.base_style!r}>"
