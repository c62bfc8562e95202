"""
Stylesheet class holding paragraph styles and font families.

A Stylesheet is the registry paragraph styles resolve their base styles and
font families through. It is built once (usually by the loader), frozen, and
then only read, so any number of resolutions may run against it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .errors import StyleNotFoundError, ValidationError
from .models.fonts import FontFamily
from .models.style import ParagraphStyle, ResolvedStyle

logger = logging.getLogger(__name__)


class Stylesheet:
    """Registry of paragraph styles and font families keyed by name.

    Styles are bound to the stylesheet when added and look up their base
    styles and font families through it. Several stylesheets can coexist;
    nothing is shared between them.

    Example:
        >>> sheet = Stylesheet()
        >>> sheet.add_font_family(FontFamily("Serif", FontFace("Liberation Serif")))
        >>> sheet.add_paragraph_style(
        ...     ParagraphStyle("body", font_family="Serif", font_size=Dimension.pt(12))
        ... )
        >>> sheet.freeze()
        >>> sheet.resolve("body").font_size
        12.0
    """

    def __init__(self) -> None:
        self._paragraph_styles: dict[str, ParagraphStyle] = {}
        self._font_families: dict[str, FontFamily] = {}
        self._frozen = False

    # -------------------------------------------------------------------------
    # Building
    # -------------------------------------------------------------------------

    def _check_not_frozen(self) -> None:
        if self._frozen:
            raise RuntimeError("Stylesheet is frozen and can no longer be modified")

    def add_font_family(self, family: FontFamily) -> None:
        """Register a font family.

        Raises:
            ValueError: If a family with the same name already exists
            RuntimeError: If the stylesheet is frozen
        """
        self._check_not_frozen()
        if family.name in self._font_families:
            raise ValueError(f"Font family '{family.name}' already exists")
        self._font_families[family.name] = family
        logger.debug(f"Added font family: {family.name}")

    def add_paragraph_style(self, style: ParagraphStyle) -> None:
        """Register a paragraph style and bind it to this stylesheet.

        Raises:
            ValueError: If a style with the same name already exists, or the
                style belongs to another stylesheet
            RuntimeError: If the stylesheet is frozen
        """
        self._check_not_frozen()
        if style.name in self._paragraph_styles:
            raise ValueError(f"Paragraph style '{style.name}' already exists")
        style.bind(self)
        self._paragraph_styles[style.name] = style
        logger.debug(f"Added paragraph style: {style.name}")

    def freeze(self) -> None:
        """Reject further additions. Idempotent."""
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get_paragraph_style(self, name: str) -> ParagraphStyle | None:
        """Return the paragraph style with this name, or None."""
        return self._paragraph_styles.get(name)

    def get_font_family(self, name: str) -> FontFamily | None:
        """Return the font family with this name, or None."""
        return self._font_families.get(name)

    @property
    def paragraph_styles(self) -> list[ParagraphStyle]:
        """Paragraph styles in registration order."""
        return list(self._paragraph_styles.values())

    @property
    def font_families(self) -> list[FontFamily]:
        """Font families in registration order."""
        return list(self._font_families.values())

    def resolve(self, name: str) -> ResolvedStyle:
        """Resolve a paragraph style by name.

        Raises:
            StyleNotFoundError: If no style has this name
            StylesheetError: Any resolution failure of the style
        """
        style = self.get_paragraph_style(name)
        if style is None:
            raise StyleNotFoundError(name, list(self._paragraph_styles))
        return style.resolve()

    def __contains__(self, name: str) -> bool:
        return name in self._paragraph_styles

    def __iter__(self) -> Iterator[ParagraphStyle]:
        return iter(self._paragraph_styles.values())

    def __len__(self) -> int:
        return len(self._paragraph_styles)

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def find_cycles(self) -> list[list[str]]:
        """Return every base style cycle, each as a chain ending in its first name.

        Each cycle is reported once, starting from the style that was reached
        first in registration order.
        """
        cycles: list[list[str]] = []
        done: set[str] = set()
        for start in self._paragraph_styles:
            path: list[str] = []
            current: str | None = start
            while current is not None and current not in done:
                if current in path:
                    cycles.append(path[path.index(current) :] + [current])
                    break
                path.append(current)
                style = self._paragraph_styles.get(current)
                current = style.base_style if style is not None else None
            done.update(path)
        return cycles

    def validate(self) -> None:
        """Check the whole stylesheet eagerly.

        Resolution detects these problems lazily as well; validating up front
        reports all of them at once.

        Raises:
            ValidationError: Listing every undefined base style and every
                inheritance cycle
        """
        errors: list[str] = []
        for style in self._paragraph_styles.values():
            if style.base_style is not None and style.base_style not in self._paragraph_styles:
                errors.append(
                    f"Base style '{style.base_style}' of paragraph style '{style.name}' "
                    "is not defined"
                )
        for cycle in self.find_cycles():
            errors.append(f"Cyclic base style chain: {' -> '.join(cycle)}")

        if errors:
            raise ValidationError(f"Stylesheet has {len(errors)} problem(s)", errors=errors)

    def __repr__(self) -> str:
        return (
            f"<Stylesheet styles={len(self._paragraph_styles)} "
            f"font_families={len(self._font_families)} frozen={self._frozen}>"
        )
