"""
Dimension model for lengths written in style sheets.

A dimension is either absolute (points, inches, centimetres, ...) or relative
to a reference length supplied at evaluation time (``em`` and ``%``). Relative
dimensions in paragraph styles are evaluated against the resolved font size
of the style they are used in.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

from ..constants import POINTS_PER_CM, POINTS_PER_INCH, POINTS_PER_MM, POINTS_PER_PX
from ..errors import InvalidDimensionError, RelativeLengthNeedsReferenceError

_DIMENSION_RE = re.compile(
    r"^\s*(?P<value>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)\s*(?P<unit>[A-Za-z%]*)\s*$"
)


class Unit(Enum):
    """Units accepted in dimension notation.

    Attributes:
        PT: Typographic points (absolute)
        IN: Inches (absolute)
        CM: Centimetres (absolute)
        MM: Millimetres (absolute)
        PX: CSS pixels at 96 per inch (absolute)
        EM: Multiples of the reference length (relative)
        PERCENT: Hundredths of the reference length (relative)
    """

    PT = "pt"
    IN = "in"
    CM = "cm"
    MM = "mm"
    PX = "px"
    EM = "em"
    PERCENT = "%"

    @property
    def is_relative(self) -> bool:
        """True for units measured against a reference length."""
        return self in (Unit.EM, Unit.PERCENT)

    @property
    def factor(self) -> float:
        """Points per unit, or reference multiples per unit for relative units."""
        return _FACTORS[self]


_FACTORS = {
    Unit.PT: 1.0,
    Unit.IN: POINTS_PER_INCH,
    Unit.CM: POINTS_PER_CM,
    Unit.MM: POINTS_PER_MM,
    Unit.PX: POINTS_PER_PX,
    Unit.EM: 1.0,
    Unit.PERCENT: 0.01,
}


@dataclass(frozen=True)
class Dimension:
    """An immutable length, absolute or relative.

    Attributes:
        value: The magnitude as written (e.g., 1.5 for "1.5em")
        unit: The unit the magnitude is expressed in

    Example:
        >>> Dimension.parse("1.5em").to_points(12)
        18.0
        >>> Dimension.parse("0.5in").to_points()
        36.0
    """

    value: float
    unit: Unit = Unit.PT

    @classmethod
    def parse(cls, text: str) -> Dimension:
        """Parse the textual notation ``<number><unit>``.

        Args:
            text: Dimension text such as "12pt", "1.5em", "2.54 cm" or "50%"

        Returns:
            The parsed Dimension

        Raises:
            InvalidDimensionError: If the magnitude is not a number or the
                unit is missing or unknown
        """
        if not isinstance(text, str):
            raise InvalidDimensionError(text, f"expected a string, got {type(text).__name__}")

        match = _DIMENSION_RE.match(text)
        if match is None:
            raise InvalidDimensionError(text, "expected a number followed by a unit")

        unit_token = match.group("unit").lower()
        if not unit_token:
            raise InvalidDimensionError(text, "missing unit")
        try:
            unit = Unit(unit_token)
        except ValueError:
            known = ", ".join(u.value for u in Unit)
            raise InvalidDimensionError(
                text, f"unknown unit '{match.group('unit')}' (expected one of: {known})"
            ) from None

        value = float(match.group("value"))
        if not math.isfinite(value):
            raise InvalidDimensionError(text, "magnitude is not a finite number")
        return cls(value, unit)

    @classmethod
    def pt(cls, value: float) -> Dimension:
        """Shorthand for an absolute dimension in points."""
        return cls(float(value), Unit.PT)

    @classmethod
    def em(cls, value: float) -> Dimension:
        """Shorthand for a dimension relative to the reference length."""
        return cls(float(value), Unit.EM)

    @property
    def is_relative(self) -> bool:
        return self.unit.is_relative

    def to_points(self, reference: float | None = None) -> float:
        """Convert the dimension to points.

        Args:
            reference: Reference length in points for relative units. Ignored
                by absolute units.

        Returns:
            The length in points

        Raises:
            RelativeLengthNeedsReferenceError: If the dimension is relative and
                no reference was given
            InvalidDimensionError: If the length in points overflows
        """
        if self.unit.is_relative:
            if reference is None:
                raise RelativeLengthNeedsReferenceError(self)
            points = self.value * self.unit.factor * reference
        else:
            points = self.value * self.unit.factor
        if not math.isfinite(points):
            raise InvalidDimensionError(str(self), "length in points is not a finite number")
        return points

    def __str__(self) -> str:
        text = repr(float(self.value))
        if text.endswith(".0"):
            text = text[:-2]
        return f"{text}{self.unit.value}"
