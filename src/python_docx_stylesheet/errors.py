"""
Custom exception classes for python_docx_stylesheet package.

Every failure of style resolution is surfaced as one of these exceptions,
carrying enough context (attribute name, style name, offending token) to
diagnose the style sheet that caused it.
"""

from typing import Any


class StylesheetError(Exception):
    """Base exception for all python_docx_stylesheet errors."""

    pass


class InvalidAttributeError(StylesheetError):
    """Raised when an enumerated token is not part of the attribute's vocabulary.

    Attributes:
        attribute: The attribute kind being parsed (e.g., "alignment")
        token: The offending token as it was supplied
        allowed: The accepted tokens for that attribute kind
    """

    def __init__(self, attribute: str, token: Any, allowed: list[str] | None = None) -> None:
        self.attribute = attribute
        self.token = token
        self.allowed = allowed or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format an error message listing the accepted tokens."""
        msg = f"Invalid {self.attribute} '{self.token}'"
        if self.allowed:
            msg += f" (expected one of: {', '.join(self.allowed)})"
        return msg


class InvalidDimensionError(StylesheetError):
    """Raised when a textual length cannot be parsed.

    Attributes:
        text: The text that failed to parse
        reason: Why it failed (bad magnitude, unknown unit, ...)
    """

    def __init__(self, text: Any, reason: str | None = None) -> None:
        self.text = text
        self.reason = reason
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Invalid dimension '{self.text}'"
        if self.reason:
            msg += f": {self.reason}"
        return msg


class RelativeLengthNeedsReferenceError(StylesheetError):
    """Raised when a relative dimension is evaluated without a reference length.

    Attributes:
        dimension: The relative dimension that was evaluated
    """

    def __init__(self, dimension: Any) -> None:
        self.dimension = dimension
        super().__init__(
            f"Relative dimension '{dimension}' cannot be converted to points "
            "without a reference length"
        )


class RegistryNotBoundError(StylesheetError):
    """Raised when a style needs its stylesheet but was never added to one.

    Attributes:
        style: Name of the unbound style
    """

    def __init__(self, style: str) -> None:
        self.style = style
        super().__init__(
            f"Paragraph style '{style}' is not attached to a stylesheet. "
            "Add it with Stylesheet.add_paragraph_style() before resolving."
        )


class UnknownBaseStyleError(StylesheetError):
    """Raised when a base style name does not resolve to a registered style.

    Attributes:
        style: Name of the style declaring the base
        base_style: The base style name that could not be found
    """

    def __init__(self, style: str, base_style: str) -> None:
        self.style = style
        self.base_style = base_style
        super().__init__(f"Base style '{base_style}' of paragraph style '{style}' is not defined")


class UnknownFontFamilyError(StylesheetError):
    """Raised when a resolved font family is not registered in the stylesheet.

    Attributes:
        style: Name of the style being resolved
        family: The font family name that could not be found
    """

    def __init__(self, style: str, family: str) -> None:
        self.style = style
        self.family = family
        super().__init__(f"Font family '{family}' used by paragraph style '{style}' is not defined")


class MissingRequiredAttributeError(StylesheetError):
    """Raised when an attribute without a default is not set anywhere in the chain.

    Attributes:
        attribute: The attribute that could not be resolved (e.g., "font size")
        style: Name of the style resolution started from
    """

    def __init__(self, attribute: str, style: str) -> None:
        self.attribute = attribute
        self.style = style
        super().__init__(f"{attribute.capitalize()} for style '{style}' not defined")


class CyclicInheritanceError(StylesheetError):
    """Raised when the base style chain revisits a style already on the path.

    Attributes:
        chain: Style names in visit order, ending with the repeated name
    """

    def __init__(self, chain: list[str]) -> None:
        self.chain = list(chain)
        super().__init__(f"Cyclic base style chain: {' -> '.join(self.chain)}")


class StyleNotFoundError(StylesheetError):
    """Raised when a style is requested by name and the stylesheet lacks it.

    Attributes:
        name: The requested style name
        available: Names of the styles that are defined
    """

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        self.available = available or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Paragraph style '{self.name}' not found"
        if self.available:
            msg += f"\n\nAvailable styles: {', '.join(self.available)}"
        else:
            msg += "\n\nNo paragraph styles are defined"
        return msg


class ValidationError(StylesheetError):
    """Raised when a style sheet document or a stylesheet fails validation.

    This can occur when:
    - The document cannot be parsed as YAML or JSON
    - Keys are missing, unknown, or have the wrong shape
    - Base styles are undefined or form a cycle

    Attributes:
        errors: List of specific validation error messages (optional)
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        self.errors = errors or []
        super().__init__(message)
