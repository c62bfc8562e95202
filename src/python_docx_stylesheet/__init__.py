"""
python_docx_stylesheet - Cascading paragraph style sheets for Word documents.

This package resolves named paragraph styles into concrete typeset attributes
(font, size, leading, alignment, spacing, indentation) by walking their base
style chain, and applies or exports the result for Word documents.

Example:
    >>> from python_docx_stylesheet import load_stylesheet
    >>> sheet = load_stylesheet("styles.yaml")
    >>> quote = sheet.resolve("quote")
    >>> quote.left_indent
    12.0
"""

__version__ = "0.1.0"
__all__ = [
    "Stylesheet",
    "ParagraphStyle",
    "ResolvedStyle",
    "RunFormatting",
    "ParagraphFormatting",
    "StyleRegistry",
    "Dimension",
    "Unit",
    "FontStyle",
    "Alignment",
    "Font",
    "FontFace",
    "FontFamily",
    "load_stylesheet",
    "dump_stylesheet",
    "stylesheet_from_dict",
    "stylesheet_to_dict",
    "build_styles_part",
    "apply_paragraph_style",
    "add_styled_paragraph",
    # Errors
    "StylesheetError",
    "InvalidAttributeError",
    "InvalidDimensionError",
    "RelativeLengthNeedsReferenceError",
    "RegistryNotBoundError",
    "UnknownBaseStyleError",
    "UnknownFontFamilyError",
    "MissingRequiredAttributeError",
    "CyclicInheritanceError",
    "StyleNotFoundError",
    "ValidationError",
]

# Import compatibility helpers (python-docx integration)
from .compat import add_styled_paragraph, apply_paragraph_style
from .errors import (
    CyclicInheritanceError,
    InvalidAttributeError,
    InvalidDimensionError,
    MissingRequiredAttributeError,
    RegistryNotBoundError,
    RelativeLengthNeedsReferenceError,
    StyleNotFoundError,
    StylesheetError,
    UnknownBaseStyleError,
    UnknownFontFamilyError,
    ValidationError,
)

# Import loading and dumping
from .loader import dump_stylesheet, load_stylesheet, stylesheet_from_dict, stylesheet_to_dict

# Import model classes
from .models import (
    Alignment,
    Dimension,
    Font,
    FontFace,
    FontFamily,
    FontStyle,
    ParagraphFormatting,
    ParagraphStyle,
    ResolvedStyle,
    RunFormatting,
    StyleRegistry,
    Unit,
)

# Import WordprocessingML export
from .ooxml import build_styles_part

# Import registry
from .stylesheet import Stylesheet
