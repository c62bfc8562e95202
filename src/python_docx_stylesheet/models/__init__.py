"""
Style model classes for python_docx_stylesheet.

These classes describe paragraph styles as written in a style sheet and the
fully resolved values handed to renderers.
"""

from python_docx_stylesheet.models.attributes import Alignment, FontStyle
from python_docx_stylesheet.models.dimension import Dimension, Unit
from python_docx_stylesheet.models.fonts import Font, FontFace, FontFamily
from python_docx_stylesheet.models.style import (
    ParagraphFormatting,
    ParagraphStyle,
    ResolvedStyle,
    RunFormatting,
    StyleRegistry,
)

__all__ = [
    "Alignment",
    "FontStyle",
    "Dimension",
    "Unit",
    "Font",
    "FontFace",
    "FontFamily",
    "ParagraphFormatting",
    "ParagraphStyle",
    "ResolvedStyle",
    "RunFormatting",
    "StyleRegistry",
]
