"""
Centralized constants for units, OOXML namespaces and style defaults.

This module consolidates the conversion factors and namespace URLs used by the
dimension parser, the resolver and the WordprocessingML exporter. Import from
here to ensure consistency.
"""

# =============================================================================
# Word Processing Namespaces
# =============================================================================

# Main WordprocessingML namespace (Word 2007+)
WORD_NAMESPACE = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

# Basic namespace map with just the main Word namespace
NSMAP = {"w": WORD_NAMESPACE}


# =============================================================================
# Units
# =============================================================================

POINTS_PER_INCH = 72.0
POINTS_PER_CM = POINTS_PER_INCH / 2.54
POINTS_PER_MM = POINTS_PER_INCH / 25.4

# CSS reference pixel: 96 px per inch
POINTS_PER_PX = POINTS_PER_INCH / 96.0

# OOXML measurements
TWIPS_PER_POINT = 20
HALF_POINTS_PER_POINT = 2


# =============================================================================
# Style Defaults
# =============================================================================

# Used when no style in the chain overrides the attribute
DEFAULT_FONT_STYLE = "regular"
DEFAULT_ALIGNMENT = "left"
DEFAULT_LEADING = "1em"
DEFAULT_SPACING = "0pt"
DEFAULT_INDENT = "0pt"


# =============================================================================
# Helper Functions
# =============================================================================


def w(tag: str) -> str:
    """Create a fully qualified Word namespace tag.

    Args:
        tag: Tag name without namespace prefix (e.g., "pPr", "jc", "spacing")

    Returns:
        Fully qualified tag (e.g., "{http://...wordprocessingml/2006/main}pPr")

    Example:
        >>> w("jc")
        '{http://schemas.openxmlformats.org/wordprocessingml/2006/main}jc'
    """
    return f"{{{WORD_NAMESPACE}}}{tag}"
