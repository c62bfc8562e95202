"""
Compatibility helpers for applying resolved styles with python-docx.

python-docx is the renderer: these functions copy resolved paragraph and run
formatting onto python-docx paragraphs. python-docx is imported at call time
so the rest of the package works without it.
"""

from __future__ import annotations

from typing import Any

from .models.style import ParagraphStyle


def _require_docx() -> Any:
    try:
        import docx.shared
    except ImportError as e:
        raise ImportError(
            "python-docx is required to apply styles to documents. "
            "Install it with: pip install python-docx"
        ) from e
    return docx.shared


def apply_paragraph_style(paragraph: Any, style: ParagraphStyle) -> Any:
    """Apply a resolved paragraph style to a python-docx paragraph.

    Sets alignment, exact line spacing, spacing before/after and indents on
    the paragraph format, and the resolved font on every run.

    Args:
        paragraph: A python-docx Paragraph
        style: The paragraph style to resolve and apply

    Returns:
        The same paragraph

    Raises:
        ImportError: If python-docx is not installed
        StylesheetError: If the style cannot be resolved

    Example:
        >>> from docx import Document
        >>> doc = Document()
        >>> para = doc.add_paragraph("Quoted text")
        >>> apply_paragraph_style(para, sheet.get_paragraph_style("quote"))
    """
    shared = _require_docx()
    from docx.enum.text import WD_ALIGN_PARAGRAPH

    resolved = style.resolve()
    fmt = paragraph.paragraph_format
    # Alignment codes share python-docx's WD_ALIGN_PARAGRAPH values
    fmt.alignment = WD_ALIGN_PARAGRAPH(resolved.alignment.code)
    # A Length line spacing is written as an exact line height
    fmt.line_spacing = shared.Pt(resolved.leading)
    fmt.space_before = shared.Pt(resolved.spacing_before)
    fmt.space_after = shared.Pt(resolved.spacing_after)
    fmt.left_indent = shared.Pt(resolved.left_indent)
    fmt.first_line_indent = shared.Pt(resolved.first_line_indent)

    for run in paragraph.runs:
        run.font.name = resolved.font.name
        run.font.size = shared.Pt(resolved.font.size)
        run.font.bold = resolved.font.bold
        run.font.italic = resolved.font.italic

    return paragraph


def add_styled_paragraph(document: Any, style: ParagraphStyle, text: str | None = None) -> Any:
    """Add a paragraph to a python-docx document and apply a style to it.

    Args:
        document: A python-docx Document
        style: The paragraph style to apply
        text: Paragraph text; defaults to the style's own text, if any

    Returns:
        The new python-docx Paragraph
    """
    _require_docx()
    if text is None:
        text = style.text or ""
    paragraph = document.add_paragraph(text)
    return apply_paragraph_style(paragraph, style)
