"""Tests for applying resolved styles with python-docx.

Note: These tests are skipped if python-docx is not installed.
"""

from pathlib import Path

import pytest

# Skip all tests if python-docx not installed
docx = pytest.importorskip("docx")
from docx import Document as PythonDocxDocument  # noqa: E402
from docx.enum.text import WD_ALIGN_PARAGRAPH, WD_LINE_SPACING  # noqa: E402

from python_docx_stylesheet import (  # noqa: E402
    Stylesheet,
    add_styled_paragraph,
    apply_paragraph_style,
    load_stylesheet,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def book() -> Stylesheet:
    return load_stylesheet(FIXTURES_DIR / "book.yaml")


class TestApplyParagraphStyle:
    """Test apply_paragraph_style()."""

    def test_paragraph_format(self, book: Stylesheet) -> None:
        """Paragraph format receives the resolved values."""
        doc = PythonDocxDocument()
        para = doc.add_paragraph("Quoted text")

        result = apply_paragraph_style(para, book.get_paragraph_style("quote"))

        fmt = result.paragraph_format
        assert result is para
        assert fmt.alignment == WD_ALIGN_PARAGRAPH.CENTER
        assert fmt.line_spacing.pt == 18.0
        assert fmt.line_spacing_rule == WD_LINE_SPACING.EXACTLY
        assert fmt.space_before.pt == 0.0
        assert fmt.space_after.pt == 6.0
        assert fmt.left_indent.pt == 12.0
        assert fmt.first_line_indent.pt == 0.0

    def test_justified(self, book: Stylesheet) -> None:
        """Justified maps to WD_ALIGN_PARAGRAPH.JUSTIFY."""
        doc = PythonDocxDocument()
        para = doc.add_paragraph("Body text")

        apply_paragraph_style(para, book.get_paragraph_style("body"))

        assert para.paragraph_format.alignment == WD_ALIGN_PARAGRAPH.JUSTIFY
        assert para.paragraph_format.first_line_indent.pt == 18.0

    def test_run_fonts(self, book: Stylesheet) -> None:
        """Every run gets the resolved font."""
        doc = PythonDocxDocument()
        para = doc.add_paragraph("Chapter ")
        para.add_run("One")

        apply_paragraph_style(para, book.get_paragraph_style("heading"))

        assert len(para.runs) == 2
        for run in para.runs:
            assert run.font.name == "Liberation Sans"
            assert run.font.size.pt == 18.0
            assert run.font.bold is True
            assert run.font.italic is False


class TestAddStyledParagraph:
    """Test add_styled_paragraph()."""

    def test_explicit_text(self, book: Stylesheet) -> None:
        """The given text is used."""
        doc = PythonDocxDocument()

        para = add_styled_paragraph(doc, book.get_paragraph_style("body"), "Hello World")

        assert para.text == "Hello World"
        assert doc.paragraphs[-1].text == "Hello World"

    def test_style_text_default(self, book: Stylesheet) -> None:
        """The style's own text is used when no text is given."""
        doc = PythonDocxDocument()

        para = add_styled_paragraph(doc, book.get_paragraph_style("separator"))

        assert para.text == "* * *"
        assert para.paragraph_format.alignment == WD_ALIGN_PARAGRAPH.CENTER

    def test_no_text(self, book: Stylesheet) -> None:
        """A style without text adds an empty paragraph."""
        doc = PythonDocxDocument()

        para = add_styled_paragraph(doc, book.get_paragraph_style("body"))

        assert para.text == ""
