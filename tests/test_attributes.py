"""
Tests for the enumerated style attributes.

These tests verify the FontStyle and Alignment enums:
- Case-insensitive parsing of every token
- Rendering back to the canonical token
- Rejection of out-of-vocabulary tokens
"""

import pytest

from python_docx_stylesheet.errors import InvalidAttributeError
from python_docx_stylesheet.models.attributes import Alignment, FontStyle


class TestFontStyle:
    """Tests for FontStyle enum."""

    @pytest.mark.parametrize("token", ["regular", "bold", "italic", "bolditalic"])
    def test_render_parse_is_stable(self, token: str) -> None:
        """Test that every token renders back to itself."""
        assert FontStyle.parse(token).render() == token

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("REGULAR", FontStyle.REGULAR),
            ("Bold", FontStyle.BOLD),
            ("iTaLiC", FontStyle.ITALIC),
            ("BoldItalic", FontStyle.BOLD_ITALIC),
        ],
    )
    def test_parse_is_case_insensitive(self, token: str, expected: FontStyle) -> None:
        """Test that letter case does not matter."""
        assert FontStyle.parse(token) is expected

    def test_render_uses_canonical_case(self) -> None:
        """Test that rendering does not keep the input casing."""
        assert FontStyle.parse("BOLDITALIC").render() == "bolditalic"

    def test_flags(self) -> None:
        """Test the bold/italic pair of each member."""
        assert (FontStyle.REGULAR.bold, FontStyle.REGULAR.italic) == (False, False)
        assert (FontStyle.BOLD.bold, FontStyle.BOLD.italic) == (True, False)
        assert (FontStyle.ITALIC.bold, FontStyle.ITALIC.italic) == (False, True)
        assert (FontStyle.BOLD_ITALIC.bold, FontStyle.BOLD_ITALIC.italic) == (True, True)

    def test_from_flags(self) -> None:
        """Test building a font style from bold/italic flags."""
        for style in FontStyle:
            assert FontStyle.from_flags(style.bold, style.italic) is style

    def test_invalid_token_raises(self) -> None:
        """Test that an unknown token names itself in the error."""
        with pytest.raises(InvalidAttributeError) as exc_info:
            FontStyle.parse("heavy")

        assert exc_info.value.token == "heavy"
        assert exc_info.value.attribute == "font style"
        assert "heavy" in str(exc_info.value)

    def test_no_partial_matching(self) -> None:
        """Test that prefixes and padded tokens are rejected."""
        for token in ("bol", "bold ", " italic", "bold-italic"):
            with pytest.raises(InvalidAttributeError):
                FontStyle.parse(token)

    def test_non_string_raises(self) -> None:
        """Test that non-string values are rejected."""
        with pytest.raises(InvalidAttributeError):
            FontStyle.parse(True)  # type: ignore[arg-type]


class TestAlignment:
    """Tests for Alignment enum."""

    @pytest.mark.parametrize("token", ["left", "center", "right", "justified"])
    def test_render_parse_is_stable(self, token: str) -> None:
        """Test that every token renders back to itself."""
        assert Alignment.parse(token).render() == token

    def test_parse_is_case_insensitive(self) -> None:
        """Test that letter case does not matter."""
        assert Alignment.parse("CENTER") is Alignment.CENTER
        assert Alignment.parse("Justified") is Alignment.JUSTIFIED

    def test_codes_are_distinct(self) -> None:
        """Test that every alignment has its own renderer code."""
        codes = [alignment.code for alignment in Alignment]
        assert codes == [0, 1, 2, 3]

    def test_ooxml_values(self) -> None:
        """Test the w:jc value of each alignment."""
        assert Alignment.LEFT.ooxml == "left"
        assert Alignment.CENTER.ooxml == "center"
        assert Alignment.RIGHT.ooxml == "right"
        assert Alignment.JUSTIFIED.ooxml == "both"

    def test_invalid_token_raises(self) -> None:
        """Test that an unknown token names itself in the error."""
        with pytest.raises(InvalidAttributeError) as exc_info:
            Alignment.parse("justify")

        assert exc_info.value.token == "justify"
        assert exc_info.value.attribute == "alignment"
        assert "justified" in exc_info.value.allowed
