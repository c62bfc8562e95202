"""
Load and dump style sheets in YAML or JSON.

A style sheet document has two top-level lists, ``fontFamilies`` and
``paragraphStyles``. Paragraph style keys use the camelCase names below;
a key that is absent (or null) leaves the attribute unset so it is
inherited from the base style.

Example YAML file:
    ```yaml
    fontFamilies:
      - name: Serif
        regular: Liberation Serif
        bold: {name: Liberation Serif, path: fonts/LiberationSerif-Bold.ttf}
    paragraphStyles:
      - name: body
        fontFamily: Serif
        fontSize: 12pt
        alignment: justified
        firstLineIndent: 1.5em
      - name: quote
        baseStyle: body
        alignment: center
        leftIndent: 1em
    ```
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .errors import InvalidAttributeError, InvalidDimensionError, ValidationError
from .models.attributes import Alignment, FontStyle
from .models.dimension import Dimension
from .models.fonts import FontFace, FontFamily
from .models.style import ParagraphStyle
from .stylesheet import Stylesheet

logger = logging.getLogger(__name__)

# Document key -> ParagraphStyle field, for dimension-valued attributes
_DIMENSION_KEYS = {
    "fontSize": "font_size",
    "leading": "leading",
    "spacingBefore": "spacing_before",
    "spacingAfter": "spacing_after",
    "leftIndent": "left_indent",
    "firstLineIndent": "first_line_indent",
}

_STRING_KEYS = {
    "baseStyle": "base_style",
    "fontFamily": "font_family",
    "text": "text",
}

_PARAGRAPH_STYLE_KEYS = (
    {"name", "fontStyle", "alignment"} | set(_DIMENSION_KEYS) | set(_STRING_KEYS)
)

# Document key -> (bold, italic) of the face slot
_FACE_KEYS = {
    "regular": (False, False),
    "bold": (True, False),
    "italic": (False, True),
    "boldItalic": (True, True),
}

_FONT_FAMILY_KEYS = {"name"} | set(_FACE_KEYS)

_FORMATS = {".yaml": "yaml", ".yml": "yaml", ".json": "json"}


def _format_for(path: Path, format: str | None) -> str:
    if format is None:
        format = _FORMATS.get(path.suffix.lower())
        if format is None:
            raise ValidationError(
                f"Cannot infer style sheet format from '{path.name}'; pass format='yaml' or 'json'"
            )
    if format not in ("yaml", "json"):
        raise ValidationError(f"Unsupported format: {format}")
    return format


def load_stylesheet(
    path: str | Path, format: str | None = None, validate: bool = True
) -> Stylesheet:
    """Load a style sheet document from a YAML or JSON file.

    Args:
        path: Path to the style sheet file
        format: "yaml" or "json"; inferred from the file suffix if omitted
        validate: If True (default), check base styles and cycles eagerly

    Returns:
        A frozen Stylesheet

    Raises:
        ValidationError: If the file cannot be parsed or has invalid content
        FileNotFoundError: If the file does not exist

    Example:
        >>> sheet = load_stylesheet("styles.yaml")
        >>> sheet.resolve("quote").alignment
        <Alignment.CENTER: 'center'>
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"Style sheet not found: {path}")

    format = _format_for(file_path, format)
    try:
        with open(file_path, encoding="utf-8") as f:
            if format == "yaml":
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except yaml.YAMLError as e:
        raise ValidationError(f"Invalid YAML in {file_path.name}: {e}") from e
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in {file_path.name}: {e}") from e
    except UnicodeDecodeError as e:
        raise ValidationError(f"{file_path.name} is not valid UTF-8: {e}") from e

    logger.debug(f"Loaded {format} style sheet from {file_path}")
    return stylesheet_from_dict(data, validate=validate)


def stylesheet_from_dict(data: Any, validate: bool = True) -> Stylesheet:
    """Build a frozen Stylesheet from a parsed style sheet document.

    Args:
        data: The parsed document (a mapping)
        validate: If True (default), check base styles and cycles eagerly

    Raises:
        ValidationError: If the document has the wrong shape, unknown keys,
            duplicate names, or invalid attribute values
    """
    if not isinstance(data, dict):
        raise ValidationError("Style sheet must contain a dictionary/object")

    unknown = set(data) - {"fontFamilies", "paragraphStyles"}
    if unknown:
        raise ValidationError(f"Unknown style sheet keys: {', '.join(sorted(unknown))}")

    sheet = Stylesheet()
    for entry in _list_of_mappings(data, "fontFamilies"):
        family = _font_family_from_dict(entry)
        try:
            sheet.add_font_family(family)
        except ValueError as e:
            raise ValidationError(str(e)) from e

    for entry in _list_of_mappings(data, "paragraphStyles"):
        style = _paragraph_style_from_dict(entry)
        try:
            sheet.add_paragraph_style(style)
        except ValueError as e:
            raise ValidationError(str(e)) from e

    if validate:
        sheet.validate()
    sheet.freeze()
    logger.debug(
        f"Built stylesheet with {len(sheet.font_families)} font families "
        f"and {len(sheet)} paragraph styles"
    )
    return sheet


def _list_of_mappings(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    entries = data.get(key)
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise ValidationError(f"'{key}' must be a list")
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValidationError(f"'{key}' entry {index + 1} must be a dictionary/object")
    return entries


def _require_name(entry: dict[str, Any], kind: str) -> str:
    name = entry.get("name")
    if not isinstance(name, str) or not name:
        raise ValidationError(f"Every {kind} needs a non-empty 'name'")
    return name


def _check_keys(entry: dict[str, Any], allowed: set[str], what: str) -> None:
    unknown = set(entry) - allowed
    if unknown:
        raise ValidationError(f"Unknown keys in {what}: {', '.join(sorted(unknown))}")


def _font_family_from_dict(entry: dict[str, Any]) -> FontFamily:
    name = _require_name(entry, "font family")
    _check_keys(entry, _FONT_FAMILY_KEYS, f"font family '{name}'")
    if entry.get("regular") is None:
        raise ValidationError(f"Font family '{name}' needs a 'regular' face")

    faces = {}
    for key, (bold, italic) in _FACE_KEYS.items():
        value = entry.get(key)
        if value is None:
            continue
        if isinstance(value, str):
            faces[key] = FontFace(name=value, bold=bold, italic=italic)
        elif isinstance(value, dict) and isinstance(value.get("name"), str):
            _check_keys(value, {"name", "path"}, f"font family '{name}' face '{key}'")
            faces[key] = FontFace(name=value["name"], bold=bold, italic=italic, path=value.get("path"))
        else:
            raise ValidationError(
                f"Face '{key}' of font family '{name}' must be a typeface name "
                "or a mapping with 'name' and optional 'path'"
            )

    return FontFamily(
        name,
        faces["regular"],
        bold=faces.get("bold"),
        italic=faces.get("italic"),
        bold_italic=faces.get("boldItalic"),
    )


def _paragraph_style_from_dict(entry: dict[str, Any]) -> ParagraphStyle:
    name = _require_name(entry, "paragraph style")
    _check_keys(entry, _PARAGRAPH_STYLE_KEYS, f"paragraph style '{name}'")

    kwargs: dict[str, Any] = {}
    for key, attr in _STRING_KEYS.items():
        value = entry.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ValidationError(f"Paragraph style '{name}': '{key}' must be a string")
        kwargs[attr] = value

    try:
        if entry.get("fontStyle") is not None:
            kwargs["font_style"] = FontStyle.parse(entry["fontStyle"])
        if entry.get("alignment") is not None:
            kwargs["alignment"] = Alignment.parse(entry["alignment"])
        for key, attr in _DIMENSION_KEYS.items():
            if entry.get(key) is not None:
                kwargs[attr] = Dimension.parse(entry[key])
    except (InvalidAttributeError, InvalidDimensionError) as e:
        raise ValidationError(f"Paragraph style '{name}': {e}", errors=[str(e)]) from e

    return ParagraphStyle(name, **kwargs)


# -----------------------------------------------------------------------------
# Dumping
# -----------------------------------------------------------------------------


def _face_to_dict(face: FontFace) -> str | dict[str, str]:
    if face.path is None:
        return face.name
    return {"name": face.name, "path": face.path}


def stylesheet_to_dict(sheet: Stylesheet) -> dict[str, Any]:
    """Serialize a stylesheet back into a style sheet document.

    Only overrides a style sets itself are written, so unset attributes stay
    unset (inherited) when the document is loaded again. Synthesized faces
    of a font family are omitted.
    """
    families = []
    for family in sheet.font_families:
        entry: dict[str, Any] = {"name": family.name, "regular": _face_to_dict(family.regular)}
        for key, (bold, italic) in _FACE_KEYS.items():
            if key == "regular":
                continue
            face = family.get_face(bold=bold, italic=italic)
            synthesized = FontFace(
                name=family.regular.name, bold=bold, italic=italic, path=family.regular.path
            )
            if face != synthesized:
                entry[key] = _face_to_dict(face)
        families.append(entry)

    styles = []
    for style in sheet.paragraph_styles:
        entry = {"name": style.name}
        for key, attr in _STRING_KEYS.items():
            value = getattr(style, attr)
            if value is not None:
                entry[key] = value
        if style.font_style is not None:
            entry["fontStyle"] = style.font_style.render()
        if style.alignment is not None:
            entry["alignment"] = style.alignment.render()
        for key, attr in _DIMENSION_KEYS.items():
            value = getattr(style, attr)
            if value is not None:
                entry[key] = str(value)
        styles.append(entry)

    return {"fontFamilies": families, "paragraphStyles": styles}


def dump_stylesheet(sheet: Stylesheet, path: str | Path, format: str | None = None) -> None:
    """Write a stylesheet to a YAML or JSON file.

    Args:
        sheet: The stylesheet to write
        path: Destination file
        format: "yaml" or "json"; inferred from the file suffix if omitted
    """
    file_path = Path(path)
    format = _format_for(file_path, format)
    data = stylesheet_to_dict(sheet)
    with open(file_path, "w", encoding="utf-8") as f:
        if format == "yaml":
            yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
        else:
            json.dump(data, f, indent=2)
            f.write("\n")
    logger.debug(f"Wrote {format} style sheet to {file_path}")
