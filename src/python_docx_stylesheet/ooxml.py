"""
WordprocessingML export of resolved paragraph styles.

Converts resolved run and paragraph formatting into ``w:rPr`` and ``w:pPr``
elements, and a whole stylesheet into a ``word/styles.xml`` part in which
every style carries its fully resolved properties.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping

from lxml import etree

from .constants import HALF_POINTS_PER_POINT, NSMAP, TWIPS_PER_POINT, w
from .models.style import ParagraphFormatting, ParagraphStyle, RunFormatting
from .stylesheet import Stylesheet

logger = logging.getLogger(__name__)

_STYLE_ID_RE = re.compile(r"[\W_]")


def _twips(points: float) -> str:
    return str(int(round(points * TWIPS_PER_POINT)))


def style_id_for(name: str) -> str:
    """Derive a Word style id from a style name.

    Word style ids drop spaces and punctuation ("Block Quote" -> "BlockQuote").
    Letters outside ASCII are kept.

    Example:
        >>> style_id_for("block quote")
        'blockquote'
    """
    return _STYLE_ID_RE.sub("", name) or name


def unique_style_ids(names: Iterable[str]) -> dict[str, str]:
    """Map style names to style ids that are unique within one styles part.

    Names whose ids collide get a numeric suffix in order of appearance
    ("BlockQuote", "BlockQuote2", ...). Word compares style ids without
    regard to case, so neither does this.
    """
    ids: dict[str, str] = {}
    used: set[str] = set()
    for name in names:
        base = style_id_for(name)
        candidate = base
        suffix = 1
        while candidate.casefold() in used:
            suffix += 1
            candidate = f"{base}{suffix}"
        used.add(candidate.casefold())
        ids[name] = candidate
    return ids


def run_properties_element(run: RunFormatting) -> etree._Element:
    """Convert RunFormatting to a w:rPr element.

    Args:
        run: Resolved run formatting

    Returns:
        A w:rPr element with fonts, bold, italic and size
    """
    font = run.font
    rpr = etree.Element(w("rPr"), nsmap=NSMAP)

    fonts_elem = etree.SubElement(rpr, w("rFonts"))
    fonts_elem.set(w("ascii"), font.name)
    fonts_elem.set(w("hAnsi"), font.name)
    fonts_elem.set(w("cs"), font.name)

    b_elem = etree.SubElement(rpr, w("b"))
    if not font.bold:
        b_elem.set(w("val"), "0")

    i_elem = etree.SubElement(rpr, w("i"))
    if not font.italic:
        i_elem.set(w("val"), "0")

    # Font size in half-points
    half_points = str(int(round(font.size * HALF_POINTS_PER_POINT)))
    etree.SubElement(rpr, w("sz")).set(w("val"), half_points)
    etree.SubElement(rpr, w("szCs")).set(w("val"), half_points)

    return rpr


def paragraph_properties_element(paragraph: ParagraphFormatting) -> etree._Element:
    """Convert ParagraphFormatting to a w:pPr element.

    Spacing and indents are written in twips. Leading becomes an exact line
    height; a negative first-line indent becomes a hanging indent.

    Args:
        paragraph: Resolved paragraph formatting

    Returns:
        A w:pPr element with spacing, indentation and alignment
    """
    ppr = etree.Element(w("pPr"), nsmap=NSMAP)

    spacing_elem = etree.SubElement(ppr, w("spacing"))
    spacing_elem.set(w("before"), _twips(paragraph.spacing_before))
    spacing_elem.set(w("after"), _twips(paragraph.spacing_after))
    spacing_elem.set(w("line"), _twips(paragraph.leading))
    spacing_elem.set(w("lineRule"), "exact")

    ind_elem = etree.SubElement(ppr, w("ind"))
    ind_elem.set(w("left"), _twips(paragraph.left_indent))
    if paragraph.first_line_indent < 0:
        ind_elem.set(w("hanging"), _twips(-paragraph.first_line_indent))
    else:
        ind_elem.set(w("firstLine"), _twips(paragraph.first_line_indent))

    etree.SubElement(ppr, w("jc")).set(w("val"), paragraph.alignment.ooxml)

    return ppr


def style_element(
    style: ParagraphStyle, style_ids: Mapping[str, str] | None = None
) -> etree._Element:
    """Convert a paragraph style to a w:style element with resolved properties.

    Args:
        style: The paragraph style to convert
        style_ids: Style name -> style id table for the whole styles part;
            ids are derived from the names alone when omitted

    Raises:
        StylesheetError: If the style cannot be resolved
    """
    paragraph = style.create_paragraph_formatting()
    run = style.create_run_formatting()

    style_elem = etree.Element(w("style"), nsmap=NSMAP)
    style_elem.set(w("type"), "paragraph")
    style_ids = style_ids or {}
    style_elem.set(w("styleId"), style_ids.get(style.name) or style_id_for(style.name))

    etree.SubElement(style_elem, w("name")).set(w("val"), style.name)
    if style.base_style:
        based_on = style_ids.get(style.base_style) or style_id_for(style.base_style)
        etree.SubElement(style_elem, w("basedOn")).set(w("val"), based_on)
    etree.SubElement(style_elem, w("qFormat"))

    style_elem.append(paragraph_properties_element(paragraph))
    style_elem.append(run_properties_element(run))
    return style_elem


def build_styles_part(stylesheet: Stylesheet) -> bytes:
    """Serialize every paragraph style of a stylesheet as a styles.xml part.

    Returns:
        The XML document as UTF-8 bytes, with declaration

    Raises:
        StylesheetError: If any style cannot be resolved
    """
    root = etree.Element(w("styles"), nsmap=NSMAP)
    style_ids = unique_style_ids(style.name for style in stylesheet)
    for style in stylesheet:
        root.append(style_element(style, style_ids))
        logger.debug(f"Exported paragraph style: {style.name}")
    return etree.tostring(root, xml_declaration=True, encoding="UTF-8", standalone=True)
