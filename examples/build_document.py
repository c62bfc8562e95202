"""
Example: Typesetting a document from a paragraph style sheet.

This example loads the style sheet next to this file, prints the resolved
attributes of each style, writes a styles.xml part, and builds a short
.docx document with python-docx using the resolved formatting.
"""

from pathlib import Path

from docx import Document

from python_docx_stylesheet import add_styled_paragraph, build_styles_part, load_stylesheet

HERE = Path(__file__).parent

# (style name, paragraph text); None uses the style's own text
CONTENT: list[tuple[str, str | None]] = [
    ("chapter title", "Chapter One"),
    ("body", "It was a bright cold day in April, and the clocks were striking thirteen."),
    ("body", "Outside, even through the shut window-pane, the world looked cold."),
    ("quote", "Who controls the past controls the future."),
    ("section break", None),
    ("body", "The hallway smelt of boiled cabbage and old rag mats."),
]


def main() -> None:
    sheet = load_stylesheet(HERE / "book.yaml")

    for style in sheet:
        resolved = style.resolve()
        print(
            f"{resolved.name:15} {resolved.font.name} {resolved.font_size:g}pt, "
            f"leading {resolved.leading:g}pt, {resolved.alignment.render()}"
        )

    styles_xml = HERE / "styles.xml"
    styles_xml.write_bytes(build_styles_part(sheet))
    print(f"Wrote {styles_xml}")

    document = Document()
    for style_name, text in CONTENT:
        add_styled_paragraph(document, sheet.get_paragraph_style(style_name), text)

    output = HERE / "book.docx"
    document.save(output)
    print(f"Wrote {output}")


if __name__ == "__main__":
    main()
