"""Project style entities onto CSS declarations for HTML previews."""
from __future__ import annotations

import re
from typing import Dict

from docx_styles.model.font_style import FontStyle, Highlight, Underline
from docx_styles.model.paragraph_style import Alignment, ParagraphStyle
from docx_styles.utils.units import twips_to_points

_HEX_COLOR = re.compile(r"^[0-9A-Fa-f]{6}$")

_HIGHLIGHT_CSS = {
    Highlight.YELLOW: "#FFFF00",
    Highlight.LIGHT_GREEN: "#00FF00",
    Highlight.CYAN: "#00FFFF",
    Highlight.MAGENTA: "#FF00FF",
    Highlight.BLUE: "#0000FF",
    Highlight.RED: "#FF0000",
    Highlight.DARK_BLUE: "#000080",
    Highlight.DARK_CYAN: "#008080",
    Highlight.DARK_GREEN: "#008000",
    Highlight.DARK_MAGENTA: "#800080",
    Highlight.DARK_RED: "#800000",
    Highlight.DARK_YELLOW: "#808000",
    Highlight.DARK_GRAY: "#808080",
    Highlight.LIGHT_GRAY: "#C0C0C0",
    Highlight.BLACK: "#000000",
}

_UNDERLINE_CSS_STYLE = {
    Underline.DOUBLE: "double",
    Underline.WAVY_DOUBLE: "wavy",
    Underline.WAVY: "wavy",
    Underline.WAVY_HEAVY: "wavy",
    Underline.DOTTED: "dotted",
    Underline.DOTTED_HEAVY: "dotted",
    Underline.DASH: "dashed",
    Underline.DASH_HEAVY: "dashed",
    Underline.DASH_LONG: "dashed",
    Underline.DASH_LONG_HEAVY: "dashed",
}


def css_color(value: str) -> str:
    """Prefix bare six-digit hex colors with ``#``; pass names through."""
    if _HEX_COLOR.match(value):
        return f"#{value.upper()}"
    return value


def font_to_css(font: FontStyle) -> Dict[str, str]:
    """Convert a font style into CSS properties."""
    css: Dict[str, str] = {
        "font-family": f"'{font.name}'",
        "font-size": f"{font.size}pt",
        "color": css_color(font.color),
    }
    if font.bold:
        css["font-weight"] = "700"
    if font.italic:
        css["font-style"] = "italic"

    decorations = []
    if font.underline != Underline.NONE:
        decorations.append("underline")
        if font.underline in _UNDERLINE_CSS_STYLE:
            css["text-decoration-style"] = _UNDERLINE_CSS_STYLE[font.underline]
    if font.strikethrough:
        decorations.append("line-through")
    if decorations:
        css["text-decoration-line"] = " ".join(decorations)

    if font.superscript:
        css["vertical-align"] = "super"
    elif font.subscript:
        css["vertical-align"] = "sub"

    if isinstance(font.bg_color, str) and font.bg_color:
        css["background-color"] = css_color(font.bg_color)
    elif isinstance(font.fg_color, str) and font.fg_color:
        css["background-color"] = _HIGHLIGHT_CSS.get(font.fg_color, css_color(font.fg_color))
    return css


def paragraph_to_css(paragraph: ParagraphStyle) -> Dict[str, str]:
    """Convert a paragraph style into CSS properties."""
    css: Dict[str, str] = {}
    if paragraph.align:
        css["text-align"] = "justify" if paragraph.align in {Alignment.BOTH, Alignment.DISTRIBUTE} else paragraph.align
    if paragraph.line_height is not None:
        css["line-height"] = f"{paragraph.line_height}"
    elif paragraph.spacing is not None:
        css["line-height"] = f"{twips_to_points(paragraph.spacing)}pt"
    if paragraph.space_before is not None:
        css["margin-top"] = f"{twips_to_points(paragraph.space_before)}pt"
    if paragraph.space_after is not None:
        css["margin-bottom"] = f"{twips_to_points(paragraph.space_after)}pt"
    if paragraph.indent is not None:
        css["margin-left"] = f"{twips_to_points(paragraph.indent)}pt"
    if paragraph.hanging:
        css["text-indent"] = f"{-twips_to_points(paragraph.hanging)}pt"
    if paragraph.page_break_before:
        css["break-before"] = "page"
    return css
