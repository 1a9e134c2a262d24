"""Font resolution onto the PDF standard 14 font set."""

from __future__ import annotations

from typing import Optional

from ..exceptions import ConfigError

FONT_FALLBACKS = {
    "helvetica": "Helvetica",
    "arial": "Helvetica",
    "sans-serif": "Helvetica",
    "times": "Times-Roman",
    "times-roman": "Times-Roman",
    "times new roman": "Times-Roman",
    "serif": "Times-Roman",
    "courier": "Courier",
    "courier new": "Courier",
    "monospace": "Courier",
}

_VARIANTS = {
    "Helvetica": ("Helvetica", "Helvetica-Bold", "Helvetica-Oblique", "Helvetica-BoldOblique"),
    "Times-Roman": ("Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic"),
    "Courier": ("Courier", "Courier-Bold", "Courier-Oblique", "Courier-BoldOblique"),
}


def normalize_family(font_name: Optional[str]) -> str:
    """Map a family name or alias onto one of the built-in families.

    Raises:
        ConfigError: for fonts outside the built-in set
    """
    if not font_name or not font_name.strip():
        return "Helvetica"
    cleaned = font_name.strip()
    if cleaned in _VARIANTS:
        return cleaned
    base = FONT_FALLBACKS.get(cleaned.lower())
    if base is None:
        raise ConfigError("Unsupported font family", cleaned)
    return base


def resolve_font_variant(font_name: Optional[str], bold: bool, italic: bool) -> str:
    regular, bold_name, italic_name, bold_italic = _VARIANTS[normalize_family(font_name)]
    if bold and italic:
        return bold_italic
    if bold:
        return bold_name
    if italic:
        return italic_name
    return regular
