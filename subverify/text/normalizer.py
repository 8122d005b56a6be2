"""Canonical form for OCR text before rule matching."""

import re

_WHITESPACE = re.compile(r"\s+")
_QUOTE_GLYPHS = re.compile("[’‘`´ʼ']")


def normalize(raw: str | None) -> str:
    """Collapse whitespace, unify apostrophes, upper-case and trim.

    Empty or missing input yields an empty string.
    """
    if not raw:
        return ""
    # Upper-case first: some letters expand into a quote glyph (ŉ -> ʼN).
    text = _WHITESPACE.sub(" ", raw.upper())
    text = _QUOTE_GLYPHS.sub("'", text)
    return text.strip()
