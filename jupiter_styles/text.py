"""Helpers for choosing text elements and line-clamp styles."""

from __future__ import annotations

_ELEMENTS = {
    "title": "h1",
    "heading": "h2",
    "subheading": "h3",
    "h4": "h4",
    "caption": "span",
    "overline": "span",
    "code": "code",
}


def text_element_from_hierarchy(hierarchy: str) -> str:
    """Return the HTML element for a typography hierarchy name.

    Unknown names fall back to ``"p"``.
    """
    return _ELEMENTS.get(hierarchy, "p")


def text_clamp_style(clamp_lines: int | None) -> str:
    """Return an inline CSS style that clamps text to ``clamp_lines`` lines.

    ``None`` gives an empty string. A negative line count is rejected.
    """
    if clamp_lines is None:
        return ""
    if clamp_lines < 0:
        raise ValueError(f"clamp_lines must not be negative, got {clamp_lines}")
    return (
        f"display: -webkit-box; -webkit-line-clamp: {clamp_lines}; "
        "-webkit-box-orient: vertical; overflow: hidden;"
    )