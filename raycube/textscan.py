"""Small text scanning helpers used by the XPM reader."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def split_words(text: str) -> list[str]:
    """Split text into words separated by runs of spaces and tabs."""
    return [word for word in _BLANKS.split(text) if word]


def _require_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def find(text: str, needle: str) -> int:
    """Return the first position of needle in text, or -1 when absent."""
    _require_needle(needle)
    return text.find(needle)


def find_outside_quotes(text: str, needle: str) -> int:
    """Return the first position of needle that lies outside double quotes.

    A double quote toggles the quoted state; matches are only looked for
    while unquoted. Returns -1 when there is no such match.
    """
    _require_needle(needle)
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quotes with spaces.

    Block comments are blanked including their delimiters; line comments are
    blanked up to and including the newline that ends them. An unterminated
    comment is blanked to the end of the text. The length never changes.
    """
    while (start := find_outside_quotes(text, "/*")) != -1:
        end = text.find("*/", start + 2)
        text = _blank(text, start, len(text) if end == -1 else end + 2)
    while (start := find_outside_quotes(text, "//")) != -1:
        end = text.find("\n", start + 2)
        text = _blank(text, start, len(text) if end == -1 else end + 1)
    return text