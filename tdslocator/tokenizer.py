"""Delimiter-based tokenizer for connection locators."""

from __future__ import annotations

DELIMITERS = frozenset(":;/")


def next_token(locator: str, pos: int) -> tuple[str, int]:
    """Return the text up to the next delimiter and the offset just past it.

    ``//`` counts as a single delimiter. At end of input the remaining text (or
    an empty string) is returned together with ``len(locator)``.
    """

    length = len(locator)
    start = pos
    while pos < length:
        ch = locator[pos]
        pos += 1
        if ch == "/":
            token = locator[start : pos - 1]
            if pos < length and locator[pos] == "/":
                pos += 1
            return token, pos
        if ch in DELIMITERS:
            return locator[start : pos - 1], pos
    return locator[start:], length


def last_delimiter(locator: str, pos: int) -> str:
    """Delimiter that ended the token finishing at ``pos``, or ``""`` at end of input."""

    if pos <= 0 or pos >= len(locator):
        return ""
    ch = locator[pos - 1]
    return ch if ch in DELIMITERS else ""


__all__ = ["DELIMITERS", "last_delimiter", "next_token"]
