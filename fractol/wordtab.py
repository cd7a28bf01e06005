"""Tiny text helpers used when reading XPM data."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def find(text: str, needle: str) -> int:
    """Index of the first occurrence of ``needle`` in ``text``, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    return text.find(needle)


def find_unquoted(text: str, needle: str) -> int:
    """Like :func:`find`, but skip occurrences inside double quotes."""
    if not needle:
        raise ValueError("needle must not be empty")
    inside = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split on runs of spaces and tabs, dropping empty words."""
    return [word for word in _BLANKS.split(text) if word]