"""Small text helpers used by the XPM reader."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def str_to_wordtab(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs."""
    return [word for word in _BLANKS.split(text) if word]


def _check_find(find: str) -> None:
    if not find:
        raise ValueError("search string must not be empty")


def find_substring(text: str, find: str) -> int:
    """Return the position of find in text, or -1."""
    _check_find(find)
    return text.find(find)


def find_substring_unquoted(text: str, find: str) -> int:
    """Return the first position of find outside double quotes, or -1."""
    _check_find(find)
    quoted = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return -1


def _blank(text: str, start: int, length: int) -> str:
    length = max(0, min(length, len(text) - start))
    return text[:start] + " " * length + text[start + length:]


def strip_comments(text: str) -> str:
    """Blank out C-style comments outside quotes, keeping the text length."""
    while (begin := find_substring_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2) - (begin + 2) if "*/" in text[begin + 2:] else -1
        text = _blank(text, begin, end + 4)
    while (begin := find_substring_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2) - (begin + 2) if "\n" in text[begin + 2:] else -1
        text = _blank(text, begin, end + 3)
    return text