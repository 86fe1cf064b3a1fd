"""Longest common prefix of a group of names."""

from __future__ import annotations

from collections.abc import Iterable


def common_prefix(strings: Iterable[str]) -> str:
    """Return the prefix shared by all strings; empty for fewer than two strings."""
    items = list(strings)
    if len(items) <= 1:
        return ""

    prefix = items[0]
    for text in items[1:]:
        while not text.startswith(prefix):
            prefix = prefix[:-1]
    return prefix