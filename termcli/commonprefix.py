"""Longest common prefix of a set of strings."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["common_prefix"]


def common_prefix(strings: Sequence[str]) -> str:
    """Return the longest prefix shared by every string in *strings*.

    Raises ValueError when *strings* is empty.
    """
    if not strings:
        raise ValueError("common_prefix needs at least one string")
    prefix = []
    for chars in zip(*strings):
        first = chars[0]
        if any(c != first for c in chars):
            break
        prefix.append(first)
    return "".join(prefix)