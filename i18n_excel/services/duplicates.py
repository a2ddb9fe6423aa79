from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

"""Duplicate key detection over ordered entry sequences.

Items are anything with a ``key`` attribute (Entry) or ``(key, value)``
pairs as produced by the JSON pair loader. Items with an empty key take no
part in either check.
"""

__all__ = [
    "find_duplicate_keys",
    "find_unique_items",
    "item_key",
]

T = TypeVar("T")


def item_key(item: Any) -> str:
    """Return the key of an Entry-like object or a ``(key, value)`` pair."""
    if isinstance(item, tuple):
        return item[0] if item else ""
    return getattr(item, "key", None) or ""


def find_duplicate_keys(items: Iterable[Any]) -> list[str]:
    """Keys occurring more than once, each reported once.

    Order follows the position of each key's second occurrence, so
    ``[a, b, a, c, b]`` gives ``[a, b]``.
    """
    counts: dict[str, int] = {}
    duplicates: list[str] = []
    for item in items:
        key = item_key(item)
        if not key:
            continue
        counts[key] = counts.get(key, 0) + 1
        if counts[key] == 2:
            duplicates.append(key)
    return duplicates


def find_unique_items(items: Iterable[T]) -> list[T]:
    """First occurrence of every non-empty key, in original order."""
    seen: set[str] = set()
    unique: list[T] = []
    for item in items:
        key = item_key(item)
        if not key or key in seen:
            continue
        seen.add(key)
        unique.append(item)
    return unique
