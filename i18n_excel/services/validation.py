from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from ..errors import JsonParseError
from .duplicates import find_duplicate_keys

logger = logging.getLogger(__name__)

"""Key uniqueness validation.

A ``dict`` cannot hold a key twice, so validating an already-built mapping
always passes. The checks that matter run on ordered sources: Entry lists
before projection, and JSON documents read as raw ``(key, value)`` pairs
so repeated keys are seen instead of being collapsed by the decoder.
"""

__all__ = [
    "validate_unique_keys",
    "load_json_pairs",
    "validate_json_file",
]


def validate_unique_keys(source: Mapping[str, Any] | Iterable[Any]) -> bool:
    """Return False when an ordered key source repeats a key.

    Args:
        source: A mapping, a sequence of Entries, or ``(key, value)`` pairs

    Returns:
        True if every non-empty key occurs once
    """
    if isinstance(source, Mapping):
        return True
    duplicates = find_duplicate_keys(source)
    if duplicates:
        logger.error(f"duplicate i18n keys: {', '.join(duplicates)}")
        return False
    return True


def load_json_pairs(text: str) -> list[tuple[str, Any]]:
    """Parse a JSON object into its top-level ``(key, value)`` pairs, in order.

    Raises:
        JsonParseError: malformed JSON or a root that is not an object
    """
    try:
        # object_pairs_hook は入れ子オブジェクトにも適用される
        root = json.loads(text, object_pairs_hook=_Pairs)
    except json.JSONDecodeError as e:
        raise JsonParseError(f"invalid json: {e}") from e
    if not isinstance(root, _Pairs):
        raise JsonParseError(f"expected a JSON object at top level, got {type(root).__name__}")
    return [(k, _to_plain(v)) for k, v in root]


class _Pairs(list):
    """Decoded JSON object kept as its ordered pair list."""


def _to_plain(value: Any) -> Any:
    # 入れ子の値は通常の dict に戻す (重複検査はトップレベルのみ)
    if isinstance(value, _Pairs):
        return {k: _to_plain(v) for k, v in value}
    if isinstance(value, list):
        return [_to_plain(v) for v in value]
    return value


def validate_json_file(path: Path) -> bool:
    """Validate key uniqueness of a JSON i18n file on disk.

    A missing file is not an error (nothing to validate). Unreadable or
    malformed JSON and repeated keys fail the check.
    """
    if not path.exists():
        logger.info(f"i18n file not found, skipping validation: {path}")
        return True
    try:
        pairs = load_json_pairs(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, JsonParseError) as e:
        logger.error(f"validation error: {path}: {e}")
        return False
    if not validate_unique_keys(pairs):
        logger.error(f"key validation failed: {path}")
        return False
    logger.info(f"key validation passed: {path} keys={len(pairs)}")
    return True
