"""Tolerant readers for optional on-disk metadata files."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import structlog

from provenance.types import UNRESOLVED, Resolution, Resolved

if TYPE_CHECKING:
    from pathlib import Path

logger = structlog.get_logger()


def read_text(path: Path) -> Resolution[str]:
    """Return the file's text, or UNRESOLVED when it cannot be read."""
    try:
        return Resolved(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("metadata file unreadable", path=str(path), error=str(e))
        return UNRESOLVED


def read_json_object(path: Path) -> Resolution[dict[str, Any]]:
    """Return the file's top-level JSON object, or UNRESOLVED.

    Unreadable files, invalid JSON and non-object documents are all unresolved.
    """
    text = read_text(path)
    if not isinstance(text, Resolved):
        return UNRESOLVED
    try:
        data = json.loads(text.value)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, oversized integers and pathological nesting
        logger.debug("metadata file is not valid JSON", path=str(path), error=str(e))
        return UNRESOLVED
    if not isinstance(data, dict):
        logger.debug("metadata file is not a JSON object", path=str(path))
        return UNRESOLVED
    return Resolved(data)
