"""Static commit/origin descriptor written into production and staged builds.

Expected shape: {"version": {"hash": "<sha>", "source": "<origin url>"}}.
Local checkouts do not have one; callers fall back to querying git.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from provenance.files import read_json_object
from provenance.types import UNRESOLVED, Resolution, Resolved, StaticDescriptor

if TYPE_CHECKING:
    from pathlib import Path


def _non_empty_str(value: object) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def read_static_descriptor(path: Path) -> Resolution[StaticDescriptor]:
    """Read the baked-in descriptor; any missing piece makes the whole descriptor unresolved."""
    document = read_json_object(path)
    if not isinstance(document, Resolved):
        return UNRESOLVED

    version_block = document.value.get("version")
    if not isinstance(version_block, dict):
        return UNRESOLVED

    commit_hash = _non_empty_str(version_block.get("hash"))
    source = _non_empty_str(version_block.get("source"))
    if commit_hash is None or source is None:
        return UNRESOLVED
    return Resolved(StaticDescriptor(commit_hash=commit_hash, source=source))
