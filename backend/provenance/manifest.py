"""Package version from the project manifest.

The manifest is produced by packaging and must exist: a missing or
malformed one raises ManifestError and stops the service from starting.
"""

from __future__ import annotations

import json
import tomllib
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


class ManifestError(Exception):
    """The package manifest is missing or has no usable version."""


def _version_from_pyproject(data: dict[str, Any]) -> object:
    project = data.get("project")
    return project.get("version") if isinstance(project, dict) else None


def read_package_version(path: Path) -> str:
    """Read the version from pyproject.toml ([project].version) or a JSON manifest (version)."""
    try:
        if path.suffix == ".toml":
            with path.open("rb") as f:
                version = _version_from_pyproject(tomllib.load(f))
        else:
            data = json.loads(path.read_text(encoding="utf-8"))
            version = data.get("version") if isinstance(data, dict) else None
    except (OSError, UnicodeDecodeError, ValueError) as e:
        msg = f"Cannot read package manifest {path}: {e}"
        raise ManifestError(msg) from e

    if not isinstance(version, str) or not version.strip():
        msg = f"Package manifest {path} does not declare a version"
        raise ManifestError(msg)
    return version.strip()
