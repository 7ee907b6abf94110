"""Shared fixtures for provenance tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from provenance.settings import VersionSettings
from provenance.tests.helpers import write_manifest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture
def deployment_root(tmp_path: Path) -> Path:
    """A checkout containing only the package manifest."""
    write_manifest(tmp_path)
    return tmp_path


@pytest.fixture
def make_settings(deployment_root: Path) -> Callable[..., VersionSettings]:
    def _make(**overrides: object) -> VersionSettings:
        return VersionSettings(root_dir=deployment_root, **overrides)

    return _make
