"""Shared fixtures for version server tests."""

import pytest

from provenance.settings import VersionSettings
from provenance.tests.helpers import write_manifest


@pytest.fixture
def deployment_root(tmp_path):
    write_manifest(tmp_path)
    return tmp_path


@pytest.fixture
def version_settings(deployment_root):
    return VersionSettings(root_dir=deployment_root, git_timeout=5.0)
