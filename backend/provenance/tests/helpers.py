"""On-disk fixtures for a deployment checkout."""

import json
from pathlib import Path

PACKAGE_VERSION = "2.4.1"


def write_manifest(root: Path, version: str = PACKAGE_VERSION) -> Path:
    path = root / "pyproject.toml"
    path.write_text(f'[project]\nname = "demo"\nversion = "{version}"\n')
    return path


def write_static_descriptor(root: Path, commit_hash: str, source: str) -> Path:
    path = root / "config" / "version.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"version": {"hash": commit_hash, "source": source}}))
    return path


def write_l10n_revision(root: Path, revision: str) -> Path:
    path = root / "locale" / "git-head.txt"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(revision)
    return path


def write_tos_pp_descriptor(root: Path, release: str) -> Path:
    path = root / "app" / "bower_components" / "tos-pp" / ".bower.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"name": "tos-pp", "_release": release}))
    return path
