"""Locations of provenance sources, configured via VERSION_* environment variables."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


def _get_default_root_dir() -> Path:  # pragma: no cover — production default, tests always provide root_dir
    """Return the file-relative repository root (parent of backend/)."""
    return Path(__file__).resolve().parent.parent.parent


class VersionSettings(BaseSettings):
    model_config = {"env_prefix": "VERSION_"}

    # Relative paths below are resolved against root_dir
    root_dir: Path = Field(default_factory=_get_default_root_dir)
    manifest_path: Path = Path("pyproject.toml")
    static_descriptor_path: Path = Path("config/version.json")
    git_dir: Path = Path(".git")
    # Marker written by the l10n checkout step; override with VERSION_L10N_REVISION_PATH
    # for layouts that vendor it elsewhere (e.g. fxa-content-server-l10n/git-head.txt).
    l10n_revision_path: Path = Path("locale/git-head.txt")
    tos_pp_descriptor_path: Path = Path("app/bower_components/tos-pp/.bower.json")

    # Upper bound for each git invocation; a hung git degrades to "unknown"
    git_timeout: float = Field(default=10.0, gt=0)

    def resolve_path(self, path: Path) -> Path:
        return path if path.is_absolute() else self.root_dir / path
