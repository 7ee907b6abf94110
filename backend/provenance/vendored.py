"""Revisions of content vendored into the build (localization strings, legal docs).

Either may be missing from a checkout. Absence is reported as UNRESOLVED and
the field is left out of the version document rather than shown as unknown.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from provenance.files import read_json_object, read_text
from provenance.types import UNRESOLVED, Resolution, Resolved

if TYPE_CHECKING:
    from pathlib import Path

# bower writes the installed release tag under this key in .bower.json
TOS_PP_RELEASE_FIELD = "_release"


def read_l10n_version(path: Path) -> Resolution[str]:
    """Read the localization bundle's git-head marker file."""
    text = read_text(path)
    if isinstance(text, Resolved) and (revision := text.value.strip()):
        return Resolved(revision)
    return UNRESOLVED


def read_tos_pp_version(path: Path) -> Resolution[str]:
    """Read the release tag of the vendored terms-of-service/privacy-policy bundle."""
    descriptor = read_json_object(path)
    if not isinstance(descriptor, Resolved):
        return UNRESOLVED
    release = descriptor.value.get(TOS_PP_RELEASE_FIELD)
    if isinstance(release, str) and release.strip():
        return Resolved(release.strip())
    return UNRESOLVED
