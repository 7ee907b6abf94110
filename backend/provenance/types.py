"""Version record and sub-resolution result types."""

from dataclasses import dataclass
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field

UNKNOWN: Final = "unknown"


@dataclass(frozen=True)
class Resolved[T]:
    """A sub-resolution that produced a usable value."""

    value: T


class Unresolved(Enum):
    """A sub-resolution that found nothing usable. Not an error."""

    UNRESOLVED = "unresolved"


UNRESOLVED = Unresolved.UNRESOLVED

type Resolution[T] = Resolved[T] | Unresolved


def value_or[T, D](result: Resolution[T], default: D) -> T | D:
    """Unwrap a resolution, substituting default when unresolved."""
    if isinstance(result, Resolved):
        return result.value
    return default


@dataclass(frozen=True, slots=True)
class StaticDescriptor:
    """Commit and origin baked into built artifacts."""

    commit_hash: str
    source: str


class VersionRecord(BaseModel, frozen=True):
    """Provenance facts about the running deployment.

    Field declaration order is the serialized key order.
    """

    source: str  # origin URL or UNKNOWN
    version: str
    commit: str  # HEAD hash or UNKNOWN
    l10n: str | None = None
    tos_pp: str | None = Field(default=None, serialization_alias="tosPp")

    def to_document(self) -> dict[str, str]:
        """JSON-ready dict; vendored revisions that were not found are omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)
