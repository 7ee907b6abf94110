"""Process-wide, resolve-once cache of the deployment's VersionRecord.

The first caller, either the startup warm-up or the first request, starts
the single resolution task. Every other caller, concurrent or later, awaits
that same task and then receives the same VersionRecord object. Nothing
ever invalidates it; it lives as long as the process.

Resolution reads the static descriptor once. When it is present, commit and
source come from it and git is never invoked. Otherwise both git queries run
concurrently and each degrades to "unknown" on its own. The joined record
always has the field order source, version, commit, l10n, tosPp.
"""

from __future__ import annotations

import asyncio
import contextlib
from typing import TYPE_CHECKING

import structlog

from provenance.manifest import read_package_version
from provenance.static_source import read_static_descriptor
from provenance.types import UNKNOWN, Resolved, VersionRecord, value_or
from provenance.vcs import query_commit_hash, query_source_url
from provenance.vendored import read_l10n_version, read_tos_pp_version

if TYPE_CHECKING:
    from provenance.settings import VersionSettings
    from provenance.types import Resolution, StaticDescriptor

logger = structlog.get_logger()


class VersionInfoResolver:
    """Single-flight resolver for the running deployment's provenance.

    Construction reads the package manifest and raises ManifestError when it
    is missing, so a broken build fails at startup instead of at request time.
    """

    def __init__(self, settings: VersionSettings) -> None:
        self._settings = settings
        self._package_version = read_package_version(settings.resolve_path(settings.manifest_path))
        self._task: asyncio.Task[VersionRecord] | None = None
        self._record: VersionRecord | None = None

    @property
    def record(self) -> VersionRecord | None:
        """The settled record, or None while unresolved."""
        return self._record

    def warm_up(self) -> None:
        """Start resolving in the background. Must be called from a running event loop."""
        self._ensure_task()

    async def get(self) -> VersionRecord:
        if self._record is not None:
            return self._record
        # Shielded so a cancelled request does not cancel the shared resolution.
        return await asyncio.shield(self._ensure_task())

    async def close(self) -> None:
        """Cancel a resolution still in flight at shutdown. A settled record is kept."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task

    def _ensure_task(self) -> asyncio.Task[VersionRecord]:
        # No await between the check and the assignment: first caller wins.
        if self._task is None:
            self._task = asyncio.create_task(self._resolve(), name="resolve-version-info")
        return self._task

    async def _resolve(self) -> VersionRecord:
        settings = self._settings
        static = read_static_descriptor(settings.resolve_path(settings.static_descriptor_path))

        source, commit = await asyncio.gather(
            self._resolve_source(static),
            self._resolve_commit(static),
        )
        record = VersionRecord(
            source=source,
            version=self._package_version,
            commit=commit,
            l10n=value_or(read_l10n_version(settings.resolve_path(settings.l10n_revision_path)), None),
            tos_pp=value_or(read_tos_pp_version(settings.resolve_path(settings.tos_pp_descriptor_path)), None),
        )
        self._record = record
        # Logging is best-effort: a failing sink must not fail the shared resolution.
        with contextlib.suppress(Exception):
            _log_record(record)
        return record

    async def _resolve_source(self, static: Resolution[StaticDescriptor]) -> str:
        if isinstance(static, Resolved):
            return static.value.source
        git_dir = self._settings.resolve_path(self._settings.git_dir)
        return value_or(await query_source_url(git_dir, timeout=self._settings.git_timeout), UNKNOWN)

    async def _resolve_commit(self, static: Resolution[StaticDescriptor]) -> str:
        if isinstance(static, Resolved):
            return static.value.commit_hash
        git_dir = self._settings.resolve_path(self._settings.git_dir)
        return value_or(await query_commit_hash(git_dir, timeout=self._settings.git_timeout), UNKNOWN)


def _log_record(record: VersionRecord) -> None:
    logger.info("source set", source=record.source)
    logger.info("version set", version=record.version)
    logger.info("commit hash set", commit=record.commit)
    logger.info("l10n revision set", l10n=record.l10n)
    logger.info("tos-pp (legal docs) revision set", tos_pp=record.tos_pp)
