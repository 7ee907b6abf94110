"""Commit hash and origin URL read from git for local checkouts.

Only used when no static descriptor exists. Every failure (git missing,
not a repository, no origin configured, hung process) degrades to
UNRESOLVED; nothing here raises to the caller.
"""

from __future__ import annotations

import asyncio
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from provenance.types import UNRESOLVED, Resolution, Resolved

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

logger = structlog.get_logger()

GIT_EXECUTABLE = "git"
DEFAULT_TIMEOUT_SECONDS = 10.0


class CommandTimeoutError(Exception):
    """A child process did not exit within its timeout."""


@dataclass(frozen=True, slots=True)
class CommandResult:
    returncode: int | None
    stdout: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


async def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> CommandResult:
    """Run a command and capture its stdout.

    When env is given it replaces the inherited environment; only PATH is
    carried over so the executable can still be located. A process still
    running after timeout seconds is killed and CommandTimeoutError raised.
    Spawn failures propagate as OSError.
    """
    child_env = None
    if env is not None:
        child_env = {"PATH": os.environ.get("PATH", os.defpath), **env}

    process = await asyncio.create_subprocess_exec(
        *args,
        cwd=cwd,
        env=child_env,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.DEVNULL,
    )
    try:
        stdout, _ = await asyncio.wait_for(process.communicate(), timeout)
    except TimeoutError:
        process.kill()
        await process.wait()
        msg = f"{args[0]} did not exit within {timeout}s"
        raise CommandTimeoutError(msg) from None

    return CommandResult(returncode=process.returncode, stdout=stdout.decode("utf-8", errors="replace"))


async def _query_git(
    query: str,
    args: Sequence[str],
    *,
    timeout: float,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> Resolution[str]:
    try:
        result = await run_command([GIT_EXECUTABLE, *args], cwd=cwd, env=env, timeout=timeout)
    except (OSError, CommandTimeoutError) as e:
        logger.debug("git query failed", query=query, error=str(e))
        return UNRESOLVED

    if not result.ok:
        logger.debug("git query exited with error", query=query, returncode=result.returncode)
        return UNRESOLVED

    output = result.stdout.strip()
    if not output:
        logger.debug("git query returned no output", query=query)
        return UNRESOLVED
    return Resolved(output)


async def query_commit_hash(git_dir: Path, *, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> Resolution[str]:
    """Resolve HEAD, running git inside the repository's metadata directory."""
    return await _query_git("commit_hash", ["rev-parse", "HEAD"], cwd=git_dir, timeout=timeout)


async def query_source_url(git_dir: Path, *, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> Resolution[str]:
    """Resolve remote.origin.url from the repository's own config file only."""
    return await _query_git(
        "source_url",
        ["config", "--get", "remote.origin.url"],
        env={"GIT_CONFIG": str(git_dir / "config")},
        timeout=timeout,
    )
