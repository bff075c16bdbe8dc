"""Shell command execution for the dashboard probes.

Nothing in here raises on command failure: a non-zero exit, a timeout or a
missing binary all come back as a ``CommandResult`` with ``ok=False``.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import signal
from collections.abc import Sequence
from typing import Any

from clawdash.schemas.command import CommandResult

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 12.0


def _kill_group(proc: asyncio.subprocess.Process) -> None:
    try:
        os.killpg(proc.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass  # already gone


async def run_command(cmd: str, *, timeout: float | None = None) -> CommandResult:
    """Run a shell command and capture its trimmed output."""
    timeout = DEFAULT_TIMEOUT if timeout is None else timeout
    try:
        # Own process group so a timeout can take down the whole pipeline
        proc = await asyncio.create_subprocess_shell(
            cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            start_new_session=True,
        )
    except OSError as exc:
        logger.debug("spawn failed for %r: %s", cmd, exc)
        return CommandResult(cmd=cmd, ok=False, error=str(exc))

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except TimeoutError:
        _kill_group(proc)
        await proc.wait()
        logger.debug("%r timed out after %ss", cmd, timeout)
        return CommandResult(cmd=cmd, ok=False, error=f"Command timed out after {timeout}s")

    stdout = stdout_bytes.decode(errors="replace").strip()
    stderr = stderr_bytes.decode(errors="replace").strip()
    if proc.returncode != 0:
        logger.debug("%r exited %s: %s", cmd, proc.returncode, stderr)
        error = f"Command failed (exit {proc.returncode}): {cmd}"
        if stderr:
            error = f"{error}\n{stderr}"
        return CommandResult(cmd=cmd, ok=False, stdout=stdout, stderr=stderr, error=error)
    return CommandResult(cmd=cmd, ok=True, stdout=stdout, stderr=stderr)


async def run_first_ok(commands: Sequence[str], *, timeout: float | None = None) -> CommandResult:
    """Run ``commands`` in order; return the first success with non-empty stdout.

    When none qualifies the last candidate is run once more and its result
    returned, so callers always get the error text of a real attempt.
    """
    if not commands:
        raise ValueError("run_first_ok needs at least one command")
    for cmd in commands:
        result = await run_command(cmd, timeout=timeout)
        if result.ok and result.stdout:
            return result
    return await run_command(commands[-1], timeout=timeout)


def try_parse_json(raw: str | None) -> Any:
    """``json.loads`` that returns None on bad or empty input."""
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, ValueError):
        return None
