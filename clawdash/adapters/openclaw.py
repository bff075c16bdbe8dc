"""OpenClaw CLI adapter.

The CLI may live under any of several install prefixes, so every call is a
list of candidate invocations handed to ``run_first_ok``: JSON variants
first, plain-text variants after, one per configured binary.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from clawdash.adapters.base import AgentRuntimeAdapter
from clawdash.schemas.command import CommandResult
from clawdash.services.commands import run_first_ok

logger = logging.getLogger(__name__)

DEFAULT_BINS = ("/usr/bin/openclaw", "/usr/local/bin/openclaw")


class OpenClawCLI(AgentRuntimeAdapter):
    def __init__(self, bins: Sequence[str] = DEFAULT_BINS, *, timeout: float = 12.0) -> None:
        if not bins:
            raise ValueError("OpenClawCLI needs at least one binary path")
        self.bins = list(bins)
        self.timeout = timeout

    def candidates(self, *variants: str) -> list[str]:
        """Every binary × variant, variant-major (all JSON tries before plain)."""
        return [f"{b} {v}" for v in variants for b in self.bins]

    async def _first_ok(self, *variants: str) -> CommandResult:
        result = await run_first_ok(self.candidates(*variants), timeout=self.timeout)
        if not result.ok:
            logger.debug("openclaw %s unavailable: %s", variants[0], result.error)
        return result

    async def status(self, *, full: bool = False) -> CommandResult:
        if full:
            return await self._first_ok("status --all", "status")
        return await self._first_ok("status")

    async def list_sessions(self) -> CommandResult:
        return await self._first_ok("sessions list --json", "sessions list")

    async def list_agents(self) -> CommandResult:
        return await self._first_ok("agents list --json", "agents list")

    async def list_cron(self) -> CommandResult:
        return await self._first_ok("cron list")

    async def logs(self, tail: int = 40) -> CommandResult:
        return await self._first_ok(f"logs --tail {int(tail)}", "status")
