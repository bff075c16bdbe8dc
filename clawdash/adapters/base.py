"""Abstract base class for agent-runtime adapters.

Swap OpenClaw for another agent runtime by implementing this interface.
Every method returns a ``CommandResult``; adapters never raise on a failed
probe.
"""

from abc import ABC, abstractmethod

from clawdash.schemas.command import CommandResult


class AgentRuntimeAdapter(ABC):
    """Read-only view of an agent runtime, as the dashboard needs it."""

    @abstractmethod
    async def status(self, *, full: bool = False) -> CommandResult:
        """Human-readable runtime status (``full`` asks for every section)."""

    @abstractmethod
    async def list_sessions(self) -> CommandResult:
        """Session list, JSON when the runtime supports it."""

    @abstractmethod
    async def list_agents(self) -> CommandResult:
        """Agent list, JSON when the runtime supports it."""

    @abstractmethod
    async def list_cron(self) -> CommandResult:
        """The runtime's own scheduled jobs."""

    @abstractmethod
    async def logs(self, tail: int = 40) -> CommandResult:
        """Recent runtime log lines (falls back to status output)."""
