"""External command result schema."""

from pydantic import BaseModel


class CommandResult(BaseModel):
    """Outcome of one shell invocation. Never raised, always returned."""

    cmd: str
    ok: bool
    stdout: str = ""
    stderr: str = ""
    error: str | None = None

    @property
    def output(self) -> str:
        """Best available text: stdout, then stderr, then the error message."""
        return self.stdout or self.stderr or self.error or ""
