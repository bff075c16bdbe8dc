"""Shared fixtures: a throwaway workspace, a fake OpenClaw runtime, HTTP clients."""

from datetime import date
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from clawdash.adapters.base import AgentRuntimeAdapter
from clawdash.config import Settings
from clawdash.main import create_app
from clawdash.schemas.command import CommandResult

USER = "admin"
PASSWORD = "test-pass"


def ok(stdout: str, cmd: str = "fake") -> CommandResult:
    return CommandResult(cmd=cmd, ok=True, stdout=stdout)


def failed(error: str = "not found", cmd: str = "fake") -> CommandResult:
    return CommandResult(cmd=cmd, ok=False, error=error)


class FakeRuntime(AgentRuntimeAdapter):
    """Canned CLI output; every probe fails unless a test sets it."""

    def __init__(self) -> None:
        self.status_result = failed()
        self.status_all_result = failed()
        self.sessions_result = failed()
        self.agents_result = failed()
        self.cron_result = failed()
        self.logs_result = failed()

    async def status(self, *, full: bool = False) -> CommandResult:
        return self.status_all_result if full else self.status_result

    async def list_sessions(self) -> CommandResult:
        return self.sessions_result

    async def list_agents(self) -> CommandResult:
        return self.agents_result

    async def list_cron(self) -> CommandResult:
        return self.cron_result

    async def logs(self, tail: int = 40) -> CommandResult:
        return self.logs_result


@pytest.fixture
def workspace_root(tmp_path: Path) -> Path:
    root = tmp_path / "workspace"
    alice = root / "alice"
    (alice / "memory").mkdir(parents=True)
    (alice / "SOUL.md").write_text(
        "# Alice Prime\n\nFrontend designer for the React app.\nLoves CSS.\n"
    )
    (alice / "AGENTS.md").write_text(
        "# Agents\n\n- skill: web-search\n- tool: summarize\n- Runs on cron every morning\n"
    )
    (alice / "MEMORY.md").write_text("long-term notes\n")
    (alice / "memory" / f"{date.today().isoformat()}.md").write_text(
        "# Today\nposted the weekly update\nretry after timeout on upload\n"
    )

    bob = root / "bob"
    bob.mkdir()
    (bob / "agents.md").write_text("skills: reddit-post\n")

    (root / "notes").mkdir()  # no marker files: not a workspace
    (root / "README.md").write_text("not a directory\n")
    return root


@pytest.fixture
def skills_dir(tmp_path: Path) -> Path:
    skills = tmp_path / "skills"
    (skills / "summarize").mkdir(parents=True)
    (skills / "summarize" / "SKILL.md").write_text(
        "---\nname: summarize\ndescription: Condense long text.\n---\n\n# Summarize\n\nBody text.\n"
    )
    (skills / "reddit-post").mkdir()
    (skills / "reddit-post" / "SKILL.md").write_text("# Reddit Post\n\nPosts to subreddits.\n")
    (skills / "web-search").mkdir()  # no SKILL.md: skipped
    return skills


@pytest.fixture
def settings(tmp_path: Path, workspace_root: Path, skills_dir: Path) -> Settings:
    static = tmp_path / "public"
    static.mkdir()
    (static / "index.html").write_text("<h1>dashboard</h1>")
    return Settings(
        _env_file=None,
        user=USER,
        password=PASSWORD,
        auth_file=tmp_path / "dashboard-auth.json",
        workspace_root=workspace_root,
        skills_dir=skills_dir,
        static_dir=static,
        dashboard_log=tmp_path / "dashboard.log",
        syslog_path=tmp_path / "syslog",
        command_timeout=5.0,
    )


@pytest.fixture
def runtime() -> FakeRuntime:
    return FakeRuntime()


@pytest.fixture
def app(settings: Settings, runtime: FakeRuntime):
    return create_app(settings, runtime=runtime)


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test", auth=(USER, PASSWORD)) as c:
        yield c


@pytest_asyncio.fixture
async def anon_client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
