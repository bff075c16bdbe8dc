"""Cron panel — user crontab, OpenClaw cron list, syslog execution history."""

from __future__ import annotations

import asyncio
import shlex
from pathlib import Path

from clawdash.adapters.base import AgentRuntimeAdapter
from clawdash.schemas.cron import (
    UNKNOWN_SCHEDULE,
    CronJob,
    CronPanel,
    CrontabStatus,
    OpenClawCronStatus,
)
from clawdash.services.commands import run_command

HISTORY_LINES = 25
NO_HISTORY = "No system cron logs found, or no permission to read the syslog."


def parse_simple_cron(text: str | None) -> list[CronJob]:
    """Positional crontab split: five schedule fields, the rest is the command.

    Lines with fewer than six tokens get the ``"?"`` schedule and keep the
    whole line as command.  No cron-syntax validation is attempted.
    """
    lines = [l.strip() for l in (text or "").splitlines()]
    lines = [l for l in lines if l and not l.startswith("#")]

    jobs: list[CronJob] = []
    for idx, line in enumerate(lines, start=1):
        parts = line.split()
        if len(parts) < 6:
            jobs.append(CronJob(id=idx, raw=line, schedule=UNKNOWN_SCHEDULE, command=line))
        else:
            jobs.append(CronJob(id=idx, raw=line, schedule=" ".join(parts[:5]), command=" ".join(parts[5:])))
    return jobs


def history_command(syslog: Path) -> str:
    # Skip the noisy "cd /" run-parts lines the system itself schedules
    return (
        f"grep CRON {shlex.quote(str(syslog))}"
        " | grep -v 'CRON\\[[0-9]*\\]: (root) CMD (   cd /'"
        f" | tail -n {HISTORY_LINES}"
    )


async def collect_cron(runtime: AgentRuntimeAdapter, syslog: Path, *, timeout: float) -> CronPanel:
    crontab, openclaw_cron, history = await asyncio.gather(
        run_command("crontab -l", timeout=timeout),
        runtime.list_cron(),
        run_command(history_command(syslog), timeout=timeout),
    )
    return CronPanel(
        user_crontab=CrontabStatus(
            ok=crontab.ok,
            raw=crontab.stdout or crontab.stderr,
            jobs=parse_simple_cron(crontab.stdout),
        ),
        openclaw_cron=OpenClawCronStatus(ok=openclaw_cron.ok, raw=openclaw_cron.output),
        execution_history=history.stdout or NO_HISTORY,
    )
