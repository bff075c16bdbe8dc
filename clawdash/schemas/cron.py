"""Cron panel schemas."""

from clawdash.schemas.base import CamelModel

UNKNOWN_SCHEDULE = "?"


class CronJob(CamelModel):
    id: int
    raw: str
    schedule: str
    command: str


class CrontabStatus(CamelModel):
    ok: bool
    raw: str
    jobs: list[CronJob]


class OpenClawCronStatus(CamelModel):
    ok: bool
    raw: str


class CronPanel(CamelModel):
    user_crontab: CrontabStatus
    openclaw_cron: OpenClawCronStatus
    execution_history: str
