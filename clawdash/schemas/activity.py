"""Activity feed schemas."""

from enum import StrEnum

from clawdash.schemas.base import CamelModel


class ActivityType(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    SYSTEM = "system"
    BOT = "bot"


class ActivityEvent(CamelModel):
    id: str
    text: str
    type: ActivityType
    agent: str | None = None
    time: str  # source label, kept under the key the frontend renders


class ActivityPanel(CamelModel):
    activities: list[ActivityEvent]
    raw_dash_log: str
    raw_openclaw_log: str
