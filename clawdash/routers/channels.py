"""Channels panel endpoint."""

from fastapi import APIRouter, Depends

from clawdash.config import Settings
from clawdash.dependencies import get_settings
from clawdash.schemas.panels import ChannelsPanel
from clawdash.services.channel_service import detect_channels
from clawdash.utils.envelope import envelope

router = APIRouter()


@router.get("/channels")
async def list_channels(settings: Settings = Depends(get_settings)):
    channels = detect_channels(settings.workspace_root, settings.skills_dir)
    return envelope(ChannelsPanel(channels=channels))
