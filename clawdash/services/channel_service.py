"""Channel detection — which messaging integrations show signs of configuration."""

from __future__ import annotations

from pathlib import Path

from clawdash.schemas.panels import Channel
from clawdash.utils.fs import read_file_safe, text_or_empty

# Canonical channel catalog
KNOWN_CHANNELS: list[dict] = [
    {"id": "telegram", "name": "Telegram", "type": "messaging", "icon_color": "text-[#229ED9]",
     "description": "Telegram bot and group chat for agent communication",
     "config_paths": [".env", "config.json", "skills/telegram-notify", "skills/telegram-message"],
     "env_keys": ["TELEGRAM_BOT_TOKEN", "TELEGRAM_CHAT_ID", "TG_BOT_TOKEN"]},
    {"id": "whatsapp", "name": "WhatsApp", "type": "messaging", "icon_color": "text-[#25D366]",
     "description": "WhatsApp Business API for customer communication",
     "config_paths": ["skills/whatsapp", ".env"],
     "env_keys": ["WHATSAPP_TOKEN", "WA_PHONE_ID", "WHATSAPP_PHONE_NUMBER_ID"]},
    {"id": "twitter", "name": "Twitter / X", "type": "social", "icon_color": "text-white",
     "description": "Twitter engagement and auto-reply via OpenClaw",
     "config_paths": ["skills/twitter-engage", "skills/twitter-post", ".env"],
     "env_keys": ["TWITTER_BEARER_TOKEN", "TWITTER_API_KEY", "X_API_KEY"]},
    {"id": "reddit", "name": "Reddit", "type": "social", "icon_color": "text-[#FF4500]",
     "description": "Reddit karma building and subreddit engagement",
     "config_paths": ["skills/reddit-cultivate", "skills/reddit-post", ".env"],
     "env_keys": ["REDDIT_CLIENT_ID", "REDDIT_USER_AGENT"]},
    {"id": "email", "name": "E-Mail", "type": "messaging", "icon_color": "text-[#EA4335]",
     "description": "SMTP/IMAP mail channel for notifications",
     "config_paths": [".env"],
     "env_keys": ["SMTP_HOST", "MAIL_FROM", "EMAIL_HOST"]},
    {"id": "slack", "name": "Slack", "type": "team", "icon_color": "text-[#4A154B]",
     "description": "Slack workspace integration for team notifications",
     "config_paths": ["skills/slack-notify", ".env"],
     "env_keys": ["SLACK_TOKEN", "SLACK_WEBHOOK_URL", "SLACK_BOT_TOKEN"]},
    {"id": "discord", "name": "Discord", "type": "team", "icon_color": "text-[#5865F2]",
     "description": "Discord bot and server integration",
     "config_paths": ["skills/discord-notify", ".env"],
     "env_keys": ["DISCORD_TOKEN", "DISCORD_WEBHOOK", "DISCORD_BOT_TOKEN"]},
]


def _config_path_exists(rel: str, workspace_root: Path, skills_dir: Path) -> bool:
    return (workspace_root / rel).exists() or (skills_dir / rel.removeprefix("skills/")).exists()


def detect_channels(workspace_root: Path, skills_dir: Path) -> list[Channel]:
    env_content = text_or_empty(read_file_safe(workspace_root / ".env"))
    channels = []
    for spec in KNOWN_CHANNELS:
        has_env_key = any(key in env_content for key in spec["env_keys"])
        has_skill_dir = any(_config_path_exists(p, workspace_root, skills_dir) for p in spec["config_paths"])
        channels.append(Channel(
            **spec,
            active=has_env_key or has_skill_dir,
            has_env_key=has_env_key,
            has_skill_dir=has_skill_dir,
        ))
    return channels
