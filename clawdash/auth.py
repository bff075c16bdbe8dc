"""HTTP Basic authentication for every dashboard route.

Credential priority: ``dashboard-auth.json`` (``{"user": ..., "pass": ...}``),
then DASHBOARD_USER / DASHBOARD_PASS, then the built-in defaults.
"""

from __future__ import annotations

import json
import logging
import secrets
from dataclasses import dataclass

from fastapi import HTTPException, Request
from fastapi.responses import PlainTextResponse
from fastapi.security import HTTPBasic

from clawdash.config import Settings
from clawdash.utils.fs import Found, read_file_safe

logger = logging.getLogger(__name__)

REALM = "OpenClaw Admin Dashboard"

_basic = HTTPBasic(realm=REALM, auto_error=False)


@dataclass(frozen=True)
class Credentials:
    user: str
    password: str
    source: str

    def matches(self, user: str, password: str) -> bool:
        if not (user and password and self.user and self.password):
            return False
        # Evaluate both so timing does not reveal which half was wrong
        user_ok = secrets.compare_digest(user.encode(), self.user.encode())
        pass_ok = secrets.compare_digest(password.encode(), self.password.encode())
        return user_ok and pass_ok


def load_credentials(settings: Settings) -> Credentials:
    result = read_file_safe(settings.auth_file)
    if isinstance(result, Found):
        try:
            cfg = json.loads(result.content)
        except json.JSONDecodeError as exc:
            logger.warning("Ignoring unparsable %s: %s", settings.auth_file, exc)
        else:
            if isinstance(cfg, dict):
                return Credentials(
                    user=str(cfg.get("user") or "admin"),
                    password=str(cfg.get("pass") or ""),
                    source=settings.auth_file.name,
                )
            logger.warning("Ignoring %s: expected a JSON object", settings.auth_file)
    return Credentials(user=settings.user, password=settings.password, source="env/default")


def unauthorized() -> PlainTextResponse:
    return PlainTextResponse(
        "Authentication required.",
        status_code=401,
        headers={"WWW-Authenticate": f'Basic realm="{REALM}"'},
    )


async def basic_auth_middleware(request: Request, call_next):
    """Reject any request whose Basic credentials do not match the app's."""
    expected: Credentials = request.app.state.credentials
    try:
        given = await _basic(request)
    except HTTPException:
        # Malformed header (bad base64, no colon)
        given = None
    if given is None or not expected.matches(given.username, given.password):
        return unauthorized()
    return await call_next(request)
