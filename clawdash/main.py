"""FastAPI application entrypoint."""

import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from clawdash.adapters.base import AgentRuntimeAdapter
from clawdash.adapters.openclaw import OpenClawCLI
from clawdash.auth import basic_auth_middleware, load_credentials
from clawdash.config import Settings
from clawdash.routers import activity, agents, channels, cron, organization, overview, projects, skills

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )


def create_app(settings: Settings | None = None, runtime: AgentRuntimeAdapter | None = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(
        title="ClawDash",
        description="Read-only admin dashboard for OpenClaw agents",
        version="0.1.0",
    )
    app.state.settings = settings
    app.state.runtime = runtime or OpenClawCLI(settings.openclaw_bins, timeout=settings.command_timeout)
    app.state.credentials = load_credentials(settings)
    logger.info(
        'Dashboard login: user="%s", pass-source=%s',
        app.state.credentials.user, app.state.credentials.source,
    )

    app.middleware("http")(basic_auth_middleware)

    # Mount routers
    for module in (overview, agents, cron, projects, channels, activity, organization, skills):
        app.include_router(module.router, prefix="/api", tags=[module.__name__.rsplit(".", 1)[-1]])

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": "clawdash"}

    # Static SPA last so /api and /health win
    if settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    else:
        logger.warning("Static directory %s not found; serving API only", settings.static_dir)

    return app


def run() -> None:
    """Console entrypoint: ``clawdash``."""
    import uvicorn

    settings = Settings()
    configure_logging(settings.log_level)
    logger.info("OpenClaw Admin Dashboard running on http://localhost:%d", settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
