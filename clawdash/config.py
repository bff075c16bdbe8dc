"""ClawDash configuration — loaded from environment / .env file."""

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="DASHBOARD_", extra="ignore", populate_by_name=True,
    )

    # HTTP server
    host: str = "0.0.0.0"
    port: int = Field(3477, validation_alias=AliasChoices("DASHBOARD_PORT", "PORT"))
    log_level: str = "INFO"

    # Basic auth (dashboard-auth.json wins over these when present)
    user: str = "admin"
    password: str = Field("SecretClaw123!", validation_alias=AliasChoices("DASHBOARD_PASS", "DASHBOARD_PASSWORD"))
    auth_file: Path = PACKAGE_DIR / "dashboard-auth.json"

    # Paths
    workspace_root: Path = Path(".")
    skills_dir: Path = Path("/usr/lib/node_modules/openclaw/skills")
    static_dir: Path = PACKAGE_DIR / "public"
    dashboard_log: Path = Path("dashboard.log")
    syslog_path: Path = Path("/var/log/syslog")

    # OpenClaw CLI binaries, probed in order
    openclaw_bins: list[str] = ["/usr/bin/openclaw", "/usr/local/bin/openclaw"]
    command_timeout: float = 12.0

    organization_root: str = "Owner (CEO)"

    @property
    def memory_dir(self) -> Path:
        return self.workspace_root / "memory"

    @property
    def projects_dir(self) -> Path:
        return self.workspace_root / "projects"
