"""
Application configuration models and helpers.

Settings are read from the process environment, optionally seeded from a
``.env`` file in the project root, and handed explicitly to the sync service.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _resolve_project_root(checkout_root: Path) -> Path:
    """Use the source checkout when running from one, else the working directory."""
    if (checkout_root / "pyproject.toml").exists():
        return checkout_root
    return Path.cwd()


PROJECT_ROOT = _resolve_project_root(Path(__file__).resolve().parents[2])
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
DEFAULT_OUTPUT_PATH = PROJECT_ROOT / "cookies.json"


def _load_env_file(path: str | Path = DEFAULT_ENV_FILE) -> None:
    """Best-effort load key=value pairs from a .env file without extra deps."""
    env_path = Path(path)
    if not env_path.exists():
        return
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :]
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip()
        if not key or key in os.environ:
            continue
        cleaned = value.strip().strip('"').strip("'")
        os.environ[key] = cleaned


class CookieCloudSettings(BaseSettings):
    """Connection details for the CookieCloud server."""

    model_config = SettingsConfigDict(populate_by_name=True, extra="ignore")

    host: Optional[str] = Field(None, validation_alias="COOKIECLOUD_HOST")
    uuid: Optional[str] = Field(None, validation_alias="COOKIECLOUD_UUID")
    password: Optional[str] = Field(None, validation_alias="COOKIECLOUD_PASSWORD")
    timeout_seconds: float = Field(
        10.0,
        gt=0,
        validation_alias="COOKIECLOUD_TIMEOUT",
        description="Timeout applied to the single GET issued per run.",
    )

    def missing_fields(self) -> list[str]:
        """Return the environment names of required values that are empty."""
        required = {
            "COOKIECLOUD_HOST": self.host,
            "COOKIECLOUD_UUID": self.uuid,
            "COOKIECLOUD_PASSWORD": self.password,
        }
        return [name for name, value in required.items() if not value]


class AppSettings(BaseSettings):
    """Root settings object for the cookie sync command."""

    model_config = SettingsConfigDict(populate_by_name=True, extra="ignore")

    log_level: str = Field("INFO", validation_alias="APP_LOG_LEVEL")
    output_path: Path = Field(
        DEFAULT_OUTPUT_PATH,
        validation_alias="COOKIE_SYNC_OUTPUT_PATH",
        description="File the KaraKeep-formatted cookies are written to.",
    )
    interval_minutes: int = Field(
        30,
        gt=0,
        validation_alias="COOKIE_SYNC_INTERVAL_MINUTES",
        description="Delay between runs in watch mode.",
    )
    cookie_cloud: CookieCloudSettings = Field(default_factory=CookieCloudSettings)


__all__ = [
    "AppSettings",
    "CookieCloudSettings",
    "DEFAULT_ENV_FILE",
    "DEFAULT_OUTPUT_PATH",
    "PROJECT_ROOT",
]
