from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from healthcare_portal.home import HealthcarePaths


class NetworkConfig(BaseModel):
    bind_host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080, ge=1, le=65535)


class PageConfig(BaseModel):
    route: str = Field(default="/", description="Path the dashboard page is served on")

    @field_validator("route")
    @classmethod
    def _route_is_absolute(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("route must start with '/'")
        return value


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    max_size_mb: int = Field(
        default=10, ge=1, description="Max size of a log file in MB before rolling."
    )
    backup_count: int = Field(default=5, ge=1, description="Number of log archives to keep.")


class PathOverrides(BaseModel):
    logs_dir: str | None = None


class CoreConfig(BaseModel):
    version: str = Field(default="1")
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    page: PageConfig = Field(default_factory=PageConfig)
    paths: PathOverrides = Field(default_factory=PathOverrides)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _read_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_core_config(paths: HealthcarePaths) -> CoreConfig:
    """Load config from ${HEALTHCARE_HOME}/config/core.json.

    - If missing: returns defaults.
    - Validation is performed by Pydantic.
    """

    config_path = paths.core_config_path
    if not config_path.exists():
        return CoreConfig()

    return CoreConfig.model_validate(_read_json(config_path))


def write_core_config(paths: HealthcarePaths, config: CoreConfig) -> None:
    """Persist config to ${HEALTHCARE_HOME}/config/core.json."""

    payload = config.model_dump(mode="json", exclude_none=True)
    paths.config_dir.mkdir(parents=True, exist_ok=True)
    paths.core_config_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")


def resolve_configured_paths(paths: HealthcarePaths, config: CoreConfig) -> HealthcarePaths:
    """Apply the logs_dir override from config; config/ stays under home."""

    raw = config.paths.logs_dir
    if raw is None or not raw.strip():
        return paths

    logs_dir = Path(raw).expanduser()
    if not logs_dir.is_absolute():
        logs_dir = paths.home / logs_dir
    logs_dir = logs_dir.resolve()
    logs_dir.mkdir(parents=True, exist_ok=True)

    return HealthcarePaths(home=paths.home, logs_dir=logs_dir, config_dir=paths.config_dir)
