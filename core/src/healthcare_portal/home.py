from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class HealthcarePaths:
    home: Path
    logs_dir: Path
    config_dir: Path

    @property
    def core_config_path(self) -> Path:
        return self.config_dir / "core.json"


def resolve_healthcare_home(environ: dict[str, str] | None = None) -> Path:
    env = os.environ if environ is None else environ

    raw = (env.get("HEALTHCARE_HOME") or "").strip()
    if raw:
        candidate = Path(raw).expanduser()
        # Relative values are anchored at the user home, never the CWD.
        if not candidate.is_absolute():
            candidate = Path.home() / candidate
        return candidate.resolve()

    if sys.platform.startswith("win"):
        base = env.get("LOCALAPPDATA") or env.get("APPDATA")
        if base:
            return (Path(base) / "HealthcarePortal").resolve()
        return (Path.home() / "AppData" / "Local" / "HealthcarePortal").resolve()

    if sys.platform == "darwin":
        return (Path.home() / "Library" / "Application Support" / "HealthcarePortal").resolve()

    xdg = env.get("XDG_DATA_HOME")
    if xdg:
        return (Path(xdg) / "healthcare-portal").resolve()
    return (Path.home() / ".local" / "share" / "healthcare-portal").resolve()


def ensure_healthcare_layout(home: Path) -> HealthcarePaths:
    home.mkdir(parents=True, exist_ok=True)

    logs_dir = home / "logs"
    config_dir = home / "config"
    for path in (logs_dir, config_dir):
        path.mkdir(parents=True, exist_ok=True)

    return HealthcarePaths(home=home, logs_dir=logs_dir, config_dir=config_dir)
