from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

import uvicorn

from healthcare_portal.app import LOG_FORMAT, create_app
from healthcare_portal.config import load_core_config, resolve_configured_paths
from healthcare_portal.home import ensure_healthcare_layout, resolve_healthcare_home


def main() -> None:
    home = resolve_healthcare_home()
    paths = ensure_healthcare_layout(home)
    config = load_core_config(paths)
    paths = resolve_configured_paths(paths, config)

    logging.basicConfig(
        level=config.logging.level.upper(),
        format=LOG_FORMAT,
        handlers=[
            RotatingFileHandler(
                paths.logs_dir / "core.log",
                maxBytes=config.logging.max_size_mb * 1024 * 1024,
                backupCount=config.logging.backup_count,
                encoding="utf-8",
            ),
            logging.StreamHandler(),
        ],
    )

    host = os.environ.get("HEALTHCARE_BIND") or config.network.bind_host

    env_port = os.environ.get("HEALTHCARE_PORT")
    port = int(env_port) if env_port else config.network.port

    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    main()
