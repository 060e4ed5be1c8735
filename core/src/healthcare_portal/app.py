from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from healthcare_portal import __version__
from healthcare_portal.api.models import ApiResponse, HandlerInfo, fail, ok
from healthcare_portal.config import CoreConfig, load_core_config, resolve_configured_paths
from healthcare_portal.handler import StaticPageHandler
from healthcare_portal.home import HealthcarePaths, ensure_healthcare_layout, resolve_healthcare_home

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_file_logging(paths: HealthcarePaths, config: CoreConfig) -> None:
    file_handler = RotatingFileHandler(
        paths.logs_dir / "core.log",
        maxBytes=config.logging.max_size_mb * 1024 * 1024,
        backupCount=config.logging.backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.setLevel(config.logging.level.upper())
    # Avoid adding duplicate handlers if reloaded
    if not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
        root.addHandler(file_handler)
    else:
        file_handler.close()


def _status_to_code(status_code: int) -> str:
    if status_code == 404:
        return "not_found"
    if status_code == 405:
        return "method_not_allowed"
    if status_code == 422:
        return "validation_error"
    if 400 <= status_code < 500:
        return "client_error"
    return "server_error"


def create_app(handler: StaticPageHandler | None = None) -> FastAPI:
    page_handler = handler or StaticPageHandler()

    # The route must be known before startup, so config is read here as well.
    home = resolve_healthcare_home()
    paths = ensure_healthcare_layout(home)
    config = load_core_config(paths)

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        resolved = resolve_configured_paths(paths, config)
        configure_file_logging(resolved, config)

        logger.info("%s starting up", page_handler.get_metadata())
        logger.info("Serving dashboard on %s", config.page.route)
        logger.info("Logs directory: %s", resolved.logs_dir)

        app.state.healthcare_home = home
        app.state.healthcare_paths = resolved
        app.state.healthcare_config = config
        app.state.page_handler = page_handler

        yield

        logger.info("%s shutting down", page_handler.get_metadata())

    app = FastAPI(title="Healthcare Portal Core", version=__version__, lifespan=_lifespan)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} - {response.status_code}")
        return response

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=fail(
                code="validation_error",
                message="Request validation failed",
                details=exc.errors(),
            ).model_dump(mode="json"),
        )

    @app.exception_handler(HTTPException)
    async def _http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=fail(
                code=_status_to_code(exc.status_code),
                message=str(exc.detail),
            ).model_dump(mode="json"),
            headers=exc.headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def _starlette_http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=fail(
                code=_status_to_code(exc.status_code),
                message=exc.detail if isinstance(exc.detail, str) else "HTTP error",
            ).model_dump(mode="json"),
            headers=exc.headers,
        )

    # Transport failures while the page body is written are not handled here;
    # they reach the ASGI server unchanged.
    @app.get(config.page.route, include_in_schema=False)
    async def dashboard(request: Request) -> Response:
        return page_handler.handle_get(request)

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/info")
    async def info() -> ApiResponse[HandlerInfo]:
        return ok(
            HandlerInfo(
                name=app.title,
                version=__version__,
                metadata=page_handler.get_metadata(),
            )
        )

    return app
