from __future__ import annotations

import logging
from typing import Final

from starlette.requests import Request
from starlette.responses import Response
from starlette.types import Receive, Scope, Send

from healthcare_portal.page import CONTENT_TYPE, DASHBOARD_BYTES

logger = logging.getLogger(__name__)

HANDLER_INFO: Final[str] = "Healthcare Management System Servlet v1.0"


class ResponseWriterClosed(RuntimeError):
    pass


class ResponseWriter:
    """Output stream for one response body, backed by an ASGI ``send`` callable.

    Once the writer has been closed it refuses further writes. A failed ``send``
    marks the writer as failed so that ``close`` does not touch the transport again.
    """

    def __init__(self, send: Send) -> None:
        self._send = send
        self._failed = False
        self.closed = False

    async def write(self, data: bytes) -> None:
        if self.closed:
            raise ResponseWriterClosed("Response writer is closed")
        try:
            await self._send({"type": "http.response.body", "body": data, "more_body": True})
        except BaseException:
            self._failed = True
            raise

    async def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        if self._failed:
            return
        await self._send({"type": "http.response.body", "body": b"", "more_body": False})


class PageResponse(Response):
    """Starlette response whose body is streamed through StaticPageHandler.write_page."""

    def __init__(self, handler: StaticPageHandler) -> None:
        super().__init__(
            content=DASHBOARD_BYTES,
            status_code=handler.status_code,
            media_type=handler.media_type,
        )
        self._handler = handler

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await send(
            {
                "type": "http.response.start",
                "status": self.status_code,
                "headers": self.raw_headers,
            }
        )
        await self._handler.write_page(ResponseWriter(send))

        if self.background is not None:
            await self.background()


class StaticPageHandler:
    """Serves the constant dashboard document.

    Holds no mutable state; a single instance is shared by all requests.
    """

    status_code: int = 200
    media_type: str = CONTENT_TYPE

    def handle_get(self, request: Request) -> Response:
        # Nothing from the request influences the page.
        return PageResponse(self)

    async def write_page(self, writer: ResponseWriter) -> None:
        try:
            await writer.write(DASHBOARD_BYTES)
        except OSError:
            logger.warning("Transport failed while writing the dashboard page")
            raise
        finally:
            await writer.close()

    def get_metadata(self) -> str:
        return HANDLER_INFO
