"""
Request Timeout Middleware

Bounds the time a single request may take to be read and answered
(READ_TIMEOUT + WRITE_TIMEOUT). Handling is cancelled once the budget is
spent; if no response has started yet the caller gets a plain-text 503.
Keep-alive idle connections are bounded separately by uvicorn.
"""

import asyncio
import logging

from fastapi.responses import PlainTextResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from shortener.core.exceptions import RequestTimeoutError

logger = logging.getLogger(__name__)


class TimeoutMiddleware:
    """Pure ASGI middleware so the downstream app is cancelled, not orphaned."""

    def __init__(self, app: ASGIApp, timeout: float) -> None:
        self.app = app
        self.timeout = timeout

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(self.app(scope, receive, send_wrapper), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning("%s %s exceeded %.1fs", scope["method"], scope["path"], self.timeout)
            if response_started:
                return
            error = RequestTimeoutError()
            response = PlainTextResponse(error.message, status_code=error.status_code)
            await response(scope, receive, send)


def add_timeout_middleware(app, timeout: float):
    app.add_middleware(TimeoutMiddleware, timeout=timeout)
