"""Request-scoped logging context."""

import time
import uuid

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from seasonteams import bind_context, clear_context, get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "x-request-id"


class RequestContextMiddleware:
    """Bind request_id/method/path to every log entry of a request.

    The request id is taken from the incoming X-Request-ID header when present
    and echoed back on the response.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers") or [])
        request_id = headers.get(REQUEST_ID_HEADER.encode(), b"").decode() or str(uuid.uuid4())
        status_code = 500
        started = time.perf_counter()

        async def send_with_request_id(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
                message.setdefault("headers", [])
                message["headers"] = [
                    *message["headers"],
                    (REQUEST_ID_HEADER.encode(), request_id.encode()),
                ]
            await send(message)

        clear_context()
        bind_context(request_id=request_id, method=scope["method"], path=scope["path"])
        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            logger.info(
                "request_finished",
                status_code=status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            clear_context()
