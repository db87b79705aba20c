import time

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from todo_core.errors import StoreError
from todo_core.services.log_service import LogService

UNKNOWN_USER_AGENT = "unknown"


class RequestLogMiddleware(BaseHTTPMiddleware):
    """
    Record one log entry per request.

    Usage::

        app.add_middleware(RequestLogMiddleware, sink=LogService())

    A failed log write is reported through the logger and never alters the
    response.
    """

    def __init__(self, app, sink: LogService):
        super().__init__(app)
        self.sink = sink

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        try:
            return await call_next(request)
        finally:
            # failed requests are logged too
            await self._record(request, started)

    async def _record(self, request, started):
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        user_agent = request.headers.get("user-agent") or UNKNOWN_USER_AGENT
        try:
            await self.sink.record(user_agent=user_agent, response_time=elapsed_ms)
        except (StoreError, SQLAlchemyError, OSError) as err:
            logger.exception("request log write failed: {}", err)
