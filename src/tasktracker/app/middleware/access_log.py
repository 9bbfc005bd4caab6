import time
import uuid
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("tasktracker.access")


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id
        fields = {
            "category": "http",
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
        }
        start = time.perf_counter()

        logger.info(
            "request.start",
            extra={
                **fields,
                "event": "request.start",
                "query": str(request.url.query),
                "client": request.client.host if request.client else None,
            },
        )

        try:
            response: Response = await call_next(request)
        except Exception:
            logger.exception(
                "request.error",
                extra={**fields, "event": "request.error", "duration_ms": _elapsed_ms(start)},
            )
            raise

        response.headers["X-Request-ID"] = request_id
        logger.info(
            "request.end",
            extra={
                **fields,
                "event": "request.end",
                "status_code": response.status_code,
                "duration_ms": _elapsed_ms(start),
            },
        )
        return response
