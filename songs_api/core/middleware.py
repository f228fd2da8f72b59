from fastapi import Request
import time
import uuid
import logging
from .errors import error_response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

async def request_logging_middleware(request: Request, call_next):
    """Tag each request with an id, time it and log the outcome.

    Exceptions that escape the handlers end here and are answered with a
    500 ``ErrorResponse``, so every response carries the request headers.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    request.state.request_id = request_id
    start = time.perf_counter()

    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(
            f"Unhandled error on {request.method} {request.url.path}: {str(e)}",
            exc_info=e,
            extra={"request_id": request_id}
        )
        response = error_response(request, 500, "Internal server error")

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code}",
        extra={
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round(elapsed_ms, 2)
        }
    )

    response.headers[REQUEST_ID_HEADER] = request_id
    response.headers["X-Process-Time"] = f"{elapsed_ms:.2f}ms"
    return response
