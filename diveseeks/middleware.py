import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response

from .logging_utils import log_api_request


async def log_requests_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Log every HTTP request with its status and processing time."""
    start_time = time.perf_counter()

    response = await call_next(request)

    log_api_request(
        request=request,
        response_status=response.status_code,
        process_time_ms=(time.perf_counter() - start_time) * 1000,
    )

    return response
