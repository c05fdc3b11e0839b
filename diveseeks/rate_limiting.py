"""In-memory request throttling for the DiveSeeks API."""

import time

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from .config import AppConfig
from .logging_config import get_logger
from .request_utils import get_client_ip, is_api_request

logger = get_logger(__name__)


class RateLimiter:
    """Per-IP sliding window limiter: ``limit`` requests every ``ttl_seconds``."""

    def __init__(self, ttl_seconds: int, limit: int):
        self.ttl_seconds = ttl_seconds
        self.limit = limit
        # Store request timestamps for each IP
        self._requests: dict[str, list[float]] = {}
        # Flag to disable rate limiting (for testing)
        self._enabled: bool = True

    @classmethod
    def from_config(cls, config: AppConfig) -> "RateLimiter":
        return cls(ttl_seconds=config.throttle_ttl, limit=config.throttle_limit)

    def disable(self) -> None:
        """Disable rate limiting (for testing)."""
        self._enabled = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def tracked_ips(self) -> int:
        """Number of clients with requests inside the current window."""
        return len(self._requests)

    def reset(self) -> None:
        """Reset all rate limiting data."""
        self._requests.clear()

    def get_request_count(self, ip: str) -> int:
        """Get current request count for an IP."""
        self._clean_old_requests(ip)
        return len(self._requests.get(ip, []))

    def add_request_timestamp(self, ip: str, timestamp: float) -> None:
        """Add a request timestamp for testing purposes."""
        self._requests.setdefault(ip, []).append(timestamp)

    def get_rate_limit_info(self, request: Request) -> tuple[int, int, int]:
        """Get rate limit information for a request.

        Args:
            request: FastAPI request object

        Returns:
            Tuple of (limit, remaining, reset_time)
        """
        client_ip = get_client_ip(request)

        self._clean_old_requests(client_ip)
        timestamps = self._requests.get(client_ip, [])
        remaining = max(0, self.limit - len(timestamps))
        window_start = timestamps[0] if timestamps else time.time()
        reset_time = int(window_start + self.ttl_seconds)

        return self.limit, remaining, reset_time

    def _clean_old_requests(self, ip: str) -> None:
        """Remove requests older than the time window."""
        cutoff_time = time.time() - self.ttl_seconds
        recent = [t for t in self._requests.get(ip, []) if t > cutoff_time]
        if recent:
            self._requests[ip] = recent
        else:
            # Forget clients whose window has emptied
            self._requests.pop(ip, None)

    def check_rate_limit(self, request: Request) -> None:
        """Record the request, or raise 429 if the client's window is full."""
        if not self._enabled:
            return

        client_ip = get_client_ip(request)

        self._clean_old_requests(client_ip)
        timestamps = self._requests.get(client_ip, [])
        current_requests = len(timestamps)

        if current_requests >= self.limit:
            retry_after = max(1, int(timestamps[0] + self.ttl_seconds - time.time()))
            logger.warning(
                "Rate limit exceeded",
                client_ip=client_ip,
                limit=self.limit,
                ttl_seconds=self.ttl_seconds,
            )
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail={
                    "error": "Rate limit exceeded",
                    "limit": self.limit,
                    "ttl": self.ttl_seconds,
                    "retry_after": retry_after,
                    "current_requests": current_requests,
                },
                headers={"Retry-After": str(retry_after)},
            )

        self._requests.setdefault(client_ip, []).append(time.time())


async def rate_limit_middleware(request: Request, call_next):
    """Rate limiting middleware using the limiter stored on the app state."""
    rate_limiter: RateLimiter = request.app.state.rate_limiter

    # Only apply rate limiting to API endpoints
    if is_api_request(request):
        try:
            rate_limiter.check_rate_limit(request)
        except HTTPException as e:
            return JSONResponse(
                status_code=e.status_code,
                content=e.detail,
                headers=e.headers or {},
            )

    response = await call_next(request)

    if is_api_request(request):
        limit, remaining, reset_time = rate_limiter.get_rate_limit_info(request)

        response.headers["X-RateLimit-Limit"] = str(limit)
        response.headers["X-RateLimit-Remaining"] = str(remaining)
        response.headers["X-RateLimit-Reset"] = str(reset_time)

    return response
