import time
import redis
from fastapi import Request, status
from typing import Callable, Dict, Optional, Union

from app.core.config import settings
from app.core.exceptions import BaseAppError
from app.core.logging import get_logger

logger = get_logger(__name__)

_redis_client: Optional[redis.Redis] = None


def get_redis_client() -> redis.Redis:
    """Shared Redis connection, created on first use."""
    global _redis_client
    if _redis_client is None:
        _redis_client = redis.Redis(
            host=settings.REDIS_HOST,
            port=settings.REDIS_PORT,
            db=settings.REDIS_DB,
            password=settings.REDIS_PASSWORD,
            decode_responses=True,
            socket_timeout=2,
        )
    return _redis_client


class RateLimitExceededError(BaseAppError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    detail = "Too many requests, please try again later."
    code = "RATE_LIMITED"


class RateLimiter:
    """
    Sliding-window rate limiter backed by a Redis sorted set per client.

    Used as a route dependency. Redis failures never block requests.
    """

    def __init__(
        self,
        times: int,
        seconds: int,
        scope: str = "api",
        message: str = None,
        key_func: Optional[Callable[[Request], str]] = None,
        client: Optional[redis.Redis] = None,
    ):
        """
        Args:
            times: Maximum number of requests allowed in the window
            seconds: Window length in seconds
            scope: Prefix that keeps separate limiters from sharing counters
            message: Error message when the limit is hit
            key_func: Extracts the client key from the request (defaults to client IP)
            client: Redis client; the shared connection when omitted
        """
        self.times = times
        self.seconds = seconds
        self.scope = scope
        self.message = message or RateLimitExceededError.detail
        self.key_func = key_func or self._default_key_func
        self._client = client

    @property
    def client(self) -> redis.Redis:
        return self._client or get_redis_client()

    def _default_key_func(self, request: Request) -> str:
        # Behind a proxy, the first forwarded address is the caller
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            client_ip = forwarded.split(",")[0].strip()
        else:
            client_ip = request.client.host if request.client else "unknown"

        return f"rate_limit:{self.scope}:{client_ip}"

    def hit(self, key: str) -> Dict[str, Union[bool, int, float]]:
        """Record one request for ``key`` and report the window state."""
        now = time.time()
        window_start = now - self.seconds

        try:
            self.client.zremrangebyscore(key, 0, window_start)
            current_count = self.client.zcard(key)
            self.client.zadd(key, {str(now): now})
            self.client.expire(key, self.seconds)
        except redis.RedisError as e:
            logger.error(f"Rate limiter Redis error: {e}", extra={"key": key})
            return {
                "limited": False,
                "limit": self.times,
                "remaining": self.times - 1,
                "reset_at": now + self.seconds,
            }

        return {
            "limited": current_count >= self.times,
            "limit": self.times,
            "remaining": max(0, self.times - current_count - 1),
            "reset_at": now + self.seconds,
        }

    def __call__(self, request: Request) -> None:
        if not settings.RATE_LIMIT_ENABLED:
            return

        result = self.hit(self.key_func(request))
        request.state.rate_limit = result

        if result["limited"]:
            reset_in = int(result["reset_at"] - time.time())
            logger.warning(
                "Rate limit exceeded",
                extra={"scope": self.scope, "path": request.url.path, "reset_in": reset_in},
            )
            raise RateLimitExceededError(self.message)


def add_rate_limit_headers(request: Request, response) -> None:
    """Copy the limiter state stored on the request into response headers."""
    rate_limit = getattr(request.state, "rate_limit", None)
    if rate_limit:
        response.headers["X-RateLimit-Limit"] = str(rate_limit.get("limit", 0))
        response.headers["X-RateLimit-Remaining"] = str(rate_limit.get("remaining", 0))
        response.headers["X-RateLimit-Reset"] = str(int(rate_limit.get("reset_at", 0)))


api_limiter = RateLimiter(times=settings.RATE_LIMIT_TIMES, seconds=settings.RATE_LIMIT_SECONDS)
auth_limiter = RateLimiter(
    times=settings.AUTH_RATE_LIMIT_TIMES,
    seconds=settings.RATE_LIMIT_SECONDS,
    scope="auth",
    message="Too many login attempts, please try again later.",
)
