"""Per-client request limits: in-process by default, Redis when configured."""

from __future__ import annotations

import logging
import math
import os
import threading
import time
from collections import deque
from dataclasses import dataclass

import redis

from journey.security.redact import redact_sensitive

_logger = logging.getLogger("journey-ai.rate-limit")
_KEY_PREFIX = "journey-ai:ratelimit:"


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    limit: int
    remaining: int
    retry_after: int = 0

    def headers(self) -> dict[str, str]:
        values = {
            "X-RateLimit-Limit": str(self.limit),
            "X-RateLimit-Remaining": str(self.remaining),
        }
        if not self.allowed:
            values["Retry-After"] = str(self.retry_after)
        return values


class InMemoryRateLimiter:
    """Sliding window over the last ``window_seconds``; one process only."""

    backend = "memory"

    def __init__(self, max_requests: int, window_seconds: int):
        self.limit = max(1, int(max_requests))
        self.window = max(1, int(window_seconds))
        self._hits: dict[str, deque[float]] = {}
        self._lock = threading.Lock()
        self._last_sweep = 0.0

    def _sweep(self, now: float) -> None:
        if now - self._last_sweep < self.window:
            return
        self._last_sweep = now
        stale = [cid for cid, hits in self._hits.items() if not hits or now - hits[-1] >= self.window]
        for cid in stale:
            del self._hits[cid]

    def tracked_clients(self) -> int:
        with self._lock:
            return len(self._hits)

    def check(self, client_id: str) -> RateLimitDecision:
        now = time.time()
        with self._lock:
            self._sweep(now)
            hits = self._hits.setdefault(client_id, deque())
            while hits and now - hits[0] >= self.window:
                hits.popleft()
            if len(hits) >= self.limit:
                wait = math.ceil(self.window - (now - hits[0]))
                return RateLimitDecision(False, self.limit, 0, max(1, wait))
            hits.append(now)
            return RateLimitDecision(True, self.limit, self.limit - len(hits))

    def allow(self, client_id: str) -> bool:
        return self.check(client_id).allowed

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()
            self._last_sweep = 0.0


class RedisRateLimiter:
    """Fixed window counters shared by every API instance."""

    backend = "redis"

    def __init__(self, redis_url: str, max_requests: int, window_seconds: int):
        self.limit = max(1, int(max_requests))
        self.window = max(1, int(window_seconds))
        self._redis = redis.Redis.from_url(redis_url, decode_responses=True)
        self._redis.ping()

    def check(self, client_id: str) -> RateLimitDecision:
        now = int(time.time())
        window_start = now - now % self.window
        key = f"{_KEY_PREFIX}{client_id}:{window_start}"

        count = int(self._redis.incr(key))
        if count == 1:
            self._redis.expire(key, self.window + 1)

        if count > self.limit:
            return RateLimitDecision(False, self.limit, 0, max(1, window_start + self.window - now))
        return RateLimitDecision(True, self.limit, self.limit - count)

    def allow(self, client_id: str) -> bool:
        return self.check(client_id).allowed

    def reset(self) -> None:
        for key in self._redis.scan_iter(f"{_KEY_PREFIX}*"):
            self._redis.delete(key)


def get_rate_limiter(max_requests: int, window_seconds: int):
    """Redis limiter when RATE_LIMIT_REDIS_URL or REDIS_URL is set and reachable."""
    url = os.getenv("RATE_LIMIT_REDIS_URL") or os.getenv("REDIS_URL")
    if not url:
        return InMemoryRateLimiter(max_requests, window_seconds)
    try:
        limiter = RedisRateLimiter(url, max_requests, window_seconds)
    except redis.RedisError as exc:
        _logger.warning("Redis unavailable for rate limiting, using memory: %s", redact_sensitive(str(exc)))
        return InMemoryRateLimiter(max_requests, window_seconds)
    _logger.info("Rate limiting backed by Redis")
    return limiter


__all__ = ["InMemoryRateLimiter", "RateLimitDecision", "RedisRateLimiter", "get_rate_limiter"]
