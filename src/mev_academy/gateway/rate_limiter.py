"""
Token bucket rate limiting.

Throttles outbound explorer requests to the provider's per-second budget
and enforces the per-client request allowance of the public API.
"""

import asyncio
import time
from dataclasses import dataclass, field


@dataclass
class TokenBucket:
    """
    Token bucket implementation for rate limiting.

    Tokens are added at a constant rate up to a maximum capacity.
    Each request consumes one or more tokens.
    """

    capacity: int
    refill_rate: float  # tokens per second
    tokens: float = field(init=False)
    last_refill: float = field(init=False)  # monotonic seconds
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)

    def __post_init__(self) -> None:
        """Initialize with full bucket."""
        self.tokens = float(self.capacity)
        self.last_refill = time.monotonic()

    def _refill(self) -> None:
        """Add tokens based on elapsed time."""
        now = time.monotonic()
        elapsed = now - self.last_refill
        self.tokens = min(self.capacity, self.tokens + elapsed * self.refill_rate)
        self.last_refill = now

    @property
    def full(self) -> bool:
        """True once the bucket has refilled to capacity."""
        self._refill()
        return self.tokens >= self.capacity

    async def acquire(self, tokens: int = 1) -> None:
        """
        Acquire tokens, waiting if necessary.

        Args:
            tokens: Number of tokens to acquire.
        """
        async with self._lock:
            self._refill()

            if self.tokens < tokens:
                wait_seconds = (tokens - self.tokens) / self.refill_rate
                await asyncio.sleep(wait_seconds)
                self._refill()

            self.tokens -= tokens

    async def try_acquire(self, tokens: int = 1) -> bool:
        """
        Try to acquire tokens without waiting.

        Args:
            tokens: Number of tokens to acquire.

        Returns:
            True if tokens were acquired, False if not enough available.
        """
        async with self._lock:
            self._refill()

            if self.tokens >= tokens:
                self.tokens -= tokens
                return True
            return False


class ClientRateLimiter:
    """
    Per-client request allowance.

    Each client key (usually the remote address) gets its own bucket
    holding ``max_requests`` tokens that refill evenly over ``window_seconds``.
    Buckets that have refilled to capacity are evicted on a periodic sweep;
    a full bucket behaves the same as a fresh one.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        sweep_interval: float | None = None,
    ) -> None:
        """
        Initialize limiter.

        Args:
            max_requests: Requests allowed per window.
            window_seconds: Length of the window in seconds.
            sweep_interval: Seconds between idle-bucket sweeps, defaults to the window.
        """
        self._max_requests = max_requests
        self._refill_rate = max_requests / window_seconds
        self._sweep_interval = window_seconds if sweep_interval is None else sweep_interval
        self._last_sweep = time.monotonic()
        self._buckets: dict[str, TokenBucket] = {}

    def _evict_idle(self) -> None:
        now = time.monotonic()
        if now - self._last_sweep < self._sweep_interval:
            return
        self._last_sweep = now
        for client, bucket in list(self._buckets.items()):
            if bucket.full:
                del self._buckets[client]

    async def allow(self, client: str) -> bool:
        """Consume one request for ``client``; False when it is over its allowance."""
        self._evict_idle()
        bucket = self._buckets.get(client)
        if bucket is None:
            bucket = TokenBucket(capacity=self._max_requests, refill_rate=self._refill_rate)
            self._buckets[client] = bucket
        return await bucket.try_acquire(1)

    @property
    def tracked_clients(self) -> int:
        return len(self._buckets)
