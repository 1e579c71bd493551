"""
Unit tests for token bucket rate limiting.
"""

import asyncio

import pytest

from mev_academy.gateway.rate_limiter import ClientRateLimiter, TokenBucket


class TestTokenBucket:
    @pytest.mark.asyncio
    async def test_starts_full(self) -> None:
        bucket = TokenBucket(capacity=3, refill_rate=0.001)

        assert await bucket.try_acquire() is True
        assert await bucket.try_acquire() is True
        assert await bucket.try_acquire() is True
        assert await bucket.try_acquire() is False

    @pytest.mark.asyncio
    async def test_acquire_waits_for_refill(self) -> None:
        bucket = TokenBucket(capacity=1, refill_rate=1000.0)

        await bucket.acquire()
        await bucket.acquire()

        assert bucket.tokens < 1

    @pytest.mark.asyncio
    async def test_multi_token_request(self) -> None:
        bucket = TokenBucket(capacity=5, refill_rate=0.001)

        assert await bucket.try_acquire(4) is True
        assert await bucket.try_acquire(4) is False


class TestClientRateLimiter:
    @pytest.mark.asyncio
    async def test_allowance_per_client(self) -> None:
        limiter = ClientRateLimiter(max_requests=2, window_seconds=900)

        assert await limiter.allow("10.0.0.1") is True
        assert await limiter.allow("10.0.0.1") is True
        assert await limiter.allow("10.0.0.1") is False
        assert await limiter.allow("10.0.0.2") is True
        assert limiter.tracked_clients == 2

    @pytest.mark.asyncio
    async def test_idle_client_evicted(self) -> None:
        limiter = ClientRateLimiter(max_requests=2, window_seconds=0.01)

        await limiter.allow("10.0.0.1")
        assert limiter.tracked_clients == 1

        await asyncio.sleep(0.05)
        await limiter.allow("10.0.0.2")

        assert limiter.tracked_clients == 1

    @pytest.mark.asyncio
    async def test_active_client_kept(self) -> None:
        limiter = ClientRateLimiter(max_requests=2, window_seconds=900, sweep_interval=0)

        await limiter.allow("10.0.0.1")
        await limiter.allow("10.0.0.2")

        assert limiter.tracked_clients == 2

    @pytest.mark.asyncio
    async def test_many_one_shot_clients_released(self) -> None:
        limiter = ClientRateLimiter(max_requests=1, window_seconds=0.01)

        for i in range(1000):
            await limiter.allow(f"10.0.{i // 256}.{i % 256}")
        await asyncio.sleep(0.05)
        await limiter.allow("10.9.9.9")

        assert limiter.tracked_clients == 1
