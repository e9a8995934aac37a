"""Pytest configuration and fixtures."""

import json
from collections.abc import Callable

import pytest

from tests.rpc_helpers import WINDOW_MS
from vertinfo.models import EconConf
from vertinfo.rpc.pipeline import RequestPipeline
from vertinfo.rpc.ratelimit import RateLimiter
from vertinfo.testing import FakeClock, FakeStore


@pytest.fixture
def econ_conf() -> EconConf:
    """EconConf with a base fee beyond the 53-bit safe integer range."""
    return EconConf(
        gas_limit_multiplier=(3, 2),
        gas_price_multiplier=(11, 10),
        base_fee=2**64 + 255,
    )


@pytest.fixture
def store(econ_conf) -> FakeStore:
    """Store populated with one chain's data and a burn status."""
    return FakeStore(
        {
            ("econConf", 1): econ_conf,
            ("chains",): [1, 137],
            ("confirmations", 1): {
                "gasLimitMultiplier": [1, 1],
                "gasPriceMultiplier": [2, 1],
                "baseFee": 255,
            },
            ("status", "0xabc"): "confirmed",
        }
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def limiter(clock) -> RateLimiter:
    return RateLimiter(window_ms=WINDOW_MS, clock=clock)


@pytest.fixture
def pipeline(store, limiter) -> RequestPipeline:
    return RequestPipeline(store, limiter)


@pytest.fixture
def call(pipeline, clock) -> Callable:
    """Send a body through the pipeline as a fresh, admitted request.

    Advances the clock past the rate window before each call so tests that
    are not about throttling never hit it.
    """

    async def _call(body: bytes, identity: str = "10.0.0.1"):
        clock.advance(WINDOW_MS)
        reply = await pipeline.handle(body, identity)
        return reply.status_code, json.loads(reply.body)

    return _call
