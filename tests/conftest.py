"""Pytest configuration for unicache tests."""

import pytest

from tests.fakes import FakeBatchSegmentClient, FakeClock, FakeRedis, FakeSegmentClient


@pytest.fixture
def clock() -> FakeClock:
    """A controllable clock shared by a backend and its fake client."""
    return FakeClock()


@pytest.fixture
def segment_client(clock: FakeClock) -> FakeSegmentClient:
    """A shared segment without native batch calls."""
    return FakeSegmentClient(clock)


@pytest.fixture
def batch_segment_client(clock: FakeClock) -> FakeBatchSegmentClient:
    """A shared segment with native batch calls."""
    return FakeBatchSegmentClient(clock)


@pytest.fixture
def redis_client(clock: FakeClock) -> FakeRedis:
    """An in-process Redis stand-in."""
    return FakeRedis(clock)
