"""Pytest configuration and shared fixtures."""
from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from webchat.main import app
from webchat.middleware.rate_limit import limiter


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with empty rate-limit counters."""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def client():
    """Return a test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def mock_http() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Return a factory building an AsyncClient whose requests go to `handler`."""
    def _factory(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return _factory
