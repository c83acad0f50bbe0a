"""Shared pytest fixtures for search client tests."""

from __future__ import annotations

from typing import Awaitable, Callable

import httpx
import pytest
import structlog

Handler = Callable[[httpx.Request], Awaitable[httpx.Response]]


@pytest.fixture(autouse=True)
def _silence_structlog():
    # Loggers must stay uncached so capture_logs() and later tests see fresh config.
    structlog.configure(
        logger_factory=structlog.ReturnLoggerFactory(),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        async def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return await handler(request)

        super().__init__(_record)


@pytest.fixture
def make_transport():
    return RecordingTransport
