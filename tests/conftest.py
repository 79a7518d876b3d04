"""Shared fixtures for the solid-d2 test suite."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from core.config import AppSettings


@pytest.fixture
def settings() -> AppSettings:
    """Settings isolated from any .env file on the machine."""
    return AppSettings(
        _env_file=None,
        api_base_url="https://api.test",
        feed_url="https://api.test/feed",
    )


@pytest.fixture
def lenient_settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        api_base_url="https://api.test",
        decode_failure_as_empty=True,
    )


def json_transport(payload: Any, *, status_code: int = 200, seen: list | None = None) -> httpx.MockTransport:
    """MockTransport answering every request with ``payload`` as JSON."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"))

    return httpx.MockTransport(handler)


def raw_transport(body: bytes, *, status_code: int = 200) -> httpx.MockTransport:
    return httpx.MockTransport(lambda request: httpx.Response(status_code, content=body))


def failing_transport() -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return httpx.MockTransport(handler)
