"""
tests/conftest.py – Shared fixtures and the --integration flag.

StubTransport / AsyncStubTransport stand in for the HTTP layer: they
record every request and answer with a canned decoded JSON body, so the
whole request pipeline runs offline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import pytest


FIXED_TONCE = 1_700_000_000_000


# ---------------------------------------------------------------------------
# pytest plugin: --integration flag + skip logic
# ---------------------------------------------------------------------------

def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="Run integration tests against the live CoinEx API",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as a live-network integration test (use --integration to run)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    if config.getoption("--integration"):
        return
    skip_integration = pytest.mark.skip(reason="pass --integration to run against CoinEx")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


# ---------------------------------------------------------------------------
# Stub transports
# ---------------------------------------------------------------------------

@dataclass
class RecordedRequest:
    method:  str
    url:     str
    body:    Optional[dict]
    headers: Optional[dict[str, str]]


@dataclass
class StubTransport:
    """Sync transport returning ``response`` for every call."""
    response: Any = field(default_factory=lambda: {"code": 0, "message": "Ok", "data": None})
    requests: list[RecordedRequest] = field(default_factory=list)
    closed:   bool = False

    def request(
        self,
        method: str,
        url: str,
        *,
        body: Optional[dict] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        self.requests.append(RecordedRequest(method, url, body, headers))
        return self.response

    def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]


@dataclass
class AsyncStubTransport:
    """Async transport returning ``response`` for every call."""
    response: Any = field(default_factory=lambda: {"code": 0, "message": "Ok", "data": None})
    requests: list[RecordedRequest] = field(default_factory=list)
    closed:   bool = False

    async def request(
        self,
        method: str,
        url: str,
        *,
        body: Optional[dict] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        self.requests.append(RecordedRequest(method, url, body, headers))
        return self.response

    async def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]


def ok(data: Any) -> dict:
    """Successful CoinEx envelope around ``data``."""
    return {"code": 0, "message": "Ok", "data": data}

