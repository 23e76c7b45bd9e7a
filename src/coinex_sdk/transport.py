"""
transport.py – HTTP transports used by the CoinEx REST clients.

A transport performs one HTTP round trip and returns the decoded JSON
body.  It does not look at the CoinEx envelope; rest.py does that.

  RequestsTransport : synchronous, requests.Session
  AiohttpTransport  : asynchronous, aiohttp.ClientSession (lazy import)

Any object with the same ``request`` signature can be passed to a client,
which is how the tests substitute an in-memory stub.

Failures
--------
  connection / timeout errors → TransportError (original exception chained)
  empty or non-JSON body      → ProtocolError

HTTP status codes are deliberately not interpreted: CoinEx reports
failures through the envelope ``code``.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Optional, Protocol, Union

import requests

from .errors import ProtocolError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 10.0


class HttpClient(Protocol):
    """Synchronous transport capability."""

    def request(
        self,
        method: str,
        url: str,
        *,
        body: Optional[dict] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any: ...

    def close(self) -> None: ...


class AsyncHttpClient(Protocol):
    """Asynchronous transport capability."""

    async def request(
        self,
        method: str,
        url: str,
        *,
        body: Optional[dict] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any: ...

    async def close(self) -> None: ...


def _decode(raw: Union[str, bytes], method: str, url: str) -> Any:
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ProtocolError(
                f"Undecodable response body from {method.upper()} {url}: {raw[:200]!r}"
            ) from exc
    if not raw or not raw.strip():
        raise ProtocolError(f"Empty response body from {method.upper()} {url}")
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise ProtocolError(
            f"Undecodable response body from {method.upper()} {url}: {raw[:200]}"
        ) from exc


# ---------------------------------------------------------------------------
# Synchronous transport
# ---------------------------------------------------------------------------

class RequestsTransport:
    """
    requests-based transport.

    Parameters
    ----------
    timeout : HTTP timeout in seconds
    session : optional pre-configured requests.Session
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._timeout = timeout
        self._session = session

    def _get_session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def request(
        self,
        method: str,
        url: str,
        *,
        body: Optional[dict] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        session = self._get_session()
        try:
            resp = session.request(
                method.upper(), url,
                json=body,
                headers=headers,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(str(exc), method=method, url=url) from exc

        logger.debug("%s %s -> HTTP %d", method.upper(), url, resp.status_code)
        return _decode(resp.content, method, url)

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None


# ---------------------------------------------------------------------------
# Async transport
# ---------------------------------------------------------------------------

class AiohttpTransport:
    """
    aiohttp-based transport.

    The ClientSession is created on first use so the transport can be
    constructed outside a running event loop.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT_S) -> None:
        self._timeout = timeout
        self._session: Any = None   # aiohttp.ClientSession, created on first use

    async def request(
        self,
        method: str,
        url: str,
        *,
        body: Optional[dict] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        import aiohttp

        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()

        try:
            async with self._session.request(
                method.upper(), url,
                json=body,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            ) as resp:
                raw    = await resp.read()
                status = resp.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(str(exc) or type(exc).__name__, method=method, url=url) from exc

        logger.debug("%s %s -> HTTP %d", method.upper(), url, status)
        return _decode(raw, method, url)

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
