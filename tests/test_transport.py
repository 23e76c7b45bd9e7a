"""
tests/test_transport.py – Unit tests for the HTTP transports.

No real sockets: RequestsTransport gets a fake requests.Session and
AiohttpTransport gets a fake aiohttp session.  They verify:
  1. Method, URL, JSON body, headers and timeout are forwarded.
  2. The decoded JSON body is returned as-is.
  3. Connection failures become TransportError with the cause chained.
  4. Empty, non-UTF-8 and non-JSON bodies become ProtocolError.
  5. close() is idempotent.
"""

from __future__ import annotations

from typing import Any, Union

import aiohttp
import pytest
import requests

from coinex_sdk.errors import ProtocolError, TransportError
from coinex_sdk.transport import AiohttpTransport, RequestsTransport


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------

def _as_bytes(text: Union[str, bytes]) -> bytes:
    return text if isinstance(text, bytes) else text.encode("utf-8")


class _FakeResponse:
    def __init__(self, text: Union[str, bytes], status_code: int = 200) -> None:
        self.content     = _as_bytes(text)
        self.status_code = status_code


class _FakeSession:
    def __init__(self, text: Union[str, bytes] = '{"code": 0, "message": "", "data": 1}', exc: Exception = None) -> None:
        self._text  = text
        self._exc   = exc
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def request(self, method: str, url: str, **kwargs: Any) -> _FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if self._exc is not None:
            raise self._exc
        return _FakeResponse(self._text)

    def close(self) -> None:
        self.closed = True


class _FakeAiohttpResponse:
    def __init__(self, text: Union[str, bytes], status: int = 200) -> None:
        self._body  = _as_bytes(text)
        self.status = status

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self) -> "_FakeAiohttpResponse":
        return self

    async def __aexit__(self, *_: Any) -> None:
        return None


class _FakeAiohttpSession:
    def __init__(self, text: Union[str, bytes] = '{"code": 0, "data": [1]}', exc: Exception = None) -> None:
        self._text  = text
        self._exc   = exc
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def request(self, method: str, url: str, **kwargs: Any) -> _FakeAiohttpResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if self._exc is not None:
            raise self._exc
        return _FakeAiohttpResponse(self._text)

    async def close(self) -> None:
        self.closed = True


# ---------------------------------------------------------------------------
# RequestsTransport
# ---------------------------------------------------------------------------

class TestRequestsTransport:
    def test_forwards_request(self) -> None:
        session   = _FakeSession()
        transport = RequestsTransport(timeout=3.0, session=session)
        result = transport.request("post", "https://x/p", body={"a": "1"}, headers={"authorization": "SIG"})

        assert result == {"code": 0, "message": "", "data": 1}
        call = session.calls[0]
        assert call["method"] == "POST"
        assert call["url"] == "https://x/p"
        assert call["json"] == {"a": "1"}
        assert call["headers"] == {"authorization": "SIG"}
        assert call["timeout"] == 3.0

    def test_unsigned_sends_no_headers(self) -> None:
        session = _FakeSession()
        RequestsTransport(session=session).request("GET", "https://x/p")
        assert session.calls[0]["headers"] is None
        assert session.calls[0]["json"] is None

    def test_connection_error(self) -> None:
        cause   = requests.ConnectionError("refused")
        session = _FakeSession(exc=cause)
        with pytest.raises(TransportError) as exc_info:
            RequestsTransport(session=session).request("GET", "https://x/p")
        assert exc_info.value.__cause__ is cause
        assert exc_info.value.method == "GET"
        assert exc_info.value.url == "https://x/p"

    def test_timeout(self) -> None:
        session = _FakeSession(exc=requests.Timeout("slow"))
        with pytest.raises(TransportError, match="slow"):
            RequestsTransport(session=session).request("GET", "https://x/p")

    @pytest.mark.parametrize("text", ["", "   ", "<html>502 Bad Gateway</html>"])
    def test_bad_body(self, text: str) -> None:
        with pytest.raises(ProtocolError):
            RequestsTransport(session=_FakeSession(text=text)).request("GET", "https://x/p")

    def test_non_utf8_body(self) -> None:
        session = _FakeSession(text=b'{"code": 0, "data": "\xff\xfe"}')
        with pytest.raises(ProtocolError, match="Undecodable"):
            RequestsTransport(session=session).request("GET", "https://x/p")

    def test_close_idempotent(self) -> None:
        session   = _FakeSession()
        transport = RequestsTransport(session=session)
        transport.close()
        transport.close()
        assert session.closed is True

    def test_lazy_session(self) -> None:
        transport = RequestsTransport()
        assert transport._session is None
        assert isinstance(transport._get_session(), requests.Session)
        transport.close()


# ---------------------------------------------------------------------------
# AiohttpTransport
# ---------------------------------------------------------------------------

class TestAiohttpTransport:
    @pytest.mark.asyncio
    async def test_forwards_request(self) -> None:
        session   = _FakeAiohttpSession()
        transport = AiohttpTransport(timeout=2.0)
        transport._session = session

        result = await transport.request("delete", "https://x/p?a=1", headers={"authorization": "SIG"})

        assert result == {"code": 0, "data": [1]}
        call = session.calls[0]
        assert call["method"] == "DELETE"
        assert call["json"] is None
        assert call["headers"] == {"authorization": "SIG"}
        assert call["timeout"].total == 2.0

    @pytest.mark.asyncio
    async def test_client_error(self) -> None:
        cause     = aiohttp.ClientConnectionError("refused")
        transport = AiohttpTransport()
        transport._session = _FakeAiohttpSession(exc=cause)
        with pytest.raises(TransportError) as exc_info:
            await transport.request("GET", "https://x/p")
        assert exc_info.value.__cause__ is cause

    @pytest.mark.asyncio
    async def test_bad_body(self) -> None:
        transport = AiohttpTransport()
        transport._session = _FakeAiohttpSession(text="not json")
        with pytest.raises(ProtocolError):
            await transport.request("GET", "https://x/p")

    @pytest.mark.asyncio
    async def test_non_utf8_body(self) -> None:
        transport = AiohttpTransport()
        transport._session = _FakeAiohttpSession(text=b'{"code": 0, "data": "\xff\xfe"}')
        with pytest.raises(ProtocolError, match="Undecodable") as exc_info:
            await transport.request("GET", "https://x/p")
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    @pytest.mark.asyncio
    async def test_close(self) -> None:
        session   = _FakeAiohttpSession()
        transport = AiohttpTransport()
        transport._session = session
        await transport.close()
        await transport.close()
        assert session.closed is True
        assert transport._session is None
