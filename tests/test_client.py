"""
tests/test_client.py – Unit tests for the CoinExClient unified façade.

All tests run offline – no real network connections are made.
They verify:
  1. CoinExClient constructs an async REST client sharing its auth.
  2. from_file / from_env build configured clients.
  3. Options are forwarded to the REST client.
  4. The async context manager calls close().
"""

from __future__ import annotations

import json

import pytest

from coinex_sdk import CoinExClient, ConfigurationError, SigningOrder
from coinex_sdk.auth import ENV_API_KEY, ENV_API_SECRET
from coinex_sdk.rest import AsyncCoinExRestClient
from coinex_sdk.transport import DEFAULT_TIMEOUT_S

from conftest import AsyncStubTransport, ok


class TestCoinExClientConstruction:
    def test_rest_is_async_client(self) -> None:
        client = CoinExClient(api_key="K", api_secret="S")
        assert isinstance(client.rest, AsyncCoinExRestClient)

    def test_rest_shares_auth(self) -> None:
        client = CoinExClient(api_key="K", api_secret="S")
        assert client.rest.auth is client.auth

    def test_unsigned_by_default(self) -> None:
        client = CoinExClient()
        assert client.validate_exchange_configured() is False

    def test_configured(self) -> None:
        assert CoinExClient(api_key="K", api_secret="S").validate_exchange_configured() is True

    def test_options_forwarded(self) -> None:
        client = CoinExClient(api_key="K", api_secret="S", signing_order=SigningOrder.SORTED,
                              base_url="https://example.test/v1")
        assert client.rest.base_url == "https://example.test/v1"
        assert client.rest.signature({"tonce": "1", "access_id": "K"}) == \
            client.rest.signature({"access_id": "K", "tonce": "1"})

    def test_default_timeout(self) -> None:
        client = CoinExClient()
        assert client.rest._transport._timeout == DEFAULT_TIMEOUT_S

    def test_custom_timeout(self) -> None:
        assert CoinExClient(rest_timeout=2.5).rest._transport._timeout == 2.5

    def test_from_file(self, tmp_path) -> None:
        path = tmp_path / "coinex.json"
        path.write_text(json.dumps({"apiKey": "K", "apiSecret": "S"}))
        client = CoinExClient.from_file(path)
        assert client.auth.api_key == "K"
        assert client.validate_exchange_configured() is True

    def test_from_file_missing(self, tmp_path) -> None:
        with pytest.raises(ConfigurationError):
            CoinExClient.from_file(tmp_path / "missing.json")

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_API_KEY, "K")
        monkeypatch.setenv(ENV_API_SECRET, "S")
        assert CoinExClient.from_env().validate_exchange_configured() is True


class TestCoinExClientCalls:
    @pytest.mark.asyncio
    async def test_market_list_through_facade(self) -> None:
        transport = AsyncStubTransport(response=ok(["BTCUSDT", "ETHUSDT"]))
        client = CoinExClient(transport=transport)
        assert await client.rest.get_market_list() == ["BTCUSDT", "ETHUSDT"]
        assert transport.last.headers is None


class TestCoinExClientContextManager:
    @pytest.mark.asyncio
    async def test_aenter_returns_self(self) -> None:
        client = CoinExClient()
        result = await client.__aenter__()
        assert result is client
        await client.close()

    @pytest.mark.asyncio
    async def test_aexit_calls_close(self) -> None:
        closed = []

        client = CoinExClient()

        # Patch close() to track the call
        original_close = client.close

        async def tracking_close() -> None:
            closed.append(True)
            await original_close()

        client.close = tracking_close  # type: ignore[method-assign]

        async with client:
            pass

        assert closed == [True]

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self) -> None:
        """Calling close() twice must not raise."""
        client = CoinExClient()
        await client.close()
        await client.close()
