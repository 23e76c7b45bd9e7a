"""
client.py – Unified CoinExClient façade.

Single entry point that owns the credentials and the async REST client,
so configuration is done once.

Usage
-----
    import asyncio
    from coinex_sdk import CoinExClient, Interval

    async def main() -> None:
        async with CoinExClient.from_file("~/.coinex/config.json") as client:

            # Market data (no credentials needed)
            klines = await client.rest.get_kline("BTCUSDT", Interval.ONE_HOUR, limit=24)

            # Account data (signed)
            if client.validate_exchange_configured():
                balances = await client.rest.get_balance()

    asyncio.run(main())
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from .auth import CoinExAuth
from .rest import AsyncCoinExRestClient
from .transport import DEFAULT_TIMEOUT_S, AsyncHttpClient


class CoinExClient:
    """
    Unified façade for the CoinEx SDK.

    Parameters
    ----------
    api_key      : CoinEx API key (empty for market data only)
    api_secret   : CoinEx API secret
    transport    : optional AsyncHttpClient; aiohttp is used otherwise
    rest_timeout : HTTP timeout in seconds for REST requests
    options      : base_url / signing_order / hash_name / hmac_key / clock,
                   forwarded to AsyncCoinExRestClient
    """

    def __init__(
        self,
        api_key: str = "",
        api_secret: str = "",
        *,
        transport: Optional[AsyncHttpClient] = None,
        rest_timeout: float = DEFAULT_TIMEOUT_S,
        **options: Any,
    ) -> None:
        self._auth = CoinExAuth(api_key=api_key, api_secret=api_secret)
        self.rest  = AsyncCoinExRestClient(
            self._auth, transport=transport, timeout=rest_timeout, **options
        )

    @classmethod
    def from_file(cls, path: Union[str, Path], **kwargs: Any) -> "CoinExClient":
        """Build a client from a JSON credentials file."""
        auth = CoinExAuth.from_file(path)
        return cls(api_key=auth.api_key, api_secret=auth.api_secret, **kwargs)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "CoinExClient":
        """Build a client from COINEX_API_KEY / COINEX_API_SECRET."""
        auth = CoinExAuth.from_env()
        return cls(api_key=auth.api_key, api_secret=auth.api_secret, **kwargs)

    # ------------------------------------------------------------------
    # Async context manager
    # ------------------------------------------------------------------

    async def __aenter__(self) -> "CoinExClient":
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the REST session."""
        await self.rest.close()

    # ------------------------------------------------------------------
    # Convenience
    # ------------------------------------------------------------------

    @property
    def auth(self) -> CoinExAuth:
        """The credentials shared with the REST client."""
        return self._auth

    def validate_exchange_configured(self) -> bool:
        """True when both API key and secret are set."""
        return self._auth.is_configured()
