"""
CoinEx SDK – Python SDK for the CoinEx v1 REST API.

Provides:
  - Unified façade                     (client.py    → CoinExClient)
  - Parameter signing                  (signing.py   → sign, sign_from_bag)
  - Credentials / config loading       (auth.py      → CoinExAuth)
  - Typed Pydantic v2 models           (types.py)
  - Synchronous REST client            (rest.py      → CoinExRestClient)
  - Async REST client                  (rest.py      → AsyncCoinExRestClient)
  - HTTP transports                    (transport.py → RequestsTransport, AiohttpTransport)
  - Error taxonomy                     (errors.py)

Quickstart
----------
    import asyncio
    from coinex_sdk import CoinExClient, OrderType

    async def main() -> None:
        async with CoinExClient(api_key="...", api_secret="...") as client:
            markets = await client.rest.get_market_list()
            order   = await client.rest.limit_order("BTCUSDT", OrderType.BUY, "0.001", "20000")

    asyncio.run(main())
"""

from .types import (
    # Enums
    OrderType,
    Interval,
    Merge,
    DepthLimit,
    # Envelope
    Envelope,
    PagedResponse,
    # Market data
    Ticker,
    TickerData,
    AllTickers,
    MarketDepth,
    MarketInfo,
    Deal,
    KLine,
    # Account
    Asset,
    Withdrawal,
    Deposit,
    # Orders
    Order,
    OpenOrder,
    UserDeal,
    MiningDifficulty,
)
from .errors import (
    CoinExError,
    ConfigurationError,
    TransportError,
    ProtocolError,
    CoinExAPIError,
)
from .signing import (
    SigningOrder,
    canonical_from_bag,
    canonical_from_sorted_list,
    sign,
    sign_from_bag,
    sign_from_sorted_list,
)
from .auth import CoinExAuth, TonceProvider, tonce_ms
from .transport import HttpClient, AsyncHttpClient, RequestsTransport, AiohttpTransport
from .rest import (
    BASE_URL,
    CoinExRestClient,
    AsyncCoinExRestClient,
    PreparedRequest,
    Result,
    build_url,
    build_sorted_url,
    capture,
    async_capture,
    unwrap,
)
from .client import CoinExClient

__all__ = [
    # Enums
    "OrderType",
    "Interval",
    "Merge",
    "DepthLimit",
    # Envelope
    "Envelope",
    "PagedResponse",
    # Market data
    "Ticker",
    "TickerData",
    "AllTickers",
    "MarketDepth",
    "MarketInfo",
    "Deal",
    "KLine",
    # Account
    "Asset",
    "Withdrawal",
    "Deposit",
    # Orders
    "Order",
    "OpenOrder",
    "UserDeal",
    "MiningDifficulty",
    # Errors
    "CoinExError",
    "ConfigurationError",
    "TransportError",
    "ProtocolError",
    "CoinExAPIError",
    # Signing
    "SigningOrder",
    "canonical_from_bag",
    "canonical_from_sorted_list",
    "sign",
    "sign_from_bag",
    "sign_from_sorted_list",
    # Auth
    "CoinExAuth",
    "TonceProvider",
    "tonce_ms",
    # Transport
    "HttpClient",
    "AsyncHttpClient",
    "RequestsTransport",
    "AiohttpTransport",
    # REST
    "BASE_URL",
    "CoinExRestClient",
    "AsyncCoinExRestClient",
    "PreparedRequest",
    "Result",
    "build_url",
    "build_sorted_url",
    "capture",
    "async_capture",
    "unwrap",
    # Unified façade
    "CoinExClient",
]

__version__ = "0.1.0"
