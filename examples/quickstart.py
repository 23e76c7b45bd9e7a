"""
examples/quickstart.py – End-to-end demo of the CoinEx SDK.

Walks through:
  1. Public market data (pairs, ticker, depth, K-lines)
  2. Signed account data (balances, open orders)
  3. Error handling as values with async_capture

HOW TO RUN
----------
    export COINEX_API_KEY="your_api_key"        # optional: public data works without
    export COINEX_API_SECRET="your_api_secret"
    python examples/quickstart.py

No orders are placed and no funds are moved.
"""

from __future__ import annotations

import asyncio
import logging

from coinex_sdk import (
    CoinExAPIError,
    CoinExClient,
    ConfigurationError,
    Interval,
    Merge,
    async_capture,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
)
logger = logging.getLogger("quickstart")

MARKET = "BTCUSDT"


async def show_market_data(client: CoinExClient) -> None:
    markets = await client.rest.get_market_list()
    logger.info("%d markets listed, e.g. %s", len(markets), markets[:5])

    ticker = await client.rest.get_ticker(MARKET)
    logger.info("%s last=%s  high=%s  low=%s", MARKET, ticker.ticker.last, ticker.ticker.high, ticker.ticker.low)

    depth = await client.rest.get_market_depth(MARKET, merge=Merge.TWO)
    if depth.bids and depth.asks:
        logger.info("best bid %s / best ask %s", depth.bids[0][0], depth.asks[0][0])

    klines = await client.rest.get_kline(MARKET, Interval.ONE_HOUR, limit=24)
    for k in klines[-3:]:
        logger.info("kline t=%d  o=%s  c=%s  v=%s", k.time, k.open, k.close, k.volume)


async def show_account(client: CoinExClient) -> None:
    if not client.validate_exchange_configured():
        logger.info("No credentials configured – skipping signed endpoints")
        return

    try:
        balances = await client.rest.get_balance()
    except CoinExAPIError as exc:
        logger.error("Balance request rejected: [%d] %s", exc.code, exc.message)
        return

    for coin, asset in balances.items():
        logger.info("%-6s available=%s  frozen=%s", coin, asset.available, asset.frozen)

    result = await async_capture(client.rest.get_open_orders(MARKET, limit=10))
    if result.ok:
        logger.info("%d open %s orders", result.data.count, MARKET)
    elif isinstance(result.error, ConfigurationError):
        logger.warning("Client not configured: %s", result.error)
    else:
        logger.error("Open orders failed: %s", result.error)


async def main() -> None:
    async with CoinExClient.from_env() as client:
        await show_market_data(client)
        await show_account(client)


if __name__ == "__main__":
    asyncio.run(main())
