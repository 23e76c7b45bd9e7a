"""
rest.py – REST clients (sync and async) for the CoinEx v1 API.

Every call follows the same recipe:

  parameter bag → (signature) → URL → transport → Envelope → data

Both clients share the recipe through _RequestBuilder, which turns each
endpoint into a PreparedRequest; the sync client runs it on a
RequestsTransport, the async client awaits it on an AiohttpTransport.

Errors (see errors.py):
  ConfigurationError  signed call without key + secret
  TransportError      network failure
  ProtocolError       missing / malformed envelope or payload
  CoinExAPIError      envelope ``code != 0``

Private endpoints require a CoinExAuth with both key and secret.
Market-data endpoints are public.

Usage – sync
------------
    from coinex_sdk import CoinExRestClient, CoinExAuth, OrderType

    client = CoinExRestClient(CoinExAuth(api_key="...", api_secret="..."))
    markets = client.get_market_list()
    order   = client.limit_order("BTCUSDT", OrderType.BUY, "0.01", "20000")

Usage – async
-------------
    async with AsyncCoinExRestClient(auth) as client:
        depth = await client.get_market_depth("BTCUSDT")
        bal   = await client.get_balance()
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache
from enum import Enum
from typing import Any, Generic, Optional, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from .auth import CoinExAuth, TonceProvider, tonce_ms
from .errors import CoinExAPIError, CoinExError, ConfigurationError, ProtocolError
from .signing import (
    DEFAULT_HASH,
    SigningOrder,
    canonical_from_bag,
    canonical_from_sorted_list,
    canonical_string,
    format_value,
    sign,
)
from .transport import (
    DEFAULT_TIMEOUT_S,
    AiohttpTransport,
    AsyncHttpClient,
    HttpClient,
    RequestsTransport,
)
from .types import (
    AllTickers,
    Asset,
    Deal,
    DepthLimit,
    Deposit,
    Envelope,
    Interval,
    KLine,
    MarketDepth,
    MarketInfo,
    Merge,
    MiningDifficulty,
    OpenOrder,
    Order,
    OrderType,
    PagedResponse,
    TickerData,
    UserDeal,
    Withdrawal,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

Number = Union[Decimal, float, int, str]

# ---------------------------------------------------------------------------
# Wire constants
# ---------------------------------------------------------------------------

BASE_URL = "https://api.coinex.com/v1"

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 6.1; WOW64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/39.0.2171.71 Safari/537.36"
)

KLINE_MAX_LIMIT = 1000
PAGE_MAX_LIMIT  = 100


# ---------------------------------------------------------------------------
# URL builder / headers
# ---------------------------------------------------------------------------

def build_url(base: str, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """``base + endpoint`` plus the bag as a query string, insertion order."""
    url   = base + endpoint
    query = canonical_from_bag(params)
    if query:
        url += "?" + query
    return url


def build_sorted_url(base: str, endpoint: str, pairs: Optional[list[str]] = None) -> str:
    """``base + endpoint`` plus ``key=value`` strings as a SORTED query string."""
    url   = base + endpoint
    query = canonical_from_sorted_list(pairs)
    if query:
        url += "?" + query
    return url


def request_headers(signature: str) -> dict[str, str]:
    """Headers attached to every signed request."""
    return {"authorization": signature, "User-Agent": USER_AGENT}


def clamp_limit(limit: int, maximum: int) -> int:
    return maximum if limit > maximum else limit


E = TypeVar("E", bound=Enum)


def coerce_choice(enum_cls: type[E], value: Any, name: str) -> E:
    """Look ``value`` up in ``enum_cls``; an unknown value is a ConfigurationError."""
    try:
        return enum_cls(value)
    except ValueError as exc:
        allowed = ", ".join(str(m.value) for m in enum_cls)
        raise ConfigurationError(f"Invalid {name} {value!r}; expected one of: {allowed}") from exc


# ---------------------------------------------------------------------------
# Envelope handling (shared by sync and async clients)
# ---------------------------------------------------------------------------

def decode_envelope(raw: Any) -> Optional[Envelope[Any]]:
    """Validate a decoded JSON body into an Envelope; None stays None."""
    if raw is None:
        return None
    try:
        return Envelope[Any].model_validate(raw)
    except ValidationError as exc:
        raise ProtocolError(f"Response is not a CoinEx envelope: {exc}") from exc


def unwrap(envelope: Optional[Envelope[T]], method: str = "", path: str = "") -> Optional[T]:
    """
    Return ``envelope.data`` or raise.

    None          → ProtocolError ("no response")
    code != 0     → CoinExAPIError carrying code and message verbatim
    """
    if envelope is None:
        raise ProtocolError(f"No response from CoinEx {method.upper()} {path}".rstrip())
    if envelope.code != 0:
        logger.warning("CoinEx returned error %d for %s %s: %s",
                       envelope.code, method.upper(), path, envelope.message)
        raise CoinExAPIError(envelope.code, envelope.message, method=method, path=path)
    return envelope.data


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def parse_payload(data: Any, result_type: Any) -> Any:
    """Validate ``data`` into ``result_type``; mismatches become ProtocolError."""
    try:
        return _adapter(result_type).validate_python(data)
    except ValidationError as exc:
        raise ProtocolError(f"Unexpected CoinEx payload for {result_type!r}: {exc}") from exc


# ---------------------------------------------------------------------------
# Explicit result values
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of an API call as a value.

    Exactly one of ``data`` / ``error`` is meaningful; check ``ok`` first
    or call ``unwrap()`` to get the data back (re-raising the error).
    """
    data:  Optional[T]           = None
    error: Optional[CoinExError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.data  # type: ignore[return-value]


def capture(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T]:
    """Run a sync client call and return its outcome as a Result."""
    try:
        return Result(data=fn(*args, **kwargs))
    except CoinExError as exc:
        return Result(error=exc)


async def async_capture(awaitable: Awaitable[T]) -> Result[T]:
    """Await an async client call and return its outcome as a Result."""
    try:
        return Result(data=await awaitable)
    except CoinExError as exc:
        return Result(error=exc)


# ---------------------------------------------------------------------------
# Request preparation (shared by sync and async clients)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PreparedRequest:
    """
    A fully built request, ready for a transport.

    path        : endpoint path, used in error messages
    body        : JSON body (POST only)
    headers     : signature headers, None for public calls
    result_type : type the envelope ``data`` is validated into
    action      : discard ``data`` and report True on success
    """
    method:      str
    path:        str
    url:         str
    body:        Optional[dict]           = None
    headers:     Optional[dict[str, str]] = None
    result_type: Any                      = Any
    action:      bool                     = False

    @property
    def signed(self) -> bool:
        return self.headers is not None


def finish(prepared: PreparedRequest, raw: Any) -> Any:
    """Turn a transport's decoded body into the endpoint's return value."""
    data = unwrap(decode_envelope(raw), prepared.method, prepared.path)
    if prepared.action:
        return True
    return parse_payload(data, prepared.result_type)


class _RequestBuilder:
    """
    Builds a PreparedRequest for every CoinEx endpoint.

    Parameters
    ----------
    auth          : CoinExAuth; omit for public-only usage
    base_url      : API root, default https://api.coinex.com/v1
    signing_order : SigningOrder used to canonicalise the signed string
    hash_name     : hashlib algorithm for the signature (default "md5")
    hmac_key      : optional HMAC key; plain digest when None
    clock         : tonce provider (epoch milliseconds)
    """

    def __init__(
        self,
        auth: Optional[CoinExAuth] = None,
        *,
        base_url: str = BASE_URL,
        signing_order: Union[SigningOrder, str] = SigningOrder.INSERTION,
        hash_name: str = DEFAULT_HASH,
        hmac_key: Optional[Union[str, bytes]] = None,
        clock: TonceProvider = tonce_ms,
    ) -> None:
        self._auth          = auth or CoinExAuth()
        self._base_url      = base_url.rstrip("/")
        self._signing_order = SigningOrder(signing_order)
        self._hash_name     = hash_name
        self._hmac_key      = hmac_key
        self._clock         = clock

    @property
    def auth(self) -> CoinExAuth:
        return self._auth

    @property
    def base_url(self) -> str:
        return self._base_url

    def validate_exchange_configured(self) -> bool:
        """True when signed endpoints can be called."""
        return self._auth.is_configured()

    # ------------------------------------------------------------------
    # Recipe helpers
    # ------------------------------------------------------------------

    def _tonce(self) -> str:
        return str(self._clock())

    def _access_id(self) -> str:
        self._auth.require_configured()
        return self._auth.api_key

    def signature(self, params: Mapping[str, Any]) -> str:
        """Sign a parameter bag with this client's secret and options."""
        return sign(
            canonical_string(params, self._signing_order),
            self._auth.api_secret,
            hash_name=self._hash_name,
            hmac_key=self._hmac_key,
        )

    def _public(self, path: str, params: Optional[dict[str, str]], result_type: Any) -> PreparedRequest:
        return PreparedRequest(
            method="GET",
            path=path,
            url=build_url(self._base_url, path, params),
            result_type=result_type,
        )

    def _signed(
        self,
        method: str,
        path: str,
        params: dict[str, str],
        result_type: Any = Any,
        *,
        action: bool = False,
    ) -> PreparedRequest:
        headers = request_headers(self.signature(params))
        if method == "POST":
            url, body = build_url(self._base_url, path), dict(params)
        else:
            url, body = build_url(self._base_url, path, params), None
        return PreparedRequest(
            method=method,
            path=path,
            url=url,
            body=body,
            headers=headers,
            result_type=result_type,
            action=action,
        )

    # ------------------------------------------------------------------
    # Market data (public)
    # ------------------------------------------------------------------

    def _prepare_market_list(self) -> PreparedRequest:
        return self._public("/market/list", None, list[str])

    def _prepare_market_info(self) -> PreparedRequest:
        return self._public("/market/info", None, dict[str, MarketInfo])

    def _prepare_ticker(self, pair: str) -> PreparedRequest:
        return self._public("/market/ticker", {"market": pair}, TickerData)

    def _prepare_all_tickers(self) -> PreparedRequest:
        return self._public("/market/ticker/all", None, AllTickers)

    def _prepare_market_depth(self, pair: str, merge: Merge, limit: DepthLimit) -> PreparedRequest:
        params = {
            "market": pair,
            "merge":  coerce_choice(Merge, merge, "merge").as_param,
            "limit":  str(int(coerce_choice(DepthLimit, limit, "depth limit"))),
        }
        return self._public("/market/depth", params, MarketDepth)

    def _prepare_transaction_data(self, pair: str, last_id: int) -> PreparedRequest:
        params = {"market": pair, "last_id": str(last_id)}
        return self._public("/market/deals", params, list[Deal])

    def _prepare_kline(self, pair: str, interval: Interval, limit: int) -> PreparedRequest:
        params = {
            "market": pair,
            "limit":  str(clamp_limit(limit, KLINE_MAX_LIMIT)),
            "type":   coerce_choice(Interval, interval, "interval").value,
        }
        return self._public("/market/kline", params, list[KLine])

    # ------------------------------------------------------------------
    # Account (signed)
    # ------------------------------------------------------------------

    def _prepare_balance(self) -> PreparedRequest:
        params = {"access_id": self._access_id(), "tonce": self._tonce()}
        return self._signed("GET", "/balance/info", params, dict[str, Asset])

    def _prepare_withdrawals(self, coin: str, withdraw_id: int, page: int, limit: int) -> PreparedRequest:
        limit = clamp_limit(limit, PAGE_MAX_LIMIT)
        params = {"access_id": self._access_id()}
        if coin:
            params["coin_type"] = coin
        if withdraw_id > 0:
            params["coin_withdraw_id"] = str(withdraw_id)
        if limit < PAGE_MAX_LIMIT:
            params["limit"] = str(limit)
        if page > 1:
            params["page"] = str(page)
        params["tonce"] = self._tonce()
        return self._signed("GET", "/balance/coin/withdraw", params, list[Withdrawal])

    def _prepare_deposits(self, coin: str, page: int, limit: int) -> PreparedRequest:
        limit = clamp_limit(limit, PAGE_MAX_LIMIT)
        params = {"access_id": self._access_id()}
        if coin:
            params["coin_type"] = coin
        if limit < PAGE_MAX_LIMIT:
            params["limit"] = str(limit)
        if page > 1:
            params["page"] = str(page)
        params["tonce"] = self._tonce()
        return self._signed("GET", "/balance/coin/deposit", params, list[Deposit])

    def _prepare_submit_withdrawal(self, coin: str, address: str, amount: Number) -> PreparedRequest:
        params = {
            "access_id":     self._access_id(),
            "actual_amount": format_value(amount),
            "coin_address":  address,
            "coin_type":     coin,
            "tonce":         self._tonce(),
        }
        return self._signed("POST", "/balance/coin/withdraw", params, Withdrawal)

    def _prepare_cancel_withdrawal(self, withdraw_id: int) -> PreparedRequest:
        params = {
            "access_id":        self._access_id(),
            "coin_withdraw_id": str(withdraw_id),
            "tonce":            self._tonce(),
        }
        return self._signed("DELETE", "/balance/coin/withdraw", params, action=True)

    # ------------------------------------------------------------------
    # Trading (signed)
    # ------------------------------------------------------------------

    def _prepare_order(
        self,
        path: str,
        pair: str,
        side: OrderType,
        amount: Number,
        price: Optional[Number] = None,
    ) -> PreparedRequest:
        params = {
            "access_id": self._access_id(),
            "amount":    format_value(amount),
            "market":    pair,
        }
        if price is not None:
            params["price"] = format_value(price)
        params["tonce"] = self._tonce()
        params["type"]  = coerce_choice(OrderType, side, "order type").value
        return self._signed("POST", path, params, Order)

    def _prepare_paged(self, path: str, pair: str, page: int, limit: int, item_type: Any) -> PreparedRequest:
        params = {
            "access_id": self._access_id(),
            "limit":     str(clamp_limit(limit, PAGE_MAX_LIMIT)),
            "market":    pair,
            "page":      str(page),
            "tonce":     self._tonce(),
        }
        return self._signed("GET", path, params, PagedResponse[item_type])

    def _prepare_order_by_id(self, method: str, path: str, pair: str, order_id: int) -> PreparedRequest:
        params = {
            "access_id": self._access_id(),
            "id":        str(order_id),
            "market":    pair,
            "tonce":     self._tonce(),
        }
        return self._signed(method, path, params, Order)

    def _prepare_mining_difficulty(self) -> PreparedRequest:
        params = {"access_id": self._access_id(), "tonce": self._tonce()}
        return self._signed("GET", "/order/mining/difficulty", params, MiningDifficulty)


# ---------------------------------------------------------------------------
# Synchronous client
# ---------------------------------------------------------------------------

class CoinExRestClient(_RequestBuilder):
    """
    Synchronous REST client for CoinEx.

    Parameters
    ----------
    auth      : CoinExAuth instance (omit for market data only)
    transport : HttpClient; defaults to a RequestsTransport
    timeout   : HTTP timeout in seconds for the default transport

    Remaining keyword options are described on _RequestBuilder.
    """

    def __init__(
        self,
        auth: Optional[CoinExAuth] = None,
        *,
        transport: Optional[HttpClient] = None,
        timeout: float = DEFAULT_TIMEOUT_S,
        **options: Any,
    ) -> None:
        super().__init__(auth, **options)
        self._owns_transport = transport is None
        self._transport: HttpClient = transport or RequestsTransport(timeout=timeout)

    def __enter__(self) -> "CoinExRestClient":
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_transport:
            self._transport.close()

    # ------------------------------------------------------------------
    # Internal request helper
    # ------------------------------------------------------------------

    def _execute(self, prepared: PreparedRequest) -> Any:
        logger.debug("%s %s  signed=%s", prepared.method, prepared.url, prepared.signed)
        raw = self._transport.request(
            prepared.method, prepared.url,
            body=prepared.body,
            headers=prepared.headers,
        )
        return finish(prepared, raw)

    # ------------------------------------------------------------------
    # Market data endpoints (public)
    # ------------------------------------------------------------------

    def get_market_list(self) -> list[str]:
        """List all trading pairs."""
        return self._execute(self._prepare_market_list())

    def get_market_info(self) -> dict[str, MarketInfo]:
        """Trading rules for every market, keyed by market name."""
        return self._execute(self._prepare_market_info())

    def get_ticker(self, pair: str) -> TickerData:
        return self._execute(self._prepare_ticker(pair))

    def get_all_tickers(self) -> AllTickers:
        return self._execute(self._prepare_all_tickers())

    def get_market_depth(
        self,
        pair: str,
        merge: Merge = Merge.ZERO,
        limit: DepthLimit = DepthLimit.TWENTY,
    ) -> MarketDepth:
        """Order book for a market, merged to ``merge`` decimal places."""
        return self._execute(self._prepare_market_depth(pair, merge, limit))

    def get_transaction_data(self, pair: str, last_id: int = 0) -> list[Deal]:
        """Latest public trades, optionally starting after ``last_id``."""
        return self._execute(self._prepare_transaction_data(pair, last_id))

    def get_kline(self, pair: str, interval: Interval, limit: int = 100) -> list[KLine]:
        """Candlesticks for a market; ``limit`` is capped at 1000."""
        return self._execute(self._prepare_kline(pair, interval, limit))

    # ------------------------------------------------------------------
    # Account endpoints (private)
    # ------------------------------------------------------------------

    def get_balance(self) -> dict[str, Asset]:
        """Account balances keyed by coin."""
        return self._execute(self._prepare_balance())

    def get_withdrawals(
        self,
        coin: str = "",
        withdraw_id: int = 0,
        page: int = 1,
        limit: int = 100,
    ) -> list[Withdrawal]:
        """Withdrawal history; ``limit`` is capped at 100."""
        return self._execute(self._prepare_withdrawals(coin, withdraw_id, page, limit))

    def get_deposits(self, coin: str = "", page: int = 1, limit: int = 100) -> list[Deposit]:
        """Deposit history; ``limit`` is capped at 100."""
        return self._execute(self._prepare_deposits(coin, page, limit))

    def submit_withdrawal(self, coin: str, address: str, amount: Number) -> Withdrawal:
        """Withdraw ``amount`` of ``coin`` to ``address``."""
        return self._execute(self._prepare_submit_withdrawal(coin, address, amount))

    def cancel_withdrawal(self, withdraw_id: int) -> bool:
        """Cancel a pending withdrawal. Returns True once CoinEx accepts it."""
        return self._execute(self._prepare_cancel_withdrawal(withdraw_id))

    # ------------------------------------------------------------------
    # Order management (private)
    # ------------------------------------------------------------------

    def limit_order(self, pair: str, side: OrderType, amount: Number, price: Number) -> Order:
        """Place a limit order."""
        return self._execute(self._prepare_order("/order/limit", pair, side, amount, price))

    def market_order(self, pair: str, side: OrderType, amount: Number) -> Order:
        """Place a market order."""
        return self._execute(self._prepare_order("/order/market", pair, side, amount))

    def ioc_order(self, pair: str, side: OrderType, amount: Number, price: Number) -> Order:
        """Place an immediate-or-cancel order."""
        return self._execute(self._prepare_order("/order/ioc", pair, side, amount, price))

    def get_open_orders(self, pair: str, page: int = 1, limit: int = 100) -> PagedResponse[OpenOrder]:
        return self._execute(self._prepare_paged("/order/pending", pair, page, limit, OpenOrder))

    def get_order(self, pair: str, order_id: int) -> Order:
        return self._execute(self._prepare_order_by_id("GET", "/order/status", pair, order_id))

    def get_orders(self, pair: str, page: int = 1, limit: int = 100) -> PagedResponse[Order]:
        """Finished (filled or cancelled) orders."""
        return self._execute(self._prepare_paged("/order/finished", pair, page, limit, Order))

    def get_user_deals(self, pair: str, page: int = 1, limit: int = 100) -> PagedResponse[UserDeal]:
        """Executions of the account's own orders."""
        return self._execute(self._prepare_paged("/order/user/deals", pair, page, limit, UserDeal))

    def cancel_order(self, pair: str, order_id: int) -> Order:
        """Cancel an open order; returns its final state."""
        return self._execute(self._prepare_order_by_id("DELETE", "/order/pending", pair, order_id))

    def get_mining_difficulty(self) -> MiningDifficulty:
        return self._execute(self._prepare_mining_difficulty())


# ---------------------------------------------------------------------------
# Async client
# ---------------------------------------------------------------------------

class AsyncCoinExRestClient(_RequestBuilder):
    """
    Async REST client for CoinEx (aiohttp-based).

    Holds no mutable state besides its transport's session, so one
    instance can serve many concurrent coroutines.

    Usage
    -----
        async with AsyncCoinExRestClient(auth=auth) as client:
            book = await client.get_market_depth("BTCUSDT")
            resp = await client.limit_order("BTCUSDT", OrderType.BUY, "0.01", "20000")
    """

    def __init__(
        self,
        auth: Optional[CoinExAuth] = None,
        *,
        transport: Optional[AsyncHttpClient] = None,
        timeout: float = DEFAULT_TIMEOUT_S,
        **options: Any,
    ) -> None:
        super().__init__(auth, **options)
        self._owns_transport = transport is None
        self._transport: AsyncHttpClient = transport or AiohttpTransport(timeout=timeout)

    async def __aenter__(self) -> "AsyncCoinExRestClient":
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_transport:
            await self._transport.close()

    # ------------------------------------------------------------------
    # Internal async request helper
    # ------------------------------------------------------------------

    async def _execute(self, prepared: PreparedRequest) -> Any:
        logger.debug("%s %s  signed=%s", prepared.method, prepared.url, prepared.signed)
        raw = await self._transport.request(
            prepared.method, prepared.url,
            body=prepared.body,
            headers=prepared.headers,
        )
        return finish(prepared, raw)

    # ------------------------------------------------------------------
    # Market data (public)
    # ------------------------------------------------------------------

    async def get_market_list(self) -> list[str]:
        return await self._execute(self._prepare_market_list())

    async def get_market_info(self) -> dict[str, MarketInfo]:
        return await self._execute(self._prepare_market_info())

    async def get_ticker(self, pair: str) -> TickerData:
        return await self._execute(self._prepare_ticker(pair))

    async def get_all_tickers(self) -> AllTickers:
        return await self._execute(self._prepare_all_tickers())

    async def get_market_depth(
        self,
        pair: str,
        merge: Merge = Merge.ZERO,
        limit: DepthLimit = DepthLimit.TWENTY,
    ) -> MarketDepth:
        return await self._execute(self._prepare_market_depth(pair, merge, limit))

    async def get_transaction_data(self, pair: str, last_id: int = 0) -> list[Deal]:
        return await self._execute(self._prepare_transaction_data(pair, last_id))

    async def get_kline(self, pair: str, interval: Interval, limit: int = 100) -> list[KLine]:
        return await self._execute(self._prepare_kline(pair, interval, limit))

    # ------------------------------------------------------------------
    # Account
    # ------------------------------------------------------------------

    async def get_balance(self) -> dict[str, Asset]:
        return await self._execute(self._prepare_balance())

    async def get_withdrawals(
        self,
        coin: str = "",
        withdraw_id: int = 0,
        page: int = 1,
        limit: int = 100,
    ) -> list[Withdrawal]:
        return await self._execute(self._prepare_withdrawals(coin, withdraw_id, page, limit))

    async def get_deposits(self, coin: str = "", page: int = 1, limit: int = 100) -> list[Deposit]:
        return await self._execute(self._prepare_deposits(coin, page, limit))

    async def submit_withdrawal(self, coin: str, address: str, amount: Number) -> Withdrawal:
        return await self._execute(self._prepare_submit_withdrawal(coin, address, amount))

    async def cancel_withdrawal(self, withdraw_id: int) -> bool:
        return await self._execute(self._prepare_cancel_withdrawal(withdraw_id))

    # ------------------------------------------------------------------
    # Order management
    # ------------------------------------------------------------------

    async def limit_order(self, pair: str, side: OrderType, amount: Number, price: Number) -> Order:
        return await self._execute(self._prepare_order("/order/limit", pair, side, amount, price))

    async def market_order(self, pair: str, side: OrderType, amount: Number) -> Order:
        return await self._execute(self._prepare_order("/order/market", pair, side, amount))

    async def ioc_order(self, pair: str, side: OrderType, amount: Number, price: Number) -> Order:
        return await self._execute(self._prepare_order("/order/ioc", pair, side, amount, price))

    async def get_open_orders(self, pair: str, page: int = 1, limit: int = 100) -> PagedResponse[OpenOrder]:
        return await self._execute(self._prepare_paged("/order/pending", pair, page, limit, OpenOrder))

    async def get_order(self, pair: str, order_id: int) -> Order:
        return await self._execute(self._prepare_order_by_id("GET", "/order/status", pair, order_id))

    async def get_orders(self, pair: str, page: int = 1, limit: int = 100) -> PagedResponse[Order]:
        return await self._execute(self._prepare_paged("/order/finished", pair, page, limit, Order))

    async def get_user_deals(self, pair: str, page: int = 1, limit: int = 100) -> PagedResponse[UserDeal]:
        return await self._execute(self._prepare_paged("/order/user/deals", pair, page, limit, UserDeal))

    async def cancel_order(self, pair: str, order_id: int) -> Order:
        return await self._execute(self._prepare_order_by_id("DELETE", "/order/pending", pair, order_id))

    async def get_mining_difficulty(self) -> MiningDifficulty:
        return await self._execute(self._prepare_mining_difficulty())
