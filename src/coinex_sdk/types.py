"""
types.py – Pydantic v2 models for the CoinEx v1 REST API schema.

Maps to CoinEx's JSON API as documented at
https://github.com/coinexcom/coinex_exchange_api/wiki  (v1).

Every response body has the same outer shape:

    {"code": 0, "message": "Ok", "data": ...}

which is modelled by the generic ``Envelope[T]``.  The payload models below
describe ``data`` for each endpoint.

All monetary values (price, amount, fee) are strings in CoinEx's API to
preserve precision; this SDK keeps that convention and stores them as str –
convert with Decimal for arithmetic.

Payload models accept unknown keys (``extra="allow"``) so a field added by
the exchange never breaks parsing.

Deserialisation
---------------
Use Model.model_validate(raw_dict) to parse API payloads:

    ticker = TickerData.model_validate(raw["data"])
    rows   = [KLine.model_validate(r) for r in raw["data"]]
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from enum import Enum, IntEnum, unique
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

@unique
class OrderType(str, Enum):
    BUY  = "buy"
    SELL = "sell"


@unique
class Interval(str, Enum):
    """K-line period, sent as the ``type`` query parameter."""
    ONE_MINUTE      = "1min"
    THREE_MINUTES   = "3min"
    FIVE_MINUTES    = "5min"
    FIFTEEN_MINUTES = "15min"
    THIRTY_MINUTES  = "30min"
    ONE_HOUR        = "1hour"
    TWO_HOURS       = "2hour"
    FOUR_HOURS      = "4hour"
    SIX_HOURS       = "6hour"
    TWELVE_HOURS    = "12hour"
    ONE_DAY         = "1day"
    THREE_DAYS      = "3day"
    ONE_WEEK        = "1week"


@unique
class Merge(IntEnum):
    """Depth merge precision, in decimal places."""
    ZERO  = 0
    ONE   = 1
    TWO   = 2
    THREE = 3
    FOUR  = 4
    FIVE  = 5
    SIX   = 6
    SEVEN = 7
    EIGHT = 8

    @property
    def as_param(self) -> str:
        """The ``merge`` value CoinEx expects: "0", "0.1", … "0.00000001"."""
        if self == Merge.ZERO:
            return "0"
        return format(Decimal(10) ** -int(self), "f")


@unique
class DepthLimit(IntEnum):
    FIVE   = 5
    TEN    = 10
    TWENTY = 20


# ---------------------------------------------------------------------------
# Shared validator helpers
# ---------------------------------------------------------------------------

def _validate_decimal_string(v: str, field: str = "value") -> str:
    """Reject empty strings and non-parseable decimals."""
    if not v or not v.strip():
        raise ValueError(f"{field} must be a non-empty decimal string")
    try:
        Decimal(v)
    except InvalidOperation:
        raise ValueError(f"{field} '{v}' is not a valid decimal string")
    return v


class _Payload(BaseModel):
    """Base for response payloads: tolerant of extra keys and numeric strings."""
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)


# ---------------------------------------------------------------------------
# Response envelope
# ---------------------------------------------------------------------------

class Envelope(BaseModel, Generic[T]):
    """
    Universal CoinEx response wrapper.

    code    : 0 on success, exchange error code otherwise
    message : human-readable status text
    data    : endpoint-specific payload (absent on most errors)
    """
    code:    int
    message: str          = ""
    data:    Optional[T]  = None


class PagedResponse(_Payload, Generic[T]):
    """Paging wrapper used by the order-history endpoints."""
    count:     int     = 0
    curr_page: int     = 1
    has_next:  bool    = False
    data:      list[T] = []


# ---------------------------------------------------------------------------
# Market data models
# ---------------------------------------------------------------------------

class Ticker(_Payload):
    buy:         str = "0"
    buy_amount:  str = "0"
    high:        str = "0"
    last:        str = "0"
    low:         str = "0"
    open:        str = "0"
    sell:        str = "0"
    sell_amount: str = "0"
    vol:         str = "0"

    @field_validator("buy", "high", "last", "low", "open", "sell", "vol")
    @classmethod
    def validate_decimal(cls, v: str) -> str:
        return _validate_decimal_string(v)


class TickerData(_Payload):
    """Ticker snapshot for a single market."""
    date:   int
    ticker: Ticker


class AllTickers(_Payload):
    """Ticker snapshot for every market, keyed by market name."""
    date:   int
    ticker: dict[str, Ticker] = {}


class MarketDepth(_Payload):
    """
    Order book snapshot.

    asks / bids : [price, amount] pairs, best level first
    last        : latest trade price
    """
    asks: list[list[str]] = []
    bids: list[list[str]] = []
    last: Optional[str]   = None


class MarketInfo(_Payload):
    """Static trading rules for a market."""
    name:            str
    min_amount:      str           = "0"
    maker_fee_rate:  str           = "0"
    taker_fee_rate:  str           = "0"
    pricing_name:    Optional[str] = None
    pricing_decimal: int           = 8
    trading_name:    Optional[str] = None
    trading_decimal: int           = 8


class Deal(_Payload):
    """A single public trade from ``/market/deals``."""
    id:      int
    type:    OrderType
    price:   str
    amount:  str
    date:    int = 0
    date_ms: int = 0


class KLine(_Payload):
    """
    One candlestick.

    CoinEx returns each row as a JSON array
    ``[time, open, close, high, low, volume, amount, market]``;
    the before-validator maps it onto named fields.
    """
    time:   int
    open:   str
    close:  str
    high:   str
    low:    str
    volume: str
    amount: str           = "0"
    market: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def from_row(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            keys = ("time", "open", "close", "high", "low", "volume", "amount", "market")
            return dict(zip(keys, data))
        return data

    @field_validator("open", "close", "high", "low", "volume")
    @classmethod
    def validate_decimal(cls, v: str) -> str:
        return _validate_decimal_string(v)


# ---------------------------------------------------------------------------
# Account models
# ---------------------------------------------------------------------------

class Asset(_Payload):
    """Balance of a single coin."""
    available: str = "0"
    frozen:    str = "0"

    @field_validator("available", "frozen")
    @classmethod
    def validate_decimal(cls, v: str) -> str:
        return _validate_decimal_string(v)


class Withdrawal(_Payload):
    """
    A withdrawal record.

    status : audit / pass / processing / confirming / not_pass / cancel /
             finish / fail
    """
    coin_withdraw_id: int
    coin_type:        str
    coin_address:     str           = ""
    amount:           str           = "0"
    actual_amount:    str           = "0"
    tx_fee:           str           = "0"
    tx_id:            str           = ""
    create_time:      int           = 0
    status:           str           = ""
    remark:           Optional[str] = None


class Deposit(_Payload):
    """A deposit record."""
    coin_deposit_id: int
    coin_type:       str
    coin_address:    str = ""
    amount:          str = "0"
    actual_amount:   str = "0"
    confirmations:   int = 0
    tx_id:           str = ""
    create_time:     int = 0
    status:          str = ""


# ---------------------------------------------------------------------------
# Order models
# ---------------------------------------------------------------------------

class Order(_Payload):
    """
    An order as returned by the order endpoints.

    type       : buy / sell
    order_type : limit / market / ioc
    status     : not_deal / part_deal / done / cancel
    left       : amount still unfilled
    """
    id:             int
    market:         str
    type:           OrderType
    order_type:     str           = "limit"
    status:         str           = ""
    amount:         str           = "0"
    price:          str           = "0"
    avg_price:      str           = "0"
    deal_amount:    str           = "0"
    deal_money:     str           = "0"
    deal_fee:       str           = "0"
    left:           str           = "0"
    maker_fee_rate: str           = "0"
    taker_fee_rate: str           = "0"
    create_time:    int           = 0
    finished_time:  Optional[int] = None
    source_id:      Optional[str] = None


class OpenOrder(Order):
    """An unfilled or partially filled order from ``/order/pending``."""


class UserDeal(_Payload):
    """An execution of one of the account's own orders."""
    id:          int
    order_id:    int
    type:        OrderType
    role:        str           = ""
    amount:      str           = "0"
    price:       str           = "0"
    deal_money:  str           = "0"
    fee:         str           = "0"
    fee_asset:   Optional[str] = None
    market:      Optional[str] = None
    create_time: int           = 0


class MiningDifficulty(_Payload):
    """Current trade-mining difficulty for the account's hour."""
    difficulty:  str
    prediction:  str
    update_time: int = 0
