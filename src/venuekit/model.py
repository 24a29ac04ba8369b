"""Exchange-agnostic domain values.

Every identifier (order id, trade id, pagination cursor) is an opaque string
regardless of the venue that issued it. Monetary and quantity fields are
``Decimal`` and are never produced through binary floating point.
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Side(Enum):
    """Order or trade direction."""

    BUY = "buy"
    SELL = "sell"


class OrderType(Enum):
    LIMIT = "limit"
    MARKET = "market"
    STOP_LIMIT = "stop_limit"
    STOP_MARKET = "stop_market"
    UNKNOWN = "unknown"


class OrderStatus(Enum):
    NEW = "new"
    OPEN = "open"
    ACTIVE = "active"
    PARTIALLY_FILLED = "partially_filled"
    FILLED = "filled"
    CANCELED = "canceled"
    PENDING = "pending"
    PENDING_CANCEL = "pending_cancel"
    REJECTED = "rejected"
    EXPIRED = "expired"


class Liquidity(Enum):
    MAKER = "maker"
    TAKER = "taker"


class TimeInForce(Enum):
    GOOD_TILL_CANCELLED = "good_till_cancelled"
    IMMEDIATE_OR_CANCEL = "immediate_or_cancel"
    FILL_OR_KILL = "fill_or_kill"
    GOOD_TILL_TIME = "good_till_time"


class Interval(Enum):
    """Candle interval."""

    ONE_MINUTE = "1m"
    THREE_MINUTES = "3m"
    FIVE_MINUTES = "5m"
    FIFTEEN_MINUTES = "15m"
    THIRTY_MINUTES = "30m"
    ONE_HOUR = "1h"
    TWO_HOURS = "2h"
    FOUR_HOURS = "4h"
    SIX_HOURS = "6h"
    EIGHT_HOURS = "8h"
    TWELVE_HOURS = "12h"
    ONE_DAY = "1d"
    THREE_DAYS = "3d"
    ONE_WEEK = "1w"
    ONE_MONTH = "1M"


class Paginator(BaseModel):
    """Generic pagination request.

    ``before`` and ``after`` are venue-defined cursors and are passed through
    untouched. ``start_time`` and ``end_time`` are epoch milliseconds and must be
    given together.
    """

    before: str | None = None
    after: str | None = None
    limit: int | None = None
    start_time: int | None = None
    end_time: int | None = None

    model_config = {"frozen": True}


class Page(BaseModel, Generic[T]):
    """One page of results plus the paginator that continues from it."""

    items: list[T] = Field(default_factory=list)
    next: Paginator | None = None

    model_config = {"frozen": True}


class AskBid(BaseModel):
    price: Decimal
    qty: Decimal

    model_config = {"frozen": True}


class OrderBookRequest(BaseModel):
    market_pair: str

    model_config = {"frozen": True}


class OrderBookResponse(BaseModel):
    update_id: int | None = None
    last_update_id: int | None = None
    bids: list[AskBid] = Field(default_factory=list)
    asks: list[AskBid] = Field(default_factory=list)

    model_config = {"frozen": True}


class GetPriceTickerRequest(BaseModel):
    market_pair: str

    model_config = {"frozen": True}


class Ticker(BaseModel):
    """Price snapshot.

    ``price`` is the midpoint of best bid and best ask, ``price_24h`` the
    midpoint of the 24 hour high and low. Either is ``None`` when one of its
    inputs is missing.
    """

    price: Decimal | None = None
    price_24h: Decimal | None = None

    model_config = {"frozen": True}


class Trade(BaseModel):
    id: str
    created_at: int
    market_pair: str
    price: Decimal
    qty: Decimal
    side: Side
    fees: Decimal | None = None
    liquidity: Liquidity | None = None
    buyer_order_id: str | None = None
    seller_order_id: str | None = None

    model_config = {"frozen": True}


class Order(BaseModel):
    id: str
    market_pair: str
    order_type: OrderType
    side: Side
    status: OrderStatus
    size: Decimal
    client_order_id: str | None = None
    created_at: int | None = None
    price: Decimal | None = None
    remaining: Decimal | None = None
    trades: list[Trade] = Field(default_factory=list)

    model_config = {"frozen": True}


class OrderCanceled(BaseModel):
    id: str

    model_config = {"frozen": True}


class Candle(BaseModel):
    time: int
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: Decimal

    model_config = {"frozen": True}


class Balance(BaseModel):
    asset: str
    total: Decimal
    free: Decimal

    model_config = {"frozen": True}

    @property
    def in_orders(self) -> Decimal:
        return self.total - self.free

    @classmethod
    def from_free_and_in_orders(cls, asset: str, free: Decimal, in_orders: Decimal) -> "Balance":
        """Build a balance from the available and reserved figures a venue reports separately."""
        return cls(asset=asset, total=free + in_orders, free=free)


class TradeHistoryRequest(BaseModel):
    market_pair: str | None = None
    order_id: str | None = None
    paginator: Paginator | None = None

    model_config = {"frozen": True}


class GetHistoricTradesRequest(BaseModel):
    market_pair: str
    paginator: Paginator | None = None

    model_config = {"frozen": True}


class GetHistoricRatesRequest(BaseModel):
    market_pair: str
    interval: Interval
    paginator: Paginator | None = None

    model_config = {"frozen": True}


class OpenLimitOrderRequest(BaseModel):
    market_pair: str
    size: Decimal
    price: Decimal
    time_in_force: TimeInForce = TimeInForce.GOOD_TILL_CANCELLED
    good_till: timedelta | None = None
    post_only: bool = False
    client_order_id: str | None = None

    model_config = {"frozen": True}


class OpenMarketOrderRequest(BaseModel):
    market_pair: str
    size: Decimal
    client_order_id: str | None = None

    model_config = {"frozen": True}


class CancelOrderRequest(BaseModel):
    id: str
    market_pair: str | None = None

    model_config = {"frozen": True}


class CancelAllOrdersRequest(BaseModel):
    market_pair: str | None = None

    model_config = {"frozen": True}


class GetOrderHistoryRequest(BaseModel):
    market_pair: str | None = None
    order_status: list[OrderStatus] | None = None
    paginator: Paginator | None = None

    model_config = {"frozen": True}


class GetOrderRequest(BaseModel):
    id: str
    market_pair: str | None = None

    model_config = {"frozen": True}
