"""Streaming subscriptions and the messages they produce."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

from .model import OrderBookResponse, OrderStatus, OrderType, Side, Trade


class TimeRange(BaseModel):
    """Closed time window in epoch milliseconds."""

    start: int
    end: int

    model_config = {"frozen": True}


class AccountOrdersFilter(BaseModel):
    market: str | None = None
    order_types: list[OrderType] | None = None
    side: Side | None = None
    statuses: list[OrderStatus] | None = None
    range: TimeRange | None = None

    model_config = {"frozen": True}


class OrderBookUpdates(BaseModel):
    kind: Literal["order_book_updates"] = "order_book_updates"
    market: str

    model_config = {"frozen": True}


class Trades(BaseModel):
    kind: Literal["trades"] = "trades"
    market: str

    model_config = {"frozen": True}


class TickerUpdates(BaseModel):
    kind: Literal["ticker"] = "ticker"
    market: str

    model_config = {"frozen": True}


class AccountOrders(BaseModel):
    kind: Literal["account_orders"] = "account_orders"
    filter: AccountOrdersFilter = Field(default_factory=AccountOrdersFilter)

    model_config = {"frozen": True}


class AccountTrades(BaseModel):
    kind: Literal["account_trades"] = "account_trades"
    market: str

    model_config = {"frozen": True}


class AccountBalance(BaseModel):
    kind: Literal["account_balance"] = "account_balance"
    asset: str

    model_config = {"frozen": True}


class Heartbeat(BaseModel):
    kind: Literal["heartbeat"] = "heartbeat"
    market: str | None = None

    model_config = {"frozen": True}


class Status(BaseModel):
    kind: Literal["status"] = "status"

    model_config = {"frozen": True}


Subscription = Annotated[
    Union[
        OrderBookUpdates,
        Trades,
        TickerUpdates,
        AccountOrders,
        AccountTrades,
        AccountBalance,
        Heartbeat,
        Status,
    ],
    Field(discriminator="kind"),
]

SUBSCRIPTION_KINDS: dict[str, type[BaseModel]] = {
    "order_book_updates": OrderBookUpdates,
    "trades": Trades,
    "ticker": TickerUpdates,
    "account_orders": AccountOrders,
    "account_trades": AccountTrades,
    "account_balance": AccountBalance,
    "heartbeat": Heartbeat,
    "status": Status,
}


class OrderBookMessage(BaseModel):
    """Full order book snapshot."""

    kind: Literal["order_book"] = "order_book"
    book: OrderBookResponse

    model_config = {"frozen": True}


class OrderBookDiffMessage(BaseModel):
    """Incremental order book change; a zero quantity removes the level."""

    kind: Literal["order_book_diff"] = "order_book_diff"
    book: OrderBookResponse

    model_config = {"frozen": True}


class TradesMessage(BaseModel):
    kind: Literal["trades"] = "trades"
    trades: list[Trade]

    model_config = {"frozen": True}


class PingMessage(BaseModel):
    kind: Literal["ping"] = "ping"

    model_config = {"frozen": True}


NormalizedMessage = Annotated[
    Union[OrderBookMessage, OrderBookDiffMessage, TradesMessage, PingMessage],
    Field(discriminator="kind"),
]


class GenericResponse(BaseModel):
    """A push message that maps onto the shared vocabulary without loss."""

    message: NormalizedMessage

    model_config = {"frozen": True}


class RawResponse(BaseModel):
    """A venue-native push passed through untouched."""

    channel: str
    payload: Any

    model_config = {"frozen": True}


WebSocketResponse = Union[GenericResponse, RawResponse]


def build_subscription(kind: str, market: str | None = None) -> BaseModel:
    """Build a subscription from its ``kind`` name and an optional market or asset."""
    if kind not in SUBSCRIPTION_KINDS:
        supported = ", ".join(SUBSCRIPTION_KINDS)
        raise ValueError(f"Unknown subscription kind: {kind}. Known kinds: {supported}")

    if kind == "status":
        return Status()
    if kind == "heartbeat":
        return Heartbeat(market=market)
    if kind == "account_orders":
        return AccountOrders(filter=AccountOrdersFilter(market=market))
    if market is None:
        raise ValueError(f"Subscription kind {kind} requires a market")
    if kind == "account_balance":
        return AccountBalance(asset=market)
    return SUBSCRIPTION_KINDS[kind](market=market)
