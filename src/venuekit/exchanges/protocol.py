"""Capability interfaces implemented by venue adapters, and the transport they drive."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, AsyncIterator, ClassVar, Mapping, Protocol, runtime_checkable

from ..model import (
    Balance,
    CancelAllOrdersRequest,
    CancelOrderRequest,
    Candle,
    GetHistoricRatesRequest,
    GetHistoricTradesRequest,
    GetOrderHistoryRequest,
    GetOrderRequest,
    GetPriceTickerRequest,
    OpenLimitOrderRequest,
    OpenMarketOrderRequest,
    Order,
    OrderBookRequest,
    OrderBookResponse,
    OrderCanceled,
    Paginator,
    Ticker,
    Trade,
    TradeHistoryRequest,
)
from ..websocket import Subscription, WebSocketResponse
from .info import MarketPair


@dataclass(frozen=True)
class NativeRequest:
    """A request in the venue's own vocabulary, handed to the transport as is.

    Attributes:
        operation: Native operation name (Nash) or REST path (Coinbase)
        params: Native parameters, already translated
        authenticated: Whether the transport must sign the request
        method: HTTP method for REST venues
    """

    operation: str
    params: dict[str, Any] = field(default_factory=dict)
    authenticated: bool = False
    method: str = "GET"


@runtime_checkable
class TransportClient(Protocol):
    """Network client for one venue.

    Signing, session keepalive and timeouts are the transport's business; the
    adapters only call these three methods.
    """

    async def run(self, request: NativeRequest) -> Mapping[str, Any]:
        """Execute a request and return the envelope.

        The envelope holds ``data`` on success or ``error`` with the native
        error payload, and optionally ``pagination`` with ``before``/``after``
        cursors. Numbers must be decoded with ``parse_float=decimal.Decimal``.
        """
        ...

    async def subscribe(self, request: NativeRequest) -> AsyncIterator[Mapping[str, Any]]:
        """Open a subscription and return the stream of native push messages."""
        ...

    async def close(self) -> None:
        ...


@runtime_checkable
class ExchangeSpec(Protocol):
    """Identifier types a venue uses.

    Every venue uses opaque strings for order ids, trade ids and pagination
    cursors, so callers never depend on a venue-specific id type.
    """

    name: ClassVar[str]
    order_id_type: ClassVar[type]
    trade_id_type: ClassVar[type]
    pagination_type: ClassVar[type]


@runtime_checkable
class ExchangeMarketData(Protocol):
    """Read-only market queries."""

    async def order_book(self, req: OrderBookRequest) -> OrderBookResponse:
        ...

    async def get_price_ticker(self, req: GetPriceTickerRequest) -> Ticker:
        ...

    async def get_trade_history(self, req: TradeHistoryRequest) -> list[Trade]:
        ...

    async def get_historic_trades(self, req: GetHistoricTradesRequest) -> list[Trade]:
        ...

    async def get_historic_rates(self, req: GetHistoricRatesRequest) -> list[Candle]:
        ...


@runtime_checkable
class ExchangeAccount(Protocol):
    """Authenticated trading operations.

    Abandoning an in-flight placement gives no guarantee the order was not
    placed; reconcile with ``get_order`` or ``get_all_open_orders``.
    """

    async def limit_buy(self, req: OpenLimitOrderRequest) -> Order:
        ...

    async def limit_sell(self, req: OpenLimitOrderRequest) -> Order:
        ...

    async def market_buy(self, req: OpenMarketOrderRequest) -> Order:
        ...

    async def market_sell(self, req: OpenMarketOrderRequest) -> Order:
        ...

    async def cancel_order(self, req: CancelOrderRequest) -> OrderCanceled:
        ...

    async def cancel_all_orders(self, req: CancelAllOrdersRequest) -> list[OrderCanceled]:
        ...

    async def get_all_open_orders(self) -> list[Order]:
        ...

    async def get_order_history(self, req: GetOrderHistoryRequest) -> list[Order]:
        ...

    async def get_account_balances(self, paginator: Paginator | None = None) -> list[Balance]:
        ...

    async def get_order(self, req: GetOrderRequest) -> Order:
        ...


@runtime_checkable
class Exchange(Protocol):
    """Lifecycle of a venue adapter."""

    @classmethod
    async def new(cls, parameters: Any, transport: TransportClient) -> Exchange:
        ...

    async def retrieve_pairs(self) -> list[MarketPair]:
        ...

    async def refresh_market_info(self) -> list[MarketPair]:
        ...

    def get_pair(self, symbol: str) -> MarketPair:
        ...

    async def subscribe(self, subscription: Subscription) -> AsyncIterator[WebSocketResponse]:
        ...

    async def close(self) -> None:
        ...
