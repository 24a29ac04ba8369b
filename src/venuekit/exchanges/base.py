"""Base class for venue adapters."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, ClassVar, Mapping

from pydantic import BaseModel

from ..errors import InvalidParameterError, ProtocolError, TranslationError, UnsupportedOperationError
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
from .info import ExchangeInfo, MarketPair
from .protocol import NativeRequest, TransportClient

logger = logging.getLogger(__name__)


class BaseExchange(ABC):
    """Base class for all venue adapters.

    An adapter owns one transport and one exchange-info cache and holds no
    per-call state, so one instance may serve concurrent callers. Nothing is
    retried here: retry and backoff belong to the caller or the transport, and
    transport exceptions (timeouts included) propagate unchanged.
    """

    name: ClassVar[str] = "base"
    order_id_type: ClassVar[type] = str
    trade_id_type: ClassVar[type] = str
    pagination_type: ClassVar[type] = str
    parameters_type: ClassVar[type[BaseModel]]
    supported_subscriptions: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, parameters: BaseModel, transport: TransportClient):
        """Initialize the adapter.

        Args:
            parameters: Venue-specific parameter model
            transport: Network client executing native requests
        """
        self.parameters = parameters
        self.transport = transport
        self.exchange_info = ExchangeInfo()

    @classmethod
    async def new(cls, parameters: BaseModel | Mapping[str, Any], transport: TransportClient) -> "BaseExchange":
        """Build an adapter from venue parameters.

        Args:
            parameters: Parameter model instance, or a mapping validated into one
            transport: Network client for this venue

        Returns:
            Adapter with an empty exchange-info cache
        """
        if not isinstance(parameters, cls.parameters_type):
            parameters = cls.parameters_type.model_validate(parameters)
        exchange = cls(parameters, transport)
        logger.info("Created %s adapter", cls.name)
        return exchange

    async def refresh_market_info(self) -> list[MarketPair]:
        return await self.exchange_info.refresh(self)

    def get_pair(self, symbol: str) -> MarketPair:
        return self.exchange_info.get_pair(symbol)

    async def close(self) -> None:
        """Close the transport."""
        await self.transport.close()

    async def _run(self, request: NativeRequest) -> Any:
        """Execute a native request and return the unwrapped payload."""
        return self.unwrap_response(await self._run_envelope(request))

    async def _run_envelope(self, request: NativeRequest) -> Mapping[str, Any]:
        if request.authenticated and getattr(self.parameters, "credentials", None) is None:
            raise InvalidParameterError(f"{self.name} {request.operation} requires credentials")
        logger.debug("%s request: %s %s", self.name, request.method, request.operation)
        envelope = await self.transport.run(request)
        if not isinstance(envelope, Mapping):
            raise TranslationError(
                f"{self.name} transport returned {type(envelope).__name__} instead of an envelope"
            )
        return envelope

    def unwrap_response(self, envelope: Mapping[str, Any]) -> Any:
        """Split a response-or-error envelope.

        Raises:
            ProtocolError: If the venue answered with an error
            TranslationError: If the envelope carries neither data nor error
        """
        error = envelope.get("error")
        if error is not None:
            raise ProtocolError(self.name, error)
        if "data" not in envelope:
            raise TranslationError(f"{self.name} response envelope has no 'data'")
        return envelope["data"]

    def unsupported(self, operation: str, reason: str | None = None) -> UnsupportedOperationError:
        return UnsupportedOperationError(self.name, operation, reason)

    async def subscribe(self, subscription: Subscription) -> AsyncIterator[WebSocketResponse]:
        """Subscribe to one logical stream.

        The subscription is mapped before the transport is touched, so an
        unsupported kind fails here rather than on the first message.

        Raises:
            UnsupportedOperationError: If the venue has no such stream
        """
        try:
            request = self.subscription_request(subscription)
        except UnsupportedOperationError:
            logger.warning("%s rejected subscription %s", self.name, subscription.kind)
            raise

        stream = await self.transport.subscribe(request)
        logger.info("%s subscribed to %s", self.name, subscription.kind)
        return self._normalize_stream(stream)

    async def _normalize_stream(
        self, stream: AsyncIterator[Mapping[str, Any]]
    ) -> AsyncIterator[WebSocketResponse]:
        async for message in stream:
            yield self.wrap_response(message)

    @classmethod
    @abstractmethod
    def subscription_request(cls, subscription: Subscription) -> NativeRequest:
        """Map a subscription onto the venue's subscribe request."""
        ...

    @classmethod
    @abstractmethod
    def wrap_response(cls, message: Mapping[str, Any]) -> WebSocketResponse:
        """Classify a native push message as generic or raw."""
        ...

    @abstractmethod
    async def retrieve_pairs(self) -> list[MarketPair]:
        """Fetch every tradable market pair from the venue."""
        ...

    @abstractmethod
    async def order_book(self, req: OrderBookRequest) -> OrderBookResponse:
        ...

    @abstractmethod
    async def get_price_ticker(self, req: GetPriceTickerRequest) -> Ticker:
        ...

    @abstractmethod
    async def get_trade_history(self, req: TradeHistoryRequest) -> list[Trade]:
        ...

    @abstractmethod
    async def get_historic_trades(self, req: GetHistoricTradesRequest) -> list[Trade]:
        ...

    @abstractmethod
    async def get_historic_rates(self, req: GetHistoricRatesRequest) -> list[Candle]:
        ...

    @abstractmethod
    async def limit_buy(self, req: OpenLimitOrderRequest) -> Order:
        ...

    @abstractmethod
    async def limit_sell(self, req: OpenLimitOrderRequest) -> Order:
        ...

    @abstractmethod
    async def market_buy(self, req: OpenMarketOrderRequest) -> Order:
        ...

    @abstractmethod
    async def market_sell(self, req: OpenMarketOrderRequest) -> Order:
        ...

    @abstractmethod
    async def cancel_order(self, req: CancelOrderRequest) -> OrderCanceled:
        ...

    @abstractmethod
    async def cancel_all_orders(self, req: CancelAllOrdersRequest) -> list[OrderCanceled]:
        ...

    @abstractmethod
    async def get_all_open_orders(self) -> list[Order]:
        ...

    @abstractmethod
    async def get_order_history(self, req: GetOrderHistoryRequest) -> list[Order]:
        ...

    @abstractmethod
    async def get_account_balances(self, paginator: Paginator | None = None) -> list[Balance]:
        ...

    @abstractmethod
    async def get_order(self, req: GetOrderRequest) -> Order:
        ...
