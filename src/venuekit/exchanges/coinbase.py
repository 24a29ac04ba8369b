"""Coinbase exchange adapter."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, Mapping, Sequence

from pydantic import BaseModel, Field, SecretStr

from ..errors import InvalidParameterError, ProtocolError, TranslationError, UnsupportedOperationError
from ..model import (
    AskBid,
    Balance,
    CancelAllOrdersRequest,
    CancelOrderRequest,
    Candle,
    GetHistoricRatesRequest,
    GetHistoricTradesRequest,
    GetOrderHistoryRequest,
    GetOrderRequest,
    GetPriceTickerRequest,
    Interval,
    Liquidity,
    OpenLimitOrderRequest,
    OpenMarketOrderRequest,
    Order,
    OrderBookRequest,
    OrderBookResponse,
    OrderCanceled,
    OrderStatus,
    OrderType,
    Page,
    Paginator,
    Side,
    Ticker,
    TimeInForce,
    Trade,
    TradeHistoryRequest,
)
from ..websocket import (
    GenericResponse,
    Heartbeat,
    OrderBookDiffMessage,
    OrderBookMessage,
    OrderBookUpdates,
    PingMessage,
    RawResponse,
    Status,
    Subscription,
    TickerUpdates,
    Trades,
    TradesMessage,
    WebSocketResponse,
)
from .base import BaseExchange
from .info import MarketPair
from .normalization import (
    datetime_to_iso,
    decimal_to_native,
    midpoint,
    parse_decimal,
    parse_optional_decimal,
    require,
    to_millis,
)
from .pagination import NativePage, paginator_from_native, split_paginator
from .protocol import NativeRequest

logger = logging.getLogger(__name__)

MAX_PAGE_LIMIT = 1000

_ORDER_STATUS_TO_NATIVE: dict[OrderStatus, tuple[str, str | None]] = {
    OrderStatus.NEW: ("received", None),
    OrderStatus.PENDING: ("pending", None),
    OrderStatus.OPEN: ("open", None),
    OrderStatus.ACTIVE: ("active", None),
    OrderStatus.FILLED: ("done", "filled"),
    OrderStatus.CANCELED: ("done", "canceled"),
    OrderStatus.REJECTED: ("rejected", None),
}

# Values the /orders status filter accepts; other statuses are narrowed locally.
_FILTERABLE_STATUSES = frozenset({"open", "pending", "active", "done"})

_SIMPLE_STATUS_FROM_NATIVE = {
    "received": OrderStatus.NEW,
    "pending": OrderStatus.PENDING,
    "open": OrderStatus.OPEN,
    "active": OrderStatus.ACTIVE,
    "rejected": OrderStatus.REJECTED,
}

_DONE_REASON_FROM_NATIVE = {
    "filled": OrderStatus.FILLED,
    "canceled": OrderStatus.CANCELED,
}

_SIDE_TO_NATIVE = {Side.BUY: "buy", Side.SELL: "sell"}
_SIDE_FROM_NATIVE = {v: k for k, v in _SIDE_TO_NATIVE.items()}

_GRANULARITY = {
    Interval.ONE_MINUTE: 60,
    Interval.FIVE_MINUTES: 300,
    Interval.FIFTEEN_MINUTES: 900,
    Interval.ONE_HOUR: 3600,
    Interval.SIX_HOURS: 21600,
    Interval.ONE_DAY: 86400,
}

_TIME_IN_FORCE_TO_NATIVE = {
    TimeInForce.GOOD_TILL_CANCELLED: "GTC",
    TimeInForce.GOOD_TILL_TIME: "GTT",
    TimeInForce.IMMEDIATE_OR_CANCEL: "IOC",
    TimeInForce.FILL_OR_KILL: "FOK",
}

_CANCEL_AFTER = {
    timedelta(minutes=1): "min",
    timedelta(hours=1): "hour",
    timedelta(days=1): "day",
}

_RAW_MESSAGE_TYPES = frozenset({"ticker", "status", "subscriptions"})


class CoinbaseCredentials(BaseModel):
    api_key: SecretStr
    api_secret: SecretStr
    passphrase: SecretStr

    model_config = {"extra": "forbid"}


class CoinbaseParameters(BaseModel):
    """Construction parameters for the Coinbase adapter; all of them are read by the transport."""

    credentials: CoinbaseCredentials | None = None
    sandbox: bool = False
    timeout: float = Field(default=10.0, gt=0)

    model_config = {"extra": "forbid"}


def order_status_to_native(status: OrderStatus) -> tuple[str, str | None]:
    """Map a domain status to Coinbase's ``(status, done_reason)`` pair.

    Filled and canceled orders share the native ``done`` status and differ
    only by ``done_reason``.
    """
    try:
        return _ORDER_STATUS_TO_NATIVE[status]
    except KeyError:
        raise TranslationError(f"coinbase has no order status for {status.value}") from None


def order_status_from_native(status: str, done_reason: str | None = None) -> OrderStatus:
    if status == "done":
        try:
            return _DONE_REASON_FROM_NATIVE[done_reason]
        except KeyError:
            raise TranslationError(f"unknown coinbase done_reason {done_reason!r}") from None
    try:
        return _SIMPLE_STATUS_FROM_NATIVE[status]
    except KeyError:
        raise TranslationError(f"unknown coinbase order status {status!r}") from None


def order_type_from_native(order_type: str, stop: str | None = None) -> OrderType:
    if order_type == "limit":
        return OrderType.STOP_LIMIT if stop else OrderType.LIMIT
    if order_type == "market":
        return OrderType.STOP_MARKET if stop else OrderType.MARKET
    raise TranslationError(f"unknown coinbase order type {order_type!r}")


def side_to_native(side: Side) -> str:
    return _SIDE_TO_NATIVE[side]


def side_from_native(side: str) -> Side:
    try:
        return _SIDE_FROM_NATIVE[side]
    except KeyError:
        raise TranslationError(f"unknown coinbase side {side!r}") from None


def interval_to_granularity(interval: Interval) -> int:
    try:
        return _GRANULARITY[interval]
    except KeyError:
        raise TranslationError(f"coinbase has no candle granularity for {interval.value}") from None


def cancel_after_to_native(good_till: timedelta | None) -> str:
    """Coinbase only cancels GTT orders after one minute, one hour or one day."""
    try:
        return _CANCEL_AFTER[good_till]
    except KeyError:
        raise InvalidParameterError(
            f"coinbase good_till must be one minute, one hour or one day, got {good_till}"
        ) from None


def _opposite(side: Side) -> Side:
    return Side.SELL if side == Side.BUY else Side.BUY


def _levels(rows: Sequence[Any], context: str) -> list[AskBid]:
    levels = []
    for row in rows:
        if not isinstance(row, Sequence) or isinstance(row, str) or len(row) < 2:
            raise TranslationError(f"{context}: malformed price level {row!r}")
        levels.append(
            AskBid(price=parse_decimal(row[0], f"{context}.price"), qty=parse_decimal(row[1], f"{context}.size"))
        )
    return levels


def _market_pair(payload: Mapping[str, Any]) -> MarketPair:
    context = "product"
    return MarketPair(
        symbol=str(require(payload, "id", context)),
        base=str(require(payload, "base_currency", context)),
        quote=str(require(payload, "quote_currency", context)),
        base_increment=parse_decimal(require(payload, "base_increment", context), "base_increment"),
        quote_increment=parse_decimal(require(payload, "quote_increment", context), "quote_increment"),
        min_base_trade_size=parse_optional_decimal(payload.get("base_min_size"), "base_min_size"),
        min_quote_trade_size=parse_optional_decimal(payload.get("min_market_funds"), "min_market_funds"),
    )


def _fill(payload: Mapping[str, Any]) -> Trade:
    """Convert one of the account's own fills.

    Only the account's order id is known, so the counterparty's side of the
    buyer/seller pair stays None.
    """
    context = "fill"
    side = side_from_native(require(payload, "side", context))
    order_id = str(require(payload, "order_id", context))
    liquidity = require(payload, "liquidity", context)
    if liquidity == "M":
        liquidity = Liquidity.MAKER
    elif liquidity == "T":
        liquidity = Liquidity.TAKER
    else:
        raise TranslationError(f"unknown coinbase liquidity {liquidity!r}")

    return Trade(
        id=str(require(payload, "trade_id", context)),
        created_at=to_millis(require(payload, "created_at", context), "created_at"),
        market_pair=str(require(payload, "product_id", context)),
        price=parse_decimal(require(payload, "price", context), "price"),
        qty=parse_decimal(require(payload, "size", context), "size"),
        side=side,
        fees=parse_decimal(require(payload, "fee", context), "fee"),
        liquidity=liquidity,
        buyer_order_id=order_id if side == Side.BUY else None,
        seller_order_id=order_id if side == Side.SELL else None,
    )


def _public_trade(payload: Mapping[str, Any], market_pair: str | None = None) -> Trade:
    """Convert a public trade print or feed match.

    Coinbase reports the maker's side; the domain side is the taker's, so it
    is flipped. Maker and taker order ids are only present on feed matches.
    """
    context = "trade"
    maker_side = side_from_native(require(payload, "side", context))
    maker_order_id = payload.get("maker_order_id")
    taker_order_id = payload.get("taker_order_id")
    if maker_side == Side.BUY:
        buyer_order_id, seller_order_id = maker_order_id, taker_order_id
    else:
        buyer_order_id, seller_order_id = taker_order_id, maker_order_id

    return Trade(
        id=str(require(payload, "trade_id", context)),
        created_at=to_millis(require(payload, "time", context), "time"),
        market_pair=market_pair or str(require(payload, "product_id", context)),
        price=parse_decimal(require(payload, "price", context), "price"),
        qty=parse_decimal(require(payload, "size", context), "size"),
        side=_opposite(maker_side),
        buyer_order_id=str(buyer_order_id) if buyer_order_id is not None else None,
        seller_order_id=str(seller_order_id) if seller_order_id is not None else None,
    )


def _candle(row: Any) -> Candle:
    if not isinstance(row, Sequence) or isinstance(row, str) or len(row) != 6:
        raise TranslationError(f"malformed coinbase candle {row!r}")
    time, low, high, open_, close, volume = row
    if isinstance(time, bool) or not isinstance(time, int):
        raise TranslationError(f"coinbase candle time is not integer seconds: {time!r}")
    return Candle(
        time=time * 1000,
        open=parse_decimal(open_, "candle.open"),
        high=parse_decimal(high, "candle.high"),
        low=parse_decimal(low, "candle.low"),
        close=parse_decimal(close, "candle.close"),
        volume=parse_decimal(volume, "candle.volume"),
    )


def _order(payload: Mapping[str, Any], client_order_id: str | None = None) -> Order:
    """Convert a Coinbase order.

    Market orders placed by funds carry no ``size``; their size is the
    filled size reported so far. ``remaining`` is size minus filled size.
    Coinbase does not embed fills in orders, so ``trades`` is empty.
    """
    context = "order"
    filled_size = parse_optional_decimal(payload.get("filled_size"), "filled_size")
    size = parse_optional_decimal(payload.get("size"), "size")
    if size is None:
        size = filled_size
    if size is None:
        raise TranslationError("coinbase order has neither size nor filled_size")

    return Order(
        id=str(require(payload, "id", context)),
        market_pair=str(require(payload, "product_id", context)),
        client_order_id=payload.get("client_oid") or client_order_id,
        created_at=to_millis(require(payload, "created_at", context), "created_at"),
        order_type=order_type_from_native(require(payload, "type", context), payload.get("stop")),
        side=side_from_native(require(payload, "side", context)),
        status=order_status_from_native(require(payload, "status", context), payload.get("done_reason")),
        size=size,
        price=parse_optional_decimal(payload.get("price"), "price"),
        remaining=size - filled_size if filled_size is not None else None,
    )


def _l2update(payload: Mapping[str, Any]) -> OrderBookResponse:
    bids, asks = [], []
    for change in require(payload, "changes", "l2update"):
        if not isinstance(change, Sequence) or isinstance(change, str) or len(change) != 3:
            raise TranslationError(f"malformed coinbase l2update change {change!r}")
        side, price, size = change
        level = AskBid(price=parse_decimal(price, "l2update.price"), qty=parse_decimal(size, "l2update.size"))
        if side_from_native(side) == Side.BUY:
            bids.append(level)
        else:
            asks.append(level)
    return OrderBookResponse(bids=bids, asks=asks)


class CoinbaseExchange(BaseExchange):
    """Coinbase exchange adapter.

    Coinbase paginates with ``before``/``after`` cursors returned next to the
    data; ``after`` walks towards older records. List endpoints accept at most
    1000 items per page and no time window.
    """

    name = "coinbase"
    parameters_type = CoinbaseParameters
    supported_subscriptions = frozenset({"order_book_updates", "trades", "ticker", "heartbeat", "status"})

    parameters: CoinbaseParameters

    @staticmethod
    def _page(paginator: Paginator | None, operation: str) -> NativePage:
        page = split_paginator(paginator, exchange="coinbase", max_limit=MAX_PAGE_LIMIT)
        if page.range is not None:
            raise InvalidParameterError(f"coinbase {operation} cannot be filtered by time window")
        return page

    @staticmethod
    def _page_params(page: NativePage) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if page.before is not None:
            params["before"] = page.before
        if page.after is not None:
            params["after"] = page.after
        if page.limit is not None:
            params["limit"] = page.limit
        return params

    async def _run_page(self, request: NativeRequest, limit: int | None) -> tuple[Any, Paginator | None]:
        """Run a list request and return the data with the paginator for the next older page."""
        envelope = await self._run_envelope(request)
        data = self.unwrap_response(envelope)
        if not isinstance(data, list):
            raise TranslationError(f"coinbase {request.operation} did not return a list")
        if not data:
            return data, None
        cursors = envelope.get("pagination") or {}
        return data, paginator_from_native(after=cursors.get("after"), limit=limit)

    async def retrieve_pairs(self) -> list[MarketPair]:
        products = await self._run(NativeRequest("/products"))
        return [_market_pair(product) for product in products]

    # Market data

    async def order_book(self, req: OrderBookRequest) -> OrderBookResponse:
        """Level 2 book; ``last_update_id`` is the feed sequence and there is no ``update_id``."""
        data = await self._run(NativeRequest(f"/products/{req.market_pair}/book", {"level": 2}))
        sequence = require(data, "sequence", "book")
        if isinstance(sequence, bool) or not isinstance(sequence, int):
            raise TranslationError(f"coinbase book sequence is not an integer: {sequence!r}")
        return OrderBookResponse(
            last_update_id=sequence,
            bids=_levels(data.get("bids") or [], "book.bids"),
            asks=_levels(data.get("asks") or [], "book.asks"),
        )

    async def get_price_ticker(self, req: GetPriceTickerRequest) -> Ticker:
        ticker = await self._run(NativeRequest(f"/products/{req.market_pair}/ticker"))
        stats = await self._run(NativeRequest(f"/products/{req.market_pair}/stats"))

        bid = parse_optional_decimal(ticker.get("bid"), "bid")
        ask = parse_optional_decimal(ticker.get("ask"), "ask")
        high = parse_optional_decimal(stats.get("high"), "high")
        low = parse_optional_decimal(stats.get("low"), "low")
        return Ticker(
            price=midpoint(bid, ask) if bid is not None and ask is not None else None,
            price_24h=midpoint(high, low) if high is not None and low is not None else None,
        )

    async def get_trade_history(self, req: TradeHistoryRequest) -> list[Trade]:
        return (await self.get_trade_history_page(req)).items

    async def get_trade_history_page(self, req: TradeHistoryRequest) -> Page[Trade]:
        """Account fills with the cursor for the next older page."""
        if req.market_pair is None and req.order_id is None:
            raise InvalidParameterError("coinbase fills need a market_pair or an order_id")
        page = self._page(req.paginator, "fills")
        params = self._page_params(page)
        if req.market_pair is not None:
            params["product_id"] = req.market_pair
        if req.order_id is not None:
            params["order_id"] = req.order_id

        data, next_page = await self._run_page(NativeRequest("/fills", params, authenticated=True), page.limit)
        return Page[Trade](items=[_fill(fill) for fill in data], next=next_page)

    async def get_historic_trades(self, req: GetHistoricTradesRequest) -> list[Trade]:
        page = self._page(req.paginator, "trades")
        data, _ = await self._run_page(
            NativeRequest(f"/products/{req.market_pair}/trades", self._page_params(page)),
            page.limit,
        )
        return [_public_trade(trade, req.market_pair) for trade in data]

    async def get_historic_rates(self, req: GetHistoricRatesRequest) -> list[Candle]:
        page = split_paginator(req.paginator, exchange="coinbase", max_limit=MAX_PAGE_LIMIT)
        if page.has_cursor or page.limit is not None:
            raise InvalidParameterError("coinbase candles take a time window only, no cursor or limit")

        params: dict[str, Any] = {"granularity": interval_to_granularity(req.interval)}
        if page.range is not None:
            params["start"] = datetime_to_iso(page.range.start)
            params["end"] = datetime_to_iso(page.range.stop)

        rows = await self._run(NativeRequest(f"/products/{req.market_pair}/candles", params))
        return [_candle(row) for row in rows]

    # Account

    async def limit_buy(self, req: OpenLimitOrderRequest) -> Order:
        return await self._place_limit_order(req, Side.BUY)

    async def limit_sell(self, req: OpenLimitOrderRequest) -> Order:
        return await self._place_limit_order(req, Side.SELL)

    async def market_buy(self, req: OpenMarketOrderRequest) -> Order:
        return await self._place_market_order(req, Side.BUY)

    async def market_sell(self, req: OpenMarketOrderRequest) -> Order:
        return await self._place_market_order(req, Side.SELL)

    async def _place_limit_order(self, req: OpenLimitOrderRequest, side: Side) -> Order:
        if req.post_only and req.time_in_force in (TimeInForce.IMMEDIATE_OR_CANCEL, TimeInForce.FILL_OR_KILL):
            raise InvalidParameterError("coinbase post_only orders must rest on the book (GTC or GTT)")

        body: dict[str, Any] = {
            "type": "limit",
            "side": side_to_native(side),
            "product_id": req.market_pair,
            "price": decimal_to_native(req.price),
            "size": decimal_to_native(req.size),
            "time_in_force": _TIME_IN_FORCE_TO_NATIVE[req.time_in_force],
            "post_only": req.post_only,
        }
        if req.time_in_force == TimeInForce.GOOD_TILL_TIME:
            body["cancel_after"] = cancel_after_to_native(req.good_till)
        elif req.good_till is not None:
            raise InvalidParameterError("good_till only applies to good_till_time orders")
        if req.client_order_id is not None:
            body["client_oid"] = req.client_order_id

        data = await self._run(NativeRequest("/orders", body, authenticated=True, method="POST"))
        return _order(data, req.client_order_id)

    async def _place_market_order(self, req: OpenMarketOrderRequest, side: Side) -> Order:
        body: dict[str, Any] = {
            "type": "market",
            "side": side_to_native(side),
            "product_id": req.market_pair,
            "size": decimal_to_native(req.size),
        }
        if req.client_order_id is not None:
            body["client_oid"] = req.client_order_id

        data = await self._run(NativeRequest("/orders", body, authenticated=True, method="POST"))
        return _order(data, req.client_order_id)

    async def cancel_order(self, req: CancelOrderRequest) -> OrderCanceled:
        params = {"product_id": req.market_pair} if req.market_pair is not None else {}
        data = await self._run(NativeRequest(f"/orders/{req.id}", params, authenticated=True, method="DELETE"))
        return OrderCanceled(id=str(data))

    async def cancel_all_orders(self, req: CancelAllOrdersRequest) -> list[OrderCanceled]:
        params = {"product_id": req.market_pair} if req.market_pair is not None else {}
        data = await self._run(NativeRequest("/orders", params, authenticated=True, method="DELETE"))
        return [OrderCanceled(id=str(order_id)) for order_id in data]

    async def get_all_open_orders(self) -> list[Order]:
        statuses = [order_status_to_native(s)[0] for s in (OrderStatus.OPEN, OrderStatus.PENDING, OrderStatus.ACTIVE)]
        orders: list[Order] = []
        seen_cursors: set[str] = set()
        paginator: Paginator | None = Paginator(limit=MAX_PAGE_LIMIT)
        while paginator is not None:
            page = await self._list_orders(paginator, statuses=statuses)
            orders.extend(page.items)
            if page.next is not None:
                cursor = page.next.after
                if cursor in seen_cursors:
                    raise TranslationError(f"coinbase repeated pagination cursor {cursor!r}")
                seen_cursors.add(cursor)
            paginator = page.next
        logger.debug("coinbase has %d open orders", len(orders))
        return orders

    async def get_order_history(self, req: GetOrderHistoryRequest) -> list[Order]:
        return (await self.get_order_history_page(req)).items

    async def get_order_history_page(self, req: GetOrderHistoryRequest) -> Page[Order]:
        """Orders with the cursor for the next older page.

        Filled and canceled both query native ``done``; the result is narrowed
        to the requested statuses by ``done_reason``. Statuses the native filter
        cannot express (received, rejected) query ``all`` and are narrowed the
        same way. A narrowed page may hold fewer items than the limit while
        more pages remain.
        """
        if req.order_status is None:
            return await self._list_orders(req.paginator, statuses=["all"], market=req.market_pair)

        statuses = []
        for status in req.order_status:
            native, _ = order_status_to_native(status)
            if native not in statuses:
                statuses.append(native)
        if not _FILTERABLE_STATUSES.issuperset(statuses):
            statuses = ["all"]

        page = await self._list_orders(req.paginator, statuses=statuses, market=req.market_pair)
        wanted = set(req.order_status)
        return Page[Order](items=[o for o in page.items if o.status in wanted], next=page.next)

    async def _list_orders(
        self,
        paginator: Paginator | None,
        *,
        statuses: list[str],
        market: str | None = None,
    ) -> Page[Order]:
        page = self._page(paginator, "orders")
        params = self._page_params(page)
        params["status"] = statuses
        if market is not None:
            params["product_id"] = market

        data, next_page = await self._run_page(NativeRequest("/orders", params, authenticated=True), page.limit)
        return Page[Order](items=[_order(order) for order in data], next=next_page)

    async def get_account_balances(self, paginator: Paginator | None = None) -> list[Balance]:
        """Balances per currency; ``hold`` is the amount reserved by open orders."""
        if paginator is not None and paginator != Paginator():
            raise InvalidParameterError("coinbase does not paginate account balances")

        accounts = await self._run(NativeRequest("/accounts", authenticated=True))
        return [
            Balance.from_free_and_in_orders(
                asset=str(require(account, "currency", "account")),
                free=parse_decimal(require(account, "available", "account"), "available"),
                in_orders=parse_decimal(require(account, "hold", "account"), "hold"),
            )
            for account in accounts
        ]

    async def get_order(self, req: GetOrderRequest) -> Order:
        data = await self._run(NativeRequest(f"/orders/{req.id}", authenticated=True))
        return _order(data)

    # Streaming

    @classmethod
    def subscription_request(cls, subscription: Subscription) -> NativeRequest:
        if isinstance(subscription, OrderBookUpdates):
            return cls._feed_subscribe("level2", [subscription.market])
        if isinstance(subscription, Trades):
            return cls._feed_subscribe("matches", [subscription.market])
        if isinstance(subscription, TickerUpdates):
            return cls._feed_subscribe("ticker", [subscription.market])
        if isinstance(subscription, Heartbeat):
            if subscription.market is None:
                raise InvalidParameterError("coinbase heartbeat subscriptions need a market")
            return cls._feed_subscribe("heartbeat", [subscription.market])
        if isinstance(subscription, Status):
            return cls._feed_subscribe("status", [])
        raise UnsupportedOperationError(cls.name, f"{subscription.kind} subscriptions")

    @staticmethod
    def _feed_subscribe(channel: str, product_ids: list[str]) -> NativeRequest:
        params: dict[str, Any] = {"type": "subscribe", "channels": [channel]}
        if product_ids:
            params["product_ids"] = product_ids
        return NativeRequest("subscribe", params)

    @classmethod
    def wrap_response(cls, message: Mapping[str, Any]) -> WebSocketResponse:
        """Book snapshots, book updates, matches and heartbeats are normalized; other feed messages pass through."""
        message_type = require(message, "type", "coinbase feed message")

        if message_type == "error":
            raise ProtocolError(cls.name, dict(message))
        if message_type == "snapshot":
            book = OrderBookResponse(
                bids=_levels(message.get("bids") or [], "snapshot.bids"),
                asks=_levels(message.get("asks") or [], "snapshot.asks"),
            )
            return GenericResponse(message=OrderBookMessage(book=book))
        if message_type == "l2update":
            return GenericResponse(message=OrderBookDiffMessage(book=_l2update(message)))
        if message_type in ("match", "last_match"):
            return GenericResponse(message=TradesMessage(trades=[_public_trade(message)]))
        if message_type == "heartbeat":
            return GenericResponse(message=PingMessage())
        if message_type in _RAW_MESSAGE_TYPES:
            return RawResponse(channel=message_type, payload=message)
        raise TranslationError(f"unknown coinbase feed message type {message_type!r}")
