"""Nash exchange adapter."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Literal, Mapping

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
    AccountBalance,
    AccountOrders,
    AccountOrdersFilter,
    AccountTrades,
    GenericResponse,
    OrderBookMessage,
    OrderBookUpdates,
    RawResponse,
    Subscription,
    Trades,
    TradesMessage,
    WebSocketResponse,
)
from .base import BaseExchange
from .info import MarketPair
from .normalization import (
    datetime_to_iso,
    decimal_to_native,
    inverse_market,
    midpoint,
    millis_to_iso,
    parse_decimal,
    precision_to_increment,
    require,
    to_millis,
)
from .pagination import I64_MAX, NativePage, paginator_from_native, split_paginator
from .protocol import NativeRequest

logger = logging.getLogger(__name__)

MARKET_SEPARATOR = "_"
OPEN_ORDERS_PAGE_LIMIT = 100

_ORDER_STATUS_TO_NATIVE = {
    OrderStatus.OPEN: "OPEN",
    OrderStatus.FILLED: "FILLED",
    OrderStatus.CANCELED: "CANCELLED",
    OrderStatus.PENDING: "PENDING",
}
_ORDER_STATUS_FROM_NATIVE = {v: k for k, v in _ORDER_STATUS_TO_NATIVE.items()}

_ORDER_TYPE_TO_NATIVE = {
    OrderType.LIMIT: "LIMIT",
    OrderType.MARKET: "MARKET",
    OrderType.STOP_LIMIT: "STOP_LIMIT",
    OrderType.STOP_MARKET: "STOP_MARKET",
}
_ORDER_TYPE_FROM_NATIVE = {v: k for k, v in _ORDER_TYPE_TO_NATIVE.items()}

_SIDE_TO_NATIVE = {Side.BUY: "BUY", Side.SELL: "SELL"}
_SIDE_FROM_NATIVE = {v: k for k, v in _SIDE_TO_NATIVE.items()}

_INTERVAL_TO_NATIVE = {
    Interval.ONE_MINUTE: "ONE_MINUTE",
    Interval.FIVE_MINUTES: "FIVE_MINUTE",
    Interval.FIFTEEN_MINUTES: "FIFTEEN_MINUTE",
    Interval.THIRTY_MINUTES: "THIRTY_MINUTE",
    Interval.ONE_HOUR: "ONE_HOUR",
    Interval.SIX_HOURS: "SIX_HOUR",
    Interval.TWELVE_HOURS: "TWELVE_HOUR",
    Interval.ONE_DAY: "ONE_DAY",
}

_TIME_IN_FORCE_TO_NATIVE = {
    TimeInForce.GOOD_TILL_CANCELLED: "GOOD_TIL_CANCELLED",
    TimeInForce.FILL_OR_KILL: "FILL_OR_KILL",
    TimeInForce.IMMEDIATE_OR_CANCEL: "IMMEDIATE_OR_CANCEL",
    TimeInForce.GOOD_TILL_TIME: "GOOD_TIL_TIME",
}

# Push channels that map onto the shared vocabulary; everything else is passed through.
_RAW_CHANNELS = frozenset(
    {"updatedTicker", "newAccountTrades", "updatedAccountOrders", "updatedAccountBalances"}
)


class NashCredentials(BaseModel):
    secret: SecretStr
    session: SecretStr

    model_config = {"extra": "forbid"}


class NashParameters(BaseModel):
    """Construction parameters for the Nash adapter.

    Everything except ``emulate_market_buy`` is consumed by the transport,
    which owns signing and its background sign-states and fill-pool loops.
    """

    credentials: NashCredentials | None = None
    affiliate_code: str | None = None
    turn_off_sign_states: bool = False
    sign_states_loop_interval: float | None = Field(default=None, gt=0)
    fill_pool_loop_interval: float | None = Field(default=None, gt=0)
    fill_pool_loop_blockchains: list[str] | None = None
    client_id: int = 1
    environment: Literal["production", "sandbox", "dev"] = "sandbox"
    timeout: float = Field(default=10.0, gt=0)
    emulate_market_buy: bool = False

    model_config = {"extra": "forbid"}


def order_status_to_native(status: OrderStatus) -> str:
    try:
        return _ORDER_STATUS_TO_NATIVE[status]
    except KeyError:
        raise TranslationError(f"nash has no order status for {status.value}") from None


def order_status_from_native(status: str) -> OrderStatus:
    try:
        return _ORDER_STATUS_FROM_NATIVE[status]
    except KeyError:
        raise TranslationError(f"unknown nash order status {status!r}") from None


def order_type_to_native(order_type: OrderType) -> str:
    try:
        return _ORDER_TYPE_TO_NATIVE[order_type]
    except KeyError:
        raise TranslationError(f"nash has no order type for {order_type.value}") from None


def order_type_from_native(order_type: str) -> OrderType:
    try:
        return _ORDER_TYPE_FROM_NATIVE[order_type]
    except KeyError:
        raise TranslationError(f"unknown nash order type {order_type!r}") from None


def side_to_native(side: Side) -> str:
    return _SIDE_TO_NATIVE[side]


def side_from_native(side: str) -> Side:
    try:
        return _SIDE_FROM_NATIVE[side]
    except KeyError:
        raise TranslationError(f"unknown nash side {side!r}") from None


def interval_to_native(interval: Interval) -> str:
    try:
        return _INTERVAL_TO_NATIVE[interval]
    except KeyError:
        raise TranslationError(f"nash has no candle interval for {interval.value}") from None


def _amount(payload: Any, key: str, context: str) -> Decimal:
    """Read a Nash money field, either ``{"amount": "1.5", ...}`` or a bare numeric string."""
    value = require(payload, key, context)
    if isinstance(value, Mapping):
        value = require(value, "amount", f"{context}.{key}")
    return parse_decimal(value, f"{context}.{key}")


def _optional_amount(payload: Mapping[str, Any], key: str, context: str) -> Decimal | None:
    if payload.get(key) is None:
        return None
    return _amount(payload, key, context)


def _market_name(payload: Mapping[str, Any], context: str) -> str:
    market = require(payload, "market", context)
    if isinstance(market, Mapping):
        return str(require(market, "name", f"{context}.market"))
    return str(market)


def _int_field(payload: Mapping[str, Any], key: str, context: str) -> int:
    value = require(payload, key, context)
    if isinstance(value, bool):
        raise TranslationError(f"{context}: field '{key}' is not an integer")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise TranslationError(f"{context}: field '{key}' is not an integer: {value!r}") from exc


def _page_params(page: NativePage) -> dict[str, Any]:
    params: dict[str, Any] = {}
    if page.before is not None:
        params["before"] = page.before
    if page.limit is not None:
        params["limit"] = page.limit
    if page.range is not None:
        params["range"] = {
            "start": datetime_to_iso(page.range.start),
            "stop": datetime_to_iso(page.range.stop),
        }
    return params


def _ask_bid(entry: Mapping[str, Any]) -> AskBid:
    return AskBid(
        price=_amount(entry, "price", "orderbook level"),
        qty=_amount(entry, "amount", "orderbook level"),
    )


def _order_book(payload: Mapping[str, Any]) -> OrderBookResponse:
    return OrderBookResponse(
        update_id=_int_field(payload, "updateId", "orderbook"),
        last_update_id=_int_field(payload, "lastUpdateId", "orderbook"),
        bids=[_ask_bid(level) for level in payload.get("bids") or []],
        asks=[_ask_bid(level) for level in payload.get("asks") or []],
    )


def _trade(payload: Mapping[str, Any]) -> Trade:
    """Convert a Nash trade.

    Fees follow the account side: the taker fee for taker fills, zero for maker
    fills (Nash charges makers nothing), and unknown for public prints that carry
    no account side. Buyer and seller order ids are derived from the taker's
    direction.
    """
    context = "trade"
    side = side_from_native(require(payload, "direction", context))
    maker_order_id = payload.get("makerOrderId")
    taker_order_id = payload.get("takerOrderId")
    if side == Side.BUY:
        buyer_order_id, seller_order_id = taker_order_id, maker_order_id
    else:
        buyer_order_id, seller_order_id = maker_order_id, taker_order_id

    account_side = payload.get("accountSide")
    if account_side == "TAKER":
        liquidity = Liquidity.TAKER
        fees = _amount(payload, "takerFee", context)
    elif account_side == "MAKER":
        liquidity = Liquidity.MAKER
        fees = Decimal(0)
    elif account_side in (None, "NONE"):
        liquidity = None
        fees = None
    else:
        raise TranslationError(f"unknown nash account side {account_side!r}")

    return Trade(
        id=str(require(payload, "id", context)),
        created_at=to_millis(require(payload, "executedAt", context), "executedAt"),
        market_pair=_market_name(payload, context),
        price=_amount(payload, "limitPrice", context),
        qty=_amount(payload, "amount", context),
        side=side,
        fees=fees,
        liquidity=liquidity,
        buyer_order_id=str(buyer_order_id) if buyer_order_id is not None else None,
        seller_order_id=str(seller_order_id) if seller_order_id is not None else None,
    )


def _order(payload: Mapping[str, Any]) -> Order:
    """Convert a Nash order. Nash does not echo client order ids, so that field is None."""
    context = "order"
    return Order(
        id=str(require(payload, "id", context)),
        market_pair=_market_name(payload, context),
        created_at=to_millis(require(payload, "placedAt", context), "placedAt"),
        order_type=order_type_from_native(require(payload, "type", context)),
        side=side_from_native(require(payload, "buyOrSell", context)),
        status=order_status_from_native(require(payload, "status", context)),
        size=_amount(payload, "amountPlaced", context),
        price=_optional_amount(payload, "limitPrice", context),
        remaining=_amount(payload, "amountRemaining", context),
        trades=[_trade(trade) for trade in payload.get("trades") or []],
    )


def _candle(payload: Mapping[str, Any]) -> Candle:
    context = "candle"
    return Candle(
        time=to_millis(require(payload, "intervalStarting", context), "intervalStarting"),
        open=_amount(payload, "openPrice", context),
        high=_amount(payload, "highPrice", context),
        low=_amount(payload, "lowPrice", context),
        close=_amount(payload, "closePrice", context),
        volume=_amount(payload, "aVolume", context),
    )


def _midpoint(payload: Mapping[str, Any], first: str, second: str) -> Decimal | None:
    a = _optional_amount(payload, first, "ticker")
    b = _optional_amount(payload, second, "ticker")
    if a is None or b is None:
        return None
    return midpoint(a, b)


def _ticker(payload: Mapping[str, Any]) -> Ticker:
    return Ticker(
        price=_midpoint(payload, "bestBidPrice", "bestAskPrice"),
        price_24h=_midpoint(payload, "highPrice24h", "lowPrice24h"),
    )


def _market_pair(payload: Mapping[str, Any]) -> MarketPair:
    context = "market"
    base_precision = _int_field(payload, "aUnitPrecision", context)
    quote_precision = _int_field(payload, "bUnitPrecision", context)
    return MarketPair(
        symbol=str(require(payload, "name", context)),
        base=str(require(payload, "aUnit", context)),
        quote=str(require(payload, "bUnit", context)),
        base_increment=precision_to_increment(base_precision),
        quote_increment=precision_to_increment(quote_precision),
        min_base_trade_size=_amount(payload, "minTradeSize", context),
        min_quote_trade_size=_amount(payload, "minTradeSizeB", context),
    )


def _account_orders_filter(filter: AccountOrdersFilter) -> dict[str, Any]:
    params: dict[str, Any] = {}
    if filter.market is not None:
        params["marketName"] = filter.market
    if filter.order_types is not None:
        params["type"] = [order_type_to_native(t) for t in filter.order_types]
    if filter.side is not None:
        params["buyOrSell"] = side_to_native(filter.side)
    if filter.statuses is not None:
        params["status"] = [order_status_to_native(s) for s in filter.statuses]
    if filter.range is not None:
        start, end = filter.range.start, filter.range.end
        if start > end:
            raise InvalidParameterError(f"account orders range start {start} is after end {end}")
        try:
            params["range"] = {"start": millis_to_iso(start), "stop": millis_to_iso(end)}
        except (OverflowError, ValueError) as exc:
            raise InvalidParameterError(
                f"account orders range {start}..{end} is outside the representable range"
            ) from exc
    return params


class NashExchange(BaseExchange):
    """Nash exchange adapter.

    Nash has no market buy. ``market_buy`` raises UnsupportedOperationError
    unless ``emulate_market_buy`` is set, in which case it places a market sell
    in the inverse market (a buy in ``eth_btc`` becomes a sell in ``btc_eth``).
    Under emulation ``size`` is the amount of the quote asset to spend, and the
    returned order describes the inverse-market sell that was actually placed.
    """

    name = "nash"
    parameters_type = NashParameters
    supported_subscriptions = frozenset(
        {"order_book_updates", "trades", "account_orders", "account_trades", "account_balance"}
    )

    parameters: NashParameters

    @staticmethod
    def _page(paginator: Paginator | None) -> NativePage:
        return split_paginator(paginator, exchange="nash", max_limit=I64_MAX, allow_after=False)

    async def retrieve_pairs(self) -> list[MarketPair]:
        data = await self._run(NativeRequest("listMarkets"))
        return [_market_pair(market) for market in require(data, "markets", "listMarkets")]

    # Market data

    async def order_book(self, req: OrderBookRequest) -> OrderBookResponse:
        data = await self._run(NativeRequest("getOrderBook", {"marketName": req.market_pair}))
        return _order_book(data)

    async def get_price_ticker(self, req: GetPriceTickerRequest) -> Ticker:
        data = await self._run(NativeRequest("getTicker", {"marketName": req.market_pair}))
        return _ticker(data)

    async def get_trade_history(self, req: TradeHistoryRequest) -> list[Trade]:
        return (await self.get_trade_history_page(req)).items

    async def get_trade_history_page(self, req: TradeHistoryRequest) -> Page[Trade]:
        """Account trades with the cursor for the next page."""
        if req.order_id is not None:
            raise InvalidParameterError("nash cannot filter account trades by order id")
        page = self._page(req.paginator)
        params = _page_params(page)
        if req.market_pair is not None:
            params["marketName"] = req.market_pair

        data = await self._run(NativeRequest("listAccountTrades", params, authenticated=True))
        trades = [_trade(trade) for trade in require(data, "trades", "listAccountTrades")]
        return Page[Trade](items=trades, next=paginator_from_native(before=data.get("next"), limit=page.limit))

    async def get_historic_trades(self, req: GetHistoricTradesRequest) -> list[Trade]:
        page = self._page(req.paginator)
        if page.range is not None:
            raise InvalidParameterError("nash public trades cannot be filtered by time window")
        params = _page_params(page)
        params["marketName"] = req.market_pair

        data = await self._run(NativeRequest("listTrades", params))
        return [_trade(trade) for trade in require(data, "trades", "listTrades")]

    async def get_historic_rates(self, req: GetHistoricRatesRequest) -> list[Candle]:
        params = _page_params(self._page(req.paginator))
        params["marketName"] = req.market_pair
        params["interval"] = interval_to_native(req.interval)

        data = await self._run(NativeRequest("listCandles", params))
        return [_candle(candle) for candle in require(data, "candles", "listCandles")]

    # Account

    async def limit_buy(self, req: OpenLimitOrderRequest) -> Order:
        return await self._place_limit_order(req, Side.BUY)

    async def limit_sell(self, req: OpenLimitOrderRequest) -> Order:
        return await self._place_limit_order(req, Side.SELL)

    async def market_sell(self, req: OpenMarketOrderRequest) -> Order:
        return await self._place_market_sell(req)

    async def market_buy(self, req: OpenMarketOrderRequest) -> Order:
        if not self.parameters.emulate_market_buy:
            raise self.unsupported(
                "market_buy",
                "place a market sell in the inverse market or enable emulate_market_buy",
            )

        inverse = inverse_market(req.market_pair, MARKET_SEPARATOR)
        if self.exchange_info.is_ready:
            self.get_pair(inverse)

        logger.info(
            "Emulating nash market buy in %s as a market sell of %s in %s",
            req.market_pair,
            req.size,
            inverse,
        )
        return await self._place_market_sell(req.model_copy(update={"market_pair": inverse}))

    async def _place_limit_order(self, req: OpenLimitOrderRequest, side: Side) -> Order:
        params: dict[str, Any] = {
            "marketName": req.market_pair,
            "buyOrSell": side_to_native(side),
            "amount": decimal_to_native(req.size),
            "limitPrice": decimal_to_native(req.price),
            "cancellationPolicy": self._cancellation_policy(req),
            "allowTaker": not req.post_only,
        }
        if req.client_order_id is not None:
            params["clientOrderId"] = req.client_order_id

        data = await self._run(NativeRequest("placeLimitOrder", params, authenticated=True, method="POST"))
        return self._placed_order(data, req.market_pair, side, req.size, req.price)

    async def _place_market_sell(self, req: OpenMarketOrderRequest) -> Order:
        params: dict[str, Any] = {
            "marketName": req.market_pair,
            "buyOrSell": side_to_native(Side.SELL),
            "amount": decimal_to_native(req.size),
        }
        if req.client_order_id is not None:
            params["clientOrderId"] = req.client_order_id

        data = await self._run(NativeRequest("placeMarketOrder", params, authenticated=True, method="POST"))
        return self._placed_order(data, req.market_pair, Side.SELL, req.size, None)

    @staticmethod
    def _cancellation_policy(req: OpenLimitOrderRequest) -> dict[str, Any]:
        policy: dict[str, Any] = {"type": _TIME_IN_FORCE_TO_NATIVE[req.time_in_force]}
        if req.time_in_force == TimeInForce.GOOD_TILL_TIME:
            if req.good_till is None or req.good_till.total_seconds() <= 0:
                raise InvalidParameterError("good_till_time orders need a positive good_till duration")
            policy["cancelAt"] = datetime_to_iso(datetime.now(timezone.utc) + req.good_till)
        elif req.good_till is not None:
            raise InvalidParameterError("good_till only applies to good_till_time orders")
        return policy

    @staticmethod
    def _placed_order(
        data: Mapping[str, Any],
        market_pair: str,
        side: Side,
        size: Decimal,
        price: Decimal | None,
    ) -> Order:
        """Build the order returned by a placement.

        Nash answers a placement with id, status, type and time only. Size and
        price are taken from the request that was sent; remaining is unknown
        (None) and no fills are reported yet.
        """
        context = "placeOrder"
        placed_side = side_from_native(data.get("buyOrSell", side_to_native(side)))
        if placed_side != side:
            raise TranslationError(f"nash placed a {placed_side.value} order for a {side.value} request")
        return Order(
            id=str(require(data, "id", context)),
            market_pair=str(data.get("marketName") or market_pair),
            created_at=to_millis(require(data, "placedAt", context), "placedAt"),
            order_type=order_type_from_native(require(data, "type", context)),
            side=side,
            status=order_status_from_native(require(data, "status", context)),
            size=size,
            price=price,
        )

    async def cancel_order(self, req: CancelOrderRequest) -> OrderCanceled:
        if req.market_pair is None:
            raise InvalidParameterError("nash needs market_pair to cancel an order")
        data = await self._run(
            NativeRequest(
                "cancelOrder",
                {"marketName": req.market_pair, "orderId": req.id},
                authenticated=True,
                method="POST",
            )
        )
        return OrderCanceled(id=str(require(data, "orderId", "cancelOrder")))

    async def cancel_all_orders(self, req: CancelAllOrdersRequest) -> list[OrderCanceled]:
        """Cancel every order in one market.

        Nash acknowledges the request without listing the canceled orders, so
        the result is always empty; query open orders to see what remains.
        """
        if req.market_pair is None:
            raise InvalidParameterError("nash needs market_pair to cancel all orders")
        await self._run(
            NativeRequest(
                "cancelAllOrders",
                {"marketName": req.market_pair},
                authenticated=True,
                method="POST",
            )
        )
        return []

    async def get_all_open_orders(self) -> list[Order]:
        orders: list[Order] = []
        seen_cursors: set[str] = set()
        paginator = Paginator(limit=OPEN_ORDERS_PAGE_LIMIT)
        while True:
            page = await self._list_account_orders(
                paginator, statuses=[order_status_to_native(OrderStatus.OPEN)]
            )
            orders.extend(page.items)
            if page.next is None:
                return orders
            cursor = page.next.before
            if cursor in seen_cursors:
                raise TranslationError(f"nash repeated pagination cursor {cursor!r}")
            seen_cursors.add(cursor)
            paginator = page.next

    async def get_order_history(self, req: GetOrderHistoryRequest) -> list[Order]:
        return (await self.get_order_history_page(req)).items

    async def get_order_history_page(self, req: GetOrderHistoryRequest) -> Page[Order]:
        """Account orders with the cursor for the next page."""
        statuses = None
        if req.order_status is not None:
            statuses = [order_status_to_native(status) for status in req.order_status]
        return await self._list_account_orders(req.paginator, statuses=statuses, market=req.market_pair)

    async def _list_account_orders(
        self,
        paginator: Paginator | None,
        *,
        statuses: list[str] | None = None,
        market: str | None = None,
    ) -> Page[Order]:
        page = self._page(paginator)
        params = _page_params(page)
        if market is not None:
            params["marketName"] = market
        if statuses is not None:
            params["status"] = statuses

        data = await self._run(NativeRequest("listAccountOrders", params, authenticated=True))
        orders = [_order(order) for order in require(data, "orders", "listAccountOrders")]
        return Page[Order](items=orders, next=paginator_from_native(before=data.get("next"), limit=page.limit))

    async def get_account_balances(self, paginator: Paginator | None = None) -> list[Balance]:
        """Balances per asset; total is the state-channel balance plus the amount held in orders."""
        if paginator is not None and paginator != Paginator():
            raise InvalidParameterError("nash does not paginate account balances")

        data = await self._run(NativeRequest("listAccountBalances", authenticated=True))
        balances = []
        for entry in require(data, "balances", "listAccountBalances"):
            asset = require(entry, "asset", "balance")
            if isinstance(asset, Mapping):
                asset = require(asset, "symbol", "balance.asset")
            balances.append(
                Balance.from_free_and_in_orders(
                    asset=str(asset),
                    free=_amount(entry, "available", "balance"),
                    in_orders=_amount(entry, "inOrders", "balance"),
                )
            )
        return balances

    async def get_order(self, req: GetOrderRequest) -> Order:
        data = await self._run(NativeRequest("getAccountOrder", {"orderId": req.id}, authenticated=True))
        return _order(require(data, "order", "getAccountOrder"))

    # Streaming

    @classmethod
    def subscription_request(cls, subscription: Subscription) -> NativeRequest:
        if isinstance(subscription, OrderBookUpdates):
            return NativeRequest("updatedOrderBook", {"marketName": subscription.market})
        if isinstance(subscription, Trades):
            return NativeRequest("newTrades", {"marketName": subscription.market})
        if isinstance(subscription, AccountOrders):
            return NativeRequest(
                "updatedAccountOrders",
                _account_orders_filter(subscription.filter),
                authenticated=True,
            )
        if isinstance(subscription, AccountTrades):
            return NativeRequest("newAccountTrades", {"marketName": subscription.market}, authenticated=True)
        if isinstance(subscription, AccountBalance):
            return NativeRequest("updatedAccountBalances", {"symbol": subscription.asset}, authenticated=True)
        raise UnsupportedOperationError(cls.name, f"{subscription.kind} subscriptions")

    @classmethod
    def wrap_response(cls, message: Mapping[str, Any]) -> WebSocketResponse:
        """Order book and trade pushes are normalized; account and ticker pushes pass through."""
        if message.get("error") is not None:
            raise ProtocolError(cls.name, message["error"])

        channel = require(message, "subscription", "nash push")
        data = require(message, "data", "nash push")

        if channel == "updatedOrderBook":
            return GenericResponse(message=OrderBookMessage(book=_order_book(data)))
        if channel == "newTrades":
            trades = data.get("trades") if isinstance(data, Mapping) else data
            if not isinstance(trades, list):
                raise TranslationError("nash newTrades push carries no trade list")
            return GenericResponse(message=TradesMessage(trades=[_trade(trade) for trade in trades]))
        if channel in _RAW_CHANNELS:
            return RawResponse(channel=channel, payload=data)
        raise TranslationError(f"unknown nash push channel {channel!r}")
