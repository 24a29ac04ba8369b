"""Tests for the Nash adapter with a mocked transport."""

from datetime import timedelta
from decimal import Decimal

import pytest

from venuekit.errors import (
    InvalidParameterError,
    ProtocolError,
    TranslationError,
    UnknownMarketPairError,
    UnsupportedOperationError,
)
from venuekit.exchanges import nash
from venuekit.exchanges.nash import NashParameters
from venuekit.exchanges.protocol import NativeRequest
from venuekit.model import (
    CancelAllOrdersRequest,
    CancelOrderRequest,
    GetHistoricRatesRequest,
    GetHistoricTradesRequest,
    GetOrderHistoryRequest,
    GetOrderRequest,
    GetPriceTickerRequest,
    Interval,
    Liquidity,
    OpenLimitOrderRequest,
    OpenMarketOrderRequest,
    OrderBookRequest,
    OrderStatus,
    OrderType,
    Paginator,
    Side,
    TimeInForce,
    TradeHistoryRequest,
)
from venuekit.websocket import (
    AccountOrders,
    AccountOrdersFilter,
    GenericResponse,
    Heartbeat,
    OrderBookMessage,
    OrderBookUpdates,
    RawResponse,
    Status,
    TickerUpdates,
    TimeRange,
    Trades,
    TradesMessage,
)
from tests.conftest import ok, stream_of

JUNE_1 = 1590969600000
JUNE_1_NOON = 1591012800000


def sent(exchange, call=-1):
    """Native request passed to the transport on the given call."""
    return exchange.transport.run.await_args_list[call].args[0]


def placed(order_id="order-9", status="PENDING", order_type="LIMIT", side="BUY", **extra):
    return {
        "id": order_id,
        "status": status,
        "placedAt": "2020-06-01T12:00:00.000Z",
        "type": order_type,
        "buyOrSell": side,
        **extra,
    }


class TestNashMarketInfo:
    """Tests for market pair retrieval and the exchange-info cache."""

    @pytest.mark.asyncio
    async def test_retrieve_pairs(self, nash_factory, nash_market):
        """Test converting Nash markets to market pairs."""
        exchange = nash_factory(ok({"markets": [nash_market]}))

        pairs = await exchange.retrieve_pairs()

        assert len(pairs) == 1
        pair = pairs[0]
        assert pair.symbol == "eth_btc"
        assert pair.base == "eth"
        assert pair.quote == "btc"
        assert pair.base_increment == Decimal("0.000001")
        assert pair.quote_increment == Decimal("0.00000001")
        assert pair.min_base_trade_size == Decimal("0.02")
        assert pair.min_quote_trade_size == Decimal("0.0002")
        assert sent(exchange) == NativeRequest("listMarkets")

    @pytest.mark.asyncio
    async def test_get_pair_before_and_after_refresh(self, nash_factory, nash_market):
        """Test get_pair fails before the first refresh and resolves after it."""
        exchange = nash_factory(ok({"markets": [nash_market]}))

        with pytest.raises(UnknownMarketPairError):
            exchange.get_pair("eth_btc")

        await exchange.refresh_market_info()

        assert exchange.get_pair("eth_btc").quote == "btc"
        with pytest.raises(UnknownMarketPairError):
            exchange.get_pair("neo_eth")

    @pytest.mark.asyncio
    async def test_failed_refresh_keeps_previous_snapshot(self, nash_factory, nash_market):
        """Test a failing refresh leaves the cached pairs in place."""
        exchange = nash_factory(
            ok({"markets": [nash_market]}),
            {"error": {"message": "service unavailable"}},
        )
        await exchange.refresh_market_info()

        with pytest.raises(ProtocolError):
            await exchange.refresh_market_info()

        assert exchange.get_pair("eth_btc").base == "eth"

    @pytest.mark.asyncio
    async def test_missing_market_field_is_translation_error(self, nash_factory, nash_market):
        """Test a market without its precision fails translation."""
        del nash_market["aUnitPrecision"]
        exchange = nash_factory(ok({"markets": [nash_market]}))

        with pytest.raises(TranslationError):
            await exchange.retrieve_pairs()


class TestNashMarketData:
    """Tests for public market data."""

    @pytest.mark.asyncio
    async def test_order_book(self, nash_factory):
        """Test order book conversion."""
        exchange = nash_factory(
            ok(
                {
                    "updateId": 10,
                    "lastUpdateId": 9,
                    "bids": [{"price": {"amount": "0.0210"}, "amount": {"amount": "3"}}],
                    "asks": [{"price": {"amount": "0.0220"}, "amount": {"amount": "1.25"}}],
                }
            )
        )

        book = await exchange.order_book(OrderBookRequest(market_pair="eth_btc"))

        assert book.update_id == 10
        assert book.last_update_id == 9
        assert book.bids[0].price == Decimal("0.0210")
        assert book.bids[0].qty == Decimal("3")
        assert book.asks[0].qty == Decimal("1.25")
        assert sent(exchange) == NativeRequest("getOrderBook", {"marketName": "eth_btc"})

    @pytest.mark.asyncio
    async def test_ticker_midpoints(self, nash_factory):
        """Test ticker price is the bid/ask midpoint and price_24h the high/low midpoint."""
        exchange = nash_factory(
            ok(
                {
                    "bestBidPrice": {"amount": "0.0210"},
                    "bestAskPrice": {"amount": "0.0220"},
                    "highPrice24h": {"amount": "0.0230"},
                    "lowPrice24h": {"amount": "0.0200"},
                }
            )
        )

        ticker = await exchange.get_price_ticker(GetPriceTickerRequest(market_pair="eth_btc"))

        assert ticker.price == Decimal("0.0215")
        assert ticker.price_24h == Decimal("0.0215")

    @pytest.mark.asyncio
    async def test_ticker_without_ask_has_no_price(self, nash_factory):
        """Test a one-sided book leaves the price unset."""
        exchange = nash_factory(ok({"bestBidPrice": {"amount": "0.0210"}}))

        ticker = await exchange.get_price_ticker(GetPriceTickerRequest(market_pair="eth_btc"))

        assert ticker.price is None
        assert ticker.price_24h is None

    @pytest.mark.asyncio
    async def test_historic_rates(self, nash_factory):
        """Test candle conversion and interval mapping."""
        exchange = nash_factory(
            ok(
                {
                    "candles": [
                        {
                            "intervalStarting": "2020-06-01T12:00:00.000Z",
                            "openPrice": {"amount": "0.0210"},
                            "highPrice": {"amount": "0.0230"},
                            "lowPrice": {"amount": "0.0200"},
                            "closePrice": {"amount": "0.0220"},
                            "aVolume": {"amount": "125.5"},
                        }
                    ]
                }
            )
        )

        candles = await exchange.get_historic_rates(
            GetHistoricRatesRequest(market_pair="eth_btc", interval=Interval.FIVE_MINUTES)
        )

        assert candles[0].time == JUNE_1_NOON
        assert candles[0].high == Decimal("0.0230")
        assert candles[0].volume == Decimal("125.5")
        assert sent(exchange).params == {"marketName": "eth_btc", "interval": "FIVE_MINUTE"}

    @pytest.mark.asyncio
    async def test_unsupported_interval_fails_before_transport(self, nash_factory):
        """Test an interval Nash lacks is rejected without a network call."""
        exchange = nash_factory()

        with pytest.raises(TranslationError):
            await exchange.get_historic_rates(
                GetHistoricRatesRequest(market_pair="eth_btc", interval=Interval.THREE_MINUTES)
            )

        exchange.transport.run.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_historic_trades_public_prints(self, nash_factory, nash_trade):
        """Test public trades carry no fee or liquidity and derive buyer/seller from direction."""
        nash_trade.update({"accountSide": "NONE", "direction": "SELL"})
        del nash_trade["takerFee"]
        exchange = nash_factory(ok({"trades": [nash_trade], "next": None}))

        trades = await exchange.get_historic_trades(GetHistoricTradesRequest(market_pair="eth_btc"))

        trade = trades[0]
        assert trade.side == Side.SELL
        assert trade.fees is None
        assert trade.liquidity is None
        assert trade.buyer_order_id == "maker-1"
        assert trade.seller_order_id == "taker-1"

    @pytest.mark.asyncio
    async def test_historic_trades_reject_time_window(self, nash_factory):
        """Test public trades cannot be filtered by time."""
        exchange = nash_factory()

        with pytest.raises(InvalidParameterError):
            await exchange.get_historic_trades(
                GetHistoricTradesRequest(
                    market_pair="eth_btc",
                    paginator=Paginator(start_time=JUNE_1, end_time=JUNE_1_NOON),
                )
            )

        exchange.transport.run.assert_not_awaited()


class TestNashPagination:
    """Tests for paginated account trade history."""

    @pytest.mark.asyncio
    async def test_paginator_translation_and_continuation(self, nash_factory, nash_trade):
        """Test before/limit/range are sent natively and the returned cursor continues the walk."""
        exchange = nash_factory(
            ok({"trades": [nash_trade], "next": "cursor-def"}),
            ok({"trades": [], "next": None}),
        )
        request = TradeHistoryRequest(
            market_pair="eth_btc",
            paginator=Paginator(before="cursor-abc", limit=50, start_time=JUNE_1, end_time=JUNE_1_NOON),
        )

        page = await exchange.get_trade_history_page(request)

        assert sent(exchange) == NativeRequest(
            "listAccountTrades",
            {
                "before": "cursor-abc",
                "limit": 50,
                "range": {"start": "2020-06-01T00:00:00.000Z", "stop": "2020-06-01T12:00:00.000Z"},
                "marketName": "eth_btc",
            },
            authenticated=True,
        )
        assert page.next == Paginator(before="cursor-def", limit=50)

        last = await exchange.get_trade_history_page(TradeHistoryRequest(paginator=page.next))

        assert sent(exchange).params["before"] == "cursor-def"
        assert last.items == []
        assert last.next is None

    @pytest.mark.asyncio
    async def test_partial_time_window_rejected_without_transport(self, nash_factory):
        """Test a start without an end fails before the network."""
        exchange = nash_factory()

        with pytest.raises(InvalidParameterError):
            await exchange.get_trade_history(TradeHistoryRequest(paginator=Paginator(start_time=JUNE_1)))

        exchange.transport.run.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_after_cursor_rejected(self, nash_factory):
        """Test Nash has no forward cursor."""
        exchange = nash_factory()

        with pytest.raises(InvalidParameterError):
            await exchange.get_trade_history(TradeHistoryRequest(paginator=Paginator(after="cursor-abc")))

    @pytest.mark.asyncio
    async def test_order_id_filter_rejected(self, nash_factory):
        """Test account trades cannot be filtered by order."""
        exchange = nash_factory()

        with pytest.raises(InvalidParameterError):
            await exchange.get_trade_history(TradeHistoryRequest(order_id="order-1"))


class TestNashTrades:
    """Tests for account trade conversion."""

    @pytest.mark.asyncio
    async def test_taker_trade(self, nash_factory, nash_trade):
        """Test a taker fill carries the taker fee and buyer/seller ids."""
        exchange = nash_factory(ok({"trades": [nash_trade]}))

        trade = (await exchange.get_trade_history(TradeHistoryRequest()))[0]

        assert trade.id == "trade-1"
        assert trade.created_at == JUNE_1_NOON
        assert trade.market_pair == "eth_btc"
        assert trade.price == Decimal("0.0215")
        assert trade.qty == Decimal("1.5")
        assert trade.side == Side.BUY
        assert trade.fees == Decimal("0.0003")
        assert trade.liquidity == Liquidity.TAKER
        assert trade.buyer_order_id == "taker-1"
        assert trade.seller_order_id == "maker-1"

    @pytest.mark.asyncio
    async def test_maker_trade_has_zero_fee(self, nash_factory, nash_trade):
        """Test a maker fill is fee-free."""
        nash_trade["accountSide"] = "MAKER"
        exchange = nash_factory(ok({"trades": [nash_trade]}))

        trade = (await exchange.get_trade_history(TradeHistoryRequest()))[0]

        assert trade.liquidity == Liquidity.MAKER
        assert trade.fees == Decimal("0")

    @pytest.mark.asyncio
    async def test_float_amount_is_translation_error(self, nash_factory, nash_trade):
        """Test binary floats in money fields are refused."""
        nash_trade["amount"] = {"amount": 1.5}
        exchange = nash_factory(ok({"trades": [nash_trade]}))

        with pytest.raises(TranslationError):
            await exchange.get_trade_history(TradeHistoryRequest())


class TestNashOrders:
    """Tests for order placement, cancellation and queries."""

    @pytest.mark.asyncio
    async def test_limit_buy(self, nash_factory):
        """Test limit buy request and response conversion."""
        exchange = nash_factory(ok(placed(marketName="eth_btc")))

        order = await exchange.limit_buy(
            OpenLimitOrderRequest(market_pair="eth_btc", size=Decimal("1.5"), price=Decimal("0.0215"))
        )

        assert sent(exchange) == NativeRequest(
            "placeLimitOrder",
            {
                "marketName": "eth_btc",
                "buyOrSell": "BUY",
                "amount": "1.5",
                "limitPrice": "0.0215",
                "cancellationPolicy": {"type": "GOOD_TIL_CANCELLED"},
                "allowTaker": True,
            },
            authenticated=True,
            method="POST",
        )
        assert order.id == "order-9"
        assert order.side == Side.BUY
        assert order.status == OrderStatus.PENDING
        assert order.order_type == OrderType.LIMIT
        assert order.size == Decimal("1.5")
        assert order.price == Decimal("0.0215")
        assert order.remaining is None
        assert order.trades == []

    @pytest.mark.asyncio
    async def test_limit_sell_post_only_good_till_time(self, nash_factory):
        """Test post-only GTT orders disallow taking and carry a cancel time."""
        exchange = nash_factory(ok(placed(side="SELL")))

        order = await exchange.limit_sell(
            OpenLimitOrderRequest(
                market_pair="eth_btc",
                size=Decimal("1"),
                price=Decimal("0.03"),
                time_in_force=TimeInForce.GOOD_TILL_TIME,
                good_till=timedelta(hours=2),
                post_only=True,
                client_order_id="my-order",
            )
        )

        params = sent(exchange).params
        assert params["allowTaker"] is False
        assert params["cancellationPolicy"]["type"] == "GOOD_TIL_TIME"
        assert params["cancellationPolicy"]["cancelAt"].endswith("Z")
        assert params["clientOrderId"] == "my-order"
        assert order.side == Side.SELL

    @pytest.mark.asyncio
    async def test_good_till_time_needs_duration(self, nash_factory):
        """Test GTT without a duration is rejected before the network."""
        exchange = nash_factory()

        with pytest.raises(InvalidParameterError):
            await exchange.limit_buy(
                OpenLimitOrderRequest(
                    market_pair="eth_btc",
                    size=Decimal("1"),
                    price=Decimal("0.03"),
                    time_in_force=TimeInForce.GOOD_TILL_TIME,
                )
            )

        exchange.transport.run.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_market_sell(self, nash_factory):
        """Test market sell request."""
        exchange = nash_factory(ok(placed(status="FILLED", order_type="MARKET", side="SELL")))

        order = await exchange.market_sell(OpenMarketOrderRequest(market_pair="eth_btc", size=Decimal("0.5")))

        assert sent(exchange).operation == "placeMarketOrder"
        assert sent(exchange).params == {"marketName": "eth_btc", "buyOrSell": "SELL", "amount": "0.5"}
        assert order.order_type == OrderType.MARKET
        assert order.status == OrderStatus.FILLED
        assert order.price is None

    @pytest.mark.asyncio
    async def test_market_buy_unsupported_by_default(self, nash_factory):
        """Test market buy fails deterministically without touching the network."""
        exchange = nash_factory()

        with pytest.raises(UnsupportedOperationError):
            await exchange.market_buy(OpenMarketOrderRequest(market_pair="eth_btc", size=Decimal("1")))

        exchange.transport.run.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_market_buy_emulated_as_inverse_market_sell(self, nash_factory):
        """Test the opt-in emulation sells the quote asset in the inverse market."""
        parameters = NashParameters(
            credentials={"secret": "s", "session": "k"},
            emulate_market_buy=True,
        )
        exchange = nash_factory(
            ok(placed(status="FILLED", order_type="MARKET", side="SELL")),
            parameters=parameters,
        )

        order = await exchange.market_buy(OpenMarketOrderRequest(market_pair="eth_btc", size=Decimal("0.1")))

        assert sent(exchange).params == {"marketName": "btc_eth", "buyOrSell": "SELL", "amount": "0.1"}
        assert order.market_pair == "btc_eth"
        assert order.side == Side.SELL

    @pytest.mark.asyncio
    async def test_emulated_market_buy_checks_inverse_market(self, nash_factory, nash_market):
        """Test emulation refuses an inverse market the venue does not list."""
        parameters = NashParameters(
            credentials={"secret": "s", "session": "k"},
            emulate_market_buy=True,
        )
        exchange = nash_factory(ok({"markets": [nash_market]}), parameters=parameters)
        await exchange.refresh_market_info()

        with pytest.raises(UnknownMarketPairError):
            await exchange.market_buy(OpenMarketOrderRequest(market_pair="eth_btc", size=Decimal("0.1")))

        assert exchange.transport.run.await_count == 1

    @pytest.mark.asyncio
    async def test_cancel_order(self, nash_factory):
        """Test cancel needs the market and returns the canceled id."""
        exchange = nash_factory(ok({"orderId": "order-1"}))

        with pytest.raises(InvalidParameterError):
            await exchange.cancel_order(CancelOrderRequest(id="order-1"))

        canceled = await exchange.cancel_order(CancelOrderRequest(id="order-1", market_pair="eth_btc"))

        assert canceled.id == "order-1"
        assert sent(exchange).params == {"marketName": "eth_btc", "orderId": "order-1"}

    @pytest.mark.asyncio
    async def test_cancel_all_orders_returns_empty(self, nash_factory):
        """Test cancel-all acknowledges without ids."""
        exchange = nash_factory(ok({"accepted": True}))

        assert await exchange.cancel_all_orders(CancelAllOrdersRequest(market_pair="eth_btc")) == []

        with pytest.raises(InvalidParameterError):
            await exchange.cancel_all_orders(CancelAllOrdersRequest())

    @pytest.mark.asyncio
    async def test_get_order(self, nash_factory, nash_order):
        """Test full order conversion."""
        exchange = nash_factory(ok({"order": nash_order}))

        order = await exchange.get_order(GetOrderRequest(id="order-1"))

        assert order.id == "order-1"
        assert order.market_pair == "eth_btc"
        assert order.size == Decimal("2.0")
        assert order.remaining == Decimal("0.5")
        assert order.status == OrderStatus.OPEN
        assert len(order.trades) == 1
        assert order.client_order_id is None

    @pytest.mark.asyncio
    async def test_get_all_open_orders_follows_cursor(self, nash_factory, nash_order):
        """Test open orders are collected across pages."""
        second = dict(nash_order, id="order-2")
        exchange = nash_factory(
            ok({"orders": [nash_order], "next": "c1"}),
            ok({"orders": [second], "next": None}),
        )

        orders = await exchange.get_all_open_orders()

        assert [o.id for o in orders] == ["order-1", "order-2"]
        assert sent(exchange, 0).params == {"limit": 100, "status": ["OPEN"]}
        assert sent(exchange, 1).params == {"before": "c1", "limit": 100, "status": ["OPEN"]}

    @pytest.mark.asyncio
    async def test_get_order_history_status_filter(self, nash_factory, nash_order):
        """Test domain statuses map to Nash statuses."""
        exchange = nash_factory(ok({"orders": [nash_order]}))

        await exchange.get_order_history(
            GetOrderHistoryRequest(order_status=[OrderStatus.FILLED, OrderStatus.CANCELED])
        )

        assert sent(exchange).params == {"status": ["FILLED", "CANCELLED"]}

    @pytest.mark.asyncio
    async def test_get_order_history_unmappable_status(self, nash_factory):
        """Test a status Nash cannot express fails translation."""
        exchange = nash_factory()

        with pytest.raises(TranslationError):
            await exchange.get_order_history(GetOrderHistoryRequest(order_status=[OrderStatus.PARTIALLY_FILLED]))

        exchange.transport.run.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_account_call_without_credentials(self, nash_factory):
        """Test authenticated operations need credentials."""
        exchange = nash_factory(parameters=NashParameters())

        with pytest.raises(InvalidParameterError):
            await exchange.get_all_open_orders()

        exchange.transport.run.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_error_envelope_kept_verbatim(self, nash_factory):
        """Test native errors surface as ProtocolError with the payload intact."""
        error = [{"message": "insufficient funds", "path": ["placeLimitOrder"]}]
        exchange = nash_factory({"error": error})

        with pytest.raises(ProtocolError) as exc_info:
            await exchange.limit_buy(
                OpenLimitOrderRequest(market_pair="eth_btc", size=Decimal("1"), price=Decimal("0.02"))
            )

        assert exc_info.value.error == error
        assert exc_info.value.exchange == "nash"


class TestNashBalances:
    """Tests for account balances."""

    @pytest.mark.asyncio
    async def test_total_is_free_plus_in_orders(self, nash_factory):
        """Test the balance invariant."""
        exchange = nash_factory(
            ok(
                {
                    "balances": [
                        {"asset": {"symbol": "eth"}, "available": {"amount": "1.5"}, "inOrders": {"amount": "0.5"}},
                        {"asset": {"symbol": "btc"}, "available": {"amount": "0"}, "inOrders": {"amount": "0"}},
                    ]
                }
            )
        )

        balances = await exchange.get_account_balances()

        assert balances[0].asset == "eth"
        assert balances[0].free == Decimal("1.5")
        assert balances[0].in_orders == Decimal("0.5")
        assert balances[0].total == Decimal("2.0")
        for balance in balances:
            assert balance.total == balance.free + balance.in_orders

    @pytest.mark.asyncio
    async def test_paginator_rejected(self, nash_factory):
        """Test balances are not paginated."""
        exchange = nash_factory()

        with pytest.raises(InvalidParameterError):
            await exchange.get_account_balances(Paginator(limit=10))


class TestNashEnumMapping:
    """Tests for enum translation."""

    @pytest.mark.parametrize("status", [OrderStatus.OPEN, OrderStatus.FILLED, OrderStatus.CANCELED, OrderStatus.PENDING])
    def test_order_status_round_trip(self, status):
        assert nash.order_status_from_native(nash.order_status_to_native(status)) == status

    @pytest.mark.parametrize("status", [OrderStatus.NEW, OrderStatus.REJECTED, OrderStatus.EXPIRED])
    def test_order_status_without_native(self, status):
        with pytest.raises(TranslationError):
            nash.order_status_to_native(status)

    @pytest.mark.parametrize("order_type", [t for t in OrderType if t != OrderType.UNKNOWN])
    def test_order_type_round_trip(self, order_type):
        assert nash.order_type_from_native(nash.order_type_to_native(order_type)) == order_type

    @pytest.mark.parametrize("side", list(Side))
    def test_side_round_trip(self, side):
        assert nash.side_from_native(nash.side_to_native(side)) == side

    def test_unknown_native_values(self):
        with pytest.raises(TranslationError):
            nash.order_status_from_native("EXPIRED")
        with pytest.raises(TranslationError):
            nash.order_type_from_native("TRAILING")
        with pytest.raises(TranslationError):
            nash.side_from_native("HOLD")


class TestNashStreaming:
    """Tests for subscriptions and push normalization."""

    @pytest.mark.parametrize("subscription", [TickerUpdates(market="eth_btc"), Heartbeat(), Status()])
    @pytest.mark.asyncio
    async def test_unsupported_subscriptions_fail_at_subscribe(self, nash_factory, subscription):
        """Test unsupported kinds fail before the transport subscribes."""
        exchange = nash_factory()

        with pytest.raises(UnsupportedOperationError):
            await exchange.subscribe(subscription)

        exchange.transport.subscribe.assert_not_awaited()

    def test_subscription_request_without_transport(self):
        """Test subscription mapping is usable without an adapter instance."""
        request = nash.NashExchange.subscription_request(Trades(market="eth_btc"))

        assert request == NativeRequest("newTrades", {"marketName": "eth_btc"})

    def test_account_orders_filter(self):
        """Test the account orders filter is translated field by field."""
        request = nash.NashExchange.subscription_request(
            AccountOrders(
                filter=AccountOrdersFilter(
                    market="eth_btc",
                    order_types=[OrderType.LIMIT],
                    side=Side.SELL,
                    statuses=[OrderStatus.OPEN],
                )
            )
        )

        assert request.authenticated is True
        assert request.params == {
            "marketName": "eth_btc",
            "type": ["LIMIT"],
            "buyOrSell": "SELL",
            "status": ["OPEN"],
        }

    def test_account_orders_filter_with_unmappable_status(self):
        """Test filter values Nash cannot express are not dropped silently."""
        with pytest.raises(TranslationError):
            nash.NashExchange.subscription_request(
                AccountOrders(filter=AccountOrdersFilter(statuses=[OrderStatus.PARTIALLY_FILLED]))
            )

    def test_account_orders_filter_range(self):
        request = nash.NashExchange.subscription_request(
            AccountOrders(filter=AccountOrdersFilter(range=TimeRange(start=JUNE_1, end=JUNE_1_NOON)))
        )

        assert request.params == {
            "range": {"start": "2020-06-01T00:00:00.000Z", "stop": "2020-06-01T12:00:00.000Z"}
        }

    @pytest.mark.parametrize(
        "time_range",
        [TimeRange(start=20, end=10), TimeRange(start=0, end=10**18)],
    )
    def test_account_orders_filter_bad_range(self, time_range):
        """Test an inverted or unrepresentable range fails before the transport subscribes."""
        with pytest.raises(InvalidParameterError):
            nash.NashExchange.subscription_request(AccountOrders(filter=AccountOrdersFilter(range=time_range)))

    @pytest.mark.asyncio
    async def test_order_book_and_trade_pushes_are_generic(self, nash_factory, nash_trade):
        """Test order book and trade pushes map to normalized messages."""
        exchange = nash_factory()
        exchange.transport.subscribe.return_value = stream_of(
            {
                "subscription": "updatedOrderBook",
                "data": {"updateId": 2, "lastUpdateId": 1, "bids": [], "asks": []},
            },
            {"subscription": "newTrades", "data": {"trades": [nash_trade]}},
        )

        stream = await exchange.subscribe(OrderBookUpdates(market="eth_btc"))
        messages = [message async for message in stream]

        assert isinstance(messages[0], GenericResponse)
        assert isinstance(messages[0].message, OrderBookMessage)
        assert messages[0].message.book.update_id == 2
        assert isinstance(messages[1].message, TradesMessage)
        assert messages[1].message.trades[0].id == "trade-1"

    def test_account_pushes_are_raw(self):
        """Test account pushes pass through untouched."""
        payload = {"balances": [{"asset": "eth"}]}

        response = nash.NashExchange.wrap_response({"subscription": "updatedAccountBalances", "data": payload})

        assert isinstance(response, RawResponse)
        assert response.channel == "updatedAccountBalances"
        assert response.payload == payload

    def test_error_push(self):
        with pytest.raises(ProtocolError):
            nash.NashExchange.wrap_response({"error": {"message": "subscription failed"}})

    def test_unknown_push(self):
        with pytest.raises(TranslationError):
            nash.NashExchange.wrap_response({"subscription": "somethingNew", "data": {}})
