"""Pytest configuration and fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from venuekit.exchanges.coinbase import CoinbaseExchange, CoinbaseParameters
from venuekit.exchanges.nash import NashExchange, NashParameters


def ok(data, **pagination):
    """Successful transport envelope."""
    envelope = {"data": data}
    if pagination:
        envelope["pagination"] = pagination
    return envelope


def make_transport(*envelopes):
    """Mock transport answering ``run`` with the given envelopes in order."""
    transport = MagicMock()
    transport.run = AsyncMock(side_effect=list(envelopes))
    transport.subscribe = AsyncMock()
    transport.close = AsyncMock()
    return transport


async def stream_of(*messages):
    for message in messages:
        yield message


@pytest.fixture
def nash_parameters():
    """Nash parameters with test credentials."""
    return NashParameters(credentials={"secret": "test_secret_789012", "session": "test_session_123456"})


@pytest.fixture
def coinbase_parameters():
    """Coinbase parameters with test credentials."""
    return CoinbaseParameters(
        credentials={
            "api_key": "test_api_key_123456",
            "api_secret": "test_api_secret_789012",
            "passphrase": "test_passphrase_345678",
        }
    )


@pytest.fixture
def nash_factory(nash_parameters):
    """Build a Nash adapter over a mock transport with queued envelopes."""

    def build(*envelopes, parameters=None):
        return NashExchange(parameters or nash_parameters, make_transport(*envelopes))

    return build


@pytest.fixture
def coinbase_factory(coinbase_parameters):
    """Build a Coinbase adapter over a mock transport with queued envelopes."""

    def build(*envelopes, parameters=None):
        return CoinbaseExchange(parameters or coinbase_parameters, make_transport(*envelopes))

    return build


@pytest.fixture
def nash_market():
    """Sample Nash market."""
    return {
        "name": "eth_btc",
        "aUnit": "eth",
        "bUnit": "btc",
        "aUnitPrecision": 6,
        "bUnitPrecision": 8,
        "minTradeSize": "0.02",
        "minTradeSizeB": "0.0002",
    }


@pytest.fixture
def nash_trade():
    """Sample Nash account trade where the account was the buying taker."""
    return {
        "id": "trade-1",
        "makerOrderId": "maker-1",
        "takerOrderId": "taker-1",
        "amount": {"amount": "1.5", "currency": "eth"},
        "limitPrice": {"amount": "0.0215", "currency": "btc"},
        "executedAt": "2020-06-01T12:00:00.000Z",
        "accountSide": "TAKER",
        "direction": "BUY",
        "takerFee": {"amount": "0.0003", "currency": "eth"},
        "market": {"name": "eth_btc"},
    }


@pytest.fixture
def nash_order(nash_trade):
    """Sample Nash open limit order with one fill."""
    return {
        "id": "order-1",
        "market": {"name": "eth_btc"},
        "amountPlaced": {"amount": "2.0", "currency": "eth"},
        "amountRemaining": {"amount": "0.5", "currency": "eth"},
        "limitPrice": {"amount": "0.0215", "currency": "btc"},
        "buyOrSell": "BUY",
        "type": "LIMIT",
        "status": "OPEN",
        "placedAt": "2020-06-01T11:59:00.000Z",
        "trades": [nash_trade],
    }


@pytest.fixture
def coinbase_product():
    """Sample Coinbase product."""
    return {
        "id": "BTC-USD",
        "base_currency": "BTC",
        "quote_currency": "USD",
        "base_increment": "0.00000001",
        "quote_increment": "0.01",
        "base_min_size": "0.0001",
        "min_market_funds": "1",
    }


@pytest.fixture
def coinbase_order():
    """Sample Coinbase open limit order, partially filled."""
    return {
        "id": "d0c5340b-6d6c-49d9-b567-48c4bfca13d2",
        "product_id": "BTC-USD",
        "side": "buy",
        "type": "limit",
        "price": "30000.00",
        "size": "0.50000000",
        "filled_size": "0.20000000",
        "status": "open",
        "created_at": "2021-01-01T00:00:00.000Z",
        "time_in_force": "GTC",
        "post_only": False,
    }
