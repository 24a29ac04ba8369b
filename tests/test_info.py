"""Tests for the exchange-info cache."""

import asyncio
from decimal import Decimal

import pytest

from venuekit.errors import UnknownMarketPairError
from venuekit.exchanges.info import ExchangeInfo, MarketPair


def pair(symbol):
    base, quote = symbol.split("_")
    return MarketPair(
        symbol=symbol,
        base=base,
        quote=quote,
        base_increment=Decimal("0.0001"),
        quote_increment=Decimal("0.01"),
    )


class StaticRetrieval:
    """Retrieval returning a fixed list per call, optionally pausing first."""

    def __init__(self, *batches, delay=0):
        self.batches = list(batches)
        self.delay = delay
        self.calls = 0

    async def retrieve_pairs(self):
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.batches.pop(0)


class TestExchangeInfo:
    """Tests for ExchangeInfo."""

    def test_uninitialized(self):
        info = ExchangeInfo()

        assert not info.is_ready
        assert info.pairs() == []
        with pytest.raises(UnknownMarketPairError):
            info.get_pair("eth_btc")

    @pytest.mark.asyncio
    async def test_refresh_replaces_snapshot(self):
        """Test each refresh swaps in the full new set."""
        info = ExchangeInfo()
        retrieval = StaticRetrieval([pair("eth_btc"), pair("neo_eth")], [pair("btc_usdc")])

        await info.refresh(retrieval)
        assert info.get_pair("neo_eth").base == "neo"

        await info.refresh(retrieval)
        assert info.get_pair("btc_usdc").quote == "usdc"
        with pytest.raises(UnknownMarketPairError):
            info.get_pair("eth_btc")

    @pytest.mark.asyncio
    async def test_readers_see_old_snapshot_during_refresh(self):
        """Test get_pair keeps answering from the previous snapshot while a refresh is running."""
        info = ExchangeInfo()
        await info.refresh(StaticRetrieval([pair("eth_btc")]))

        refresh = asyncio.create_task(info.refresh(StaticRetrieval([pair("btc_usdc")], delay=0.01)))
        await asyncio.sleep(0)

        assert info.get_pair("eth_btc").symbol == "eth_btc"

        await refresh
        assert info.get_pair("btc_usdc").symbol == "btc_usdc"

    @pytest.mark.asyncio
    async def test_concurrent_refreshes_are_serialized(self):
        """Test the last of two overlapping refreshes wins."""
        info = ExchangeInfo()
        retrieval = StaticRetrieval([pair("eth_btc")], [pair("btc_usdc")], delay=0.01)

        await asyncio.gather(info.refresh(retrieval), info.refresh(retrieval))

        assert retrieval.calls == 2
        assert [p.symbol for p in info.pairs()] == ["btc_usdc"]
