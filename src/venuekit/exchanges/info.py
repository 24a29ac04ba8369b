"""Cache of tradable market pairs and their precision metadata."""

from __future__ import annotations

import asyncio
import logging
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Protocol

from pydantic import BaseModel

from ..errors import TranslationError, UnknownMarketPairError

logger = logging.getLogger(__name__)


class MarketPair(BaseModel):
    """Tradable market with its smallest representable steps."""

    symbol: str
    base: str
    quote: str
    base_increment: Decimal
    quote_increment: Decimal
    min_base_trade_size: Decimal | None = None
    min_quote_trade_size: Decimal | None = None

    model_config = {"frozen": True}


class ExchangeInfoRetrieval(Protocol):
    async def retrieve_pairs(self) -> list[MarketPair]:
        """Fetch the venue's full list of market pairs."""
        ...


class ExchangeInfo:
    """Snapshot of market pairs, replaced wholesale on every refresh.

    Readers never take the lock: a refresh builds a new read-only mapping and
    swaps the reference, so a concurrent ``get_pair`` sees either the previous
    snapshot or the new one. A failed refresh leaves the previous snapshot in
    place.
    """

    def __init__(self) -> None:
        self._pairs: Mapping[str, MarketPair] | None = None
        self._refresh_lock = asyncio.Lock()

    @property
    def is_ready(self) -> bool:
        return self._pairs is not None

    async def refresh(self, retrieval: ExchangeInfoRetrieval) -> list[MarketPair]:
        """Fetch all pairs and replace the snapshot.

        Args:
            retrieval: Source of market pairs (usually the adapter itself)

        Returns:
            Pairs of the new snapshot

        Raises:
            TranslationError: If the venue lists the same symbol twice
            Exception: Whatever the retrieval raises; the snapshot is unchanged
        """
        async with self._refresh_lock:
            pairs = await retrieval.retrieve_pairs()

            snapshot: dict[str, MarketPair] = {}
            for pair in pairs:
                if pair.symbol in snapshot:
                    raise TranslationError(f"venue listed market pair {pair.symbol} twice")
                snapshot[pair.symbol] = pair

            self._pairs = MappingProxyType(snapshot)
            logger.info("Exchange info refreshed with %d market pairs", len(snapshot))
            return list(snapshot.values())

    def get_pair(self, symbol: str) -> MarketPair:
        pairs = self._pairs
        if pairs is None or symbol not in pairs:
            raise UnknownMarketPairError(symbol)
        return pairs[symbol]

    def pairs(self) -> list[MarketPair]:
        pairs = self._pairs
        if pairs is None:
            return []
        return list(pairs.values())
