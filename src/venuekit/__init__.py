"""venuekit: one trading interface over several crypto exchanges."""

from .settings import Settings
from .errors import (
    InvalidParameterError,
    ProtocolError,
    TranslationError,
    UnknownMarketPairError,
    UnsupportedOperationError,
    VenueError,
)
from .exchanges import BaseExchange, MarketPair, TransportClient, create_exchange

__all__ = [
    "Settings",
    "InvalidParameterError",
    "ProtocolError",
    "TranslationError",
    "UnknownMarketPairError",
    "UnsupportedOperationError",
    "VenueError",
    "BaseExchange",
    "MarketPair",
    "TransportClient",
    "create_exchange",
]
