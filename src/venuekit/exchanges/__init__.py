"""Venue adapters and the layer they share."""

from .protocol import Exchange, ExchangeAccount, ExchangeMarketData, ExchangeSpec, NativeRequest, TransportClient
from .info import ExchangeInfo, MarketPair
from .pagination import NativePage, paginator_from_native, split_paginator
from .factory import EXCHANGES, build_parameters, create_exchange
from .base import BaseExchange
from .nash import NashExchange, NashParameters
from .coinbase import CoinbaseExchange, CoinbaseParameters

__all__ = [
    "Exchange",
    "ExchangeAccount",
    "ExchangeMarketData",
    "ExchangeSpec",
    "NativeRequest",
    "TransportClient",
    "ExchangeInfo",
    "MarketPair",
    "NativePage",
    "paginator_from_native",
    "split_paginator",
    "EXCHANGES",
    "build_parameters",
    "create_exchange",
    "BaseExchange",
    "NashExchange",
    "NashParameters",
    "CoinbaseExchange",
    "CoinbaseParameters",
]
