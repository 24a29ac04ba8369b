"""Error taxonomy shared by every venue adapter."""

from __future__ import annotations

from typing import Any


class VenueError(Exception):
    """Base class for errors raised by the normalization layer."""


class ProtocolError(VenueError):
    """A venue answered with a native error envelope.

    The native error payload is kept verbatim in ``error``.
    """

    def __init__(self, exchange: str, error: Any):
        super().__init__(f"{exchange} protocol error: {error!r}")
        self.exchange = exchange
        self.error = error


class TranslationError(VenueError):
    """A request or response could not be converted between domain and native shapes."""


class UnsupportedOperationError(VenueError):
    """The venue does not offer the requested capability."""

    def __init__(self, exchange: str, operation: str, reason: str | None = None):
        message = f"{exchange} does not support {operation}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.exchange = exchange
        self.operation = operation


class InvalidParameterError(VenueError):
    """Caller-supplied request failed a precondition before any network call."""


class UnknownMarketPairError(VenueError):
    """The market pair is absent from the last successful exchange-info snapshot."""

    def __init__(self, symbol: str):
        super().__init__(f"unknown market pair: {symbol}")
        self.symbol = symbol
