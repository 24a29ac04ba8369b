"""Factory for creating venue adapters."""

from __future__ import annotations

from typing import Any, Mapping, Type

from pydantic import BaseModel

from ..settings import ExchangeSettings
from .base import BaseExchange
from .coinbase import CoinbaseExchange
from .nash import NashExchange
from .protocol import TransportClient


EXCHANGES: dict[str, Type[BaseExchange]] = {
    "nash": NashExchange,
    "coinbase": CoinbaseExchange,
}


def get_exchange_class(exchange: str) -> Type[BaseExchange]:
    """Look up an adapter class by venue name, case-insensitively.

    Raises:
        ValueError: If the venue is not registered
    """
    exchange_lower = exchange.lower()
    if exchange_lower not in EXCHANGES:
        supported = ", ".join(EXCHANGES.keys())
        raise ValueError(f"Unsupported exchange: {exchange}. Supported exchanges: {supported}")
    return EXCHANGES[exchange_lower]


def build_parameters(exchange: str, exchange_settings: ExchangeSettings) -> BaseModel:
    """Turn generic exchange settings into the venue's parameter model.

    Nash signs with a session and a secret, which are read from ``api_key``
    and ``api_secret``; ``sandbox`` selects its sandbox environment. Coinbase
    needs the passphrase as well. Entries under ``options`` are passed to the
    parameter model as is.

    Args:
        exchange: Venue name
        exchange_settings: Settings entry for the venue

    Returns:
        Validated parameter model

    Raises:
        ValueError: If the venue is unknown or required credentials are missing
    """
    exchange_class = get_exchange_class(exchange)
    creds = exchange_settings.credentials
    data: dict[str, Any] = {}

    if exchange_class is NashExchange:
        data["environment"] = "sandbox" if exchange_settings.sandbox else "production"
        if creds is not None:
            data["credentials"] = {
                "session": creds.api_key.get_secret_value(),
                "secret": creds.api_secret.get_secret_value(),
            }
    elif exchange_class is CoinbaseExchange:
        data["sandbox"] = exchange_settings.sandbox
        if creds is not None:
            if creds.passphrase is None:
                raise ValueError(f"{exchange} requires passphrase in credentials")
            data["credentials"] = {
                "api_key": creds.api_key.get_secret_value(),
                "api_secret": creds.api_secret.get_secret_value(),
                "passphrase": creds.passphrase.get_secret_value(),
            }

    data.update(exchange_settings.options)
    return exchange_class.parameters_type.model_validate(data)


async def create_exchange(
    exchange: str,
    parameters: BaseModel | Mapping[str, Any],
    transport: TransportClient,
) -> BaseExchange:
    """Create a venue adapter.

    Args:
        exchange: Venue name (nash, coinbase)
        parameters: Venue parameter model, or a mapping validated into one
        transport: Network client for the venue

    Returns:
        Adapter with an empty exchange-info cache

    Raises:
        ValueError: If the venue is not supported
        pydantic.ValidationError: If the parameters do not validate
    """
    exchange_class = get_exchange_class(exchange)
    return await exchange_class.new(parameters, transport)
