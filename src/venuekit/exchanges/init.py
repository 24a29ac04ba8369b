"""Adapter initialization from settings."""

from __future__ import annotations

import logging
from typing import Dict, Mapping

from pydantic import ValidationError

from ..settings import Settings
from .base import BaseExchange
from .factory import build_parameters, create_exchange
from .protocol import TransportClient

logger = logging.getLogger(__name__)


async def create_exchanges_from_settings(
    settings: Settings,
    transports: Mapping[str, TransportClient],
) -> Dict[str, BaseExchange]:
    """Create adapters for every enabled venue that has a transport.

    Venues that are disabled, have no transport, or whose settings do not
    translate into valid parameters are logged and skipped.
    """
    exchanges: Dict[str, BaseExchange] = {}

    for exchange_name, exchange_config in settings.exchanges.items():
        if not exchange_config.enabled:
            logger.debug("Exchange %s is disabled, skipping", exchange_name)
            continue

        transport = transports.get(exchange_name)
        if transport is None:
            logger.warning("Exchange %s has no transport, skipping", exchange_name)
            continue

        try:
            parameters = build_parameters(exchange_name, exchange_config)
            exchanges[exchange_name] = await create_exchange(exchange_name, parameters, transport)
            logger.info("Initialized adapter for %s", exchange_name)
        except (ValueError, ValidationError) as e:
            logger.error("Failed to initialize adapter for %s: %s", exchange_name, e)
            continue

    return exchanges
