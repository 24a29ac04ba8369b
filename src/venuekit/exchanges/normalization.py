"""Numeric, time and symbol conversion helpers shared by venue adapters."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation, localcontext
from typing import Any, Mapping

from ..errors import TranslationError

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)


def parse_decimal(value: Any, field: str) -> Decimal:
    """Convert a venue-supplied numeric value to ``Decimal`` by exact lexical parsing.

    Accepts ``str``, ``int`` and ``Decimal``. Binary floats are refused because
    the precision they carry is already lost; transports must decode JSON with
    ``parse_float=decimal.Decimal``.

    Args:
        value: Native numeric value
        field: Name of the native field, used in error messages

    Returns:
        Finite Decimal

    Raises:
        TranslationError: If the value is missing, a float, or not a finite number
    """
    if value is None:
        raise TranslationError(f"missing numeric field '{field}'")
    if isinstance(value, bool) or isinstance(value, float):
        raise TranslationError(
            f"numeric field '{field}' arrived as {type(value).__name__}; "
            "decode venue JSON with parse_float=decimal.Decimal"
        )
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise TranslationError(f"numeric field '{field}' is not a decimal: {value!r}") from exc
    else:
        raise TranslationError(f"numeric field '{field}' has unsupported type {type(value).__name__}")

    if not result.is_finite():
        raise TranslationError(f"numeric field '{field}' is not finite: {value!r}")
    return result


def parse_optional_decimal(value: Any, field: str) -> Decimal | None:
    if value is None:
        return None
    return parse_decimal(value, field)


def decimal_to_native(value: Decimal) -> str:
    """Render a decimal in plain positional notation, never scientific."""
    return format(value, "f")


def precision_to_increment(places: int) -> Decimal:
    """Smallest step for a venue precision given in decimal places (8 -> 0.00000001)."""
    return Decimal(1).scaleb(-int(places))


def midpoint(a: Decimal, b: Decimal) -> Decimal:
    """Exact mean of two finite decimals, whatever their number of digits."""
    exponent = min(a.as_tuple().exponent, b.as_tuple().exponent)
    # One digit for the carry of the sum, one for the halving.
    digits = max(a.adjusted(), b.adjusted()) - exponent + 3
    with localcontext() as ctx:
        ctx.prec = max(digits, ctx.prec)
        return (a + b) / 2


def millis_to_datetime(millis: int) -> datetime:
    return _EPOCH + millis * _MILLISECOND


def datetime_to_iso(value: datetime) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def millis_to_iso(millis: int) -> str:
    return datetime_to_iso(millis_to_datetime(millis))


def to_millis(value: Any, field: str) -> int:
    """Convert a native timestamp (epoch ms, datetime or ISO-8601 string) to epoch ms."""
    if value is None:
        raise TranslationError(f"missing timestamp field '{field}'")
    if isinstance(value, datetime):
        return _datetime_to_millis(value)
    if isinstance(value, bool):
        raise TranslationError(f"timestamp field '{field}' is a bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError as exc:
            raise TranslationError(f"timestamp field '{field}' is not ISO-8601: {value!r}") from exc
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return _datetime_to_millis(parsed)
    raise TranslationError(f"timestamp field '{field}' has unsupported type {type(value).__name__}")


def split_market(symbol: str, separator: str) -> tuple[str, str]:
    """Split a venue symbol into (base, quote).

    - eth_btc with "_" -> (eth, btc)
    - BTC-USD with "-" -> (BTC, USD)

    Raises:
        TranslationError: If the symbol does not contain exactly one separator
    """
    parts = symbol.strip().split(separator)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise TranslationError(f"cannot split market symbol {symbol!r} on {separator!r}")
    return parts[0], parts[1]


def inverse_market(symbol: str, separator: str) -> str:
    """Swap base and quote of a venue symbol (btc_usdc -> usdc_btc)."""
    base, quote = split_market(symbol, separator)
    return f"{quote}{separator}{base}"


def _datetime_to_millis(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - _EPOCH) // _MILLISECOND


def require(payload: Any, key: str, context: str) -> Any:
    """Fetch a field the venue is contractually expected to supply.

    Raises:
        TranslationError: If the payload is not a mapping or the field is missing or null
    """
    if not isinstance(payload, Mapping):
        raise TranslationError(f"{context}: expected an object, got {type(payload).__name__}")
    value = payload.get(key)
    if value is None:
        raise TranslationError(f"{context}: missing required field '{key}'")
    return value
