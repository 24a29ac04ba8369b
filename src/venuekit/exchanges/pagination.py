"""Translation between the generic Paginator and venue-native page parameters."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..errors import InvalidParameterError
from ..model import Paginator
from .normalization import millis_to_datetime

I64_MAX = 2**63 - 1


@dataclass(frozen=True, slots=True)
class DateTimeRange:
    start: datetime
    stop: datetime


@dataclass(frozen=True, slots=True)
class NativePage:
    """Venue-side page parameters. Cursors are carried exactly as received."""

    before: str | None = None
    after: str | None = None
    limit: int | None = None
    range: DateTimeRange | None = None

    @property
    def has_cursor(self) -> bool:
        return self.before is not None or self.after is not None


def split_paginator(
    paginator: Paginator | None,
    *,
    exchange: str,
    max_limit: int = I64_MAX,
    allow_after: bool = True,
) -> NativePage:
    """Convert a generic paginator into native before/after/limit/range parameters.

    Args:
        paginator: Generic paginator, or None for the venue default page
        exchange: Venue name, used in error messages
        max_limit: Largest limit the venue's integer field can carry
        allow_after: Whether the venue understands an ``after`` cursor

    Returns:
        NativePage with the cursors passed through unchanged

    Raises:
        InvalidParameterError: If the limit is not a positive integer within
            ``max_limit``, the time window is partial or inverted, or an ``after``
            cursor is given to a venue without one
    """
    if paginator is None:
        return NativePage()

    if paginator.after is not None and not allow_after:
        raise InvalidParameterError(f"{exchange} pagination has no 'after' cursor")

    limit = paginator.limit
    if limit is not None:
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise InvalidParameterError(f"paginator limit must be a positive integer, got {limit!r}")
        if limit > max_limit:
            raise InvalidParameterError(
                f"paginator limit {limit} does not fit {exchange}'s native limit (max {max_limit})"
            )

    start, end = paginator.start_time, paginator.end_time
    if (start is None) != (end is None):
        raise InvalidParameterError("paginator time window needs both start_time and end_time")

    time_range = None
    if start is not None and end is not None:
        if start > end:
            raise InvalidParameterError(
                f"paginator start_time {start} is after end_time {end}"
            )
        try:
            time_range = DateTimeRange(start=millis_to_datetime(start), stop=millis_to_datetime(end))
        except (OverflowError, ValueError) as exc:
            raise InvalidParameterError(
                f"paginator time window {start}..{end} is outside the representable range"
            ) from exc

    return NativePage(
        before=paginator.before,
        after=paginator.after,
        limit=limit,
        range=time_range,
    )


def paginator_from_native(
    *,
    before: str | None = None,
    after: str | None = None,
    limit: int | None = None,
) -> Paginator | None:
    """Build the continuation paginator from venue-returned cursors.

    Returns None when the venue returned no cursor, meaning there is no further page.
    """
    if before is None and after is None:
        return None
    return Paginator(before=before, after=after, limit=limit)
