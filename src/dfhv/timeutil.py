"""Time helpers shared by parameter parsing, predicates and row mapping."""

from __future__ import annotations

from datetime import UTC, datetime

# Format the filter form on the index page round-trips through.
FORM_FORMAT = "%Y-%m-%dT%H:%M:%S"


def parse_timestamp(value: object) -> datetime | None:
    """Parse a timestamp leniently.

    Accepts aware or naive ``datetime`` objects and ISO 8601 strings (a bare
    date, a trailing ``Z`` and fractional seconds included). Naive values are
    taken as UTC.

    Args:
        value: Raw value from a query string or a storage row.

    Returns:
        Timezone-aware datetime, or None if the value cannot be parsed.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def to_filter_literal(dt: datetime) -> str:
    """Render a datetime the way table-service filter expressions expect.

    Example:
        >>> to_filter_literal(datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC))
        "datetime'2024-01-02T03:04:05.0000000Z'"
    """
    utc = dt.astimezone(UTC)
    # Seven fractional digits (100ns ticks).
    return f"datetime'{utc.strftime('%Y-%m-%dT%H:%M:%S')}.{utc.microsecond:06d}0Z'"


def format_form_value(dt: datetime | None) -> str | None:
    """Format a filter bound for re-populating the index page form."""
    if dt is None:
        return None
    return dt.strftime(FORM_FORMAT)
