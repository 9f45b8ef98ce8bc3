"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal


def iso_utc(value: datetime | None) -> str | None:
    """Aware datetime as ISO 8601 UTC with a ``Z`` suffix.

    Examples:
        >>> iso_utc(datetime(2022, 1, 1, tzinfo=UTC))
        '2022-01-01T00:00:00Z'
        >>> iso_utc(None) is None
        True
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")


def money(value: Decimal | None) -> str | None:
    """Decimal amount as a two-place string.

    Examples:
        >>> money(Decimal("60"))
        '60.00'
        >>> money(None) is None
        True
    """
    if value is None:
        return None
    return f"{value:.2f}"


def page_window(page: int | None, per_page: int | None, default_per_page: int) -> tuple[int, int]:
    """Resolve paging inputs to ``(offset, limit)``; page numbers start at 1.

    Examples:
        >>> page_window(None, None, 100)
        (0, 100)
        >>> page_window(3, 10, 100)
        (20, 10)
    """
    page = page or 1
    limit = per_page or default_per_page
    return (page - 1) * limit, limit
