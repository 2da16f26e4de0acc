"""
Utility functions for order data manipulation and formatting.

Provides helpers for:
- Timestamp parsing (ISO-8601, tolerant of missing or malformed values)
- Date formatting for cards and detail views
- Search term matching against order fields
"""

from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from order_ui.models.order import Order

UNKNOWN_DATE = "Date not specified"


def parse_date(date_str: str | None) -> datetime | None:
    """
    Parse an ISO-8601 timestamp string to a datetime object.

    Args:
        date_str: Timestamp such as "2021-11-26T06:22:19Z" or "2021-11-26".

    Returns:
        datetime object if parsing succeeds, None otherwise
    """
    if not isinstance(date_str, str):
        return None
    date_str = date_str.strip()
    if not date_str:
        return None

    # fromisoformat only accepts the Z suffix from Python 3.11 on
    if date_str.endswith(("Z", "z")):
        date_str = date_str[:-1] + "+00:00"

    try:
        return datetime.fromisoformat(date_str)
    except ValueError:
        pass

    # Dates with a trailing time zone name or other noise
    try:
        return datetime.strptime(date_str[:19], "%Y-%m-%dT%H:%M:%S")
    except ValueError:
        return None


def format_date(date_str: str | None) -> str:
    """
    Format a creation timestamp for display.

    Never raises: values that cannot be parsed produce the
    UNKNOWN_DATE placeholder instead of the raw input.

    Args:
        date_str: Raw timestamp from the order payload.

    Returns:
        Formatted string like 'Nov 26, 2021 06:22'.
    """
    date = parse_date(date_str)
    if date is None:
        return UNKNOWN_DATE
    return date.strftime("%b %d, %Y %H:%M")


def matches_query(order: "Order", query: str) -> bool:
    """
    Check if an order matches the search term.

    Performs case-insensitive substring matching against the order id,
    delivery name, phone, city, address and the track number.

    Args:
        order: Order to check.
        query: Search term.

    Returns:
        True if the term matches any searchable field, or if it is empty.
    """
    normalized = query.strip().lower()
    if not normalized:
        return True
    return any(normalized in value for value in order.searchable_terms())
