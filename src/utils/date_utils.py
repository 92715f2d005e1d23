"""Helpers for calendar date normalization."""

from datetime import date, datetime


def coerce_date(value) -> date | None:
    """Normalize raw date values to ``datetime.date``.

    Args:
        value: Date, datetime or ISO ``YYYY-MM-DD`` string.

    Returns:
        date | None: Calendar date, or None when the value is empty.

    Raises:
        ValueError: If a string value is not an ISO date.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


__all__ = ["coerce_date"]
