"""Shared date coercion utilities.

Callers may pass calendar days either as ``date`` objects or as ISO
strings; these helpers normalise both forms. All functions are pure.
"""

from datetime import date, datetime


def to_date(value: date | str) -> date:
    """Coerce a date or ISO string into a ``date``.

    Handles:
    - date objects -> returned unchanged
    - datetime objects -> truncated to their date
    - "2024-01-01" -> date(2024, 1, 1)
    - "2024-01-01T10:30" / "2024-01-01 10:30" -> date(2024, 1, 1)

    Raises:
        ValueError: If the string is not an ISO date or datetime.
        TypeError: If the value is neither a date nor a string.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if len(text) > 10:
            return datetime.fromisoformat(text).date()
        return date.fromisoformat(text)
    raise TypeError(f"Expected date or ISO string, got {type(value).__name__}")
