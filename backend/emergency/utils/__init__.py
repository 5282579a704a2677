"""Shared pure helpers."""

from emergency.utils.dates import to_date

__all__ = ["to_date"]
