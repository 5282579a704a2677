"""Data access layer."""

from emergency.repositories.registry import EmergencyRegistry

__all__ = ["EmergencyRegistry"]
