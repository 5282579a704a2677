"""Pydantic schemas for emergency room professionals."""

import re
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from emergency.config import settings
from emergency.utils.dates import to_date

_PERIOD_SEPARATOR = re.compile(r"\s*to\s*")


class ServicePeriod(BaseModel):
    """Inclusive date range during which a professional is on duty."""

    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    @model_validator(mode="after")
    def _check_order(self) -> "ServicePeriod":
        if self.end < self.start:
            raise ValueError(f"Service period ends ({self.end}) before it starts ({self.start})")
        return self

    @classmethod
    def parse(cls, text: str) -> "ServicePeriod":
        """Parse a period formatted as ``YYYY-MM-DD to YYYY-MM-DD``.

        Raises:
            ValueError: If the text is not two ISO dates joined by ``to``.
        """
        parts = _PERIOD_SEPARATOR.split(text.strip())
        if len(parts) != 2:
            raise ValueError(f"Malformed service period: {text!r}")
        return cls(start=parts[0], end=parts[1])

    def contains(self, day: date | str) -> bool:
        """Check whether a day falls inside the period, both ends included."""
        return self.start <= to_date(day) <= self.end

    def __str__(self) -> str:
        return f"{self.start.isoformat()} to {self.end.isoformat()}"


class Professional(BaseModel):
    """A medical professional working in the emergency room.

    Immutable once registered. The link to treated patients lives in the
    registry, not on the professional.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    surname: str
    specialization: str
    period: ServicePeriod
    working_hours: str = Field(default_factory=lambda: settings.default_working_hours)

    @field_validator("period", mode="before")
    @classmethod
    def _parse_period(cls, value: Any) -> Any:
        if isinstance(value, str):
            return ServicePeriod.parse(value)
        return value

    def has_specialization(self, specialization: str) -> bool:
        """Case-insensitive specialization match."""
        return self.specialization.casefold() == specialization.casefold()

    def is_in_service(self, day: date | str) -> bool:
        """Check whether the professional is on duty on the given day."""
        return self.period.contains(day)

    def covers(self, period: ServicePeriod) -> bool:
        """Check whether the professional is on duty when a query period starts.

        Only the start of the requested period is compared against both ends
        of the service interval.
        """
        return self.period.contains(period.start)
