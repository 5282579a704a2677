"""Pydantic schemas for emergency room patients."""

from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from emergency.exceptions import PatientStatusError
from emergency.utils.dates import to_date


class PatientStatus(str, Enum):
    """Patient lifecycle states."""

    ADMITTED = "ADMITTED"
    HOSPITALIZED = "HOSPITALIZED"
    DISCHARGED = "DISCHARGED"


class Patient(BaseModel):
    """A patient taken in by the emergency room.

    Immutable; a status change produces a new record which the registry
    stores under the same fiscal code. Status moves once, out of ADMITTED.
    """

    model_config = ConfigDict(frozen=True)

    fiscal_code: str = Field(min_length=1)
    name: str
    surname: str
    date_of_birth: date
    reason: str
    accepted_on: date
    status: PatientStatus = PatientStatus.ADMITTED

    @field_validator("accepted_on", mode="before")
    @classmethod
    def _truncate_timestamp(cls, value: Any) -> Any:
        # Acceptance timestamps are kept at day granularity
        if isinstance(value, (date, str)):
            return to_date(value)
        return value

    def transition_to(self, status: PatientStatus) -> "Patient":
        """Return a copy of the patient moved out of ADMITTED.

        Raises:
            PatientStatusError: If the patient already left ADMITTED or the
                target is ADMITTED itself.
        """
        if self.status is not PatientStatus.ADMITTED or status is PatientStatus.ADMITTED:
            raise PatientStatusError(
                f"Patient {self.fiscal_code} cannot move from {self.status.value} to {status.value}"
            )
        return self.model_copy(update={"status": status})

    def is_accepted_on(self, day: date | str) -> bool:
        return self.accepted_on == to_date(day)
