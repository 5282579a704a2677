"""Pydantic schemas for clinical reports."""

import datetime

from pydantic import BaseModel, ConfigDict, Field


class Report(BaseModel):
    """A clinical report written by a professional about a patient."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1)
    professional_id: str
    fiscal_code: str
    date: datetime.date
    description: str
