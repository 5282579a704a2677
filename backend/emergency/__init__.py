"""Emergency room record keeper.

- config.py               : pydantic-settings configuration
- exceptions.py           : error taxonomy
- schemas/                : entity models (professionals, patients, departments, reports)
- repositories/registry.py: in-memory registry and mutations
- services/queries.py     : read-only queries
- services/csv_loader.py  : CSV ingestion
- app.py                  : EmergencyApp facade
"""

from emergency.app import EmergencyApp
from emergency.exceptions import (
    EmergencyError,
    NoAvailableProfessionalError,
    NoDepartmentsError,
    NoMatchError,
    NotFoundError,
    PatientStatusError,
)
from emergency.repositories.registry import EmergencyRegistry
from emergency.services.queries import QueryEngine

__all__ = [
    "EmergencyApp",
    "EmergencyError",
    "EmergencyRegistry",
    "NoAvailableProfessionalError",
    "NoDepartmentsError",
    "NoMatchError",
    "NotFoundError",
    "PatientStatusError",
    "QueryEngine",
]
