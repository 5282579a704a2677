"""Pydantic schemas."""

from emergency.schemas.department import Department
from emergency.schemas.patient import Patient, PatientStatus
from emergency.schemas.professional import Professional, ServicePeriod
from emergency.schemas.report import Report

__all__ = [
    "Department",
    "Patient",
    "PatientStatus",
    "Professional",
    "Report",
    "ServicePeriod",
]
