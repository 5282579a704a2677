"""Single-object entry point bundling the registry, queries and CSV ingestion."""

from datetime import date
from typing import TextIO

from emergency.repositories.registry import EmergencyRegistry
from emergency.schemas import Department, Patient, PatientStatus, Professional, Report, ServicePeriod
from emergency.services import csv_loader
from emergency.services.queries import QueryEngine


class EmergencyApp:
    """Emergency room record keeper.

    Mutations are delegated to an :class:`EmergencyRegistry` and reads to a
    :class:`QueryEngine` sharing the same registry. Callers that only need
    one side can use those objects directly.
    """

    def __init__(self, registry: EmergencyRegistry | None = None):
        self.registry = registry if registry is not None else EmergencyRegistry()
        self.queries = QueryEngine(self.registry)

    # === Ingestion ===

    def read_from_file_professionals(self, source: TextIO | None) -> int:
        return csv_loader.read_professionals(self.registry, source)

    def read_from_file_departments(self, source: TextIO | None) -> int:
        return csv_loader.read_departments(self.registry, source)

    # === Mutations ===

    def add_professional(
        self,
        id: str,
        name: str,
        surname: str,
        specialization: str,
        period: ServicePeriod | str,
    ) -> Professional:
        return self.registry.add_professional(id, name, surname, specialization, period)

    def add_department(self, name: str, max_capacity: int) -> Department:
        return self.registry.add_department(name, max_capacity)

    def add_patient(
        self,
        fiscal_code: str,
        name: str,
        surname: str,
        date_of_birth: date | str,
        reason: str,
        accepted_on: date | str,
    ) -> Patient:
        return self.registry.add_patient(fiscal_code, name, surname, date_of_birth, reason, accepted_on)

    def assign_patient_to_professional(self, fiscal_code: str, specialization: str) -> str:
        return self.registry.assign_patient_to_professional(fiscal_code, specialization)

    def save_report(self, professional_id: str, fiscal_code: str, date: date | str, description: str) -> Report:
        return self.registry.save_report(professional_id, fiscal_code, date, description)

    def discharge_or_hospitalize(self, fiscal_code: str, department_name: str) -> PatientStatus:
        return self.registry.discharge_or_hospitalize(fiscal_code, department_name)

    def verify_patient(self, fiscal_code: str) -> int:
        return self.registry.verify_patient(fiscal_code)

    # === Queries ===

    def get_professional_by_id(self, professional_id: str) -> Professional:
        return self.queries.get_professional_by_id(professional_id)

    def get_professionals(self, specialization: str) -> list[str]:
        return self.queries.get_professionals(specialization)

    def get_professionals_in_service(self, specialization: str, period: ServicePeriod | str) -> list[str]:
        return self.queries.get_professionals_in_service(specialization, period)

    def get_departments(self) -> list[str]:
        return self.queries.get_departments()

    def get_patient(self, identifier: str) -> list[Patient]:
        return self.queries.get_patient(identifier)

    def get_patients_by_date(self, day: date | str) -> list[str]:
        return self.queries.get_patients_by_date(day)

    def get_number_of_patients(self) -> int:
        return self.queries.get_number_of_patients()

    def get_number_of_patients_by_date(self, day: date | str) -> int:
        return self.queries.get_number_of_patients_by_date(day)

    def get_number_of_patients_hospitalized_by_department(self, department_name: str) -> int:
        return self.queries.get_number_of_patients_hospitalized_by_department(department_name)

    def get_number_of_patients_discharged(self) -> int:
        return self.queries.get_number_of_patients_discharged()

    def get_number_of_patients_assigned_to_professional_discharged(self, specialization: str) -> int:
        return self.queries.get_number_of_patients_assigned_to_professional_discharged(specialization)

    def get_report_by_id(self, report_id: int) -> Report:
        return self.queries.get_report_by_id(report_id)

    def get_reports(self, fiscal_code: str | None = None) -> list[Report]:
        return self.queries.get_reports(fiscal_code)
