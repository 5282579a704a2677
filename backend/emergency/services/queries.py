"""Read-only queries over the emergency registry.

Filters, sorts and aggregates are derived on demand from registry state;
nothing here mutates the registry.
"""

from datetime import date

from emergency.exceptions import NoDepartmentsError, NoMatchError, NotFoundError
from emergency.repositories.registry import EmergencyRegistry
from emergency.schemas import Patient, PatientStatus, Professional, Report, ServicePeriod
from emergency.utils.dates import to_date


class QueryEngine:
    """Derived views over an :class:`EmergencyRegistry`."""

    def __init__(self, registry: EmergencyRegistry):
        self.registry = registry

    # -------------------------------------------------------------------------
    # Professionals
    # -------------------------------------------------------------------------

    def get_professional_by_id(self, professional_id: str) -> Professional:
        professional = self.registry.get_professional(professional_id)
        if professional is None:
            raise NotFoundError(f"No professional with id {professional_id}")
        return professional

    def get_professionals(self, specialization: str) -> list[str]:
        """Ids of professionals with a specialization, in id order.

        Raises:
            NoMatchError: If no professional has the specialization.
        """
        ids = [p.id for p in self.registry.professionals() if p.has_specialization(specialization)]
        if not ids:
            raise NoMatchError(f"No professionals with specialization {specialization}")
        return ids

    def get_professionals_in_service(self, specialization: str, period: ServicePeriod | str) -> list[str]:
        """Ids of specialized professionals on duty when a period starts.

        Args:
            specialization: Specialization, matched case-insensitively.
            period: A ServicePeriod or text formatted as
                "YYYY-MM-DD to YYYY-MM-DD".

        Raises:
            NoMatchError: If no professional qualifies.
        """
        if isinstance(period, str):
            period = ServicePeriod.parse(period)
        ids = [
            p.id
            for p in self.registry.professionals()
            if p.has_specialization(specialization) and p.covers(period)
        ]
        if not ids:
            raise NoMatchError(f"No {specialization} professionals in service for {period}")
        return ids

    # -------------------------------------------------------------------------
    # Departments
    # -------------------------------------------------------------------------

    def get_departments(self) -> list[str]:
        departments = self.registry.departments()
        if not departments:
            raise NoDepartmentsError("No departments registered")
        return [d.name for d in departments]

    # -------------------------------------------------------------------------
    # Patients
    # -------------------------------------------------------------------------

    def get_patient(self, identifier: str) -> list[Patient]:
        """Look a patient up by fiscal code, falling back to surname.

        A fiscal code match yields a one-element list; otherwise every
        patient with that surname is returned. Unknown identifiers give an
        empty list.
        """
        patient = self.registry.find_by_fiscal_code(identifier)
        if patient is not None:
            return [patient]
        return self.registry.find_by_surname(identifier)

    def get_patients_by_date(self, day: date | str) -> list[str]:
        """Fiscal codes of patients accepted on a day, sorted by surname then name."""
        day = to_date(day)
        accepted = [p for p in self.registry.patients() if p.is_accepted_on(day)]
        accepted.sort(key=lambda p: (p.surname, p.name))
        return [p.fiscal_code for p in accepted]

    def get_number_of_patients(self) -> int:
        """Number of patients still in ADMITTED status."""
        return sum(1 for p in self.registry.patients() if p.status is PatientStatus.ADMITTED)

    def get_number_of_patients_by_date(self, day: date | str) -> int:
        day = to_date(day)
        return sum(1 for p in self.registry.patients() if p.is_accepted_on(day))

    def get_number_of_patients_hospitalized_by_department(self, department_name: str) -> int:
        """Number of patients ever hospitalized in a department.

        Raises:
            NotFoundError: If the department never received a hospitalization.
        """
        hospitalized = self.registry.hospitalized_in(department_name)
        if hospitalized is None:
            raise NotFoundError(f"No hospitalizations recorded for department {department_name}")
        return len(hospitalized)

    def get_number_of_patients_discharged(self) -> int:
        """Number of discharges caused by a full department."""
        return self.registry.discharged_count

    def get_number_of_patients_assigned_to_professional_discharged(self, specialization: str) -> int:
        """Discharged patients linked to professionals of a specialization.

        Each professional contributes the patients linked to them that are
        currently DISCHARGED; a patient linked to two such professionals is
        counted twice.
        """
        return sum(
            sum(1 for patient in self.registry.linked_patients(p.id) if patient.status is PatientStatus.DISCHARGED)
            for p in self.registry.professionals()
            if p.has_specialization(specialization)
        )

    # -------------------------------------------------------------------------
    # Reports
    # -------------------------------------------------------------------------

    def get_report_by_id(self, report_id: int) -> Report:
        report = self.registry.get_report(report_id)
        if report is None:
            raise NotFoundError(f"No report with id {report_id}")
        return report

    def get_reports(self, fiscal_code: str | None = None) -> list[Report]:
        """Reports in id order, optionally restricted to one patient."""
        reports = self.registry.reports()
        if fiscal_code is None:
            return reports
        return [r for r in reports if r.fiscal_code == fiscal_code]
