"""In-memory registry of professionals, departments, patients and reports."""

import logging
from collections.abc import Iterator
from datetime import date

from emergency.config import settings
from emergency.exceptions import NoAvailableProfessionalError, NotFoundError
from emergency.schemas import (
    Department,
    Patient,
    PatientStatus,
    Professional,
    Report,
    ServicePeriod,
)

logger = logging.getLogger(__name__)


class EmergencyRegistry:
    """Sole owner of the emergency room entity collections.

    Enforces key uniqueness and applies every cross-entity mutation
    (assignment, reports, hospitalization and discharge). Read access for
    the query engine goes through the accessor methods. Entities are frozen,
    so a state change swaps a new record in under the same key and callers
    only ever hold snapshots.
    """

    def __init__(self) -> None:
        self._professionals: dict[str, Professional] = {}
        self._departments: dict[str, Department] = {}
        self._patients: dict[str, Patient] = {}
        # surname -> fiscal codes, in intake order
        self._patients_by_surname: dict[str, list[str]] = {}
        self._reports: dict[int, Report] = {}
        # department name -> fiscal codes ever hospitalized there
        self._hospitalized: dict[str, list[str]] = {}
        # professional id -> fiscal codes of patients linked to them
        self._treated: dict[str, set[str]] = {}
        self._last_report_id = 0
        self._discharged = 0

    # =========================================================================
    # Professionals and departments
    # =========================================================================

    def add_professional(
        self,
        id: str,
        name: str,
        surname: str,
        specialization: str,
        period: ServicePeriod | str,
        working_hours: str | None = None,
    ) -> Professional:
        """Register a professional, replacing any previous one with the same id."""
        professional = Professional(
            id=id,
            name=name,
            surname=surname,
            specialization=specialization,
            period=period,
            working_hours=working_hours or settings.default_working_hours,
        )
        self._professionals[professional.id] = professional
        return professional

    def add_department(self, name: str, max_capacity: int) -> Department:
        """Register a department; re-adding a name resets its capacity."""
        department = Department(name=name, capacity=max_capacity)
        if name in self._departments:
            logger.debug("Overwriting department %s with capacity %d", name, max_capacity)
        self._departments[name] = department
        return department

    # =========================================================================
    # Patients
    # =========================================================================

    def add_patient(
        self,
        fiscal_code: str,
        name: str,
        surname: str,
        date_of_birth: date | str,
        reason: str,
        accepted_on: date | str,
    ) -> Patient:
        """Take in a patient.

        Intake is idempotent: a known fiscal code returns the stored record
        and the remaining arguments are ignored.

        Returns:
            The stored patient, ADMITTED when newly created.
        """
        existing = self._patients.get(fiscal_code)
        if existing is not None:
            logger.debug("Patient %s already registered", fiscal_code)
            return existing

        patient = Patient(
            fiscal_code=fiscal_code,
            name=name,
            surname=surname,
            date_of_birth=date_of_birth,
            reason=reason,
            accepted_on=accepted_on,
        )
        self._patients[fiscal_code] = patient
        self._patients_by_surname.setdefault(surname, []).append(fiscal_code)
        return patient

    def find_by_fiscal_code(self, fiscal_code: str) -> Patient | None:
        return self._patients.get(fiscal_code)

    def find_by_surname(self, surname: str) -> list[Patient]:
        return [self._patients[code] for code in self._patients_by_surname.get(surname, [])]

    def _require_patient(self, fiscal_code: str) -> Patient:
        patient = self._patients.get(fiscal_code)
        if patient is None:
            raise NotFoundError(f"No patient with fiscal code {fiscal_code}")
        return patient

    def assign_patient_to_professional(self, fiscal_code: str, specialization: str) -> str:
        """Route a patient to a professional on duty at acceptance.

        The candidate is the first professional, in id order, that has the
        specialization and is in service on the patient's acceptance date.
        The patient's status is left unchanged; the professional is linked to
        the patient for discharge statistics.

        Args:
            fiscal_code: Fiscal code of the patient.
            specialization: Required specialization, matched case-insensitively.

        Returns:
            The id of the chosen professional.

        Raises:
            NotFoundError: If the patient does not exist.
            NoAvailableProfessionalError: If nobody is in service on the
                acceptance date, nobody has the specialization, or no single
                professional satisfies both.
        """
        patient = self._require_patient(fiscal_code)
        accepted_on = patient.accepted_on
        professionals = list(self.professionals())

        anyone_on_duty = any(p.is_in_service(accepted_on) for p in professionals)
        anyone_specialized = any(p.has_specialization(specialization) for p in professionals)
        if not anyone_on_duty or not anyone_specialized:
            raise NoAvailableProfessionalError(
                f"No {specialization} professional in service on {accepted_on}"
            )

        for professional in professionals:
            if professional.has_specialization(specialization) and professional.is_in_service(accepted_on):
                self._link(professional.id, fiscal_code)
                logger.info("Assigned patient %s to professional %s", fiscal_code, professional.id)
                return professional.id

        raise NoAvailableProfessionalError(
            f"No {specialization} professional in service on {accepted_on}"
        )

    def _link(self, professional_id: str, fiscal_code: str) -> None:
        self._treated.setdefault(professional_id, set()).add(fiscal_code)

    # =========================================================================
    # Reports
    # =========================================================================

    def save_report(
        self,
        professional_id: str,
        fiscal_code: str,
        date: date | str,
        description: str,
    ) -> Report:
        """Store a report under the next identifier.

        The patient is not required to be registered.

        Raises:
            NotFoundError: If the professional does not exist.
        """
        if professional_id not in self._professionals:
            raise NotFoundError(f"No professional with id {professional_id}")

        report = Report(
            id=self._last_report_id + 1,
            professional_id=professional_id,
            fiscal_code=fiscal_code,
            date=date,
            description=description,
        )
        self._last_report_id = report.id
        self._reports[report.id] = report
        self._link(professional_id, fiscal_code)
        return report

    # =========================================================================
    # Hospitalization
    # =========================================================================

    def discharge_or_hospitalize(self, fiscal_code: str, department_name: str) -> PatientStatus:
        """Hospitalize a patient, or discharge them if the department is full.

        With beds left the patient becomes HOSPITALIZED, is recorded under the
        department and one bed is taken. With no beds left the patient is
        DISCHARGED and counted as a capacity-exhaustion discharge.

        Returns:
            The patient's new status.

        Raises:
            NotFoundError: If the patient or the department does not exist.
            PatientStatusError: If the patient already left ADMITTED.
        """
        patient = self._require_patient(fiscal_code)
        department = self._departments.get(department_name)
        if department is None:
            raise NotFoundError(f"No department named {department_name}")

        if department.is_full:
            self._patients[fiscal_code] = patient.transition_to(PatientStatus.DISCHARGED)
            self._discharged += 1
            logger.info("Department %s full, discharged patient %s", department_name, fiscal_code)
            return PatientStatus.DISCHARGED

        hospitalized = patient.transition_to(PatientStatus.HOSPITALIZED)
        department = department.take_bed()
        self._patients[fiscal_code] = hospitalized
        self._departments[department_name] = department
        self._hospitalized.setdefault(department_name, []).append(fiscal_code)
        logger.info(
            "Hospitalized patient %s in %s (%d beds left)",
            fiscal_code,
            department_name,
            department.capacity,
        )
        return PatientStatus.HOSPITALIZED

    def verify_patient(self, fiscal_code: str) -> int:
        """Return 1 if the patient is hospitalized, 0 otherwise.

        Raises:
            NotFoundError: If the patient does not exist.
        """
        patient = self._require_patient(fiscal_code)
        return 1 if patient.status is PatientStatus.HOSPITALIZED else 0

    # =========================================================================
    # Read accessors
    # =========================================================================

    def professionals(self) -> Iterator[Professional]:
        """Iterate professionals sorted by id."""
        for professional_id in sorted(self._professionals):
            yield self._professionals[professional_id]

    def get_professional(self, professional_id: str) -> Professional | None:
        return self._professionals.get(professional_id)

    def departments(self) -> list[Department]:
        return list(self._departments.values())

    def get_department(self, name: str) -> Department | None:
        return self._departments.get(name)

    def patients(self) -> list[Patient]:
        return list(self._patients.values())

    def reports(self) -> list[Report]:
        """Reports sorted by id."""
        return [self._reports[report_id] for report_id in sorted(self._reports)]

    def get_report(self, report_id: int) -> Report | None:
        return self._reports.get(report_id)

    def hospitalized_in(self, department_name: str) -> list[Patient] | None:
        """Patients ever hospitalized in a department, or None if there are none."""
        fiscal_codes = self._hospitalized.get(department_name)
        if fiscal_codes is None:
            return None
        return [self._patients[code] for code in fiscal_codes]

    def linked_patients(self, professional_id: str) -> list[Patient]:
        """Registered patients linked to a professional by assignment or report."""
        fiscal_codes = self._treated.get(professional_id, set())
        return [self._patients[code] for code in sorted(fiscal_codes) if code in self._patients]

    @property
    def discharged_count(self) -> int:
        return self._discharged
