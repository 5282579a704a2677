"""Tests for read-only registry queries."""

from datetime import date

import pytest

from emergency.exceptions import NoDepartmentsError, NoMatchError, NotFoundError
from emergency.schemas import ServicePeriod
from emergency.services.queries import QueryEngine


@pytest.fixture
def staffed_queries(staffed_registry) -> QueryEngine:
    return QueryEngine(staffed_registry)


class TestProfessionalQueries:
    def test_get_by_id(self, staffed_queries):
        assert staffed_queries.get_professional_by_id("M001").surname == "Verdi"

    def test_get_by_id_missing(self, staffed_queries):
        with pytest.raises(NotFoundError):
            staffed_queries.get_professional_by_id("M999")

    def test_get_professionals_case_insensitive_in_id_order(self, staffed_queries):
        assert staffed_queries.get_professionals("CARDIOLOGY") == ["M001", "M002"]

    def test_get_professionals_no_match(self, staffed_queries):
        with pytest.raises(NoMatchError):
            staffed_queries.get_professionals("Dermatology")

    def test_in_service_from_text_period(self, staffed_queries):
        assert staffed_queries.get_professionals_in_service("cardiology", "2024-06-15 to 2024-06-20") == [
            "M001",
            "M002",
        ]

    def test_in_service_only_start_checked(self, staffed_queries):
        # Query extends past M002's end date but starts inside it
        result = staffed_queries.get_professionals_in_service("Cardiology", "2024-06-30 to 2024-09-30")
        assert result == ["M001", "M002"]

    def test_in_service_from_period_object(self, staffed_queries):
        period = ServicePeriod(start=date(2024, 2, 1), end=date(2024, 2, 2))
        assert staffed_queries.get_professionals_in_service("Orthopedics", period) == ["M003"]

    def test_in_service_no_match(self, staffed_queries):
        with pytest.raises(NoMatchError):
            staffed_queries.get_professionals_in_service("Orthopedics", "2024-06-01 to 2024-06-02")


class TestDepartmentQueries:
    def test_empty_registry(self, queries):
        with pytest.raises(NoDepartmentsError):
            queries.get_departments()

    def test_names(self, staffed_queries):
        assert sorted(staffed_queries.get_departments()) == ["Cardiology Ward", "Orthopedics Ward"]


class TestGetPatient:
    def test_by_fiscal_code(self, registry, queries):
        registry.add_patient("P1", "Mario", "Rossi", "1980-01-01", "Trauma", "2024-01-01")
        registry.add_patient("P2", "Anna", "Rossi", "1981-01-01", "Fever", "2024-01-01")

        assert [p.fiscal_code for p in queries.get_patient("P1")] == ["P1"]

    def test_by_surname(self, registry, queries):
        registry.add_patient("P1", "Mario", "Rossi", "1980-01-01", "Trauma", "2024-01-01")
        registry.add_patient("P2", "Anna", "Rossi", "1981-01-01", "Fever", "2024-01-01")
        registry.add_patient("P3", "Luca", "Bianchi", "1982-01-01", "Burn", "2024-01-01")

        assert [p.fiscal_code for p in queries.get_patient("Rossi")] == ["P1", "P2"]

    def test_unknown_returns_empty(self, registry, queries):
        registry.add_patient("P1", "Mario", "Rossi", "1980-01-01", "Trauma", "2024-01-01")
        assert queries.get_patient("Verdi") == []


class TestPatientsByDate:
    def test_sorted_by_surname_then_name(self, registry, queries):
        registry.add_patient("BNCANN", "Anna", "Bianchi", "1980-01-01", "Fever", "2024-03-01")
        registry.add_patient("ALFBRU", "Bruno", "Alfieri", "1970-01-01", "Fall", "2024-03-01")
        registry.add_patient("ALFALB", "Alba", "Alfieri", "1975-01-01", "Cut", "2024-03-01")
        registry.add_patient("OTHER", "Zeno", "Aaron", "1975-01-01", "Cut", "2024-03-02")

        assert queries.get_patients_by_date("2024-03-01") == ["ALFALB", "ALFBRU", "BNCANN"]
        assert queries.get_patients_by_date(date(2024, 3, 1)) == ["ALFALB", "ALFBRU", "BNCANN"]

    def test_no_patients(self, queries):
        assert queries.get_patients_by_date("2024-03-01") == []


class TestCounts:
    @pytest.fixture
    def ward(self, registry):
        registry.add_department("ER-A", 1)
        for code in ("P1", "P2", "P3"):
            registry.add_patient(code, "N", code, "1980-01-01", "R", "2024-01-01")
        registry.add_patient("P4", "N", "P4", "1980-01-01", "R", "2024-01-02")
        registry.discharge_or_hospitalize("P1", "ER-A")
        registry.discharge_or_hospitalize("P2", "ER-A")
        return registry

    def test_number_of_patients_counts_admitted_only(self, ward, queries):
        assert queries.get_number_of_patients() == 2

    def test_number_of_patients_by_date_any_status(self, ward, queries):
        assert queries.get_number_of_patients_by_date("2024-01-01") == 3
        assert queries.get_number_of_patients_by_date("2024-01-02") == 1
        assert queries.get_number_of_patients_by_date("2024-01-03") == 0

    def test_hospitalized_by_department(self, ward, queries):
        assert queries.get_number_of_patients_hospitalized_by_department("ER-A") == 1

    def test_hospitalized_by_department_never_used(self, ward, queries):
        ward.add_department("ER-B", 4)
        with pytest.raises(NotFoundError):
            queries.get_number_of_patients_hospitalized_by_department("ER-B")

    def test_discharged(self, ward, queries):
        assert queries.get_number_of_patients_discharged() == 1


class TestDischargedBySpecialization:
    def test_counts_linked_discharged_patients(self, staffed_registry):
        queries = QueryEngine(staffed_registry)
        staffed_registry.add_department("Full", 0)
        for code in ("P1", "P2", "P3"):
            staffed_registry.add_patient(code, "N", code, "1980-01-01", "R", "2024-06-10")

        staffed_registry.assign_patient_to_professional("P1", "Cardiology")  # M001
        staffed_registry.save_report("M002", "P2", "2024-06-10", "seen")
        staffed_registry.save_report("M003", "P3", "2024-06-10", "seen")
        for code in ("P1", "P2", "P3"):
            staffed_registry.discharge_or_hospitalize(code, "Full")

        assert queries.get_number_of_patients_assigned_to_professional_discharged("cardiology") == 2
        assert queries.get_number_of_patients_assigned_to_professional_discharged("Orthopedics") == 1
        assert queries.get_number_of_patients_assigned_to_professional_discharged("Dermatology") == 0

    def test_ignores_patients_not_discharged(self, staffed_registry):
        queries = QueryEngine(staffed_registry)
        staffed_registry.add_patient("P1", "N", "S", "1980-01-01", "R", "2024-06-10")
        staffed_registry.assign_patient_to_professional("P1", "Cardiology")
        staffed_registry.discharge_or_hospitalize("P1", "Cardiology Ward")

        assert queries.get_number_of_patients_assigned_to_professional_discharged("Cardiology") == 0


class TestReports:
    def test_all_and_by_patient(self, staffed_registry):
        queries = QueryEngine(staffed_registry)
        staffed_registry.save_report("M001", "P1", "2024-01-01", "a")
        staffed_registry.save_report("M002", "P2", "2024-01-01", "b")
        staffed_registry.save_report("M003", "P1", "2024-01-02", "c")

        assert [r.id for r in queries.get_reports()] == [1, 2, 3]
        assert [r.description for r in queries.get_reports("P1")] == ["a", "c"]
        assert queries.get_reports("P9") == []

    def test_report_by_id(self, staffed_registry):
        queries = QueryEngine(staffed_registry)
        staffed_registry.save_report("M001", "P1", "2024-01-01", "a")
        staffed_registry.save_report("M002", "P2", "2024-01-01", "b")

        assert queries.get_report_by_id(2).professional_id == "M002"
        with pytest.raises(NotFoundError):
            queries.get_report_by_id(3)


class TestReadOnly:
    def test_queries_do_not_mutate(self, staffed_registry):
        queries = QueryEngine(staffed_registry)
        staffed_registry.add_patient("P1", "N", "S", "1980-01-01", "R", "2024-06-10")
        before = [d.model_dump() for d in staffed_registry.departments()]

        queries.get_patient("S").clear()
        queries.get_departments()
        queries.get_patients_by_date("2024-06-10")
        queries.get_number_of_patients()

        assert [d.model_dump() for d in staffed_registry.departments()] == before
        assert len(queries.get_patient("S")) == 1
