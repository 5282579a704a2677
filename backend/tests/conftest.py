"""Pytest configuration and shared fixtures.

This module provides centralized test fixtures for:
- Empty and populated registries
- Query engines bound to them
- CSV sample sources
"""

import io

import pytest

from emergency.app import EmergencyApp
from emergency.repositories.registry import EmergencyRegistry
from emergency.services.queries import QueryEngine


PROFESSIONALS_CSV = """id,name,surname,specialization,period
M001, Giulia, Verdi, Cardiology, 2024-01-01 to 2024-12-31
M002, Luca, Neri, cardiology, 2024-06-01 to 2024-06-30
M003, Sara, Bruni, Orthopedics, 2023-01-01 to 2024-03-31
"""

DEPARTMENTS_CSV = """name,maxCapacity
Cardiology Ward, 2
Orthopedics Ward, 1
"""


@pytest.fixture
def registry() -> EmergencyRegistry:
    """Empty registry."""
    return EmergencyRegistry()


@pytest.fixture
def queries(registry: EmergencyRegistry) -> QueryEngine:
    """Query engine over the ``registry`` fixture."""
    return QueryEngine(registry)


@pytest.fixture
def staffed_registry(registry: EmergencyRegistry) -> EmergencyRegistry:
    """Registry with professionals and departments but no patients."""
    registry.add_professional("M002", "Luca", "Neri", "cardiology", "2024-06-01 to 2024-06-30")
    registry.add_professional("M001", "Giulia", "Verdi", "Cardiology", "2024-01-01 to 2024-12-31")
    registry.add_professional("M003", "Sara", "Bruni", "Orthopedics", "2023-01-01 to 2024-03-31")
    registry.add_department("Cardiology Ward", 2)
    registry.add_department("Orthopedics Ward", 1)
    return registry


@pytest.fixture
def app() -> EmergencyApp:
    """Fresh application facade."""
    return EmergencyApp()


@pytest.fixture
def professionals_csv() -> io.StringIO:
    return io.StringIO(PROFESSIONALS_CSV)


@pytest.fixture
def departments_csv() -> io.StringIO:
    return io.StringIO(DEPARTMENTS_CSV)
