"""Query and ingestion services over the emergency registry."""

from emergency.services.csv_loader import (
    load_departments_file,
    load_professionals_file,
    read_departments,
    read_professionals,
)
from emergency.services.queries import QueryEngine

__all__ = [
    "QueryEngine",
    "load_departments_file",
    "load_professionals_file",
    "read_departments",
    "read_professionals",
]
