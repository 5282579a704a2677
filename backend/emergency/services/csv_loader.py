"""CSV ingestion of professionals and departments into the registry.

Each source starts with a header row followed by one record per line,
fields separated by commas with optional surrounding whitespace:

- professionals: ``id, name, surname, specialization, period`` where period
  reads ``YYYY-MM-DD to YYYY-MM-DD``
- departments: ``name, maxCapacity``

Rows with the wrong number of fields are skipped silently and rows whose
values do not validate are skipped with a warning. Only the number of stored
rows is reported back.
"""

import csv
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from emergency.config import settings
from emergency.repositories.registry import EmergencyRegistry

logger = logging.getLogger(__name__)

PROFESSIONAL_FIELDS = 5
DEPARTMENT_FIELDS = 2


def _records(source: TextIO | None, field_count: int, kind: str) -> Iterator[tuple[int, list[str]]]:
    """Yield (line number, fields) for data rows with the expected field count."""
    if source is None:
        raise ValueError(f"No source to read {kind} from")

    # One record per line: quote characters are ordinary field text
    reader = csv.reader(source, quoting=csv.QUOTE_NONE, skipinitialspace=True)
    next(reader, None)  # header

    for row in reader:
        fields = [f.strip() for f in row]
        if not any(fields):
            continue
        if len(fields) != field_count:
            logger.debug(
                "Skipping %s row at line %d: expected %d fields, got %d",
                kind,
                reader.line_num,
                field_count,
                len(fields),
            )
            continue
        yield reader.line_num, fields


def read_professionals(registry: EmergencyRegistry, source: TextIO | None) -> int:
    """Load professionals from CSV text into the registry.

    Args:
        registry: Registry receiving the professionals.
        source: Text stream positioned at the header row.

    Returns:
        Number of professionals stored.

    Raises:
        ValueError: If no source is given.
    """
    stored = 0
    for line_num, (prof_id, name, surname, specialization, period) in _records(
        source, PROFESSIONAL_FIELDS, "professional"
    ):
        try:
            registry.add_professional(prof_id, name, surname, specialization, period)
        except ValueError as e:
            logger.warning("Rejected professional row at line %d: %s", line_num, e)
            continue
        stored += 1

    logger.info("Loaded %d professionals", stored)
    return stored


def read_departments(registry: EmergencyRegistry, source: TextIO | None) -> int:
    """Load departments from CSV text into the registry.

    Args:
        registry: Registry receiving the departments.
        source: Text stream positioned at the header row.

    Returns:
        Number of departments stored.

    Raises:
        ValueError: If no source is given.
    """
    stored = 0
    for line_num, (name, max_capacity) in _records(source, DEPARTMENT_FIELDS, "department"):
        try:
            registry.add_department(name, int(max_capacity))
        except ValueError as e:
            logger.warning("Rejected department row at line %d: %s", line_num, e)
            continue
        stored += 1

    logger.info("Loaded %d departments", stored)
    return stored


def load_professionals_file(registry: EmergencyRegistry, path: str | Path) -> int:
    """Load professionals from a CSV file on disk."""
    with open(path, encoding=settings.csv_encoding, newline="") as f:
        return read_professionals(registry, f)


def load_departments_file(registry: EmergencyRegistry, path: str | Path) -> int:
    """Load departments from a CSV file on disk."""
    with open(path, encoding=settings.csv_encoding, newline="") as f:
        return read_departments(registry, f)
