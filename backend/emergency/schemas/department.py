"""Pydantic schemas for hospital departments."""

from pydantic import BaseModel, ConfigDict, Field


class Department(BaseModel):
    """A department with a number of remaining beds.

    Immutable; the registry replaces the record when a bed is taken.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    capacity: int = Field(ge=0, description="Remaining beds")

    @property
    def is_full(self) -> bool:
        return self.capacity == 0

    def take_bed(self) -> "Department":
        """Return a copy with one bed fewer.

        Raises:
            ValueError: If the department is already full.
        """
        if self.is_full:
            raise ValueError(f"Department {self.name} has no beds left")
        return self.model_copy(update={"capacity": self.capacity - 1})
