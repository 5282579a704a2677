"""Errors raised by the emergency registry and query engine."""


class EmergencyError(Exception):
    """Base class for all registry errors."""

    pass


class NotFoundError(EmergencyError, LookupError):
    """Raised when an entity is absent for the given key."""

    pass


class NoMatchError(EmergencyError):
    """Raised when a specialization/period lookup produces no results."""

    pass


class NoAvailableProfessionalError(NoMatchError):
    """Raised when no professional can take a patient on its acceptance date."""

    pass


class NoDepartmentsError(EmergencyError):
    """Raised when no department has been registered."""

    pass


class PatientStatusError(EmergencyError, ValueError):
    """Raised on a status change for a patient that already left ADMITTED."""

    pass
