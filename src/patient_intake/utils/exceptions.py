"""Custom exception classes for Patient Intake.

All exceptions inherit from PatientIntakeError to allow catching all custom exceptions.
Field validation problems are not exceptions: validators return FieldError values.
"""

from typing import Optional


class PatientIntakeError(Exception):
    """Base exception for all Patient Intake custom exceptions."""

    pass


class ConfigurationError(PatientIntakeError):
    """Raised when configuration loading or validation fails.

    Examples:
        - Invalid configuration file format
        - Configuration value out of range
    """

    pass


class InvalidStateError(PatientIntakeError):
    """Raised when a patient record is assembled from an incomplete form.

    Examples:
        - Missing date of birth
        - Missing or unknown gender / blood type selection
    """

    pass


class RemoteFailureError(PatientIntakeError):
    """Raised when the registration backend fails to register a patient.

    Attributes:
        cause: The underlying exception reported by the backend

    Example:
        >>> error = RemoteFailureError(TimeoutError("backend unavailable"))
        >>> str(error)
        'Failed to register patient: backend unavailable'
    """

    MESSAGE_PREFIX = "Failed to register patient"

    def __init__(self, cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        detail = str(cause) if cause is not None else "unknown error"
        super().__init__(f"{self.MESSAGE_PREFIX}: {detail}")
