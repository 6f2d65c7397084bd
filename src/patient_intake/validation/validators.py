"""Field validators for patient registration forms.

Every validator takes a raw field value and returns ``None`` when the value is
acceptable or a FieldError describing the first problem found. Validators never
raise for bad input; the form controller turns their results into user-facing
messages.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional, Union

from patient_intake.models.patient import BloodType, Gender
from patient_intake.validation.formatters import extract_digits

if TYPE_CHECKING:
    from patient_intake.models.form_state import FormState


class ErrorKind(Enum):
    """Category of a field validation failure."""

    EMPTY_FIELD = "empty_field"
    TOO_SHORT = "too_short"
    INVALID_FORMAT = "invalid_format"
    INVALID_LENGTH = "invalid_length"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class FieldError:
    """Validation failure for a single form field.

    Attributes:
        kind: Failure category
        message: Human-readable message shown to the user
    """

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


# Validation regex patterns
NAME_PATTERN = re.compile(r"^[a-zA-Z\s]+$")
EMAIL_PATTERN = re.compile(r"^[\w\-.]+@([\w-]+\.)+[\w-]{2,4}$", re.ASCII)
INSURANCE_ID_PATTERN = re.compile(r"^[A-Z]{2}\d{6,10}$", re.ASCII)

# Length and range thresholds
MIN_NAME_LENGTH = 2
MIN_INSURANCE_ID_LENGTH = 5
PHONE_DIGIT_COUNTS = (10, 11)
MIN_AGE = 0
MAX_AGE = 150

DateLike = Union[date, datetime]


def _is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def validate_name(value: Optional[str]) -> Optional[FieldError]:
    """Validate a patient name: required, at least 2 letters, letters and spaces only."""
    if _is_blank(value):
        return FieldError(ErrorKind.EMPTY_FIELD, "Name is required")

    trimmed = value.strip()
    if len(trimmed) < MIN_NAME_LENGTH:
        return FieldError(
            ErrorKind.TOO_SHORT,
            f"Name must be at least {MIN_NAME_LENGTH} characters",
        )

    if not NAME_PATTERN.match(trimmed):
        return FieldError(
            ErrorKind.INVALID_FORMAT, "Name can only contain letters and spaces"
        )

    return None


def validate_email(value: Optional[str]) -> Optional[FieldError]:
    """Validate an e-mail address against a basic user@domain.tld pattern."""
    if _is_blank(value):
        return FieldError(ErrorKind.EMPTY_FIELD, "Email is required")

    if not EMAIL_PATTERN.match(value.strip()):
        return FieldError(
            ErrorKind.INVALID_FORMAT, "Please enter a valid email address"
        )

    return None


def validate_phone(
    value: Optional[str], field_label: str = "Phone number"
) -> Optional[FieldError]:
    """Validate a phone number has 10 or 11 digits, ignoring punctuation.

    Args:
        value: Raw phone number
        field_label: Label used in messages (the emergency contact reuses this)

    Returns:
        FieldError or None
    """
    if _is_blank(value):
        return FieldError(ErrorKind.EMPTY_FIELD, f"{field_label} is required")

    if len(extract_digits(value)) not in PHONE_DIGIT_COUNTS:
        return FieldError(
            ErrorKind.INVALID_LENGTH, f"{field_label} must be 10 or 11 digits"
        )

    return None


def calculate_age(date_of_birth: DateLike, today: Optional[DateLike] = None) -> int:
    """Calculate calendar-exact age in whole years.

    The age is one less than the year difference until the birthday has
    occurred in the reference year.

    Args:
        date_of_birth: Birth date (the date part of a datetime is used)
        today: Reference date, defaults to ``date.today()``

    Returns:
        Age in years; negative for birth dates after ``today``

    Example:
        >>> calculate_age(date(2000, 6, 16), today=date(2024, 6, 15))
        23
    """
    if isinstance(date_of_birth, datetime):
        date_of_birth = date_of_birth.date()
    if today is None:
        today = date.today()
    elif isinstance(today, datetime):
        today = today.date()

    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1

    return age


def validate_date_of_birth(
    value: Optional[DateLike], today: Optional[DateLike] = None
) -> Optional[FieldError]:
    """Validate the date of birth yields an age between 0 and 150."""
    if value is None:
        return FieldError(ErrorKind.EMPTY_FIELD, "Date of birth is required")

    age = calculate_age(value, today)
    if age < MIN_AGE or age > MAX_AGE:
        return FieldError(
            ErrorKind.OUT_OF_RANGE, "Please enter a valid date of birth"
        )

    return None


def validate_insurance_id(
    value: Optional[str], has_insurance: bool
) -> Optional[FieldError]:
    """Validate an insurance ID such as ``AB123456``.

    Only checked when the patient has insurance. The value is upper-cased
    before matching two letters followed by 6-10 digits.
    """
    if not has_insurance:
        return None

    if _is_blank(value):
        return FieldError(ErrorKind.EMPTY_FIELD, "Insurance ID is required")

    trimmed = value.strip()
    if len(trimmed) < MIN_INSURANCE_ID_LENGTH:
        return FieldError(
            ErrorKind.TOO_SHORT,
            f"Insurance ID must be at least {MIN_INSURANCE_ID_LENGTH} characters",
        )

    if not INSURANCE_ID_PATTERN.match(trimmed.upper()):
        return FieldError(
            ErrorKind.INVALID_FORMAT, "Invalid insurance ID format (e.g., AB123456)"
        )

    return None


def validate_selection(
    value: Optional[str], field_label: str, choices: Iterable[str]
) -> Optional[FieldError]:
    """Validate a dropdown-style selection is present and one of ``choices``.

    Matching is case-insensitive.
    """
    if _is_blank(value):
        return FieldError(ErrorKind.EMPTY_FIELD, f"Please select a {field_label}")

    allowed = {choice.lower() for choice in choices}
    if value.strip().lower() not in allowed:
        return FieldError(
            ErrorKind.INVALID_FORMAT, f"Invalid {field_label}: {value.strip()}"
        )

    return None


def validate_form(
    state: "FormState", today: Optional[DateLike] = None
) -> Optional[FieldError]:
    """Run every field validator in form order and return the first failure.

    Args:
        state: Current form values
        today: Reference date for the age check, defaults to ``date.today()``

    Returns:
        The first FieldError encountered, or None when the form is valid
    """
    checks = (
        lambda: validate_name(state.name),
        lambda: validate_email(state.email),
        lambda: validate_phone(state.phone),
        lambda: validate_date_of_birth(state.date_of_birth, today),
        lambda: validate_selection(
            state.gender, "gender", (g.value for g in Gender)
        ),
        lambda: validate_selection(
            state.blood_type, "blood type", (b.value for b in BloodType)
        ),
        lambda: validate_insurance_id(state.insurance_id, state.has_insurance),
        lambda: validate_phone(state.emergency_contact, "Emergency contact"),
    )

    for check in checks:
        error = check()
        if error is not None:
            return error

    return None
