"""Validation module.

This module provides field validators and formatters for registration forms.
"""

from patient_intake.validation.formatters import extract_digits, format_phone_number
from patient_intake.validation.validators import (
    ErrorKind,
    FieldError,
    calculate_age,
    validate_date_of_birth,
    validate_email,
    validate_form,
    validate_insurance_id,
    validate_name,
    validate_phone,
    validate_selection,
)

__all__ = [
    "ErrorKind",
    "FieldError",
    "calculate_age",
    "extract_digits",
    "format_phone_number",
    "validate_date_of_birth",
    "validate_email",
    "validate_form",
    "validate_insurance_id",
    "validate_name",
    "validate_phone",
    "validate_selection",
]
