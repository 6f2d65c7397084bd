"""Immutable registration form state.

A FormState is a snapshot of everything the registration form holds: the raw
field values typed by the user plus the submission status. Every transition
returns a new snapshot, so a controller only ever swaps one value for another.
"""

from dataclasses import dataclass, fields, replace
from datetime import date, datetime
from typing import Any, Mapping, Optional

# Status fields are driven by the submission transitions only
STATUS_FIELDS = frozenset({"is_submitting", "error_message", "is_registered"})

SEQUENCE_FIELDS = frozenset({"allergies", "current_medications"})
FLAG_FIELDS = frozenset({"has_insurance", "has_allergies"})
SELECTION_FIELDS = frozenset({"gender", "blood_type"})

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off", "")

# Accepted camelCase aliases for input mappings (JSON files, API payloads)
FIELD_ALIASES = {
    "dateOfBirth": "date_of_birth",
    "bloodType": "blood_type",
    "hasInsurance": "has_insurance",
    "insuranceId": "insurance_id",
    "emergencyContact": "emergency_contact",
    "hasAllergies": "has_allergies",
    "currentMedications": "current_medications",
    "medicalHistory": "medical_history",
}


@dataclass(frozen=True)
class FormState:
    """Snapshot of the registration form.

    Attributes:
        name: Raw name text
        email: Raw e-mail text
        phone: Raw phone text
        address: Raw address text
        emergency_contact: Raw emergency contact phone text
        insurance_id: Raw insurance ID text
        medical_history: Raw medical history text
        date_of_birth: Selected date of birth
        gender: Selected gender label
        blood_type: Selected blood type label
        has_insurance: Insurance checkbox
        has_allergies: Allergies checkbox
        allergies: Entered allergies
        current_medications: Entered medications
        is_submitting: A registration request is in flight
        error_message: Message shown to the user, if any
        is_registered: The last submission succeeded
    """

    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    emergency_contact: str = ""
    insurance_id: str = ""
    medical_history: str = ""
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    blood_type: Optional[str] = None
    has_insurance: bool = False
    has_allergies: bool = False
    allergies: tuple[str, ...] = ()
    current_medications: tuple[str, ...] = ()
    is_submitting: bool = False
    error_message: Optional[str] = None
    is_registered: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FormState":
        """Build a form state from a plain mapping of field values.

        Keys may be snake_case or the camelCase names used by ``to_dict``.
        Unknown keys are rejected.

        Args:
            data: Field values, e.g. loaded from JSON

        Returns:
            New FormState

        Raises:
            ValueError: If a key is unknown or a value has the wrong type
        """
        state = cls()
        for key, value in data.items():
            state = state.with_field(FIELD_ALIASES.get(key, key), value)
        return state

    def with_field(self, field_name: str, value: Any) -> "FormState":
        """Return a copy with one form field changed.

        Sequence fields are stored as tuples, an ISO date string is accepted
        for ``date_of_birth`` and flags accept "true"/"false" style strings.

        Raises:
            ValueError: If ``field_name`` is not an editable form field or the
                value has the wrong type for it
        """
        editable = {f.name for f in fields(self)} - STATUS_FIELDS
        if field_name not in editable:
            raise ValueError(f"Unknown form field: {field_name}")

        if field_name in SEQUENCE_FIELDS:
            value = _coerce_sequence(field_name, value)
        elif field_name == "date_of_birth":
            value = _coerce_date(value)
        elif field_name in FLAG_FIELDS:
            value = _coerce_flag(field_name, value)
        elif field_name in SELECTION_FIELDS:
            if value is not None and not isinstance(value, str):
                raise ValueError(f"Invalid {field_name}: {value!r}. Expected text")
        else:
            if value is None:
                value = ""
            elif not isinstance(value, str):
                raise ValueError(f"Invalid {field_name}: {value!r}. Expected text")

        return replace(self, **{field_name: value})

    def clear_error(self) -> "FormState":
        return replace(self, error_message=None)

    def start_submission(self) -> "FormState":
        return replace(
            self, is_submitting=True, error_message=None, is_registered=False
        )

    def fail(self, message: str) -> "FormState":
        return replace(self, is_submitting=False, error_message=message)

    def succeed(self) -> "FormState":
        return replace(
            self, is_submitting=False, error_message=None, is_registered=True
        )


def _coerce_sequence(field_name: str, value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"Invalid {field_name}: {value!r}. Expected a list of text")
    if not all(isinstance(item, str) for item in value):
        raise ValueError(f"Invalid {field_name}: every entry must be text")
    return tuple(value)


def _coerce_flag(field_name: str, value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in TRUE_VALUES:
            return True
        if normalized in FALSE_VALUES:
            return False
    raise ValueError(f"Invalid {field_name}: {value!r}. Expected true or false")


def _coerce_date(value: Any) -> Optional[date]:
    if value is None or (isinstance(value, date) and not isinstance(value, datetime)):
        return value
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        if not value.strip():
            return None
        try:
            return date.fromisoformat(value.strip())
        except ValueError as e:
            raise ValueError(
                f"Invalid date of birth: {value}. Use format YYYY-MM-DD"
            ) from e
    raise ValueError(f"Invalid date of birth: {value!r}")
