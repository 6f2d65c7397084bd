"""Patient record assembly.

Turns a validated FormState into a PatientRecord. Assembly normalizes values but
does not validate them: callers must run ``validate_form`` first.
"""

from datetime import datetime
from typing import Iterable, Optional

from patient_intake.logging_audit import get_logger
from patient_intake.models.form_state import FormState
from patient_intake.models.patient import BloodType, Gender, PatientRecord
from patient_intake.utils.exceptions import InvalidStateError
from patient_intake.validation.formatters import format_phone_number
from patient_intake.validation.validators import calculate_age

logger = get_logger(__name__)


def build_patient_record(
    state: FormState, now: Optional[datetime] = None
) -> PatientRecord:
    """Build a PatientRecord from validated form values.

    Strings are trimmed, the e-mail is lower-cased, the insurance ID is
    upper-cased (and dropped without insurance), both phone numbers are
    display-formatted, and the age is computed on the registration date.

    Args:
        state: Form values that already passed ``validate_form``
        now: Registration timestamp, defaults to the current local time

    Returns:
        Immutable PatientRecord

    Raises:
        InvalidStateError: If the date of birth, gender or blood type is
            missing or unrecognized
    """
    if now is None:
        now = datetime.now().astimezone()

    if state.date_of_birth is None:
        raise InvalidStateError("Cannot build patient record: date of birth is missing")

    gender = _parse_selection(Gender, state.gender, "gender")
    blood_type = _parse_selection(BloodType, state.blood_type, "blood type")

    record = PatientRecord(
        name=_clean(state.name),
        email=_clean(state.email).lower(),
        phone=format_phone_number(_clean(state.phone)),
        address=_clean(state.address),
        date_of_birth=state.date_of_birth,
        age=calculate_age(state.date_of_birth, now),
        gender=gender,
        blood_type=blood_type,
        has_insurance=state.has_insurance,
        insurance_id=_clean(state.insurance_id).upper() if state.has_insurance else None,
        emergency_contact=format_phone_number(_clean(state.emergency_contact)),
        has_allergies=state.has_allergies,
        allergies=_clean_list(state.allergies) if state.has_allergies else (),
        current_medications=_clean_list(state.current_medications),
        medical_history=_clean(state.medical_history),
        registration_date=now,
    )

    logger.debug(f"Built patient record (age={record.age})")
    return record


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def _clean_list(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(v.strip() for v in values if v and v.strip())


def _parse_selection(enum_cls, value: Optional[str], label: str):
    if value is None or not value.strip():
        raise InvalidStateError(f"Cannot build patient record: {label} is missing")
    try:
        return enum_cls.parse(value)
    except ValueError as e:
        raise InvalidStateError(f"Cannot build patient record: {e}") from e
