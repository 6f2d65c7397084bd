"""Patient record data model.

This module defines the immutable PatientRecord produced by a successful form
submission, together with the enumerations for its selection fields.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional


class _LabelEnum(str, Enum):
    """String enum whose values are the labels shown on the form."""

    @classmethod
    def parse(cls, value: str) -> "_LabelEnum":
        """Look up a member by its label, ignoring case and surrounding spaces.

        Raises:
            ValueError: If ``value`` is not a known label
        """
        normalized = value.strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise ValueError(
            f"Invalid {cls.__name__}: {value}. "
            f"Must be one of: {', '.join(m.value for m in cls)}"
        )


class Gender(_LabelEnum):
    """Administrative gender offered by the registration form."""

    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class BloodType(_LabelEnum):
    """ABO/Rh blood type."""

    A_POSITIVE = "A+"
    A_NEGATIVE = "A-"
    B_POSITIVE = "B+"
    B_NEGATIVE = "B-"
    AB_POSITIVE = "AB+"
    AB_NEGATIVE = "AB-"
    O_POSITIVE = "O+"
    O_NEGATIVE = "O-"


@dataclass(frozen=True)
class PatientRecord:
    """Registration data for one patient, assembled after validation.

    Instances are built by ``build_patient_record`` and never mutated.

    Attributes:
        name: Trimmed full name
        email: Trimmed, lower-cased e-mail address
        phone: Display-formatted phone number
        address: Free-text address
        date_of_birth: Date of birth
        age: Age in whole years on the registration date
        gender: Administrative gender
        blood_type: Blood type
        has_insurance: Whether the patient has insurance
        insurance_id: Upper-cased insurance ID (None without insurance)
        emergency_contact: Display-formatted emergency contact phone number
        has_allergies: Whether the patient reported allergies
        allergies: Reported allergies (empty without allergies)
        current_medications: Current medications
        medical_history: Free-text medical history
        registration_date: Submission timestamp
    """

    name: str
    email: str
    phone: str
    address: str
    date_of_birth: date
    age: int
    gender: Gender
    blood_type: BloodType
    has_insurance: bool
    insurance_id: Optional[str]
    emergency_contact: str
    has_allergies: bool
    allergies: tuple[str, ...]
    current_medications: tuple[str, ...]
    medical_history: str
    registration_date: datetime

    def to_dict(self) -> dict[str, Any]:
        """Export the record as a JSON-compatible dictionary.

        Dates are ISO-8601 strings and enums are their labels.

        Returns:
            Dictionary keyed by the registration API field names
        """
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
            "dateOfBirth": self.date_of_birth.isoformat(),
            "age": self.age,
            "gender": self.gender.value,
            "bloodType": self.blood_type.value,
            "hasInsurance": self.has_insurance,
            "insuranceId": self.insurance_id,
            "emergencyContact": self.emergency_contact,
            "hasAllergies": self.has_allergies,
            "allergies": list(self.allergies),
            "currentMedications": list(self.current_medications),
            "medicalHistory": self.medical_history,
            "registrationDate": self.registration_date.isoformat(),
        }
