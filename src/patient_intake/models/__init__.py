"""Models module.

This module provides data models and dataclasses for the application.
"""

from patient_intake.models.form_state import FormState
from patient_intake.models.patient import BloodType, Gender, PatientRecord

__all__ = [
    "BloodType",
    "FormState",
    "Gender",
    "PatientRecord",
]
