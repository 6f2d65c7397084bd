"""Registration module.

This module provides patient record assembly, registration submitters and the
registration form controller.
"""

from patient_intake.registration.assembly import build_patient_record
from patient_intake.registration.controller import (
    SUCCESS_MESSAGE,
    RegistrationFormController,
)
from patient_intake.registration.submitter import (
    RegistrationSubmitter,
    SimulatedRegistrationSubmitter,
)

__all__ = [
    "SUCCESS_MESSAGE",
    "RegistrationFormController",
    "RegistrationSubmitter",
    "SimulatedRegistrationSubmitter",
    "build_patient_record",
]
