"""Registration form controller.

The controller owns the in-progress FormState of one registration form. It
applies field edits, guards against duplicate submissions, runs validation,
assembles the PatientRecord and hands it to a RegistrationSubmitter. It is the
only place where validation results and remote failures become user-facing
messages.
"""

import time
from datetime import date, datetime
from typing import Any, Callable, Optional

from patient_intake.logging_audit import get_logger, log_audit_event
from patient_intake.models.form_state import FormState
from patient_intake.models.patient import PatientRecord
from patient_intake.registration.assembly import build_patient_record
from patient_intake.registration.submitter import (
    RegistrationSubmitter,
    SimulatedRegistrationSubmitter,
)
from patient_intake.utils.exceptions import RemoteFailureError
from patient_intake.validation.validators import validate_form

logger = get_logger(__name__)

SUCCESS_MESSAGE = "Patient registered successfully!"


class RegistrationFormController:
    """Headless controller for a patient registration form.

    Attributes:
        state: Current form snapshot
        last_record: Record from the last successful submission

    Example:
        >>> controller = RegistrationFormController()
        >>> controller.update("name", "Jane Doe")
        >>> state = asyncio.run(controller.submit())
        >>> state.error_message
        'Email is required'
    """

    def __init__(
        self,
        submitter: Optional[RegistrationSubmitter] = None,
        state: Optional[FormState] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """Initialize the controller.

        Args:
            submitter: Backend to register patients with, defaults to the
                simulated submitter
            state: Initial form state, defaults to an empty form
            clock: Returns the current time, used for the age check and the
                registration timestamp. Defaults to local time, so ages are
                computed on the local calendar date
        """
        self.submitter = submitter or SimulatedRegistrationSubmitter()
        self.state = state or FormState()
        self.last_record: Optional[PatientRecord] = None
        self._clock = clock or _local_now

    @property
    def is_submitting(self) -> bool:
        return self.state.is_submitting

    def update(self, field_name: str, value: Any) -> FormState:
        """Change one form field; ignored while a submission is in flight."""
        if self.state.is_submitting:
            logger.debug(f"Ignoring edit to {field_name} during submission")
            return self.state
        self.state = self.state.with_field(field_name, value)
        return self.state

    async def submit(self) -> FormState:
        """Validate and register the current form.

        Returns immediately with the unchanged state if a submission is already
        in flight. Otherwise the resulting state carries either
        ``is_registered`` or an ``error_message``.

        Returns:
            Form state after the submission attempt
        """
        if self.state.is_submitting:
            logger.warning("Submission already in progress; ignoring duplicate submit")
            return self.state

        self.state = self.state.start_submission()
        now = self._clock()
        today: date = now.date()

        field_error = validate_form(self.state, today)
        if field_error is not None:
            logger.info(f"Form validation failed: {field_error.message}")
            log_audit_event(
                "VALIDATION_FAILED",
                {
                    "status": "failure",
                    "error_kind": field_error.kind.value,
                    "error_message": field_error.message,
                },
            )
            self.state = self.state.fail(field_error.message)
            return self.state

        record = build_patient_record(self.state, now)
        start = time.perf_counter()
        try:
            await self.submitter.register_patient(record)
        except RemoteFailureError as e:
            log_audit_event(
                "REGISTRATION_FAILED",
                {
                    "status": "failure",
                    "duration": time.perf_counter() - start,
                    "error_message": str(e),
                },
            )
            self.state = self.state.fail(str(e))
            return self.state
        except Exception as e:
            # Submitter broke its contract; release the form before propagating
            logger.exception("Unexpected error from registration submitter")
            self.state = self.state.fail(str(RemoteFailureError(e)))
            raise

        log_audit_event(
            "REGISTRATION_SUBMITTED",
            {
                "status": "success",
                "duration": time.perf_counter() - start,
            },
        )
        self.last_record = record
        self.state = self.state.succeed()
        return self.state


def _local_now() -> datetime:
    return datetime.now().astimezone()
