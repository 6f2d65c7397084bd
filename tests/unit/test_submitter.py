"""Unit tests for registration submitters."""

import logging
import time

import pytest

from patient_intake.registration.assembly import build_patient_record
from patient_intake.registration.submitter import (
    RegistrationSubmitter,
    SimulatedRegistrationSubmitter,
)
from patient_intake.utils.exceptions import PatientIntakeError, RemoteFailureError


@pytest.fixture
def record(valid_form_state, reference_now):
    return build_patient_record(valid_form_state, reference_now)


class TestRemoteFailureError:
    """Test RemoteFailureError construction."""

    def test_message_combines_prefix_and_cause(self):
        """Test the message is the fixed prefix plus the cause."""
        cause = ConnectionError("backend unavailable")

        error = RemoteFailureError(cause)

        assert str(error) == "Failed to register patient: backend unavailable"
        assert error.cause is cause
        assert isinstance(error, PatientIntakeError)

    def test_message_without_cause(self):
        """Test a missing cause still yields a readable message."""
        assert str(RemoteFailureError()) == "Failed to register patient: unknown error"


class TestSimulatedRegistrationSubmitter:
    """Test the simulated backend."""

    def test_is_a_registration_submitter(self):
        """Test the simulated submitter implements the capability."""
        assert isinstance(SimulatedRegistrationSubmitter(), RegistrationSubmitter)

    def test_abstract_submitter_cannot_be_instantiated(self):
        """Test the capability interface is abstract."""
        with pytest.raises(TypeError):
            RegistrationSubmitter()

    def test_negative_delay_rejected(self):
        """Test negative delays raise ValueError."""
        with pytest.raises(ValueError, match="delay_seconds"):
            SimulatedRegistrationSubmitter(delay_seconds=-1)

    @pytest.mark.asyncio
    async def test_register_logs_payload(self, record, caplog):
        """Test a successful registration logs the serialized record."""
        submitter = SimulatedRegistrationSubmitter(delay_seconds=0)

        with caplog.at_level(logging.INFO, logger="patient_intake.registration.submitter"):
            result = await submitter.register_patient(record)

        assert result is None
        assert "Patient registered:" in caplog.text
        assert "'phone': '(555) 123-4567'" in caplog.text

    @pytest.mark.asyncio
    async def test_register_waits_for_delay(self, record):
        """Test the call is suspended for the configured delay."""
        submitter = SimulatedRegistrationSubmitter(delay_seconds=0.05)

        start = time.perf_counter()
        await submitter.register_patient(record)

        assert time.perf_counter() - start >= 0.04

    @pytest.mark.asyncio
    async def test_register_failure_wraps_cause(self, record):
        """Test an injected failure surfaces as RemoteFailureError."""
        cause = TimeoutError("gateway timeout")
        submitter = SimulatedRegistrationSubmitter(delay_seconds=0, fail_with=cause)

        with pytest.raises(RemoteFailureError) as exc_info:
            await submitter.register_patient(record)

        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause
        assert str(exc_info.value) == "Failed to register patient: gateway timeout"

    @pytest.mark.asyncio
    async def test_repeated_submissions_are_independent(self, record, caplog):
        """Test the same record can be submitted twice (no idempotency)."""
        submitter = SimulatedRegistrationSubmitter(delay_seconds=0)

        with caplog.at_level(logging.INFO, logger="patient_intake.registration.submitter"):
            await submitter.register_patient(record)
            await submitter.register_patient(record)

        assert caplog.text.count("Patient registered:") == 2
