"""Registration submitters.

A submitter delivers one PatientRecord to the registration backend. The
RegistrationSubmitter base class is the seam for a real network client; the
SimulatedRegistrationSubmitter stands in for it by waiting a fixed delay and
logging the payload.
"""

import asyncio
import time
from abc import ABC, abstractmethod
from typing import Optional

from patient_intake.logging_audit import get_logger
from patient_intake.models.patient import PatientRecord
from patient_intake.utils.exceptions import RemoteFailureError

logger = get_logger(__name__)

DEFAULT_SUBMIT_DELAY_SECONDS = 2.0


class RegistrationSubmitter(ABC):
    """Capability to register a patient with a backend.

    Implementations complete exactly once per call: they return on success and
    raise RemoteFailureError on failure. They do not retry.
    """

    @abstractmethod
    async def register_patient(self, record: PatientRecord) -> None:
        """Register ``record`` with the backend.

        Raises:
            RemoteFailureError: If the backend rejects or cannot process the record
        """


class SimulatedRegistrationSubmitter(RegistrationSubmitter):
    """Submitter that simulates a backend round trip.

    Waits ``delay_seconds`` and then logs the serialized record. When
    ``fail_with`` is set, the call fails with that exception as the cause once
    the delay has elapsed.

    Example:
        >>> submitter = SimulatedRegistrationSubmitter(delay_seconds=0)
        >>> asyncio.run(submitter.register_patient(record))
    """

    def __init__(
        self,
        delay_seconds: float = DEFAULT_SUBMIT_DELAY_SECONDS,
        fail_with: Optional[Exception] = None,
    ) -> None:
        if delay_seconds < 0:
            raise ValueError(f"delay_seconds must be >= 0, got {delay_seconds}")
        self.delay_seconds = delay_seconds
        self.fail_with = fail_with

    async def register_patient(self, record: PatientRecord) -> None:
        start = time.perf_counter()
        logger.debug(f"Submitting registration (delay={self.delay_seconds:.2f}s)")

        await asyncio.sleep(self.delay_seconds)

        if self.fail_with is not None:
            logger.error(f"Simulated registration failure: {self.fail_with}")
            raise RemoteFailureError(self.fail_with) from self.fail_with

        try:
            payload = record.to_dict()
        except (TypeError, ValueError, AttributeError) as e:
            raise RemoteFailureError(e) from e

        logger.info(f"Patient registered: {payload}")
        logger.debug(
            f"Registration completed in {time.perf_counter() - start:.2f}s"
        )
