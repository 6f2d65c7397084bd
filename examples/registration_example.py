"""Registration workflow examples.

This module demonstrates filling in a registration form programmatically,
handling validation errors, and handling a failing registration backend.
"""

import asyncio
import json
import logging
from pathlib import Path

from patient_intake.models.form_state import FormState
from patient_intake.registration import (
    RegistrationFormController,
    SimulatedRegistrationSubmitter,
)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


async def example_1_successful_registration():
    """Example 1: Register the patient described in patient_form.json."""
    print("=" * 80)
    print("EXAMPLE 1: Successful Registration")
    print("=" * 80)

    form_data = json.loads(Path("examples/patient_form.json").read_text())
    controller = RegistrationFormController(
        submitter=SimulatedRegistrationSubmitter(delay_seconds=0.5),
        state=FormState.from_mapping(form_data),
    )

    state = await controller.submit()

    if state.is_registered:
        print(json.dumps(controller.last_record.to_dict(), indent=2))
    else:
        print(f"Registration failed: {state.error_message}")
    print()


async def example_2_validation_error():
    """Example 2: Only the first invalid field is reported."""
    print("=" * 80)
    print("EXAMPLE 2: Validation Error")
    print("=" * 80)

    controller = RegistrationFormController()
    controller.update("name", "J")
    controller.update("email", "not-an-email")

    state = await controller.submit()

    print(f"Error shown to user: {state.error_message}")
    print()


async def example_3_backend_failure():
    """Example 3: A backend failure uses the same error channel."""
    print("=" * 80)
    print("EXAMPLE 3: Backend Failure")
    print("=" * 80)

    form_data = json.loads(Path("examples/patient_form.json").read_text())
    controller = RegistrationFormController(
        submitter=SimulatedRegistrationSubmitter(
            delay_seconds=0.5, fail_with=ConnectionError("Network unreachable")
        ),
        state=FormState.from_mapping(form_data),
    )

    state = await controller.submit()

    print(f"Error shown to user: {state.error_message}")
    print()


async def main():
    await example_1_successful_registration()
    await example_2_validation_error()
    await example_3_backend_failure()


if __name__ == "__main__":
    asyncio.run(main())
