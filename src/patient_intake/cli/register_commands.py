"""Registration CLI commands for Patient Intake.

This module provides the ``register`` and ``validate`` commands, the command
line counterparts of filling in and submitting the registration form.
"""

import asyncio
import json as json_lib
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import click

from patient_intake.models.form_state import FormState
from patient_intake.models.patient import BloodType, Gender
from patient_intake.registration.controller import (
    SUCCESS_MESSAGE,
    RegistrationFormController,
)
from patient_intake.registration.submitter import SimulatedRegistrationSubmitter
from patient_intake.validation.validators import validate_form

logger = logging.getLogger(__name__)


def _suppress_console_logging() -> None:
    """Silence the console log handler so JSON output stays machine-readable."""
    for handler in logging.getLogger().handlers:
        if isinstance(handler, logging.StreamHandler) and not hasattr(handler, "baseFilename"):
            handler.setLevel(logging.CRITICAL + 1)


@click.command("register")
@click.option("--name", required=True, help="Full name (letters and spaces)")
@click.option("--email", required=True, help="E-mail address")
@click.option("--phone", required=True, help="Phone number (10 or 11 digits)")
@click.option(
    "--dob",
    required=True,
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Date of birth (YYYY-MM-DD)",
)
@click.option(
    "--gender",
    required=True,
    type=click.Choice([g.value for g in Gender], case_sensitive=False),
)
@click.option(
    "--blood-type",
    required=True,
    type=click.Choice([b.value for b in BloodType], case_sensitive=False),
)
@click.option("--emergency-contact", required=True, help="Emergency contact phone number")
@click.option("--address", default="", help="Street address")
@click.option("--insurance-id", default=None, help="Insurance ID, e.g. AB123456")
@click.option("--allergy", "allergies", multiple=True, help="Allergy (repeatable)")
@click.option(
    "--medication", "medications", multiple=True, help="Current medication (repeatable)"
)
@click.option("--medical-history", default="", help="Free-text medical history")
@click.option(
    "--delay",
    type=click.FloatRange(min=0),
    default=None,
    help="Simulated registration delay in seconds (overrides config)",
)
@click.option(
    "--simulate-failure",
    default=None,
    metavar="MESSAGE",
    help="Make the simulated backend fail with MESSAGE",
)
@click.option("--json", "json_output", is_flag=True, help="Output the registered record as JSON")
@click.pass_context
def register(
    ctx: click.Context,
    name: str,
    email: str,
    phone: str,
    dob: datetime,
    gender: str,
    blood_type: str,
    emergency_contact: str,
    address: str,
    insurance_id: Optional[str],
    allergies: tuple[str, ...],
    medications: tuple[str, ...],
    medical_history: str,
    delay: Optional[float],
    simulate_failure: Optional[str],
    json_output: bool,
) -> None:
    """Validate, assemble and register a patient.

    Passing --insurance-id marks the patient as insured and passing at least
    one --allergy marks the patient as having allergies.

    Exits with code 0 on success, code 1 on validation or registration failure.

    Examples:

        patient-intake register --name "Jane Doe" --email jane@example.com \\
            --phone 5551234567 --dob 1990-01-01 --gender Female \\
            --blood-type O+ --emergency-contact 5559876543

        # Exercise the failure path without waiting
        patient-intake register ... --delay 0 --simulate-failure "backend down"
    """
    if json_output:
        _suppress_console_logging()

    config = (ctx.obj or {}).get("config")
    if delay is None:
        delay = config.registration.submit_delay_seconds if config else 2.0

    fail_with = RuntimeError(simulate_failure) if simulate_failure else None
    submitter = SimulatedRegistrationSubmitter(delay_seconds=delay, fail_with=fail_with)

    state = FormState(
        name=name,
        email=email,
        phone=phone,
        address=address,
        emergency_contact=emergency_contact,
        insurance_id=insurance_id or "",
        medical_history=medical_history,
        date_of_birth=dob.date(),
        gender=gender,
        blood_type=blood_type,
        has_insurance=insurance_id is not None,
        has_allergies=bool(allergies),
        allergies=allergies,
        current_medications=medications,
    )
    controller = RegistrationFormController(submitter=submitter, state=state)

    logger.info("Registration submitted from CLI")
    result = asyncio.run(controller.submit())

    if result.error_message:
        click.secho(f"Registration failed: {result.error_message}", fg="red", err=True)
        sys.exit(1)

    if json_output:
        click.echo(json_lib.dumps(controller.last_record.to_dict(), indent=2))
    else:
        click.secho(SUCCESS_MESSAGE, fg="green")
        record = controller.last_record
        click.echo(f"  Name:              {record.name}")
        click.echo(f"  Age:               {record.age}")
        click.echo(f"  Phone:             {record.phone}")
        click.echo(f"  Emergency contact: {record.emergency_contact}")
    sys.exit(0)


@click.command("validate")
@click.argument("file", type=click.Path(exists=True, path_type=Path))
@click.option("--json", "json_output", is_flag=True, help="Output result as JSON")
def validate_form_command(file: Path, json_output: bool) -> None:
    """Validate registration form fields stored in a JSON file.

    FILE holds one JSON object of form fields using snake_case or camelCase
    keys (e.g. "dateOfBirth": "1990-01-01"). Only the first problem found is
    reported.

    Exits with code 0 if the form is valid, code 1 otherwise.
    """
    if json_output:
        _suppress_console_logging()

    try:
        with open(file, "r", encoding="utf-8") as f:
            data = json_lib.load(f)
        if not isinstance(data, dict):
            raise ValueError("Form file must contain a JSON object")
        state = FormState.from_mapping(data)
    except (json_lib.JSONDecodeError, ValueError, TypeError) as e:
        click.secho(f"Invalid form file: {e}", fg="red", err=True)
        logger.error(f"Invalid form file {file}: {e}")
        sys.exit(1)

    error = validate_form(state)

    if json_output:
        click.echo(
            json_lib.dumps(
                {
                    "valid": error is None,
                    "error_kind": error.kind.value if error else None,
                    "error_message": error.message if error else None,
                },
                indent=2,
            )
        )
    elif error is None:
        click.secho("✓ Form is valid", fg="green")
    else:
        click.secho(f"✗ {error.message}", fg="red", err=True)

    sys.exit(0 if error is None else 1)
