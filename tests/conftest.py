"""
Shared pytest configuration and fixtures.

This module provides fixtures and configuration used across all test suites
(unit and integration tests).
"""

import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Generator

import pytest

from patient_intake.models.form_state import FormState


@pytest.fixture
def project_root() -> Path:
    """
    Return the project root directory.

    Returns:
        Path: Absolute path to the project root directory.
    """
    return Path(__file__).parent.parent


@pytest.fixture
def reference_now() -> datetime:
    """
    Return a fixed registration timestamp.

    Returns:
        datetime: 2024-06-15 12:00 UTC.
    """
    return datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def valid_form_state() -> FormState:
    """
    Return a completely filled-in, valid registration form.

    Returns:
        FormState: Jane Doe, uninsured, no allergies.
    """
    return FormState(
        name="Jane Doe",
        email="jane@example.com",
        phone="5551234567",
        address="12 Elm Street",
        emergency_contact="5559876543",
        date_of_birth=date(1990, 1, 1),
        gender="Female",
        blood_type="O+",
        has_insurance=False,
    )


@pytest.fixture
def sample_form_dict() -> dict:
    """
    Return valid registration form fields as JSON-style data.

    Returns:
        dict: Form fields keyed by camelCase names.
    """
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "phone": "5551234567",
        "dateOfBirth": "1990-01-01",
        "gender": "Female",
        "bloodType": "O+",
        "hasInsurance": False,
        "emergencyContact": "5559876543",
    }


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """
    Restore root logger handlers and level after each test.

    configure_logging() replaces the root handlers; CLI tests bind them to
    streams that are closed once the runner returns.
    """
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
