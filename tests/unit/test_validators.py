"""Unit tests for field validators.

Tests each validator's failure categories and messages, calendar-exact age
calculation, and first-error-wins form validation.
"""

from dataclasses import replace
from datetime import date, datetime

import pytest

from patient_intake.validation.validators import (
    ErrorKind,
    FieldError,
    calculate_age,
    validate_date_of_birth,
    validate_email,
    validate_form,
    validate_insurance_id,
    validate_name,
    validate_phone,
    validate_selection,
)

TODAY = date(2024, 6, 15)


class TestValidateName:
    """Test suite for validate_name."""

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_blank_name_is_empty_field(self, value):
        """Test missing or whitespace-only names report EMPTY_FIELD."""
        error = validate_name(value)

        assert error.kind == ErrorKind.EMPTY_FIELD
        assert error.message == "Name is required"

    @pytest.mark.parametrize("value", ["J", " J ", "x"])
    def test_short_name_is_too_short(self, value):
        """Test names under 2 trimmed characters report TOO_SHORT."""
        error = validate_name(value)

        assert error.kind == ErrorKind.TOO_SHORT
        assert "at least 2 characters" in error.message

    @pytest.mark.parametrize("value", ["Jane2", "O'Brien", "Jane-Doe", "José"])
    def test_non_letter_name_is_invalid_format(self, value):
        """Test characters outside letters and spaces report INVALID_FORMAT."""
        error = validate_name(value)

        assert error.kind == ErrorKind.INVALID_FORMAT
        assert error.message == "Name can only contain letters and spaces"

    @pytest.mark.parametrize("value", ["Jo", "Jane Doe", "  Mary Ann Smith  "])
    def test_valid_name(self, value):
        """Test letters and spaces with length >= 2 pass."""
        assert validate_name(value) is None


class TestValidateEmail:
    """Test suite for validate_email."""

    def test_blank_email(self):
        """Test blank e-mail reports EMPTY_FIELD."""
        assert validate_email("  ").kind == ErrorKind.EMPTY_FIELD
        assert validate_email(None).message == "Email is required"

    @pytest.mark.parametrize(
        "value",
        ["jane", "jane@", "jane@example", "@example.com", "jane@example.c", "jane@example.comma"],
    )
    def test_invalid_email(self, value):
        """Test malformed addresses report INVALID_FORMAT."""
        error = validate_email(value)

        assert error.kind == ErrorKind.INVALID_FORMAT
        assert error.message == "Please enter a valid email address"

    @pytest.mark.parametrize(
        "value",
        ["jane@example.com", "jane.doe-1@mail.example.org", "  JANE@EXAMPLE.COM  "],
    )
    def test_valid_email(self, value):
        """Test addresses with word chars, dots and hyphens pass."""
        assert validate_email(value) is None


class TestValidatePhone:
    """Test suite for validate_phone."""

    def test_blank_phone(self):
        """Test blank phone reports EMPTY_FIELD."""
        error = validate_phone("")

        assert error.kind == ErrorKind.EMPTY_FIELD
        assert error.message == "Phone number is required"

    @pytest.mark.parametrize("value", ["555-1234", "123456789", "123456789012", "phone"])
    def test_wrong_digit_count(self, value):
        """Test digit counts other than 10 or 11 report INVALID_LENGTH."""
        error = validate_phone(value)

        assert error.kind == ErrorKind.INVALID_LENGTH
        assert error.message == "Phone number must be 10 or 11 digits"

    @pytest.mark.parametrize("value", ["5551234567", "(555) 123-4567", "+1 555 123 4567"])
    def test_valid_phone(self, value):
        """Test 10 or 11 digits pass regardless of punctuation."""
        assert validate_phone(value) is None

    def test_custom_label(self):
        """Test the field label appears in messages."""
        error = validate_phone(None, "Emergency contact")

        assert error.message == "Emergency contact is required"


class TestCalculateAge:
    """Test suite for calculate_age."""

    def test_birthday_not_yet_reached(self):
        """Test age is decremented the day before the birthday."""
        assert calculate_age(date(2000, 6, 16), today=TODAY) == 23

    def test_birthday_today(self):
        """Test age increments on the birthday itself."""
        assert calculate_age(date(2000, 6, 15), today=TODAY) == 24

    def test_birthday_in_earlier_month(self):
        """Test a birthday earlier in the year has passed."""
        assert calculate_age(date(2000, 1, 31), today=TODAY) == 24

    def test_birthday_in_later_month(self):
        """Test a birthday later in the year has not passed."""
        assert calculate_age(date(2000, 12, 1), today=TODAY) == 23

    def test_leap_day_birthday(self):
        """Test a Feb 29 birthday counts on Mar 1 of a common year."""
        assert calculate_age(date(2000, 2, 29), today=date(2023, 2, 28)) == 22
        assert calculate_age(date(2000, 2, 29), today=date(2023, 3, 1)) == 23

    def test_future_birth_date_is_negative(self):
        """Test a date of birth after the reference date yields a negative age."""
        assert calculate_age(date(2025, 1, 1), today=TODAY) == -1

    def test_accepts_datetimes(self):
        """Test datetime arguments use their date part."""
        assert calculate_age(datetime(2000, 6, 16, 23, 59), today=datetime(2024, 6, 15, 8)) == 23

    def test_idempotent_for_fixed_reference(self):
        """Test repeated calls with the same inputs agree."""
        results = {calculate_age(date(1990, 1, 1), today=TODAY) for _ in range(3)}

        assert results == {34}

    def test_defaults_to_today(self):
        """Test the reference date defaults to the current date."""
        assert calculate_age(date.today()) == 0


class TestValidateDateOfBirth:
    """Test suite for validate_date_of_birth."""

    def test_missing_date(self):
        """Test a missing date reports EMPTY_FIELD."""
        error = validate_date_of_birth(None)

        assert error.kind == ErrorKind.EMPTY_FIELD
        assert error.message == "Date of birth is required"

    def test_age_200_is_out_of_range(self):
        """Test an age over 150 reports OUT_OF_RANGE."""
        error = validate_date_of_birth(date(1824, 6, 15), today=TODAY)

        assert error.kind == ErrorKind.OUT_OF_RANGE
        assert error.message == "Please enter a valid date of birth"

    def test_future_date_is_out_of_range(self):
        """Test a negative age reports OUT_OF_RANGE."""
        error = validate_date_of_birth(date(2024, 6, 16), today=TODAY)

        assert error.kind == ErrorKind.OUT_OF_RANGE

    @pytest.mark.parametrize("dob", [date(2024, 6, 15), date(1874, 6, 15), date(1990, 1, 1)])
    def test_boundary_ages_pass(self, dob):
        """Test ages 0 and 150 are accepted."""
        assert validate_date_of_birth(dob, today=TODAY) is None


class TestValidateInsuranceId:
    """Test suite for validate_insurance_id."""

    def test_valid_insurance_id(self):
        """Test two letters and six digits pass."""
        assert validate_insurance_id("AB123456", True) is None

    def test_not_required_without_insurance(self):
        """Test any value passes when the patient has no insurance."""
        assert validate_insurance_id("AB123456", False) is None
        assert validate_insurance_id("", False) is None
        assert validate_insurance_id(None, False) is None

    def test_blank_with_insurance(self):
        """Test blank ID reports EMPTY_FIELD when insured."""
        error = validate_insurance_id("", True)

        assert error.kind == ErrorKind.EMPTY_FIELD
        assert error.message == "Insurance ID is required"

    def test_short_id(self):
        """Test IDs under 5 characters report TOO_SHORT."""
        error = validate_insurance_id("AB12", True)

        assert error.kind == ErrorKind.TOO_SHORT

    @pytest.mark.parametrize("value", ["A1234567", "ABC123456", "AB12345", "AB12345678901"])
    def test_wrong_pattern(self, value):
        """Test IDs not matching two letters + 6-10 digits report INVALID_FORMAT."""
        error = validate_insurance_id(value, True)

        assert error.kind == ErrorKind.INVALID_FORMAT
        assert error.message == "Invalid insurance ID format (e.g., AB123456)"

    def test_lowercase_is_validated_upper_cased(self):
        """Test lower-case letters are accepted after upper-casing."""
        assert validate_insurance_id(" ab1234567890 ", True) is None


class TestValidateSelection:
    """Test suite for validate_selection."""

    def test_missing_selection(self):
        """Test a missing selection asks the user to select one."""
        error = validate_selection(None, "gender", ["Male", "Female", "Other"])

        assert error.kind == ErrorKind.EMPTY_FIELD
        assert error.message == "Please select a gender"

    def test_unknown_selection(self):
        """Test an unknown value reports INVALID_FORMAT."""
        error = validate_selection("C+", "blood type", ["A+", "O+"])

        assert error.kind == ErrorKind.INVALID_FORMAT
        assert error.message == "Invalid blood type: C+"

    def test_case_insensitive_match(self):
        """Test selections match regardless of case."""
        assert validate_selection("female", "gender", ["Male", "Female"]) is None


class TestValidateForm:
    """Test suite for validate_form."""

    def test_valid_form(self, valid_form_state):
        """Test a completely valid form has no error."""
        assert validate_form(valid_form_state, today=TODAY) is None

    def test_first_error_wins(self, valid_form_state):
        """Test only the first failing field (in form order) is reported."""
        state = replace(valid_form_state, name="", email="bad", phone="1")

        error = validate_form(state, today=TODAY)

        assert error == FieldError(ErrorKind.EMPTY_FIELD, "Name is required")

    def test_date_of_birth_checked_before_selections(self, valid_form_state):
        """Test an out-of-range date of birth is reported before missing selections."""
        state = replace(valid_form_state, date_of_birth=date(1824, 6, 15), gender=None)

        error = validate_form(state, today=TODAY)

        assert error.kind == ErrorKind.OUT_OF_RANGE

    def test_missing_blood_type(self, valid_form_state):
        """Test a missing blood type is reported."""
        state = replace(valid_form_state, blood_type=None)

        assert validate_form(state, today=TODAY).message == "Please select a blood type"

    def test_insurance_id_required_when_insured(self, valid_form_state):
        """Test the insurance ID is only checked when insured."""
        state = replace(valid_form_state, has_insurance=True, insurance_id="")

        assert validate_form(state, today=TODAY).message == "Insurance ID is required"

    def test_emergency_contact_checked(self, valid_form_state):
        """Test the emergency contact uses phone validation."""
        state = replace(valid_form_state, emergency_contact="555")

        error = validate_form(state, today=TODAY)

        assert error.kind == ErrorKind.INVALID_LENGTH
        assert error.message == "Emergency contact must be 10 or 11 digits"

    def test_field_error_str_is_message(self):
        """Test FieldError renders as its message."""
        assert str(FieldError(ErrorKind.TOO_SHORT, "too short")) == "too short"
