"""Custom log formatters for Patient Intake.

This module provides specialized formatters for logging, including PII redaction.
"""

import logging
import re
from typing import List, Tuple


class PIIRedactingFormatter(logging.Formatter):
    """Custom formatter that redacts Personally Identifiable Information (PII) from log messages.

    Registration payloads are logged verbatim, so this formatter masks the
    identifying details a patient record carries: contact details, names,
    address, date of birth, insurance ID and medical information.

    Attributes:
        redact_pii: Whether to enable PII redaction
        patterns: List of (regex_pattern, replacement_text) tuples for redaction

    Example:
        >>> formatter = PIIRedactingFormatter(
        ...     fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        ...     redact_pii=True
        ... )
        >>> handler = logging.StreamHandler()
        >>> handler.setFormatter(formatter)
    """

    def __init__(
        self,
        fmt: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt: str | None = None,
        redact_pii: bool = False,
    ) -> None:
        """Initialize the PIIRedactingFormatter.

        Args:
            fmt: Log message format string
            datefmt: Date format string (optional)
            redact_pii: Whether to enable PII redaction
        """
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.redact_pii = redact_pii

        # Define redaction patterns: (regex, replacement_text)
        self.patterns: List[Tuple[re.Pattern[str], str]] = [
            # E-mail addresses: jane@example.com
            (re.compile(r"[\w\-.]+@([\w-]+\.)+[\w-]{2,4}"), "[EMAIL-REDACTED]"),

            # Formatted phone numbers: (555) 123-4567, +1 (555) 123-4567
            (re.compile(r"(\+\d )?\(\d{3}\) \d{3}-\d{4}"), "[PHONE-REDACTED]"),

            # Bare 10/11 digit phone numbers
            (re.compile(r"\b\d{10,11}\b"), "[PHONE-REDACTED]"),

            # Serialized record names: 'name': 'Jane Doe'
            (re.compile(r"""'name': (?:'[^']*'|"[^"]*")"""), "'name': '[NAME-REDACTED]'"),

            # Serialized health and identity fields: 'insuranceId': 'AB123456'
            (re.compile(
                r"""'(address|dateOfBirth|insuranceId|medicalHistory)': (?:'[^']*'|"[^"]*")"""
            ), r"'\1': '[PHI-REDACTED]'"),

            # Serialized lists: 'allergies': ['Penicillin']
            (re.compile(r"'(allergies|currentMedications)': \[[^\]]+\]"),
             r"'\1': ['[PHI-REDACTED]']"),

            # Matches: name="John Doe", name='Jane Smith', name=Bob Jones
            (re.compile(r'name=["\']?([^"\'|]+)["\']?'), "name=[NAME-REDACTED]"),

            # Matches: "Patient: John Doe", "Name: Jane Smith"
            (re.compile(r"(Patient|Name):\s+([A-Z][a-z]+(?:\s+[A-Z][a-z]+)+)"),
             r"\1: [NAME-REDACTED]"),
        ]

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with optional PII redaction.

        Args:
            record: Log record to format

        Returns:
            Formatted log message with PII redacted if enabled
        """
        original = super().format(record)

        if self.redact_pii:
            for pattern, replacement in self.patterns:
                original = pattern.sub(replacement, original)

        return original
