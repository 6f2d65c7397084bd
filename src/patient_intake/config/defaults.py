"""Default configuration values.

This module defines the default configuration values used when no configuration
file is provided or when configuration values are not specified.
"""

from typing import Any

# Used as a fallback when no configuration file is present
DEFAULT_CONFIG: dict[str, Any] = {
    "registration": {
        # Simulated backend round trip: 2 seconds
        "submit_delay_seconds": 2.0,
    },
    "logging": {
        "level": "INFO",
        "log_file": "logs/patient-intake.log",
        # Do not redact PII by default (user must opt-in for privacy)
        "redact_pii": False,
    },
}

DEFAULT_CONFIG_PATH = "config/config.json"
