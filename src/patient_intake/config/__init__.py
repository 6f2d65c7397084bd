"""Config module.

This module provides configuration management functionality.
"""

from patient_intake.config.manager import load_config
from patient_intake.config.schema import (
    Config,
    LoggingConfig,
    RegistrationConfig,
)

__all__ = [
    "load_config",
    "Config",
    "LoggingConfig",
    "RegistrationConfig",
]
