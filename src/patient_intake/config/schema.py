"""Configuration schema models using pydantic.

This module defines the configuration structure and validation rules using pydantic.
All configuration values are validated according to the schema defined here.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class RegistrationConfig(BaseModel):
    """Configuration for the registration submitter.

    Attributes:
        submit_delay_seconds: Artificial delay of the simulated registration call
    """

    submit_delay_seconds: float = Field(
        default=2.0,
        ge=0.0,
        description="Simulated registration delay in seconds"
    )


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file
        redact_pii: Whether to redact PII from logs
    """

    level: str = Field(
        default="INFO",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_file: Path = Field(
        default=Path("logs/patient-intake.log"),
        description="Log file path"
    )
    redact_pii: bool = Field(
        default=False,
        description="Redact PII from logs"
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level.

        Args:
            v: Log level string

        Returns:
            Validated log level (uppercase)

        Raises:
            ValueError: If log level is not valid
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(valid_levels)}"
            )
        return v_upper


class Config(BaseModel):
    """Root configuration model.

    Attributes:
        registration: Registration submitter configuration
        logging: Logging configuration

    Example:
        >>> config = Config(registration=RegistrationConfig(submit_delay_seconds=0.5))
        >>> config.registration.submit_delay_seconds
        0.5
    """

    registration: RegistrationConfig = RegistrationConfig()
    logging: LoggingConfig = LoggingConfig()
