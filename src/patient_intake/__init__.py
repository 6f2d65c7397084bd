"""Patient Intake - patient registration validation and submission pipeline."""

__version__ = "0.1.0"
