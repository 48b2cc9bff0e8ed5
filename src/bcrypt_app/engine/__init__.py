"""Option resolution and validation."""

from bcrypt_app.engine.resolver import resolve_options
from bcrypt_app.engine.validator import ValidationReport, ValidationResult, validate_config

__all__ = [
    "ValidationReport",
    "ValidationResult",
    "resolve_options",
    "validate_config",
]
