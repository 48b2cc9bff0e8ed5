"""Domain models for bcrypt-app."""

from bcrypt_app.models.config import Configuration, ExitCode, HashType, RunMode

__all__ = [
    "Configuration",
    "ExitCode",
    "HashType",
    "RunMode",
]
