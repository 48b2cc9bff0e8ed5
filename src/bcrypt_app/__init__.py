"""bcrypt-app - command-line bcrypt password hashing and verification."""

__version__ = "0.1.0"

from bcrypt_app.models.config import Configuration, ExitCode, HashType, RunMode

__all__ = [
    "Configuration",
    "ExitCode",
    "HashType",
    "RunMode",
]
