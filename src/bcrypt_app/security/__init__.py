"""Password input and the calls into the bcrypt library."""

from bcrypt_app.security.password import (
    HashingError,
    PasswordInputError,
    hash_password,
    read_password,
    verify_password,
)

__all__ = [
    "HashingError",
    "PasswordInputError",
    "hash_password",
    "read_password",
    "verify_password",
]
