"""Password input and hashing using bcrypt."""

import base64
import logging
import sys
from typing import TYPE_CHECKING, TextIO

import bcrypt

from bcrypt_app.models.config import SALT_LENGTH, Configuration, HashType

if TYPE_CHECKING:
    from bcrypt_app.reporter import Reporter

logger = logging.getLogger(__name__)

# bcrypt's radix-64 alphabet, position for position against standard base64.
_STANDARD_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_BCRYPT_ALPHABET = b"./ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
_TO_BCRYPT = bytes.maketrans(_STANDARD_ALPHABET, _BCRYPT_ALPHABET)

ENCODED_SALT_LENGTH = 22


class HashingError(Exception):
    """The bcrypt library rejected its input."""


class PasswordInputError(Exception):
    """The password could not be read as text."""


def read_password(
    config: Configuration,
    reporter: "Reporter",
    stream: TextIO | None = None,
) -> str:
    """Return the password from the configuration or one line of input.

    Args:
        config: Resolved configuration; an explicit password is used verbatim
        reporter: Announces the read unless quiet
        stream: Where to read from (defaults to standard input)

    Returns:
        The password without its line terminator.

    Raises:
        PasswordInputError: If the input line cannot be decoded.
    """
    if config.password is not None:
        return config.password

    if stream is None:
        stream = sys.stdin

    reporter.info("Reading password from standard input...")
    try:
        line = stream.readline()
    except UnicodeDecodeError as e:
        raise PasswordInputError(
            f"Password on standard input is not valid UTF-8 ({e.reason})"
        ) from e
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def encode_salt(raw: bytes) -> str:
    """Encode raw salt octets in bcrypt's radix-64 form."""
    if len(raw) != SALT_LENGTH:
        raise HashingError(f"Salt must be {SALT_LENGTH} octets, got {len(raw)}")
    encoded = base64.b64encode(raw).rstrip(b"=").translate(_TO_BCRYPT)
    return encoded.decode("ascii")[:ENCODED_SALT_LENGTH]


def build_setting(hash_type: HashType, cost: int, salt: bytes) -> str:
    """Setting string bcrypt uses as its salt argument, e.g. ``$2b$12$...``."""
    return f"${hash_type.value}${cost:02d}${encode_salt(salt)}"


def hash_password(password: str, hash_type: HashType, cost: int, salt: bytes) -> str:
    """Hash a password using bcrypt.

    Args:
        password: Plain text password to hash.
        hash_type: bcrypt variant.
        cost: Cost factor.
        salt: Raw 16 octet salt.

    Returns:
        Hashed password string.
    """
    setting = build_setting(hash_type, cost, salt)
    logger.debug("Hashing with type %s and cost %d", hash_type.value, cost)
    try:
        hashed = bcrypt.hashpw(password.encode("utf-8"), setting.encode("ascii"))
    except (TypeError, ValueError) as e:
        raise HashingError(f"bcrypt could not hash the password: {e}") from e
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a hash.

    Args:
        plain_password: Plain text password to verify.
        hashed_password: Stored password hash.

    Returns:
        True if password matches, False otherwise.
    """
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except (TypeError, ValueError) as e:
        raise HashingError(f"bcrypt could not check the password: {e}") from e
