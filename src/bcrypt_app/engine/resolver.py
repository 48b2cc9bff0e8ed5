"""Merge defaults, environment variables and command-line flags."""

import logging
import os
import secrets
from collections.abc import Callable, Mapping
from typing import Any

from bcrypt_app.models.config import (
    DEFAULT_COST,
    DEFAULT_EOL,
    DEFAULT_TYPE,
    SALT_ENCODING,
    SALT_LENGTH,
    Configuration,
)

logger = logging.getLogger(__name__)

ENV_PREFIX = "BCRYPT_"

# Options that may come from the environment, with their built-in defaults.
# The salt default is drawn fresh on every resolution.
STRING_OPTIONS: dict[str, str | None] = {
    "cost": str(DEFAULT_COST),
    "type": DEFAULT_TYPE,
    "eol": DEFAULT_EOL,
    "salt": None,
}

FLAG_OPTIONS: tuple[str, ...] = ("no_eol", "quiet", "debug")

# Options that only exist on the command line.
CLI_ONLY_OPTIONS: tuple[str, ...] = ("password", "compare")
CLI_ONLY_FLAGS: tuple[str, ...] = ("help", "version", "update_modules")

_FALSE_VALUES = {"", "0", "false", "no", "off"}


def env_name(option: str) -> str:
    """Environment variable that overrides an option, e.g. ``BCRYPT_NO_EOL``."""
    return ENV_PREFIX + option.upper()


def env_flag(value: str) -> bool:
    """Interpret an environment variable as a boolean."""
    return value.strip().lower() not in _FALSE_VALUES


def random_salt() -> bytes:
    """Fresh salt octets from the operating system's secure source."""
    return secrets.token_bytes(SALT_LENGTH)


def resolve_options(
    flags: Mapping[str, Any],
    environ: Mapping[str, str] | None = None,
    token_source: Callable[[], bytes] | None = None,
) -> Configuration:
    """Build a configuration from command-line flags and the environment.

    A flag value of None (or False for boolean flags) means the flag was not
    given. Given flags override environment variables, which override the
    built-in defaults.

    Args:
        flags: Option values as parsed from the command line
        environ: Environment to read overrides from (defaults to os.environ)
        token_source: Callable producing default salt octets

    Returns:
        The resolved, not yet validated, Configuration
    """
    if environ is None:
        environ = os.environ
    if token_source is None:
        token_source = random_salt

    values: dict[str, Any] = {}

    for option, default in STRING_OPTIONS.items():
        value = flags.get(option)
        source = "flag"
        if value is None and env_name(option) in environ:
            value = environ[env_name(option)]
            source = "environment"
        if value is None:
            value = default
            source = "default"
        if value is not None:
            values[option] = value
        logger.debug("Option %s taken from %s", option, source)

    for option in FLAG_OPTIONS:
        if flags.get(option):
            values[option] = True
        elif env_name(option) in environ:
            values[option] = env_flag(environ[env_name(option)])
        else:
            values[option] = False

    for option in CLI_ONLY_OPTIONS:
        values[option] = flags.get(option)

    for option in CLI_ONLY_FLAGS:
        values[option] = bool(flags.get(option))

    salt = values.pop("salt", None)
    if salt is None:
        values["salt"] = token_source()
    else:
        try:
            values["salt"] = salt.encode(SALT_ENCODING)
        except UnicodeEncodeError as e:
            logger.debug("Salt could not be encoded: %s", e)
            values["salt"] = b""
            values["salt_error"] = f"Salt is not valid {SALT_ENCODING.upper()} text ({e.reason})"

    return Configuration(**values)
