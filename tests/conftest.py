"""Pytest configuration and fixtures."""

import os

import pytest
from typer.testing import CliRunner

from bcrypt_app.engine.resolver import ENV_PREFIX

# 16 ASCII characters, so 16 octets in UTF-8
FIXED_SALT = "abcdef0123456789"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep BCRYPT_* variables from the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def fixed_salt() -> bytes:
    return FIXED_SALT.encode("utf-8")
