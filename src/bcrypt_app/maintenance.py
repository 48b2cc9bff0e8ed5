"""Version reporting and dependency installation."""

import logging
import platform
import subprocess
import sys
from collections.abc import Callable, Sequence
from importlib import metadata
from typing import TYPE_CHECKING

from bcrypt_app import __version__

if TYPE_CHECKING:
    from bcrypt_app.reporter import Reporter

logger = logging.getLogger(__name__)

# Distributions the tool imports at runtime.
REQUIRED_MODULES: tuple[str, ...] = ("bcrypt", "pydantic", "rich", "typer")


def module_version(name: str) -> str | None:
    try:
        return metadata.version(name)
    except metadata.PackageNotFoundError:
        return None


def missing_modules(modules: Sequence[str] = REQUIRED_MODULES) -> list[str]:
    """Required distributions that are not installed."""
    return [name for name in modules if module_version(name) is None]


def update_modules(
    reporter: "Reporter",
    runner: Callable[[list[str]], int] | None = None,
) -> int:
    """Install any missing required distributions with pip.

    Returns:
        pip's exit status, or 0 when nothing needed installing.
    """
    missing = missing_modules()
    if not missing:
        reporter.info("All required modules are installed")
        return 0

    if runner is None:
        runner = _run_pip

    command = [sys.executable, "-m", "pip", "install", *missing]
    reporter.info(f"Installing {', '.join(missing)}")
    logger.info("Running %s", " ".join(command))
    return runner(command)


def _run_pip(command: list[str]) -> int:
    return subprocess.run(command, check=False).returncode


def version_lines(debug: bool = False) -> list[str]:
    """Version text, with runtime details when debugging."""
    lines = [f"bcrypt {__version__}"]
    if not debug:
        return lines

    lines.append(f"Python {platform.python_version()} ({sys.executable})")
    lines.append(f"Platform {platform.platform()}")
    for name in REQUIRED_MODULES:
        lines.append(f"  {name} {module_version(name) or 'not installed'}")
    return lines
