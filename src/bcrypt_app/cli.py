"""bcrypt CLI - Typer-based command line interface."""

import logging
import os
from collections.abc import Callable
from typing import Annotated

import typer

from bcrypt_app.engine.resolver import resolve_options
from bcrypt_app.engine.validator import validate_config
from bcrypt_app.maintenance import update_modules, version_lines
from bcrypt_app.models.config import Configuration, ExitCode, RunMode
from bcrypt_app.reporter import Reporter
from bcrypt_app.security.password import (
    HashingError,
    PasswordInputError,
    hash_password,
    read_password,
    verify_password,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="bcrypt",
    help="Hash a password with bcrypt, or check a password against a bcrypt hash",
)


def _configure_logging(debug: bool) -> None:
    level_name = "DEBUG" if debug else os.environ.get("BCRYPT_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _update_modules(ctx: typer.Context, config: Configuration, reporter: Reporter) -> int:
    return update_modules(reporter)


def _show_version(ctx: typer.Context, config: Configuration, reporter: Reporter) -> int:
    for line in version_lines(debug=config.debug):
        reporter.result(line)
    return ExitCode.SUCCESS


def _show_help(ctx: typer.Context, config: Configuration, reporter: Reporter) -> int:
    # The rich formatter prints the help itself and returns an empty string.
    help_text = ctx.get_help()
    if help_text:
        typer.echo(help_text, color=ctx.color)
    return ExitCode.SUCCESS


def _run(ctx: typer.Context, config: Configuration, reporter: Reporter) -> int:
    report = validate_config(config)
    if not report.valid:
        for message in report.messages:
            reporter.error(message)
        return ExitCode.INVALID_INPUT

    try:
        password = read_password(config, reporter)
    except PasswordInputError as e:
        reporter.error(str(e))
        return ExitCode.INVALID_INPUT

    try:
        if config.is_compare:
            return _compare(password, config, reporter)
        return _hash(password, config, reporter)
    except HashingError as e:
        logger.debug("bcrypt failed", exc_info=True)
        reporter.error(str(e))
        return ExitCode.FAILURE


def _hash(password: str, config: Configuration, reporter: Reporter) -> int:
    hashed = hash_password(password, config.hash_type, config.cost_factor, config.salt)
    reporter.result(hashed, end=config.terminator)
    return ExitCode.SUCCESS


def _compare(password: str, config: Configuration, reporter: Reporter) -> int:
    if verify_password(password, config.compare):
        reporter.result("Match")
        return ExitCode.SUCCESS

    reporter.result("Does not match")
    return ExitCode.NO_MATCH


RunModeHandler = Callable[[typer.Context, Configuration, Reporter], int]

RUN_MODE_HANDLERS: dict[RunMode, RunModeHandler] = {
    RunMode.UPDATE_MODULES: _update_modules,
    RunMode.VERSION: _show_version,
    RunMode.HELP: _show_help,
    RunMode.RUN: _run,
}


@app.command(add_help_option=False)
def main(
    ctx: typer.Context,
    compare: Annotated[
        str | None, typer.Option("--compare", help="Compare the password against this hash")
    ] = None,
    cost: Annotated[
        str | None, typer.Option("--cost", "-c", help="Cost factor, 5 to 31 [env: BCRYPT_COST]")
    ] = None,
    debug: Annotated[
        bool, typer.Option("--debug", "-d", help="Show debugging output [env: BCRYPT_DEBUG]")
    ] = False,
    eol: Annotated[
        str | None,
        typer.Option("--eol", "-e", help="Text written after the hash [env: BCRYPT_EOL]"),
    ] = None,
    help_: Annotated[bool, typer.Option("--help", "-h", help="Show this message and exit")] = False,
    no_eol: Annotated[
        bool,
        typer.Option("--no-eol", "-n", help="Write nothing after the hash [env: BCRYPT_NO_EOL]"),
    ] = False,
    password: Annotated[
        str | None,
        typer.Option("--password", "-p", help="Password to hash (default: read a line of input)"),
    ] = None,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Suppress informational text [env: BCRYPT_QUIET]")
    ] = False,
    salt: Annotated[
        str | None,
        typer.Option("--salt", "-s", help="16 octet salt (default: random) [env: BCRYPT_SALT]"),
    ] = None,
    type_: Annotated[
        str | None,
        typer.Option("--type", "-t", help="bcrypt type: 2a, 2b, 2x or 2y [env: BCRYPT_TYPE]"),
    ] = None,
    update_modules_: Annotated[
        bool, typer.Option("--update-modules", help="Install missing dependencies and exit")
    ] = False,
    version: Annotated[bool, typer.Option("--version", "-v", help="Show the version and exit")] = False,
) -> None:
    """Hash a password, or compare one against a bcrypt hash.

    The password comes from --password or from one line of standard input.
    Exit status is 0 on success or a match, 1 when the comparison does not
    match, and 2 for invalid input.
    """
    config = resolve_options(
        {
            "compare": compare,
            "cost": cost,
            "debug": debug,
            "eol": eol,
            "help": help_,
            "no_eol": no_eol,
            "password": password,
            "quiet": quiet,
            "salt": salt,
            "type": type_,
            "update_modules": update_modules_,
            "version": version,
        }
    )

    _configure_logging(config.debug)
    logger.debug("Resolved configuration: %s", config.describe())

    reporter = Reporter(quiet=config.quiet)
    mode = config.run_mode
    logger.debug("Run mode: %s", mode.value)

    raise typer.Exit(int(RUN_MODE_HANDLERS[mode](ctx, config, reporter)))


if __name__ == "__main__":
    app()
