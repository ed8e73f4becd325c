# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Command line interface module."""

# pylint: disable=too-many-arguments,too-many-positional-arguments
import json
import logging
import logging.config
from typing import Optional

import typer
from pydantic import ValidationError

from unchained._logging import LogLevel, get_logging_config
from unchained._version import __version__
from unchained.algorithms import Algorithm
from unchained.config import Settings
from unchained.errors import UnchainedError
from unchained.hashing import PasswordHasherDispatcher

APP_NAME = "unchained"
APP_HELP = "Django compatible password hashes"

EXIT_MISMATCH = 1
EXIT_UNSUPPORTED = 2

DEFAULT_SETTINGS = Settings.load()

app = typer.Typer(
    name=APP_NAME,
    help=APP_HELP,
    add_completion=False,
    no_args_is_help=True,
    add_help_option=True,
    pretty_exceptions_short=True,
)

LOG = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    log_level: LogLevel = typer.Option(
        default=DEFAULT_SETTINGS.log_level,
        help="The log level",
        case_sensitive=False,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Shortcut for --log-level DEBUG",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Encode and check Django compatible password hashes."""
    level = LogLevel.DEBUG if debug else log_level
    logging.config.dictConfig(get_logging_config(level.value))
    LOG.debug("Logging configured with level %s", level.value)


@app.command()
def encode(
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="The password to encode",
    ),
    algorithm: Algorithm = typer.Option(
        default=DEFAULT_SETTINGS.default_algorithm,
        help="The algorithm to encode with",
        case_sensitive=False,
    ),
    iterations: Optional[int] = typer.Option(
        default=None,
        min=1,
        help="The iteration count (default: the configured one)",
        show_default=False,
    ),
    salt: Optional[str] = typer.Option(
        default=None,
        help="The salt (default: random)",
        show_default=False,
    ),
) -> None:
    """Encode a password."""
    try:
        settings = Settings(
            default_algorithm=algorithm,
            pbkdf2_sha256_iterations=(
                iterations or DEFAULT_SETTINGS.pbkdf2_sha256_iterations
            ),
            pbkdf2_sha1_iterations=(
                iterations or DEFAULT_SETTINGS.pbkdf2_sha1_iterations
            ),
            salt_entropy=DEFAULT_SETTINGS.salt_entropy,
        )
    except ValidationError as exc:
        raise typer.BadParameter(
            f"Cannot encode with {algorithm.value}", param_hint="--algorithm"
        ) from exc
    dispatcher = PasswordHasherDispatcher(settings)
    try:
        encoded = dispatcher.make_password(password, salt=salt)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--salt") from exc
    typer.echo(encoded)


@app.command()
def check(
    encoded: str = typer.Argument(..., help="The encoded hash"),
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        help="The password to check",
    ),
) -> None:
    """Check a password against an encoded hash."""
    dispatcher = PasswordHasherDispatcher(DEFAULT_SETTINGS)
    try:
        matched = dispatcher.check_password(password, encoded)
    except UnchainedError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(EXIT_UNSUPPORTED) from exc
    if not matched:
        typer.secho("no match", fg=typer.colors.RED, err=True)
        raise typer.Exit(EXIT_MISMATCH)
    typer.secho("match", fg=typer.colors.GREEN)


@app.command()
def usable(
    encoded: str = typer.Argument(..., help="The encoded hash"),
) -> None:
    """Tell whether an encoded hash may ever match a password."""
    dispatcher = PasswordHasherDispatcher(DEFAULT_SETTINGS)
    is_usable = dispatcher.is_password_usable(encoded)
    typer.echo("true" if is_usable else "false")
    if not is_usable:
        raise typer.Exit(EXIT_MISMATCH)


@app.command()
def inspect(
    encoded: str = typer.Argument(..., help="The encoded hash"),
) -> None:
    """Show an encoded hash with its salt and digest masked."""
    dispatcher = PasswordHasherDispatcher(DEFAULT_SETTINGS)
    try:
        summary = dispatcher.identify_hasher(encoded).safe_summary(encoded)
    except UnchainedError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(EXIT_UNSUPPORTED) from exc
    summary["needs_rehash"] = str(dispatcher.needs_rehash(encoded)).lower()
    typer.echo(json.dumps(summary, indent=2))


if __name__ == "__main__":
    app()
