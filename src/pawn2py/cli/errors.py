"""
CLI Error Handling
==================

Provides consistent error reporting and exit codes for the pawn2py tool.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Exit codes for the CLI."""
    SUCCESS = 0
    FAILURE = 1          # Usage error, missing input, or translation diagnostics
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception raised while running the CLI and exit.

    Args:
        error: The exception that was raised
        verbose: If True, print the traceback for internal errors

    Raises:
        SystemExit: Always
    """
    if isinstance(error, click.ClickException):
        # Usage errors, bad parameters
        error.show()
        sys.exit(ExitCode.FAILURE)

    elif isinstance(error, click.Abort):
        click.echo("Aborted!", err=True)
        sys.exit(ExitCode.FAILURE)

    elif isinstance(error, (FileNotFoundError, PermissionError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.FAILURE)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
