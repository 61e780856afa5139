"""
CLI Error Handling
==================

Maps exceptions raised by the osasm command to messages and exit codes.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from osclan_asm.errors import OsclanError


class ExitCode(IntEnum):
    """Exit codes for the osasm command."""
    SUCCESS = 0
    BUILD_ERROR = 1      # Lexical or syntax error in the source
    INVALID_ARGS = 2     # Invalid arguments or missing files
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(
    error: Exception,
    verbose: bool = False,
    error_type: str | None = None
) -> NoReturn:
    """
    Exception handler for the osasm command.

    Formats the error message, optionally prints a traceback in verbose
    mode, and exits with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors
        error_type: Optional prefix for the error message (e.g., "Assembly")

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    if isinstance(error, OsclanError):
        # Assembler errors already carry "file:line:col: error:" formatting
        prefix = f"{error_type} failed\n" if error_type else ""
        click.echo(f"{prefix}{error}", err=True)
        sys.exit(ExitCode.BUILD_ERROR)

    elif isinstance(error, click.BadParameter):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, (FileNotFoundError, PermissionError, UnicodeDecodeError)):
        # Missing, unreadable, or undecodable input files
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
