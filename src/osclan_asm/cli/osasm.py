"""
osasm - Assembler Front End Command-Line Interface
==================================================

This module implements the command-line interface for the assembler front
end. It reads one source file, runs the lexer and parser, and prints the
resulting token list or syntax tree.

Usage Examples
--------------
Print the syntax tree:
    $ osasm program.s

Print the token list:
    $ osasm --tokens program.s

Reject operand lists that match no instruction shape:
    $ osasm --strict program.s

Verbose mode:
    $ osasm -v program.s
"""

import logging
from pathlib import Path
from typing import Optional

import click

from osclan_asm import __version__
from osclan_asm.assembler import Frontend
from osclan_asm.cli.errors import handle_cli_exception
from osclan_asm.config import FrontendConfig

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-t", "--tokens",
    is_flag=True,
    help="Print the token list instead of the syntax tree",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Reject instructions whose operands match none of the accepted "
         "shapes (e.g. 'RET X0'). Default: off, or OSCLAN_ASM_STRICT.",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="osasm")
def main(
    input_file: Path,
    tokens: bool,
    strict: Optional[bool],
    verbose: bool,
) -> None:
    """
    Tokenize and parse an AArch64 assembly source file.

    INPUT_FILE is the assembly source file (.s) to process.

    \b
    Examples:
        osasm hello.s             # Print the syntax tree
        osasm --tokens hello.s    # Print the token list
        osasm --strict hello.s    # Check operand shapes
    """
    setup_logging(verbose)

    config = FrontendConfig.from_env()
    if strict is not None:
        config.strict_operands = strict
    logger.debug(f"Strict operand checking: {'on' if config.strict_operands else 'off'}")

    frontend = Frontend(config)

    try:
        if verbose:
            click.echo(f"Assembling file {input_file}")

        if tokens:
            token_list = frontend.tokenize_file(input_file)
            for token in token_list:
                click.echo(repr(token))
            if verbose:
                click.echo(f"{len(token_list)} tokens")
            return

        root = frontend.parse_file(input_file)
        click.echo(root.pretty())
        if verbose:
            click.echo(f"{len(root.children)} statements")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Assembly")


if __name__ == "__main__":
    main()
