"""
pawn2py - Pawn to Python Command-Line Interface
===============================================

This module implements the command-line driver for the translator. It
reads a Pawn source file, translates it, and writes the generated Python
module and the translation trace.

Usage Examples
--------------
Explicit output and log files:
    $ pawn2py hello.pwn hello.py hello.log

Default output (hello.py) and log (hello.log) next to the input:
    $ pawn2py hello.pwn

Two-space indentation, streaming the trace to stderr:
    $ pawn2py --indent-width 2 -v hello.pwn

Exit Status
-----------
0 on success; 1 for a usage error, a missing input file, an output or log
path that would overwrite the input, or any translation diagnostic; 3 for
an internal error.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from pawn2py import __version__
from pawn2py.compiler import PawnCompiler, TranslatorOptions, TranslationResult
from pawn2py.cli.errors import ExitCode, handle_cli_exception

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def printable(text: str) -> str:
    """Replace undecodable source bytes so text can be echoed to any console."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def check_distinct_from_input(input_file: Path, path: Path, role: str) -> None:
    """
    Exit with status 1 if writing to path would overwrite the input file.

    Args:
        input_file: Pawn source being translated
        path: Output or log destination
        role: "Output" or "Log", used in the error message
    """
    if path.resolve() == input_file.resolve():
        click.echo(
            f"Error: {role} file '{path}' would overwrite the input file.",
            err=True,
        )
        sys.exit(ExitCode.FAILURE)


def translate_file(
    input_path: Path,
    output_path: Optional[Path] = None,
    log_path: Optional[Path] = None,
    options: Optional[TranslatorOptions] = None,
) -> TranslationResult:
    """
    Translate a Pawn source file.

    The Python module is written only when translation succeeds; the trace
    log is written either way.

    Args:
        input_path: Pawn source file
        output_path: Where to write the generated Python (optional)
        log_path: Where to write the translation trace (optional)
        options: Translator configuration

    Returns:
        TranslationResult for the file

    Raises:
        FileNotFoundError: If the input file does not exist
    """
    input_path = Path(input_path)
    if not input_path.is_file():
        raise FileNotFoundError(f"Input file '{input_path}' does not exist.")

    # Bytes that are not UTF-8 pass through unchanged to the output and log.
    source = input_path.read_text(encoding="utf-8", errors="surrogateescape")
    result = PawnCompiler(options).compile_source(source, str(input_path))

    if result.success and output_path is not None:
        Path(output_path).write_text(
            result.python_code, encoding="utf-8", errors="surrogateescape"
        )
        logger.debug(f"Wrote {len(result.python_code)} characters to {output_path}")
    if log_path is not None:
        Path(log_path).write_text(result.trace, encoding="utf-8", errors="surrogateescape")
        logger.debug(f"Wrote trace to {log_path}")

    return result


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.argument(
    "output_file",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.argument(
    "log_file",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--indent-width",
    type=click.IntRange(min=1),
    default=4,
    show_default=True,
    help="Spaces per indentation level in the generated Python",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (streams the translation trace to stderr)",
)
@click.version_option(version=__version__, prog_name="pawn2py")
def main(
    input_file: Path,
    output_file: Optional[Path],
    log_file: Optional[Path],
    indent_width: int,
    verbose: bool,
) -> None:
    """
    Translate a Pawn program to Python.

    INPUT_FILE is the Pawn source (.pwn). OUTPUT_FILE defaults to the input
    name with a .py suffix, LOG_FILE to the input name with a .log suffix.

    \b
    Examples:
        pawn2py hello.pwn                      # hello.py, hello.log
        pawn2py hello.pwn out.py out.log       # explicit paths
        pawn2py --indent-width 2 hello.pwn     # two-space indentation
    """
    setup_logging(verbose)

    if not input_file.is_file():
        click.echo(f"Error: Input file '{input_file}' does not exist.", err=True)
        sys.exit(ExitCode.FAILURE)

    if output_file is None:
        output_file = input_file.with_suffix(".py")
    if log_file is None:
        log_file = input_file.with_suffix(".log")
    check_distinct_from_input(input_file, output_file, "Output")
    check_distinct_from_input(input_file, log_file, "Log")

    try:
        options = TranslatorOptions(indent=" " * indent_width)
        result = translate_file(input_file, output_file, log_file, options)
    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    if not result.success:
        click.echo("Compilation failed. Errors:")
        for diagnostic in result.diagnostics:
            click.echo(printable(str(diagnostic)))
        click.echo(f"Compilation log saved to: {log_file}")
        sys.exit(ExitCode.FAILURE)

    click.echo("Compilation completed successfully.")
    click.echo(f"Python code saved to: {output_file}")
    click.echo(f"Compilation log saved to: {log_file}")


def run() -> None:
    """
    Console-script entry point.

    Runs the command outside Click's standalone mode so usage errors exit
    with status 1 like every other failure.
    """
    try:
        main.main(standalone_mode=False)
    except (click.ClickException, click.Abort) as e:
        handle_cli_exception(e)


if __name__ == "__main__":
    run()
