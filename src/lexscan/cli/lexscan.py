"""
lexscan - Lexical Analyser Command-Line Interface
=================================================

This module implements the command-line interface for the scanner. It
reads a C-like source file, scans it, and prints one table row per token.

Usage Examples
--------------
Scan ./input.c:
    $ lexscan

Scan another file:
    $ lexscan prog.c

Flag unterminated block comments and log what the scanner is doing:
    $ lexscan --strict-comments -v prog.c
"""

import logging
from pathlib import Path

import click

from lexscan import __version__
from lexscan.cli.errors import handle_cli_exception
from lexscan.lexer import Scanner, ScannerOptions
from lexscan.lexer.scanner import DEFAULT_MAX_LEXEME_LENGTH
from lexscan.loader import DEFAULT_INPUT_PATH, load_source
from lexscan.report import TokenTableReporter

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging to stderr when verbose output is requested."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    default=DEFAULT_INPUT_PATH,
    type=click.Path(path_type=Path),
)
@click.option(
    "--max-lexeme-length",
    type=click.IntRange(min=3),
    default=DEFAULT_MAX_LEXEME_LENGTH,
    show_default=True,
    help="Longest lexeme accepted before the scan fails",
)
@click.option(
    "--strict-comments",
    is_flag=True,
    help="Report an unterminated /* comment as an ERROR token",
)
@click.option(
    "--drop-unknown",
    is_flag=True,
    help="Silently skip unrecognized characters instead of reporting ERROR tokens",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging on stderr)",
)
@click.version_option(version=__version__, prog_name="lexscan")
def main(
    input_file: Path,
    max_lexeme_length: int,
    strict_comments: bool,
    drop_unknown: bool,
    verbose: bool,
) -> None:
    """
    Scan a C-like source file and print its token table.

    INPUT_FILE is the source file to scan (default: input.c).

    \b
    Each row shows the lexeme, its token type and the numeric token id:
        INPUT      TOKEN TYPE      TOKEN ID
        int        RESERVED_WORD   6
    """
    setup_logging(verbose)

    options = ScannerOptions(
        max_lexeme_length=max_lexeme_length,
        report_unknown_characters=not drop_unknown,
        report_unterminated_comments=strict_comments,
    )

    try:
        source = load_source(input_file)

        reporter = TokenTableReporter()
        reporter.start()
        count = Scanner(source, str(input_file), options).analyze(reporter)

        logger.debug(f"Reported {count} tokens from {input_file}")

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
