"""
mathlang-lex: dump the tokens of a mathlang source.

    mathlang-lex program.ml
    mathlang-lex -e 'x = 1 + 2;'
"""

import logging
import sys
from typing import Optional

import click

from .lexer import LexerError, Scanner, ScannerConfig

logger = logging.getLogger(__name__)


def format_token(token) -> str:
    """One line per token: position, type and value."""
    location = token.location
    position = f"{location.line}:{location.column}" if location else "?:?"
    return f"{position}\t{token.type.name}\t{token.value!r}"


@click.command()
@click.argument('path', required=False, type=click.Path(exists=True, dir_okay=False))
@click.option('--expression', '-e', help='Scan this text instead of a file')
@click.option('--strict', is_flag=True, help='Fail on unterminated string literals')
@click.option('--verbose', '-v', is_flag=True, help='Log scanner activity to stderr')
def main(path: Optional[str], expression: Optional[str], strict: bool, verbose: bool):
    """Print the tokens of PATH or of an --expression."""
    if (path is None) == (expression is None):
        raise click.UsageError("Give exactly one of PATH or --expression")

    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    if path is not None:
        with open(path, 'r', encoding='utf-8') as f:
            source = f.read()
        filename = path
    else:
        source = expression
        filename = "<expression>"

    scanner = Scanner(source, ScannerConfig(strict_strings=strict, filename=filename))
    try:
        for token in scanner:
            click.echo(format_token(token))
    except LexerError as e:
        logger.debug("Scan aborted: %s", e.diagnostic.message)
        click.echo(str(e), err=True, nl=False)
        sys.exit(1)

    for warning in scanner.warnings:
        click.echo(str(warning), err=True, nl=False)


if __name__ == '__main__':
    main()
