"""
Command-line interface for pdfstreamx.
"""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pdfstreamx import __version__
from pdfstreamx.exceptions import PDFReadError, TokenizeError
from pdfstreamx.lexer import ByteCursor
from pdfstreamx.streams import DEFAULT_PREVIEW_BYTES, DEFAULT_SEPARATOR, DumpOptions, StreamReport, describe_stream
from pdfstreamx.tokens import Dictionary, Number, Stream, Symbol, Token
from pdfstreamx.utils import get_logger, read_pdf_bytes

console = Console()
err_console = Console(stderr=True, soft_wrap=True)


def _configure_logging(verbose: bool) -> None:
    get_logger("pdfstreamx", logging.DEBUG if verbose else logging.WARNING)


def _describe_token(token: Token) -> str:
    if isinstance(token, Number):
        return str(token.value)
    if isinstance(token, Symbol):
        return token.text
    if isinstance(token, Dictionary):
        return f"{token.length} bytes"
    return f"{len(token.data)} bytes"


def _emit_report(report: StreamReport, options: DumpOptions) -> None:
    if report.decoded:
        click.echo(report.text)
    else:
        err_console.print(f"[yellow]{escape(report.error)}[/yellow]", markup=True, highlight=False)
        if report.preview is not None:
            click.echo(report.preview)
        else:
            err_console.print(f"[yellow]{escape(report.preview_error)}[/yellow]", markup=True, highlight=False)
    click.echo(options.separator)


def _render_tokens(tokens: list[Token]) -> None:
    table = Table(title="Tokens")
    table.add_column("Kind", style="cyan")
    table.add_column("Offset", justify="right")
    table.add_column("Value", style="green")
    for token in tokens:
        table.add_row(type(token).__name__, str(token.offset), _describe_token(token))
    console.print(table)


@click.command()
@click.version_option(version=__version__)
@click.argument("input_pdf", type=click.Path())
@click.option(
    "--tokens",
    "show_tokens",
    is_flag=True,
    help="Also list every token found in the file",
)
@click.option(
    "--preview-bytes",
    default=DEFAULT_PREVIEW_BYTES,
    show_default=True,
    type=click.IntRange(min=0),
    help="Bytes shown for streams that cannot be inflated",
)
@click.option(
    "--separator",
    default=DEFAULT_SEPARATOR,
    show_default=True,
    help="Line printed after each stream",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(input_pdf, show_tokens, preview_bytes, separator, verbose):
    """
    Print the inflated content of every stream in INPUT_PDF.

    Examples:

        pdfstreamx document.pdf

        pdfstreamx document.pdf --tokens --preview-bytes 16
    """
    _configure_logging(verbose)
    options = DumpOptions(separator=separator, preview_bytes=preview_bytes, show_tokens=show_tokens)

    try:
        content = read_pdf_bytes(input_pdf)
    except PDFReadError as exc:
        err_console.print(f"[bold red]ERROR:[/bold red] {escape(str(exc))}", markup=True, highlight=False)
        sys.exit(1)

    cursor = ByteCursor.from_bytes(content)
    seen: list[Token] = []
    index = 0
    try:
        for token in cursor:
            seen.append(token)
            if isinstance(token, Stream):
                _emit_report(describe_stream(token, index, options), options)
                index += 1
    except TokenizeError as exc:
        if options.show_tokens:
            _render_tokens(seen)
        err_console.print(f"[bold red]ERROR:[/bold red] {escape(str(exc))}", markup=True, highlight=False)
        sys.exit(1)

    if options.show_tokens:
        _render_tokens(seen)


def main() -> None:  # pragma: no cover - console script entry point
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
