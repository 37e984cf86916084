"""Typer CLI entry point for tsv-table."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from . import loading
from .parsing import TsvError, TsvTable

console = Console()
app = typer.Typer(help="tsv-table: inspect tab separated files")


def configure_logger(verbose: bool) -> logging.Logger:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("tsv-table")


def _load(source: Path, encoding: str, errors: str, strip_bom: bool, verbose: bool) -> TsvTable:
    logger = configure_logger(verbose)
    config = loading.LoadConfig(source=source, encoding=encoding, errors=errors, strip_bom=strip_bom)
    try:
        return loading.load_table(config, logger)
    except TsvError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc


def _render(table: TsvTable, header: bool) -> Table:
    # Cells are plain text, never rich markup.
    width = max((table.column_count(i) for i in range(table.row_count)), default=0)
    rendered = Table(show_header=header)
    first = 0
    if header and table.row_count:
        names = table.row(0) or ()
        for index in range(width):
            rendered.add_column(Text(str(names[index]) if index < len(names) else ""))
        first = 1
    else:
        for index in range(width):
            rendered.add_column(str(index))

    for index in range(first, table.row_count):
        cells = [Text(str(value)) for value in table.row(index) or ()]
        cells.extend(Text("") for _ in range(width - len(cells)))
        rendered.add_row(*cells)
    return rendered


@app.command()
def show(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="TSV file to display."),
    raw: bool = typer.Option(False, "--raw", help="Print the diagnostic pipe dump instead of a table."),
    header: bool = typer.Option(True, "--header/--no-header", help="Treat row 0 as column names."),
    encoding: str = typer.Option("utf-8", help="Text encoding of the file."),
    errors: str = typer.Option("strict", help="Decode error handler: strict, replace or ignore."),
    strip_bom: bool = typer.Option(False, "--strip-bom", help="Drop a leading byte order mark."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Display every row of a TSV file."""

    table = _load(source, encoding, errors, strip_bom, verbose)
    if raw:
        typer.echo(table.dump(), nl=False)
        return
    console.print(_render(table, header))


@app.command()
def cell(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="TSV file to read."),
    row: int = typer.Option(..., "--row", "-r", help="Zero based row index."),
    column: int = typer.Option(..., "--column", "-c", help="Zero based column index."),
    encoding: str = typer.Option("utf-8", help="Text encoding of the file."),
    errors: str = typer.Option("strict", help="Decode error handler: strict, replace or ignore."),
    strip_bom: bool = typer.Option(False, "--strip-bom", help="Drop a leading byte order mark."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Print a single cell."""

    table = _load(source, encoding, errors, strip_bom, verbose)
    value = table.get_cell(column, row)
    if value is None:
        console.print(f"[red]No cell at row {row}, column {column}[/red]")
        raise typer.Exit(code=1)
    typer.echo(value)


@app.command()
def find(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="TSV file to search."),
    name: str = typer.Argument(..., help="Exact column text to look for."),
    row: int = typer.Option(0, "--row", "-r", help="Row holding the column names."),
    encoding: str = typer.Option("utf-8", help="Text encoding of the file."),
    errors: str = typer.Option("strict", help="Decode error handler: strict, replace or ignore."),
    strip_bom: bool = typer.Option(False, "--strip-bom", help="Drop a leading byte order mark."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Print the index of the first column named NAME."""

    table = _load(source, encoding, errors, strip_bom, verbose)
    index = table.find_column(row, name)
    if index is None:
        console.print(f"[red]Column {escape(repr(name))} not found in row {row}[/red]")
        raise typer.Exit(code=1)
    typer.echo(str(index))


@app.command()
def stats(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="TSV file to summarize."),
    encoding: str = typer.Option("utf-8", help="Text encoding of the file."),
    errors: str = typer.Option("strict", help="Decode error handler: strict, replace or ignore."),
    strip_bom: bool = typer.Option(False, "--strip-bom", help="Drop a leading byte order mark."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Summarize row and column counts."""

    table = _load(source, encoding, errors, strip_bom, verbose)
    counts = [table.column_count(i) for i in range(table.row_count)]

    summary = Table(title="TSV Summary")
    summary.add_column("Key", style="cyan")
    summary.add_column("Value", style="magenta")
    summary.add_row("Rows", str(table.row_count))
    summary.add_row("Min columns", str(min(counts, default=0)))
    summary.add_row("Max columns", str(max(counts, default=0)))
    summary.add_row("Ragged", "yes" if len(set(counts)) > 1 else "no")
    console.print(summary)


if __name__ == "__main__":
    app()
