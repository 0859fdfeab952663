"""
Command-line interface for pathfilter.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pathfilter.core.errors import CompileError, FilterDecodeError
from pathfilter.core.serialization import load_filters
from pathfilter.core.union import FilterSequence, PathFilter
from pathfilter.filters.extension import ExtensionFilter, ExtensionsFilter
from pathfilter.filters.regex import RegexFilter

app = typer.Typer(
    name="pathfilter",
    help="pathfilter - decide which paths to ignore by extension or regex",
    add_completion=False,
)
console = Console()
error_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_filters(
    filters_file: Optional[Path],
    extensions: List[str],
    patterns: List[str],
) -> FilterSequence:
    """
    Assemble the filters given on the command line.

    File filters come first, then extensions (one ExtensionFilter, or an
    ExtensionsFilter when several are given), then regexes in option order.

    Raises:
        OSError: if the filter file cannot be read
        FilterDecodeError: if the filter file is malformed
        CompileError: if a regex does not compile
    """
    sequence = load_filters(filters_file) if filters_file is not None else FilterSequence()
    if len(extensions) == 1:
        sequence = sequence.append(ExtensionFilter(extensions[0]))
    elif extensions:
        sequence = sequence.append(ExtensionsFilter(extensions))
    for pattern in patterns:
        sequence = sequence.append(RegexFilter.from_str(pattern))
    return sequence


@app.command()
def check(
    paths: List[str] = typer.Argument(..., help="Paths to test against the filters"),
    filters_file: Optional[Path] = typer.Option(
        None, "--filters", "-f",
        help="JSON file with filter definitions"
    ),
    extensions: List[str] = typer.Option(
        [], "--ext", "-e",
        help="Extension to ignore (repeatable, leading dot optional)"
    ),
    patterns: List[str] = typer.Option(
        [], "--regex", "-r",
        help="Regex to ignore when found in the path (repeatable)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    Report which PATHS are ignored by the given filters.

    Examples:

        # Ignore Rust and C# sources
        pathfilter check src/lib.rs src/Program.cs -e rs -e .cs

        # Ignore anything under build/
        pathfilter check build/out.o src/main.c -r "^build/"

        # Use a saved filter file and print JSON
        pathfilter check src/lib.rs --filters filters.json --json
    """
    _configure_logging(verbose)
    try:
        filters = build_filters(filters_file, extensions, patterns)
    except FileNotFoundError:
        error_console.print(f"[red]✗[/red] Filter file not found: {filters_file}")
        raise typer.Exit(code=2)
    except (CompileError, FilterDecodeError, OSError) as e:
        error_console.print(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(code=2)

    if not filters:
        error_console.print("[red]✗[/red] No filters given; use --filters, --ext or --regex")
        raise typer.Exit(code=2)

    results = []
    for path in paths:
        matched: Optional[PathFilter] = filters.first_match(path)
        results.append((path, matched))
    ignored_count = sum(1 for _, matched in results if matched is not None)

    if json_output:
        print(json.dumps(
            {
                "results": [
                    {
                        "path": path,
                        "ignored": matched is not None,
                        "filter": matched.to_dict() if matched is not None else None,
                    }
                    for path, matched in results
                ],
                "summary": {"total": len(results), "ignored": ignored_count},
            },
            indent=2,
        ))
        raise typer.Exit(code=1 if ignored_count else 0)

    table = Table(title=f"{ignored_count} of {len(results)} paths ignored", show_header=True)
    table.add_column("Path", style="cyan")
    table.add_column("Decision", style="bold")
    table.add_column("Filter")

    for path, matched in results:
        if matched is None:
            table.add_row(escape(path), "[green]keep[/green]", "")
        else:
            table.add_row(escape(path), "[yellow]ignore[/yellow]", escape(matched.describe()))

    console.print(table)
    raise typer.Exit(code=1 if ignored_count else 0)


@app.command()
def validate(
    filters_file: Path = typer.Argument(..., help="JSON file with filter definitions"),
) -> None:
    """Check that a filter file loads, and list its filters."""
    try:
        filters = load_filters(filters_file)
    except FileNotFoundError:
        error_console.print(f"[red]✗[/red] Filter file not found: {filters_file}")
        raise typer.Exit(code=2)
    except (CompileError, FilterDecodeError, OSError) as e:
        error_console.print(f"[red]✗[/red] Invalid filter file {filters_file}: {escape(str(e))}")
        raise typer.Exit(code=2)

    table = Table(title=f"{len(filters)} filters in {filters_file}", show_header=True)
    table.add_column("#", justify="right")
    table.add_column("Type", style="cyan")
    table.add_column("Definition")
    for idx, f in enumerate(filters, start=1):
        kind, _, detail = f.describe().partition(": ")
        table.add_row(str(idx), kind, escape(detail))

    console.print(table)
    console.print("[green]✓[/green] Filter file is valid")


@app.command()
def version() -> None:
    """Display version information."""
    from pathfilter import __version__
    console.print(f"pathfilter version {__version__}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
