"""CLI interface for rolodex.

Requires the 'cli' extra: pip install rolodex[cli]
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

try:
    import typer
    from rich.console import Console
    from rich.table import Table
except ImportError:
    print(
        "CLI dependencies not installed. Install with: pip install rolodex[cli]",
        file=sys.stderr,
    )
    sys.exit(1)

from rolodex import __version__
from rolodex.exceptions import RolodexError
from rolodex.formatters.presets import default_registry
from rolodex.formatters.record import RecordFormatter
from rolodex.storage.json_file_store import JsonFileContactStore

app = typer.Typer(
    name="rolodex",
    help="Render contact records as plain text, vCard, LaTeX or HTML.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    if version:
        console.print(f"rolodex {__version__}")
        raise typer.Exit()


@app.command()
def info() -> None:
    """Show information about the rolodex installation."""
    table = Table(title="rolodex info")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Version", __version__)
    table.add_row("Python", sys.version.split()[0])

    for dep_name in ["pydantic", "typer", "rich"]:
        try:
            mod = __import__(dep_name)
            ver = getattr(mod, "__version__", "installed")
            table.add_row(dep_name, str(ver))
        except ImportError:
            table.add_row(dep_name, "[red]not installed[/red]")

    console.print(table)


@app.command()
def presets() -> None:
    """List the built-in formatter presets."""
    table = Table(title="Formatter presets")
    table.add_column("Name", style="cyan")
    table.add_column("Target", style="green")
    table.add_column("Coding")
    table.add_column("Sort")

    registry = default_registry()
    for name in registry.names():
        formatter = registry.resolve(name)
        coding = sort = "-"
        if isinstance(formatter, RecordFormatter):
            coding = formatter.config.coding
            sort = ", ".join(str(selector) for selector in formatter.config.sort)
        table.add_row(name, formatter.format_type, coding, sort)

    console.print(table)


@app.command()
def render(
    path: Path = typer.Argument(..., help="JSON file holding a list of records"),  # noqa: B008
    output_format: str = typer.Option("plain", "--format", "-f", help="Preset name"),
    output: Path | None = typer.Option(  # noqa: B008
        None, "--output", "-o", help="Write to this file instead of stdout"
    ),
    strict: bool = typer.Option(False, "--strict", help="Exit non-zero if any record fails"),
) -> None:
    """Render every record of a JSON contact file."""
    if not path.exists():
        console.print(f"[red]Error: {path} does not exist[/red]")
        raise typer.Exit(code=1)

    try:
        store = JsonFileContactStore(path)
    except RolodexError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e

    registry = default_registry(store=store)
    formatter = registry.get(output_format)
    if formatter is None:
        names = ", ".join(registry.names())
        console.print(f"[red]Error: unknown format '{output_format}' (known: {names})[/red]")
        raise typer.Exit(code=2)

    result = formatter.format(store.get_all())

    if output is not None:
        output.write_bytes(result.encode())
        console.print(f"Wrote {result.rendered_count} record(s) to {output}")
    else:
        sys.stdout.write(result.text)

    for failure in result.failures:
        err_console.print(
            f"[yellow]Skipped {failure.record_name or failure.record_uuid}: "
            f"{failure.error_type}: {failure.message}[/yellow]"
        )
    if strict and result.failures:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
