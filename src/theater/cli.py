"""CLI interface for statement generation."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Optional

import typer
from pydantic import TypeAdapter
from rich.console import Console

from . import __version__
from .config import get_config
from .models import Invoice, Play, StatementData
from .statement import StatementPrinter

app = typer.Typer(
    name="theater",
    help="""
    [bold]Theater Statement CLI[/bold]

    Price theatrical performances and print customer statements.

    [cyan]Examples:[/cyan]
      theater statement invoice.json plays.json
      theater statement invoice.json plays.json --format json --output out.json
    """,
    no_args_is_help=True,
)

console = Console()
logger = logging.getLogger(__name__)

_catalog_adapter = TypeAdapter(Dict[str, Play])


class OutputFormat(str, Enum):
    text = "text"
    json = "json"


@app.command()
def statement(
    invoice_file: Path = typer.Argument(
        ...,
        help="Invoice JSON file (customer and performances)",
        exists=True,
    ),
    plays_file: Path = typer.Argument(
        ...,
        help="Play catalog JSON file (play id -> name and type)",
        exists=True,
    ),
    output_file: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the statement to a file (default: stdout)",
        resolve_path=True,
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.text,
        "--format",
        "-f",
        help="Output format: text or json",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed pricing information",
    ),
):
    """Generate the statement for an invoice."""
    try:
        config = get_config()
        logging.basicConfig(
            level=logging.DEBUG if verbose else config.log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

        if verbose:
            fees = config.fee_schedule
            console.print("[bold]Fee schedule:[/bold]")
            for name, value in fees.model_dump().items():
                console.print(f"  {name}: {value}")
            console.print()

        invoice = Invoice.model_validate_json(invoice_file.read_text())
        plays = _catalog_adapter.validate_json(plays_file.read_text())
        printer = StatementPrinter(invoice, plays, config.fee_schedule)

        if output_format is OutputFormat.json:
            rendered = _render_json(printer.statement_data())
        else:
            rendered = printer.statement()

        if output_file:
            _save_output(rendered, output_file)
        else:
            typer.echo(rendered, nl=False)

    except Exception as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {str(e)}")
        if verbose:
            import traceback

            console.print(f"[dim white]{traceback.format_exc()}[/dim white]")
        raise typer.Exit(code=1)


def _render_json(data: StatementData) -> str:
    return json.dumps(data.model_dump(mode="json"), indent=2) + "\n"


def _save_output(rendered: str, output_file: Path):
    """Save rendered statement to a file."""
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(rendered)
    console.print(f"[dim]Saved output to {output_file}[/dim]")


@app.command()
def version():
    """Show version information."""
    console.print(f"theater version {__version__}")


if __name__ == "__main__":
    app()
