"""Command-line interface for vehicle-docs using Typer."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import DriverConfig
from .fleet import load_fleet, save_fleet
from .main import serialize_all
from .samples import sample_vehicles
from .services import SerializerFactory

app = typer.Typer(
    name="vehicle-docs",
    help="Render vehicles as XML or JSON documents",
    add_completion=False,
)
console = Console()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@app.command()
def render(
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Format: json, xml"),
    fleet: Optional[Path] = typer.Option(None, "--fleet", help="YAML fleet file"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    strict: bool = typer.Option(False, "--strict", help="Fail on unsupported formats"),
):
    """Render every vehicle of the fleet in the chosen format."""
    try:
        driver_config = DriverConfig.from_yaml(config) if config else DriverConfig()
        if strict:
            driver_config.strict = True
        if fleet:
            driver_config.fleet_path = fleet
    except Exception as e:
        console.print(f"[red]✗[/red] Error: {e}")
        raise typer.Exit(code=1)

    if format is None:
        format = typer.prompt("Choose format (json/xml)")
    format = format.strip().lower()

    if format not in SerializerFactory.get_supported_formats() and not driver_config.strict:
        default_format = driver_config.default_format
        logger.warning(f"Unsupported format {format!r}, falling back to {default_format}")
        console.print(f"[yellow]Invalid format. Using {default_format.upper()} by default.[/yellow]")
        format = default_format

    try:
        if driver_config.fleet_path:
            vehicles = load_fleet(driver_config.fleet_path)
        else:
            vehicles = sample_vehicles()
        documents = serialize_all(vehicles, format)
    except Exception as e:
        console.print(f"[red]✗[/red] Error: {e}")
        raise typer.Exit(code=1)

    console.print(f"\n=== Serialized vehicles in {format.upper()} format ===\n")
    for document in documents:
        console.print(document, markup=False, highlight=False, emoji=False, soft_wrap=True)
        console.print()


@app.command()
def formats():
    """List supported output formats."""
    table = Table(title="Supported Formats")
    table.add_column("Format", style="cyan")
    table.add_column("Serializer", style="magenta")

    for name in SerializerFactory.get_supported_formats():
        serializer = SerializerFactory.create_serializer(name)
        table.add_row(name, serializer.__class__.__name__)

    console.print(table)


@app.command()
def fleet(
    output: Path = typer.Argument(..., help="Output fleet file (YAML)"),
):
    """Write the built-in sample vehicles as a fleet file."""
    vehicles = sample_vehicles()
    try:
        save_fleet(vehicles, output)
    except Exception as e:
        console.print(f"[red]✗[/red] Error: {e}")
        raise typer.Exit(code=1)

    console.print(f"[green]✓[/green] Wrote {len(vehicles)} vehicles to {output}")


@app.command()
def config(
    output: Path = typer.Argument(..., help="Output config file (YAML)"),
    default_format: str = typer.Option("json", "--default-format", help="Fallback format"),
    strict: bool = typer.Option(False, "--strict", help="Fail on unsupported formats"),
):
    """Generate a configuration file."""
    try:
        driver_config = DriverConfig(default_format=default_format, strict=strict)
    except Exception as e:
        console.print(f"[red]✗[/red] Error: {e}")
        raise typer.Exit(code=1)

    try:
        driver_config.save_yaml(output)
    except Exception as e:
        console.print(f"[red]✗[/red] Error: {e}")
        raise typer.Exit(code=1)

    console.print(f"[green]✓[/green] Generated config at {output}")


@app.command()
def version():
    """Show version information."""
    console.print(f"vehicle-docs version {__version__}")


if __name__ == "__main__":
    app()
