"""Command-line interface for stlimport."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from stlimport import __version__
from stlimport.core import Config, load_config
from stlimport.core.exceptions import StlImportError
from stlimport.core.importer import Importer
from stlimport.processing import classify
from stlimport.processing.sniffer import (
    PROBABILITY_INCORRECT_EXTENSION,
    PROBABILITY_INCORRECT_SIZE,
)
from stlimport.utils import setup_logging

app = typer.Typer(
    name="stlimport",
    help="Sniff and decode binary STL files",
    add_completion=False,
)
console = Console()


def _load_settings(
    config: Optional[Path],
    min_probability: Optional[float] = None,
    log_level: Optional[str] = None,
) -> Config:
    try:
        data = load_config(config).model_dump()
        if min_probability is not None:
            data["importer"]["min_probability"] = min_probability
        if log_level is not None:
            data["logging"]["level"] = log_level.upper()
        cfg = Config.from_dict(data)
    except (FileNotFoundError, StlImportError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    setup_logging(cfg.logging)
    return cfg


@app.command()
def sniff(
    files: List[Path] = typer.Argument(
        ...,
        help="Files to classify",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file",
    ),
    min_probability: Optional[float] = typer.Option(
        None,
        "--min-probability",
        "-p",
        min=0.0,
        max=1.0,
        help="Minimum probability to mark a file as accepted",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Override the configured log level",
    ),
) -> None:
    """Print the probability that each file is a binary STL."""
    cfg = _load_settings(config, min_probability=min_probability, log_level=log_level)
    importer = Importer(cfg)

    table = Table(title="Binary STL Probability")
    table.add_column("File", style="cyan")
    table.add_column("Probability", justify="right")
    table.add_column("Accepted", justify="center")

    for path in files:
        probability = classify(path)
        accepted = importer.accepts(probability)
        table.add_row(
            path.name,
            f"{probability:.6f}",
            "[green]yes[/green]" if accepted else "[red]no[/red]",
        )

    console.print(table)


@app.command()
def inspect(
    stl_file: Path = typer.Argument(
        ...,
        help="Path to the file to decode",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file",
    ),
    min_probability: Optional[float] = typer.Option(
        None,
        "--min-probability",
        "-p",
        min=0.0,
        max=1.0,
        help="Minimum probability before decoding",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Decode even when the file does not look like a binary STL",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Override the configured log level",
    ),
) -> None:
    """Decode a binary STL file and display information about it."""
    if force:
        min_probability = 0.0
    cfg = _load_settings(config, min_probability=min_probability, log_level=log_level)

    result = Importer(cfg).import_file(stl_file)
    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    model = result.model
    table = Table(title="Model Information", show_header=False)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("File", stl_file.name)
    table.add_row("File Size", f"{stl_file.stat().st_size:,} bytes")
    table.add_row("Probability", f"{result.probability:.6f}")
    table.add_row("Meshes", f"{len(model.meshes):,}")
    table.add_row("Faces", f"{model.face_count:,}")

    if model.face_count:
        bounds_min, bounds_max = model.to_trimesh().bounds
        table.add_row(
            "Bounding Box",
            f"[{bounds_min[0]:.2f}, {bounds_min[1]:.2f}, {bounds_min[2]:.2f}] to "
            f"[{bounds_max[0]:.2f}, {bounds_max[1]:.2f}, {bounds_max[2]:.2f}]",
        )

    console.print(table)


@app.command()
def info() -> None:
    """Show version and sniffer constants."""
    table = Table(title="stlimport", show_header=False)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Version", __version__)
    table.add_row("P(wrong extension)", str(PROBABILITY_INCORRECT_EXTENSION))
    table.add_row("P(coincidental size)", str(PROBABILITY_INCORRECT_SIZE))
    table.add_row("Default min probability", str(Config().importer.min_probability))

    console.print(table)


def main() -> None:
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
