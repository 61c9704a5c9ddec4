"""Command-line interface for writing dependency files."""

import itertools
import os
import sys
from pathlib import Path
from typing import Iterator, List, Optional

import typer
from rich.markup import escape
from rich.table import Table

from .config import Config
from .deps import write_deps
from .destination import open_destination
from .errors import DepsError
from .models import DepsFormat, OutputTarget
from .utils.logging import get_console, setup_logging

app = typer.Typer(
    name="depfile",
    help="Export the dependencies of a document compilation run",
    add_completion=False,
)

# Standard output is reserved for the dependency file
console = get_console()

DEFAULT_CONFIG = Path("depfile.yaml")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from . import __version__
        console.print(f"depfile version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Dependency file export.

    Writes the files a compilation read, and optionally the files it
    produced, as JSON, a NUL-delimited list, or a make rule.
    """
    pass


def read_input_list(source: str) -> Iterator[str]:
    """Read dependency paths from a list file.

    The list is NUL-separated if it contains any NUL byte, newline-separated
    otherwise. ``-`` reads standard input.

    Args:
        source: Path to the list file, or ``-``

    Yields:
        Native path strings
    """
    if source == "-":
        data = sys.stdin.buffer.read()
    else:
        with open(source, "rb") as f:
            data = f.read()

    separator = b"\0" if b"\0" in data else b"\n"
    for chunk in data.split(separator):
        if chunk:
            yield os.fsdecode(chunk)


def load_config(config_path: Optional[Path]) -> Config:
    """Load the configuration file, falling back to defaults."""
    if config_path:
        if not config_path.exists():
            console.print(f"[red]Config file not found: {config_path}[/red]")
            raise typer.Exit(1)
        return Config.from_yaml(config_path)
    if DEFAULT_CONFIG.exists():
        return Config.from_yaml(DEFAULT_CONFIG)
    return Config.default()


@app.command()
def write(
    dependencies: Optional[List[str]] = typer.Argument(
        None,
        help="Absolute paths read by the compilation",
    ),
    root: Optional[Path] = typer.Option(
        None,
        "--root",
        "-r",
        help="Compilation root (default: working directory)",
    ),
    format: Optional[DepsFormat] = typer.Option(
        None,
        "--format",
        "-f",
        case_sensitive=False,
        help="Dependency file format",
    ),
    deps_path: Optional[str] = typer.Option(
        None,
        "--deps",
        "-d",
        help="Dependency file to write, '-' for stdout",
    ),
    targets: Optional[List[str]] = typer.Option(
        None,
        "--target",
        "-t",
        help="Output produced by the compilation, '-' for stdout (can be repeated)",
    ),
    input_list: Optional[str] = typer.Option(
        None,
        "--input-list",
        "-i",
        help="File listing dependencies, NUL or newline separated, '-' for stdin",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration YAML file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """Write a dependency file.

    Dependencies under the root are written relative to the working
    directory. Without --target, the outputs are unknown: JSON writes
    null and make writes nothing.
    """
    config = load_config(config_path)

    # Apply overrides
    if root:
        config.deps.root = root
    if format:
        config.deps.format = format
    if deps_path:
        config.deps.destination = deps_path
    if verbose:
        config.log_level = "DEBUG"

    logger = setup_logging(config.log_level)

    sources = [iter(dependencies or [])]
    if input_list:
        sources.append(read_input_list(input_list))

    outputs = [OutputTarget.parse(target) for target in targets] if targets else None
    destination = OutputTarget.parse(config.deps.destination)

    try:
        with open_destination(destination) as dest:
            count = write_deps(
                itertools.chain.from_iterable(sources),
                config.resolve_root(),
                dest,
                config.deps.format,
                outputs,
            )
    except (DepsError, OSError) as e:
        console.print(f"[red]Export failed: {escape(str(e))}[/red]")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)

    logger.info(f"Wrote {count} dependencies to {destination}")


@app.command("validate-config")
def validate_config(
    config_path: Path = typer.Argument(
        ...,
        help="Path to configuration file to validate",
    ),
) -> None:
    """Validate a configuration file."""
    if not config_path.exists():
        console.print(f"[red]Config file not found: {config_path}[/red]")
        raise typer.Exit(1)

    try:
        config = Config.from_yaml(config_path)
    except Exception as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print("[green]Configuration is valid![/green]")

    table = Table(title="Configuration Summary")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Format", config.deps.format.value)
    table.add_row("Root", str(config.deps.root or "(working directory)"))
    table.add_row("Destination", config.deps.destination)
    table.add_row("Log level", config.log_level)

    console.print(table)


@app.command("init-config")
def init_config(
    output_path: Path = typer.Argument(
        DEFAULT_CONFIG,
        help="Path to write default configuration",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing file",
    ),
) -> None:
    """Generate a default configuration file."""
    if output_path.exists() and not force:
        console.print(f"[yellow]Config file already exists: {output_path}[/yellow]")
        console.print("Use --force to overwrite")
        raise typer.Exit(1)

    config = Config.default()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    config.to_yaml(output_path)

    console.print(f"[green]Default config written to: {output_path}[/green]")


@app.command()
def info() -> None:
    """Show the available dependency file formats."""
    table = Table(title="Dependency Formats")
    table.add_column("Format", style="cyan")
    table.add_column("Layout")
    table.add_column("Non-UTF-8 paths")

    table.add_row(
        "json",
        escape('{"inputs": [...], "outputs": null | [...]}'),
        "Error",
    )
    table.add_row("zero", "path\\0path\\0...", "Written as raw bytes")
    table.add_row("make", "targets: deps", "Skipped")

    console.print(table)

    console.print("\n[bold]Quick Start:[/bold]")
    console.print("  depfile write -f make -t out.pdf -d out.d -i deps.txt")
    console.print("  depfile write -f zero -i - < deps.txt")


if __name__ == "__main__":
    app()
