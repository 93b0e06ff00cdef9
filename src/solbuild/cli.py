"""CLI interface for solbuild.

Typer-based command-line interface with Rich output formatting.
Running ``solbuild`` with no subcommand performs a build.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from solbuild import __version__
from solbuild.config import (
    CONFIG_FILE,
    default_config,
    load_config,
    load_config_or_default,
    save_config,
)
from solbuild.exceptions import NoSourcesError, SolbuildError
from solbuild.pipeline import BuildPipeline
from solbuild.registry import default_registry
from solbuild.report import ConsoleReporter
from solbuild.store import FileArtifactStore

__all__ = ["app"]

app = typer.Typer(
    name="solbuild",
    help="Compile a directory of Solidity contracts into ABI and bytecode artifacts.",
    rich_markup_mode="rich",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _build(
    config_path: Path | None,
    source: Path | None,
    output: Path | None,
) -> None:
    # Relative paths in a config file resolve against its own directory
    root = config_path.resolve().parent if config_path else Path.cwd()
    try:
        if config_path:
            config = load_config(config_path)
        else:
            config = load_config_or_default(root / CONFIG_FILE)
        source_dir, output_dir = config.resolve_paths(root)
        gateway = default_registry.create(config)
    except SolbuildError as e:
        console.print(f"[red]Failed to initialize build:[/red] {e}")
        raise typer.Exit(code=1) from e

    pipeline = BuildPipeline(
        gateway=gateway,
        store=FileArtifactStore(),
        reporter=ConsoleReporter(console),
        source_suffix=config.paths.source_suffix,
    )

    try:
        report = pipeline.run(
            source.resolve() if source else source_dir,
            output.resolve() if output else output_dir,
        )
    except NoSourcesError as e:
        raise typer.Exit(code=1) from e
    except SolbuildError as e:
        console.print(f"[red]Build failed:[/red] {e}")
        raise typer.Exit(code=1) from e

    pipeline.reporter.summary(report)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Build contracts when no command is given."""
    _setup_logging(verbose)
    if ctx.invoked_subcommand is None:
        _build(None, None, None)


@app.command()
def version() -> None:
    """Show solbuild version."""
    console.print(f"solbuild {__version__}")


@app.command()
def build(
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help=f"Config file (default: ./{CONFIG_FILE})"),
    ] = None,
    source: Annotated[
        Path | None,
        typer.Option("--source", "-s", help="Contract source directory"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Artifact output directory"),
    ] = None,
) -> None:
    """Compile every contract source into ABI and bytecode files."""
    _build(config, source, output)


@app.command()
def init() -> None:
    """Create a default solbuild.toml and contract source directory."""
    root = Path.cwd()
    config_path = root / CONFIG_FILE

    try:
        config = load_config_or_default(config_path)
        if config_path.exists():
            console.print(f"[dim]Keeping existing {CONFIG_FILE}[/dim]")
        else:
            save_config(default_config(), config_path)
            console.print(f"[green]Created[/green] {config_path}")
        source_dir, _ = config.resolve_paths(root)
        source_dir.mkdir(parents=True, exist_ok=True)
    except (SolbuildError, OSError) as e:
        console.print(f"[red]Failed to initialize project:[/red] {e}")
        raise typer.Exit(code=1) from e

    console.print(f"Put your {config.paths.source_suffix} files in {source_dir}")
    console.print("\nNext steps:")
    console.print("  solbuild          Compile all contracts")
