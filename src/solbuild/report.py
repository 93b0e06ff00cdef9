"""Report sink for build progress, diagnostics, and failures.

Rich console output; the pipeline calls these hooks but never depends on
what they print.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from solbuild.diagnostics import render

if TYPE_CHECKING:
    from pathlib import Path

    from solbuild.types import BuildReport, Diagnostic, UnitArtifact

__all__ = ["ConsoleReporter"]


class ConsoleReporter:
    """Writes build events to a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def no_sources(self, source_dir: Path, suffix: str) -> None:
        self.console.print(
            f"[red]❌ No {escape(suffix)} files found in {escape(str(source_dir))}.[/red]"
        )

    def file_started(self, file_name: str) -> None:
        self.console.print(f"Compiling [bold]{escape(file_name)}[/bold] ...")

    def diagnostic(self, file_name: str, diagnostic: Diagnostic) -> None:
        self.console.print(f"[bold]{escape(file_name)}[/bold]: {render(diagnostic)}")

    def unit_persisted(self, artifact: UnitArtifact) -> None:
        self.console.print(f"\n[green]✅ Compiled: {escape(artifact.unit_name)}[/green]")
        self.console.print(f"📦 ABI saved to: {escape(str(artifact.abi_path))}")
        self.console.print(f"🔗 Bytecode saved to: {escape(str(artifact.bytecode_path))}")

    def file_failed(self, file_name: str, message: str) -> None:
        self.console.print(
            f"[red]❌ Compilation failed for {escape(file_name)}:[/red] {escape(message)}"
        )

    def summary(self, report: BuildReport) -> None:
        failed = len(report.failed_files)
        line = (
            f"\n[bold]{len(report.files)} file(s)[/bold], "
            f"{report.artifact_count} unit(s) written"
        )
        if report.blocking_count:
            line += f", [red]{report.blocking_count} error(s)[/red]"
        if failed:
            line += f", [red]{failed} file(s) failed[/red]"
        self.console.print(line)
