"""Build orchestrator for solbuild.

Composes discovery → gateway → diagnostics → artifact store via
constructor injection. Each source file is isolated: a failure while
reading, compiling, or persisting one file is reported and the run moves
on. Only an empty discovery set stops the run.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from solbuild.diagnostics import DiagnosticCounts, classify
from solbuild.exceptions import NoSourcesError, SourceError
from solbuild.types import BuildReport, FileOutcome, SourceFile

if TYPE_CHECKING:
    from pathlib import Path

    from solbuild.gateway.base import BaseGateway
    from solbuild.report import ConsoleReporter
    from solbuild.store.base import BaseArtifactStore
    from solbuild.types import UnitArtifact

__all__ = ["BuildPipeline", "discover_sources", "read_source"]

logger = logging.getLogger(__name__)


def discover_sources(source_dir: Path, suffix: str) -> list[Path]:
    """Return regular files in ``source_dir`` whose name ends with ``suffix``.

    Not recursive. Sorted by name so every run visits files in the same order.

    Raises:
        NoSourcesError: If the directory is missing or cannot be listed.
    """
    if not source_dir.is_dir():
        raise NoSourcesError(f"Source directory not found: {source_dir}")
    try:
        entries = list(source_dir.iterdir())
    except OSError as e:
        raise NoSourcesError(f"Cannot list source directory {source_dir}: {e}") from e
    return sorted(
        (p for p in entries if p.name.endswith(suffix) and p.is_file()),
        key=lambda p: p.name,
    )


def read_source(path: Path) -> SourceFile:
    """Read a contract source file as UTF-8 text.

    Raises:
        SourceError: If the file cannot be read or decoded.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"Cannot read {path}: {e}") from e
    return SourceFile(name=path.name, path=path.resolve(), content=content)


class BuildPipeline:
    """Orchestrates the contract build.

    All dependencies are injected via the constructor, making the pipeline
    fully testable with mock implementations.

    Usage::

        pipeline = BuildPipeline(
            gateway=SolcGateway(config),
            store=FileArtifactStore(),
            reporter=ConsoleReporter(),
        )
        report = pipeline.run(Path("contracts"), Path("artifacts"))
    """

    def __init__(
        self,
        gateway: BaseGateway,
        store: BaseArtifactStore,
        reporter: ConsoleReporter,
        source_suffix: str = ".sol",
    ) -> None:
        self.gateway = gateway
        self.store = store
        self.reporter = reporter
        self.source_suffix = source_suffix

    def run(self, source_dir: Path, output_dir: Path) -> BuildReport:
        """Compile every matching file in ``source_dir`` into ``output_dir``.

        Returns:
            BuildReport with one FileOutcome per discovered file.

        Raises:
            StoreError: If the output directory cannot be created.
            NoSourcesError: If no matching source files are found.
        """
        self.store.ensure_ready(output_dir)

        try:
            paths = discover_sources(source_dir, self.source_suffix)
        except NoSourcesError:
            self.reporter.no_sources(source_dir, self.source_suffix)
            raise
        if not paths:
            self.reporter.no_sources(source_dir, self.source_suffix)
            raise NoSourcesError(f"No {self.source_suffix} files found in {source_dir}")

        logger.info("Found %d source file(s) in %s", len(paths), source_dir)

        report = BuildReport()
        for path in paths:
            report.files.append(self.process_file(path, output_dir))

        logger.info(
            "Build finished: %d file(s), %d unit(s), %d failed",
            len(report.files),
            report.artifact_count,
            len(report.failed_files),
        )
        return report

    def process_file(self, path: Path, output_dir: Path) -> FileOutcome:
        """Read, compile, report, and persist one source file.

        Never raises: any failure becomes ``FileOutcome.error``. Units
        persisted before a failure are kept and listed in the outcome.
        """
        artifacts: list[UnitArtifact] = []
        counts = DiagnosticCounts()

        try:
            source = read_source(path)
            self.reporter.file_started(source.name)

            result = self.gateway.compile(source.name, source.content)

            for diagnostic in result.diagnostics:
                self.reporter.diagnostic(source.name, diagnostic)
            counts = classify(result.diagnostics)

            units = result.units_for(source.name)
            if counts.blocking and units:
                logger.warning(
                    "%s has %d error(s) but produced %d unit(s); writing them anyway",
                    source.name,
                    counts.blocking,
                    len(units),
                )
            elif not units:
                logger.info("No units produced for %s", source.name)

            for unit in units:
                artifact = self.store.persist(unit.name, unit.abi, unit.bytecode, output_dir)
                artifacts.append(artifact)
                self.reporter.unit_persisted(artifact)

        except Exception as e:
            message = str(e) or type(e).__name__
            logger.debug("Compilation failed for %s: %s", path.name, message, exc_info=True)
            self.reporter.file_failed(path.name, message)
            return FileOutcome(
                file_name=path.name,
                artifacts=tuple(artifacts),
                blocking=counts.blocking,
                advisory=counts.advisory,
                error=message,
            )

        return FileOutcome(
            file_name=path.name,
            artifacts=tuple(artifacts),
            blocking=counts.blocking,
            advisory=counts.advisory,
        )
