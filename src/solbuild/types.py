"""Build data contracts for solbuild.

Frozen dataclasses that flow between build stages:
  Path → SourceFile → CompileRequest → CompileResult → list[UnitArtifact]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

__all__ = [
    "OUTPUT_SELECTION_ALL",
    "BuildReport",
    "CompileRequest",
    "CompileResult",
    "CompiledUnit",
    "Diagnostic",
    "FileOutcome",
    "Severity",
    "SourceFile",
    "UnitArtifact",
]

# Every output kind, for every unit, in every source.
OUTPUT_SELECTION_ALL: dict[str, dict[str, list[str]]] = {"*": {"*": ["*"]}}


class Severity(str, Enum):
    """Diagnostic severity as seen by the build."""

    BLOCKING = "blocking"
    ADVISORY = "advisory"

    @classmethod
    def from_toolchain(cls, raw: str) -> Severity:
        """Map a toolchain severity string; only ``"error"`` blocks."""
        return cls.BLOCKING if raw.strip().lower() == "error" else cls.ADVISORY


@dataclass(frozen=True)
class SourceFile:
    """A discovered contract source, read once at discovery time."""

    name: str
    path: Path
    content: str


@dataclass(frozen=True)
class CompileRequest:
    """A single-source compile request in standard-JSON form."""

    file_name: str
    content: str
    language: str = "Solidity"

    def to_wire(self) -> dict[str, Any]:
        """Return the structured request sent to the toolchain."""
        return {
            "language": self.language,
            "sources": {self.file_name: {"content": self.content}},
            "settings": {"outputSelection": OUTPUT_SELECTION_ALL},
        }


@dataclass(frozen=True)
class Diagnostic:
    """A compiler message tagged with a severity."""

    severity: Severity
    message: str
    raw_severity: str = ""
    kind: str = ""

    @property
    def is_blocking(self) -> bool:
        return self.severity is Severity.BLOCKING


@dataclass(frozen=True)
class CompiledUnit:
    """One named compiled definition: interface descriptor plus payload."""

    name: str
    abi: list[Any]
    bytecode: str


@dataclass(frozen=True)
class CompileResult:
    """Structured toolchain response for one request."""

    diagnostics: tuple[Diagnostic, ...] = ()
    contracts: dict[str, dict[str, CompiledUnit]] = field(default_factory=dict)

    def units_for(self, file_name: str) -> list[CompiledUnit]:
        """Return the units compiled from ``file_name``, in response order."""
        return list(self.contracts.get(file_name, {}).values())


@dataclass(frozen=True)
class UnitArtifact:
    """Paths of the persisted artifact pair for one unit."""

    unit_name: str
    abi_path: Path
    bytecode_path: Path


@dataclass(frozen=True)
class FileOutcome:
    """What happened to one source file during a build."""

    file_name: str
    artifacts: tuple[UnitArtifact, ...] = ()
    blocking: int = 0
    advisory: int = 0
    error: str = ""

    @property
    def failed(self) -> bool:
        return bool(self.error)


@dataclass
class BuildReport:
    """Per-file outcomes of a build run, in processing order."""

    files: list[FileOutcome] = field(default_factory=list)

    @property
    def artifact_count(self) -> int:
        return sum(len(f.artifacts) for f in self.files)

    @property
    def failed_files(self) -> list[FileOutcome]:
        return [f for f in self.files if f.failed]

    @property
    def blocking_count(self) -> int:
        return sum(f.blocking for f in self.files)
