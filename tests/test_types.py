"""Tests for solbuild.types module — build data contracts."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from solbuild.types import (
    OUTPUT_SELECTION_ALL,
    BuildReport,
    CompiledUnit,
    CompileRequest,
    CompileResult,
    Diagnostic,
    FileOutcome,
    Severity,
    SourceFile,
    UnitArtifact,
)


class TestSeverity:
    def test_error_is_blocking(self):
        assert Severity.from_toolchain("error") is Severity.BLOCKING

    def test_error_case_insensitive(self):
        assert Severity.from_toolchain(" Error ") is Severity.BLOCKING

    @pytest.mark.parametrize("raw", ["warning", "info", "", "unknown"])
    def test_everything_else_is_advisory(self, raw: str):
        assert Severity.from_toolchain(raw) is Severity.ADVISORY


class TestCompileRequest:
    def test_wire_shape(self):
        request = CompileRequest(file_name="A.sol", content="contract A {}")
        assert request.to_wire() == {
            "language": "Solidity",
            "sources": {"A.sol": {"content": "contract A {}"}},
            "settings": {"outputSelection": {"*": {"*": ["*"]}}},
        }

    def test_requests_everything(self):
        assert OUTPUT_SELECTION_ALL == {"*": {"*": ["*"]}}

    def test_custom_language(self):
        request = CompileRequest(file_name="A.yul", content="{}", language="Yul")
        assert request.to_wire()["language"] == "Yul"


class TestCompileResult:
    def test_units_for_known_file(self):
        foo = CompiledUnit(name="Foo", abi=[], bytecode="60")
        bar = CompiledUnit(name="Bar", abi=[], bytecode="61")
        result = CompileResult(contracts={"A.sol": {"Foo": foo, "Bar": bar}})
        assert result.units_for("A.sol") == [foo, bar]

    def test_units_for_unknown_file_is_empty(self):
        assert CompileResult().units_for("missing.sol") == []

    def test_diagnostics_default_empty(self):
        assert CompileResult().diagnostics == ()


class TestFrozen:
    def test_source_file_is_frozen(self):
        source = SourceFile(name="A.sol", path=Path("/tmp/A.sol"), content="")
        with pytest.raises(FrozenInstanceError):
            source.content = "changed"  # type: ignore[misc]

    def test_diagnostic_is_frozen(self):
        diagnostic = Diagnostic(severity=Severity.ADVISORY, message="w")
        with pytest.raises(FrozenInstanceError):
            diagnostic.message = "x"  # type: ignore[misc]

    def test_diagnostic_is_blocking(self):
        assert Diagnostic(severity=Severity.BLOCKING, message="e").is_blocking
        assert not Diagnostic(severity=Severity.ADVISORY, message="w").is_blocking


class TestBuildReport:
    def _artifact(self, name: str) -> UnitArtifact:
        return UnitArtifact(
            unit_name=name,
            abi_path=Path(f"{name}.abi.json"),
            bytecode_path=Path(f"{name}.bin.txt"),
        )

    def test_empty_report(self):
        report = BuildReport()
        assert report.artifact_count == 0
        assert report.failed_files == []
        assert report.blocking_count == 0

    def test_aggregates(self):
        report = BuildReport(
            files=[
                FileOutcome(
                    file_name="A.sol",
                    artifacts=(self._artifact("Foo"), self._artifact("Bar")),
                    advisory=1,
                ),
                FileOutcome(file_name="B.sol", blocking=2),
                FileOutcome(file_name="C.sol", error="boom"),
            ]
        )
        assert report.artifact_count == 2
        assert [f.file_name for f in report.failed_files] == ["C.sol"]
        assert report.blocking_count == 2

    def test_outcome_failed_flag(self):
        assert FileOutcome(file_name="A.sol", error="x").failed
        assert not FileOutcome(file_name="A.sol").failed
