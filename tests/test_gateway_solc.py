"""Tests for solbuild.gateway.solc module — subprocess is mocked."""

from __future__ import annotations

import json
import subprocess
from typing import TYPE_CHECKING, Any

import pytest

from solbuild.config import SolbuildConfig
from solbuild.exceptions import GatewayError
from solbuild.gateway.solc import SolcGateway
from solbuild.types import Severity

if TYPE_CHECKING:
    from collections.abc import Callable

RUN = "solbuild.gateway.solc.subprocess.run"


def _fake_run(
    stdout: str = "{}",
    returncode: int = 0,
    stderr: str = "",
    calls: list[dict[str, Any]] | None = None,
) -> Callable[..., subprocess.CompletedProcess[str]]:
    def run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        if calls is not None:
            calls.append({"cmd": cmd, **kwargs})
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)

    return run


def _raise(exc: BaseException) -> Callable[..., Any]:
    def run(*_a: object, **_kw: object) -> Any:
        raise exc

    return run


class TestSolcGatewayInvocation:
    def test_sends_standard_json_on_stdin(self, monkeypatch: pytest.MonkeyPatch):
        calls: list[dict[str, Any]] = []
        monkeypatch.setattr(RUN, _fake_run(calls=calls))

        SolcGateway(SolbuildConfig()).compile("A.sol", "contract A {}")

        (call,) = calls
        assert call["cmd"] == ["solc", "--standard-json"]
        assert call["check"] is False
        request = json.loads(call["input"])
        assert request == {
            "language": "Solidity",
            "sources": {"A.sol": {"content": "contract A {}"}},
            "settings": {"outputSelection": {"*": {"*": ["*"]}}},
        }

    def test_zero_timeout_means_no_timeout(self, monkeypatch: pytest.MonkeyPatch):
        calls: list[dict[str, Any]] = []
        monkeypatch.setattr(RUN, _fake_run(calls=calls))
        SolcGateway(SolbuildConfig()).compile("A.sol", "")
        assert calls[0]["timeout"] is None

    def test_configured_timeout_and_executable(self, monkeypatch: pytest.MonkeyPatch):
        calls: list[dict[str, Any]] = []
        monkeypatch.setattr(RUN, _fake_run(calls=calls))
        config = SolbuildConfig()
        config.compiler.timeout = 15
        config.compiler.executable = "/usr/local/bin/solc"

        SolcGateway(config).compile("A.sol", "")

        assert calls[0]["timeout"] == 15
        assert calls[0]["cmd"][0] == "/usr/local/bin/solc"


class TestSolcGatewayResults:
    def test_returns_units_and_diagnostics(self, monkeypatch: pytest.MonkeyPatch):
        output = json.dumps(
            {
                "errors": [{"severity": "warning", "formattedMessage": "Warning: unused"}],
                "contracts": {
                    "A.sol": {
                        "Foo": {"abi": [], "evm": {"bytecode": {"object": "6080"}}},
                    }
                },
            }
        )
        monkeypatch.setattr(RUN, _fake_run(stdout=output))

        result = SolcGateway(SolbuildConfig()).compile("A.sol", "contract Foo {}")

        assert [u.name for u in result.units_for("A.sol")] == ["Foo"]
        assert result.diagnostics[0].severity is Severity.ADVISORY

    def test_compile_error_does_not_raise(self, monkeypatch: pytest.MonkeyPatch):
        output = json.dumps(
            {"errors": [{"severity": "error", "formattedMessage": "ParserError: Expected ';'"}]}
        )
        monkeypatch.setattr(RUN, _fake_run(stdout=output))

        result = SolcGateway(SolbuildConfig()).compile("B.sol", "contract {")

        assert result.diagnostics[0].is_blocking
        assert result.units_for("B.sol") == []


class TestSolcGatewayFailures:
    def test_missing_executable(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(RUN, _raise(FileNotFoundError("solc")))
        with pytest.raises(GatewayError, match="not found"):
            SolcGateway(SolbuildConfig()).compile("A.sol", "")

    def test_timeout(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(RUN, _raise(subprocess.TimeoutExpired(["solc"], 5)))
        config = SolbuildConfig()
        config.compiler.timeout = 5
        with pytest.raises(GatewayError, match="timed out"):
            SolcGateway(config).compile("A.sol", "")

    def test_os_error(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(RUN, _raise(PermissionError("Permission denied")))
        with pytest.raises(GatewayError, match="Permission denied"):
            SolcGateway(SolbuildConfig()).compile("A.sol", "")

    def test_nonzero_exit(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(RUN, _fake_run(stdout="", returncode=134, stderr="Segmentation fault"))
        with pytest.raises(GatewayError, match="status 134.*Segmentation fault"):
            SolcGateway(SolbuildConfig()).compile("A.sol", "")

    def test_garbage_output(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(RUN, _fake_run(stdout="not json at all"))
        with pytest.raises(GatewayError, match="invalid JSON"):
            SolcGateway(SolbuildConfig()).compile("A.sol", "")
