"""Standard-JSON wire codec for the solc toolchain.

Builds the request document and turns the response document into typed
``CompileResult`` values. Anything that does not match the expected shape
is a ``GatewayError``, never a partially-typed result.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from solbuild.exceptions import GatewayError
from solbuild.types import CompiledUnit, CompileRequest, CompileResult, Diagnostic, Severity

__all__ = ["build_request", "parse_response"]

logger = logging.getLogger(__name__)


def build_request(request: CompileRequest) -> str:
    """Serialize a request to the JSON text the toolchain reads on stdin."""
    return json.dumps(request.to_wire())


def _parse_diagnostic(entry: Any, index: int) -> Diagnostic:
    if not isinstance(entry, dict):
        raise GatewayError(f"errors[{index}] is not an object")

    severity = entry.get("severity")
    if not isinstance(severity, str):
        raise GatewayError(f"errors[{index}] has no string 'severity'")

    # formattedMessage carries source context; message is the bare text
    message = entry.get("formattedMessage") or entry.get("message")
    if not isinstance(message, str):
        raise GatewayError(f"errors[{index}] has no 'formattedMessage' or 'message'")

    kind = entry.get("type", "")
    return Diagnostic(
        severity=Severity.from_toolchain(severity),
        message=message.rstrip(),
        raw_severity=severity,
        kind=kind if isinstance(kind, str) else "",
    )


def _parse_unit(file_name: str, unit_name: str, entry: Any) -> CompiledUnit:
    where = f"contracts[{file_name!r}][{unit_name!r}]"
    if not isinstance(entry, dict):
        raise GatewayError(f"{where} is not an object")

    abi = entry.get("abi")
    if not isinstance(abi, list):
        raise GatewayError(f"{where} has no 'abi' list")

    try:
        bytecode = entry["evm"]["bytecode"]["object"]
    except (KeyError, TypeError) as e:
        raise GatewayError(f"{where} has no 'evm.bytecode.object'") from e
    if not isinstance(bytecode, str):
        raise GatewayError(f"{where} 'evm.bytecode.object' is not a string")

    return CompiledUnit(name=unit_name, abi=abi, bytecode=bytecode)


def parse_response(raw: str | bytes) -> CompileResult:
    """Parse the toolchain's standard-JSON output.

    Args:
        raw: JSON text written by the toolchain on stdout.

    Returns:
        CompileResult with diagnostics in toolchain order and units keyed
        by file name then unit name.

    Raises:
        GatewayError: If the text is not JSON or required fields are missing.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise GatewayError(f"Compiler returned invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise GatewayError(f"Compiler response must be an object, got {type(data).__name__}")

    errors = data.get("errors", [])
    if not isinstance(errors, list):
        raise GatewayError("Compiler response 'errors' is not a list")
    diagnostics = tuple(_parse_diagnostic(entry, i) for i, entry in enumerate(errors))

    contracts_raw = data.get("contracts", {})
    if not isinstance(contracts_raw, dict):
        raise GatewayError("Compiler response 'contracts' is not an object")

    contracts: dict[str, dict[str, CompiledUnit]] = {}
    for file_name, units in contracts_raw.items():
        if not isinstance(units, dict):
            raise GatewayError(f"contracts[{file_name!r}] is not an object")
        contracts[file_name] = {
            unit_name: _parse_unit(file_name, unit_name, entry)
            for unit_name, entry in units.items()
        }

    logger.debug(
        "Parsed response: %d diagnostics, %d units",
        len(diagnostics),
        sum(len(u) for u in contracts.values()),
    )
    return CompileResult(diagnostics=diagnostics, contracts=contracts)
