"""Diagnostic classification and rendering.

Only toolchain ``error`` severity is blocking. Blocking diagnostics are
reported but never withhold units the toolchain still returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.markup import escape

from solbuild.types import Severity

if TYPE_CHECKING:
    from collections.abc import Iterable

    from solbuild.types import Diagnostic

__all__ = ["DiagnosticCounts", "classify", "render"]

_MARKERS: dict[Severity, tuple[str, str]] = {
    Severity.BLOCKING: ("❌", "red"),
    Severity.ADVISORY: ("⚠️", "yellow"),
}


@dataclass(frozen=True)
class DiagnosticCounts:
    """Number of blocking and advisory diagnostics in one result."""

    blocking: int = 0
    advisory: int = 0


def classify(diagnostics: Iterable[Diagnostic]) -> DiagnosticCounts:
    """Partition diagnostics into blocking and advisory counts."""
    blocking = advisory = 0
    for diagnostic in diagnostics:
        if diagnostic.is_blocking:
            blocking += 1
        else:
            advisory += 1
    return DiagnosticCounts(blocking=blocking, advisory=advisory)


def render(diagnostic: Diagnostic) -> str:
    """Render a diagnostic as Rich markup, marked by severity."""
    marker, style = _MARKERS[diagnostic.severity]
    return f"{marker} [{style}]{escape(diagnostic.message)}[/{style}]"
