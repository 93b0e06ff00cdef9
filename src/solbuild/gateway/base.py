"""Abstract base class for compiler gateways."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from solbuild.types import CompileResult

__all__ = ["BaseGateway"]

logger = logging.getLogger(__name__)


class BaseGateway(ABC):
    """Base class for all compiler gateways.

    A gateway hides the external toolchain behind one synchronous call.
    Compilation errors are returned as blocking diagnostics inside the
    result; only toolchain-level failures raise.
    """

    @abstractmethod
    def compile(self, file_name: str, source: str) -> CompileResult:
        """Compile one source file, requesting every output for every unit.

        Args:
            file_name: Source unit name, used as the key in the request.
            source: Raw source text; not validated locally.

        Returns:
            CompileResult with diagnostics and compiled units.

        Raises:
            GatewayError: If the toolchain cannot be invoked or its
                response is not well-formed structured data.
        """
