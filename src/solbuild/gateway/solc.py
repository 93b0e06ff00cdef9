"""solc gateway using the ``--standard-json`` interface.

Default provider for solbuild — runs a locally installed ``solc`` (or
``solcjs``) once per source file, writing the request on stdin and reading
the structured response from stdout.
"""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING

from solbuild.exceptions import GatewayError
from solbuild.gateway.base import BaseGateway
from solbuild.gateway.wire import build_request, parse_response
from solbuild.types import CompileRequest

if TYPE_CHECKING:
    from solbuild.config import SolbuildConfig
    from solbuild.types import CompileResult

__all__ = ["SolcGateway"]

logger = logging.getLogger(__name__)

_STDERR_LIMIT = 2000


class SolcGateway(BaseGateway):
    """Compiler gateway backed by the solc standard-JSON CLI.

    solc exits 0 for ordinary compilation errors and reports them in the
    response ``errors`` list; a non-zero exit means the toolchain itself
    failed.

    Config fields used::

        [compiler]
        executable = ""     # empty = "solc" (or "solcjs" for that provider)
        language = "Solidity"
        timeout = 0         # seconds, 0 = wait indefinitely
    """

    def __init__(self, config: SolbuildConfig, default_executable: str = "solc") -> None:
        self._executable = config.compiler.executable or default_executable
        self._language = config.compiler.language
        self._timeout = config.compiler.timeout or None

    @property
    def command(self) -> list[str]:
        return [self._executable, "--standard-json"]

    def compile(self, file_name: str, source: str) -> CompileResult:
        """Compile one source through ``solc --standard-json``.

        Raises:
            GatewayError: If solc is missing, crashes, times out, or
                returns something other than a well-formed JSON document.
        """
        request = CompileRequest(file_name=file_name, content=source, language=self._language)
        payload = build_request(request)
        cmd = self.command

        logger.debug("Running %s for %s", " ".join(cmd), file_name)
        try:
            result = subprocess.run(
                cmd,
                input=payload,
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=self._timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise GatewayError(
                f"Compiler executable '{self._executable}' not found. Is solc installed?"
            ) from e
        except subprocess.TimeoutExpired as e:
            raise GatewayError(
                f"Compiler timed out after {self._timeout}s compiling {file_name}"
            ) from e
        except OSError as e:
            raise GatewayError(f"Failed to run '{self._executable}': {e}") from e

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()[:_STDERR_LIMIT]
            raise GatewayError(
                f"Compiler exited with status {result.returncode} for {file_name}: {stderr}"
            )

        compiled = parse_response(result.stdout)
        logger.info(
            "Compiled %s: %d diagnostics, %d units",
            file_name,
            len(compiled.diagnostics),
            len(compiled.units_for(file_name)),
        )
        return compiled
