"""Plain-file artifact store.

Writes ``<unit>.abi.json`` and ``<unit>.bin.txt`` side by side. Existing
files are overwritten without backup: artifacts are pure build outputs.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from solbuild.exceptions import StoreError
from solbuild.store.base import BaseArtifactStore
from solbuild.types import UnitArtifact

if TYPE_CHECKING:
    from pathlib import Path

__all__ = ["ABI_SUFFIX", "BYTECODE_SUFFIX", "FileArtifactStore"]

logger = logging.getLogger(__name__)

ABI_SUFFIX = ".abi.json"
BYTECODE_SUFFIX = ".bin.txt"


class FileArtifactStore(BaseArtifactStore):
    """Stores artifacts as UTF-8 files in the output directory."""

    def ensure_ready(self, output_dir: Path) -> Path:
        if output_dir.is_dir():
            return output_dir
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(f"Cannot create output directory {output_dir}: {e}") from e
        logger.info("Created output directory %s", output_dir)
        return output_dir

    def persist(
        self,
        unit_name: str,
        abi: list[Any],
        bytecode: str,
        output_dir: Path,
    ) -> UnitArtifact:
        abi_path = output_dir / f"{unit_name}{ABI_SUFFIX}"
        bytecode_path = output_dir / f"{unit_name}{BYTECODE_SUFFIX}"

        try:
            abi_path.write_text(json.dumps(abi, indent=2, ensure_ascii=False), encoding="utf-8")
            bytecode_path.write_text(bytecode, encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            raise StoreError(f"Failed to write artifacts for {unit_name}: {e}") from e

        logger.debug("Wrote %s and %s", abi_path.name, bytecode_path.name)
        return UnitArtifact(unit_name=unit_name, abi_path=abi_path, bytecode_path=bytecode_path)
