"""Abstract base class for artifact stores."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

    from solbuild.types import UnitArtifact

__all__ = ["BaseArtifactStore"]

logger = logging.getLogger(__name__)


class BaseArtifactStore(ABC):
    """Base class for all artifact stores.

    Subclasses persist one interface descriptor and one payload per
    compiled unit. Persisting the same unit twice overwrites the first pair.
    """

    @abstractmethod
    def ensure_ready(self, output_dir: Path) -> Path:
        """Create the output directory if absent (idempotent).

        Returns:
            The output directory path.

        Raises:
            StoreError: If the directory cannot be created.
        """

    @abstractmethod
    def persist(
        self,
        unit_name: str,
        abi: list[Any],
        bytecode: str,
        output_dir: Path,
    ) -> UnitArtifact:
        """Write the artifact pair for one unit.

        Args:
            unit_name: Unit name, assumed file-system safe.
            abi: Interface descriptor.
            bytecode: Executable payload text.
            output_dir: Directory to write into.

        Returns:
            UnitArtifact with both written paths.

        Raises:
            StoreError: If either file cannot be written.
        """
