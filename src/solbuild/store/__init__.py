"""Artifact store — ABI and bytecode files on disk."""

from solbuild.store.base import BaseArtifactStore
from solbuild.store.filesystem import ABI_SUFFIX, BYTECODE_SUFFIX, FileArtifactStore

__all__ = ["ABI_SUFFIX", "BYTECODE_SUFFIX", "BaseArtifactStore", "FileArtifactStore"]
