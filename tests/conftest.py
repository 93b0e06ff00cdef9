"""Shared fixtures for solbuild tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

TWO_CONTRACTS = """// SPDX-License-Identifier: MIT
pragma solidity ^0.8.20;

contract Foo {
    uint256 public value;
}

contract Bar {
    function ping() external pure returns (uint256) { return 1; }
}
"""

BROKEN_CONTRACT = """pragma solidity ^0.8.20;
contract Baz {
    function oops( external {}
}
"""


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """An empty contracts/ directory."""
    d = tmp_path / "contracts"
    d.mkdir()
    return d


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Artifact directory path (not created)."""
    return tmp_path / "artifacts"


@pytest.fixture
def sample_sources(source_dir: Path) -> Path:
    """contracts/ holding A.sol (Foo, Bar), B.sol (syntax error) and a non-contract file."""
    (source_dir / "A.sol").write_text(TWO_CONTRACTS, encoding="utf-8")
    (source_dir / "B.sol").write_text(BROKEN_CONTRACT, encoding="utf-8")
    (source_dir / "README.md").write_text("not a contract", encoding="utf-8")
    return source_dir
