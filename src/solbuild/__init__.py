"""solbuild — compiles a directory of Solidity contracts into ABI and bytecode artifacts."""

__version__ = "0.1.0"

__all__ = ["__version__"]
