"""Custom exception hierarchy for solbuild."""

__all__ = [
    "ConfigError",
    "GatewayError",
    "NoSourcesError",
    "PluginError",
    "SolbuildError",
    "SourceError",
    "StoreError",
]


class SolbuildError(Exception):
    """Base exception for all solbuild errors."""


class ConfigError(SolbuildError):
    """Raised when configuration loading or validation fails."""


class SourceError(SolbuildError):
    """Raised when a contract source file cannot be read."""


class NoSourcesError(SolbuildError):
    """Raised when discovery finds no contract source files to compile."""


class GatewayError(SolbuildError):
    """Raised when the compiler toolchain cannot be invoked or its response is malformed."""


class StoreError(SolbuildError):
    """Raised when artifact persistence fails."""


class PluginError(SolbuildError):
    """Raised when provider lookup or registration fails."""
