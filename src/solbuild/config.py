"""Configuration system for solbuild.

Manages build configuration via solbuild.toml with typed dataclasses
and sensible defaults for all values. The file is optional.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeVar

import tomli_w

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from solbuild.exceptions import ConfigError

_T = TypeVar("_T")

__all__ = [
    "CONFIG_FILE",
    "CompilerConfig",
    "PathsConfig",
    "SolbuildConfig",
    "default_config",
    "load_config",
    "load_config_or_default",
    "save_config",
]

logger = logging.getLogger(__name__)

CONFIG_FILE = "solbuild.toml"


@dataclass
class PathsConfig:
    """[paths] section."""

    source_dir: str = "contracts"
    output_dir: str = "artifacts"
    source_suffix: str = ".sol"


@dataclass
class CompilerConfig:
    """[compiler] section."""

    provider: str = "solc"
    executable: str = ""
    language: str = "Solidity"
    timeout: float = 0


@dataclass
class SolbuildConfig:
    """Root configuration combining all sections."""

    paths: PathsConfig = field(default_factory=PathsConfig)
    compiler: CompilerConfig = field(default_factory=CompilerConfig)

    def resolve_paths(self, root: Path) -> tuple[Path, Path]:
        """Return absolute (source_dir, output_dir) resolved against ``root``."""
        return (
            (root / self.paths.source_dir).resolve(),
            (root / self.paths.output_dir).resolve(),
        )


def default_config() -> SolbuildConfig:
    """Return a config with all default values."""
    return SolbuildConfig()


def _config_to_dict(config: SolbuildConfig) -> dict[str, object]:
    """Convert SolbuildConfig to a nested dict suitable for TOML serialization."""
    return {name: dict(vars(getattr(config, name))) for name in ("paths", "compiler")}


def save_config(config: SolbuildConfig, path: Path) -> None:
    """Save configuration to a TOML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = _config_to_dict(config)
    try:
        with path.open("wb") as f:
            tomli_w.dump(data, f)
        logger.info("Saved config to %s", path)
    except OSError as e:
        logger.error("Failed to save config to %s: %s", path, e)
        raise ConfigError(f"Failed to save config to {path}: {e}") from e


def _load_section(cls: type[_T], data: object) -> _T:
    """Load a dataclass section from a dict, ignoring unknown keys."""
    if not isinstance(data, dict):
        raise ConfigError(f"Config section for {cls.__name__} must be a table")
    known_fields = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
    filtered = {k: v for k, v in data.items() if k in known_fields}
    return cls(**filtered)


_STRING_FIELDS = (
    ("paths", ("source_dir", "output_dir", "source_suffix")),
    ("compiler", ("provider", "executable", "language")),
)


def _validate(config: SolbuildConfig) -> None:
    for section_name, names in _STRING_FIELDS:
        section = getattr(config, section_name)
        for name in names:
            value = getattr(section, name)
            if not isinstance(value, str):
                raise ConfigError(
                    f"{section_name}.{name} must be a string, got {type(value).__name__}"
                )

    if not config.paths.source_suffix:
        raise ConfigError("paths.source_suffix must not be empty")

    timeout = config.compiler.timeout
    # bool is an int subclass; `timeout = true` is a mistake, not one second
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout < 0:
        raise ConfigError(f"compiler.timeout must be a number >= 0, got {timeout!r}")


def load_config(path: Path) -> SolbuildConfig:
    """Load configuration from a TOML file.

    Missing sections or keys get default values.
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        raw = path.read_bytes()
        data = tomllib.loads(raw.decode("utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.error("Failed to load config from %s: %s", path, e)
        raise ConfigError(f"Failed to load config from {path}: {e}") from e

    config = SolbuildConfig()
    section_map: dict[str, type] = {
        "paths": PathsConfig,
        "compiler": CompilerConfig,
    }

    for name, cls in section_map.items():
        if name in data:
            setattr(config, name, _load_section(cls, data[name]))

    _validate(config)
    logger.info("Loaded config from %s", path)
    return config


def load_config_or_default(path: Path) -> SolbuildConfig:
    """Load ``path`` if it exists, otherwise return defaults."""
    if path.exists():
        return load_config(path)
    logger.debug("No config at %s, using defaults", path)
    return default_config()
