"""Compiler gateway lookup.

``[compiler] provider`` names a gateway; built-in gateways register
themselves when ``solbuild.gateway`` is imported.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from solbuild.exceptions import PluginError

if TYPE_CHECKING:
    from collections.abc import Callable

    from solbuild.config import SolbuildConfig
    from solbuild.gateway.base import BaseGateway

__all__ = ["GatewayRegistry", "default_registry"]

logger = logging.getLogger(__name__)


class GatewayRegistry:
    """Maps provider names (``solc``, ``solcjs``) to gateway factories."""

    def __init__(self, *, load_builtins: bool = False) -> None:
        self._factories: dict[str, Callable[[SolbuildConfig], BaseGateway]] = {}
        self._load_builtins = load_builtins

    def register(self, name: str, factory: Callable[[SolbuildConfig], BaseGateway]) -> None:
        """Add a gateway factory under ``name``.

        Raises:
            PluginError: If ``name`` is taken.
        """
        if name in self._factories:
            raise PluginError(f"Compiler provider '{name}' is already registered")
        self._factories[name] = factory
        logger.debug("Registered compiler provider %s", name)

    def create(self, config: SolbuildConfig) -> BaseGateway:
        """Build the gateway selected by ``config.compiler.provider``.

        Raises:
            PluginError: If no gateway is registered under that name.
        """
        if self._load_builtins:
            self._load_builtins = False
            import solbuild.gateway  # noqa: F401  registers solc and solcjs

        name = config.compiler.provider
        factory = self._factories.get(name)
        if factory is None:
            known = ", ".join(sorted(self._factories)) or "none"
            raise PluginError(f"Unknown compiler provider '{name}' (known: {known})")

        logger.info("Using compiler provider %s", name)
        return factory(config)


default_registry = GatewayRegistry(load_builtins=True)
