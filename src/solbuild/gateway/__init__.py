"""Compiler gateways — abstract interface and the solc standard-JSON provider."""

from solbuild.gateway.base import BaseGateway
from solbuild.gateway.solc import SolcGateway
from solbuild.gateway.wire import build_request, parse_response
from solbuild.registry import default_registry

__all__ = ["BaseGateway", "SolcGateway", "build_request", "parse_response"]

# Register built-in compiler gateways
default_registry.register("solc", lambda cfg: SolcGateway(cfg))
default_registry.register("solcjs", lambda cfg: SolcGateway(cfg, default_executable="solcjs"))
