"""Route table compilation, URL building and route matching."""

from sgclient.infrastructure.routing.router import CompiledRoute, Router

__all__ = ["CompiledRoute", "Router"]
