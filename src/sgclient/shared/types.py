"""Domain-specific types that prevent primitive obsession."""

from __future__ import annotations

# =============================================================================
# NEWTYPES
# =============================================================================


class CommitID(str):
    """A full, resolved commit hash."""


class RouteVars(dict[str, str]):
    """Flat route-variable map used to build or match a URL path."""
