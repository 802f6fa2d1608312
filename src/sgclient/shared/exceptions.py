"""Typed exception hierarchy for sgclient."""

from __future__ import annotations

# =============================================================================
# BASE
# =============================================================================


class SGClientError(Exception):
    """Base exception for all sgclient errors."""


# =============================================================================
# ENCODING (caller contract violations)
# =============================================================================


class SpecContractError(SGClientError):
    """A spec that can never be valid reached an encoder.

    Raised on the encode path only. It signals a bug at the call site, not
    bad external input, and is not meant to be handled.
    """


# =============================================================================
# DECODING (untrusted route variables)
# =============================================================================


class SpecDecodeError(SGClientError):
    """A route variable could not be decoded into a spec."""

    def __init__(self, field: str, value: str, reason: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class EmptySpecError(SpecDecodeError):
    """A required route variable was empty or missing."""

    def __init__(self, field: str) -> None:
        super().__init__(field, "", "empty spec")


class InvalidRepoIDError(SpecDecodeError):
    """A numeric repository token did not hold a positive decimal ID."""


class InvalidRevSpecError(SpecDecodeError):
    """A revision token carried a commit ID without a revision."""


class InvalidDeltaHeadError(SpecDecodeError):
    """A cross-repository delta head token was malformed."""


# =============================================================================
# ROUTING
# =============================================================================


class RouteNotFoundError(SGClientError):
    """No route template matched a URL path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No route matches path {path!r}")


# =============================================================================
# CONFIGURATION
# =============================================================================


class ConfigurationError(SGClientError):
    """Invalid or missing configuration."""
