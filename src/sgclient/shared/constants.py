"""Centralized defaults for sgclient. Overridable via configuration."""

from __future__ import annotations

# =============================================================================
# REPOSITORY TOKENS
# =============================================================================

REPO_ID_PREFIX = "R$"
"""Prefix marking a repository token as a numeric repository ID."""

HOME_HOST_PREFIX = "sourcegraph.com/"
"""Host prefix stripped from home-instance repository URIs."""

HOME_ORG_PREFIX = "sourcegraph/"
"""Shortened form a stripped home-instance URI starts with."""

# =============================================================================
# REVISION AND DELTA TOKENS
# =============================================================================

REV_COMMIT_SEPARATOR = "==="
"""Joins an abstract revision and its resolved commit ID."""

CROSS_REPO_SEPARATOR = ":"
"""Joins a base64url repository token and a revision token."""

EMPTY_DEF_PATH = "."
"""Stand-in for an empty definition path inside a URL."""

# =============================================================================
# CLIENT
# =============================================================================

DEFAULT_BASE_URL = "https://sourcegraph.com/api/"
DEFAULT_USER_AGENT = "sgclient/0.1.0"
DEFAULT_TIMEOUT_SECONDS = 30.0
ACCEPT_JSON = "application/json"
