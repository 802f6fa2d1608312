"""Infrastructure-layer constants and enums.

Route names and the path templates the remote API serves them at.
"""

from __future__ import annotations

from enum import StrEnum
from http import HTTPMethod

# =============================================================================
# ROUTE NAMES
# =============================================================================


class Route(StrEnum):
    """Named endpoints of the remote API."""

    REPOS = "repos"
    REPOS_CREATE = "repos.create"
    REPO = "repo"
    REPOS_GET_OR_CREATE = "repos.get-or-create"
    REPO_SETTINGS = "repo.settings"
    REPO_SETTINGS_UPDATE = "repo.settings.update"
    REPO_REFRESH_PROFILE = "repo.refresh-profile"
    REPO_REFRESH_VCS_DATA = "repo.refresh-vcs-data"
    REPO_COMMITS = "repo.commits"
    REPO_BRANCHES = "repo.branches"
    REPO_TAGS = "repo.tags"
    REPO_BADGES = "repo.badges"
    REPO_COUNTERS = "repo.counters"
    REPO_COMMIT = "repo.commit"
    REPO_STATS = "repo.stats"
    REPO_COMPUTE_STATS = "repo.compute-stats"
    REPO_COMBINED_STATUS = "repo.combined-status"
    REPO_STATUS_CREATE = "repo.status.create"
    REPO_BUILD = "repo.build"
    REPO_README = "repo.readme"
    DELTA = "delta"
    DELTA_DEFS = "delta.defs"
    DELTA_DEPENDENCIES = "delta.dependencies"
    DELTA_FILES = "delta.files"
    DELTA_AFFECTED_AUTHORS = "delta.affected-authors"
    DELTA_AFFECTED_CLIENTS = "delta.affected-clients"
    DELTA_AFFECTED_DEPENDENTS = "delta.affected-dependents"
    DELTA_REVIEWERS = "delta.reviewers"
    DELTAS_INCOMING = "deltas.incoming"
    DEFS = "defs"
    DEF = "def"
    DEF_REFS = "def.refs"
    DEF_EXAMPLES = "def.examples"
    DEF_AUTHORS = "def.authors"


# =============================================================================
# PATH TEMPLATES
# =============================================================================
# Paths are relative to the API base URL. ``{Name}`` is a required route
# variable. ``{@Name}`` and ``{/Name}`` are optional and expand to the prefix
# character plus the value, or to nothing when the value is empty. ``/-/``
# separates variables from fixed path parts and never occurs inside a value.

_REPO = "repos/{RepoSpec}"
_REPO_REV = "repos/{RepoSpec}{@Rev}"
_DELTA = _REPO_REV + "/-/delta{/DeltaHeadRev}"
_DEF = _REPO_REV + "/-/def/{UnitType}/{Unit}/-/{Path}"

ROUTES: dict[Route, tuple[HTTPMethod, str]] = {
    Route.REPOS: (HTTPMethod.GET, "repos"),
    Route.REPOS_CREATE: (HTTPMethod.POST, "repos"),
    Route.REPO: (HTTPMethod.GET, _REPO),
    Route.REPOS_GET_OR_CREATE: (HTTPMethod.PUT, _REPO),
    Route.REPO_SETTINGS: (HTTPMethod.GET, _REPO + "/-/settings"),
    Route.REPO_SETTINGS_UPDATE: (HTTPMethod.PUT, _REPO + "/-/settings"),
    Route.REPO_REFRESH_PROFILE: (HTTPMethod.PUT, _REPO + "/-/refresh-profile"),
    Route.REPO_REFRESH_VCS_DATA: (HTTPMethod.PUT, _REPO + "/-/refresh-vcs-data"),
    Route.REPO_COMMITS: (HTTPMethod.GET, _REPO + "/-/commits"),
    Route.REPO_BRANCHES: (HTTPMethod.GET, _REPO + "/-/branches"),
    Route.REPO_TAGS: (HTTPMethod.GET, _REPO + "/-/tags"),
    Route.REPO_BADGES: (HTTPMethod.GET, _REPO + "/-/badges"),
    Route.REPO_COUNTERS: (HTTPMethod.GET, _REPO + "/-/counters"),
    Route.REPO_COMMIT: (HTTPMethod.GET, _REPO_REV + "/-/commit"),
    Route.REPO_STATS: (HTTPMethod.GET, _REPO_REV + "/-/stats"),
    Route.REPO_COMPUTE_STATS: (HTTPMethod.PUT, _REPO_REV + "/-/stats"),
    Route.REPO_COMBINED_STATUS: (HTTPMethod.GET, _REPO_REV + "/-/status"),
    Route.REPO_STATUS_CREATE: (HTTPMethod.POST, _REPO_REV + "/-/status"),
    Route.REPO_BUILD: (HTTPMethod.GET, _REPO_REV + "/-/build"),
    Route.REPO_README: (HTTPMethod.GET, _REPO_REV + "/-/readme"),
    Route.DELTA: (HTTPMethod.GET, _DELTA),
    Route.DELTA_DEFS: (HTTPMethod.GET, _DELTA + "/-/defs"),
    Route.DELTA_DEPENDENCIES: (HTTPMethod.GET, _DELTA + "/-/dependencies"),
    Route.DELTA_FILES: (HTTPMethod.GET, _DELTA + "/-/files"),
    Route.DELTA_AFFECTED_AUTHORS: (HTTPMethod.GET, _DELTA + "/-/affected-authors"),
    Route.DELTA_AFFECTED_CLIENTS: (HTTPMethod.GET, _DELTA + "/-/affected-clients"),
    Route.DELTA_AFFECTED_DEPENDENTS: (
        HTTPMethod.GET,
        _DELTA + "/-/affected-dependents",
    ),
    Route.DELTA_REVIEWERS: (HTTPMethod.GET, _DELTA + "/-/reviewers"),
    Route.DELTAS_INCOMING: (HTTPMethod.GET, _REPO_REV + "/-/deltas/incoming"),
    Route.DEFS: (HTTPMethod.GET, "defs"),
    Route.DEF: (HTTPMethod.GET, _DEF),
    Route.DEF_REFS: (HTTPMethod.GET, _DEF + "/-/refs"),
    Route.DEF_EXAMPLES: (HTTPMethod.GET, _DEF + "/-/examples"),
    Route.DEF_AUTHORS: (HTTPMethod.GET, _DEF + "/-/authors"),
}
