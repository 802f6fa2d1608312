"""Value objects for the Repositories bounded context.

A repository is addressed in URLs by a single ``RepoSpec`` token, and a
repository at a revision by that token plus a ``Rev`` token. Both encode
into, and decode from, a flat route-variable map.
"""

from __future__ import annotations

import re

from collections.abc import Mapping
from dataclasses import dataclass

from sgclient.shared.constants import (
    HOME_HOST_PREFIX,
    HOME_ORG_PREFIX,
    REPO_ID_PREFIX,
    REV_COMMIT_SEPARATOR,
)
from sgclient.shared.exceptions import (
    EmptySpecError,
    InvalidRepoIDError,
    InvalidRevSpecError,
    SpecContractError,
)
from sgclient.shared.types import CommitID, RouteVars

REPO_SPEC_VAR = "RepoSpec"
REV_VAR = "Rev"

_DECIMAL_RE = re.compile(r"[0-9]+")

# =============================================================================
# REPO SPEC
# =============================================================================


@dataclass(frozen=True)
class RepoSpec:
    """A repository, identified by numeric ID or by URI.

    A positive ``rid`` takes precedence over ``uri``.
    """

    uri: str = ""
    rid: int = 0

    def path_component(self) -> str:
        """Encode the repository as a single URL path token.

        Raises:
            SpecContractError: If neither ``rid`` nor ``uri`` is set.
        """
        if self.rid > 0:
            return f"{REPO_ID_PREFIX}{self.rid}"
        if self.uri:
            return _shorten_home_uri(self.uri)
        msg = "empty RepoSpec"
        raise SpecContractError(msg)

    def route_vars(self) -> RouteVars:
        """Route variables for constructing repository routes."""
        return RouteVars({REPO_SPEC_VAR: self.path_component()})


def _shorten_home_uri(uri: str) -> str:
    """Drop the home host only for home-organization URIs, the one prefix
    ``parse_repo_spec`` restores; other ``sourcegraph.com/`` URIs stay whole.
    """
    short = uri.removeprefix(HOME_HOST_PREFIX)
    if short != uri and short.startswith(HOME_ORG_PREFIX):
        return short
    return uri


def parse_repo_spec(path_component: str) -> RepoSpec:
    """Parse a token produced by ``RepoSpec.path_component``.

    Raises:
        EmptySpecError: If the token is empty.
        InvalidRepoIDError: If a numeric token is not a positive integer.
    """
    if not path_component:
        raise EmptySpecError(REPO_SPEC_VAR)

    if path_component.startswith(REPO_ID_PREFIX):
        digits = path_component[len(REPO_ID_PREFIX) :]
        if not _DECIMAL_RE.fullmatch(digits):
            raise InvalidRepoIDError(
                REPO_SPEC_VAR, path_component, "repository ID is not a decimal integer"
            )
        rid = int(digits)
        if rid <= 0:
            raise InvalidRepoIDError(
                REPO_SPEC_VAR, path_component, "repository ID must be positive"
            )
        return RepoSpec(rid=rid)

    if path_component.startswith(HOME_ORG_PREFIX):
        return RepoSpec(uri=HOME_HOST_PREFIX + path_component)
    return RepoSpec(uri=path_component)


def unmarshal_repo_spec(route_vars: Mapping[str, str]) -> RepoSpec:
    """Decode route variables produced by ``RepoSpec.route_vars``.

    Raises:
        SpecDecodeError: If the ``RepoSpec`` variable is missing or invalid.
    """
    return parse_repo_spec(route_vars.get(REPO_SPEC_VAR, ""))


# =============================================================================
# REPO REV SPEC
# =============================================================================


@dataclass(frozen=True)
class RepoRevSpec:
    """A repository at a revision.

    ``rev`` is the abstract revision (branch, tag or abbreviated commit) and
    is empty for the default branch. ``commit_id`` optionally pins the full
    commit ``rev`` resolved to, so a sequence of calls sees one consistent
    commit while links can still be built from the unresolved ``rev``.
    """

    repo: RepoSpec
    rev: str = ""
    commit_id: CommitID = CommitID("")

    def rev_path_component(self) -> str:
        """Encode the revision as ``rev`` or ``rev===commit_id``.

        Raises:
            SpecContractError: If ``commit_id`` is set without ``rev``.
        """
        if not self.rev and self.commit_id:
            msg = f"invalid empty Rev but non-empty CommitID ({self.commit_id})"
            raise SpecContractError(msg)
        if self.commit_id:
            return f"{self.rev}{REV_COMMIT_SEPARATOR}{self.commit_id}"
        return self.rev

    def route_vars(self) -> RouteVars:
        """Route variables for constructing routes to a repository commit."""
        route_vars = self.repo.route_vars()
        route_vars[REV_VAR] = self.rev_path_component()
        return route_vars


def parse_rev_path_component(rev_component: str) -> tuple[str, CommitID]:
    """Split a revision token on the first separator into rev and commit ID."""
    rev, sep, commit_id = rev_component.partition(REV_COMMIT_SEPARATOR)
    if not sep:
        return rev_component, CommitID("")
    return rev, CommitID(commit_id)


def parse_repo_rev_spec(repo_component: str, rev_component: str) -> RepoRevSpec:
    """Decode a repository token and a revision token.

    Raises:
        SpecDecodeError: If either token is invalid.
    """
    repo = parse_repo_spec(repo_component)
    rev, commit_id = parse_rev_path_component(rev_component)
    if not rev and commit_id:
        raise InvalidRevSpecError(
            REV_VAR, rev_component, "non-empty CommitID requires a non-empty Rev"
        )
    return RepoRevSpec(repo=repo, rev=rev, commit_id=commit_id)


def unmarshal_repo_rev_spec(route_vars: Mapping[str, str]) -> RepoRevSpec:
    """Decode route variables produced by ``RepoRevSpec.route_vars``.

    Raises:
        SpecDecodeError: If the repository or revision variable is invalid.
    """
    return parse_repo_rev_spec(
        route_vars.get(REPO_SPEC_VAR, ""),
        route_vars.get(REV_VAR, ""),
    )
