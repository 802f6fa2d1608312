"""Value objects for the Deltas bounded context."""

from __future__ import annotations

import base64
import re

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

from sgclient.domain.defs.value_objects import Def
from sgclient.domain.repos.value_objects import (
    REPO_SPEC_VAR,
    RepoRevSpec,
    parse_repo_rev_spec,
    unmarshal_repo_rev_spec,
)
from sgclient.shared.constants import CROSS_REPO_SEPARATOR
from sgclient.shared.exceptions import InvalidDeltaHeadError, SpecContractError
from sgclient.shared.types import RouteVars

DELTA_HEAD_REV_VAR = "DeltaHeadRev"

_BASE64URL_RE = re.compile(r"[A-Za-z0-9_-]*={0,2}")

# =============================================================================
# DELTA SPEC
# =============================================================================


@dataclass(frozen=True)
class DeltaSpec:
    """The changes going from ``base`` to ``head``, possibly across repos."""

    base: RepoRevSpec
    head: RepoRevSpec

    @property
    def is_cross_repo(self) -> bool:
        """Whether base and head live in different repositories."""
        return self.base.repo != self.head.repo

    def route_vars(self) -> RouteVars:
        """Route variables for constructing delta routes.

        The base contributes ``RepoSpec`` and ``Rev``. ``DeltaHeadRev`` holds
        the head revision token, prefixed by the base64url head repository
        token and ``:`` when the head is in another repository.

        Raises:
            SpecContractError: If the head cannot be encoded, including a
                same-repository head token containing ``:``.
        """
        route_vars = self.base.route_vars()
        if self.is_cross_repo:
            route_vars[DELTA_HEAD_REV_VAR] = _encode_cross_repo_head(self.head)
        else:
            route_vars[DELTA_HEAD_REV_VAR] = _encode_same_repo_head(self.head)
        return route_vars


def _encode_same_repo_head(head: RepoRevSpec) -> str:
    rev_component = head.rev_path_component()
    if CROSS_REPO_SEPARATOR in rev_component:
        msg = (
            f"same-repository head revision {rev_component!r} must not contain "
            f"{CROSS_REPO_SEPARATOR!r}"
        )
        raise SpecContractError(msg)
    return rev_component


def _encode_cross_repo_head(head: RepoRevSpec) -> str:
    # The URL-safe alphabet has no ":", so the first ":" is always the
    # boundary between repository and revision.
    repo_token = base64.urlsafe_b64encode(head.repo.path_component().encode())
    return repo_token.decode("ascii") + CROSS_REPO_SEPARATOR + head.rev_path_component()


def _decode_cross_repo_repo_token(head_component: str, encoded: str) -> str:
    # Only the URL-safe alphabet; b64decode would also accept "+" and "/".
    if not _BASE64URL_RE.fullmatch(encoded):
        raise InvalidDeltaHeadError(
            DELTA_HEAD_REV_VAR, head_component, "repository is not base64url"
        )
    # binascii.Error and UnicodeDecodeError are both ValueErrors.
    try:
        raw = base64.b64decode(encoded, altchars=b"-_", validate=True)
        return raw.decode("utf-8")
    except ValueError as e:
        raise InvalidDeltaHeadError(
            DELTA_HEAD_REV_VAR, head_component, f"bad base64url repository: {e}"
        ) from e


def unmarshal_delta_spec(route_vars: Mapping[str, str]) -> DeltaSpec:
    """Decode route variables produced by ``DeltaSpec.route_vars``.

    Raises:
        SpecDecodeError: If the base or head variables are invalid.
    """
    base = unmarshal_repo_rev_spec(route_vars)

    head_component = route_vars.get(DELTA_HEAD_REV_VAR, "")
    encoded_repo, sep, rev_component = head_component.partition(CROSS_REPO_SEPARATOR)
    if sep:
        repo_component = _decode_cross_repo_repo_token(head_component, encoded_repo)
        head = parse_repo_rev_spec(repo_component, rev_component)
    else:
        head = parse_repo_rev_spec(route_vars.get(REPO_SPEC_VAR, ""), head_component)

    return DeltaSpec(base=base, head=head)


# =============================================================================
# DEF DELTA
# =============================================================================


class DefDeltaKind(StrEnum):
    """How a definition differs between base and head."""

    ADDED = "added"
    CHANGED = "changed"
    DELETED = "deleted"


@dataclass(frozen=True)
class DefDelta:
    """A single definition that differs between base and head.

    ``base`` is absent for an added definition and ``head`` is absent for a
    deleted one. At least one side is always present.
    """

    base: Def | None
    head: Def | None

    def __post_init__(self) -> None:
        if self.base is None and self.head is None:
            msg = "DefDelta requires a base or a head definition"
            raise ValueError(msg)

    @classmethod
    def added(cls, head: Def) -> DefDelta:
        return cls(base=None, head=head)

    @classmethod
    def changed(cls, base: Def, head: Def) -> DefDelta:
        return cls(base=base, head=head)

    @classmethod
    def deleted(cls, base: Def) -> DefDelta:
        return cls(base=base, head=None)

    @property
    def kind(self) -> DefDeltaKind:
        if self.base is None:
            return DefDeltaKind.ADDED
        if self.head is None:
            return DefDeltaKind.DELETED
        return DefDeltaKind.CHANGED

    @property
    def is_added(self) -> bool:
        return self.kind is DefDeltaKind.ADDED

    @property
    def is_changed(self) -> bool:
        return self.kind is DefDeltaKind.CHANGED

    @property
    def is_deleted(self) -> bool:
        return self.kind is DefDeltaKind.DELETED
