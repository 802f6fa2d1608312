"""Value objects for the Definitions bounded context."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from sgclient.domain.repos.value_objects import REPO_SPEC_VAR, REV_VAR
from sgclient.shared.constants import EMPTY_DEF_PATH
from sgclient.shared.exceptions import EmptySpecError, SpecContractError
from sgclient.shared.types import CommitID, RouteVars

UNIT_TYPE_VAR = "UnitType"
UNIT_VAR = "Unit"
PATH_VAR = "Path"

# =============================================================================
# DEF SPEC
# =============================================================================


@dataclass(frozen=True)
class DefSpec:
    """A definition, addressed by repository, source unit and path."""

    repo: str
    unit_type: str
    unit: str
    path: str = ""
    commit_id: CommitID = CommitID("")

    def route_vars(self) -> RouteVars:
        """Route variables for constructing definition routes.

        ``Rev`` is present only when the definition is pinned to a commit.

        Raises:
            SpecContractError: If the repository, unit type or unit is empty.
        """
        for name, value in (
            (REPO_SPEC_VAR, self.repo),
            (UNIT_TYPE_VAR, self.unit_type),
            (UNIT_VAR, self.unit),
        ):
            if not value:
                msg = f"empty {name} in DefSpec"
                raise SpecContractError(msg)

        route_vars = RouteVars(
            {
                REPO_SPEC_VAR: self.repo,
                UNIT_TYPE_VAR: self.unit_type,
                UNIT_VAR: self.unit,
                PATH_VAR: self.path or EMPTY_DEF_PATH,
            }
        )
        if self.commit_id:
            route_vars[REV_VAR] = self.commit_id
        return route_vars


def unmarshal_def_spec(route_vars: Mapping[str, str]) -> DefSpec:
    """Decode route variables produced by ``DefSpec.route_vars``.

    Raises:
        EmptySpecError: If the repository, unit type or unit is missing.
    """
    for name in (REPO_SPEC_VAR, UNIT_TYPE_VAR, UNIT_VAR):
        if not route_vars.get(name):
            raise EmptySpecError(name)

    path = route_vars.get(PATH_VAR, "")
    return DefSpec(
        repo=route_vars[REPO_SPEC_VAR],
        unit_type=route_vars[UNIT_TYPE_VAR],
        unit=route_vars[UNIT_VAR],
        path="" if path == EMPTY_DEF_PATH else path,
        commit_id=CommitID(route_vars.get(REV_VAR, "")),
    )


# =============================================================================
# DEF
# =============================================================================


@dataclass(frozen=True)
class Def:
    """A definition as seen at one revision."""

    spec: DefSpec
    name: str
    kind: str = ""
