"""Entities for the Deltas bounded context."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from sgclient.domain.deltas.value_objects import DefDelta, DefDeltaKind, DeltaSpec
from sgclient.domain.repos.value_objects import RepoRevSpec
from sgclient.shared.types import CommitID


@dataclass
class Delta:
    """The difference between two commits, possibly in two repositories."""

    base: RepoRevSpec
    head: RepoRevSpec
    base_commit: CommitID | None = None
    head_commit: CommitID | None = None

    def delta_spec(self) -> DeltaSpec:
        return DeltaSpec(base=self.base, head=self.head)


@dataclass
class DeltaDefs:
    """Definitions added, changed or deleted in a delta."""

    defs: list[DefDelta] = field(default_factory=list[DefDelta])

    def added(self) -> list[DefDelta]:
        return self._of_kind(DefDeltaKind.ADDED)

    def changed(self) -> list[DefDelta]:
        return self._of_kind(DefDeltaKind.CHANGED)

    def deleted(self) -> list[DefDelta]:
        return self._of_kind(DefDeltaKind.DELETED)

    def counts(self) -> dict[DefDeltaKind, int]:
        """Number of definitions per kind, including kinds with none."""
        tally = Counter(dd.kind for dd in self.defs)
        return {kind: tally[kind] for kind in DefDeltaKind}

    def _of_kind(self, kind: DefDeltaKind) -> list[DefDelta]:
        return [dd for dd in self.defs if dd.kind is kind]
