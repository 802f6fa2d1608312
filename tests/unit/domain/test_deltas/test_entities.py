"""Tests for Delta and DeltaDefs."""

from __future__ import annotations

from sgclient.domain.defs.value_objects import Def
from sgclient.domain.deltas.entities import Delta, DeltaDefs
from sgclient.domain.deltas.value_objects import DefDelta, DefDeltaKind, DeltaSpec
from sgclient.shared.types import CommitID


def test_delta_spec_drops_resolved_commits(cross_repo_delta: DeltaSpec) -> None:
    delta = Delta(
        base=cross_repo_delta.base,
        head=cross_repo_delta.head,
        base_commit=CommitID("aaa"),
        head_commit=CommitID("bbb"),
    )

    assert delta.delta_spec() == cross_repo_delta


def test_delta_defs_partitions_by_kind(base_def: Def, head_def: Def) -> None:
    added = DefDelta.added(head_def)
    changed = DefDelta.changed(base_def, head_def)
    deleted = DefDelta.deleted(base_def)
    defs = DeltaDefs(defs=[added, changed, deleted, DefDelta.added(base_def)])

    assert defs.added() == [added, DefDelta.added(base_def)]
    assert defs.changed() == [changed]
    assert defs.deleted() == [deleted]


def test_delta_defs_counts_include_empty_kinds(head_def: Def) -> None:
    defs = DeltaDefs(defs=[DefDelta.added(head_def)])

    assert defs.counts() == {
        DefDeltaKind.ADDED: 1,
        DefDeltaKind.CHANGED: 0,
        DefDeltaKind.DELETED: 0,
    }


def test_empty_delta_defs() -> None:
    assert DeltaDefs().added() == []
    assert sum(DeltaDefs().counts().values()) == 0
