"""Fixtures for delta tests."""

from __future__ import annotations

import pytest

from sgclient.domain.defs.value_objects import Def, DefSpec
from sgclient.domain.deltas.value_objects import DeltaSpec
from sgclient.domain.repos.value_objects import RepoRevSpec, RepoSpec


@pytest.fixture
def same_repo_delta() -> DeltaSpec:
    repo = RepoSpec(uri="r.com/x")
    return DeltaSpec(
        base=RepoRevSpec(repo=repo, rev="v1"),
        head=RepoRevSpec(repo=repo, rev="v2"),
    )


@pytest.fixture
def cross_repo_delta() -> DeltaSpec:
    return DeltaSpec(
        base=RepoRevSpec(repo=RepoSpec(uri="r.com/x"), rev="v1"),
        head=RepoRevSpec(repo=RepoSpec(uri="r.com/y"), rev="v2"),
    )


@pytest.fixture
def base_def() -> Def:
    spec = DefSpec(repo="r.com/x", unit_type="t", unit="u", path="p")
    return Def(spec=spec, name="p")


@pytest.fixture
def head_def() -> Def:
    spec = DefSpec(repo="r.com/x", unit_type="t", unit="u", path="p")
    return Def(spec=spec, name="p", kind="func")
