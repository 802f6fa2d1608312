"""Fixtures for repository spec tests."""

from __future__ import annotations

import pytest

from sgclient.domain.repos.value_objects import RepoRevSpec, RepoSpec
from sgclient.shared.types import CommitID


@pytest.fixture
def uri_repo() -> RepoSpec:
    return RepoSpec(uri="src:///a/x")


@pytest.fixture
def pinned_rev(uri_repo: RepoSpec) -> RepoRevSpec:
    return RepoRevSpec(repo=uri_repo, rev="r", commit_id=CommitID("abc123"))
