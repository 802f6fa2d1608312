"""Fixtures for shared kernel tests."""

from __future__ import annotations

import pytest

from sgclient.shared.types import CommitID


@pytest.fixture
def commit_id() -> CommitID:
    return CommitID("deadbeefdeadbeefdeadbeefdeadbeefdeadbeef")
