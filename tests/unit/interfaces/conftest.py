"""Fixtures for interface tests."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clean_sg_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SG_BASE_URL", "SG_USER_AGENT", "SG_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
