"""Tests for the Client facade."""

from __future__ import annotations

import json

from http import HTTPMethod

import pytest

from sgclient.domain.defs.value_objects import DefSpec
from sgclient.domain.deltas.value_objects import DeltaSpec
from sgclient.domain.repos.value_objects import RepoRevSpec, RepoSpec
from sgclient.infrastructure.constants import Route
from sgclient.interfaces.client import Client
from sgclient.interfaces.config import ClientConfig
from sgclient.shared.exceptions import (
    InvalidDeltaHeadError,
    RouteNotFoundError,
    SpecContractError,
)
from sgclient.shared.types import CommitID

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def client() -> Client:
    return Client(config=ClientConfig(base_url="https://sg.example.com/api/"))


@pytest.fixture
def cross_repo_delta() -> DeltaSpec:
    return DeltaSpec(
        base=RepoRevSpec(repo=RepoSpec(uri="r.com/x"), rev="v1"),
        head=RepoRevSpec(
            repo=RepoSpec(uri="r.com/y"), rev="v2", commit_id=CommitID("abc")
        ),
    )


# =============================================================================
# URLs and requests
# =============================================================================


def test_url_for_repo(client: Client) -> None:
    url = client.url_for(Route.REPO, RepoSpec(uri="r.com/x"), params={"Stats": True})
    assert str(url) == "https://sg.example.com/api/repos/r.com/x?Stats=true"


def test_url_for_route_without_spec(client: Client) -> None:
    assert str(client.url_for(Route.REPOS)) == "https://sg.example.com/api/repos"


def test_url_for_invalid_spec_raises(client: Client) -> None:
    spec = RepoRevSpec(repo=RepoSpec(uri="r.com/x"), commit_id=CommitID("abc"))

    with pytest.raises(SpecContractError):
        client.url_for(Route.REPO_COMMIT, spec)


def test_new_request_uses_route_method(client: Client) -> None:
    request = client.new_request(Route.REPOS_GET_OR_CREATE, RepoSpec(rid=4))

    assert request.method == "PUT"
    assert request.url.raw_path == b"/api/repos/R%244"
    assert request.headers["user-agent"] == "sgclient/0.1.0"
    assert request.headers["accept"] == "application/json"


def test_new_request_carries_json_body(client: Client) -> None:
    request = client.new_request(
        Route.REPO_SETTINGS_UPDATE,
        RepoSpec(uri="r.com/x"),
        json={"Enabled": True},
    )

    assert request.method == "PUT"
    assert json.loads(request.content) == {"Enabled": True}


def test_new_request_carries_timeout() -> None:
    client = Client(config=ClientConfig(timeout_seconds=7.0))
    request = client.new_request(Route.REPOS)

    assert request.extensions["timeout"]["read"] == 7.0


# =============================================================================
# Resolving URLs back to specs
# =============================================================================


def test_resolve_repo(client: Client) -> None:
    resolved = client.resolve("https://sg.example.com/api/repos/R%2442")

    assert resolved.route is Route.REPO
    assert resolved.spec == RepoSpec(rid=42)


def test_resolve_repo_rev(client: Client) -> None:
    repo = RepoSpec(uri="src:///a/x")
    spec = RepoRevSpec(repo=repo, rev="r", commit_id=CommitID("c"))

    resolved = client.resolve(client.url_for(Route.REPO_BUILD, spec))

    assert resolved.route is Route.REPO_BUILD
    assert resolved.spec == spec


def test_resolve_cross_repo_delta(client: Client, cross_repo_delta: DeltaSpec) -> None:
    url = client.url_for(Route.DELTA_FILES, cross_repo_delta)

    resolved = client.resolve(url)

    assert resolved.route is Route.DELTA_FILES
    assert resolved.spec == cross_repo_delta


def test_resolve_same_repo_delta(client: Client) -> None:
    repo = RepoSpec(uri="r.com/x")
    spec = DeltaSpec(
        base=RepoRevSpec(repo=repo, rev="v1"), head=RepoRevSpec(repo=repo, rev="v2")
    )

    url = client.url_for(Route.DELTA, spec)

    assert url.raw_path == b"/api/repos/r.com/x@v1/-/delta/v2"
    assert client.resolve(url).spec == spec


def test_resolve_def(client: Client) -> None:
    spec = DefSpec(repo="r.com/x", unit_type="t", unit="u", path="p")

    resolved = client.resolve(client.url_for(Route.DEF_EXAMPLES, spec))

    assert resolved.route is Route.DEF_EXAMPLES
    assert resolved.spec == spec


def test_resolve_route_without_spec(client: Client) -> None:
    resolved = client.resolve("https://sg.example.com/api/defs?Query=foo")

    assert resolved.route is Route.DEFS
    assert resolved.spec is None


def test_resolve_uses_method(client: Client) -> None:
    resolved = client.resolve(
        "https://sg.example.com/api/repos/r.com/x@v1/-/status", HTTPMethod.POST
    )
    assert resolved.route is Route.REPO_STATUS_CREATE


def test_resolve_outside_base_path_raises(client: Client) -> None:
    with pytest.raises(RouteNotFoundError):
        client.resolve("https://sg.example.com/other/repos/r.com/x")


def test_resolve_bad_delta_head_raises(client: Client) -> None:
    with pytest.raises(InvalidDeltaHeadError):
        client.resolve(
            "https://sg.example.com/api/repos/r.com/x@v1/-/delta/%25%25%3Av2"
        )
