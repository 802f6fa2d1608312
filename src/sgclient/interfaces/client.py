"""Client facade: specs to URLs and requests, URLs back to specs.

Sending requests is left to the caller's own ``httpx.Client``.
"""

from __future__ import annotations

import logging

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from http import HTTPMethod
from typing import Protocol

import httpx

from sgclient.domain.defs.value_objects import (
    UNIT_TYPE_VAR,
    DefSpec,
    unmarshal_def_spec,
)
from sgclient.domain.deltas.value_objects import (
    DELTA_HEAD_REV_VAR,
    DeltaSpec,
    unmarshal_delta_spec,
)
from sgclient.domain.repos.value_objects import (
    REPO_SPEC_VAR,
    REV_VAR,
    RepoRevSpec,
    RepoSpec,
    unmarshal_repo_rev_spec,
    unmarshal_repo_spec,
)
from sgclient.infrastructure.constants import Route
from sgclient.infrastructure.routing import CompiledRoute, Router
from sgclient.interfaces.config import ClientConfig
from sgclient.shared.constants import ACCEPT_JSON
from sgclient.shared.exceptions import RouteNotFoundError
from sgclient.shared.types import RouteVars

logger = logging.getLogger(__name__)

Spec = RepoSpec | RepoRevSpec | DeltaSpec | DefSpec
SpecDecoder = Callable[[Mapping[str, str]], Spec]


class RouteSpec(Protocol):
    """Anything that can supply route variables for a URL."""

    def route_vars(self) -> RouteVars: ...


@dataclass(frozen=True)
class ResolvedRoute:
    """A matched route and the spec decoded from its route variables."""

    route: Route
    spec: Spec | None


def decoder_for(compiled: CompiledRoute) -> SpecDecoder | None:
    """Pick the decoder for the most specific spec a route carries."""
    variables = compiled.variables
    if DELTA_HEAD_REV_VAR in variables:
        return unmarshal_delta_spec
    if UNIT_TYPE_VAR in variables:
        return unmarshal_def_spec
    if REV_VAR in variables:
        return unmarshal_repo_rev_spec
    if REPO_SPEC_VAR in variables:
        return unmarshal_repo_spec
    return None


@dataclass
class Client:
    """Builds API URLs and unsent requests from specs."""

    config: ClientConfig = field(default_factory=ClientConfig)
    router: Router = field(default_factory=Router)

    def url_for(
        self,
        route: Route,
        spec: RouteSpec | None = None,
        params: Mapping[str, str | int | bool] | None = None,
    ) -> httpx.URL:
        """Absolute URL for *route*, addressed by *spec*.

        Raises:
            SpecContractError: If *spec* cannot be encoded for *route*.
        """
        route_vars = spec.route_vars() if spec is not None else RouteVars()
        return self.router.url(self.config.base_url, route, route_vars, params)

    def new_request(
        self,
        route: Route,
        spec: RouteSpec | None = None,
        params: Mapping[str, str | int | bool] | None = None,
        json: object | None = None,
    ) -> httpx.Request:
        """Build the request for *route* with the route's HTTP method.

        Raises:
            SpecContractError: If *spec* cannot be encoded for *route*.
        """
        method = self.router.get(route).method
        url = self.url_for(route, spec, params)
        timeout = httpx.Timeout(self.config.timeout_seconds)
        logger.debug("New request %s %s", method, url)
        return httpx.Request(
            method,
            url,
            headers=self._headers(),
            json=json,
            extensions={"timeout": timeout.as_dict()},
        )

    def resolve(
        self,
        url: httpx.URL | str,
        method: HTTPMethod = HTTPMethod.GET,
    ) -> ResolvedRoute:
        """Match an API URL to its route and decode the spec it addresses.

        Raises:
            RouteNotFoundError: If the URL is outside the API or unrouted.
            SpecDecodeError: If the route variables do not decode.
        """
        raw_path = httpx.URL(url).raw_path.decode("ascii").partition("?")[0]
        base_path = httpx.URL(self.config.base_url).raw_path.decode("ascii")
        if not raw_path.startswith(base_path):
            raise RouteNotFoundError(raw_path)

        compiled, route_vars = self.router.match(raw_path[len(base_path) :], method)
        decode = decoder_for(compiled)
        spec = decode(route_vars) if decode is not None else None
        return ResolvedRoute(route=compiled.route, spec=spec)

    def _headers(self) -> dict[str, str]:
        return {
            "user-agent": self.config.user_agent,
            "accept": ACCEPT_JSON,
        }
