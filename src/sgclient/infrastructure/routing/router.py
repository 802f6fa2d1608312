"""URL building and route matching over the API route table."""

from __future__ import annotations

import logging
import re
import urllib.parse

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPMethod

import httpx

from sgclient.domain.defs.value_objects import UNIT_TYPE_VAR
from sgclient.infrastructure.constants import ROUTES, Route
from sgclient.shared.exceptions import RouteNotFoundError, SpecContractError
from sgclient.shared.types import RouteVars

logger = logging.getLogger(__name__)

_PLACEHOLDER_RE = re.compile(r"\{([@/]?)(\w+)\}")

# Values may contain "/" but never "@" (always percent-encoded) or "/-/".
_DEFAULT_VAR_PATTERN = r"(?:(?!/-/)[^@])+"
_DEFAULT_SAFE_CHARS = "/"
_FIXED_PART_SEPARATOR = "/-/"

_VAR_PATTERNS: dict[str, str] = {UNIT_TYPE_VAR: r"[^/@]+"}
_VAR_SAFE_CHARS: dict[str, str] = {UNIT_TYPE_VAR: ""}

_DOT_SEGMENTS = {".": "%2E", "..": "%2E%2E"}


def _quote_value(name: str, value: str) -> str:
    """Percent-encode a route variable for use in a URL path.

    Dot segments are escaped too, otherwise URL normalization drops them.
    """
    safe = _VAR_SAFE_CHARS.get(name, _DEFAULT_SAFE_CHARS)
    quoted = urllib.parse.quote(value, safe=safe)
    return "/".join(_DOT_SEGMENTS.get(seg, seg) for seg in quoted.split("/"))


# =============================================================================
# COMPILED ROUTES
# =============================================================================


@dataclass(frozen=True)
class Placeholder:
    """A route variable slot in a path template."""

    name: str
    prefix: str = ""

    @property
    def optional(self) -> bool:
        return bool(self.prefix)


@dataclass(frozen=True)
class CompiledRoute:
    """A path template split into literal text and placeholders."""

    route: Route
    method: HTTPMethod
    template: str
    segments: tuple[str | Placeholder, ...]
    pattern: re.Pattern[str]

    @property
    def variables(self) -> frozenset[str]:
        """Names of all route variables the template uses."""
        return frozenset(s.name for s in self.segments if isinstance(s, Placeholder))

    def expand(self, route_vars: Mapping[str, str]) -> str:
        """Substitute route variables into the template.

        Raises:
            SpecContractError: If a required variable is missing or empty, or
                a value would read as a "/-/" separator once in the path.
        """
        parts: list[str] = []
        for segment in self.segments:
            if isinstance(segment, str):
                parts.append(segment)
                continue
            value = route_vars.get(segment.name, "")
            if value:
                quoted = _quote_value(segment.name, value)
                # A trailing "/-" would join the "/-/" that follows it.
                if _FIXED_PART_SEPARATOR in quoted + "/":
                    msg = (
                        f"route variable {segment.name!r} value {value!r} "
                        f"contains {_FIXED_PART_SEPARATOR!r}"
                    )
                    raise SpecContractError(msg)
                parts.append(segment.prefix + quoted)
            elif not segment.optional:
                msg = f"route {self.route} requires route variable {segment.name!r}"
                raise SpecContractError(msg)
        return "".join(parts)

    def match(self, path: str) -> RouteVars | None:
        """Extract decoded route variables from *path*, or ``None``."""
        m = self.pattern.fullmatch(path)
        if m is None:
            return None
        return RouteVars(
            {
                name: urllib.parse.unquote(value) if value else ""
                for name, value in m.groupdict().items()
            }
        )


def compile_route(route: Route, method: HTTPMethod, template: str) -> CompiledRoute:
    """Parse a path template into a ``CompiledRoute``."""
    segments: list[str | Placeholder] = []
    regex_parts: list[str] = []
    pos = 0
    for m in _PLACEHOLDER_RE.finditer(template):
        literal = template[pos : m.start()]
        if literal:
            segments.append(literal)
            regex_parts.append(re.escape(literal))

        prefix, name = m.groups()
        segments.append(Placeholder(name=name, prefix=prefix))
        group = f"(?P<{name}>{_VAR_PATTERNS.get(name, _DEFAULT_VAR_PATTERN)})"
        if prefix:
            group = f"(?:{re.escape(prefix)}{group})?"
        regex_parts.append(group)
        pos = m.end()

    tail = template[pos:]
    if tail:
        segments.append(tail)
        regex_parts.append(re.escape(tail))

    return CompiledRoute(
        route=route,
        method=method,
        template=template,
        segments=tuple(segments),
        pattern=re.compile("".join(regex_parts)),
    )


# =============================================================================
# ROUTER
# =============================================================================


class Router:
    """Builds URL paths from route variables and matches them back."""

    def __init__(
        self,
        routes: Mapping[Route, tuple[HTTPMethod, str]] | None = None,
    ) -> None:
        table = ROUTES if routes is None else routes
        self._routes: dict[Route, CompiledRoute] = {
            route: compile_route(route, method, template)
            for route, (method, template) in table.items()
        }

    def get(self, route: Route) -> CompiledRoute:
        """Look up a compiled route by name.

        Raises:
            SpecContractError: If the route is not in this router's table.
        """
        try:
            return self._routes[route]
        except KeyError:
            msg = f"unknown route {route!r}"
            raise SpecContractError(msg) from None

    def url_path(self, route: Route, route_vars: Mapping[str, str]) -> str:
        """Relative URL path for *route* with *route_vars* substituted."""
        path = self.get(route).expand(route_vars)
        logger.debug("Built path %s for route %s", path, route)
        return path

    def url(
        self,
        base_url: httpx.URL | str,
        route: Route,
        route_vars: Mapping[str, str],
        params: Mapping[str, str | int | bool] | None = None,
    ) -> httpx.URL:
        """Absolute URL for *route* under *base_url*, with query *params*."""
        base = str(base_url)
        if not base.endswith("/"):
            base += "/"
        url = httpx.URL(base + self.url_path(route, route_vars))
        if params:
            url = url.copy_merge_params(_query_params(params))
        return url

    def match(
        self,
        path: str,
        method: HTTPMethod = HTTPMethod.GET,
    ) -> tuple[CompiledRoute, RouteVars]:
        """Find the route serving *path* and decode its route variables.

        *path* is relative to the API base URL and still percent-encoded.

        Raises:
            RouteNotFoundError: If no route with *method* matches.
        """
        path = path.lstrip("/")
        for compiled in self._routes.values():
            if compiled.method != method:
                continue
            route_vars = compiled.match(path)
            if route_vars is not None:
                logger.debug("Matched %s %s to route %s", method, path, compiled.route)
                return compiled, route_vars
        raise RouteNotFoundError(path)


def _query_params(params: Mapping[str, str | int | bool]) -> dict[str, str]:
    # Booleans follow the remote API's lowercase convention.
    return {
        key: str(value).lower() if isinstance(value, bool) else str(value)
        for key, value in params.items()
    }
