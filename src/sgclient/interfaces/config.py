"""Client configuration from ``pyproject.toml`` and environment variables.

Merge order (later wins): defaults → ``[tool.sgclient]`` → ``SG_*`` env vars.
A missing file or section leaves the defaults in place.
"""

from __future__ import annotations

import logging
import os
import tomllib

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sgclient.shared.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)
from sgclient.shared.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_ENV_VARS = {
    "base_url": "SG_BASE_URL",
    "user_agent": "SG_USER_AGENT",
    "timeout_seconds": "SG_TIMEOUT_SECONDS",
}


def _parse_float(name: str, raw: object) -> float:
    """Parse a float setting or raise with a clear message."""
    try:
        value = float(str(raw))
    except ValueError:
        msg = f"Invalid float for {name}: {raw!r}"
        raise ConfigurationError(msg) from None
    if value <= 0:
        msg = f"{name} must be positive, got {value}"
        raise ConfigurationError(msg)
    return value


def _normalize_base_url(raw: object) -> str:
    base_url = str(raw).strip()
    if not base_url.startswith(("http://", "https://")):
        msg = f"base_url must be an http(s) URL, got {base_url!r}"
        raise ConfigurationError(msg)
    if not base_url.endswith("/"):
        base_url += "/"
    return base_url


@dataclass(frozen=True)
class ClientConfig:
    """Typed configuration for ``Client``."""

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_mapping(cls, raw: dict[str, Any]) -> ClientConfig:
        """Build config from already-merged raw settings.

        Raises:
            ConfigurationError: On invalid values.
        """
        return cls(
            base_url=_normalize_base_url(raw.get("base_url", DEFAULT_BASE_URL)),
            user_agent=str(raw.get("user_agent", DEFAULT_USER_AGENT)),
            timeout_seconds=_parse_float(
                "timeout_seconds",
                raw.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS),
            ),
        )

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Build config from environment variables over the defaults.

        Optional: SG_BASE_URL, SG_USER_AGENT, SG_TIMEOUT_SECONDS
        """
        return cls.from_mapping(_env_overrides())


def load_client_config(project_root: Path | None = None) -> ClientConfig:
    """Load client configuration for the project at *project_root*.

    Args:
        project_root: Directory containing ``pyproject.toml``.
            Defaults to ``Path.cwd()``.

    Raises:
        ConfigurationError: On TOML parse errors or invalid values.
    """
    if project_root is None:
        project_root = Path.cwd()

    merged: dict[str, Any] = {}
    section = _read_tool_section(project_root / "pyproject.toml")
    if section is not None:
        for key, value in section.items():
            if key not in _ENV_VARS:
                logger.warning("Unknown key in [tool.sgclient]: %r", key)
                continue
            merged[key] = value
    merged.update(_env_overrides())
    return ClientConfig.from_mapping(merged)


def _env_overrides() -> dict[str, str]:
    return {
        key: os.environ[env_name]
        for key, env_name in _ENV_VARS.items()
        if os.environ.get(env_name)
    }


def _read_tool_section(toml_path: Path) -> dict[str, Any] | None:
    """Read ``[tool.sgclient]`` from *toml_path*, or ``None`` if absent."""
    if not toml_path.is_file():
        return None
    try:
        with toml_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Failed to parse {toml_path}: {exc}"
        raise ConfigurationError(msg) from exc
    tool = data.get("tool")
    if not isinstance(tool, dict):
        return None
    section = tool.get("sgclient")
    if not isinstance(section, dict):
        return None
    return section
