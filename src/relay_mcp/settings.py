"""Settings helpers for the Relay MCP server."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from hopeit.dataobjects import dataclass, dataobject

DEFAULT_BASE_URL = "https://api.relay.link"
DEFAULT_TIMEOUT_MS = 30_000
SERVER_NAME = "relay-protocol-mcp"
SERVER_VERSION = "0.1.0"

ENV_BASE_URL = "RELAY_API_URL"
ENV_TIMEOUT_MS = "RELAY_TIMEOUT_MS"
ENV_HOST = "HOST"
ENV_PORT = "PORT"


@dataobject
@dataclass
class RelaySettings:
    """Configuration built once at startup and passed to the client and server."""

    base_url: str = DEFAULT_BASE_URL
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    server_name: str = SERVER_NAME
    server_version: str = SERVER_VERSION
    host: str = "127.0.0.1"
    port: int = 3000


def load_settings(env: Mapping[str, Any], **overrides: Any) -> RelaySettings:
    """Build settings from environment variables; non-None overrides take precedence."""
    values: dict[str, Any] = {}
    if env.get(ENV_BASE_URL):
        values["base_url"] = str(env[ENV_BASE_URL])
    if env.get(ENV_TIMEOUT_MS):
        values["timeout_ms"] = _parse_int(ENV_TIMEOUT_MS, env[ENV_TIMEOUT_MS])
    if env.get(ENV_HOST):
        values["host"] = str(env[ENV_HOST])
    if env.get(ENV_PORT):
        values["port"] = _parse_int(ENV_PORT, env[ENV_PORT])
    values.update({key: value for key, value in overrides.items() if value is not None})
    return RelaySettings(**values)


def _parse_int(name: str, value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be an integer, received {value!r}") from exc
