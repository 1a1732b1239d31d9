"""Relay Protocol MCP server: exposes the Relay REST API as MCP tools."""

from relay_mcp.client import RelayClient
from relay_mcp.errors import (
    ErrorCategory,
    FieldError,
    RelayAPIError,
    RelayConnectionError,
    RelayError,
    RelayValidationError,
)
from relay_mcp.models import ToolError, ToolExecutionResult, ToolExecutionStatus
from relay_mcp.pagination import FetchedItems, Page, fetch_all_pages
from relay_mcp.settings import RelaySettings, load_settings

__all__ = [
    "ErrorCategory",
    "FetchedItems",
    "FieldError",
    "Page",
    "RelayAPIError",
    "RelayClient",
    "RelayConnectionError",
    "RelayError",
    "RelaySettings",
    "RelayValidationError",
    "ToolError",
    "ToolExecutionResult",
    "ToolExecutionStatus",
    "fetch_all_pages",
    "load_settings",
]
