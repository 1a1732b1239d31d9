"""Relay Protocol MCP tools."""

from relay_mcp.client import RelayClient
from relay_mcp.tools import chains, currencies, prices, quotes, requests, swap, transactions
from relay_mcp.tools.api import Operation, tool_name
from relay_mcp.tools.registry import DuplicateToolError, ToolRegistry

__all__ = [
    "DuplicateToolError",
    "Operation",
    "ToolRegistry",
    "all_operations",
    "build_registry",
    "tool_name",
]


def all_operations() -> list[Operation]:
    """Every operation exposed by the server, in listing order."""
    return [
        *chains.OPERATIONS,
        *prices.OPERATIONS,
        *currencies.OPERATIONS,
        *quotes.OPERATIONS,
        *swap.OPERATIONS,
        *requests.OPERATIONS,
        *transactions.OPERATIONS,
    ]


def build_registry(client: RelayClient) -> ToolRegistry:
    return ToolRegistry(client, all_operations())
