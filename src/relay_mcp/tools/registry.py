"""Dispatch table: lists Relay tools and invokes them by name."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from mcp import types

from relay_mcp.client import RelayClient
from relay_mcp.errors import ErrorCategory, RelayError
from relay_mcp.models import ToolExecutionResult
from relay_mcp.schemas import validate_arguments
from relay_mcp.tools.api import Operation

logger = logging.getLogger(__name__)


class DuplicateToolError(ValueError):
    """Raised at startup when two operations share a name."""


class ToolRegistry:
    """Immutable name -> operation mapping bound to a single Relay client."""

    def __init__(self, client: RelayClient, operations: Iterable[Operation]) -> None:
        self._client = client
        registered: dict[str, Operation] = {}
        for operation in operations:
            if operation.name in registered:
                raise DuplicateToolError(f"Tool {operation.name} registered more than once.")
            registered[operation.name] = operation
        self._operations: Mapping[str, Operation] = registered

    @property
    def names(self) -> list[str]:
        return list(self._operations)

    def get(self, name: str) -> Operation | None:
        return self._operations.get(name)

    def list_tools(self) -> list[types.Tool]:
        return [operation.to_mcp_tool() for operation in self._operations.values()]

    async def invoke(
        self, name: str, arguments: Mapping[str, Any] | None
    ) -> ToolExecutionResult:
        """
        Validate arguments and run the named operation.

        Never raises: unknown tools, invalid arguments, Relay failures and
        unexpected exceptions are all returned as error results.
        """
        operation = self._operations.get(name)
        if operation is None:
            logger.warning("tool_not_found", extra={"tool_name": name})
            return ToolExecutionResult.failure(
                name,
                ErrorCategory.NOT_FOUND,
                f"Tool not found: {name}",
                {"tool": name, "availableTools": self.names},
            )

        try:
            payload = validate_arguments(operation.input_model, arguments)
            result = await operation.handler(self._client, payload)
        except RelayError as exc:
            logger.info(
                "tool_invocation_failed",
                extra={"tool_name": name, "category": exc.category.value, "error": str(exc)},
            )
            return ToolExecutionResult.from_error(name, exc)
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("tool_invocation_unexpected_error", extra={"tool_name": name})
            return ToolExecutionResult.failure(
                name,
                ErrorCategory.UNEXPECTED,
                "Unexpected error",
                {"message": str(exc) or repr(exc), "type": type(exc).__name__},
            )
        return ToolExecutionResult.success(name, result)
