"""Operation descriptors and their MCP tool specs."""

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from mcp import types

from relay_mcp.client import RelayClient
from relay_mcp.schemas import ToolInput

TOOL_PREFIX = "relay_"

type OperationHandler = Callable[[RelayClient, Any], Awaitable[Any]]


def tool_name(operation: str) -> str:
    """Return the namespaced tool name for an operation, e.g. `relay_get_chains`."""
    return operation if operation.startswith(TOOL_PREFIX) else f"{TOOL_PREFIX}{operation}"


@dataclass(frozen=True)
class Operation:
    """A named tool: closed input contract plus the coroutine that serves it."""

    name: str
    input_model: type[ToolInput]
    handler: OperationHandler
    title: str | None = None
    description: str | None = None
    read_only: bool = True

    def summary(self) -> str:
        if self.title is not None:
            return self.title
        doc_str = inspect.getdoc(self.handler)
        if doc_str is not None:
            return doc_str.split("\n", maxsplit=1)[0]
        return self.name

    def full_description(self) -> str:
        if self.description is not None:
            return self.description
        return inspect.getdoc(self.handler) or self.summary()

    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema(by_alias=True)

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            title=self.summary(),
            description=self.full_description(),
            inputSchema=self.input_schema(),
            annotations=types.ToolAnnotations(
                title=self.summary(),
                readOnlyHint=self.read_only,
                openWorldHint=True,
            ),
        )
