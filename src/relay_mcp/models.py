"""Typed data objects for tool invocation results."""

from enum import Enum
from typing import Any

from hopeit.dataobjects import dataclass, dataobject, field

from relay_mcp.errors import ErrorCategory, RelayError


class ToolExecutionStatus(str, Enum):
    """Outcome of a tool invocation."""

    SUCCESS = "success"
    VALIDATION_ERROR = ErrorCategory.VALIDATION.value
    CONNECTION_ERROR = ErrorCategory.CONNECTION.value
    API_ERROR = ErrorCategory.API.value
    NOT_FOUND = ErrorCategory.NOT_FOUND.value
    UNEXPECTED_ERROR = ErrorCategory.UNEXPECTED.value


@dataobject
@dataclass
class ToolError:
    """Short message plus full diagnostic payload for a failed invocation."""

    category: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)


@dataobject
@dataclass
class ToolExecutionResult:
    """Result of calling a Relay tool: either a result value or an error."""

    tool_name: str
    status: ToolExecutionStatus
    result: Any = None
    error: ToolError | None = None

    @property
    def is_error(self) -> bool:
        return self.status is not ToolExecutionStatus.SUCCESS

    @classmethod
    def success(cls, tool_name: str, result: Any) -> "ToolExecutionResult":
        return cls(tool_name=tool_name, status=ToolExecutionStatus.SUCCESS, result=result)

    @classmethod
    def failure(
        cls,
        tool_name: str,
        category: ErrorCategory,
        message: str,
        details: dict[str, Any],
    ) -> "ToolExecutionResult":
        return cls(
            tool_name=tool_name,
            status=ToolExecutionStatus(category.value),
            error=ToolError(category=category.value, message=message, details=details),
        )

    @classmethod
    def from_error(cls, tool_name: str, exc: RelayError) -> "ToolExecutionResult":
        return cls.failure(tool_name, exc.category, exc.message, dict(exc.details()))

    def content(self) -> Any:
        """Payload returned to the MCP caller."""
        if self.error is None:
            return self.result
        return {
            "error": self.error.message,
            "category": self.error.category,
            "details": self.error.details,
        }
