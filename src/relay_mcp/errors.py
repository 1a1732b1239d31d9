"""Structured errors raised by the Relay API client and tool validators."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar


class ErrorCategory(str, Enum):
    """Category reported to callers for a failed tool invocation."""

    VALIDATION = "validation_error"
    CONNECTION = "connection_error"
    API = "api_error"
    NOT_FOUND = "not_found"
    UNEXPECTED = "unexpected_error"


@dataclass
class RelayError(RuntimeError):
    """Unclassified failure talking to the Relay API."""

    message: str

    category: ClassVar[ErrorCategory] = ErrorCategory.UNEXPECTED

    def details(self) -> Mapping[str, Any]:
        return {"message": self.message, "type": type(self).__name__}

    def __str__(self) -> str:
        return f"{type(self).__name__}(message={self.message})"


@dataclass
class RelayAPIError(RelayError):
    """Relay API answered with a non-success HTTP status."""

    status_code: int
    response_body: Any = None
    request_body: Any = None

    category: ClassVar[ErrorCategory] = ErrorCategory.API

    def details(self) -> Mapping[str, Any]:
        return {
            "statusCode": self.status_code,
            "response": self.response_body,
            "request": self.request_body,
        }

    def __str__(self) -> str:
        return f"RelayAPIError(status={self.status_code}, message={self.message})"


@dataclass
class RelayConnectionError(RelayError):
    """No usable response was received: timeout, DNS failure, refused connection."""

    cause: str | None = None

    category: ClassVar[ErrorCategory] = ErrorCategory.CONNECTION

    def details(self) -> Mapping[str, Any]:
        return {"message": self.message, "cause": self.cause}


@dataclass
class FieldError:
    """A single violated field in a tool payload."""

    path: str
    message: str


@dataclass
class RelayValidationError(RelayError):
    """Tool arguments do not match the operation contract."""

    field_errors: list[FieldError] = field(default_factory=list)

    category: ClassVar[ErrorCategory] = ErrorCategory.VALIDATION

    def details(self) -> Mapping[str, Any]:
        return {
            "fieldErrors": [{"path": err.path, "message": err.message} for err in self.field_errors]
        }
