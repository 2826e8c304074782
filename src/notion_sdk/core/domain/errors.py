"""Typed client errors.

Why a closed hierarchy:
- Callers can tell "no network" from "unparseable response" from "the service
  rejected the request" with a single `except` per case.
- Each error is raised once, where the failure happens, with the underlying
  cause attached (`source` and `__cause__`). Nothing here is retried.
"""

from __future__ import annotations

from enum import Enum

from notion_sdk.core.domain.envelope import ErrorObject


class ErrorKind(str, Enum):
    """Every way a client call can fail."""

    INVALID_API_TOKEN = "invalid_api_token"
    CLIENT_BUILD_FAILED = "client_build_failed"
    REQUEST_FAILED = "request_failed"
    RESPONSE_READ_FAILED = "response_read_failed"
    RESPONSE_PARSE_FAILED = "response_parse_failed"
    API_ERROR = "api_error"

    def is_construction_error(self) -> bool:
        return self in (ErrorKind.INVALID_API_TOKEN, ErrorKind.CLIENT_BUILD_FAILED)


class NotionError(Exception):
    """Base class for every error raised by the client."""

    kind: ErrorKind

    def __init__(self, message: str, *, source: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source

    def __str__(self) -> str:
        if self.source is None:
            return self.message
        return f"{self.message}: {self.source}"


class InvalidApiTokenError(NotionError):
    """The token cannot be sent as an HTTP header value."""

    kind = ErrorKind.INVALID_API_TOKEN


class ClientBuildError(NotionError):
    """The underlying HTTP transport could not be initialized."""

    kind = ErrorKind.CLIENT_BUILD_FAILED


class RequestFailedError(NotionError):
    """The request never produced a response (DNS, connect, TLS, timeout)."""

    kind = ErrorKind.REQUEST_FAILED


class ResponseReadError(NotionError):
    """The response body could not be read to completion."""

    kind = ErrorKind.RESPONSE_READ_FAILED


class ResponseParseError(NotionError):
    """The body is not a valid envelope (bad JSON, unknown `object` tag, schema mismatch)."""

    kind = ErrorKind.RESPONSE_PARSE_FAILED


class ApiError(NotionError):
    """The service answered with an `error` envelope."""

    kind = ErrorKind.API_ERROR

    def __init__(self, error: ErrorObject) -> None:
        super().__init__(f"Notion API error {error.status} ({error.code}): {error.message}")
        self.error = error

    def __reduce__(self):
        # Rebuild from the envelope, not from the rendered message in `args`.
        return (type(self), (self.error,))

    @property
    def status(self) -> int:
        return self.error.status

    @property
    def code(self) -> str:
        return self.error.code
