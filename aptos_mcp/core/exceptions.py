"""Custom exception hierarchy for the Aptos MCP server."""

from __future__ import annotations


class AgentError(Exception):
    """Base exception for server-level issues."""


class InvalidArgument(AgentError):
    """Raised when a tool invocation carries missing or mistyped arguments."""


class ExternalServiceError(AgentError):
    """Raised when the remote workflow API cannot produce a usable answer."""


class TransportError(ExternalServiceError):
    """Raised when the workflow API could not be reached."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"failed to send request: {cause}")
        self.cause = cause


class RemoteAPIError(ExternalServiceError):
    """Raised when the workflow API answers with a non-200 status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"API returned error (status {status_code}): {body}")
        self.status_code = status_code
        self.body = body


class ResponseFormatError(ExternalServiceError):
    """Raised when the workflow API response cannot be interpreted."""


class MalformedJSONError(ResponseFormatError):
    """Raised when the response body is not a JSON object."""


class MissingField(ResponseFormatError):
    """Raised when a segment of the expected response path is absent."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Invalid response format: missing {path}")
        self.path = path


class ShapeMismatch(ResponseFormatError):
    """Raised when a segment of the response path is not an object."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Invalid response format: {path} is not an object")
        self.path = path
