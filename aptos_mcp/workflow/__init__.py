"""Remote workflow API: request body, HTTP client and response extraction."""

from .client import WorkflowClient
from .extractor import extract_message_text
from .payload import WorkflowRunRequest, build_run_request

__all__ = [
    "WorkflowClient",
    "WorkflowRunRequest",
    "build_run_request",
    "extract_message_text",
]
