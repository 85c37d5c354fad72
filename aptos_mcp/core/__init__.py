"""Settings, logging, errors and audit sinks shared across the server."""

from .audit import AuditSink, FileAuditSink, NullAuditSink
from .config import AgentSettings, get_settings
from .exceptions import AgentError, ExternalServiceError, InvalidArgument
from .logging_config import configure_logging, get_logger

__all__ = [
    "AgentError",
    "AgentSettings",
    "AuditSink",
    "ExternalServiceError",
    "FileAuditSink",
    "InvalidArgument",
    "NullAuditSink",
    "configure_logging",
    "get_logger",
    "get_settings",
]
