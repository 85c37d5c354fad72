"""Shared type definitions."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class ToolInvocation:
    """A single request to run a named tool with its raw arguments."""

    name: str
    arguments: Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class AuditRecord:
    """Request/response pair captured for one successful tool call."""

    operation: str
    request: Mapping[str, Any]
    response: Mapping[str, Any]
    timestamp: datetime
