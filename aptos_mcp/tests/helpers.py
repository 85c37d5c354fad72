"""Shared test helpers for building workflow responses."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx

AGENT_ID = "test-agent"


def valid_document(text: Any) -> dict[str, Any]:
    """Smallest workflow response carrying ``text`` at the reply path."""
    return {"outputs": [{"outputs": [{"results": {"message": {"text": text}}}]}]}


def reply_with(text: str) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(200, content=json.dumps(valid_document(text)))
