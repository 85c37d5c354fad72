from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

from aptos_mcp.core.audit import FileAuditSink
from aptos_mcp.core.config import AgentSettings
from aptos_mcp.mcp.handler import AptosToolHandler
from aptos_mcp.workflow.client import WorkflowClient

from helpers import AGENT_ID


@pytest.fixture
def settings(tmp_path: Path) -> AgentSettings:
    return AgentSettings(
        workflow_base_url="http://workflow.test",
        workflow_agent_id=AGENT_ID,
        audit_log_dir=str(tmp_path / "logs"),
    )


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_handler(
    settings: AgentSettings, recorded_requests: list[httpx.Request]
) -> Callable[..., AptosToolHandler]:
    """Build a handler whose HTTP traffic is answered by ``responder``."""

    def factory(
        responder: Callable[[httpx.Request], httpx.Response],
        audit_sink: Any = None,
    ) -> AptosToolHandler:
        def record(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return responder(request)

        client = WorkflowClient(settings, transport=httpx.MockTransport(record))
        if audit_sink is None:
            audit_sink = FileAuditSink(settings.audit_log_dir)
        return AptosToolHandler(
            client=client,
            audit_sink=audit_sink,
            tweak_components=settings.workflow_tweak_components,
        )

    return factory
