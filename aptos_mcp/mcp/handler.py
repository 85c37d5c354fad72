"""Orchestration behind the Aptos-TOOL invocation."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from ..core.audit import AuditSink, FileAuditSink, NullAuditSink
from ..core.config import AgentSettings, get_settings
from ..core.exceptions import InvalidArgument, ResponseFormatError
from ..core.logging_config import get_logger
from ..core.types import AuditRecord, ToolInvocation
from ..workflow.client import WorkflowClient
from ..workflow.extractor import extract_message_text
from ..workflow.payload import build_run_request

logger = get_logger(__name__)

APTOS_TOOL_NAME = "Aptos-TOOL"


class AptosToolHandler:
    """Forward a message to the workflow API and return its chat reply.

    Steps run in order: build the request, POST it, extract the reply text,
    then write an audit record. A failure in any of the first three ends the
    call with that error and nothing is audited. Any audit failure is logged as a
    warning and never changes the returned text.
    """

    def __init__(
        self,
        client: WorkflowClient,
        audit_sink: AuditSink,
        tweak_components: Iterable[str],
    ) -> None:
        self._client = client
        self._audit_sink = audit_sink
        self._tweak_components = tuple(tweak_components)

    async def handle(self, invocation: ToolInvocation) -> str:
        logger.info("aptos_tool_called", tool=invocation.name, arguments=dict(invocation.arguments))

        message = invocation.arguments.get("message")
        if not isinstance(message, str):
            raise InvalidArgument("message parameter is required and must be a string")

        request = build_run_request(message, self._tweak_components)
        body = await self._client.run(request)
        try:
            text = extract_message_text(body)
        except ResponseFormatError as exc:
            logger.error("workflow_response_invalid", error=str(exc))
            raise

        logger.info("aptos_tool_completed", response=text)

        self._audit(
            AuditRecord(
                operation=invocation.name,
                request={
                    "message": message,
                    "url": self._client.run_url,
                    "reqBody": request.to_json(),
                },
                response={"status": 200, "content": text},
                timestamp=datetime.now().astimezone(),
            )
        )
        return text

    def _audit(self, record: AuditRecord) -> None:
        try:
            self._audit_sink.write(record)
        except Exception as exc:  # noqa: BLE001 - audit never fails the call
            logger.warning("audit_log_failed", error_type=type(exc).__name__, error=str(exc))


def build_default_handler(settings: AgentSettings | None = None) -> AptosToolHandler:
    """Assemble a handler from settings."""

    settings = settings or get_settings()
    sink: AuditSink
    if settings.audit_enabled:
        sink = FileAuditSink(settings.audit_log_dir)
    else:
        sink = NullAuditSink()
    return AptosToolHandler(
        client=WorkflowClient(settings),
        audit_sink=sink,
        tweak_components=settings.workflow_tweak_components,
    )
