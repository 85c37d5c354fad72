"""Async client for the remote workflow run API."""

from __future__ import annotations

import httpx

from ..core.config import AgentSettings, get_settings
from ..core.exceptions import RemoteAPIError, TransportError
from ..core.http_client import async_http_client
from ..core.logging_config import get_logger
from .payload import WorkflowRunRequest

logger = get_logger(__name__)


class WorkflowClient:
    """Issue a single non-streaming run request per call."""

    def __init__(
        self,
        settings: AgentSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = settings or get_settings()
        base_url = str(settings.workflow_base_url).rstrip("/")
        self._run_url = f"{base_url}/api/v1/run/{settings.workflow_agent_id}?stream=false"
        self._timeout = settings.workflow_timeout
        self._transport = transport

    @property
    def run_url(self) -> str:
        return self._run_url

    async def run(self, request: WorkflowRunRequest) -> bytes:
        """POST ``request`` and return the raw body of a 200 response.

        Raises:
            TransportError: the request never produced a response.
            RemoteAPIError: any status other than 200; the body is kept as text.
        """

        logger.info("workflow_request_sent", url=self._run_url)
        try:
            async with async_http_client(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self._run_url,
                    content=request.to_json(),
                    headers={"Content-Type": "application/json"},
                )
        except httpx.HTTPError as exc:
            logger.error("workflow_request_failed", url=self._run_url, error=str(exc))
            raise TransportError(exc) from exc

        logger.info("workflow_response_received", status_code=response.status_code)
        if response.status_code != httpx.codes.OK:
            raise RemoteAPIError(response.status_code, response.text)

        return response.content
