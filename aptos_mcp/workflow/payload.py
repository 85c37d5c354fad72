"""Request body for the workflow run endpoint."""

from __future__ import annotations

from typing import Any, Iterable, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..core.config import DEFAULT_TWEAK_COMPONENTS


class WorkflowRunRequest(BaseModel):
    """JSON body accepted by ``POST /api/v1/run/{agent_id}``."""

    model_config = ConfigDict(frozen=True)

    input_value: str = Field(..., description="Caller message, forwarded verbatim")
    output_type: Literal["chat"] = "chat"
    input_type: Literal["chat"] = "chat"
    tweaks: dict[str, dict[str, Any]] = Field(
        default_factory=dict,
        description="Per-component overrides, passed through untouched",
    )

    def to_json(self) -> str:
        return self.model_dump_json()


def build_run_request(
    message: str,
    tweak_components: Iterable[str] = DEFAULT_TWEAK_COMPONENTS,
) -> WorkflowRunRequest:
    """Wrap ``message`` in a chat run request with an empty tweak per component."""

    return WorkflowRunRequest(
        input_value=message,
        tweaks={component: {} for component in tweak_components},
    )
