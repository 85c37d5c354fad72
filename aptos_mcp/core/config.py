"""Configuration management for the Aptos MCP server."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_REPO_ROOT = Path(__file__).resolve().parents[2]
_PACKAGE_DIR = Path(__file__).resolve().parents[1]
# Repository .env first, then the package directory, then the working directory.
_ENV_FILE_CANDIDATES: tuple[str, ...] = (
    str(_REPO_ROOT / ".env"),
    str(_PACKAGE_DIR / ".env"),
    ".env",
)

DEFAULT_AGENT_ID = "9a248a2d-89b7-402e-9e23-2112a3083c7f"
DEFAULT_TWEAK_COMPONENTS: tuple[str, ...] = (
    "ChatInput-a18M0",
    "ParseData-UWXBP",
    "Prompt-zalIe",
    "SplitText-9kwYE",
    "ChatOutput-oFtXw",
    "Directory-aGzT0",
    "NVIDIAEmbeddingsComponent-sQTue",
    "FAISS-SAdhf",
    "NVIDIAEmbeddingsComponent-GMjQV",
    "FAISS-wKFtX",
    "NVIDIAModelComponent-0s6HX",
    "OpenAIModel-gJpk6",
)


class AgentSettings(BaseSettings):
    """Centralised configuration derived from environment variables."""

    app_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: str | None = Field(
        None,
        description="Optional log file path; unset or empty keeps logs on stderr only",
    )

    workflow_base_url: AnyHttpUrl = Field(
        "http://127.0.0.1:7860", description="Remote workflow API base URL"
    )
    workflow_agent_id: str = Field(
        DEFAULT_AGENT_ID, description="Flow identifier appended to /api/v1/run/"
    )
    workflow_timeout: float | None = Field(
        None, description="HTTP timeout in seconds; None disables the client timeout"
    )
    workflow_tweak_components: tuple[str, ...] = Field(
        DEFAULT_TWEAK_COMPONENTS,
        description="Component identifiers forwarded as empty tweaks",
    )

    audit_enabled: bool = Field(True, description="Write one audit file per tool call")
    audit_log_dir: str = Field("logs", description="Directory for audit files")

    mcp_transport: Literal["stdio", "sse"] = "stdio"
    mcp_host: str = Field("localhost", description="SSE bind host")
    mcp_port: int = Field(8282, description="SSE bind port")

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE_CANDIDATES,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> AgentSettings:
    """Return a cached AgentSettings instance."""

    return AgentSettings()

