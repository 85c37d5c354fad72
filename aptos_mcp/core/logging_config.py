"""Structlog logging configuration with plain-text output on stderr.

stdout is reserved for the stdio MCP transport, so every handler configured
here writes to stderr or to the optional log file.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import structlog
from structlog.types import Processor

from .config import AgentSettings, get_settings

_CONFIGURED = False

_PRE_CHAIN: list[Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def render_plain_text(_: Any, event_name: str, event_dict: dict[str, Any]) -> str:
    """Render an event as ``timestamp [LEVEL] logger: event key=value``."""

    timestamp = event_dict.pop("timestamp", None) or datetime.now(tz=timezone.utc).isoformat()
    level = str(event_dict.pop("level", event_name)).upper()
    logger_name = event_dict.pop("logger", None)
    event = event_dict.pop("event", "")

    line = [timestamp, f"[{level}]"]
    if logger_name:
        line.append(f"{logger_name}:")
    line.append(str(event))
    line.extend(f"{key}={value}" for key, value in event_dict.items() if value is not None)
    return " ".join(line)


def build_handlers(settings: AgentSettings) -> list[logging.Handler]:
    """stderr handler plus a file handler when ``log_file`` is set."""

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_PRE_CHAIN,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            render_plain_text,
        ],
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    log_file = (settings.log_file or "").strip()
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(settings.log_level)
    return handlers


def configure_logging() -> None:
    """Configure application-wide logging once per process."""

    global _CONFIGURED
    if _CONFIGURED and logging.getLogger().handlers:
        return

    settings = get_settings()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_PRE_CHAIN,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(handlers=build_handlers(settings), level=settings.log_level)

    # httpx logs every request at INFO; the workflow client already does.
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    _CONFIGURED = True
    structlog.get_logger(__name__).info(
        "logging_configured",
        env=settings.app_env,
        level=settings.log_level,
        log_file=settings.log_file or "stderr-only",
        workflow_base_url=str(settings.workflow_base_url),
        audit_log_dir=settings.audit_log_dir if settings.audit_enabled else "disabled",
    )


def get_logger(*args: Any, **kwargs: Any) -> structlog.stdlib.BoundLogger:
    """Return a configured structlog logger."""

    configure_logging()
    return structlog.get_logger(*args, **kwargs)
