"""Per-invocation audit files.

Each successful tool call is written to ``<directory>/YYYYMMDD-HHMMSS.log``.
File names have second resolution, so two calls finishing within the same
second share a file and the later one overwrites the earlier.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Protocol

from .logging_config import get_logger
from .types import AuditRecord

logger = get_logger(__name__)

FILENAME_FORMAT = "%Y%m%d-%H%M%S"


class AuditSink(Protocol):
    """Destination for audit records."""

    def write(self, record: AuditRecord) -> None: ...


class NullAuditSink:
    """Sink that drops every record."""

    def write(self, record: AuditRecord) -> None:
        return None


class FileAuditSink:
    """Write each record to its own timestamped file under ``directory``."""

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def ensure_directory(self) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)

    def path_for(self, record: AuditRecord) -> Path:
        return self._directory / f"{record.timestamp.strftime(FILENAME_FORMAT)}.log"

    def write(self, record: AuditRecord) -> None:
        """Write ``record``; filesystem failures surface as ``OSError``.

        Characters UTF-8 cannot carry, such as lone surrogates, are written as
        backslash escapes.
        """

        self.ensure_directory()
        path = self.path_for(record)
        path.write_text(render_record(record), encoding="utf-8", errors="backslashreplace")
        logger.info("audit_log_saved", path=str(path))


def render_record(record: AuditRecord) -> str:
    header = (
        f"=== {record.operation} OPERATION "
        f"[{record.timestamp.isoformat(timespec='seconds')}] ===\n\n"
    )
    return (
        header
        + "REQUEST:\n"
        + _render_section(record.request, "request", separator="\n")
        + "RESPONSE:\n"
        + _render_section(record.response, "response")
    )


def _render_section(payload: Mapping[str, Any], label: str, separator: str = "") -> str:
    try:
        rendered = json.dumps(payload, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        return f"Error marshaling {label}: {exc}\n"
    return f"{rendered}\n{separator}"
