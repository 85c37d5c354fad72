"""Pull the chat reply out of a workflow run response.

The workflow API nests its answer at
``outputs[0].outputs[0].results.message.text``. Each step below checks one
segment of that path and names the segment when it does not match.
"""

from __future__ import annotations

import json
from typing import Any

from ..core.exceptions import MalformedJSONError, MissingField, ShapeMismatch

MESSAGE_TEXT_PATH = "outputs[0].outputs[0].results.message.text"


def extract_message_text(body: bytes | str) -> str:
    try:
        document = json.loads(body)
    except ValueError as exc:
        raise MalformedJSONError(f"Failed to parse response: {exc}") from exc
    if not isinstance(document, dict):
        raise MalformedJSONError(
            f"Failed to parse response: expected a JSON object, got {type(document).__name__}"
        )

    outer = _first_object(document, "outputs", "outputs")
    inner = _first_object(outer, "outputs", "outputs[0].outputs")
    results = _object_field(inner, "results", "outputs[0].outputs[0].results")
    message = _object_field(results, "message", "outputs[0].outputs[0].results.message")

    text = message.get("text")
    if not isinstance(text, str):
        raise MissingField(MESSAGE_TEXT_PATH)
    return text


def _first_object(container: dict[str, Any], key: str, path: str) -> dict[str, Any]:
    items = container.get(key)
    if not isinstance(items, list) or not items:
        raise MissingField(path)
    first = items[0]
    if not isinstance(first, dict):
        raise ShapeMismatch(f"{path}[0]")
    return first


def _object_field(container: dict[str, Any], key: str, path: str) -> dict[str, Any]:
    value = container.get(key)
    if not isinstance(value, dict):
        raise MissingField(path)
    return value
