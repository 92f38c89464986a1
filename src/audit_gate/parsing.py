"""Extract the JSON report from raw generator text."""

from __future__ import annotations

import json
import logging
from typing import Any

from audit_gate.exceptions import JSONParseError

log = logging.getLogger(__name__)


def _strip_fence(content: str) -> str:
    start = content.find("```json")
    if start != -1:
        start += len("```json")
    else:
        start = content.find("```")
        if start == -1:
            return content.strip()
        start += 3
    end = content.rfind("```")
    if end < start:
        end = len(content)
    return content[start:end].strip()


def extract_json(content: str) -> Any:
    """Parse JSON from generator output, tolerating a surrounding code fence.

    Raises ``JSONParseError`` instead of guessing: a report that cannot be
    parsed never reaches the gate.
    """
    json_str = _strip_fence(content)
    if not json_str:
        raise JSONParseError("Generator output is empty", raw_response=content)

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as exc:
        log.error("Failed to parse JSON from generator output: %s", exc)
        raise JSONParseError(
            f"Generator output is not valid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})",
            raw_response=content,
        ) from exc
