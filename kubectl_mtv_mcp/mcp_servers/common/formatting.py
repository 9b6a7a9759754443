from __future__ import annotations

import json
from typing import Any, Dict

from .runner import ExecutionResult


def to_json_text(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False, sort_keys=False)


def load_json_or_text(text: str) -> Any:
    """Return ``text`` parsed as JSON, or ``text`` itself when it is not JSON."""
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        return text


def normalize_json_text(text: str) -> str:
    """Re-indent JSON output; anything that does not parse is returned untouched."""
    try:
        data = json.loads(text)
    except (TypeError, ValueError):
        return text
    return to_json_text(data)


def command_envelope(result: ExecutionResult) -> Dict[str, Any]:
    """Shape kubectl / kubectl-mtv output for a tool response.

    JSON stdout is returned parsed under ``data``; other output is kept as text
    under ``stdout``.
    """
    envelope: Dict[str, Any] = {
        "command": result.command_line,
        "return_value": result.returncode,
    }
    try:
        envelope["data"] = json.loads(result.stdout)
    except (TypeError, ValueError):
        envelope["stdout"] = result.stdout
    return envelope
