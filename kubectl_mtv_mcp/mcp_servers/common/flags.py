"""Declarative field-to-flag tables.

Each tool lists its optional inputs as ``Flag`` rules; ``build_flags`` walks
the rules in order and emits only the flags whose value is present. The same
tables are applied to nested configuration dicts (``upload_config`` and
friends), where values of an unexpected type are ignored rather than
coerced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Collection, List, Mapping, Optional, Sequence

VALUE = "value"
SWITCH = "switch"
TOGGLE = "toggle"
NUMBER = "number"
LIST = "list"
REPEAT = "repeat"


@dataclass(frozen=True)
class Flag:
    field: str
    flag: str
    kind: str = VALUE
    only_for: Optional[Collection[str]] = None


def _number_text(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _scalar_text(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value if value.strip() else None
    if isinstance(value, (int, float)):
        return _number_text(value)
    return None


def render_spec(value: Any) -> Optional[str]:
    """Render a ``{"src": "x", "name": "y"}`` dict as virtctl's ``src:x,name:y``."""
    if isinstance(value, Mapping):
        parts = [f"{k}:{v}" for k, v in value.items() if v is not None and v != ""]
        return ",".join(parts) or None
    return _scalar_text(value)


def flag_args(rule: Flag, value: Any) -> List[str]:
    """Arguments for one rule, or an empty list when the value is absent."""
    if rule.kind == SWITCH:
        return [rule.flag] if value is True else []

    if rule.kind == TOGGLE:
        if not isinstance(value, bool):
            return []
        return [f"{rule.flag}={'true' if value else 'false'}"]

    if rule.kind == NUMBER:
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            return []
        return [rule.flag, _number_text(value)]

    if rule.kind == LIST:
        if isinstance(value, (list, tuple)):
            items = [str(v).strip() for v in value if str(v).strip()]
            return [rule.flag, ",".join(items)] if items else []
        text = _scalar_text(value)
        return [rule.flag, text] if text else []

    if rule.kind == REPEAT:
        items = value if isinstance(value, (list, tuple)) else [value]
        out: List[str] = []
        for item in items:
            text = render_spec(item)
            if text:
                out.extend([rule.flag, text])
        return out

    text = _scalar_text(value)
    return [rule.flag, text] if text else []


def build_flags(
    values: Optional[Mapping[str, Any]],
    rules: Sequence[Flag],
    *,
    operation: Optional[str] = None,
) -> List[str]:
    if not values:
        return []
    args: List[str] = []
    for rule in rules:
        if rule.only_for is not None and operation not in rule.only_for:
            continue
        args.extend(flag_args(rule, values.get(rule.field)))
    return args
