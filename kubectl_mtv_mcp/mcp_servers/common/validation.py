from __future__ import annotations

from typing import Any, Optional, Sequence

from .errors import InvalidChoiceError, MissingFieldError


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_fields(**fields: Any) -> None:
    """Fail on the first empty field, in the order given."""
    for name, value in fields.items():
        if _is_empty(value):
            raise MissingFieldError(name)


def require_choice(
    value: Optional[str],
    choices: Sequence[str],
    *,
    field: str,
    noun: str = "values",
    default: Optional[str] = None,
) -> str:
    """Return ``value`` (or ``default`` when empty) if it is one of ``choices``."""
    if _is_empty(value) and default is not None:
        return default
    if value not in choices:
        raise InvalidChoiceError(field, value if value is not None else "", choices, noun=noun)
    return value
