from __future__ import annotations

import os
from typing import Collection, Optional


def env_str(name: str, default: str, *, strip: bool = True) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip() if strip else value


def env_optional_str(name: str, default: Optional[str] = None, *, strip: bool = True) -> Optional[str]:
    """Like ``env_str`` but treats an empty value as unset."""
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip() if strip else value
    return value or default


def env_int(name: str, default: int, *, minimum: Optional[int] = None) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    if minimum is not None and value < minimum:
        return default
    return value


def env_choice(name: str, default: str, choices: Collection[str]) -> str:
    """Read a lower-cased enumerated value, falling back to ``default`` when unknown."""
    value = env_str(name, default).lower()
    return value if value in choices else default
