"""Error types raised by the command-translation layer.

Two families exist:

- ``ValidationError``: the tool input was rejected before any process was
  spawned (missing field, unknown enum literal, duplicate network target).
- ``ExecutionError``: the external command could not be started, exited
  non-zero, or was killed on timeout. Each subclass carries a ``kind`` tag so
  callers can branch without matching on message text; the message itself
  keeps the ``"<binary> error: <stderr>"`` / ``"<binary> command failed: ..."``
  shape.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence


class MTVToolError(RuntimeError):
    pass


class ValidationError(MTVToolError):
    pass


class MissingFieldError(ValidationError):
    def __init__(self, field: str, detail: Optional[str] = None) -> None:
        self.field = field
        message = f"{field} is required"
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)


class InvalidChoiceError(ValidationError):
    def __init__(self, field: str, value: Any, choices: Sequence[str], noun: str = "values") -> None:
        self.field = field
        self.value = value
        self.choices = list(choices)
        super().__init__(f"invalid {field}: {value}. Valid {noun}: {', '.join(self.choices)}")


class UnsupportedOperationError(ValidationError):
    pass


class DuplicateNetworkTargetError(ValidationError):
    """Two network sources were mapped onto the same exclusive target.

    ``str(exc)`` is the JSON payload so it can be handed back to a client
    verbatim.
    """

    def __init__(self, target: str, sources: Sequence[str] = ()) -> None:
        self.target = target
        self.sources = list(sources)
        super().__init__(json.dumps(self.payload))

    @property
    def payload(self) -> Dict[str, Any]:
        if self.target == "default":
            message = "only one source network can be mapped to the default (pod) network"
        else:
            message = f"only one source network can be mapped to target '{self.target}'"
        return {
            "error": "validation_error",
            "type": "duplicate_network_target",
            "target": self.target,
            "message": message,
        }


class ExecutionError(MTVToolError):
    kind = "failed"

    def __init__(self, binary: str, command: List[str], cause: str, stderr: str = "") -> None:
        self.binary = binary
        self.command = list(command)
        self.cause = cause
        self.stderr = stderr
        if stderr.strip():
            message = f"{binary} error: {stderr}"
        else:
            message = f"{binary} command failed: {cause}"
        super().__init__(message)


class CommandNotFoundError(ExecutionError):
    kind = "not_found"


class CommandTimeoutError(ExecutionError):
    kind = "timeout"

    def __init__(self, binary: str, command: List[str], timeout: float, stderr: str = "") -> None:
        self.timeout = timeout
        super().__init__(binary, command, f"timed out after {timeout:g}s", stderr=stderr)


class NonZeroExitError(ExecutionError):
    kind = "non_zero_exit"

    def __init__(self, binary: str, command: List[str], returncode: int, stderr: str = "") -> None:
        self.returncode = returncode
        super().__init__(binary, command, f"exit status {returncode}", stderr=stderr)
