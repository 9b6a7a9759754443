"""Shared command-translation helpers used by every server.

- `runner`: subprocess execution with timeout + failure classification
- `namespace`: active-context namespace lookup
- `formatting`: JSON normalization and response envelopes
- `network_pairs`: duplicate-target validation for network mappings
- `flags` / `validation`: argument vector construction and input checks
- `dispatcher`: the object tool functions call into
- `serving`: FastMCP transport selection
"""

from .dispatcher import CommandDispatcher
from .errors import (
    CommandNotFoundError,
    CommandTimeoutError,
    DuplicateNetworkTargetError,
    ExecutionError,
    InvalidChoiceError,
    MissingFieldError,
    MTVToolError,
    NonZeroExitError,
    UnsupportedOperationError,
    ValidationError,
)
from .runner import CommandConfig, ExecutionResult, ProcessRunner

__all__ = [
    "CommandConfig",
    "CommandDispatcher",
    "CommandNotFoundError",
    "CommandTimeoutError",
    "DuplicateNetworkTargetError",
    "ExecutionError",
    "ExecutionResult",
    "InvalidChoiceError",
    "MissingFieldError",
    "MTVToolError",
    "NonZeroExitError",
    "ProcessRunner",
    "UnsupportedOperationError",
    "ValidationError",
]
