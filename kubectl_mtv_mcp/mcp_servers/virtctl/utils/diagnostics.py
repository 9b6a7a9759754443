from __future__ import annotations

from typing import Optional

from ...common.dispatcher import CommandDispatcher
from ...common.errors import MissingFieldError
from ...common.formatting import normalize_json_text
from ...common.validation import require_choice

DIAGNOSTIC_TYPES = ("guestosinfo", "fslist", "userlist", "version")


def diagnostics(
    d: CommandDispatcher,
    diagnostic_type: str,
    *,
    vm_name: Optional[str] = None,
    namespace: Optional[str] = None,
) -> str:
    """Query guest-agent data (or the virtctl version) and pretty-print JSON output."""
    diagnostic_type = require_choice(diagnostic_type, DIAGNOSTIC_TYPES, field="diagnostic_type", noun="types")

    if diagnostic_type == "version":
        args = ["version"]
    else:
        if not vm_name:
            raise MissingFieldError("vm_name", f"for {diagnostic_type}")
        args = [diagnostic_type, vm_name]
        ns = d.namespace(namespace)
        if ns:
            args += ["-n", ns]

    return normalize_json_text(d.virtctl(args))
