from __future__ import annotations

from typing import Any, Dict, Optional

from ...common.dispatcher import CommandDispatcher
from ...common.errors import MissingFieldError
from ...common.formatting import command_envelope
from ...common.validation import require_choice

DELETABLE_TYPES = ("provider", "plan", "host", "hook")


def delete_resource(
    d: CommandDispatcher,
    resource_type: str,
    *,
    name: Optional[str] = None,
    namespace: Optional[str] = None,
    all_resources: bool = False,
    skip_archive: bool = False,
) -> Dict[str, Any]:
    """Delete one named resource, or every resource of the type with ``all_resources``."""
    resource_type = require_choice(resource_type, DELETABLE_TYPES, field="resource_type", noun="types")

    args = ["delete", resource_type]
    if all_resources:
        args.append("--all")
    elif name:
        args.append(name)
    else:
        raise MissingFieldError("name", "unless all_resources is set")

    if resource_type == "plan" and skip_archive:
        args.append("--skip-archive")
    args += d.scope_args(namespace)
    return command_envelope(d.mtv(args))
