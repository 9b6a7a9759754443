from __future__ import annotations

from typing import Any, Dict, Optional

from ...common.dispatcher import CommandDispatcher
from ...common.errors import UnsupportedOperationError
from ...common.formatting import command_envelope
from ...common.validation import require_choice, require_fields

DATA_SOURCE_OPERATIONS = ("list", "create", "clone")


def data_source_management(
    d: CommandDispatcher,
    operation: str,
    *,
    name: Optional[str] = None,
    namespace: Optional[str] = None,
) -> Dict[str, Any]:
    require_fields(operation=operation)
    operation = require_choice(operation, DATA_SOURCE_OPERATIONS, field="operation", noun="operations")

    if operation == "create":
        raise UnsupportedOperationError(
            "create not implemented; generate a CDI DataSource manifest and apply with kubectl"
        )
    if operation == "clone":
        raise UnsupportedOperationError("clone not implemented")

    args = ["get", "datasource"]
    if name:
        args.append(name)
    ns = d.namespace(namespace)
    if ns:
        args += ["-n", ns]
    args += ["-o", "json"]
    return command_envelope(d.kubectl(args))
