from __future__ import annotations

import shlex
from typing import Any, Dict, List, Optional

from ...common.dispatcher import CommandDispatcher
from ...common.flags import NUMBER, SWITCH, VALUE, Flag, build_flags
from ...common.validation import require_choice, require_fields

LIFECYCLE_OPERATIONS = ("start", "stop", "restart", "pause", "unpause", "migrate", "soft-reboot")

_LIFECYCLE_FLAGS = (
    Flag("grace_period", "--grace-period", NUMBER, only_for=("stop", "restart")),
    Flag("force", "--force", SWITCH, only_for=("stop", "restart")),
    Flag("node_name", "--node", VALUE, only_for=("migrate",)),
    Flag("dry_run", "--dry-run", SWITCH),
    Flag("timeout", "--timeout", VALUE),
)


def build_lifecycle_args(
    vm_name: str,
    operation: str,
    namespace: str,
    *,
    grace_period: int = 0,
    force: bool = False,
    dry_run: bool = False,
    node_name: Optional[str] = None,
    timeout: Optional[str] = None,
) -> List[str]:
    args = [operation, vm_name]
    if namespace:
        args += ["-n", namespace]
    args += build_flags(
        {
            "grace_period": grace_period,
            "force": force,
            "node_name": node_name,
            "dry_run": dry_run,
            "timeout": timeout,
        },
        _LIFECYCLE_FLAGS,
        operation=operation,
    )
    return args


def vm_lifecycle(
    d: CommandDispatcher,
    vm_name: str,
    operation: str,
    *,
    namespace: Optional[str] = None,
    grace_period: int = 0,
    force: bool = False,
    dry_run: bool = False,
    node_name: Optional[str] = None,
    timeout: Optional[str] = None,
) -> Dict[str, Any]:
    require_fields(vm_name=vm_name)
    operation = require_choice(operation, LIFECYCLE_OPERATIONS, field="operation", noun="operations")

    ns = d.namespace(namespace)
    args = build_lifecycle_args(
        vm_name,
        operation,
        ns,
        grace_period=grace_period,
        force=force,
        dry_run=dry_run,
        node_name=node_name,
        timeout=timeout,
    )
    output = d.virtctl(args)

    return {
        "status": "success",
        "message": "VM lifecycle operation completed successfully",
        "command": shlex.join([d.config.virtctl_bin, *args]),
        "output": output.strip(),
    }
