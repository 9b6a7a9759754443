from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from ...common.dispatcher import CommandDispatcher
from ...common.errors import MissingFieldError
from ...common.formatting import command_envelope
from ...common.validation import require_choice, require_fields

VOLUME_OPERATIONS = ("add", "remove", "list")


def build_volume_args(
    vm_name: str,
    operation: str,
    namespace: str,
    *,
    volume_name: str,
    persist: bool = False,
    dry_run: bool = False,
) -> List[str]:
    args = [f"{operation}volume", vm_name, "--volume-name", volume_name]
    if operation == "add" and persist:
        args.append("--persist")
    if namespace:
        args += ["-n", namespace]
    if dry_run:
        args.append("--dry-run")
    return args


def volume_management(
    d: CommandDispatcher,
    vm_name: str,
    operation: str,
    *,
    namespace: Optional[str] = None,
    volume_name: Optional[str] = None,
    persist: bool = False,
    dry_run: bool = False,
) -> Union[str, Dict[str, Any]]:
    """Hotplug volumes on a running VM, or list the VMI's volumes.

    virtctl has no list command, so ``list`` returns the VMI object from
    ``kubectl get vmi``.
    """
    require_fields(vm_name=vm_name, operation=operation)
    operation = require_choice(operation, VOLUME_OPERATIONS, field="operation", noun="operations")

    if operation == "list":
        ns = d.namespace(namespace)
        args = ["get", "vmi", vm_name]
        if ns:
            args += ["-n", ns]
        args += ["-o", "json"]
        return command_envelope(d.kubectl(args))

    if not volume_name:
        raise MissingFieldError("volume_name", f"for {operation} operation")

    args = build_volume_args(
        vm_name,
        operation,
        d.namespace(namespace),
        volume_name=volume_name,
        persist=persist,
        dry_run=dry_run,
    )
    return d.virtctl(args)
