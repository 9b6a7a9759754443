from __future__ import annotations

from typing import Any, Dict, List, Optional

from ...common.dispatcher import CommandDispatcher
from ...common.formatting import command_envelope
from ...common.validation import require_choice

STORAGE_RESOURCE_TYPES = ("pvc", "datavolume", "all")

# Labels MTV puts on the PVCs and DataVolumes it creates for a migration.
PLAN_LABEL = "plan"
MIGRATION_LABEL = "migration"
VM_LABEL = "vmID"


def migration_selector(
    *,
    plan_id: Optional[str] = None,
    migration_id: Optional[str] = None,
    vm_id: Optional[str] = None,
    label_selector: Optional[str] = None,
) -> str:
    terms: List[str] = []
    for label, value in ((PLAN_LABEL, plan_id), (MIGRATION_LABEL, migration_id), (VM_LABEL, vm_id)):
        if value:
            terms.append(f"{label}={value}")
    if label_selector:
        terms.append(label_selector)
    return ",".join(terms)


def get_migration_storage(
    d: CommandDispatcher,
    *,
    resource_type: Optional[str] = None,
    namespace: Optional[str] = None,
    all_namespaces: bool = False,
    plan_id: Optional[str] = None,
    migration_id: Optional[str] = None,
    vm_id: Optional[str] = None,
    label_selector: Optional[str] = None,
) -> Dict[str, Any]:
    """List the PVCs and/or DataVolumes created for a migration.

    ``plan_id``/``migration_id``/``vm_id`` are UIDs and are combined with any
    extra ``label_selector``.
    """
    resource_type = require_choice(resource_type, STORAGE_RESOURCE_TYPES, field="resource_type", noun="types", default="all")
    kinds = "pvc,datavolume" if resource_type == "all" else resource_type

    args = ["get", kinds]
    args += d.scope_args(namespace, all_namespaces)
    selector = migration_selector(plan_id=plan_id, migration_id=migration_id, vm_id=vm_id, label_selector=label_selector)
    if selector:
        args += ["-l", selector]
    args += ["-o", "json"]
    return command_envelope(d.kubectl(args))
