"""Plan commands: create, run-state changes and patches of plans and plan VMs."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ...common.dispatcher import CommandDispatcher
from ...common.errors import MissingFieldError
from ...common.flags import LIST, SWITCH, TOGGLE, Flag, build_flags
from ...common.formatting import command_envelope
from ...common.network_pairs import validate_network_pairs
from ...common.validation import require_choice, require_fields

PLAN_ACTIONS = ("start", "cancel", "cutover", "archive", "unarchive")
MIGRATION_TYPES = ("cold", "warm", "live")

_LIFECYCLE_FLAGS = (
    Flag("cutover", "--cutover", only_for=("start", "cutover")),
    Flag("vms", "--vms", LIST, only_for=("cancel",)),
)

_CREATE_PLAN_FLAGS = (
    Flag("source_provider", "--source"),
    Flag("target_provider", "--target"),
    Flag("vms", "--vms", LIST),
    Flag("network_mapping", "--network-mapping"),
    Flag("storage_mapping", "--storage-mapping"),
    Flag("network_pairs", "--network-pairs"),
    Flag("storage_pairs", "--storage-pairs"),
    Flag("target_namespace", "--target-namespace"),
    Flag("migration_type", "--migration-type"),
    Flag("transfer_network", "--transfer-network"),
    Flag("preserve_static_ips", "--preserve-static-ips", SWITCH),
    Flag("description", "--description"),
    Flag("pvc_name_template", "--pvc-name-template"),
    Flag("volume_name_template", "--volume-name-template"),
    Flag("network_name_template", "--network-name-template"),
    Flag("default_target_network", "--default-target-network"),
    Flag("default_target_storage_class", "--default-target-storage-class"),
    Flag("target_labels", "--target-labels", LIST),
    Flag("target_node_selector", "--target-node-selector", LIST),
    Flag("use_compatibility_mode", "--use-compatibility-mode", SWITCH),
    Flag("inventory_url", "-i"),
)

_PATCH_PLAN_FLAGS = (
    Flag("transfer_network", "--transfer-network"),
    Flag("migration_type", "--migration-type"),
    Flag("target_namespace", "--target-namespace"),
    Flag("target_labels", "--target-labels", LIST),
    Flag("target_node_selector", "--target-node-selector", LIST),
    Flag("description", "--description"),
    Flag("pvc_name_template", "--pvc-name-template"),
    Flag("volume_name_template", "--volume-name-template"),
    Flag("network_name_template", "--network-name-template"),
    Flag("preserve_static_ips", "--preserve-static-ips", TOGGLE),
    Flag("use_compatibility_mode", "--use-compatibility-mode", TOGGLE),
    Flag("install_legacy_drivers", "--install-legacy-drivers", TOGGLE),
    Flag("migrate_shared_disks", "--migrate-shared-disks", TOGGLE),
    Flag("archived", "--archived", TOGGLE),
)

_PATCH_PLAN_VM_FLAGS = (
    Flag("target_name", "--target-name"),
    Flag("root_disk", "--root-disk"),
    Flag("instance_type", "--instance-type"),
    Flag("pvc_name_template", "--pvc-name-template"),
    Flag("volume_name_template", "--volume-name-template"),
    Flag("network_name_template", "--network-name-template"),
    Flag("luks_secret", "--luks-secret"),
    Flag("add_pre_hook", "--add-pre-hook"),
    Flag("add_post_hook", "--add-post-hook"),
    Flag("remove_hook", "--remove-hook"),
    Flag("clear_hooks", "--clear-hooks", SWITCH),
)


def manage_plan_lifecycle(
    d: CommandDispatcher,
    plan_name: str,
    action: str,
    *,
    namespace: Optional[str] = None,
    cutover: Optional[str] = None,
    vms: Optional[Any] = None,
) -> Dict[str, Any]:
    """Start, cancel, cut over, archive or unarchive a plan.

    ``cutover`` is an ISO-8601 time for warm migrations; ``vms`` names the
    VMs to cancel and is required for ``cancel``.
    """
    require_fields(plan_name=plan_name, action=action)
    action = require_choice(action, PLAN_ACTIONS, field="action", noun="actions")
    if action == "cancel" and not vms:
        raise MissingFieldError("vms", "for cancel")

    args = [action, "plan", plan_name]
    args += build_flags({"cutover": cutover, "vms": vms}, _LIFECYCLE_FLAGS, operation=action)
    args += d.scope_args(namespace)
    return command_envelope(d.mtv(args))


def create_plan(d: CommandDispatcher, plan_name: str, source_provider: str, *, namespace: Optional[str] = None, **options: Any) -> Dict[str, Any]:
    require_fields(plan_name=plan_name, source_provider=source_provider)
    migration_type = options.get("migration_type")
    if migration_type:
        require_choice(migration_type, MIGRATION_TYPES, field="migration_type", noun="types")
    validate_network_pairs(options.get("network_pairs") or "")

    args = ["create", "plan", plan_name]
    args += build_flags({"source_provider": source_provider, **options}, _CREATE_PLAN_FLAGS)
    args += d.scope_args(namespace)
    return command_envelope(d.mtv(args))


def build_patch_plan_args(plan_name: str, values: Dict[str, Any]) -> List[str]:
    return ["patch", "plan", plan_name] + build_flags(values, _PATCH_PLAN_FLAGS)


def patch_plan(d: CommandDispatcher, plan_name: str, *, namespace: Optional[str] = None, **options: Any) -> Dict[str, Any]:
    """Patch plan settings; boolean options left as ``None`` are not touched."""
    require_fields(plan_name=plan_name)
    migration_type = options.get("migration_type")
    if migration_type:
        require_choice(migration_type, MIGRATION_TYPES, field="migration_type", noun="types")

    args = build_patch_plan_args(plan_name, options) + d.scope_args(namespace)
    return command_envelope(d.mtv(args))


def patch_plan_vm(
    d: CommandDispatcher,
    plan_name: str,
    vm_name: str,
    *,
    namespace: Optional[str] = None,
    **options: Any,
) -> Dict[str, Any]:
    require_fields(plan_name=plan_name, vm_name=vm_name)
    args = ["patch", "planvm", plan_name, vm_name]
    args += build_flags(options, _PATCH_PLAN_VM_FLAGS)
    args += d.scope_args(namespace)
    return command_envelope(d.mtv(args))
