"""Image upload/export and disk inspection through virtctl.

Each operation takes its positional arguments from the top-level inputs and
its optional flags from a nested ``*_config`` dict. Config values of the
wrong type (``"yes"`` for a switch, say) are ignored.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from ...common.dispatcher import CommandDispatcher
from ...common.flags import SWITCH, Flag, build_flags
from ...common.validation import require_choice, require_fields

IMAGE_OPERATIONS = ("upload", "export", "guestfs", "memory-dump")
DEFAULT_EXPORT_ACTION = "create"

UPLOAD_FLAGS = (
    Flag("access_mode", "--access-mode"),
    Flag("volume_mode", "--volume-mode"),
    Flag("insecure", "--insecure", SWITCH),
    Flag("force_bind", "--force-bind", SWITCH),
    Flag("no_create", "--no-create", SWITCH),
    Flag("block_volume", "--block-volume", SWITCH),
    Flag("uploadproxy_url", "--uploadproxy-url"),
)

EXPORT_FLAGS = (
    Flag("output", "--output"),
    Flag("manifest", "--manifest", SWITCH),
    Flag("pvc", "--pvc"),
    Flag("ttl", "--ttl"),
    Flag("port", "--port"),
)

GUESTFS_FLAGS = (
    Flag("kvm", "--kvm", SWITCH),
    Flag("pull_method", "--pull-method"),
    Flag("root_disk_size", "--root-disk-size"),
)

MEMORY_DUMP_FLAGS = (
    Flag("claim_name", "--claim-name"),
    Flag("create_claim", "--create-claim", SWITCH),
    Flag("volume_mode", "--volume-mode"),
    Flag("access_mode", "--access-mode"),
    Flag("storage_class", "--storage-class"),
)


def upload_args(
    pvc_name: Optional[str],
    image_path: Optional[str],
    *,
    size: Optional[str] = None,
    storage_class: Optional[str] = None,
    upload_config: Optional[Mapping[str, Any]] = None,
) -> List[str]:
    require_fields(pvc_name=pvc_name, image_path=image_path)
    args = ["image-upload", pvc_name, "--image-path", image_path]
    if size:
        args += ["--size", size]
    if storage_class:
        args += ["--storage-class", storage_class]
    return args + build_flags(upload_config, UPLOAD_FLAGS)


def export_args(vm_name: Optional[str], export_config: Optional[Mapping[str, Any]] = None) -> List[str]:
    require_fields(vm_name=vm_name)
    action = (export_config or {}).get("action")
    if not isinstance(action, str) or not action.strip():
        action = DEFAULT_EXPORT_ACTION
    return ["vmexport", action, vm_name] + build_flags(export_config, EXPORT_FLAGS)


def guestfs_args(pvc_name: Optional[str], guestfs_config: Optional[Mapping[str, Any]] = None) -> List[str]:
    require_fields(pvc_name=pvc_name)
    return ["guestfs", pvc_name] + build_flags(guestfs_config, GUESTFS_FLAGS)


def memory_dump_args(vm_name: Optional[str], memory_dump_config: Optional[Mapping[str, Any]] = None) -> List[str]:
    require_fields(vm_name=vm_name)
    return ["memory-dump", "get", vm_name] + build_flags(memory_dump_config, MEMORY_DUMP_FLAGS)


def image_operations(
    d: CommandDispatcher,
    operation: str,
    *,
    vm_name: Optional[str] = None,
    namespace: Optional[str] = None,
    image_path: Optional[str] = None,
    pvc_name: Optional[str] = None,
    size: Optional[str] = None,
    storage_class: Optional[str] = None,
    upload_config: Optional[Mapping[str, Any]] = None,
    guestfs_config: Optional[Mapping[str, Any]] = None,
    memory_dump_config: Optional[Mapping[str, Any]] = None,
    export_config: Optional[Mapping[str, Any]] = None,
) -> str:
    operation = require_choice(operation, IMAGE_OPERATIONS, field="operation", noun="operations")

    if operation == "upload":
        args = upload_args(pvc_name, image_path, size=size, storage_class=storage_class, upload_config=upload_config)
    elif operation == "export":
        args = export_args(vm_name, export_config)
    elif operation == "guestfs":
        args = guestfs_args(pvc_name, guestfs_config)
    else:
        args = memory_dump_args(vm_name, memory_dump_config)

    ns = d.namespace(namespace)
    if ns:
        args += ["-n", ns]
    return d.virtctl(args)
