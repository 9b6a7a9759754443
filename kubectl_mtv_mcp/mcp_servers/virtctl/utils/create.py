"""Builders for ``virtctl create vm|instancetype|preference``.

``virtctl create`` prints a manifest and does not touch the cluster, so the
tools return the generated text as-is for the caller to review and apply.
"""

from __future__ import annotations

import base64
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ...common.dispatcher import CommandDispatcher
from ...common.flags import NUMBER, REPEAT, SWITCH, VALUE, Flag, build_flags
from ...common.validation import require_choice, require_fields

RUN_STRATEGIES = ("Always", "RerunOnFailure", "Manual", "Halted")
CREATE_RESOURCE_TYPES = ("instancetype", "preference")

# Keys of the ``volumes`` mapping, in the order their flags are emitted.
_VOLUME_FLAGS = (
    Flag("volume_import", "--volume-import", REPEAT),
    Flag("volume_containerdisk", "--volume-containerdisk", REPEAT),
    Flag("volume_datasource", "--volume-datasource", REPEAT),
    Flag("volume_clone_pvc", "--volume-clone-pvc", REPEAT),
    Flag("volume_pvc", "--volume-pvc", REPEAT),
    Flag("volume_blank", "--volume-blank", REPEAT),
    Flag("volume_sysprep", "--sysprep", REPEAT),
)

# virtctl spells a few volume parameters without underscores.
_VOLUME_PARAM_NAMES = {"storage_class": "storageclass", "boot_order": "bootorder"}

_CLOUD_INIT_FLAGS = (
    Flag("user", "--user"),
    Flag("ssh_key", "--ssh-key"),
    Flag("password_file", "--password-file"),
    Flag("ga_manage_ssh", "--ga-manage-ssh", SWITCH),
    Flag("user_data_base64", "--cloud-init-user-data"),
    Flag("network_data_base64", "--cloud-init-network-data"),
)

_VM_FLAGS = (
    Flag("instancetype", "--instancetype"),
    Flag("preference", "--preference"),
    Flag("run_strategy", "--run-strategy"),
    Flag("infer_instancetype", "--infer-instancetype", SWITCH),
    Flag("infer_preference", "--infer-preference", SWITCH),
    Flag("infer_instancetype_from", "--infer-instancetype-from"),
    Flag("infer_preference_from", "--infer-preference-from"),
    Flag("termination_grace_period", "--termination-grace-period", NUMBER),
    Flag("access_credentials", "--access-cred", REPEAT),
)

_RESOURCE_FLAGS = (
    Flag("cpu", "--cpu", VALUE),
    Flag("memory", "--memory", VALUE),
)


def _b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def _rename_volume_params(entries: Any) -> Any:
    if not isinstance(entries, (list, tuple)):
        entries = [entries]
    renamed = []
    for entry in entries:
        if isinstance(entry, Mapping):
            entry = {_VOLUME_PARAM_NAMES.get(k, k): v for k, v in entry.items()}
        renamed.append(entry)
    return renamed


def volume_args(volumes: Optional[Mapping[str, Any]]) -> List[str]:
    if not volumes:
        return []
    return build_flags({k: _rename_volume_params(v) for k, v in volumes.items()}, _VOLUME_FLAGS)


def cloud_init_args(cloud_init: Optional[Mapping[str, Any]]) -> List[str]:
    """Flags for the cloud-init section; plain ``user_data`` is base64-encoded."""
    if not cloud_init:
        return []
    values: Dict[str, Any] = dict(cloud_init)
    for plain, encoded in (("user_data", "user_data_base64"), ("network_data", "network_data_base64")):
        text = values.get(plain)
        if isinstance(text, str) and text.strip() and not values.get(encoded):
            values[encoded] = _b64(text)
    return build_flags(values, _CLOUD_INIT_FLAGS)


def build_create_vm_args(
    *,
    name: Optional[str] = None,
    namespace: Optional[str] = None,
    instancetype: Optional[str] = None,
    preference: Optional[str] = None,
    run_strategy: Optional[str] = None,
    volumes: Optional[Mapping[str, Any]] = None,
    cloud_init: Optional[Mapping[str, Any]] = None,
    infer_instancetype: bool = False,
    infer_preference: bool = False,
    infer_instancetype_from: Optional[str] = None,
    infer_preference_from: Optional[str] = None,
    access_credentials: Optional[Sequence[Mapping[str, Any]]] = None,
    termination_grace_period: int = 0,
) -> List[str]:
    args = ["create", "vm"]
    if name:
        args += ["--name", name]
    if namespace:
        args += ["-n", namespace]
    args += build_flags(
        {
            "instancetype": instancetype,
            "preference": preference,
            "run_strategy": run_strategy,
            "infer_instancetype": infer_instancetype,
            "infer_preference": infer_preference,
            "infer_instancetype_from": infer_instancetype_from,
            "infer_preference_from": infer_preference_from,
            "termination_grace_period": termination_grace_period,
            "access_credentials": list(access_credentials or []),
        },
        _VM_FLAGS,
    )
    args += volume_args(volumes)
    args += cloud_init_args(cloud_init)
    return args


def create_vm_advanced(d: CommandDispatcher, *, namespace: Optional[str] = None, **options: Any) -> str:
    """Generate a VirtualMachine manifest with ``virtctl create vm``."""
    if options.get("run_strategy"):
        require_choice(options["run_strategy"], RUN_STRATEGIES, field="run_strategy", noun="strategies")
    args = build_create_vm_args(namespace=d.namespace(namespace), **options)
    return d.virtctl(args)


def create_resources(
    d: CommandDispatcher,
    resource_type: str,
    name: str,
    *,
    namespaced: bool = False,
    namespace: Optional[str] = None,
    cpu: Optional[Any] = None,
    memory: Optional[str] = None,
) -> str:
    """Generate an instancetype or preference manifest.

    Cluster-wide kinds are produced unless ``namespaced`` is set; only then
    is the namespace resolved and passed.
    """
    resource_type = require_choice(resource_type, CREATE_RESOURCE_TYPES, field="resource_type", noun="types")
    require_fields(name=name)

    args = ["create", resource_type, "--name", name]
    if namespaced:
        args.append("--namespaced")
        ns = d.namespace(namespace)
        if ns:
            args += ["-n", ns]
    if resource_type == "instancetype":
        args += build_flags({"cpu": cpu, "memory": memory}, _RESOURCE_FLAGS)
    return d.virtctl(args)
