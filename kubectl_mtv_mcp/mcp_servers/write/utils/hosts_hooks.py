"""Creation of migration hosts (vSphere ESXi endpoints) and migration hooks."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ...common.dispatcher import CommandDispatcher
from ...common.flags import NUMBER, SWITCH, Flag, build_flags
from ...common.formatting import command_envelope
from ...common.validation import require_fields

_HOST_FLAGS = (
    Flag("provider", "--provider"),
    Flag("username", "--username"),
    Flag("password", "--password"),
    Flag("existing_secret", "--existing-secret"),
    Flag("ip_address", "--ip-address"),
    Flag("network_adapter", "--network-adapter"),
    Flag("host_insecure_skip_tls", "--host-insecure-skip-tls", SWITCH),
    Flag("cacert", "--cacert"),
    Flag("inventory_url", "-i"),
)

_HOOK_FLAGS = (
    Flag("image", "--image"),
    Flag("playbook", "--playbook"),
    Flag("service_account", "--service-account"),
    Flag("deadline", "--deadline", NUMBER),
)


def create_host(
    d: CommandDispatcher,
    host_id: str,
    provider: str,
    *,
    namespace: Optional[str] = None,
    **options: Any,
) -> Dict[str, Any]:
    require_fields(host_id=host_id, provider=provider)
    args = ["create", "host", host_id]
    args += build_flags({"provider": provider, **options}, _HOST_FLAGS)
    args += d.scope_args(namespace)
    return command_envelope(d.mtv(args))


def create_hook(
    d: CommandDispatcher,
    hook_name: str,
    image: str,
    *,
    namespace: Optional[str] = None,
    playbook: Optional[str] = None,
    service_account: Optional[str] = None,
    deadline: Optional[int] = None,
) -> Dict[str, Any]:
    """Create a hook. ``playbook`` is an Ansible playbook, passed through as given."""
    require_fields(hook_name=hook_name, image=image)
    args = ["create", "hook", hook_name]
    args += build_flags(
        {"image": image, "playbook": playbook, "service_account": service_account, "deadline": deadline},
        _HOOK_FLAGS,
    )
    args += d.scope_args(namespace)
    return command_envelope(d.mtv(args))
