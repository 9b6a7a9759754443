from __future__ import annotations

from typing import Any, Dict, Optional

from ...common.dispatcher import CommandDispatcher
from ...common.flags import SWITCH, TOGGLE, Flag, build_flags
from ...common.formatting import command_envelope
from ...common.validation import require_choice, require_fields

PROVIDER_TYPES = ("openshift", "vsphere", "ovirt", "openstack", "ova")
SDK_ENDPOINTS = ("vcenter", "esxi")

_CONNECTION_FLAGS = (
    Flag("url", "--url"),
    Flag("username", "--username"),
    Flag("password", "--password"),
    Flag("token", "--token"),
    Flag("cacert", "--cacert"),
    Flag("vddk_init_image", "--vddk-init-image"),
)

_CREATE_PROVIDER_FLAGS = _CONNECTION_FLAGS + (
    Flag("insecure_skip_tls", "--provider-insecure-skip-tls", SWITCH),
    Flag("sdk_endpoint", "--sdk-endpoint"),
    Flag("provider_domain_name", "--provider-domain-name"),
    Flag("provider_project_name", "--provider-project-name"),
    Flag("provider_region_name", "--provider-region-name"),
)

_PATCH_PROVIDER_FLAGS = _CONNECTION_FLAGS + (
    Flag("insecure_skip_tls", "--provider-insecure-skip-tls", TOGGLE),
)


def create_provider(
    d: CommandDispatcher,
    provider_name: str,
    provider_type: str,
    *,
    namespace: Optional[str] = None,
    **options: Any,
) -> Dict[str, Any]:
    """Create a provider. Credentials appear masked in the returned command."""
    require_fields(provider_name=provider_name, provider_type=provider_type)
    provider_type = require_choice(provider_type, PROVIDER_TYPES, field="provider_type", noun="types")
    if options.get("sdk_endpoint"):
        require_choice(options["sdk_endpoint"], SDK_ENDPOINTS, field="sdk_endpoint", noun="endpoints")

    args = ["create", "provider", provider_name, "--type", provider_type]
    args += build_flags(options, _CREATE_PROVIDER_FLAGS)
    args += d.scope_args(namespace)
    return command_envelope(d.mtv(args))


def patch_provider(
    d: CommandDispatcher,
    provider_name: str,
    *,
    namespace: Optional[str] = None,
    **options: Any,
) -> Dict[str, Any]:
    require_fields(provider_name=provider_name)
    args = ["patch", "provider", provider_name]
    args += build_flags(options, _PATCH_PROVIDER_FLAGS)
    args += d.scope_args(namespace)
    return command_envelope(d.mtv(args))
