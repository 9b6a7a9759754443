"""Read-only kubectl-mtv queries: MTV custom resources, provider inventory,
plan VM status and version information.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ...common.dispatcher import CommandDispatcher
from ...common.formatting import command_envelope
from ...common.validation import require_choice, require_fields

MTV_RESOURCE_TYPES = ("plan", "provider", "mapping", "host", "hook")


def _inventory_url_args(inventory_url: Optional[str]) -> List[str]:
    return ["-i", inventory_url] if inventory_url else []


def list_resources(
    d: CommandDispatcher,
    resource_type: str,
    *,
    namespace: Optional[str] = None,
    all_namespaces: bool = False,
    inventory_url: Optional[str] = None,
) -> Dict[str, Any]:
    resource_type = require_choice(resource_type, MTV_RESOURCE_TYPES, field="resource_type", noun="types")
    args = ["get", resource_type]
    args += d.scope_args(namespace, all_namespaces)
    args += _inventory_url_args(inventory_url)
    args += ["-o", "json"]
    return command_envelope(d.mtv(args))


def list_inventory(
    d: CommandDispatcher,
    resource_type: str,
    provider_name: str,
    *,
    namespace: Optional[str] = None,
    query: Optional[str] = None,
    inventory_url: Optional[str] = None,
) -> Dict[str, Any]:
    """Query a provider's inventory, optionally filtered with a TSL ``where`` query."""
    require_fields(resource_type=resource_type, provider_name=provider_name)
    args = ["get", "inventory", resource_type, provider_name]
    args += d.scope_args(namespace)
    if query:
        args += ["-q", query]
    args += _inventory_url_args(inventory_url)
    args += ["-o", "json"]
    return command_envelope(d.mtv(args))


def get_plan_vms(d: CommandDispatcher, plan_name: str, *, namespace: Optional[str] = None) -> Dict[str, Any]:
    require_fields(plan_name=plan_name)
    args = ["get", "plan", plan_name, "--vms"] + d.scope_args(namespace) + ["-o", "json"]
    return command_envelope(d.mtv(args))


def get_version(d: CommandDispatcher) -> Dict[str, Any]:
    return command_envelope(d.mtv(["version", "-o", "json"]))
