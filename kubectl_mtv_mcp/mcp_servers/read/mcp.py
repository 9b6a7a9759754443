from __future__ import annotations

from typing import Any, Dict, Optional

from fastmcp import FastMCP

from ..common.dispatcher import CommandDispatcher
from ..common.runner import CommandConfig
from ..common.serving import serve
from .config import ReadMCPServerConfig
from .utils import logs, resources, storage


mcp = FastMCP("kubectl-mtv")

_DISPATCHER: Optional[CommandDispatcher] = None


def _dispatcher_from_env() -> CommandDispatcher:
    global _DISPATCHER
    if _DISPATCHER is not None:
        return _DISPATCHER

    _DISPATCHER = CommandDispatcher(CommandConfig.from_env())
    return _DISPATCHER


@mcp.tool
def list_resources(
    resource_type: str,
    namespace: Optional[str] = None,
    all_namespaces: bool = False,
    inventory_url: Optional[str] = None,
) -> Dict[str, Any]:
    """List MTV resources (plans, providers, mappings, hosts or hooks).

    Args:
        resource_type: plan, provider, mapping, host or hook
        namespace: Kubernetes namespace (default: current context namespace)
        all_namespaces: List across all namespaces
        inventory_url: Inventory service URL (auto-discovered when omitted)
    """
    return resources.list_resources(
        _dispatcher_from_env(),
        resource_type,
        namespace=namespace,
        all_namespaces=all_namespaces,
        inventory_url=inventory_url,
    )


@mcp.tool
def list_inventory(
    resource_type: str,
    provider_name: str,
    namespace: Optional[str] = None,
    query: Optional[str] = None,
    inventory_url: Optional[str] = None,
) -> Dict[str, Any]:
    """Query the inventory of a source provider.

    Args:
        resource_type: Inventory kind, e.g. vm, network, storage, host, datastore, namespace
        provider_name: Provider to query
        namespace: Namespace of the provider (default: current context namespace)
        query: TSL filter, e.g. "where name ~= 'prod-.*' and cpuCount > 4"
        inventory_url: Inventory service URL (auto-discovered when omitted)
    """
    return resources.list_inventory(
        _dispatcher_from_env(),
        resource_type,
        provider_name,
        namespace=namespace,
        query=query,
        inventory_url=inventory_url,
    )


@mcp.tool
def get_logs(
    namespace: Optional[str] = None,
    pod_name: Optional[str] = None,
    deployment: Optional[str] = None,
    container: Optional[str] = None,
    tail_lines: int = logs.DEFAULT_TAIL_LINES,
    since: Optional[str] = None,
    previous: bool = False,
    timestamps: bool = False,
) -> Dict[str, Any]:
    """Get logs from the MTV controller or any other pod.

    Args:
        namespace: Namespace (default: openshift-mtv)
        pod_name: Pod to read; overrides deployment
        deployment: Deployment to read (default: forklift-controller)
        container: Container (default: main for the controller)
        tail_lines: Number of lines from the end (default: 100)
        since: Only newer logs, e.g. 10m or 1h
        previous: Read the previous container instance
        timestamps: Prefix each line with its timestamp
    """
    return logs.get_logs(
        _dispatcher_from_env(),
        namespace=namespace,
        pod_name=pod_name,
        deployment=deployment,
        container=container,
        tail_lines=tail_lines,
        since=since,
        previous=previous,
        timestamps=timestamps,
    )


@mcp.tool
def get_migration_storage(
    resource_type: Optional[str] = None,
    namespace: Optional[str] = None,
    all_namespaces: bool = False,
    plan_id: Optional[str] = None,
    migration_id: Optional[str] = None,
    vm_id: Optional[str] = None,
    label_selector: Optional[str] = None,
) -> Dict[str, Any]:
    """List PVCs and DataVolumes created by a migration.

    Args:
        resource_type: pvc, datavolume or all (default: all)
        namespace: Target namespace of the migration (default: current context namespace)
        all_namespaces: Search every namespace
        plan_id: Plan UID
        migration_id: Migration UID
        vm_id: Source VM ID
        label_selector: Extra label selector
    """
    return storage.get_migration_storage(
        _dispatcher_from_env(),
        resource_type=resource_type,
        namespace=namespace,
        all_namespaces=all_namespaces,
        plan_id=plan_id,
        migration_id=migration_id,
        vm_id=vm_id,
        label_selector=label_selector,
    )


@mcp.tool
def get_plan_vms(plan_name: str, namespace: Optional[str] = None) -> Dict[str, Any]:
    """Get the VMs of a migration plan with their migration status.

    Args:
        plan_name: Plan name
        namespace: Plan namespace (default: current context namespace)
    """
    return resources.get_plan_vms(_dispatcher_from_env(), plan_name, namespace=namespace)


@mcp.tool
def get_version() -> Dict[str, Any]:
    """Get kubectl-mtv and MTV operator version, namespace and inventory URL."""
    return resources.get_version(_dispatcher_from_env())


def run_stdio() -> None:
    """Run the read-only server on the transport chosen by MTV_READ_MCP_TRANSPORT."""
    serve(mcp, ReadMCPServerConfig.from_env())


if __name__ == "__main__":
    run_stdio()
