from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from fastmcp import FastMCP

from ..common.dispatcher import CommandDispatcher
from ..common.runner import CommandConfig
from ..common.serving import serve
from .config import VirtctlMCPServerConfig
from .utils.cluster_resources import cluster_resources
from .utils.create import create_resources, create_vm_advanced
from .utils.data_sources import data_source_management
from .utils.diagnostics import diagnostics
from .utils.images import image_operations
from .utils.lifecycle import vm_lifecycle
from .utils.services import service_management
from .utils.volumes import volume_management


mcp = FastMCP("virtctl")

_DISPATCHER: Optional[CommandDispatcher] = None


def _dispatcher_from_env() -> CommandDispatcher:
    """Get or create the CommandDispatcher for this process."""
    global _DISPATCHER
    if _DISPATCHER is not None:
        return _DISPATCHER

    _DISPATCHER = CommandDispatcher(CommandConfig.from_env())
    return _DISPATCHER


@mcp.tool
def virtctl_vm_lifecycle(
    vm_name: str,
    operation: str,
    namespace: Optional[str] = None,
    grace_period: int = 0,
    force: bool = False,
    dry_run: bool = False,
    node_name: Optional[str] = None,
    timeout: Optional[str] = None,
) -> Dict[str, Any]:
    """Change the run state of a VirtualMachine.

    Args:
        vm_name: Name of the virtual machine
        operation: start, stop, restart, pause, unpause, migrate or soft-reboot
        namespace: Kubernetes namespace (default: current context namespace)
        grace_period: Seconds before forced termination (stop/restart only)
        force: Force the operation (stop/restart only)
        dry_run: Show what would happen without doing it
        node_name: Target node (migrate only)
        timeout: Operation timeout, e.g. 5m
    """
    return vm_lifecycle(
        _dispatcher_from_env(),
        vm_name,
        operation,
        namespace=namespace,
        grace_period=grace_period,
        force=force,
        dry_run=dry_run,
        node_name=node_name,
        timeout=timeout,
    )


@mcp.tool
def virtctl_diagnostics(
    diagnostic_type: str,
    vm_name: Optional[str] = None,
    namespace: Optional[str] = None,
) -> str:
    """Read guest-agent information from a running VM, or the virtctl version.

    Args:
        diagnostic_type: guestosinfo, fslist, userlist or version
        vm_name: Name of the virtual machine (required unless diagnostic_type is version)
        namespace: Kubernetes namespace (default: current context namespace)
    """
    return diagnostics(_dispatcher_from_env(), diagnostic_type, vm_name=vm_name, namespace=namespace)


@mcp.tool
def virtctl_cluster_resources(
    resource_type: str,
    scope: Optional[str] = None,
    namespace: Optional[str] = None,
    label_selector: Optional[str] = None,
    show_labels: bool = False,
) -> Any:
    """Discover instance types, preferences, data sources and storage classes.

    Args:
        resource_type: instancetypes, preferences, datasources, storageclasses or all
        scope: all, cluster or namespaced (default: all)
        namespace: Limit namespaced queries to one namespace (default: all namespaces)
        label_selector: Kubernetes label selector
        show_labels: Include labels in the output
    """
    return cluster_resources(
        _dispatcher_from_env(),
        resource_type,
        scope=scope,
        namespace=namespace,
        label_selector=label_selector,
        show_labels=show_labels,
    )


@mcp.tool
def virtctl_create_vm_advanced(
    name: Optional[str] = None,
    namespace: Optional[str] = None,
    instancetype: Optional[str] = None,
    preference: Optional[str] = None,
    run_strategy: Optional[str] = None,
    volumes: Optional[Dict[str, Any]] = None,
    cloud_init: Optional[Dict[str, Any]] = None,
    infer_instancetype: bool = False,
    infer_preference: bool = False,
    infer_instancetype_from: Optional[str] = None,
    infer_preference_from: Optional[str] = None,
    access_credentials: Optional[List[Dict[str, Any]]] = None,
    termination_grace_period: int = 0,
) -> str:
    """Generate a VirtualMachine manifest with virtctl create vm.

    The manifest is returned, not applied.

    Args:
        name: VM name (random when omitted)
        namespace: Kubernetes namespace (default: current context namespace)
        instancetype: Instance type, e.g. u1.medium or virtualmachineinstancetype/name
        preference: Preference name
        run_strategy: Always, RerunOnFailure, Manual or Halted
        volumes: Mapping of volume kind to a list of specs, e.g.
            {"volume_import": [{"type": "ds", "src": "fedora", "name": "root", "size": "20Gi"}]}.
            Kinds: volume_import, volume_containerdisk, volume_datasource,
            volume_clone_pvc, volume_pvc, volume_blank, volume_sysprep
        cloud_init: user, ssh_key, password_file, ga_manage_ssh, user_data,
            user_data_base64, network_data, network_data_base64
        infer_instancetype: Infer the instance type from the boot volume
        infer_preference: Infer the preference from the boot volume
        infer_instancetype_from: Volume to infer the instance type from
        infer_preference_from: Volume to infer the preference from
        access_credentials: List of specs, e.g. [{"type": "ssh", "src": "my-keys", "user": "fedora"}]
        termination_grace_period: Seconds allowed for graceful shutdown
    """
    return create_vm_advanced(
        _dispatcher_from_env(),
        namespace=namespace,
        name=name,
        instancetype=instancetype,
        preference=preference,
        run_strategy=run_strategy,
        volumes=volumes,
        cloud_init=cloud_init,
        infer_instancetype=infer_instancetype,
        infer_preference=infer_preference,
        infer_instancetype_from=infer_instancetype_from,
        infer_preference_from=infer_preference_from,
        access_credentials=access_credentials,
        termination_grace_period=termination_grace_period,
    )


@mcp.tool
def virtctl_volume_management(
    vm_name: str,
    operation: str,
    namespace: Optional[str] = None,
    volume_name: Optional[str] = None,
    persist: bool = False,
    dry_run: bool = False,
) -> Union[str, Dict[str, Any]]:
    """Hotplug or unplug a volume, or list the volumes of a running VM.

    Args:
        vm_name: Name of the virtual machine
        operation: add, remove or list
        namespace: Kubernetes namespace (default: current context namespace)
        volume_name: Existing PVC or DataVolume (required for add/remove)
        persist: Keep the volume in the VM spec after restart (add only)
        dry_run: Show what would happen without doing it
    """
    return volume_management(
        _dispatcher_from_env(),
        vm_name,
        operation,
        namespace=namespace,
        volume_name=volume_name,
        persist=persist,
        dry_run=dry_run,
    )


@mcp.tool
def virtctl_image_operations(
    operation: str,
    vm_name: Optional[str] = None,
    namespace: Optional[str] = None,
    image_path: Optional[str] = None,
    pvc_name: Optional[str] = None,
    size: Optional[str] = None,
    storage_class: Optional[str] = None,
    upload_config: Optional[Dict[str, Any]] = None,
    guestfs_config: Optional[Dict[str, Any]] = None,
    memory_dump_config: Optional[Dict[str, Any]] = None,
    export_config: Optional[Dict[str, Any]] = None,
) -> str:
    """Upload or export disk images, inspect disks, or dump VM memory.

    Args:
        operation: upload, export, guestfs or memory-dump
        vm_name: Virtual machine (export, memory-dump)
        namespace: Kubernetes namespace (default: current context namespace)
        image_path: Local image file (upload)
        pvc_name: Target or inspected PVC (upload, guestfs)
        size: PVC size for upload, e.g. 20Gi
        storage_class: Storage class for the uploaded PVC
        upload_config: access_mode, volume_mode, insecure, force_bind, no_create,
            block_volume, uploadproxy_url
        guestfs_config: kvm, pull_method, root_disk_size
        memory_dump_config: claim_name, create_claim, volume_mode, access_mode, storage_class
        export_config: action (default create), output, manifest, pvc, ttl, port
    """
    return image_operations(
        _dispatcher_from_env(),
        operation,
        vm_name=vm_name,
        namespace=namespace,
        image_path=image_path,
        pvc_name=pvc_name,
        size=size,
        storage_class=storage_class,
        upload_config=upload_config,
        guestfs_config=guestfs_config,
        memory_dump_config=memory_dump_config,
        export_config=export_config,
    )


@mcp.tool
def virtctl_service_management(
    operation: str,
    resource_name: Optional[str] = None,
    resource_type: Optional[str] = None,
    namespace: Optional[str] = None,
    expose_config: Optional[Dict[str, Any]] = None,
    service_name: Optional[str] = None,
) -> Union[str, Dict[str, Any]]:
    """Expose a VM through a Service, or delete that Service.

    Args:
        operation: expose or unexpose
        resource_name: VM, VMI or VMIRS to expose
        resource_type: vm, vmi or vmirs (default: vm)
        namespace: Kubernetes namespace (default: current context namespace)
        expose_config: name (or service_name), port, target_port, protocol,
            type (or service_type: ClusterIP, NodePort, LoadBalancer)
        service_name: Service to delete (unexpose); Service name for expose
            when expose_config has none
    """
    return service_management(
        _dispatcher_from_env(),
        operation,
        resource_name=resource_name,
        resource_type=resource_type,
        namespace=namespace,
        expose_config=expose_config,
        service_name=service_name,
    )


@mcp.tool
def virtctl_create_resources(
    resource_type: str,
    name: str,
    namespaced: bool = False,
    namespace: Optional[str] = None,
    cpu: Optional[int] = None,
    memory: Optional[str] = None,
) -> str:
    """Generate an instancetype or preference manifest.

    Args:
        resource_type: instancetype or preference
        name: Resource name
        namespaced: Create the namespaced kind instead of the cluster-wide one
        namespace: Namespace for namespaced resources (default: current context namespace)
        cpu: vCPU count (instancetype only)
        memory: Memory, e.g. 4Gi (instancetype only)
    """
    return create_resources(
        _dispatcher_from_env(),
        resource_type,
        name,
        namespaced=namespaced,
        namespace=namespace,
        cpu=cpu,
        memory=memory,
    )


@mcp.tool
def virtctl_data_source_management(
    operation: str,
    name: Optional[str] = None,
    namespace: Optional[str] = None,
) -> Dict[str, Any]:
    """List CDI DataSources.

    Args:
        operation: list (create and clone are not supported)
        name: Single DataSource to fetch
        namespace: Kubernetes namespace (default: current context namespace)
    """
    return data_source_management(_dispatcher_from_env(), operation, name=name, namespace=namespace)


def run_stdio() -> None:
    """Run the virtctl MCP server on the transport chosen by VIRTCTL_MCP_TRANSPORT."""
    serve(mcp, VirtctlMCPServerConfig.from_env())


if __name__ == "__main__":
    run_stdio()
