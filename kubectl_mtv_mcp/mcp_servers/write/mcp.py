from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from fastmcp import FastMCP

from ..common.dispatcher import CommandDispatcher
from ..common.runner import CommandConfig
from ..common.serving import serve
from .config import WriteMCPServerConfig
from .utils import deletes, hosts_hooks, mappings, plans, providers


mcp = FastMCP("kubectl-mtv-write")

_DISPATCHER: Optional[CommandDispatcher] = None


def _dispatcher_from_env() -> CommandDispatcher:
    global _DISPATCHER
    if _DISPATCHER is not None:
        return _DISPATCHER

    _DISPATCHER = CommandDispatcher(CommandConfig.from_env())
    return _DISPATCHER


@mcp.tool
def manage_plan_lifecycle(
    plan_name: str,
    action: str,
    namespace: Optional[str] = None,
    cutover: Optional[str] = None,
    vms: Optional[Union[str, List[str]]] = None,
) -> Dict[str, Any]:
    """Start, cancel, cut over, archive or unarchive a migration plan.

    Args:
        plan_name: Plan name
        action: start, cancel, cutover, archive or unarchive
        namespace: Plan namespace (default: current context namespace)
        cutover: Cutover time in ISO-8601 for warm migrations (start, cutover)
        vms: VM names to cancel (required for cancel)
    """
    return plans.manage_plan_lifecycle(
        _dispatcher_from_env(), plan_name, action, namespace=namespace, cutover=cutover, vms=vms
    )


@mcp.tool
def create_provider(
    provider_name: str,
    provider_type: str,
    namespace: Optional[str] = None,
    url: Optional[str] = None,
    username: Optional[str] = None,
    password: Optional[str] = None,
    token: Optional[str] = None,
    cacert: Optional[str] = None,
    insecure_skip_tls: bool = False,
    vddk_init_image: Optional[str] = None,
    sdk_endpoint: Optional[str] = None,
    provider_domain_name: Optional[str] = None,
    provider_project_name: Optional[str] = None,
    provider_region_name: Optional[str] = None,
) -> Dict[str, Any]:
    """Create a source or target provider.

    Args:
        provider_name: Provider name
        provider_type: openshift, vsphere, ovirt, openstack or ova
        namespace: Kubernetes namespace (default: current context namespace)
        url: Provider URL (NFS path for ova)
        username: Username
        password: Password
        token: Service-account token (openshift)
        cacert: CA certificate content or @file
        insecure_skip_tls: Skip TLS verification
        vddk_init_image: VDDK init image (vsphere)
        sdk_endpoint: vcenter or esxi (vsphere)
        provider_domain_name: Domain name (openstack)
        provider_project_name: Project name (openstack)
        provider_region_name: Region name (openstack)
    """
    return providers.create_provider(
        _dispatcher_from_env(),
        provider_name,
        provider_type,
        namespace=namespace,
        url=url,
        username=username,
        password=password,
        token=token,
        cacert=cacert,
        insecure_skip_tls=insecure_skip_tls,
        vddk_init_image=vddk_init_image,
        sdk_endpoint=sdk_endpoint,
        provider_domain_name=provider_domain_name,
        provider_project_name=provider_project_name,
        provider_region_name=provider_region_name,
    )


@mcp.tool
def manage_mapping(
    mapping_type: str,
    operation: str,
    mapping_name: str,
    namespace: Optional[str] = None,
    source_provider: Optional[str] = None,
    target_provider: Optional[str] = None,
    pairs: Optional[str] = None,
    add_pairs: Optional[str] = None,
    update_pairs: Optional[str] = None,
    remove_pairs: Optional[str] = None,
    inventory_url: Optional[str] = None,
) -> Dict[str, Any]:
    """Create, patch or delete a network or storage mapping.

    Network pair targets are "<namespace>/<nad>", "default" (pod network, at
    most once) or "ignored" (any number of times).

    Args:
        mapping_type: network or storage
        operation: create, delete or patch
        mapping_name: Mapping name
        namespace: Kubernetes namespace (default: current context namespace)
        source_provider: Source provider (create)
        target_provider: Target provider (create)
        pairs: "source:target,..." pairs (create)
        add_pairs: Pairs to add (patch)
        update_pairs: Pairs to update (patch)
        remove_pairs: Comma-separated source names to remove (patch)
        inventory_url: Inventory service URL
    """
    return mappings.manage_mapping(
        _dispatcher_from_env(),
        mapping_type,
        operation,
        mapping_name,
        namespace=namespace,
        source_provider=source_provider,
        target_provider=target_provider,
        pairs=pairs,
        add_pairs=add_pairs,
        update_pairs=update_pairs,
        remove_pairs=remove_pairs,
        inventory_url=inventory_url,
    )


@mcp.tool
def create_plan(
    plan_name: str,
    source_provider: str,
    namespace: Optional[str] = None,
    target_provider: Optional[str] = None,
    vms: Optional[Union[str, List[str]]] = None,
    network_mapping: Optional[str] = None,
    storage_mapping: Optional[str] = None,
    network_pairs: Optional[str] = None,
    storage_pairs: Optional[str] = None,
    target_namespace: Optional[str] = None,
    migration_type: Optional[str] = None,
    transfer_network: Optional[str] = None,
    preserve_static_ips: bool = False,
    description: Optional[str] = None,
    pvc_name_template: Optional[str] = None,
    volume_name_template: Optional[str] = None,
    network_name_template: Optional[str] = None,
    default_target_network: Optional[str] = None,
    default_target_storage_class: Optional[str] = None,
    target_labels: Optional[Union[str, List[str]]] = None,
    target_node_selector: Optional[Union[str, List[str]]] = None,
    use_compatibility_mode: bool = False,
    inventory_url: Optional[str] = None,
) -> Dict[str, Any]:
    """Create a migration plan.

    Args:
        plan_name: Plan name
        source_provider: Source provider name
        namespace: Plan namespace (default: current context namespace)
        target_provider: Target provider (default: the local cluster)
        vms: VM names, or "where ..." TSL query
        network_mapping: Existing network mapping
        storage_mapping: Existing storage mapping
        network_pairs: Inline network pairs "source:target,..."
        storage_pairs: Inline storage pairs "source:storage-class,..."
        target_namespace: Namespace for the migrated VMs
        migration_type: cold, warm or live
        transfer_network: Network attachment used for disk transfer
        preserve_static_ips: Keep static IPs of the source VMs
        description: Plan description
        pvc_name_template: Go template for PVC names
        volume_name_template: Go template for volume names
        network_name_template: Go template for interface names
        default_target_network: Target for unmapped networks
        default_target_storage_class: Target for unmapped storage
        target_labels: key=value labels for migrated VMs
        target_node_selector: key=value node selector for migrated VMs
        use_compatibility_mode: Use compatibility devices (SATA, E1000E)
        inventory_url: Inventory service URL
    """
    return plans.create_plan(
        _dispatcher_from_env(),
        plan_name,
        source_provider,
        namespace=namespace,
        target_provider=target_provider,
        vms=vms,
        network_mapping=network_mapping,
        storage_mapping=storage_mapping,
        network_pairs=network_pairs,
        storage_pairs=storage_pairs,
        target_namespace=target_namespace,
        migration_type=migration_type,
        transfer_network=transfer_network,
        preserve_static_ips=preserve_static_ips,
        description=description,
        pvc_name_template=pvc_name_template,
        volume_name_template=volume_name_template,
        network_name_template=network_name_template,
        default_target_network=default_target_network,
        default_target_storage_class=default_target_storage_class,
        target_labels=target_labels,
        target_node_selector=target_node_selector,
        use_compatibility_mode=use_compatibility_mode,
        inventory_url=inventory_url,
    )


@mcp.tool
def create_host(
    host_id: str,
    provider: str,
    namespace: Optional[str] = None,
    username: Optional[str] = None,
    password: Optional[str] = None,
    existing_secret: Optional[str] = None,
    ip_address: Optional[str] = None,
    network_adapter: Optional[str] = None,
    host_insecure_skip_tls: bool = False,
    cacert: Optional[str] = None,
    inventory_url: Optional[str] = None,
) -> Dict[str, Any]:
    """Create a migration host for a vSphere provider.

    Args:
        host_id: Host inventory ID
        provider: vSphere provider name
        namespace: Kubernetes namespace (default: current context namespace)
        username: ESXi username
        password: ESXi password
        existing_secret: Reuse a Secret instead of username/password
        ip_address: Migration network IP of the host
        network_adapter: Adapter whose IP is used
        host_insecure_skip_tls: Skip TLS verification
        cacert: CA certificate
        inventory_url: Inventory service URL
    """
    return hosts_hooks.create_host(
        _dispatcher_from_env(),
        host_id,
        provider,
        namespace=namespace,
        username=username,
        password=password,
        existing_secret=existing_secret,
        ip_address=ip_address,
        network_adapter=network_adapter,
        host_insecure_skip_tls=host_insecure_skip_tls,
        cacert=cacert,
        inventory_url=inventory_url,
    )


@mcp.tool
def create_hook(
    hook_name: str,
    image: str,
    namespace: Optional[str] = None,
    playbook: Optional[str] = None,
    service_account: Optional[str] = None,
    deadline: Optional[int] = None,
) -> Dict[str, Any]:
    """Create a migration hook.

    Args:
        hook_name: Hook name
        image: Container image that runs the hook
        namespace: Kubernetes namespace (default: current context namespace)
        playbook: Ansible playbook content
        service_account: Service account the hook runs as
        deadline: Seconds before the hook is aborted
    """
    return hosts_hooks.create_hook(
        _dispatcher_from_env(),
        hook_name,
        image,
        namespace=namespace,
        playbook=playbook,
        service_account=service_account,
        deadline=deadline,
    )


@mcp.tool
def delete_provider(
    provider_name: Optional[str] = None,
    namespace: Optional[str] = None,
    all_resources: bool = False,
) -> Dict[str, Any]:
    """Delete a provider, or every provider in the namespace.

    Args:
        provider_name: Provider to delete (required unless all_resources)
        namespace: Kubernetes namespace (default: current context namespace)
        all_resources: Delete all providers
    """
    return deletes.delete_resource(
        _dispatcher_from_env(), "provider", name=provider_name, namespace=namespace, all_resources=all_resources
    )


@mcp.tool
def delete_plan(
    plan_name: Optional[str] = None,
    namespace: Optional[str] = None,
    all_resources: bool = False,
    skip_archive: bool = False,
) -> Dict[str, Any]:
    """Delete a plan, or every plan in the namespace.

    Args:
        plan_name: Plan to delete (required unless all_resources)
        namespace: Kubernetes namespace (default: current context namespace)
        all_resources: Delete all plans
        skip_archive: Delete without archiving first
    """
    return deletes.delete_resource(
        _dispatcher_from_env(),
        "plan",
        name=plan_name,
        namespace=namespace,
        all_resources=all_resources,
        skip_archive=skip_archive,
    )


@mcp.tool
def delete_host(
    host_name: Optional[str] = None,
    namespace: Optional[str] = None,
    all_resources: bool = False,
) -> Dict[str, Any]:
    """Delete a migration host, or every host in the namespace.

    Args:
        host_name: Host to delete (required unless all_resources)
        namespace: Kubernetes namespace (default: current context namespace)
        all_resources: Delete all hosts
    """
    return deletes.delete_resource(
        _dispatcher_from_env(), "host", name=host_name, namespace=namespace, all_resources=all_resources
    )


@mcp.tool
def delete_hook(
    hook_name: Optional[str] = None,
    namespace: Optional[str] = None,
    all_resources: bool = False,
) -> Dict[str, Any]:
    """Delete a hook, or every hook in the namespace.

    Args:
        hook_name: Hook to delete (required unless all_resources)
        namespace: Kubernetes namespace (default: current context namespace)
        all_resources: Delete all hooks
    """
    return deletes.delete_resource(
        _dispatcher_from_env(), "hook", name=hook_name, namespace=namespace, all_resources=all_resources
    )


@mcp.tool
def patch_provider(
    provider_name: str,
    namespace: Optional[str] = None,
    url: Optional[str] = None,
    username: Optional[str] = None,
    password: Optional[str] = None,
    token: Optional[str] = None,
    cacert: Optional[str] = None,
    insecure_skip_tls: Optional[bool] = None,
    vddk_init_image: Optional[str] = None,
) -> Dict[str, Any]:
    """Update the connection settings of a provider.

    Args:
        provider_name: Provider name
        namespace: Kubernetes namespace (default: current context namespace)
        url: New URL
        username: New username
        password: New password
        token: New token
        cacert: New CA certificate
        insecure_skip_tls: true/false to change TLS verification; omit to keep
        vddk_init_image: New VDDK init image
    """
    return providers.patch_provider(
        _dispatcher_from_env(),
        provider_name,
        namespace=namespace,
        url=url,
        username=username,
        password=password,
        token=token,
        cacert=cacert,
        insecure_skip_tls=insecure_skip_tls,
        vddk_init_image=vddk_init_image,
    )


@mcp.tool
def patch_plan(
    plan_name: str,
    namespace: Optional[str] = None,
    transfer_network: Optional[str] = None,
    migration_type: Optional[str] = None,
    target_namespace: Optional[str] = None,
    target_labels: Optional[Union[str, List[str]]] = None,
    target_node_selector: Optional[Union[str, List[str]]] = None,
    description: Optional[str] = None,
    pvc_name_template: Optional[str] = None,
    volume_name_template: Optional[str] = None,
    network_name_template: Optional[str] = None,
    preserve_static_ips: Optional[bool] = None,
    use_compatibility_mode: Optional[bool] = None,
    install_legacy_drivers: Optional[bool] = None,
    migrate_shared_disks: Optional[bool] = None,
    archived: Optional[bool] = None,
) -> Dict[str, Any]:
    """Patch plan settings. Boolean fields left unset are not changed.

    Args:
        plan_name: Plan name
        namespace: Plan namespace (default: current context namespace)
        transfer_network: Network attachment used for disk transfer
        migration_type: cold, warm or live
        target_namespace: Namespace for the migrated VMs
        target_labels: key=value labels for migrated VMs
        target_node_selector: key=value node selector for migrated VMs
        description: Plan description
        pvc_name_template: Go template for PVC names
        volume_name_template: Go template for volume names
        network_name_template: Go template for interface names
        preserve_static_ips: Keep static IPs
        use_compatibility_mode: Use compatibility devices
        install_legacy_drivers: Install legacy Windows drivers
        migrate_shared_disks: Migrate shared disks
        archived: Archive state
    """
    return plans.patch_plan(
        _dispatcher_from_env(),
        plan_name,
        namespace=namespace,
        transfer_network=transfer_network,
        migration_type=migration_type,
        target_namespace=target_namespace,
        target_labels=target_labels,
        target_node_selector=target_node_selector,
        description=description,
        pvc_name_template=pvc_name_template,
        volume_name_template=volume_name_template,
        network_name_template=network_name_template,
        preserve_static_ips=preserve_static_ips,
        use_compatibility_mode=use_compatibility_mode,
        install_legacy_drivers=install_legacy_drivers,
        migrate_shared_disks=migrate_shared_disks,
        archived=archived,
    )


@mcp.tool
def patch_plan_vm(
    plan_name: str,
    vm_name: str,
    namespace: Optional[str] = None,
    target_name: Optional[str] = None,
    root_disk: Optional[str] = None,
    instance_type: Optional[str] = None,
    pvc_name_template: Optional[str] = None,
    volume_name_template: Optional[str] = None,
    network_name_template: Optional[str] = None,
    luks_secret: Optional[str] = None,
    add_pre_hook: Optional[str] = None,
    add_post_hook: Optional[str] = None,
    remove_hook: Optional[str] = None,
    clear_hooks: bool = False,
) -> Dict[str, Any]:
    """Patch the settings of one VM inside a plan.

    Args:
        plan_name: Plan name
        vm_name: VM name as listed in the plan
        namespace: Plan namespace (default: current context namespace)
        target_name: Name of the migrated VM
        root_disk: Boot disk, e.g. "[datastore1] vm/vm.vmdk"
        instance_type: Instance type for the migrated VM
        pvc_name_template: Go template for PVC names
        volume_name_template: Go template for volume names
        network_name_template: Go template for interface names
        luks_secret: Secret holding LUKS passphrases
        add_pre_hook: Hook to run before migration
        add_post_hook: Hook to run after migration
        remove_hook: Hook to detach
        clear_hooks: Detach all hooks
    """
    return plans.patch_plan_vm(
        _dispatcher_from_env(),
        plan_name,
        vm_name,
        namespace=namespace,
        target_name=target_name,
        root_disk=root_disk,
        instance_type=instance_type,
        pvc_name_template=pvc_name_template,
        volume_name_template=volume_name_template,
        network_name_template=network_name_template,
        luks_secret=luks_secret,
        add_pre_hook=add_pre_hook,
        add_post_hook=add_post_hook,
        remove_hook=remove_hook,
        clear_hooks=clear_hooks,
    )


def run_stdio() -> None:
    """Run the write server on the transport chosen by MTV_WRITE_MCP_TRANSPORT."""
    serve(mcp, WriteMCPServerConfig.from_env())


if __name__ == "__main__":
    run_stdio()
