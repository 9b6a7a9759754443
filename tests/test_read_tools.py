import pytest

from kubectl_mtv_mcp.mcp_servers.common.errors import InvalidChoiceError, MissingFieldError
from kubectl_mtv_mcp.mcp_servers.read.utils.logs import get_logs
from kubectl_mtv_mcp.mcp_servers.read.utils.resources import (
    get_plan_vms,
    get_version,
    list_inventory,
    list_resources,
)
from kubectl_mtv_mcp.mcp_servers.read.utils.storage import get_migration_storage, migration_selector


def test_list_plans_in_current_namespace(dispatcher, runner):
    runner.respond("kubectl-mtv", '[{"name": "plan1"}]')
    out = list_resources(dispatcher, "plan")
    assert runner.last == ["kubectl-mtv", "get", "plan", "-n", "ctx-ns", "-o", "json"]
    assert out == {
        "command": "kubectl-mtv get plan -n ctx-ns -o json",
        "return_value": 0,
        "data": [{"name": "plan1"}],
    }


def test_list_providers_all_namespaces(dispatcher, runner, resolver):
    list_resources(dispatcher, "provider", all_namespaces=True, inventory_url="http://inv")
    assert runner.last == ["kubectl-mtv", "get", "provider", "-A", "-i", "http://inv", "-o", "json"]
    assert resolver.calls == []


def test_list_resources_rejects_unknown_type(dispatcher):
    with pytest.raises(InvalidChoiceError, match="Valid types: plan, provider, mapping, host, hook"):
        list_resources(dispatcher, "vm")


def test_list_inventory_with_query(dispatcher, runner):
    list_inventory(dispatcher, "vm", "vsphere", namespace="mtv", query="where cpuCount > 4")
    assert runner.last == [
        "kubectl-mtv", "get", "inventory", "vm", "vsphere", "-n", "mtv", "-q", "where cpuCount > 4", "-o", "json",
    ]


def test_list_inventory_requires_provider(dispatcher):
    with pytest.raises(MissingFieldError, match="provider_name is required"):
        list_inventory(dispatcher, "vm", "")


def test_get_logs_defaults_to_controller(dispatcher, runner, resolver):
    runner.respond("kubectl", "line1\nline2\n")
    out = get_logs(dispatcher)
    assert runner.last == [
        "kubectl", "logs", "deployment/forklift-controller", "-n", "openshift-mtv", "-c", "main", "--tail", "100",
    ]
    assert out["stdout"] == "line1\nline2\n"
    assert resolver.calls == []


def test_get_logs_for_pod(dispatcher, runner):
    get_logs(dispatcher, pod_name="importer-1", namespace="target", tail_lines=0, since="1h", previous=True, timestamps=True)
    assert runner.last == ["kubectl", "logs", "importer-1", "-n", "target", "--since", "1h", "--previous", "--timestamps"]


def test_migration_selector():
    assert migration_selector(plan_id="p1", vm_id="vm-42", label_selector="app=x") == "plan=p1,vmID=vm-42,app=x"
    assert migration_selector() == ""


def test_get_migration_storage(dispatcher, runner):
    get_migration_storage(dispatcher, plan_id="p1", migration_id="m1")
    assert runner.last == ["kubectl", "get", "pvc,datavolume", "-n", "ctx-ns", "-l", "plan=p1,migration=m1", "-o", "json"]


def test_get_migration_storage_pvcs_everywhere(dispatcher, runner):
    get_migration_storage(dispatcher, resource_type="pvc", all_namespaces=True)
    assert runner.last == ["kubectl", "get", "pvc", "-A", "-o", "json"]


def test_get_plan_vms(dispatcher, runner):
    get_plan_vms(dispatcher, "plan1", namespace="mtv")
    assert runner.last == ["kubectl-mtv", "get", "plan", "plan1", "--vms", "-n", "mtv", "-o", "json"]


def test_get_version(dispatcher, runner):
    runner.respond("kubectl-mtv", '{"clientVersion": "v0.5.0"}')
    assert get_version(dispatcher)["data"] == {"clientVersion": "v0.5.0"}
    assert runner.last == ["kubectl-mtv", "version", "-o", "json"]
