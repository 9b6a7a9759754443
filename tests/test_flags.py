from kubectl_mtv_mcp.mcp_servers.common.flags import (
    LIST,
    NUMBER,
    REPEAT,
    SWITCH,
    TOGGLE,
    Flag,
    build_flags,
    flag_args,
    render_spec,
)


def test_value_flag():
    rule = Flag("size", "--size")
    assert flag_args(rule, "10Gi") == ["--size", "10Gi"]
    assert flag_args(rule, 8443) == ["--size", "8443"]
    assert flag_args(rule, 8443.0) == ["--size", "8443"]
    assert flag_args(rule, 8080.9) == ["--size", "8080.9"]
    assert flag_args(rule, "") == []
    assert flag_args(rule, None) == []
    assert flag_args(rule, True) == []


def test_switch_flag_only_for_true():
    rule = Flag("force", "--force", SWITCH)
    assert flag_args(rule, True) == ["--force"]
    assert flag_args(rule, False) == []
    assert flag_args(rule, "yes") == []


def test_toggle_flag_is_tri_state():
    rule = Flag("archived", "--archived", TOGGLE)
    assert flag_args(rule, True) == ["--archived=true"]
    assert flag_args(rule, False) == ["--archived=false"]
    assert flag_args(rule, None) == []


def test_number_flag_requires_positive():
    rule = Flag("grace_period", "--grace-period", NUMBER)
    assert flag_args(rule, 30) == ["--grace-period", "30"]
    assert flag_args(rule, 30.0) == ["--grace-period", "30"]
    assert flag_args(rule, 2.5) == ["--grace-period", "2.5"]
    assert flag_args(rule, 0) == []
    assert flag_args(rule, -1) == []
    assert flag_args(rule, True) == []


def test_list_flag():
    rule = Flag("vms", "--vms", LIST)
    assert flag_args(rule, ["vm1", " vm2 ", ""]) == ["--vms", "vm1,vm2"]
    assert flag_args(rule, "vm1,vm2") == ["--vms", "vm1,vm2"]
    assert flag_args(rule, []) == []


def test_repeat_flag_renders_specs():
    rule = Flag("volume_pvc", "--volume-pvc", REPEAT)
    assert flag_args(rule, [{"src": "data", "name": "disk1"}, {"src": "logs"}]) == [
        "--volume-pvc",
        "src:data,name:disk1",
        "--volume-pvc",
        "src:logs",
    ]
    assert flag_args(rule, "src:data") == ["--volume-pvc", "src:data"]


def test_render_spec_skips_empty_values():
    assert render_spec({"src": "x", "name": "", "size": None, "bootorder": 1}) == "src:x,bootorder:1"
    assert render_spec({}) is None


def test_build_flags_keeps_rule_order_and_only_for():
    rules = (
        Flag("node", "--node", only_for=("migrate",)),
        Flag("dry_run", "--dry-run", SWITCH),
        Flag("timeout", "--timeout"),
    )
    values = {"timeout": "5m", "dry_run": True, "node": "n1"}
    assert build_flags(values, rules, operation="migrate") == ["--node", "n1", "--dry-run", "--timeout", "5m"]
    assert build_flags(values, rules, operation="start") == ["--dry-run", "--timeout", "5m"]
    assert build_flags(None, rules) == []
