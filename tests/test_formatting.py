import json

from kubectl_mtv_mcp.mcp_servers.common.formatting import (
    command_envelope,
    load_json_or_text,
    normalize_json_text,
    to_json_text,
)
from kubectl_mtv_mcp.mcp_servers.common.runner import ExecutionResult


def test_normalize_reindents_json():
    assert normalize_json_text('{"a":1,"b":[1,2]}') == '{\n  "a": 1,\n  "b": [\n    1,\n    2\n  ]\n}'


def test_normalize_keeps_key_order():
    out = normalize_json_text('{"z": 1, "a": 2}')
    assert out.index('"z"') < out.index('"a"')


def test_normalize_returns_non_json_unchanged():
    text = "apiVersion: v1\nkind: VirtualMachine\n"
    assert normalize_json_text(text) == text
    assert normalize_json_text("") == ""


def test_normalize_is_idempotent():
    once = normalize_json_text('{"a": {"b": null}}')
    assert normalize_json_text(once) == once


def test_load_json_or_text():
    assert load_json_or_text('{"items": []}') == {"items": []}
    assert load_json_or_text("not json") == "not json"


def test_to_json_text_keeps_unicode():
    assert to_json_text({"name": "déjà"}) == '{\n  "name": "déjà"\n}'


def test_envelope_with_json_stdout():
    result = ExecutionResult(["kubectl-mtv", "get", "plan", "-o", "json"], '{"items": []}', "warning", 0)
    assert command_envelope(result) == {
        "command": "kubectl-mtv get plan -o json",
        "return_value": 0,
        "data": {"items": []},
    }


def test_envelope_with_text_stdout_drops_stderr():
    result = ExecutionResult(["kubectl", "delete", "service", "ssh"], 'service "ssh" deleted\n', "noise", 0)
    env = command_envelope(result)
    assert env["stdout"] == 'service "ssh" deleted\n'
    assert "data" not in env
    assert "noise" not in json.dumps(env)
