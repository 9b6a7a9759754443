import sys
import time

import pytest

from kubectl_mtv_mcp.mcp_servers.common.errors import (
    CommandNotFoundError,
    CommandTimeoutError,
    ExecutionError,
    NonZeroExitError,
)
from kubectl_mtv_mcp.mcp_servers.common.runner import (
    CommandConfig,
    ExecutionResult,
    ProcessRunner,
    mask_secrets,
)

PY = sys.executable


def test_success_returns_stdout_verbatim():
    result = ProcessRunner().run(PY, ["-c", "import sys; sys.stdout.write('hello\\n'); sys.stderr.write('warn')"])
    assert result.stdout == "hello\n"
    assert result.returncode == 0
    assert result.command[0] == PY


def test_non_zero_exit_with_stderr():
    with pytest.raises(NonZeroExitError) as excinfo:
        ProcessRunner().run(PY, ["-c", "import sys; sys.stderr.write('boom'); sys.exit(3)"])
    err = excinfo.value
    assert str(err) == f"{PY} error: boom"
    assert err.kind == "non_zero_exit"
    assert err.returncode == 3
    assert err.stderr == "boom"


def test_non_zero_exit_without_stderr():
    with pytest.raises(NonZeroExitError) as excinfo:
        ProcessRunner().run(PY, ["-c", "import sys; sys.exit(2)"])
    assert str(excinfo.value) == f"{PY} command failed: exit status 2"


def test_missing_binary():
    with pytest.raises(CommandNotFoundError) as excinfo:
        ProcessRunner().run("kubectl-mtv-does-not-exist", ["version"])
    err = excinfo.value
    assert isinstance(err, ExecutionError)
    assert err.kind == "not_found"
    assert str(err).startswith("kubectl-mtv-does-not-exist command failed: ")


def test_timeout_kills_child():
    runner = ProcessRunner(timeout_seconds=0.5)
    started = time.monotonic()
    with pytest.raises(CommandTimeoutError) as excinfo:
        runner.run(PY, ["-c", "import time; time.sleep(30)"])
    assert time.monotonic() - started < 10
    err = excinfo.value
    assert err.kind == "timeout"
    assert err.timeout == 0.5
    assert "timed out after 0.5s" in str(err)


def test_per_call_timeout_overrides_default():
    with pytest.raises(CommandTimeoutError):
        ProcessRunner(timeout_seconds=60).run(PY, ["-c", "import time; time.sleep(30)"], timeout=0.5)


def test_mask_secrets():
    assert mask_secrets(["create", "provider", "p", "--password", "s3cret", "--token=abc", "--url", "u"]) == [
        "create",
        "provider",
        "p",
        "--password",
        "****",
        "--token=****",
        "--url",
        "u",
    ]


def test_command_line_is_quoted_and_masked():
    result = ExecutionResult(["kubectl-mtv", "create", "plan", "my plan", "--password", "x"], "", "", 0)
    assert result.command_line == "kubectl-mtv create plan 'my plan' --password '****'"


def test_command_config_defaults(monkeypatch):
    monkeypatch.delenv("VIRTCTL_COMMAND", raising=False)
    monkeypatch.delenv("MTV_MCP_COMMAND_TIMEOUT", raising=False)
    cfg = CommandConfig.from_env()
    assert cfg == CommandConfig(kubectl_bin="kubectl", mtv_bin="kubectl-mtv", virtctl_bin="virtctl", timeout_seconds=120)


def test_command_config_from_env(monkeypatch):
    monkeypatch.setenv("VIRTCTL_COMMAND", "kubectl-virt")
    monkeypatch.setenv("MTV_MCP_COMMAND_TIMEOUT", "30")
    cfg = CommandConfig.from_env()
    assert cfg.virtctl_bin == "kubectl-virt"
    assert cfg.timeout_seconds == 30


def test_command_config_ignores_bad_values(monkeypatch):
    monkeypatch.setenv("VIRTCTL_COMMAND", "  ")
    monkeypatch.setenv("MTV_MCP_COMMAND_TIMEOUT", "0")
    cfg = CommandConfig.from_env()
    assert cfg.virtctl_bin == "virtctl"
    assert cfg.timeout_seconds == 120
