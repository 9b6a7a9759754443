import pytest

from kubectl_mtv_mcp import cli
from kubectl_mtv_mcp.mcp_servers.virtctl.config import VirtctlMCPServerConfig


def test_parser_defaults():
    args = cli.build_parser().parse_args(["read"])
    assert args.server == "read"
    assert args.sse is False
    assert args.host is None and args.port is None


def test_parser_rejects_unknown_server():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["admin"])


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.build_parser().parse_args(["--version"])
    assert excinfo.value.code == 0
    assert "kubectl-mtv MCP Server 1.0.0" in capsys.readouterr().out


def test_main_runs_selected_server(monkeypatch):
    served = []
    monkeypatch.setattr(
        "kubectl_mtv_mcp.mcp_servers.common.serving.serve",
        lambda mcp, cfg: served.append((mcp, cfg)),
    )
    monkeypatch.delenv("VIRTCTL_MCP_HOST", raising=False)

    assert cli.main(["virtctl", "--sse", "--port", "9000"]) == 0

    mcp, cfg = served[0]
    assert mcp.name == "virtctl"
    assert isinstance(cfg, VirtctlMCPServerConfig)
    assert (cfg.mcp_transport, cfg.mcp_host, cfg.mcp_port) == ("sse", "127.0.0.1", 9000)
