import pytest

from kubectl_mtv_mcp.config_utils import env_choice, env_int, env_optional_str, env_str
from kubectl_mtv_mcp.mcp_servers.common.serving import MCPServerConfig, serve
from kubectl_mtv_mcp.mcp_servers.read.config import ReadMCPServerConfig
from kubectl_mtv_mcp.mcp_servers.virtctl.config import VirtctlMCPServerConfig
from kubectl_mtv_mcp.mcp_servers.write.config import WriteMCPServerConfig


def test_env_helpers(monkeypatch):
    monkeypatch.setenv("X_STR", "  v  ")
    monkeypatch.setenv("X_EMPTY", "")
    monkeypatch.setenv("X_INT", "nope")
    monkeypatch.setenv("X_CHOICE", "SSE")
    assert env_str("X_STR", "d") == "v"
    assert env_str("X_MISSING", "d") == "d"
    assert env_optional_str("X_EMPTY") is None
    assert env_optional_str("X_EMPTY", "fallback") == "fallback"
    assert env_optional_str("X_STR") == "v"
    assert env_int("X_INT", 5) == 5
    assert env_choice("X_CHOICE", "stdio", ("stdio", "sse")) == "sse"


def test_env_choice_unknown_falls_back(monkeypatch):
    monkeypatch.setenv("X_CHOICE", "websocket")
    assert env_choice("X_CHOICE", "stdio", ("stdio", "sse")) == "stdio"


def test_server_defaults(monkeypatch):
    for key in ("TRANSPORT", "HOST", "PORT"):
        monkeypatch.delenv(f"MTV_READ_MCP_{key}", raising=False)
    cfg = ReadMCPServerConfig.from_env()
    assert (cfg.mcp_transport, cfg.mcp_host, cfg.mcp_port) == ("stdio", "127.0.0.1", 8080)


@pytest.mark.parametrize(
    "cls,prefix",
    [
        (ReadMCPServerConfig, "MTV_READ_MCP_"),
        (WriteMCPServerConfig, "MTV_WRITE_MCP_"),
        (VirtctlMCPServerConfig, "VIRTCTL_MCP_"),
    ],
)
def test_server_prefixes(monkeypatch, cls, prefix):
    monkeypatch.setenv(f"{prefix}TRANSPORT", "sse")
    monkeypatch.setenv(f"{prefix}HOST", "0.0.0.0")
    monkeypatch.setenv(f"{prefix}PORT", "9090")
    cfg = cls.from_env()
    assert isinstance(cfg, cls)
    assert (cfg.mcp_transport, cfg.mcp_host, cfg.mcp_port) == ("sse", "0.0.0.0", 9090)


def test_with_overrides():
    cfg = MCPServerConfig("stdio", "127.0.0.1", 8080).with_overrides(transport="sse", port=9000)
    assert (cfg.mcp_transport, cfg.mcp_host, cfg.mcp_port) == ("sse", "127.0.0.1", 9000)


class _KwargsServer:
    name = "fake"

    def __init__(self):
        self.calls = []

    def run(self, transport="stdio", **transport_kwargs):
        self.calls.append({"transport": transport, **transport_kwargs})


class _TransportOnlyServer(_KwargsServer):
    def run(self, transport="stdio"):
        self.calls.append({"transport": transport})


def test_serve_stdio():
    server = _KwargsServer()
    serve(server, MCPServerConfig("stdio", "127.0.0.1", 8080))
    assert server.calls == [{"transport": "stdio"}]


def test_serve_sse_forwards_host_and_port():
    server = _KwargsServer()
    serve(server, MCPServerConfig("sse", "0.0.0.0", 9000))
    assert server.calls == [{"transport": "sse", "host": "0.0.0.0", "port": 9000}]


def test_serve_skips_unsupported_kwargs():
    server = _TransportOnlyServer()
    serve(server, MCPServerConfig("http", "0.0.0.0", 9000))
    assert server.calls == [{"transport": "http"}]
