from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from fastmcp import FastMCP

from kubectl_mtv_mcp.config_utils import env_choice, env_int, env_str

logger = logging.getLogger(__name__)

TRANSPORTS = ("stdio", "sse", "http")


@dataclass(frozen=True)
class MCPServerConfig:
    """Transport settings for one MCP server.

    Subclasses set ``ENV_PREFIX``; the env vars read are:
    - <PREFIX>TRANSPORT: stdio|sse|http (default: stdio)
    - <PREFIX>HOST (default: 127.0.0.1)
    - <PREFIX>PORT (default: 8080)
    """

    mcp_transport: str
    mcp_host: str
    mcp_port: int

    ENV_PREFIX = "MTV_MCP_"
    DEFAULT_MCP_TRANSPORT = "stdio"
    DEFAULT_MCP_HOST = "127.0.0.1"
    DEFAULT_MCP_PORT = 8080

    @classmethod
    def from_env(cls) -> "MCPServerConfig":
        prefix = cls.ENV_PREFIX
        return cls(
            mcp_transport=env_choice(f"{prefix}TRANSPORT", cls.DEFAULT_MCP_TRANSPORT, TRANSPORTS),
            mcp_host=env_str(f"{prefix}HOST", cls.DEFAULT_MCP_HOST),
            mcp_port=env_int(f"{prefix}PORT", cls.DEFAULT_MCP_PORT, minimum=1),
        )

    def with_overrides(
        self,
        *,
        transport: Optional[str] = None,
        host: Optional[str] = None,
        port: Optional[int] = None,
    ) -> "MCPServerConfig":
        return replace(
            self,
            mcp_transport=transport or self.mcp_transport,
            mcp_host=host or self.mcp_host,
            mcp_port=port or self.mcp_port,
        )


def serve(mcp: FastMCP, cfg: MCPServerConfig) -> None:
    """Run ``mcp`` on the transport selected by ``cfg``."""
    transport = cfg.mcp_transport
    if transport == "stdio":
        mcp.run(transport="stdio")
        return

    # Older fastmcp releases do not accept host/port on run().
    params = inspect.signature(mcp.run).parameters
    forwards_kwargs = any(p.kind is inspect.Parameter.VAR_KEYWORD for p in params.values())
    kwargs: Dict[str, Any] = {"transport": transport}
    if "host" in params or forwards_kwargs:
        kwargs["host"] = cfg.mcp_host
    if "port" in params or forwards_kwargs:
        kwargs["port"] = cfg.mcp_port

    logger.info("starting %s over %s on %s:%s", mcp.name, transport, cfg.mcp_host, cfg.mcp_port)
    mcp.run(**kwargs)
