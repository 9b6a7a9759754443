from __future__ import annotations

from dataclasses import dataclass

from ..common.serving import MCPServerConfig


@dataclass(frozen=True)
class WriteMCPServerConfig(MCPServerConfig):
    """Runtime configuration for the mutating kubectl-mtv MCP server.

    MCP transport selection:
    - MTV_WRITE_MCP_TRANSPORT: stdio|http|sse (default: stdio)
    - MTV_WRITE_MCP_HOST
    - MTV_WRITE_MCP_PORT
    """

    ENV_PREFIX = "MTV_WRITE_MCP_"
