from __future__ import annotations

from dataclasses import dataclass

from ..common.serving import MCPServerConfig


@dataclass(frozen=True)
class ReadMCPServerConfig(MCPServerConfig):
    """Runtime configuration for the read-only kubectl-mtv MCP server.

    MCP transport selection:
    - MTV_READ_MCP_TRANSPORT: stdio|http|sse (default: stdio)
    - MTV_READ_MCP_HOST
    - MTV_READ_MCP_PORT

    Notes:
    - Requires kubectl and the kubectl-mtv plugin on PATH.
    - Nothing this server runs modifies the cluster.
    """

    ENV_PREFIX = "MTV_READ_MCP_"
