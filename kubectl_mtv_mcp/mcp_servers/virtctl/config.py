from __future__ import annotations

from dataclasses import dataclass

from ..common.serving import MCPServerConfig


@dataclass(frozen=True)
class VirtctlMCPServerConfig(MCPServerConfig):
    """Runtime configuration for the virtctl MCP server.

    MCP transport selection:
    - VIRTCTL_MCP_TRANSPORT: stdio|http|sse (default: stdio)
    - VIRTCTL_MCP_HOST
    - VIRTCTL_MCP_PORT

    Command execution (shared with the other servers, see ``CommandConfig``):
    - VIRTCTL_COMMAND: virtctl binary name or path (default: virtctl)
    - MTV_MCP_COMMAND_TIMEOUT: seconds before a command is killed (default: 120)
    """

    ENV_PREFIX = "VIRTCTL_MCP_"
