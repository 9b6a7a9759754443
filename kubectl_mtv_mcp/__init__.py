"""MCP servers that drive kubectl-mtv and virtctl for VM migrations to KubeVirt.

- ``mcp_servers.read``: read-only kubectl-mtv server
- ``mcp_servers.write``: mutating kubectl-mtv server
- ``mcp_servers.virtctl``: virtctl server
"""

__version__ = "1.0.0"
