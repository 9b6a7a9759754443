"""virtctl MCP server package.

Structure mirrors the other server layouts:
- config.py: server configuration from environment
- mcp.py: FastMCP tool definitions + runner
- utils/: argument builders per tool family

Tools cover VM lifecycle, guest diagnostics, hotplug volumes, image
upload/export, service exposure and manifest generation. Discovery queries
that virtctl cannot answer go through kubectl.
"""

from .mcp import mcp, run_stdio

__all__ = ["mcp", "run_stdio"]
