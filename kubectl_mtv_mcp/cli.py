from __future__ import annotations

import argparse
import importlib
import logging
import sys
from typing import List, Optional

from kubectl_mtv_mcp import __version__
from kubectl_mtv_mcp.config_utils import env_str

# server name -> (module, config class)
SERVERS = {
    "read": ("kubectl_mtv_mcp.mcp_servers.read", "ReadMCPServerConfig"),
    "write": ("kubectl_mtv_mcp.mcp_servers.write", "WriteMCPServerConfig"),
    "virtctl": ("kubectl_mtv_mcp.mcp_servers.virtctl", "VirtctlMCPServerConfig"),
}

DEFAULT_LOG_LEVEL = "WARNING"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="kubectl-mtv-mcp",
        description="Run one of the kubectl-mtv / virtctl MCP servers. "
        "Default mode speaks MCP over stdio; --sse serves MCP over HTTP.",
    )
    p.add_argument("--version", action="version", version=f"kubectl-mtv MCP Server {__version__}")
    p.add_argument("server", choices=sorted(SERVERS), help="Which server to run")
    p.add_argument("--sse", action="store_true", help="Run in SSE mode over HTTP")
    p.add_argument("--host", default=None, help="Host address to bind to in SSE mode")
    p.add_argument("--port", type=int, default=None, help="Port to listen on in SSE mode")
    p.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: MTV_MCP_LOG_LEVEL or WARNING)",
    )
    return p


def configure_logging(level: Optional[str] = None) -> None:
    # stdout carries the stdio transport, so logs must go to stderr.
    level = (level or env_str("MTV_MCP_LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    module_name, config_name = SERVERS[args.server]
    from kubectl_mtv_mcp.mcp_servers.common.serving import serve

    server_mod = importlib.import_module(module_name)
    config_mod = importlib.import_module(f"{module_name}.config")
    cfg = getattr(config_mod, config_name).from_env().with_overrides(
        transport="sse" if args.sse else None,
        host=args.host,
        port=args.port,
    )

    serve(server_mod.mcp, cfg)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
