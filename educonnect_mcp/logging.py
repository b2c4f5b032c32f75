"""Logging helpers used throughout the MCP service."""

from __future__ import annotations

import logging
import sys

from educonnect_mcp.config import settings


def configure_logging(level: int = logging.INFO) -> None:
    """Configure structured logging for the MCP server."""
    # stdio transport owns stdout for protocol frames
    stream = sys.stderr if settings.transport == "stdio" else sys.stdout
    handler = logging.StreamHandler(stream)
    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s", datefmt="%Y-%m-%dT%H:%M:%SZ"
    )
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers[:] = [handler]
