"""Core package for the EduConnect enrollment MCP server."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _version

try:
    __version__ = _version("educonnect-mcp")
except PackageNotFoundError:
    __version__ = "0.0.0"
