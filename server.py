"""MCP server exposing the EduConnect program catalog and enrollment widget."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Annotated, Any, Dict, Literal, Optional

from cachetools import TTLCache
from fastmcp import FastMCP
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import Field

from educonnect_mcp.catalog import load_catalog
from educonnect_mcp.config import RESOURCE_MIME_TYPE, RESOURCE_URI, settings
from educonnect_mcp.logging import configure_logging
from educonnect_mcp.services.filtering import ProgramFilter
from educonnect_mcp.services.keywords import load_keyword_index
from educonnect_mcp.services.programs import ProgramService, ToolOutcome

configure_logging()

logger = logging.getLogger(__name__)

# tells MCP App and Apps SDK hosts that these tools render in the enrollment widget
TOOL_UI_META: Dict[str, Any] = {
    "ui": {"resourceUri": RESOURCE_URI},
    "openai/outputTemplate": RESOURCE_URI,
}

RATE_LIMIT_WINDOW = 60
RATE_LIMITS: TTLCache[str, int] = TTLCache(maxsize=512, ttl=RATE_LIMIT_WINDOW)
RATE_LIMITS_PER_TOOL: Dict[str, int] = {
    "search_programs": 120,
    "list_programs": 120,
    "enroll_in_program": 30,
}


def enforce_rate_limit(tool_name: str) -> None:
    limit = RATE_LIMITS_PER_TOOL.get(tool_name, 60)
    count = RATE_LIMITS.get(tool_name, 0)
    if count >= limit:
        raise RuntimeError(f"Rate limit reached for {tool_name}")
    RATE_LIMITS[tool_name] = count + 1


def audit_tool(tool_name: str, status: str, details: Dict[str, Any] | None = None) -> None:
    logger.info(
        f"tool_event {tool_name}",
        extra={
            "tool": tool_name,
            "status": status,
            "details": details or {},
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


def _to_tool_result(outcome: ToolOutcome) -> ToolResult:
    content = [TextContent(type="text", text=outcome.summary)]
    if outcome.structured is None:
        return ToolResult(content=content)
    return ToolResult(content=content, structured_content=outcome.structured)


mcp = FastMCP(
    settings.server_name,
    instructions=(
        "Search, filter and (simulated) enroll in Saudi educational programs. "
        "Queries are English; program titles are Arabic."
    ),
)
catalog = load_catalog()
keyword_index = load_keyword_index()
program_service = ProgramService(catalog, keyword_index, result_limit=settings.result_limit)
WIDGET_HTML = settings.widget_path.read_text(encoding="utf-8")


@mcp.resource(RESOURCE_URI, name="enrollment-app", mime_type=RESOURCE_MIME_TYPE)
def enrollment_app() -> str:
    return WIDGET_HTML


async def search_programs(
    query: Annotated[
        str, Field(description="Search query in English describing your background or interests")
    ],
) -> ToolResult:
    enforce_rate_limit("search_programs")
    outcome = program_service.search(query)
    audit_tool(
        "search_programs",
        "success",
        {"query": query, "count": outcome.count},
    )
    return _to_tool_result(outcome)


async def list_programs(
    type: Annotated[
        Optional[Literal["academic_degree", "nanodegree"]], Field(description="Program type filter")
    ] = None,
    organization: Annotated[
        Optional[str], Field(description="Organization name (partial match in Arabic)")
    ] = None,
    max_price: Annotated[
        Optional[float], Field(description="Maximum total price in SAR")
    ] = None,
) -> ToolResult:
    enforce_rate_limit("list_programs")
    criteria = ProgramFilter(type=type, organization=organization, max_price=max_price)
    outcome = program_service.list(criteria)
    audit_tool(
        "list_programs",
        "success",
        {"count": outcome.count},
    )
    return _to_tool_result(outcome)


async def enroll_in_program(
    program_id: Annotated[int, Field(description="The program ID to enroll in")],
) -> ToolResult:
    enforce_rate_limit("enroll_in_program")
    outcome = program_service.enroll(program_id)
    audit_tool(
        "enroll_in_program",
        "success" if outcome.found else "not_found",
        {"program_id": program_id},
    )
    return _to_tool_result(outcome)


mcp.tool(
    search_programs,
    name="search_programs",
    description=(
        "Search for educational programs by describing your background or interests in English "
        "(e.g. 'software engineer', 'cyber security', 'health'). Returns matching educational programs."
    ),
    meta=TOOL_UI_META,
)
mcp.tool(
    list_programs,
    name="list_programs",
    description=(
        "List and filter educational programs. Filter by type (academic_degree or nanodegree), "
        "organization name, or maximum price."
    ),
    meta=TOOL_UI_META,
)
mcp.tool(
    enroll_in_program,
    name="enroll_in_program",
    description="Simulate enrollment in a specific program by its ID.",
    meta=TOOL_UI_META,
)


if __name__ == "__main__":
    if settings.transport == "stdio":
        mcp.run()
    else:
        mcp.run(
            transport="streamable-http" if settings.transport == "http" else "sse",
            host=settings.host,
            port=settings.port,
        )
