"""FastAPI wrapper around the enrollment MCP server."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, Awaitable, Callable, Dict, cast

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastmcp.tools.tool import ToolResult
from pydantic import BaseModel, Field, ValidationError, validate_call

from educonnect_mcp import __version__
from educonnect_mcp.config import RESOURCE_URI, settings
from server import (
    WIDGET_HTML,
    catalog,
    enroll_in_program,
    keyword_index,
    list_programs,
    mcp,
    search_programs,
)

ToolCallable = Callable[..., Awaitable[ToolResult]]

mcp_http_app = cast(Any, mcp).http_app(
    path="/",
    transport="streamable-http",
)

# arguments are coerced against the same signatures FastMCP publishes as tool schemas
TOOLS: Dict[str, ToolCallable] = {
    "search_programs": validate_call(search_programs),
    "list_programs": validate_call(list_programs),
    "enroll_in_program": validate_call(enroll_in_program),
}

TOOL_BRIEFS: Dict[str, str] = {
    "search_programs": "Rank programs against an English free-text query.",
    "list_programs": "Filter programs by type, organization and maximum total price.",
    "enroll_in_program": "Simulate enrollment in a program by its ID.",
}


class ToolCallRequest(BaseModel):
    arguments: Dict[str, Any] = Field(default_factory=dict)


def _text_of(result: ToolResult) -> str:
    return "\n".join(getattr(block, "text", "") for block in result.content)


@asynccontextmanager
async def app_lifespan(app: FastAPI) -> Any:
    async with mcp_http_app.lifespan(app):
        yield


app = FastAPI(
    title="EduConnect Enrollment MCP API",
    version=__version__,
    description="FastAPI wrapper around the EduConnect MCP server with a mounted streamable MCP endpoint.",
    lifespan=app_lifespan,
)

# hosted chat clients call the MCP endpoint cross-origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.mount("/mcp", mcp_http_app)


@app.get("/health")
async def health() -> Dict[str, Any]:
    return {"status": "ok", "programs": len(catalog), "keywords": len(keyword_index)}


@app.get("/widget", response_class=HTMLResponse)
async def widget() -> str:
    return WIDGET_HTML


@app.get("/api/tools")
async def list_tools_api() -> Dict[str, Any]:
    return {
        "server": settings.server_name,
        "widget": RESOURCE_URI,
        "count": len(TOOLS),
        "tools": [{"name": name, "brief": TOOL_BRIEFS[name]} for name in sorted(TOOLS)],
    }


@app.post("/api/tools/{tool_name}")
async def call_tool_api(tool_name: str, request: ToolCallRequest) -> Dict[str, Any]:
    tool = TOOLS.get(tool_name)
    if tool is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown tool '{tool_name}'",
        )
    try:
        result = await tool(**request.arguments)
    except (TypeError, ValidationError) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid arguments for tool '{tool_name}': {exc}",
        ) from exc
    except Exception as exc:  # noqa: BLE001
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Tool '{tool_name}' execution failed: {exc}",
        ) from exc
    return {"tool": tool_name, "summary": _text_of(result), "result": result.structured_content}
