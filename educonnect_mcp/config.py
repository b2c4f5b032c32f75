"""Typed configuration for the MCP server."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent

RESOURCE_URI = "ui://enrollment/enrollment-app.html"
RESOURCE_MIME_TYPE = "text/html+skybridge"


class Settings(BaseSettings):
    programs_path: Path = Field(
        default=PACKAGE_DIR / "data" / "programs.json", alias="EDUCONNECT_PROGRAMS"
    )
    keywords_path: Path = Field(
        default=PACKAGE_DIR / "data" / "keywords.yaml", alias="EDUCONNECT_KEYWORDS"
    )
    widget_path: Path = Field(
        default=PACKAGE_DIR / "assets" / "enrollment-app.html", alias="EDUCONNECT_WIDGET"
    )
    transport: Literal["stdio", "http", "sse"] = Field(default="stdio", alias="TRANSPORT")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")
    result_limit: int = Field(default=10, ge=1, alias="EDUCONNECT_RESULT_LIMIT")
    server_name: str = Field(default="educonnect-enrollment", alias="MCP_SERVER_NAME")
    server_version: str = Field(default="1.0.0", alias="MCP_SERVER_VERSION")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("transport", mode="before")
    @classmethod
    def _normalize_transport(cls, value: object) -> str:
        # anything other than http or sse runs over stdio
        normalized = str(value or "").strip().lower()
        return normalized if normalized in {"http", "sse"} else "stdio"


settings = Settings()
