"""Program service with the result shaping used by MCP tools."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from educonnect_mcp.catalog import Program, ProgramCatalog
from educonnect_mcp.services.filtering import ProgramFilter, filter_programs
from educonnect_mcp.services.keywords import KeywordIndex
from educonnect_mcp.services.ranking import rank_programs

SUGGESTED_KEYWORDS = (
    "software",
    "cyber",
    "health",
    "business",
    "data",
    "education",
    "law",
    "tourism",
    "design",
)

TYPE_LABELS = {"nanodegree": "nano-degree", "academic_degree": "diploma"}


@dataclass(frozen=True)
class ToolOutcome:
    """Text for the model plus the structured payload the widget renders."""

    summary: str
    structured: Optional[Dict[str, Any]] = None

    @property
    def found(self) -> bool:
        return self.structured is not None

    @property
    def count(self) -> int:
        if self.structured is None:
            return 0
        return len(self.structured.get("programs", []))


def _payloads(programs: List[Program]) -> List[Dict[str, Any]]:
    return [program.to_payload() for program in programs]


def _format_amount(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


class ProgramService:
    def __init__(self, catalog: ProgramCatalog, index: KeywordIndex, result_limit: int = 10) -> None:
        self.catalog = catalog
        self.index = index
        self.result_limit = result_limit

    def search(self, query: str) -> ToolOutcome:
        results = rank_programs(self.catalog.list(), query, self.index)[: self.result_limit]
        if results:
            titles = "، ".join(program.title for program in results)
            summary = f'Found {len(results)} programs matching "{query}": {titles}'
        else:
            summary = (
                f'No programs found matching "{query}". Try different keywords like: '
                f"{', '.join(SUGGESTED_KEYWORDS)}."
            )
        return ToolOutcome(
            summary=summary,
            structured={"programs": _payloads(results), "action": "search_results", "query": query},
        )

    def list(self, criteria: ProgramFilter) -> ToolOutcome:
        results = filter_programs(self.catalog.list(), criteria)[: self.result_limit]
        if results:
            type_label = TYPE_LABELS.get(criteria.type or "", "all")
            summary = f"Found {len(results)} {type_label} programs"
            if criteria.organization:
                summary += f' from "{criteria.organization}"'
            if criteria.max_price is not None:
                summary += f" under {_format_amount(criteria.max_price)} SAR"
            summary += "."
        else:
            summary = "No programs found with the given filters."
        return ToolOutcome(
            summary=summary,
            structured={"programs": _payloads(results), "action": "list_results"},
        )

    def enroll(self, program_id: int) -> ToolOutcome:
        program = self.catalog.get(program_id)
        if program is None:
            return ToolOutcome(summary=f"Program with ID {program_id} not found.")
        return ToolOutcome(
            summary=(
                f'Successfully enrolled in "{program.title}" from {program.organization.name}. '
                "This is a simulated enrollment for demonstration purposes."
            ),
            structured={"program": program.to_payload(), "action": "enrollment_success"},
        )
