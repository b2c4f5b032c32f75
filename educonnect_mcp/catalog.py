"""Program catalog loaded once from the static JSON data file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from educonnect_mcp.config import settings
from educonnect_mcp.errors import CatalogLoadError

logger = logging.getLogger(__name__)

ProgramType = Literal["academic_degree", "nanodegree"]


class Organization(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    name: str
    logo: str = ""


class RatingResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    rating_count: int = 0
    rating_avg: Union[int, float] = 0


class Program(BaseModel):
    """A catalog entry. Fields not modelled here are kept as extras and echoed back."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: int
    type: ProgramType
    title: str
    summary: str = ""
    price: Optional[str] = None
    additional_price: Optional[str] = None
    organization: Organization
    image: Optional[str] = None
    learning_type: Optional[str] = None
    courses_count: Optional[int] = None
    enroll_date_start: Optional[str] = None
    enroll_date_end: Optional[str] = None
    total_pathways_price: Optional[Union[int, float]] = None
    academic_degree_type_label: Optional[str] = None
    rating_result: Optional[RatingResult] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True)


class ProgramCatalog:
    def __init__(self, programs_path: Path) -> None:
        self.programs_path = programs_path
        self._programs: tuple[Program, ...] = ()
        self._by_id: Dict[int, Program] = {}

    def load(self) -> None:
        if not self.programs_path.exists():
            raise CatalogLoadError(f"Programs file not found: {self.programs_path}")

        try:
            raw = json.loads(self.programs_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise CatalogLoadError(f"Programs file is not valid JSON: {self.programs_path}") from exc

        entries = raw.get("nano_degrees") if isinstance(raw, dict) else raw
        if not isinstance(entries, list):
            raise CatalogLoadError("Programs file must hold a 'nano_degrees' list")

        self.replace(self._parse(entries))
        logger.info("catalog_loaded", extra={"count": len(self._programs)})

    def replace(self, programs: Sequence[Program]) -> None:
        by_id: Dict[int, Program] = {}
        for program in programs:
            if program.id in by_id:
                raise CatalogLoadError(f"Duplicate program id={program.id}")
            by_id[program.id] = program
        self._programs = tuple(programs)
        self._by_id = by_id

    @staticmethod
    def _parse(entries: List[Any]) -> List[Program]:
        parsed: List[Program] = []
        for entry in entries:
            try:
                parsed.append(Program.model_validate(entry))
            except ValidationError as exc:
                raise CatalogLoadError(f"Invalid program definition: {entry!r:.200}") from exc
        return parsed

    def get(self, program_id: int) -> Optional[Program]:
        return self._by_id.get(program_id)

    def list(self) -> tuple[Program, ...]:
        return self._programs

    def __len__(self) -> int:
        return len(self._programs)


def load_catalog() -> ProgramCatalog:
    catalog = ProgramCatalog(settings.programs_path)
    catalog.load()
    return catalog
