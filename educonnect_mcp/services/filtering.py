"""Structural filters over the program catalog."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from educonnect_mcp.catalog import Program

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_price(value: Optional[str]) -> float:
    """Parse a numeric-as-text price.

    The leading decimal literal is used, so ``"300.50 SAR"`` is 300.5.
    Missing values, empty strings and text that does not start with a
    number count as 0.
    """
    if value is None:
        return 0.0
    match = _LEADING_NUMBER.match(str(value))
    if not match:
        return 0.0
    parsed = float(match.group(0))
    return parsed if math.isfinite(parsed) else 0.0


def effective_price(program: Program) -> float:
    return parse_price(program.price) + parse_price(program.additional_price)


@dataclass(frozen=True)
class ProgramFilter:
    type: Optional[str] = None
    organization: Optional[str] = None
    max_price: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return not self.type and not self.organization and self.max_price is None

    def matches(self, program: Program) -> bool:
        if self.type and program.type != self.type:
            return False
        if self.organization and self.organization not in program.organization.name:
            return False
        if self.max_price is not None and effective_price(program) > self.max_price:
            return False
        return True


def filter_programs(programs: Sequence[Program], criteria: ProgramFilter) -> list[Program]:
    if criteria.is_empty:
        return list(programs)
    return [program for program in programs if criteria.matches(program)]
