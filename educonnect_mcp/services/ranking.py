"""Bilingual keyword ranking for program search."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from educonnect_mcp.catalog import Program

TITLE_WEIGHT = 3
SUMMARY_WEIGHT = 1


def tokenize(query: str) -> list[str]:
    return query.lower().split()


def score_program(
    program: Program,
    tokens: Sequence[str],
    index: Mapping[str, Sequence[str]],
) -> int:
    """Title hits weigh 3, summary hits weigh 1, per keyword present (not per occurrence)."""
    title = program.title.lower()
    summary = program.summary.lower()

    def keyword_score(keywords: Iterable[str]) -> int:
        total = 0
        for keyword in keywords:
            if keyword in title:
                total += TITLE_WEIGHT
            if keyword in summary:
                total += SUMMARY_WEIGHT
        return total

    total = 0
    for token in tokens:
        total += keyword_score(index.get(token, ()))
    # multi-word entries such as "machine learning" are keyed by the whole phrase
    total += keyword_score(index.get(" ".join(tokens), ()))
    return total


def rank_programs(
    programs: Sequence[Program],
    query: str,
    index: Mapping[str, Sequence[str]],
) -> list[Program]:
    tokens = tokenize(query)
    if not tokens:
        return []
    scored = [(score_program(program, tokens, index), program) for program in programs]
    # sorted() is stable, so equal scores keep catalog order
    ranked = sorted((item for item in scored if item[0] > 0), key=lambda item: item[0], reverse=True)
    return [program for _, program in ranked]
