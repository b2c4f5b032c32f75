"""Report how many catalog programs each keyword-index entry reaches."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from educonnect_mcp.catalog import load_catalog
from educonnect_mcp.services.keywords import load_keyword_index
from educonnect_mcp.services.ranking import rank_programs


def build_report() -> Dict[str, Any]:
    catalog = load_catalog()
    index = load_keyword_index()
    programs = catalog.list()
    entries: List[Dict[str, Any]] = []
    for term in sorted(index):
        matches = rank_programs(programs, term, index)
        entries.append(
            {
                "term": term,
                "keywords": list(index[term]),
                "match_count": len(matches),
                "top_ids": [program.id for program in matches[:5]],
            }
        )
    return {
        "program_count": len(programs),
        "term_count": len(entries),
        "dead_terms": [entry["term"] for entry in entries if entry["match_count"] == 0],
        "terms": entries,
    }


def main() -> None:
    report = build_report()
    output = Path("reports/keyword_coverage.json")
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(report, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"Wrote {output} ({report['term_count']} terms, {len(report['dead_terms'])} dead)")


if __name__ == "__main__":
    main()
