import logging

import pytest
from cachetools import TTLCache

import server


def test_rate_limit_blocks_after_quota(monkeypatch, mocker):
    monkeypatch.setattr(server, "RATE_LIMITS", TTLCache(maxsize=8, ttl=60))
    mocker.patch.dict(server.RATE_LIMITS_PER_TOOL, {"search_programs": 2})

    server.enforce_rate_limit("search_programs")
    server.enforce_rate_limit("search_programs")
    with pytest.raises(RuntimeError, match="Rate limit reached"):
        server.enforce_rate_limit("search_programs")


@pytest.mark.asyncio
async def test_enroll_tool_audits_not_found(monkeypatch, caplog):
    monkeypatch.setattr(server, "RATE_LIMITS", TTLCache(maxsize=8, ttl=60))
    with caplog.at_level(logging.INFO, logger="server"):
        result = await server.enroll_in_program(program_id=31337)

    assert result.structured_content is None
    assert result.content[0].text == "Program with ID 31337 not found."
    record = next(r for r in caplog.records if r.getMessage() == "tool_event enroll_in_program")
    assert record.status == "not_found"
    assert record.details == {"program_id": 31337}


@pytest.mark.asyncio
async def test_search_tool_wraps_structured_content(monkeypatch):
    monkeypatch.setattr(server, "RATE_LIMITS", TTLCache(maxsize=8, ttl=60))
    result = await server.search_programs(query="")
    assert result.structured_content == {"programs": [], "action": "search_results", "query": ""}
