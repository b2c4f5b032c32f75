from pathlib import Path

from educonnect_mcp.catalog import Program, ProgramCatalog
from educonnect_mcp.services.filtering import ProgramFilter
from educonnect_mcp.services.keywords import KeywordIndex
from educonnect_mcp.services.programs import ProgramService


def _program(program_id: int, title: str, program_type: str = "nanodegree", price: str = "0") -> Program:
    return Program(
        id=program_id,
        type=program_type,
        title=title,
        summary="",
        price=price,
        additional_price="0",
        organization={"id": "tuwaiq", "name": "أكاديمية طويق", "logo": ""},
    )


def _service(programs, result_limit: int = 10) -> ProgramService:
    catalog = ProgramCatalog(Path("unused.json"))
    catalog.replace(programs)
    index = KeywordIndex({"data": ["بيانات"], "cloud": ["سحاب"]})
    return ProgramService(catalog, index, result_limit=result_limit)


def test_search_summary_lists_titles():
    service = _service([_program(1, "تحليل البيانات"), _program(2, "الحوسبة السحابية")])
    outcome = service.search("data")
    assert outcome.summary == 'Found 1 programs matching "data": تحليل البيانات'
    assert outcome.structured["action"] == "search_results"
    assert outcome.structured["query"] == "data"
    assert [p["id"] for p in outcome.structured["programs"]] == [1]


def test_search_without_hits_suggests_keywords():
    outcome = _service([_program(1, "تحليل البيانات")]).search("astronomy")
    assert outcome.summary.startswith('No programs found matching "astronomy".')
    assert "software, cyber, health" in outcome.summary
    assert outcome.structured["programs"] == []


def test_search_is_capped():
    programs = [_program(i, f"البيانات {i}") for i in range(1, 13)]
    outcome = _service(programs).search("data")
    assert outcome.count == 10
    assert [p["id"] for p in outcome.structured["programs"]] == list(range(1, 11))


def test_list_summary_mentions_filters():
    service = _service(
        [
            _program(1, "برنامج", price="300"),
            _program(2, "دبلوم", program_type="academic_degree", price="9000"),
        ]
    )
    outcome = service.list(ProgramFilter(type="nanodegree", organization="طويق", max_price=500))
    assert outcome.summary == 'Found 1 nano-degree programs from "طويق" under 500 SAR.'
    assert outcome.structured == {"programs": [outcome.structured["programs"][0]], "action": "list_results"}

    outcome = service.list(ProgramFilter(type="academic_degree"))
    assert outcome.summary == "Found 1 diploma programs."

    outcome = service.list(ProgramFilter())
    assert outcome.summary == "Found 2 all programs."


def test_list_without_matches():
    outcome = _service([_program(1, "برنامج", price="900")]).list(ProgramFilter(max_price=100))
    assert outcome.summary == "No programs found with the given filters."
    assert outcome.structured == {"programs": [], "action": "list_results"}


def test_list_is_capped():
    programs = [_program(i, f"برنامج {i}") for i in range(1, 16)]
    outcome = _service(programs).list(ProgramFilter())
    assert outcome.count == 10


def test_enroll_returns_program_unchanged():
    program = _program(4, "الحوسبة السحابية")
    outcome = _service([program]).enroll(4)
    assert outcome.found
    assert outcome.structured == {"program": program.to_payload(), "action": "enrollment_success"}
    assert outcome.summary == (
        'Successfully enrolled in "الحوسبة السحابية" from أكاديمية طويق. '
        "This is a simulated enrollment for demonstration purposes."
    )


def test_enroll_unknown_program_is_not_an_error():
    outcome = _service([_program(4, "الحوسبة السحابية")]).enroll(404)
    assert not outcome.found
    assert outcome.structured is None
    assert outcome.summary == "Program with ID 404 not found."


def test_list_summary_keeps_price_as_given():
    service = _service([_program(1, "برنامج", price="300")])
    outcome = service.list(ProgramFilter(max_price=500.555))
    assert outcome.summary == "Found 1 all programs under 500.555 SAR."

    outcome = service.list(ProgramFilter(max_price=2500000))
    assert outcome.summary == "Found 1 all programs under 2500000 SAR."
