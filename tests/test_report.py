"""Tests for sublinks.report module."""
from sublinks.report import SECTION_TITLE, build_payload, link_target, render_text
from sublinks.types import Heading, Mention, ScanResult

ROADMAP = Heading("Project Roadmap", 1, 0)
BUDGET = Heading("Budget Review", 2, 2)
MENTIONS = (
    Mention("Projects/Plan.md", ROADMAP, "project roadmap"),
    Mention("Projects/Plan.md", BUDGET, "budget review"),
    Mention("Finance.md", BUDGET, "budget"),
)


class TestLinkTarget:
    def test_path_and_heading(self) -> None:
        assert link_target(MENTIONS[0]) == "Projects/Plan.md#Project Roadmap"


class TestRenderText:
    def test_empty(self) -> None:
        assert render_text([]) == ""

    def test_grouped_output(self) -> None:
        out = render_text(MENTIONS)
        lines = out.splitlines()
        assert lines[0] == SECTION_TITLE
        assert lines[1] == "Plan"
        assert lines[2].strip().startswith("# Project Roadmap")
        assert lines[3].strip().startswith("## Budget Review")
        assert lines[4] == "Finance"
        assert '"budget"' in lines[5]


class TestBuildPayload:
    def test_shape(self) -> None:
        result = ScanResult(
            mentions=MENTIONS,
            phrase_count=42,
            documents_scanned=3,
            skipped=("Broken.md",),
        )
        payload = build_payload(result, "Active.md")
        assert payload["active_document_id"] == "Active.md"
        assert payload["mention_count"] == 3
        assert payload["skipped"] == ["Broken.md"]
        docs = payload["documents"]
        assert [d["document_id"] for d in docs] == ["Projects/Plan.md", "Finance.md"]
        assert docs[0]["title"] == "Plan"
        first = docs[0]["mentions"][0]
        assert first["heading"] == {"text": "Project Roadmap", "level": 1, "line_number": 0}
        assert first["matched_phrase"] == "project roadmap"
        assert first["link"] == "Projects/Plan.md#Project Roadmap"

    def test_empty_result(self) -> None:
        payload = build_payload(ScanResult((), 0, 0), "Active.md")
        assert payload["documents"] == []
        assert payload["mention_count"] == 0
