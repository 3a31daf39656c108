"""Tests for sublinks.headings module."""
from sublinks.config import ScanConfig
from sublinks.headings import extract_headings
from sublinks.types import Heading


SAMPLE_NOTE = """# Intro

Some text
## Getting Started
### Install Steps
#### Deep Detail
"""


class TestExtractHeadings:
    def test_intro_and_getting_started(self) -> None:
        text = "# Intro\n\nSome text\n## Getting Started\n"
        cfg = ScanConfig(include_heading_levels=frozenset({1, 2, 3}), min_heading_text_length=3)
        assert extract_headings(text, cfg) == [
            Heading(text="Intro", level=1, line_number=0),
            Heading(text="Getting Started", level=2, line_number=3),
        ]

    def test_default_levels_skip_level_four(self) -> None:
        texts = [h.text for h in extract_headings(SAMPLE_NOTE)]
        assert texts == ["Intro", "Getting Started", "Install Steps"]

    def test_all_levels(self) -> None:
        cfg = ScanConfig(include_heading_levels=frozenset(range(1, 7)))
        levels = [h.level for h in extract_headings(SAMPLE_NOTE, cfg)]
        assert levels == [1, 2, 3, 4]

    def test_min_length_filters_short_text(self) -> None:
        cfg = ScanConfig(min_heading_text_length=6)
        texts = [h.text for h in extract_headings(SAMPLE_NOTE, cfg)]
        assert "Intro" not in texts
        assert "Getting Started" in texts

    def test_text_is_trimmed(self) -> None:
        headings = extract_headings("##   Padded Title   \n")
        assert headings[0].text == "Padded Title"

    def test_crlf_line_endings(self) -> None:
        headings = extract_headings("# Windows Note\r\nbody\r\n")
        assert headings == [Heading(text="Windows Note", level=1, line_number=0)]

    def test_requires_space_after_hashes(self) -> None:
        assert extract_headings("#hashtag\n##NoSpace\n") == []

    def test_seven_hashes_not_a_heading(self) -> None:
        cfg = ScanConfig(include_heading_levels=frozenset(range(1, 7)))
        assert extract_headings("####### Too Deep\n", cfg) == []

    def test_indented_hash_not_a_heading(self) -> None:
        assert extract_headings("  # Indented\n") == []

    def test_blank_heading_text_rejected(self) -> None:
        assert extract_headings("#    \n") == []

    def test_heading_inside_code_fence_still_counts(self) -> None:
        text = "```\n# Inside Fence\n```\n"
        assert [h.text for h in extract_headings(text)] == ["Inside Fence"]

    def test_empty_and_none_input(self) -> None:
        assert extract_headings("") == []
        assert extract_headings(None) == []

    def test_mapping_config(self) -> None:
        cfg = {"includeHeadingLevels": [2], "minHeadingTextLength": 3}
        texts = [h.text for h in extract_headings(SAMPLE_NOTE, cfg)]
        assert texts == ["Getting Started"]

    def test_invalid_config_degrades(self) -> None:
        cfg = {"includeHeadingLevels": [0, 9, "x"], "minHeadingTextLength": -5}
        assert extract_headings(SAMPLE_NOTE, cfg) == []

    def test_unicode_digit_level_ignored(self) -> None:
        cfg = {"includeHeadingLevels": "1,\u00b2"}
        assert extract_headings("# Intro Text\n## Second Part\n", cfg) == [
            Heading(text="Intro Text", level=1, line_number=0),
        ]

    def test_kept_headings_respect_filters(self) -> None:
        cfg = ScanConfig(include_heading_levels=frozenset({2, 4}), min_heading_text_length=4)
        text = "# One\n## Two\n## Three\n#### Four\n#### abc\n"
        for h in extract_headings(text, cfg):
            assert h.level in cfg.include_heading_levels
            assert len(h.text) >= cfg.min_heading_text_length

    def test_idempotent(self) -> None:
        assert extract_headings(SAMPLE_NOTE) == extract_headings(SAMPLE_NOTE)
