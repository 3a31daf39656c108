"""Detect unlinked mentions of other notes' subheadings."""

from sublinks.config import (
    LEVEL_PRESETS,
    ScanConfig,
    load_config,
    resolve_config,
    save_config,
)
from sublinks.headings import extract_headings
from sublinks.phrases import extract_phrases
from sublinks.scanner import group_mentions_by_document, run_scan, scan
from sublinks.textmatch import first_matching_phrase, is_significant_mention
from sublinks.types import (
    CandidateDocument,
    Heading,
    Mention,
    ScanResult,
    mention_to_dict,
)

__all__ = [
    "CandidateDocument",
    "Heading",
    "LEVEL_PRESETS",
    "Mention",
    "ScanConfig",
    "ScanResult",
    "extract_headings",
    "extract_phrases",
    "first_matching_phrase",
    "group_mentions_by_document",
    "is_significant_mention",
    "load_config",
    "mention_to_dict",
    "resolve_config",
    "run_scan",
    "save_config",
    "scan",
]
