"""Core record types for subheading mention detection."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Heading:
    """A markdown heading found in one note."""

    text: str           # trimmed, non-empty
    level: int          # 1..6, the run length of leading '#'
    line_number: int    # 0-based


@dataclass(frozen=True, slots=True)
class Mention:
    """A phrase in the active note that fuzzily names a heading elsewhere."""

    source_document_id: str
    heading: Heading
    matched_phrase: str


@dataclass(frozen=True, slots=True)
class CandidateDocument:
    """A note to scan for headings, loaded lazily.

    ``load`` may raise; the scanner treats any failure as "skip this note".
    """

    doc_id: str
    load: Callable[[], str]

    @classmethod
    def from_text(cls, doc_id: str, text: str) -> CandidateDocument:
        return cls(doc_id=doc_id, load=lambda: text)


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Mentions from one scan plus bookkeeping about what was read."""

    mentions: tuple[Mention, ...]
    phrase_count: int
    documents_scanned: int
    skipped: tuple[str, ...] = field(default=())


def heading_to_dict(heading: Heading) -> dict[str, Any]:
    return {
        "text": heading.text,
        "level": heading.level,
        "line_number": heading.line_number,
    }


def mention_to_dict(mention: Mention) -> dict[str, Any]:
    """Serialize a mention into a JSON-compatible dict."""
    return {
        "source_document_id": mention.source_document_id,
        "heading": heading_to_dict(mention.heading),
        "matched_phrase": mention.matched_phrase,
    }
