"""Presentation adapter: turn scan results into text or JSON payloads."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from sublinks.scanner import group_mentions_by_document
from sublinks.types import Mention, ScanResult, mention_to_dict
from sublinks.vault import note_title

SECTION_TITLE = "Unlinked Subheading Mentions"


def link_target(mention: Mention) -> str:
    """Navigable reference for a mention: ``<note id>#<heading text>``."""
    return f"{mention.source_document_id}#{mention.heading.text}"


def render_text(mentions: Iterable[Mention]) -> str:
    """Render mentions grouped by note; empty string when there are none."""
    grouped = group_mentions_by_document(mentions)
    if not grouped:
        return ""
    lines = [SECTION_TITLE]
    for doc_id, doc_mentions in grouped.items():
        lines.append(note_title(doc_id))
        for m in doc_mentions:
            marker = "#" * m.heading.level
            lines.append(f"  {marker} {m.heading.text}  <- \"{m.matched_phrase}\"")
    return "\n".join(lines) + "\n"


def build_payload(result: ScanResult, active_id: str) -> dict[str, Any]:
    """JSON-compatible summary of one scan."""
    grouped = group_mentions_by_document(result.mentions)
    return {
        "active_document_id": active_id,
        "phrase_count": result.phrase_count,
        "documents_scanned": result.documents_scanned,
        "mention_count": len(result.mentions),
        "skipped": list(result.skipped),
        "documents": [
            {
                "document_id": doc_id,
                "title": note_title(doc_id),
                "mentions": [
                    {**mention_to_dict(m), "link": link_target(m)}
                    for m in doc_mentions
                ],
            }
            for doc_id, doc_mentions in grouped.items()
        ],
    }
