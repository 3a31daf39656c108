"""Scan a set of notes for unlinked mentions of their subheadings.

The active note's phrases are extracted once; every candidate note is
then loaded, its headings extracted, and each heading tested against the
phrases in order. The first matching phrase wins and at most one mention
is produced per (note, heading).

Candidate notes are assumed to be pre-filtered: the active note itself
and excluded folders never reach this module.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, TypeAlias

from sublinks.config import ScanConfig, resolve_config
from sublinks.headings import extract_headings
from sublinks.phrases import extract_phrases
from sublinks.textmatch import first_matching_phrase
from sublinks.types import CandidateDocument, Mention, ScanResult

log = logging.getLogger(__name__)

DocumentInput: TypeAlias = CandidateDocument | tuple[str, str]


def _as_candidate(doc: DocumentInput) -> CandidateDocument:
    if isinstance(doc, CandidateDocument):
        return doc
    doc_id, text = doc
    return CandidateDocument.from_text(str(doc_id), text)


def mentions_in_document(
    doc_id: str,
    text: str,
    phrases: Sequence[str],
    config: ScanConfig,
) -> list[Mention]:
    """Match one note's headings against the active note's phrases."""
    mentions: list[Mention] = []
    if not phrases:
        return mentions
    for heading in extract_headings(text, config):
        phrase = first_matching_phrase(heading.text, phrases)
        if phrase is not None:
            mentions.append(
                Mention(source_document_id=doc_id, heading=heading, matched_phrase=phrase)
            )
    return mentions


def _scan_one(
    doc: CandidateDocument,
    phrases: Sequence[str],
    config: ScanConfig,
) -> list[Mention] | None:
    """Load and scan a single note; None means the note was skipped."""
    try:
        text = doc.load()
        return mentions_in_document(doc.doc_id, text or "", phrases, config)
    except Exception as exc:
        log.warning("Skipping %s: %s", doc.doc_id, exc)
        return None


def run_scan(
    active_text: str | None,
    others: Iterable[DocumentInput],
    config: ScanConfig | Mapping[str, Any] | None = None,
    *,
    workers: int = 1,
) -> ScanResult:
    """Scan candidate notes and report mentions plus skipped note ids.

    With ``workers > 1`` the per-note work runs on a thread pool; results
    are merged back in input order so the output does not depend on
    scheduling.
    """
    cfg = resolve_config(config)
    phrases = extract_phrases(active_text)
    docs = [_as_candidate(d) for d in others]
    log.debug("Scanning %d notes against %d phrases", len(docs), len(phrases))

    per_doc: list[list[Mention] | None] = [None] * len(docs)
    if workers > 1 and len(docs) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = {
                pool.submit(_scan_one, doc, phrases, cfg): idx
                for idx, doc in enumerate(docs)
            }
            for future in as_completed(futures):
                per_doc[futures[future]] = future.result()
    else:
        for idx, doc in enumerate(docs):
            per_doc[idx] = _scan_one(doc, phrases, cfg)

    mentions: list[Mention] = []
    skipped: list[str] = []
    for doc, found in zip(docs, per_doc):
        if found is None:
            skipped.append(doc.doc_id)
        else:
            mentions.extend(found)

    return ScanResult(
        mentions=tuple(mentions),
        phrase_count=len(phrases),
        documents_scanned=len(docs) - len(skipped),
        skipped=tuple(skipped),
    )


def scan(
    active_text: str | None,
    others: Iterable[DocumentInput],
    config: ScanConfig | Mapping[str, Any] | None = None,
    *,
    workers: int = 1,
) -> list[Mention]:
    """Return the mentions of other notes' headings in ``active_text``.

    ``others`` holds :class:`CandidateDocument` items or plain
    ``(doc_id, text)`` pairs. Notes that fail to load are skipped.
    """
    return list(run_scan(active_text, others, config, workers=workers).mentions)


def group_mentions_by_document(mentions: Iterable[Mention]) -> dict[str, list[Mention]]:
    """Group mentions by source note, keeping first-seen note order."""
    grouped: dict[str, list[Mention]] = {}
    for mention in mentions:
        grouped.setdefault(mention.source_document_id, []).append(mention)
    return grouped
