"""Phrase-to-heading matching primitives.

Pure text operations with zero domain dependencies. A phrase is a
significant mention of a heading when, compared case-insensitively, the
heading contains the phrase and the phrase covers enough of the heading.
There is no word-boundary check, so a phrase may match inside a longer
word.
"""
from __future__ import annotations

from collections.abc import Iterable

MIN_PHRASE_LENGTH = 3
# Fraction of the heading's length a phrase must cover.
MIN_HEADING_COVERAGE = 0.4


def is_significant_mention(phrase: str, heading_text: str) -> bool:
    """Check whether ``phrase`` counts as a mention of ``heading_text``.

    Args:
        phrase: Candidate phrase from the active note.
        heading_text: Heading text from another note.

    Returns:
        True when the phrase is at least 3 characters, at least 40% of
        the heading's length, and a contiguous substring of the heading
        (ignoring case).
    """
    p = phrase.lower()
    h = heading_text.lower()
    return (
        len(p) >= MIN_PHRASE_LENGTH
        and len(p) >= len(h) * MIN_HEADING_COVERAGE
        and p in h
    )


def first_matching_phrase(heading_text: str, phrases: Iterable[str]) -> str | None:
    """Return the first phrase that mentions ``heading_text``, or None.

    Iteration stops at the first hit, so the order of ``phrases`` decides
    which phrase is reported.
    """
    for phrase in phrases:
        if is_significant_mention(phrase, heading_text):
            return phrase
    return None
