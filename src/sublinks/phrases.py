"""Candidate phrase extraction from note prose.

Phrases are the fragments of the active note that might name a heading
in another note: long single words, and every two- and three-word run
within a sentence. No part-of-speech tagging or stemming is applied;
casing and punctuation are kept as written and only normalized at match
time.
"""
from __future__ import annotations

import re

# Non-greedy, so adjacent blocks are removed separately.
_CODE_FENCE_RE = re.compile(r"```[\s\S]*?```")
_FRONT_MATTER_RE = re.compile(r"---[\s\S]*?---")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")

MIN_WORD_LENGTH = 3       # shorter words are dropped before forming phrases
MIN_UNIGRAM_LENGTH = 5    # single words shorter than this are not phrases


def strip_fenced_blocks(text: str) -> str:
    """Delete fenced code blocks, then ``---`` delimited blocks."""
    return _FRONT_MATTER_RE.sub("", _CODE_FENCE_RE.sub("", text))


def split_sentences(text: str) -> list[str]:
    """Split on runs of ``.``, ``!`` or ``?``, dropping blank pieces."""
    return [s for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]


def sentence_words(sentence: str) -> list[str]:
    """Whitespace-split a sentence, keeping words of 3+ characters."""
    return [w for w in sentence.split() if len(w) >= MIN_WORD_LENGTH]


def _sentence_phrases(words: list[str]) -> list[str]:
    phrases = [w for w in words if len(w) >= MIN_UNIGRAM_LENGTH]
    phrases.extend(" ".join(words[i:i + 2]) for i in range(len(words) - 1))
    phrases.extend(" ".join(words[i:i + 3]) for i in range(len(words) - 2))
    return phrases


def extract_phrases(text: str | None) -> list[str]:
    """Return the deduplicated candidate phrases of a note.

    Ordered by descending length, ties broken lexically, so the longest
    and most specific phrase is the one tried first against each heading.
    Sentences with fewer than two qualifying words contribute nothing.
    """
    if not text:
        return []
    found: set[str] = set()
    for sentence in split_sentences(strip_fenced_blocks(text)):
        words = sentence_words(sentence)
        if len(words) <= 1:
            continue
        found.update(_sentence_phrases(words))
    return sorted(found, key=lambda p: (-len(p), p))
