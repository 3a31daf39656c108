"""Markdown heading extraction.

A line is a heading when it starts with 1-6 ``#`` characters, then at
least one whitespace character, then some text. Code fences are not
tracked: a ``#`` line inside a fence is still a heading.
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from sublinks.config import ScanConfig, resolve_config
from sublinks.types import Heading

_HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")


def extract_headings(
    text: str | None,
    config: ScanConfig | Mapping[str, Any] | None = None,
) -> list[Heading]:
    """Return the headings of one note in document order.

    Only headings whose level is in ``config.include_heading_levels`` and
    whose trimmed text is at least ``config.min_heading_text_length``
    characters long are kept. Lines that do not look like headings are
    skipped, never reported.
    """
    if not text:
        return []
    cfg = resolve_config(config)
    headings: list[Heading] = []
    for line_number, line in enumerate(text.split("\n")):
        m = _HEADING_RE.match(line)
        if m is None:
            continue
        level = len(m.group(1))
        heading_text = m.group(2).strip()
        if level not in cfg.include_heading_levels:
            continue
        if len(heading_text) < cfg.min_heading_text_length:
            continue
        headings.append(Heading(text=heading_text, level=level, line_number=line_number))
    return headings
