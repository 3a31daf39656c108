"""Scan configuration and its persisted settings file.

The configuration is owned by the host; every core call re-validates it
through :func:`resolve_config`, so bad values degrade to fewer matches
instead of failures.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import orjson

from sublinks.io_utils import load_json, save_json

log = logging.getLogger(__name__)

VALID_HEADING_LEVELS: frozenset[int] = frozenset(range(1, 7))
DEFAULT_HEADING_LEVELS: frozenset[int] = frozenset({1, 2, 3})
DEFAULT_MIN_HEADING_TEXT_LENGTH = 3

# Level choices offered by the settings dropdown, keyed by stored value.
LEVEL_PRESETS: dict[str, str] = {
    "1": "Level 1 only",
    "1,2": "Levels 1-2",
    "1,2,3": "Levels 1-3",
    "1,2,3,4": "Levels 1-4",
    "1,2,3,4,5,6": "All levels",
}

# Stored settings use the host's camelCase keys; snake_case is accepted too.
_KEY_ALIASES: dict[str, str] = {
    "includeHeadingLevels": "include_heading_levels",
    "minHeadingTextLength": "min_heading_text_length",
    "excludeFolders": "exclude_folders",
}


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Which headings count and which folders are out of bounds."""

    include_heading_levels: frozenset[int] = DEFAULT_HEADING_LEVELS
    min_heading_text_length: int = DEFAULT_MIN_HEADING_TEXT_LENGTH
    exclude_folders: tuple[str, ...] = field(default=())

    def to_settings(self) -> dict[str, Any]:
        """Return the camelCase settings shape written to disk."""
        return {
            "includeHeadingLevels": sorted(self.include_heading_levels),
            "minHeadingTextLength": self.min_heading_text_length,
            "excludeFolders": list(self.exclude_folders),
        }


def coerce_levels(raw: Any) -> frozenset[int]:
    """Clean a heading-level selection, dropping anything outside 1..6.

    Accepts an iterable of ints (or int-like strings) or the dropdown's
    comma-separated form such as ``"1,2,3"``.
    """
    if raw is None:
        return DEFAULT_HEADING_LEVELS
    if isinstance(raw, str):
        items: Iterable[Any] = raw.split(",")
    elif isinstance(raw, int) and not isinstance(raw, bool):
        items = (raw,)
    elif isinstance(raw, Iterable):
        items = raw
    else:
        return frozenset()

    levels: set[int] = set()
    for item in items:
        if isinstance(item, bool):
            continue
        if isinstance(item, str):
            try:
                item = int(item.strip())
            except ValueError:
                continue
        if isinstance(item, int) and item in VALID_HEADING_LEVELS:
            levels.add(item)
    return frozenset(levels)


def coerce_min_length(raw: Any) -> int:
    """Clean the minimum heading length; non-numbers fall back to the default.

    A fractional length is rounded up, since no heading can be 4.5
    characters long and ``>= 4.5`` admits the same headings as ``>= 5``.
    """
    if raw is None or isinstance(raw, bool):
        return DEFAULT_MIN_HEADING_TEXT_LENGTH
    if isinstance(raw, float):
        if not math.isfinite(raw):
            return DEFAULT_MIN_HEADING_TEXT_LENGTH
        raw = math.ceil(raw)
    if isinstance(raw, str):
        try:
            raw = int(raw.strip())
        except ValueError:
            return DEFAULT_MIN_HEADING_TEXT_LENGTH
    if not isinstance(raw, int):
        return DEFAULT_MIN_HEADING_TEXT_LENGTH
    return max(1, raw)


def coerce_exclude_folders(raw: Any) -> tuple[str, ...]:
    """Clean excluded folder prefixes.

    A string is treated as one prefix per line (the settings text area).
    Blank entries are dropped; the remaining prefixes are kept as typed
    apart from surrounding whitespace.
    """
    if raw is None:
        return ()
    if isinstance(raw, str):
        items: Iterable[Any] = raw.split("\n")
    elif isinstance(raw, Iterable):
        items = raw
    else:
        return ()
    out: list[str] = []
    for item in items:
        if not isinstance(item, str):
            continue
        folder = item.strip()
        if folder and folder not in out:
            out.append(folder)
    return tuple(out)


def resolve_config(raw: ScanConfig | Mapping[str, Any] | None = None) -> ScanConfig:
    """Return a validated :class:`ScanConfig` from whatever the host supplied.

    Missing keys take their defaults, so stored settings behave as if
    merged over the defaults.
    """
    if raw is None:
        return ScanConfig()
    if isinstance(raw, ScanConfig):
        values: dict[str, Any] = {
            "include_heading_levels": raw.include_heading_levels,
            "min_heading_text_length": raw.min_heading_text_length,
            "exclude_folders": raw.exclude_folders,
        }
    elif isinstance(raw, Mapping):
        values = {_KEY_ALIASES.get(str(k), str(k)): v for k, v in raw.items()}
    else:
        log.debug("Ignoring unsupported config of type %s", type(raw).__name__)
        return ScanConfig()

    return ScanConfig(
        include_heading_levels=coerce_levels(values.get("include_heading_levels")),
        min_heading_text_length=coerce_min_length(values.get("min_heading_text_length")),
        exclude_folders=coerce_exclude_folders(values.get("exclude_folders")),
    )


def load_config(path: Path) -> ScanConfig:
    """Load settings from a JSON file, falling back to defaults.

    A missing file is normal (first run). A file that cannot be read or
    parsed is logged and ignored.
    """
    if not path.exists():
        return ScanConfig()
    try:
        raw = load_json(path)
    except (OSError, orjson.JSONDecodeError) as exc:
        log.warning("Could not read settings %s: %s; using defaults", path, exc)
        return ScanConfig()
    if not isinstance(raw, dict):
        log.warning("Settings %s is not a JSON object; using defaults", path)
        return ScanConfig()
    return resolve_config(raw)


def save_config(config: ScanConfig, path: Path) -> None:
    """Persist settings in the camelCase shape :func:`load_config` reads."""
    save_json(resolve_config(config).to_settings(), path)
