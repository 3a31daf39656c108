"""I/O helpers for settings JSON and note text.

JSON goes through orjson. Note reads decode UTF-8 first, then fall back
the way notes exported from older editors need.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson


def load_json(path: Path) -> Any:
    """Load JSON from a file."""
    return orjson.loads(path.read_bytes())


def save_json(obj: Any, path: Path, *, pretty: bool = True) -> None:
    """Save an object as JSON, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    opts = orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS if pretty else orjson.OPT_SORT_KEYS
    path.write_bytes(orjson.dumps(obj, option=opts))


def dumps_json(obj: Any, *, pretty: bool = True) -> bytes:
    """Serialize an object to JSON bytes with a trailing newline."""
    opts = orjson.OPT_INDENT_2 if pretty else 0
    return orjson.dumps(obj, option=opts) + b"\n"


def read_note(path: Path) -> str:
    """Read a note with encoding fallback: UTF-8 -> CP1252 -> replace.

    Unlike a best-effort reader this lets ``OSError`` propagate, so callers
    can tell an unreadable note from an empty one.
    """
    raw = path.read_bytes()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        pass
    try:
        return raw.decode("cp1252")
    except UnicodeDecodeError:
        return raw.decode("utf-8", errors="replace")
