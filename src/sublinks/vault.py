"""Filesystem side of a scan: find notes in a vault and pick candidates.

Note ids are POSIX paths relative to the vault root, which is also what
excluded-folder prefixes are compared against.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from pathlib import Path, PurePosixPath
from typing import Any

from sublinks.config import ScanConfig, resolve_config
from sublinks.io_utils import read_note
from sublinks.types import CandidateDocument

NOTE_SUFFIX = ".md"


def list_markdown_notes(root: Path) -> list[str]:
    """Return ids of all markdown notes under ``root``, sorted.

    Dot-directories (editor and VCS state) are ignored.
    """
    ids: list[str] = []
    for path in root.rglob(f"*{NOTE_SUFFIX}"):
        rel = path.relative_to(root)
        if any(part.startswith(".") for part in rel.parts[:-1]):
            continue
        if path.is_file():
            ids.append(rel.as_posix())
    return sorted(ids)


def is_excluded_path(doc_id: str, exclude_folders: Iterable[str]) -> bool:
    """True if ``doc_id`` starts with any excluded prefix.

    This is a plain string prefix test, so ``"Archive"`` also covers
    ``"Archive 2023/notes.md"``.
    """
    return any(doc_id.startswith(folder) for folder in exclude_folders)


def _loader(path: Path) -> Callable[[], str]:
    return lambda: read_note(path)


def candidate_documents(
    root: Path,
    active_id: str,
    config: ScanConfig | Mapping[str, Any] | None = None,
) -> list[CandidateDocument]:
    """Notes to scan for headings: everything except the active note and excluded folders."""
    cfg = resolve_config(config)
    active = PurePosixPath(active_id).as_posix()
    docs: list[CandidateDocument] = []
    for doc_id in list_markdown_notes(root):
        if doc_id == active or is_excluded_path(doc_id, cfg.exclude_folders):
            continue
        docs.append(CandidateDocument(doc_id=doc_id, load=_loader(root / doc_id)))
    return docs


def note_title(doc_id: str) -> str:
    """Display title of a note: its file name without the ``.md`` suffix."""
    name = PurePosixPath(doc_id).name
    if name.endswith(NOTE_SUFFIX):
        return name[: -len(NOTE_SUFFIX)]
    return name
