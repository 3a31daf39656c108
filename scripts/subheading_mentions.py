#!/usr/bin/env python3
"""Find unlinked mentions of other notes' subheadings in one note.

Usage:
    python3 scripts/subheading_mentions.py --vault ~/notes --note "Projects/Plan.md"

    # Persist tweaked settings for the next run:
    python3 scripts/subheading_mentions.py --vault ~/notes --note Plan.md \
      --config ~/notes/.sublinks.json --levels 1,2 --exclude Archive --save-config

Structured JSON output goes to stdout; human messages go to stderr.
"""
from __future__ import annotations

import argparse
import logging
import sys
import time
from dataclasses import replace
from pathlib import Path

from sublinks.config import (
    LEVEL_PRESETS,
    ScanConfig,
    coerce_levels,
    coerce_min_length,
    load_config,
    resolve_config,
    save_config,
)
from sublinks.io_utils import dumps_json, read_note
from sublinks.report import build_payload, render_text
from sublinks.scanner import run_scan
from sublinks.vault import candidate_documents

log = logging.getLogger("subheading_mentions")


def dump_json(obj: object) -> None:
    sys.stdout.buffer.write(dumps_json(obj))
    sys.stdout.flush()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find unlinked mentions of other notes' subheadings.",
    )
    parser.add_argument("--vault", required=True, help="Root directory of the notes")
    parser.add_argument(
        "--note", required=True,
        help="Active note, as a path relative to --vault",
    )
    parser.add_argument(
        "--config", default=None,
        help="Settings JSON (includeHeadingLevels, minHeadingTextLength, excludeFolders)",
    )
    parser.add_argument(
        "--levels", default=None,
        help=(
            "Comma-separated heading levels to include, e.g. "
            + ", ".join(f"'{k}' ({v})" for k, v in LEVEL_PRESETS.items())
        ),
    )
    parser.add_argument(
        "--min-length", type=int, default=None,
        help="Minimum heading text length",
    )
    parser.add_argument(
        "--exclude", action="append", default=None,
        help="Folder prefix to exclude (repeatable)",
    )
    parser.add_argument(
        "--workers", type=int, default=1,
        help="Threads used to read and scan notes (default: 1)",
    )
    parser.add_argument(
        "--format", choices=("json", "text"), default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--save-config", action="store_true",
        help="Write the effective settings back to --config",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def effective_config(args: argparse.Namespace) -> ScanConfig:
    """Stored settings with command-line overrides applied."""
    config = load_config(Path(args.config)) if args.config else ScanConfig()
    if args.levels is not None:
        config = replace(config, include_heading_levels=coerce_levels(args.levels))
    if args.min_length is not None:
        config = replace(config, min_heading_text_length=coerce_min_length(args.min_length))
    if args.exclude is not None:
        config = replace(config, exclude_folders=tuple(args.exclude))
    return resolve_config(config)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    vault = Path(args.vault).expanduser().resolve()
    if not vault.is_dir():
        parser.error(f"vault directory not found: {vault}")
    note_path = (vault / Path(args.note).expanduser()).resolve()
    if not note_path.is_relative_to(vault):
        parser.error(f"note {note_path} is outside the vault {vault}")
    if not note_path.is_file():
        parser.error(f"note not found: {note_path}")
    if args.save_config and not args.config:
        parser.error("--save-config requires --config")

    config = effective_config(args)
    if args.save_config:
        save_config(config, Path(args.config))
        log.info("Saved settings to %s", args.config)

    active_id = note_path.relative_to(vault).as_posix()
    try:
        active_text = read_note(note_path)
    except OSError as exc:
        parser.error(f"cannot read note {note_path}: {exc}")
    docs = candidate_documents(vault, active_id, config)
    log.info("Scanning %d notes for headings mentioned in %s", len(docs), active_id)

    t0 = time.monotonic()
    result = run_scan(active_text, docs, config, workers=max(1, args.workers))
    elapsed = time.monotonic() - t0
    log.info(
        "Found %d mentions in %d notes (%d skipped) in %.2fs",
        len(result.mentions), result.documents_scanned, len(result.skipped), elapsed,
    )

    if args.format == "text":
        sys.stdout.write(render_text(result.mentions))
    else:
        dump_json(build_payload(result, active_id))
    return 0


if __name__ == "__main__":
    sys.exit(main())
