"""
Content pass: walk the root and dump every allowed text file verbatim.

Files that cannot be read or decoded as UTF-8 keep their header and get a
placeholder body instead of their bytes.
"""

import os
import logging
from dataclasses import replace
from pathlib import Path
from typing import Iterator, Optional, Tuple

from treedump.core.errors import ReportCancelled
from treedump.core.filters import is_visible
from treedump.core.model import EntryKind, TraversalEntry

logger = logging.getLogger("CONTENTS")

SEPARATOR = "-" * 50
PLACEHOLDER = "(binary or non-UTF8 content skipped)"


def _on_walk_error(err):
    logger.debug("Skipping unreadable directory %s: %s", err.filename, err)


def iter_files(config, cancel_event=None) -> Iterator[TraversalEntry]:
    """Yield the files the content pass includes, in sorted order."""
    root = str(config.root)
    for dirpath, dirs, files in os.walk(root, onerror=_on_walk_error, followlinks=True):
        if cancel_event is not None and cancel_event.is_set():
            raise ReportCancelled(dirpath)
        rel_dir = Path(os.path.relpath(dirpath, root)).as_posix()
        rel_dir = "" if rel_dir == "." else rel_dir + "/"
        # Prune in-place so os.walk skips hidden and excluded subtrees
        dirs[:] = sorted(d for d in dirs if is_visible(rel_dir + d, True, config))
        for name in sorted(files):
            rel_path = rel_dir + name
            # FIFOs, sockets and devices land in `files` too; opening a FIFO blocks
            if not os.path.isfile(os.path.join(dirpath, name)):
                logger.debug("Skipping non-regular file %s", rel_path)
                continue
            if is_visible(rel_path, False, config):
                yield TraversalEntry(rel_path, EntryKind.FILE)


def read_text(path) -> Optional[str]:
    try:
        with open(path, "rb") as f:
            return f.read().decode("utf-8")
    except (UnicodeDecodeError, OSError) as e:
        logger.debug("Not dumping %s as text: %s", path, e)
        return None


def format_file_block(rel_path: str, text: Optional[str]) -> str:
    head = f"File: {rel_path}\n{SEPARATOR}\n"
    if text is None:
        return head + f"{PLACEHOLDER}\n\n"
    return head + f"Content of {rel_path}:\n{text}\n\n"


def read_entries(config, cancel_event=None) -> Iterator[Tuple[TraversalEntry, Optional[str]]]:
    """Pair each included file with its decoded text (None for binary/unreadable)."""
    for entry in iter_files(config, cancel_event):
        text = read_text(config.root / entry.rel_path)
        yield replace(entry, is_text=text is not None), text


def dump_contents(config, cancel_event=None) -> str:
    blocks = []
    skipped = 0
    for entry, text in read_entries(config, cancel_event):
        if not entry.is_text:
            skipped += 1
        blocks.append(format_file_block(entry.rel_path, text))
    logger.debug("Dumped %d files (%d without text content)", len(blocks), skipped)
    return "".join(blocks)
