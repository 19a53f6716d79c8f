import os
import logging

from treedump.core.errors import ReportCancelled
from treedump.core.filters import is_visible

logger = logging.getLogger("TREE")


def _rel(parent_rel, name):
    return f"{parent_rel}/{name}" if parent_rel else name


def _children(path, rel_dir, config):
    """Sorted (name, rel_path, is_dir) for the visible children of one directory."""
    try:
        names = sorted(os.listdir(path))
    except OSError as e:
        logger.debug("Cannot list %s, rendering as empty: %s", path, e)
        return []
    items = []
    for name in names:
        rel_path = _rel(rel_dir, name)
        full = os.path.join(path, name)
        is_dir = os.path.isdir(full)
        # same rule as the content pass: only directories and regular files
        if not is_dir and not os.path.isfile(full):
            continue
        if is_visible(rel_path, is_dir, config, check_extension=config.filter_tree_by_extension):
            items.append((name, rel_path, is_dir))
    return items


def _walk(path, rel_dir, prefix, config, lines, cancel_event):
    if cancel_event is not None and cancel_event.is_set():
        raise ReportCancelled(str(path))
    items = _children(path, rel_dir, config)
    for i, (name, rel_path, is_dir) in enumerate(items):
        is_last = (i == len(items) - 1)
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{name}\n")
        if is_dir:
            _walk(os.path.join(path, name), rel_path,
                  prefix + ("    " if is_last else "│   "), config, lines, cancel_event)


def render_tree(config, cancel_event=None) -> str:
    """ASCII tree of config.root, one line per visible entry, depth first."""
    lines = []
    _walk(str(config.root), "", "", config, lines, cancel_event)
    logger.debug("Tree rendered with %d entries", len(lines))
    return "".join(lines)
