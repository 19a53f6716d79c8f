import logging
from pathlib import Path

from treedump.core.contents import dump_contents
from treedump.core.errors import InvalidRootError
from treedump.core.tree import render_tree

logger = logging.getLogger("REPORT")

TREE_HEADER = "Directory Structure:\n" + "-" * 19 + "\n"
CONTENTS_HEADER = "File Contents:\n" + "-" * 14 + "\n"


def validate_root(root):
    root = Path(root)
    if not root.exists():
        raise InvalidRootError(root, "does not exist")
    if not root.is_dir():
        raise InvalidRootError(root, "is not a directory")
    return root


def generate_report(config, cancel_event=None) -> str:
    """
    Build the full report for config.root: tree section, then file contents.

    Blocking; callers that must stay responsive run it on a worker thread
    (see treedump.util.worker). Raises InvalidRootError for a bad root and
    ReportCancelled if cancel_event gets set part way through.
    """
    root = validate_root(config.root)
    logger.info("Generating report for %s", root)
    tree = render_tree(config, cancel_event)
    contents = dump_contents(config, cancel_event)
    report = TREE_HEADER + tree + "\n" + CONTENTS_HEADER + contents
    logger.info("Report ready: %d tree lines, %d characters", tree.count("\n"), len(report))
    return report


def save_report(report: str, path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(report, encoding="utf-8")
    logger.info("Report saved to %s", path)
    return path.resolve()
