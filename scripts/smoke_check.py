"""Simple smoke-check script: build a report of this repository without the CLI.

Run from repository root:

python scripts/smoke_check.py
"""
import sys
from pathlib import Path

root_path = str(Path(__file__).parent.parent.absolute())
if root_path not in sys.path: sys.path.insert(0, root_path)

from treedump.core.model import Configuration
from treedump.core.report import generate_report
from treedump.util.logger import setup_app_logger

logger = setup_app_logger("SMOKE")

if __name__ == "__main__":
    try:
        cfg = Configuration(root_path, ("py", "toml", "md"), ("__pycache__", "egg-info"))
        report = generate_report(cfg)
        logger.info("Report ready: %d characters, %d files",
                    len(report), report.count("\nContent of "))
    except Exception:
        logger.exception("Smoke check failed")
