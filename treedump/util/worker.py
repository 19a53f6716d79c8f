"""
Report Worker
Runs generate_report on a QThreadPool thread so a Qt front end stays responsive.
Results come back through signals, which Qt queues onto the receiver's thread.
"""

import threading
import logging
from qtpy.QtCore import QObject, Signal, QRunnable, QThreadPool

from treedump.core.errors import InvalidRootError, ReportCancelled
from treedump.core.report import generate_report, save_report

logger = logging.getLogger("WORKER")


class ReportSignals(QObject):
    """Signals for one report run."""
    started = Signal()
    finished = Signal(str)  # report text
    saved = Signal(str)  # output path
    error = Signal(str)  # error message
    cancelled = Signal()


class ReportWorker(QRunnable):
    def __init__(self, config, output_path=None):
        super().__init__()
        self.config = config
        self.output_path = output_path
        self.signals = ReportSignals()
        self._cancel_event = threading.Event()

    def cancel(self):
        """Request a stop; honoured before the next directory is read."""
        self._cancel_event.set()
        logger.info("Cancel requested for %s", self.config.root)

    def run(self):
        self.signals.started.emit()
        try:
            report = generate_report(self.config, self._cancel_event)
            if self.output_path:
                path = save_report(report, self.output_path)
                self.signals.saved.emit(str(path))
        except ReportCancelled:
            logger.info("Report cancelled for %s", self.config.root)
            self.signals.cancelled.emit()
            return
        except InvalidRootError as e:
            logger.error("%s", e)
            self.signals.error.emit(str(e))
            return
        except Exception as e:
            logger.exception("Report failed for %s", self.config.root)
            self.signals.error.emit(f"{type(e).__name__}: {e}")
            return
        self.signals.finished.emit(report)


def start_report(config, output_path=None, pool=None):
    """Queue a ReportWorker on the pool (global pool by default) and return it."""
    worker = ReportWorker(config, output_path)
    (pool or QThreadPool.globalInstance()).start(worker)
    logger.info("Queued report for %s", config.root)
    return worker
