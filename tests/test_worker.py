import pytest

pytest.importorskip("qtpy")
QtCore = pytest.importorskip("qtpy.QtCore")

from treedump.core.model import Configuration
from treedump.util.worker import ReportWorker


@pytest.fixture(scope="module")
def qapp():
    return QtCore.QCoreApplication.instance() or QtCore.QCoreApplication([])


def run_worker(worker):
    events = []
    worker.signals.started.connect(lambda: events.append(("started",)))
    worker.signals.finished.connect(lambda text: events.append(("finished", text)))
    worker.signals.saved.connect(lambda path: events.append(("saved", path)))
    worker.signals.error.connect(lambda msg: events.append(("error", msg)))
    worker.signals.cancelled.connect(lambda: events.append(("cancelled",)))
    worker.run()
    return events


def test_worker_emits_report(qapp, make_tree):
    root = make_tree({"a.txt": "hello"})
    events = run_worker(ReportWorker(Configuration(root)))
    assert events[0] == ("started",)
    kind, text = events[-1]
    assert kind == "finished"
    assert "Content of a.txt:\nhello" in text


def test_worker_saves_report(qapp, make_tree, tmp_path):
    root = make_tree({"a.txt": "hello"})
    out = tmp_path / "out" / "report.txt"
    events = run_worker(ReportWorker(Configuration(root), out))
    assert ("saved", str(out.resolve())) in events
    assert out.read_text(encoding="utf-8").startswith("Directory Structure:")


def test_worker_reports_invalid_root(qapp, tmp_path):
    events = run_worker(ReportWorker(Configuration(tmp_path / "missing")))
    kind, msg = events[-1]
    assert kind == "error"
    assert "missing" in msg


def test_worker_cancel(qapp, make_tree):
    root = make_tree({"a.txt": ""})
    worker = ReportWorker(Configuration(root))
    worker.cancel()
    events = run_worker(worker)
    assert events[-1] == ("cancelled",)
    assert not any(e[0] == "finished" for e in events)
