import os
import tempfile

os.environ.setdefault("CLOCK_REMINDER_LOG_DIR", tempfile.mkdtemp(prefix="clock-reminder-logs-"))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QCoreApplication


@pytest.fixture(scope="session")
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


class FakeActivity:
    def __init__(self, label=None, minutes=0.0):
        self.label = label
        self.minutes = minutes
        self.label_queries = 0

    def is_active(self):
        return self.label is not None

    def current_label(self):
        self.label_queries += 1
        if self.label is None:
            raise LookupError("nothing clocked in")
        return self.label

    def elapsed_minutes(self):
        if self.label is None:
            raise LookupError("nothing clocked in")
        return self.minutes


class RecordingSink:
    def __init__(self):
        self.calls = []

    def __call__(self, title, body):
        self.calls.append((title, body))


@pytest.fixture
def activity():
    return FakeActivity()


@pytest.fixture
def recording_sink():
    return RecordingSink()
