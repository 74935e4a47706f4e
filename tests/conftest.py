"""Shared fixtures for Color Sketch tests."""

import os

# Headless Qt for widget and painter tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import QObject
from PyQt6.QtWidgets import QApplication

from color_sketch.services.permissions import StoragePermission


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """One QApplication for the whole test session."""
    app = QApplication.instance() or QApplication([])
    yield app


class FakePermission(StoragePermission):
    """Permission collaborator whose answers are set by the test."""

    def __init__(self, granted: bool = True):
        super().__init__()
        self.granted = granted
        self.request_count = 0

    def has_permission(self) -> bool:
        return self.granted

    def request_permission(self) -> None:
        self.request_count += 1

    def answer(self, granted: bool):
        """Deliver the asynchronous permission result."""
        self.granted = granted
        self.permission_result.emit(granted)


@pytest.fixture
def fake_permission():
    return FakePermission(granted=True)


class SignalRecorder(QObject):
    """Collects emitted signal arguments."""

    def __init__(self, signal):
        super().__init__()
        self.calls = []
        signal.connect(self._record)

    def _record(self, *args):
        self.calls.append(args)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def record():
    """Factory fixture: record(signal) -> SignalRecorder."""
    recorders = []

    def _make(signal):
        recorder = SignalRecorder(signal)
        recorders.append(recorder)
        return recorder

    return _make
