"""Shared test fixtures for the Remindme test suite."""

import os
import sys
from datetime import datetime, timedelta

import pytest

# Qt widgets need a platform plugin even when nothing is displayed
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

# Add parent directory to path so we can import the Remindme packages
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from PyQt5.QtWidgets import QApplication

from Remindme.store import ReminderStore


class FrozenClock:
    """A callable clock that returns a fixed local time until moved."""

    def __init__(self, when: datetime):
        self.now = when

    def __call__(self) -> datetime:
        return self.now

    def set(self, hour, minute, second=0):
        self.now = self.now.replace(hour=hour, minute=minute, second=second)

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture(scope='session')
def qapp():
    """Single QApplication shared by every Qt test."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def store_path(tmp_path):
    return str(tmp_path / 'reminders.txt')


@pytest.fixture
def store(store_path):
    return ReminderStore(store_path)


@pytest.fixture
def clock():
    return FrozenClock(datetime(2024, 3, 1, 9, 0, 0))


def write_lines(path, lines, newline='\n'):
    with open(path, 'w', encoding='UTF-8', newline='') as f:
        for line in lines:
            f.write(line + newline)


def read_bytes(path):
    with open(path, 'rb') as f:
        return f.read()
