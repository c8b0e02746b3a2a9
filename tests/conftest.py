"""Shared fixtures: a repository on a fake clock and a fresh navigator.

The widget tests run on Qt's offscreen platform so no display is needed.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from datetime import datetime, timedelta

import pytest

from navigation import Navigator
from repository import NoteRepository

START = datetime(2026, 10, 18, 9, 30)


class FakeClock:
    """Returns START, then one minute later on every call."""

    def __init__(self, start: datetime = START):
        self.start = start
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(minutes=1)
        return current


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def repo(clock):
    return NoteRepository(clock=clock, default_folder="Notes")


@pytest.fixture()
def default_folder(repo):
    return repo.list_folders()[0].folder


@pytest.fixture()
def navigator():
    return Navigator()
