"""Shared fixtures for the word list tests."""

import os

# widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from tests.fakes import RecordingRepository


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "guardapalabras.db")


@pytest.fixture
def repo(db_path):
    return RecordingRepository(db_path)


@pytest.fixture
def unavailable_path(tmp_path):
    """A db path whose parent is a regular file, so it can never be opened."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    return str(blocker / "guardapalabras.db")
