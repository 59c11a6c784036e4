import os
import sys

# Add the parent directory (backend) to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest
import tempfile
from fastapi.testclient import TestClient

from main import app


class FakeResult:
    def __init__(self, rows):
        self._rows = list(rows)

    def all(self):
        return list(self._rows)

    def first(self):
        return self._rows[0] if self._rows else None


class FakeConnection:
    """Answers each catalog statement with canned rows and records every call."""

    def __init__(self, answers=None, error=None):
        self.answers = list(answers or [])   # [(statement, rows)]
        self.error = error
        self.calls = []

    def execute(self, statement, params=None):
        self.calls.append((statement, params))
        if self.error is not None:
            raise self.error
        for stmt, rows in self.answers:
            if stmt is statement:
                return FakeResult(rows)
        return FakeResult([])

    def executed(self):
        return [stmt for stmt, _ in self.calls]


@pytest.fixture
def fake_conn():
    return FakeConnection()


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def temp_sqlite_uri():
    fd, path = tempfile.mkstemp(suffix=".db")
    try:
        yield f"sqlite:///{path}"
    finally:
        os.close(fd)
        os.remove(path)


@pytest.fixture
def make_conn():
    return FakeConnection
