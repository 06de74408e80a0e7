"""Shared test fixtures."""

import io

import pytest


class FailingSink(io.BytesIO):
    """BytesIO that raises after `limit` successful writes."""

    def __init__(self, limit):
        super().__init__()
        self.limit = limit
        self.writes = 0

    def write(self, data):
        if self.writes >= self.limit:
            raise BrokenPipeError(32, "Broken pipe")
        self.writes += 1
        return super().write(data)


@pytest.fixture
def failing_sink():
    return FailingSink


@pytest.fixture
def mock_process(monkeypatch):
    """Mock process.run_streaming for CLI tests."""
    from prefix_run import process
    from prefix_run.outcome import Outcome

    calls = []
    responses = []

    def fake_run_streaming(command, prefix=b"", stdout=None, stderr=None, env=None, cwd=None):
        calls.append((command, prefix))
        if responses:
            return responses.pop(0)
        return Outcome(returncode=0)

    monkeypatch.setattr(process, "run_streaming", fake_run_streaming)

    return type("MockProcess", (), {"calls": calls, "responses": responses})()
