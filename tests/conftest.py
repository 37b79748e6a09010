"""Shared fixtures: a recording stand-in for external processes."""

import pytest

from zellij_sessionizer.runner import CaptureResult


class FakeRunner:
    """Records calls instead of spawning fzf / zellij."""

    def __init__(self, picked="", picker_code=0, session_code=0, picker_missing=False):
        self.picked = picked
        self.picker_code = picker_code
        self.session_code = session_code
        self.picker_missing = picker_missing
        self.captured = []
        self.interactive_calls = []

    def capture(self, args, input):
        if self.picker_missing:
            raise FileNotFoundError(args[0])
        self.captured.append((list(args), input))
        return CaptureResult(returncode=self.picker_code, stdout=self.picked)

    def interactive(self, args):
        self.interactive_calls.append(list(args))
        return self.session_code


@pytest.fixture
def fake_runner():
    return FakeRunner


@pytest.fixture
def projects(tmp_path):
    """tmp/projects/{alpha, beta.io} directories plus a stray file."""
    root = tmp_path / "projects"
    (root / "alpha").mkdir(parents=True)
    (root / "beta.io").mkdir()
    (root / "notes.txt").write_text("x")
    return root


@pytest.fixture(autouse=True)
def _restore_cwd(monkeypatch, tmp_path):
    # launch_session chdirs; keep tests from leaking that
    monkeypatch.chdir(tmp_path)
