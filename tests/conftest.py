from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure tests always import the local src tree, not an older installed wheel.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from buildops.core.builds import Build, RunStatus  # noqa: E402
from buildops.core.permalinks import default_permalinks  # noqa: E402


class _JobStub:
    """In-memory job; builds are given newest first."""

    def __init__(self, name, builds, permalinks=None):
        self.full_name = name
        self.builds = list(builds)
        self._permalinks = default_permalinks() if permalinks is None else permalinks
        self.calls: list[str] = []

    def build_by_number(self, number):
        self.calls.append(f"build_by_number:{number}")
        return next((b for b in self.builds if b.number == number), None)

    def all_builds(self):
        self.calls.append("all_builds")
        return iter(self.builds)

    def permalinks(self):
        self.calls.append("permalinks")
        return self._permalinks


@pytest.fixture
def make_job():
    def _make(*builds, name="folder/app", permalinks=None):
        return _JobStub(name, builds, permalinks)

    return _make


@pytest.fixture
def sample_job(make_job):
    return make_job(
        Build(5, "release", RunStatus.RUNNING, "folder/app"),
        Build(4, "nightly", RunStatus.FAILED, "folder/app"),
        Build(3, "release", RunStatus.SUCCESS, "folder/app"),
        Build(2, "", RunStatus.CANCELED, "folder/app"),
        Build(1, "first", RunStatus.SUCCESS, "folder/app"),
    )
