"""Shared pytest fixtures for compact-semver tests."""

import os
from pathlib import Path
from typing import Generator

import pytest

from compact_semver.logging import setup_logging


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Run each test in an empty directory without CSEMVER_ environment variables."""
    for key in list(os.environ):
        if key.startswith("CSEMVER_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    setup_logging(level="WARNING", output="stderr")
    yield tmp_path
