"""Conftest for unit tests: isolates the working directory.

The CLI looks for ``fusion.toml`` in the current directory, so every unit
test runs from an empty temporary directory unless it writes one itself.
"""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path
