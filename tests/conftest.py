from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

TreeFactory = Callable[[dict[str, str]], Path]


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeFactory:
    """Write ``{relative_path: content}`` under tmp_path and return tmp_path."""

    def _make(files: dict[str, str]) -> Path:
        for relative, content in files.items():
            target = tmp_path / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return tmp_path

    return _make


@pytest.fixture
def in_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from inside tmp_path so roots can be given relatively."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
