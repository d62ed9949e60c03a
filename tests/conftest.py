"""Shared pytest fixtures for receiptscan tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from receiptscan.runtime import load_merchant_matchers, reset_paths


@pytest.fixture(autouse=True)
def isolated_project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point config/ and receipts/ at a per-test directory."""
    monkeypatch.setenv("RECEIPTSCAN_ROOT", str(tmp_path))
    reset_paths()
    load_merchant_matchers.cache_clear()
    yield tmp_path
    reset_paths()
    load_merchant_matchers.cache_clear()
