# tests/conftest.py
"""Pytest configuration and shared fixtures for spanline tests."""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    # Ensure spanline package is importable when running tests from repo root.
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    if src_dir.exists() and str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def column_info() -> dict[str, dict[str, str]]:
    """Metadata for a load/render profile with one entries column."""
    return {
        "c1": {"name": "Load StartTime"},
        "c2": {"name": "Load EndTime"},
        "c3": {"name": "RenderStartTime"},
        "c4": {"name": "RenderEndTime"},
        "c5": {"name": "rows"},
        "e1": {"name": "Queries"},
    }


@pytest.fixture
def columnar_data() -> dict[str, list]:
    """Raw cell values keyed by column id."""
    entries = [
        {"name": "A", "timeRange": [0, 5]},
        {"name": "A", "timeRange": [5, 9]},
        {"name": "B", "timeRange": [1, 2]},
    ]
    return {
        "c1": [10, 20, 30],
        "c2": [50, 60, 70],
        "c3": [40, None, 80],
        "c4": [100, 120, 140],
        "c5": [1, 2, 3],
        "e1": [json.dumps(entries)],
    }
