"""
Pytest configuration and fixtures for org chart tests.

This module provides:
- Paths to the reference dataset
- Small record batches used across test modules
- A collecting sink and a JSON writer for temporary sources
"""

import json
import logging
from pathlib import Path

import pytest

from orgchart.hierarchy.models import RawRecord

PROJECT_ROOT = Path(__file__).parent.parent


# ============================================================================
# Data Fixtures
# ============================================================================


@pytest.fixture
def reference_path() -> Path:
    """The 12-person reference org chart shipped with the repo."""
    return PROJECT_ROOT / "data" / "org_chart.json"


@pytest.fixture
def chain_records() -> list[RawRecord]:
    """Alice -> Bob -> Carol."""
    return [
        RawRecord("Alice", "CEO", "-"),
        RawRecord("Bob", "VP", "-", "Alice"),
        RawRecord("Carol", "Eng", "-", "Bob"),
    ]


@pytest.fixture
def branching_records() -> list[RawRecord]:
    """Two roots, siblings, and one dangling manager reference."""
    return [
        RawRecord("Root", "CEO", "2015-01-01"),
        RawRecord("A", "VP A", "2016-01-01", "Root"),
        RawRecord("B", "VP B", "2016-02-01", "Root"),
        RawRecord("A1", "Lead A1", "2017-01-01", "A"),
        RawRecord("A2", "Lead A2", "2017-02-01", "A"),
        RawRecord("A1x", "Eng A1x", "2018-01-01", "A1"),
        RawRecord("B1", "Lead B1", "2017-03-01", "B"),
        RawRecord("Solo", "Founder", "2014-01-01"),
        RawRecord("Lost", "Contractor", "2020-01-01", "Ghost"),
    ]


# ============================================================================
# Helper Fixtures
# ============================================================================


@pytest.fixture
def lines() -> list[str]:
    """Collects sink output; pass ``lines.append`` as the sink."""
    return []


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON payload to a temporary file and return its path."""

    def _write(payload, name: str = "org_chart.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload))
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo logger changes the CLI makes."""
    package_logger = logging.getLogger("orgchart")
    level, handlers = package_logger.level, list(package_logger.handlers)
    yield
    package_logger.setLevel(level)
    package_logger.handlers[:] = handlers
