"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def schemas_root() -> Path:
    """Return the directory holding the payload JSON Schemas."""
    return Path(__file__).resolve().parents[1] / "schemas"
