"""Shared test configuration."""

import pytest

from config import settings


@pytest.fixture(autouse=True)
def pinned_settings(monkeypatch):
    """Run every test against default scoring settings with "Present" pinned to 2026."""
    monkeypatch.setattr(settings, "reference_year", 2026)
    monkeypatch.setattr(settings, "apply_seniority_adjustment", True)
    monkeypatch.setattr(settings, "max_action_items", 8)
