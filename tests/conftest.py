"""Shared fixtures for the test suite."""

import pytest

from osrs_drops import config


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    monkeypatch.setattr(config, "_settings", None)
    yield
    config._settings = None
