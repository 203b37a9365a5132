"""Pytest fixtures for lesson parsing tests."""

import pytest


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Run every test with default settings, whatever the .env files say."""
    monkeypatch.delenv("TEXT2LESSON_ICON_FAMILY", raising=False)
    monkeypatch.delenv("TEXT2LESSON_MAX_SOURCE_LENGTH", raising=False)


@pytest.fixture
def sample_lesson_source():
    return """TITLE: Capitals
AUTHOR: A & B
(i) Capitals of **Europe**.
(?) What is the capital of France?
(=) Paris
(x) Lyon
(x) Nice
(+) Paris has been the capital for a long time.
(?) The capital of Italy is ...Rome
(x) Milan
(?) Which are in Spain?
(=) Madrid
(=) Seville
(x) Porto
"""
