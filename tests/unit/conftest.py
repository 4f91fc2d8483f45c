"""Unit test environment helpers."""

import os

import pytest


@pytest.fixture(autouse=True)
def _clear_inferrer_env(monkeypatch):
    """Keep SDL_* settings from the developer shell out of unit tests."""
    for key in list(os.environ):
        if key.startswith("SDL_"):
            monkeypatch.delenv(key, raising=False)
    yield
