"""Pytest configuration for repository test runs."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_modmatrix_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop host MODMATRIX_* variables so tests see only what they set."""
    for name in list(os.environ):
        if name.startswith("MODMATRIX_"):
            monkeypatch.delenv(name)
