"""Shared fixtures for photoship tests."""

import os
from collections.abc import Iterator

import pytest
from photoship.core.config import reset_settings

_PREFIXES = ('PHOTOSHIP_', 'TEST_PHOTOSHIP_')


@pytest.fixture(autouse=True)
def clean_photoship_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test without PHOTOSHIP_* variables or cached settings.

    load_env() writes straight into os.environ, so keys it added are removed
    on teardown. monkeypatch then restores anything the developer's shell had.
    """
    for key in [k for k in os.environ if k.startswith(_PREFIXES)]:
        monkeypatch.delenv(key)
    reset_settings()
    yield
    for key in [k for k in os.environ if k.startswith(_PREFIXES)]:
        os.environ.pop(key, None)
    reset_settings()
