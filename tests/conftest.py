"""Shared fixtures: every test starts from built-in defaults."""

import pytest

from trinum.config import CONFIG_ENV_VAR, reset_config


@pytest.fixture(autouse=True)
def default_config(monkeypatch, tmp_path):
    """Isolate tests from any trinum.yaml or $TRINUM_CONFIG on the machine."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()
