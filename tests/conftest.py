"""Root conftest — shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    """Keep a developer's ~/.lightsql/config.toml out of the test run."""
    monkeypatch.setenv("LIGHTSQL_CONFIG", str(tmp_path / "no-such-config.toml"))
