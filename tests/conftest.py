"""Pytest configuration and fixtures for all tests.

This module ensures tests run in isolation from production environment
variables and never touch the real data directory.
"""

import pytest

import advisor_api.routes.dependencies as dependencies_mod

# Environment variables that should not leak into tests
ADVISOR_ENV_VARS = [
    "ADVISOR_DATA_PATH",
    "INSTRUMENT_CATALOG_PATH",
    "ANALYSIS_DELAY_SECONDS",
    "DEFAULT_CURRENCY",
]


@pytest.fixture(autouse=True)
def isolate_from_env(tmp_path, monkeypatch):
    """Clear advisor env vars, then route the profile store to a temp directory.

    monkeypatch restores the original values after each test.
    """
    for var in ADVISOR_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("ADVISOR_DATA_PATH", str(tmp_path / "data"))


@pytest.fixture(autouse=True)
def reset_analysis_session(monkeypatch):
    """Give every test a fresh shared analysis session."""
    monkeypatch.setattr(dependencies_mod, "_analysis_session", None)
