"""Shared fixtures."""

import pytest


RUNNER_ENV_VARS = [
    "INPUT_GITHUB_TOKEN",
    "GITHUB_REPOSITORY",
    "GITHUB_EVENT_NAME",
    "GITHUB_EVENT_PATH",
    "GITHUB_API_URL",
    "RUNNER_DEBUG",
    "GITHUB_TOKEN",
    "DEBUG",
]


@pytest.fixture(autouse=True)
def clean_runner_env(monkeypatch):
    """Remove runner variables so tests behave the same inside and outside Actions."""
    for name in RUNNER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
