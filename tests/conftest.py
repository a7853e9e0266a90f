# The MIT License (MIT)
# Copyright © 2025 Entrius

"""Shared fixtures for all tests."""

import logging

import pytest

from lighthouse_ci.constants import (
    API_KEY_ENV,
    CI_ENV_VARS,
    CI_HOST_ENV,
    DEPRECATED_API_KEY_ENV,
    GITHUB_TOKEN_ENV,
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every environment variable the runner reads."""
    for name in (*CI_ENV_VARS, CI_HOST_ENV, API_KEY_ENV, DEPRECATED_API_KEY_ENV, GITHUB_TOKEN_ENV):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def travis_env(clean_env):
    """Environment of a Travis CI pull request build."""
    clean_env.setenv('TRAVIS_PULL_REQUEST', '42')
    clean_env.setenv('TRAVIS_PULL_REQUEST_SHA', 'abc123def456')
    clean_env.setenv('TRAVIS_PULL_REQUEST_SLUG', 'GoogleChrome/lighthouse-ci')
    clean_env.setenv('LIGHTHOUSE_API_KEY', 'test-api-key')
    return clean_env


@pytest.fixture(autouse=True)
def restore_root_logging():
    """The CLI reconfigures the root logger, put it back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
