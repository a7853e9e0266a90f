# The MIT License (MIT)
# Copyright © 2025 Entrius

"""Shared fixtures for CLI tests."""

from unittest.mock import Mock

import pytest
from click.testing import CliRunner

from lighthouse_ci.cli.main import runlighthouse


@pytest.fixture
def cli_root():
    return runlighthouse


@pytest.fixture
def runner():
    return CliRunner()


def make_response(json_data=None, status_code=200, json_error=None):
    """Mock requests.Response returning ``json_data`` or raising ``json_error``."""
    response = Mock()
    response.status_code = status_code
    response.raise_for_status.return_value = None
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def chrome_response():
    return make_response({'score': 95})


@pytest.fixture
def wpt_response():
    return make_response({'data': {'target_url': 'https://x'}})


@pytest.fixture
def response_factory():
    return make_response
