# The MIT License (MIT)
# Copyright © 2025 Entrius

"""Tests for Settings.from_env()."""

import logging

from lighthouse_ci.constants import DEFAULT_CI_HOST
from lighthouse_ci.settings import Settings


class TestFromEnv:
    def test_defaults(self):
        settings = Settings.from_env({})

        assert settings.ci_host == DEFAULT_CI_HOST
        assert settings.api_key is None
        assert settings.api_key_deprecated is False
        assert settings.github_token is None
        assert settings.ci_env == {}

    def test_ci_host_trailing_slash_is_dropped(self):
        settings = Settings.from_env({'CI_HOST': 'https://lhci.example.com/'})

        assert settings.ci_host == 'https://lhci.example.com'

    def test_lighthouse_api_key_preferred(self):
        settings = Settings.from_env({'LIGHTHOUSE_API_KEY': 'new', 'API_KEY': 'old'})

        assert settings.api_key == 'new'
        assert settings.api_key_deprecated is False

    def test_deprecated_api_key_fallback(self):
        settings = Settings.from_env({'API_KEY': 'old'})

        assert settings.api_key == 'old'
        assert settings.api_key_deprecated is True

    def test_only_known_ci_variables_are_kept(self):
        settings = Settings.from_env({'TRAVIS_PULL_REQUEST': '12', 'CIRCLE_SHA1': '', 'HOME': '/root'})

        assert settings.ci_env == {'TRAVIS_PULL_REQUEST': '12'}
        assert settings.ci_value('TRAVIS_PULL_REQUEST') == '12'
        assert settings.ci_value('CIRCLE_SHA1') == ''

    def test_reads_os_environ_by_default(self, clean_env):
        clean_env.setenv('GITHUB_TOKEN', 'ghp_test')

        assert Settings.from_env().github_token == 'ghp_test'

    def test_snapshot_is_not_affected_by_later_changes(self, clean_env):
        clean_env.setenv('TRAVIS_PULL_REQUEST', '5')
        settings = Settings.from_env()
        clean_env.setenv('TRAVIS_PULL_REQUEST', '6')

        assert settings.ci_value('TRAVIS_PULL_REQUEST') == '5'


class TestDeprecationWarning:
    def test_warns_for_api_key(self, caplog):
        with caplog.at_level(logging.WARNING, logger='lighthouse_ci.settings'):
            Settings.from_env({'API_KEY': 'old'}).warn_deprecations()

        assert 'deprecated' in caplog.text

    def test_silent_for_lighthouse_api_key(self, caplog):
        with caplog.at_level(logging.WARNING, logger='lighthouse_ci.settings'):
            Settings.from_env({'LIGHTHOUSE_API_KEY': 'new'}).warn_deprecations()

        assert caplog.text == ''
