# The MIT License (MIT)
# Copyright © 2025 Entrius

"""Tests for the run configuration data model."""

import json

import pytest

from lighthouse_ci.classes import Configuration, PullRequestInfo, RepoInfo, Runner


class TestRepoInfoFromSlug:
    def test_owner_and_name(self):
        assert RepoInfo.from_slug('GoogleChrome/lighthouse') == RepoInfo('GoogleChrome', 'lighthouse')

    def test_strips_git_suffix(self):
        assert RepoInfo.from_slug('owner/name.git') == RepoInfo('owner', 'name')

    def test_keeps_dots_inside_name(self):
        assert RepoInfo.from_slug('owner/my.site.io') == RepoInfo('owner', 'my.site.io')

    @pytest.mark.parametrize('slug', ['', 'owner', 'owner/', '/name', 'a/b/c'])
    def test_rejects_malformed(self, slug):
        assert RepoInfo.from_slug(slug) is None

    def test_full_name(self):
        assert RepoInfo('owner', 'name').full_name == 'owner/name'


class TestRunner:
    def test_names(self):
        assert Runner.names() == ['chrome', 'wpt']

    def test_from_value(self):
        assert Runner('wpt') is Runner.WPT


class TestConfigurationPayload:
    def test_payload_keys_and_values(self):
        config = Configuration(
            test_url='https://example.com',
            add_comment=False,
            min_pass_score=93,
            runner=Runner.WPT,
            pr=PullRequestInfo(number=3, sha='abc'),
            repo=RepoInfo('owner', 'name'),
        )

        assert config.to_payload() == {
            'testUrl': 'https://example.com',
            'addComment': False,
            'minPassScore': 93,
            'runner': 'wpt',
            'pr': {'number': 3, 'sha': 'abc'},
            'repo': {'owner': 'owner', 'name': 'name'},
        }

    def test_missing_score_serializes_as_null(self):
        config = Configuration(
            test_url='https://example.com',
            add_comment=True,
            runner=Runner.CHROME,
            pr=PullRequestInfo(number=3, sha='abc'),
            repo=RepoInfo('owner', 'name'),
        )

        assert json.loads(json.dumps(config.to_payload()))['minPassScore'] is None
