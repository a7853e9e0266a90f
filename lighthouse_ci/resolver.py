# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Pull request identity resolution.

Sources are tried in order and the first one that applies wins:
    1. Travis CI environment
    2. CircleCI environment
    3. Local git branch + origin remote, looked up on the GitHub API

A source returns None when it does not apply (e.g. no CI variables set) and a
ResolveResult otherwise, which either carries a PullRequestContext or the
reason resolution failed.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from lighthouse_ci.classes import PullRequestContext, PullRequestInfo, RepoInfo
from lighthouse_ci.constants import (
    CIRCLE_PR_NUMBER_ENV,
    CIRCLE_PROJECT_REPONAME_ENV,
    CIRCLE_PROJECT_USERNAME_ENV,
    CIRCLE_PULL_REQUEST_ENV,
    CIRCLE_REPOSITORY_URL_ENV,
    CIRCLE_SHA1_ENV,
    TRAVIS_PULL_REQUEST_ENV,
    TRAVIS_PULL_REQUEST_SHA_ENV,
    TRAVIS_PULL_REQUEST_SLUG_ENV,
)
from lighthouse_ci.settings import Settings
from lighthouse_ci.utils.git_tools import GitRepository, parse_remote_slug
from lighthouse_ci.utils.github_api_tools import find_open_pull_request
from lighthouse_ci.utils.utils import parse_pr_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolveResult:
    """Outcome of a resolution attempt"""

    context: Optional[PullRequestContext] = None
    reason: str = ''

    @property
    def ok(self) -> bool:
        return self.context is not None

    @classmethod
    def success(cls, pr: PullRequestInfo, repo: RepoInfo, source: str) -> 'ResolveResult':
        return cls(context=PullRequestContext(pr=pr, repo=repo, source=source))

    @classmethod
    def failure(cls, reason: str) -> 'ResolveResult':
        return cls(reason=reason)


Source = Callable[[Settings], Optional[ResolveResult]]


def _from_ci_values(provider: str, number: int, sha: str, repo: Optional[RepoInfo]) -> ResolveResult:
    if not sha:
        return ResolveResult.failure(f"{provider} pull request #{number} has no commit SHA")
    if repo is None:
        return ResolveResult.failure(f"{provider} pull request #{number} has no owner/name slug")
    return ResolveResult.success(PullRequestInfo(number=number, sha=sha), repo, source=provider)


def resolve_from_travis(settings: Settings) -> Optional[ResolveResult]:
    number = parse_pr_number(settings.ci_value(TRAVIS_PULL_REQUEST_ENV))
    if number is None:
        return None

    slug = settings.ci_value(TRAVIS_PULL_REQUEST_SLUG_ENV)
    repo = RepoInfo.from_slug(slug) if slug else None
    return _from_ci_values('Travis CI', number, settings.ci_value(TRAVIS_PULL_REQUEST_SHA_ENV), repo)


def resolve_from_circleci(settings: Settings) -> Optional[ResolveResult]:
    number = parse_pr_number(settings.ci_value(CIRCLE_PR_NUMBER_ENV))
    if number is None:
        number = parse_pr_number(settings.ci_value(CIRCLE_PULL_REQUEST_ENV))
    if number is None:
        return None

    owner = settings.ci_value(CIRCLE_PROJECT_USERNAME_ENV)
    name = settings.ci_value(CIRCLE_PROJECT_REPONAME_ENV)
    if owner and name:
        repo = RepoInfo(owner=owner, name=name)
    else:
        repository_url = settings.ci_value(CIRCLE_REPOSITORY_URL_ENV)
        repo = parse_remote_slug(repository_url) if repository_url else None
    return _from_ci_values('CircleCI', number, settings.ci_value(CIRCLE_SHA1_ENV), repo)


def make_git_source(git: Optional[GitRepository] = None) -> Source:
    """Source that looks up the open pull request for the checked out branch."""

    def resolve_from_git(settings: Settings) -> ResolveResult:
        repository = git or GitRepository()

        branch = repository.get_current_branch()
        if not branch:
            return ResolveResult.failure('could not determine the current git branch')

        repo = repository.get_repo_info()
        if repo is None:
            return ResolveResult.failure('could not read owner/name from the origin remote')

        logger.info(f"Looking up open pull request for {repo.owner}:{branch} in {repo.full_name}")
        pr = find_open_pull_request(repo, branch, settings.github_token)
        if pr is None:
            return ResolveResult.failure(f"no open pull request found for {repo.owner}:{branch}")
        return ResolveResult.success(pr, repo, source='GitHub')

    return resolve_from_git


def default_sources() -> Sequence[Source]:
    return [resolve_from_travis, resolve_from_circleci, make_git_source()]


def resolve_pull_request(settings: Settings, sources: Optional[Sequence[Source]] = None) -> ResolveResult:
    """Run ``sources`` in order and return the first result that applies."""
    if sources is None:
        sources = default_sources()

    for source in sources:
        result = source(settings)
        if result is None:
            continue
        if result.ok:
            logger.info(f"Resolved {result.context.pr} in {result.context.repo.full_name} from {result.context.source}")
        else:
            logger.info(f"Pull request resolution failed: {result.reason}")
        return result

    return ResolveResult.failure('no pull request source applies')
