# The MIT License (MIT)
# Copyright © 2025 Entrius

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from lighthouse_ci.classes import PullRequestInfo, RepoInfo
from lighthouse_ci.constants import (
    BASE_GITHUB_API_URL,
    GITHUB_API_TIMEOUT,
    RATE_LIMIT_MIN_REMAINING,
)

logger = logging.getLogger(__name__)


@dataclass
class RateLimitInfo:
    """Represents GitHub API rate limit information extracted from response headers."""

    limit: int  # Maximum requests allowed per hour
    remaining: int  # Requests remaining in current window
    reset_timestamp: int  # Unix timestamp when the rate limit resets

    @property
    def is_exceeded(self) -> bool:
        return self.remaining == 0

    @property
    def seconds_until_reset(self) -> int:
        return max(0, self.reset_timestamp - int(time.time()))

    def __str__(self) -> str:
        return f"RateLimit(remaining={self.remaining}/{self.limit}, resets_in={self.seconds_until_reset}s)"


def parse_rate_limit_headers(response: requests.Response) -> Optional[RateLimitInfo]:
    """
    Parse GitHub API rate limit information from response headers.

    Args:
        response: The HTTP response from GitHub API

    Returns:
        RateLimitInfo object if headers are present, None otherwise
    """
    headers = response.headers

    try:
        limit = int(headers.get('X-RateLimit-Limit', 0))
        remaining = int(headers.get('X-RateLimit-Remaining', 0))
        reset_timestamp = int(headers.get('X-RateLimit-Reset', 0))
    except (ValueError, TypeError) as e:
        logger.debug(f"Could not parse rate limit headers: {e}")
        return None

    if limit == 0 and reset_timestamp == 0:
        return None

    return RateLimitInfo(limit=limit, remaining=remaining, reset_timestamp=reset_timestamp)


def make_headers(token: Optional[str] = None) -> Dict[str, str]:
    """Build GitHub HTTP headers, authenticated when a token is available.

    Args:
        token (Optional[str]): Github pat

    Returns:
        Dict[str, str]: Mapping of HTTP header names to values.
    """
    headers = {'Accept': 'application/vnd.github.v3+json'}
    if token:
        headers['Authorization'] = f"token {token}"
    return headers


def get_open_pull_requests(repo: RepoInfo, branch: str, token: Optional[str] = None) -> Optional[List[Dict[str, Any]]]:
    """List open pull requests of ``repo`` whose head is ``owner:branch``.

    Args:
        repo (RepoInfo): Repository to query.
        branch (str): Head branch name.
        token (Optional[str]): GitHub personal access token, anonymous when None.

    Returns:
        Optional[List[Dict[str, Any]]]: Pull request objects, or None if the request failed.
    """
    url = f"{BASE_GITHUB_API_URL}/repos/{repo.owner}/{repo.name}/pulls"
    params = {'state': 'open', 'head': f"{repo.owner}:{branch}"}

    try:
        response = requests.get(url, params=params, headers=make_headers(token), timeout=GITHUB_API_TIMEOUT)
    except requests.exceptions.RequestException as e:
        logger.error(f"Could not reach GitHub API for {repo.full_name}: {e}")
        return None

    rate_limit_info = parse_rate_limit_headers(response)
    if response.status_code in (403, 429) and rate_limit_info and rate_limit_info.is_exceeded:
        logger.error(f"GitHub API rate limit exceeded for {repo.full_name}, {rate_limit_info}")
        return None

    if response.status_code != 200:
        logger.warning(f"GitHub pulls request for {repo.full_name} failed with status {response.status_code}")
        return None

    if rate_limit_info and rate_limit_info.remaining <= RATE_LIMIT_MIN_REMAINING:
        logger.warning(f"Approaching GitHub API rate limit: {rate_limit_info}")

    try:
        pulls = response.json()
    except ValueError as e:
        logger.warning(f"Failed to parse GitHub pulls JSON response: {e}")
        return None

    if not isinstance(pulls, list):
        logger.warning(f"Unexpected GitHub pulls response for {repo.full_name}: {type(pulls).__name__}")
        return None
    return pulls


def find_open_pull_request(repo: RepoInfo, branch: str, token: Optional[str] = None) -> Optional[PullRequestInfo]:
    """Return the open pull request for ``branch``, taking the last one GitHub lists."""
    pulls = get_open_pull_requests(repo, branch, token)
    if not pulls:
        return None

    pull = pulls[-1]
    try:
        return PullRequestInfo(number=int(pull['number']), sha=pull['head']['sha'])
    except (KeyError, TypeError, ValueError) as e:
        logger.warning(f"Malformed pull request object from GitHub: {e}")
        return None
