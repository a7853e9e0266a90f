# The MIT License (MIT)
# Copyright © 2025 Entrius

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class Runner(str, Enum):
    """Backend that executes the Lighthouse audit"""

    CHROME = 'chrome'
    WPT = 'wpt'

    @classmethod
    def names(cls) -> List[str]:
        return [runner.value for runner in cls]


@dataclass(frozen=True)
class PullRequestInfo:
    """Pull request being evaluated"""

    number: int
    sha: str

    def __str__(self) -> str:
        return f"PR #{self.number} ({self.sha[:7]})"


@dataclass(frozen=True)
class RepoInfo:
    """Repository the pull request belongs to"""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @classmethod
    def from_slug(cls, slug: str) -> Optional['RepoInfo']:
        """Build from an ``owner/name`` slug, dropping a trailing ``.git``.

        Returns None when the slug does not have exactly two non-empty parts.
        """
        slug = slug.strip().strip('/')
        if slug.endswith('.git'):
            slug = slug[: -len('.git')]

        parts = slug.split('/')
        if len(parts) != 2 or not all(parts):
            return None
        return cls(owner=parts[0], name=parts[1])


@dataclass(frozen=True)
class PullRequestContext:
    """Resolved identity of the pull request under test"""

    pr: PullRequestInfo
    repo: RepoInfo
    source: str = ''


@dataclass
class Configuration:
    """Settings for a single Lighthouse CI run.

    ``min_pass_score`` is None when no ``--score`` was given; when comments are
    disabled it must be set and non-zero.
    """

    test_url: str
    add_comment: bool
    runner: Runner
    pr: PullRequestInfo
    repo: RepoInfo
    min_pass_score: Optional[float] = None

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON body understood by the Lighthouse CI backend."""
        return {
            'testUrl': self.test_url,
            'addComment': self.add_comment,
            'minPassScore': self.min_pass_score,
            'runner': self.runner.value,
            'pr': {'number': self.pr.number, 'sha': self.pr.sha},
            'repo': {'owner': self.repo.owner, 'name': self.repo.name},
        }
