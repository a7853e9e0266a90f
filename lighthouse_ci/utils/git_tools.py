# The MIT License (MIT)
# Copyright © 2025 Entrius

import logging
import re
import subprocess
from typing import List, Optional, Tuple

from lighthouse_ci.classes import RepoInfo

# https://github.com/owner/name(.git), ssh://git@github.com/owner/name(.git), git@github.com:owner/name(.git)
REMOTE_SLUG_PATTERN = re.compile(r'[:/]([^/:]+)/([^/:]+?)(?:\.git)?/?$')


def parse_remote_slug(remote_url: str) -> Optional[RepoInfo]:
    """Extract ``owner/name`` from an HTTPS or SSH-style remote URL."""
    match = REMOTE_SLUG_PATTERN.search(remote_url.strip())
    if not match:
        return None
    return RepoInfo(owner=match.group(1), name=match.group(2))


class GitRepository:
    """Reads branch and remote metadata from a local git checkout."""

    def __init__(self, repo_path: Optional[str] = None):
        self.repo_path = repo_path
        self.logger = logging.getLogger(__name__)

    def _run_git_command(self, cmd: List[str]) -> Tuple[bool, str]:
        """Run a git command and return success status and output."""
        try:
            result = subprocess.run(
                cmd,
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                check=True,
            )
            return True, result.stdout.strip()
        except subprocess.CalledProcessError as e:
            self.logger.debug(f"Git command failed: {' '.join(cmd)}, Error: {e.stderr}")
            return False, e.stderr.strip() if e.stderr else str(e)
        except FileNotFoundError as e:
            self.logger.debug(f"git executable not found: {e}")
            return False, str(e)

    def get_current_branch(self) -> Optional[str]:
        """Get the current git branch name, None when detached."""
        success, output = self._run_git_command(["git", "rev-parse", "--abbrev-ref", "HEAD"])
        if not success or not output or output == 'HEAD':
            return None
        return output

    def get_remote_url(self, remote: str = 'origin') -> Optional[str]:
        """Get the configured URL of ``remote``."""
        success, output = self._run_git_command(["git", "config", "--get", f"remote.{remote}.url"])
        return output if success and output else None

    def get_repo_info(self, remote: str = 'origin') -> Optional[RepoInfo]:
        """Owner and name of the repository ``remote`` points to."""
        remote_url = self.get_remote_url(remote)
        if not remote_url:
            return None
        repo = parse_remote_slug(remote_url)
        if repo is None:
            self.logger.debug(f"Could not parse owner/name from remote URL {remote_url}")
        return repo
