# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Process-wide settings, read from the environment once at startup.

Priority for the API key:
    1. LIGHTHOUSE_API_KEY
    2. API_KEY (deprecated)
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from lighthouse_ci.constants import (
    API_KEY_ENV,
    CI_ENV_VARS,
    CI_HOST_ENV,
    DEFAULT_CI_HOST,
    DEPRECATED_API_KEY_ENV,
    GITHUB_TOKEN_ENV,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Snapshot of every environment value the runner consumes."""

    ci_host: str = DEFAULT_CI_HOST
    api_key: Optional[str] = None
    api_key_deprecated: bool = False
    github_token: Optional[str] = None
    ci_env: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Build settings from ``environ`` (defaults to ``os.environ``)."""
        if environ is None:
            environ = os.environ

        api_key = environ.get(API_KEY_ENV) or None
        api_key_deprecated = False
        if not api_key and environ.get(DEPRECATED_API_KEY_ENV):
            api_key = environ[DEPRECATED_API_KEY_ENV]
            api_key_deprecated = True

        ci_host = (environ.get(CI_HOST_ENV) or DEFAULT_CI_HOST).rstrip('/')

        return cls(
            ci_host=ci_host,
            api_key=api_key,
            api_key_deprecated=api_key_deprecated,
            github_token=environ.get(GITHUB_TOKEN_ENV) or None,
            ci_env={name: environ[name] for name in CI_ENV_VARS if environ.get(name)},
        )

    def ci_value(self, name: str) -> str:
        """Return a CI variable, or an empty string when unset."""
        return self.ci_env.get(name, '').strip()

    def warn_deprecations(self) -> None:
        if self.api_key_deprecated:
            logger.warning(f"{DEPRECATED_API_KEY_ENV} is deprecated, set {API_KEY_ENV} instead")
