"""
Lighthouse CI Utilities
"""

import hashlib
import re
from typing import Optional

PULL_URL_PATTERN = re.compile(r'/pull/(\d+)/?$')


def mask_secret(secret: str, length: int = 5) -> str:
    """Return a short SHA-256 hash of a secret for logging."""
    h = hashlib.sha256(str(secret).encode("utf-8")).hexdigest()
    return f"<masked:{h[:length]}>"


def parse_pr_number(value: Optional[str]) -> Optional[int]:
    """Parse a pull request number from ``123`` or ``https://github.com/o/r/pull/123``.

    Returns None for anything else, including Travis' ``false`` on push builds.
    """
    if not value:
        return None
    value = value.strip()
    if value.isdigit():
        return int(value)
    match = PULL_URL_PATTERN.search(value)
    return int(match.group(1)) if match else None
