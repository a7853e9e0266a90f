# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Lighthouse CI command line interface.

Usage:
    runlighthouse [--score=<score>] [--no-comment] [--runner=chrome|wpt] <url>
"""

from .main import main, runlighthouse

__all__ = ['main', 'runlighthouse']
