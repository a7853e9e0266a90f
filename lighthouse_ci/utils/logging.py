# The MIT License (MIT)
# Copyright © 2025 Entrius

import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
DEFAULT_LOG_LEVEL = 'WARNING'


def setup_logging(log_level: str = DEFAULT_LOG_LEVEL) -> None:
    """Setup logging configuration."""
    # force: the CLI may be invoked several times in one process (tests)
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
