"""
gtcommit configuration
======================

Defaults come from environment variables so that applications and test runs
can pick a curve or log level without code changes.
"""

import logging
import os

# Defaults
DEFAULT_PAIRING_CURVE = os.getenv('GTCOMMIT_PAIRING_CURVE', 'MNT224')
DEFAULT_LOG_LEVEL = os.getenv('GTCOMMIT_LOG_LEVEL', 'WARNING')

# Hash-to-G2 input for the randomness base ĝ. Changing it changes every
# commitment, so keys and openings are only portable under the same tag.
DEFAULT_RANDOMNESS_BASE_TAG = os.getenv('GTCOMMIT_RANDOMNESS_BASE_TAG', 'gtcommit/randomness-base/v1')

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


class Config:
    """Runtime configuration."""

    def __init__(self):
        self.pairing_curve = DEFAULT_PAIRING_CURVE
        self.log_level = DEFAULT_LOG_LEVEL
        self.randomness_base_tag = DEFAULT_RANDOMNESS_BASE_TAG

    def setup_logging(self, level=None):
        """
        Attach a stream handler to the ``gtcommit`` logger.

        Libraries should not configure logging on import; applications and
        test suites call this once.
        """
        level = level or self.log_level
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
        logger = logging.getLogger('gtcommit')
        if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)
        logger.setLevel(level)
        return logger


# Global configuration instance
config = Config()
