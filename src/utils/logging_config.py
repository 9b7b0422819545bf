"""Simple logging setup - all logs go to stderr so stdout stays clean."""

import logging
import sys


def setup_logging(verbose: bool = False, debug: bool = False):
    """Setup logging to stderr. ERROR level by default, INFO for batch commands, DEBUG on request."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr, force=True)
