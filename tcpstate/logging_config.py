"""
Logging setup for the command line entry point.

The library itself only creates module loggers; applications decide how
they are handled.
"""

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Set up logging configuration.

    Logs go to stderr so they never interleave with the trace on stdout.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("tcpstate").setLevel(level)
