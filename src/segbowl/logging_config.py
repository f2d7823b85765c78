"""
Logging Configuration
Attaches handlers to the ``segbowl`` logger for command line runs.

Library modules only create loggers. Diagnostics are written to stderr so the
summary and cut list printed on stdout can be piped or redirected.
"""
import logging
import sys
from typing import Optional, TextIO

_FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: int = logging.WARNING,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configures the 'segbowl' logger and returns it.

    Args:
        level: Logging level; DEBUG also shows the emitting module
        log_file: Optional path to save a timestamped log to
        stream: Console stream, stderr by default
    """
    logger = logging.getLogger("segbowl")
    logger.setLevel(level)

    # Replace handlers left by an earlier call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(level)
    if level <= logging.DEBUG:
        console_handler.setFormatter(logging.Formatter('%(name)s: %(levelname)s: %(message)s'))
    else:
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt='%H:%M:%S'))
        logger.addHandler(file_handler)

    logger.debug("Logging initialized at level %s.", logging.getLevelName(level))
    return logger
