"""Logging setup for agivocab."""

import sys

from loguru import logger


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure loguru for command-line output.

    Removes the default handler and installs a stderr sink whose level
    follows the verbosity flags: DEBUG with --debug, INFO with --verbose,
    WARNING otherwise.

    Args:
        verbose: Show progress and summary messages
        debug: Show debug tracing messages
    """
    logger.remove()

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = "WARNING"

    logger.add(
        sys.stderr,
        level=level,
        format="<level>{message}</level>",
        colorize=None,
    )
