"""
Console logging for the simulator's command line.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# -v count -> level; anything past the end of the list logs everything
_VERBOSITY = [logging.WARNING, logging.INFO, logging.DEBUG]


class _SimulatorHandler(logging.StreamHandler):
    """Marker type so repeated setup never stacks handlers."""


def setup_logging(verbose_count: int = 0, logger_name: Optional[str] = None) -> logging.Logger:
    """
    Point simulator logging at stderr at a level chosen by `-v` flags.

    No flag shows warnings and aborted runs, `-v` adds session start and
    finish lines, and `-vv` traces every roll and bet settlement.
    """
    level = _VERBOSITY[min(max(verbose_count, 0), len(_VERBOSITY) - 1)]
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    if not any(isinstance(h, _SimulatorHandler) for h in logger.handlers):
        handler = _SimulatorHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)

    # matplotlib's font manager is chatty at DEBUG
    logging.getLogger("matplotlib").setLevel(max(level, logging.INFO))
    return logger
