"""
Logging Configuration
Console (and optional file) output for the drift engine.

bbdrift modules log under 'bbdrift.*' and never add handlers themselves; the
ratio package does not log at all. Entry points such as
``python -m bbdrift.calculator`` call setup_logging(config.LOG_LEVEL) once,
so BBSIGHT_LOG_LEVEL=DEBUG shows why each simulation stopped (range reached,
energy drained, BB stopped).
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "bbdrift"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the 'bbdrift' logger and return it.

    Calling it again replaces the previous handlers, so a demo run that
    switches level or log file does not print every line twice.

    Args:
        level: Level for the logger and its handlers, usually config.LOG_LEVEL
        log_file: Optional path; the simulation log is written there as well
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized at %s.", logging.getLevelName(level))
    return logger
