"""
Logging Configuration
=====================
Sets up the 'stressdomain' logger for hosts that embed the plot.

The widget reports skipped out-of-range points with logger.error and each
redraw with logger.debug; everything goes through child loggers of
LOG_NAMESPACE, so one call here controls all of it.
"""
import logging
import sys
from typing import Optional, Union

LOG_NAMESPACE = "stressdomain"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'


def _resolve_level(level: Union[int, str]) -> int:
    """Accept logging.DEBUG or a name such as "debug"."""
    if isinstance(level, int):
        return level
    levels = logging.getLevelNamesMapping()
    try:
        return levels[level.strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown log level '{level}' (expected one of {', '.join(sorted(levels))})") from None


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configures the 'stressdomain' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG or "debug").
        log_file: Optional path to save logs to a file.

    Returns:
        The package logger.
    """
    numeric_level = _resolve_level(level)
    logger = logging.getLogger(LOG_NAMESPACE)
    logger.setLevel(numeric_level)

    # Calling twice must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging initialized at {logging.getLevelName(numeric_level)}.")
    return logger
