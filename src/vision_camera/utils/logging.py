"""
Logging for vision-camera.

The library logs under the `vision_camera` logger and stays silent until
an application configures it. The command line interface maps `-v` flags
to levels: warnings only by default, file operations with `-v`, decode
diagnostics with `-vv`.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

ROOT_LOGGER = "vision_camera"

# Console output sits next to CLI results, so it stays short
CONSOLE_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "[%(asctime)s] %(levelname)s - %(name)s - %(message)s"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def level_from_verbosity(verbosity: int) -> int:
    """Map a count of `-v` flags to a logging level."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(
    verbosity: int = 0,
    log_file: Optional[Path] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the vision_camera logger for an application.

    Args:
        verbosity: Number of `-v` flags; sets the console level.
        log_file: Optional path of a log file that records everything down
            to debug level, with timestamps and logger names.
        stream: Console stream (default: stderr, so stdout carries only
            command output).

    Returns:
        The configured `vision_camera` logger.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    console_level = level_from_verbosity(verbosity)

    # Calling again replaces the previous configuration
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    logger.setLevel(logging.DEBUG if log_file is not None else console_level)
    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Get a logger below `vision_camera`, e.g. get_logger("io.codec")."""
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
