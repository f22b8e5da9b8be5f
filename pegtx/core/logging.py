"""
Loggers for pegtx

Every module logger hangs under the "pegtx" logger, which owns the handlers. Call configure_logging once to change
the level or add a log file; modules just call get_logger(__name__).
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional

__all__ = ["get_logger", "configure_logging"]

ROOT_LOGGER_NAME = "pegtx"
LOG_FORMAT = '%(asctime)s [%(name)s] [%(levelname)s]: %(message)s'


def configure_logging(log_level: str = "INFO", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Set the level of the package logger and make sure it writes to stdout, plus log_file if given.
    Handlers are only ever added once per destination.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, log_level.upper()))
    formatter = logging.Formatter(LOG_FORMAT)

    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        console_handler = logging.StreamHandler(stream=sys.stdout)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if log_file:
        log_path = os.path.abspath(log_file)
        if not any(isinstance(h, logging.FileHandler) and h.baseFilename == log_path for h in root.handlers):
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    return root


def get_logger(name: str) -> logging.Logger:
    """
    Module logger under the package logger. Names outside the package are nested under it.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        configure_logging()

    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
