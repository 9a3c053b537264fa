"""Data directory lookup and log file setup."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from platformdirs import user_data_dir

PROJECT_NAME = "TERMREADER_TERM"
APP_NAME = "termreader-term"
DATA_ENV = f"{PROJECT_NAME}_DATA"
LOG_ENV = f"{PROJECT_NAME}_LOGLEVEL"
LOG_FILE = f"{APP_NAME}.log"
LOGGER_NAME = "termreader"

_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "off": logging.CRITICAL + 10,
}


def get_data_dir() -> Path:
    """Return the directory used for saved data and logs."""
    override = os.environ.get(DATA_ENV)
    if override:
        return Path(override)
    return Path(user_data_dir(APP_NAME, "termreader"))


def _level_from_env() -> int:
    value = os.environ.get(LOG_ENV, "debug")
    name = value.rsplit("=", 1)[-1].strip().lower()
    return _LEVELS.get(name, logging.DEBUG)


def initialize_logging() -> Path:
    """Send the package's log records to a fresh file in the data directory.

    Returns the path of the log file.
    """
    directory = get_data_dir()
    directory.mkdir(parents=True, exist_ok=True)
    log_path = directory / LOG_FILE

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(filename)s:%(lineno)d: %(message)s")
    )
    logger.addHandler(handler)
    logger.setLevel(_level_from_env())
    return log_path