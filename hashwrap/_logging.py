# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 hashwrap contributors.
"""Logging configuration module."""

import logging.config
import os
import sys
from enum import Enum
from typing import Any, Dict, Literal, Optional, Tuple, get_args

ENV_PREFIX = "HASHWRAP_"
LOG_FORMAT = (
    "%(levelname)-8s %(asctime)s.%(msecs)03d "
    "[%(name)s:%(filename)s:%(lineno)d] %(message)s"
)
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(str, Enum):
    """The log level type."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


LogLevelType = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
"""Possible log levels."""


def get_logging_config(log_level: str) -> Dict[str, Any]:
    """Get logging config dict.

    Parameters
    ----------
    log_level : str
        The log level

    Returns
    -------
    Dict[str, Any]
        The logging config dict (for logging.config.dictConfig)
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": LOG_FORMAT,
                "datefmt": LOG_DATE_FORMAT,
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "hashwrap": {
                "handlers": ["default"],
                "level": log_level,
                "propagate": False,
            },
        },
    }


# pyright: reportInvalidTypeForm=false
def get_log_level() -> LogLevelType:
    """Get the default log level.

    Returns
    -------
    LogLevelType
        The default log level
    """
    if "--debug" in sys.argv:
        os.environ[f"{ENV_PREFIX}LOG_LEVEL"] = "DEBUG"
        return "DEBUG"
    possible_log_levels: Tuple[LogLevelType, ...] = get_args(LogLevelType)
    if "--log-level" in sys.argv:
        log_level_index = sys.argv.index("--log-level") + 1
        if log_level_index < len(sys.argv):
            log_level = sys.argv[log_level_index].upper()
            if log_level in possible_log_levels:
                os.environ[f"{ENV_PREFIX}LOG_LEVEL"] = log_level
                return log_level  # type: ignore[return-value]
    for_env = os.environ.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper()
    if for_env in possible_log_levels:
        return for_env  # type: ignore[return-value]
    os.environ[f"{ENV_PREFIX}LOG_LEVEL"] = "INFO"
    return "INFO"


def setup_logging(log_level: Optional[str] = None) -> None:
    """Configure the package loggers.

    Parameters
    ----------
    log_level : Optional[str], optional
        The log level (any case), by default the one from get_log_level()

    Raises
    ------
    ValueError
        If the log level is not a LogLevel
    """
    level = LogLevel((log_level or get_log_level()).upper())
    logging.config.dictConfig(get_logging_config(level.value))
