"""
Logging setup for local runs.

Logs go to stderr so stdout carries only the function result.
"""

from __future__ import annotations

import logging
import sys

from checkout_functions.ports.environment import EnvironmentPort

LOG_LEVEL_ENV = "CHECKOUT_FUNCTIONS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_log_level(env: EnvironmentPort) -> int:
    """Log level from the environment; unknown names fall back to INFO."""
    name = (env.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.INFO
    return level


def configure_logging(env: EnvironmentPort) -> int:
    level = resolve_log_level(env)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    return level
