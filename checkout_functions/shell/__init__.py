"""
Shell - Host boundary and local runtime setup.
"""

from .logging_config import LOG_LEVEL_ENV, configure_logging, resolve_log_level
from .runner import (
    FUNCTIONS,
    RegisteredFunction,
    get_function,
    invoke,
    parse_input,
    run_function,
)

__all__ = [
    "FUNCTIONS",
    "RegisteredFunction",
    "get_function",
    "parse_input",
    "invoke",
    "run_function",
    "LOG_LEVEL_ENV",
    "configure_logging",
    "resolve_log_level",
]
