"""Debugging utilities for the assignment search."""

from grouprounds.logger import ga_logger, format_set
from grouprounds.logger.debug.output import (
    generate_debug_html,
    write_debug_output,
)
from grouprounds.logger.debug.error_handling import (
    log_detailed_error,
    debug_algorithm_execution,
)

__all__ = [
    "ga_logger",
    "format_set",
    "generate_debug_html",
    "write_debug_output",
    "log_detailed_error",
    "debug_algorithm_execution",
]
