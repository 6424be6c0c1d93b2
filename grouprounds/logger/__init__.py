"""Logging package for grouprounds."""

from grouprounds.logger.base_logger import AlgorithmLogger
from grouprounds.logger.table_logger import TableLogger
from grouprounds.logger.matrix_logger import MatrixLogger
from grouprounds.logger.combined_logger import Logger
from grouprounds.logger.formatting import (
    format_set,
    format_group,
    format_round,
    format_sequence,
)

# Unified singleton for search tracing
ga_logger = Logger("GroupAssignment")
ga_logger.disabled = True

__all__ = [
    "AlgorithmLogger",
    "TableLogger",
    "MatrixLogger",
    "Logger",
    "ga_logger",
    "format_set",
    "format_group",
    "format_round",
    "format_sequence",
]
