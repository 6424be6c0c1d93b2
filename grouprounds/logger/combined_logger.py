"""Combined logger with all functionality."""

from grouprounds.logger.base_logger import AlgorithmLogger
from grouprounds.logger.table_logger import TableLogger
from grouprounds.logger.matrix_logger import MatrixLogger
import logging


class Logger(TableLogger, MatrixLogger):
    """
    Combined logger that inherits all display capabilities.

    This logger combines the functionality of:
    - TableLogger: For displaying tabular data
    - MatrixLogger: For displaying the conflict relation

    Usage:
        logger = Logger("my_search")
        logger.section("Round enumeration")
        logger.info("Starting...")
        logger.table(data, headers=["col1", "col2"])
        logger.conflict_matrix(conflicts)
    """

    def __init__(self, name: str):
        """Initialize the combined logger."""
        AlgorithmLogger.__init__(self, name)

    def setup_console_logging(self, level: int = logging.INFO):
        """Enable logging to the console."""
        self.disabled = False
        if not any(isinstance(h, logging.StreamHandler) for h in self.logger.handlers):
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
        self.logger.setLevel(level)
