# utils/logger.py
# This file is part of Propsat - A naive propositional satisfiability checker
#
# Logging utility for formula solving with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for the solver."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class SolverLogger:
    """Centralized logger for formula solving with structured output."""

    def __init__(self, name: str = "propsat", level: LogLevel = LogLevel.INFO):
        """Initialize the solver logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(SolverFormatter())

        self.logger.addHandler(console_handler)
        self.logger.propagate = False

    @property
    def level(self) -> LogLevel:
        return LogLevel(self.logger.level)

    def is_debug(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for solver events
    def search_start(self, formula_text: str, variable_count: int):
        """Log the start of a witness search."""
        self.debug(f"Searching witness for {formula_text} over {variable_count} variable(s)")

    def search_result(self, satisfiable: bool, branches: int):
        """Log the outcome of a witness search."""
        outcome = "SAT" if satisfiable else "UNSAT"
        self.debug(f"Search finished: {outcome} after {branches} branch(es)")

    def formula_loaded(self, formula_text: str):
        """Log the formula about to be solved."""
        self.info(f"Formula loaded: {formula_text}")


class SolverFormatter(logging.Formatter):
    """Custom formatter for solver logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[SolverLogger] = None


def get_logger(name: str = "propsat") -> SolverLogger:
    """Get or create the global solver logger instance.

    Args:
        name: Logger name (default: "propsat")

    Returns:
        SolverLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = SolverLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
