# utils/__init__.py
# This file is part of Propsat - A naive propositional satisfiability checker
#
# Utility module exports

from .logger import (
    LogLevel,
    SolverLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "SolverLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
