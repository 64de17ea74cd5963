"""
authproxy logging package.

- config: LoggingConfig and verbosity mapping
- formatters: JSON, console and Rich output
- manager: LoggingManager singleton that installs handlers
"""

from .config import LoggingConfig, level_from_verbosity
from .formatters import StructuredFormatter
from .manager import LoggingManager, configure_logging, logging_manager

get_logger = logging_manager.get_logger

__all__ = [
    "LoggingConfig",
    "LoggingManager",
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
    "level_from_verbosity",
    "logging_manager",
]
