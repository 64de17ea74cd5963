"""
Logging configuration management.

Provides the configuration object consumed by the LoggingManager.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from authproxy.constants import DEFAULT_LOG_BACKUP_COUNT, DEFAULT_LOG_FILE_SIZE_BYTES

LOG_FORMATS = ("console", "json", "rich")
LOG_OUTPUTS = ("console", "file")


class LoggingConfig:
    """Configuration for the logging system."""

    def __init__(
        self,
        level: Union[str, int] = logging.WARNING,
        format_type: str = "console",  # "console", "json", "rich"
        output: Union[str, List[str]] = "console",  # "console", "file"
        file_path: Optional[Path] = None,
        max_file_size: int = DEFAULT_LOG_FILE_SIZE_BYTES,
        backup_count: int = DEFAULT_LOG_BACKUP_COUNT,
        service_name: str = "authproxy",
        version: str = "unknown",
    ):
        self.level = (
            level if isinstance(level, int) else getattr(logging, level.upper())
        )
        if format_type not in LOG_FORMATS:
            raise ValueError(f"format_type must be one of: {', '.join(LOG_FORMATS)}")
        self.format_type = format_type
        self.output = output if isinstance(output, list) else [output]
        for item in self.output:
            if item not in LOG_OUTPUTS:
                raise ValueError(f"output must contain only: {', '.join(LOG_OUTPUTS)}")
        self.file_path = Path(file_path) if file_path else None
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.service_name = service_name
        self.version = version


def level_from_verbosity(verbose: int) -> int:
    """Map a -v count to a logging level."""
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING
