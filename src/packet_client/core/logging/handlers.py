"""
Handler construction for ClientLogger.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List

from .config import LoggingConfig


def _file_handler(config: LoggingConfig) -> RotatingFileHandler:
    Path(config.file_path).parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        filename=config.file_path,
        maxBytes=config.max_bytes,
        backupCount=config.backup_count,
        encoding='utf-8'
    )


def build_handlers(
    config: LoggingConfig,
    level: int,
    formatter: logging.Formatter,
    filters: List[logging.Filter],
) -> List[logging.Handler]:
    """
    Handlers enabled by ``config``: stdout and/or a rotating file.

    The log file's parent directory is created if missing; rotated files
    are named packet.log.1, packet.log.2, ...
    """
    handlers: List[logging.Handler] = []
    if config.enable_console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if config.enable_file:
        handlers.append(_file_handler(config))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        for f in filters:
            handler.addFilter(f)
    return handlers
