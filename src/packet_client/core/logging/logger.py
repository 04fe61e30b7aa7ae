"""
Client logger.

Wraps a standard library logger: structured fields are passed as keyword
arguments and every field is run through the credential sanitizer before
any handler sees it.
"""

import logging
from typing import Any, Optional

from .config import LoggingConfig
from .filters import ExtraFieldsFilter
from .formatters import get_formatter
from .handlers import build_handlers
from ...utils.sanitizer import mask_sensitive_data


class ClientLogger:
    """
    Request log of one Client.

    Example:
        >>> log = ClientLogger(LoggingConfig(level="DEBUG", format="json"), name="packet_client.api")
        >>> log.info("Request completed", method="GET", status_code=200, rate_remaining=4999)
        >>> log.close()
    """

    def __init__(self, config: Optional[LoggingConfig] = None, name: str = "packet_client"):
        self.config = config or LoggingConfig()
        self.name = self.config.logger_name or name
        self._closed = False

        level = getattr(logging, self.config.level.value)
        filters = [ExtraFieldsFilter(self.config.extra_fields)] if self.config.extra_fields else []

        self._logger = logging.getLogger(self.name)
        self._logger.setLevel(level)
        self._logger.propagate = False

        # a second client with the same name takes over the logger
        for handler in self._logger.handlers[:]:
            self._logger.removeHandler(handler)
        for handler in build_handlers(self.config, level, get_formatter(self.config.format.value), filters):
            self._logger.addHandler(handler)

    def _log(self, level: int, message: str, fields: dict) -> None:
        if self._closed or not self._logger.isEnabledFor(level):
            return
        self._logger.log(level, message, extra=mask_sensitive_data(fields))

    def debug(self, message: str, **fields: Any) -> None:
        self._log(logging.DEBUG, message, fields)

    def info(self, message: str, **fields: Any) -> None:
        self._log(logging.INFO, message, fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._log(logging.WARNING, message, fields)

    def error(self, message: str, **fields: Any) -> None:
        self._log(logging.ERROR, message, fields)

    def close(self) -> None:
        """Flush and detach all handlers. Safe to call twice."""
        if self._closed:
            return
        for handler in self._logger.handlers[:]:
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
