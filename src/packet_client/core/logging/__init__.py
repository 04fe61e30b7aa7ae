"""
Logging system for Packet API client.

Logging is opt-in per client:

    >>> from packet_client import Client, ClientConfig
    >>> from packet_client.core.logging import LoggingConfig
    >>> config = ClientConfig.create("consumer", "key", logging=LoggingConfig.create(level="DEBUG"))
    >>> client = Client(config=config)
"""

from .config import LoggingConfig, LogLevel, LogFormat
from .logger import ClientLogger
from .formatters import JSONFormatter, TextFormatter, get_formatter
from .filters import ExtraFieldsFilter
from .handlers import build_handlers

__all__ = [
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    "ClientLogger",
    "JSONFormatter",
    "TextFormatter",
    "get_formatter",
    "ExtraFieldsFilter",
    "build_handlers",
]
