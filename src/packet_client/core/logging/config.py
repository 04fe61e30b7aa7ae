"""
Logging settings for the Packet API client.

Logging is off unless a LoggingConfig is put into ClientConfig.logging.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    JSON = "json"
    TEXT = "text"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Where and how a client writes its request log.

    ``level`` and ``format`` accept enum members or case-insensitive
    strings. Records go to stdout and/or a rotating file.

    Attributes:
        level: Minimum level written
        format: "json" (one object per line) or "text"
        enable_console: Write to stdout
        enable_file: Write to ``file_path`` with rotation
        file_path: Log file, required when enable_file is set
        max_bytes: Rotate after this many bytes
        backup_count: Rotated files kept
        logger_name: Overrides the default ``packet_client.<api host>``
        extra_fields: Static fields added to every record (service, env, ...)

    Example:
        >>> LoggingConfig(level="debug", format="json", enable_console=False,
        ...               enable_file=True, file_path="/var/log/packet.log")
    """

    level: Union[LogLevel, str] = LogLevel.INFO
    format: Union[LogFormat, str] = LogFormat.TEXT
    enable_console: bool = True
    enable_file: bool = False
    file_path: Optional[str] = None
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5
    logger_name: Optional[str] = None
    extra_fields: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # frozen: normalised values are written with object.__setattr__
        object.__setattr__(self, "level", LogLevel(str(getattr(self.level, "value", self.level)).upper()))
        object.__setattr__(self, "format", LogFormat(str(getattr(self.format, "value", self.format)).lower()))

        if self.enable_file and not self.file_path:
            raise ValueError("file_path is required when enable_file=True")
        if self.max_bytes < 0 or self.backup_count < 0:
            raise ValueError("max_bytes and backup_count must be >= 0")

    @classmethod
    def create(cls, level: str = "INFO", format: str = "text", **options: Any) -> "LoggingConfig":
        """
        Shortcut with string level/format.

        Example:
            >>> LoggingConfig.create(level="debug", enable_file=True, file_path="/tmp/packet.log")
        """
        return cls(level=level, format=format, **options)
