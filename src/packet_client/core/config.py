"""
Конфигурация Packet API клиента.

Все конфиги immutable (frozen dataclasses). Единственное изменяемое
состояние клиента - снимок rate limit - живёт в самом Client, не здесь.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union, TYPE_CHECKING

from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from .logging import LoggingConfig

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# CONSTANTS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

LIBRARY_VERSION = "0.1.0"
DEFAULT_BASE_URL = "https://api.packet.net/"
USER_AGENT = f"packet-client/{LIBRARY_VERSION}"
MEDIA_TYPE = "application/json"

HEADER_AUTH_TOKEN = "X-Auth-Token"
HEADER_CONSUMER_TOKEN = "X-Consumer-Token"

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TIMEOUT CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class TimeoutConfig:
    """
    Таймауты транспорта.

    Клиент сам таймауты не навязывает: это параметр транспорта,
    по умолчанию (timeout=None в ClientConfig) ждём сколько угодно.

    Args:
        connect: Таймаут подключения (сек)
        read: Таймаут чтения данных (сек)

    Examples:
        >>> TimeoutConfig(connect=5, read=30)
    """
    connect: float = 5
    read: float = 30

    def __post_init__(self):
        """Валидация."""
        if self.connect <= 0:
            raise ConfigurationError("connect timeout must be positive")
        if self.read <= 0:
            raise ConfigurationError("read timeout must be positive")

    def as_tuple(self) -> Tuple[float, float]:
        """Вернуть как (connect, read) для requests."""
        return (self.connect, self.read)

TimeoutValue = Union[None, float, Tuple[float, float], TimeoutConfig]

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# MAIN CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class ClientConfig:
    """
    Главная конфигурация Client.

    Args:
        consumer_token: Токен приложения (X-Consumer-Token)
        api_key: API ключ пользователя (X-Auth-Token)
        base_url: Базовый URL API
        user_agent: Значение заголовка User-Agent
        timeout: Таймауты транспорта (None = без таймаута)
        verify_ssl: Проверять TLS сертификаты. Отключение - явный opt-in
            конкретного клиента, глобальные настройки не трогаются.
        logging: Конфигурация логирования (None = без логирования)

    Examples:
        >>> config = ClientConfig(consumer_token="ct", api_key="key")
        >>> config = ClientConfig.create("ct", "key", timeout=(5, 60))
    """
    consumer_token: str
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = USER_AGENT
    timeout: Optional[TimeoutConfig] = None
    verify_ssl: bool = True
    logging: Optional["LoggingConfig"] = None

    def __post_init__(self):
        """Валидация."""
        if not self.base_url:
            raise ConfigurationError("base_url must not be empty")
        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigurationError(f"base_url must be an http(s) URL, got {self.base_url!r}")
        # Без завершающего слеша urljoin отбросит последний сегмент base_url
        if not self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url + "/")

    @classmethod
    def create(
        cls,
        consumer_token: str,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: "TimeoutValue" = None,
        verify_ssl: bool = True,
        logging: Optional["LoggingConfig"] = None,
    ) -> "ClientConfig":
        """
        Удобный конструктор конфигурации.

        Args:
            consumer_token: Токен приложения
            api_key: API ключ
            base_url: Базовый URL
            timeout: Таймаут (число, (connect, read) или TimeoutConfig)
            verify_ssl: Проверять TLS
            logging: Конфигурация логирования

        Returns:
            ClientConfig instance

        Examples:
            >>> ClientConfig.create("ct", "key", timeout=30)
            >>> ClientConfig.create("ct", "key", timeout=(3, 60))
        """
        return cls(
            consumer_token=consumer_token,
            api_key=api_key,
            base_url=base_url,
            timeout=_coerce_timeout(timeout),
            verify_ssl=verify_ssl,
            logging=logging,
        )

    def with_timeout(self, timeout: "TimeoutValue") -> "ClientConfig":
        """
        Создать новый конфиг с изменённым timeout.

        Example:
            >>> new_config = config.with_timeout(60)
        """
        return replace(self, timeout=_coerce_timeout(timeout))

    def with_base_url(self, base_url: str) -> "ClientConfig":
        """Создать новый конфиг с другим base_url (staging, тесты)."""
        return replace(self, base_url=base_url)

def _coerce_timeout(timeout: "TimeoutValue") -> Optional[TimeoutConfig]:
    if timeout is None or isinstance(timeout, TimeoutConfig):
        return timeout
    if isinstance(timeout, tuple):
        return TimeoutConfig(connect=timeout[0], read=timeout[1])
    if isinstance(timeout, (int, float)):
        return TimeoutConfig(connect=min(5, timeout), read=timeout)
    raise ConfigurationError(f"Unsupported timeout value: {timeout!r}")
