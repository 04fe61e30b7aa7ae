# src/packet_client/core/client.py
import time
from dataclasses import replace
from typing import Any, Optional, TYPE_CHECKING
from urllib.parse import urlparse

import requests

from .config import ClientConfig
from .destinations import Destination
from .dispatcher import dispatch
from .exceptions import ApiError, ConfigurationError, DecodeError
from .rate_limit import RateSnapshot
from .request_builder import build_request
from .response import Response
from .transport import SessionTransport, Transport
from ..utils.sanitizer import mask_headers
from ..services import (
    DeviceService,
    EmailService,
    FacilityService,
    OSService,
    PlanService,
    ProjectService,
    SshKeyService,
    UserService,
)

if TYPE_CHECKING:
    from .logging import ClientLogger


class Client:
    """
    Клиент Packet API.

    Собирает конфигурацию, транспорт и сервисные объекты в один handle.
    Сервисы (plans, devices, ...) держат ссылку на клиент и ходят в API
    только через new_request() + do().

    Features:
        - Подменяемый транспорт (по умолчанию requests.Session на поток)
        - Снимок rate limit последнего ответа в client.rate_limit
        - Immutable после создания, кроме rate_limit
        - Проверка TLS включена по умолчанию, отключается только явно

    Example:
        >>> client = Client("consumer-token", "api-key")
        >>> target = JSONTarget()
        >>> client.do(client.new_request("GET", "plans"), target)
        >>> client.rate_limit.remaining
        99
    """

    _MUTABLE_ATTRIBUTES = frozenset({"rate_limit"})

    def __init__(
        self,
        consumer_token: Optional[str] = None,
        api_key: Optional[str] = None,
        config: Optional[ClientConfig] = None,
        transport: Optional[Transport] = None,
    ):
        """
        Initialize client.

        Args:
            consumer_token: Токен приложения (если config не передан)
            api_key: API ключ (если config не передан)
            config: Готовый ClientConfig
            transport: Транспорт; по умолчанию SessionTransport с
                verify_ssl и timeout из конфига
        """
        if config is None:
            if consumer_token is None or api_key is None:
                raise ConfigurationError("consumer_token and api_key are required when config is not given")
            config = ClientConfig(consumer_token=consumer_token, api_key=api_key)

        if transport is None:
            transport = SessionTransport(verify_ssl=config.verify_ssl, timeout=config.timeout)

        object.__setattr__(self, "_config", config)
        object.__setattr__(self, "_transport", transport)
        object.__setattr__(self, "_logger", self._create_logger(config))
        object.__setattr__(self, "rate_limit", RateSnapshot())

        # Сервисные объекты: композиция, клиент ими не владеет
        object.__setattr__(self, "plans", PlanService(self))
        object.__setattr__(self, "users", UserService(self))
        object.__setattr__(self, "emails", EmailService(self))
        object.__setattr__(self, "ssh_keys", SshKeyService(self))
        object.__setattr__(self, "devices", DeviceService(self))
        object.__setattr__(self, "projects", ProjectService(self))
        object.__setattr__(self, "facilities", FacilityService(self))
        object.__setattr__(self, "operating_systems", OSService(self))

        object.__setattr__(self, "_initialized", True)

    @staticmethod
    def _create_logger(config: ClientConfig) -> Optional["ClientLogger"]:
        if config.logging is None:
            return None
        from .logging import ClientLogger

        domain = urlparse(config.base_url).netloc or "unknown"
        return ClientLogger(config=config.logging, name=f"packet_client.{domain}")

    def __setattr__(self, name, value):
        """Запретить изменение после init (кроме rate_limit)."""
        if hasattr(self, "_initialized") and name not in self._MUTABLE_ATTRIBUTES:
            raise RuntimeError(
                f"Cannot modify '{name}' - Client is immutable. "
                f"Create new instance instead."
            )
        object.__setattr__(self, name, value)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Закрывает транспорт и обработчики логгера."""
        if self._logger is not None:
            self._logger.close()
        self._transport.close()

    # ==================== Запросы ====================

    def new_request(self, method: str, path: str, body: Optional[Any] = None) -> requests.PreparedRequest:
        """
        Строит запрос относительно base_url.

        Args:
            method: HTTP метод
            path: Относительный путь без ведущего слеша
            body: Тело, сериализуется в JSON

        Raises:
            RequestBuildError: некорректный путь или тело
        """
        return build_request(self._config, method, path, body)

    def do(self, request: requests.PreparedRequest, destination: Optional[Destination] = None) -> Response:
        """
        Выполняет запрос и заполняет destination.

        client.rate_limit обновляется для любого полученного ответа,
        включая ошибки. При сетевой ошибке не обновляется.

        Args:
            request: Запрос из new_request()
            destination: JSONTarget, RawSink или None

        Returns:
            Response с заполненным rate

        Raises:
            requests.exceptions.RequestException: ошибка транспорта, как есть
            ApiError: статус вне 200-299, err.response содержит rate
            DecodeError: тело успешного ответа не JSON
        """
        method = request.method
        url = request.url
        start_time = time.time()

        if self._logger:
            self._logger.debug(
                "Request started",
                method=method,
                url=url,
                headers=mask_headers(request.headers),
            )

        try:
            response = dispatch(self._transport, request, destination, on_rate=self._update_rate)
        except requests.exceptions.RequestException as e:
            if self._logger:
                self._logger.error(
                    "Transport error",
                    method=method,
                    url=url,
                    error=str(e),
                    error_type=type(e).__name__,
                    duration_ms=self._elapsed_ms(start_time),
                )
            raise
        except (ApiError, DecodeError) as e:
            if self._logger:
                self._logger.warning(
                    "Request failed",
                    method=method,
                    url=url,
                    status_code=e.response.status_code,
                    error=str(e),
                    error_type=type(e).__name__,
                    rate_remaining=e.response.rate.remaining,
                    duration_ms=self._elapsed_ms(start_time),
                )
            raise

        if self._logger:
            self._logger.info(
                "Request completed",
                method=method,
                url=url,
                status_code=response.status_code,
                rate_limit=response.rate.limit,
                rate_remaining=response.rate.remaining,
                duration_ms=self._elapsed_ms(start_time),
            )

        return response

    def request(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
        destination: Optional[Destination] = None,
    ) -> Response:
        """new_request() + do() одним вызовом."""
        return self.do(self.new_request(method, path, body), destination)

    def _update_rate(self, snapshot: RateSnapshot) -> None:
        # last writer wins between concurrent calls
        self.rate_limit = replace(snapshot)

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return round((time.time() - start_time) * 1000, 2)

    # ==================== Свойства ====================

    @property
    def config(self) -> ClientConfig:
        """Конфигурация (read-only)."""
        return self._config

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def user_agent(self) -> str:
        return self._config.user_agent

    @property
    def consumer_token(self) -> str:
        return self._config.consumer_token

    @property
    def api_key(self) -> str:
        return self._config.api_key

    def __repr__(self) -> str:
        return f"<Client base_url={self.base_url!r}>"


def new_client(consumer_token: str, api_key: str, **options: Any) -> Client:
    """
    Создать готовый к работе клиент.

    Args:
        consumer_token: Токен приложения
        api_key: API ключ
        **options: Параметры ClientConfig.create (base_url, timeout,
            verify_ssl, logging)

    Example:
        >>> client = new_client("consumer-token", "api-key", timeout=30)
    """
    return Client(config=ClientConfig.create(consumer_token, api_key, **options))
