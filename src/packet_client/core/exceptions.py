"""
Иерархия исключений Packet API клиента.

Классификация:
- Ошибки построения запроса (RequestBuildError) - до любой сетевой активности
- API ошибки (ApiError и подклассы) - любой статус вне 200-299
- Ошибки декодирования (DecodeError) - битый JSON в успешном ответе

Сетевые ошибки транспорта (requests.exceptions.ConnectionError, Timeout)
не оборачиваются и пробрасываются как есть.
"""

from typing import TYPE_CHECKING, Optional, Type

if TYPE_CHECKING:
    from .response import Response

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class PacketClientException(Exception):
    """Базовое исключение Packet API клиента."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

class ConfigurationError(PacketClientException):
    """Ошибка конфигурации."""
    pass

class RequestBuildError(PacketClientException):
    """
    Запрос не удалось построить.

    Примеры:
    - Некорректный относительный путь
    - Тело запроса не сериализуется в JSON
    - requests не смог подготовить запрос

    Args:
        message: Сообщение об ошибке
        method: HTTP метод
        path: Относительный путь запроса
    """

    def __init__(self, message: str, method: str = "", path: str = ""):
        self.method = method
        self.path = path

        msg = message
        target = " ".join(part for part in (method, path) if part)
        if target:
            msg += f" ({target})"

        super().__init__(msg)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# API ОШИБКИ (статус вне 200-299)
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class ApiError(PacketClientException):
    """
    Ответ API со статусом вне диапазона 200-299.

    Хранит обёртку ответа (метод, URL, статус, rate limit) и сообщение
    сервера, если его удалось извлечь из тела.

    Строковое представление: "<METHOD> <URL>: <STATUS> <MESSAGE>".

    Args:
        response: Обёртка ответа
        message: Сообщение сервера (может быть пустым)
    """

    def __init__(self, response: "Response", message: str = ""):
        status_code = response.status_code
        if 200 <= status_code <= 299:
            raise ValueError(f"ApiError requires a non-2xx status, got {status_code}")

        self.response = response
        self.status_code = status_code
        self.method = response.method
        self.url = response.request_url

        super().__init__(f"{self.method} {self.url}: {status_code} {message}")
        # message - только текст сервера, полная строка доступна через str()
        self.message = message

class BadRequestError(ApiError):
    """400 Bad Request."""
    pass

class UnauthorizedError(ApiError):
    """401 Unauthorized - неверный X-Auth-Token."""
    pass

class ForbiddenError(ApiError):
    """403 Forbidden."""
    pass

class NotFoundError(ApiError):
    """404 Not Found."""
    pass

class UnprocessableEntityError(ApiError):
    """422 Unprocessable Entity - сервер отклонил параметры ресурса."""
    pass

class TooManyRequestsError(ApiError):
    """429 - квота запросов исчерпана, см. response.rate."""
    pass

class ServerError(ApiError):
    """5xx ошибка сервера."""
    pass

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ОШИБКИ ДЕКОДИРОВАНИЯ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class DecodeError(PacketClientException):
    """
    Успешный ответ, но тело не декодируется как JSON.

    Args:
        response: Обёртка ответа (rate limit доступен)
        cause: Исходная ошибка декодирования
    """

    def __init__(self, response: "Response", cause: Optional[Exception] = None):
        self.response = response
        self.cause = cause

        msg = f"Failed to decode JSON response from {response.method} {response.request_url}"
        if cause:
            msg += f": {cause}"

        super().__init__(msg)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# УТИЛИТЫ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

_STATUS_ERRORS = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    422: UnprocessableEntityError,
    429: TooManyRequestsError,
}

def error_class_for_status(status_code: int) -> Type[ApiError]:
    """
    Подобрать класс ApiError по статус коду.

    Examples:
        >>> error_class_for_status(404) is NotFoundError
        True
        >>> error_class_for_status(503) is ServerError
        True
        >>> error_class_for_status(418) is ApiError
        True
    """
    if status_code in _STATUS_ERRORS:
        return _STATUS_ERRORS[status_code]
    if 500 <= status_code < 600:
        return ServerError
    return ApiError
