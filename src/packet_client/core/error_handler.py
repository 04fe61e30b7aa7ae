# src/packet_client/core/error_handler.py

import json
from typing import Any

import requests

from .exceptions import error_class_for_status
from .response import Response


class ErrorHandler:
    """Класс для классификации ответов API"""

    @staticmethod
    def is_success(status_code: int) -> bool:
        """Статус в диапазоне 200-299 включительно"""
        return 200 <= status_code <= 299

    @staticmethod
    def extract_message(body: bytes) -> str:
        """
        Достаёт поле message из JSON тела ошибки.

        Ключ ищется без учёта регистра. Пустое тело, битый JSON или
        отсутствие строкового message дают пустую строку.
        """
        if not body:
            return ""
        try:
            payload: Any = json.loads(body)
        except ValueError:
            return ""
        if not isinstance(payload, dict):
            return ""

        for key, value in payload.items():
            if isinstance(key, str) and key.lower() == "message" and isinstance(value, str):
                return value
        return ""

    @staticmethod
    def check_response(response: Response) -> None:
        """
        Бросает ApiError (или подкласс по статусу) для статусов вне 200-299.

        Тело ответа полностью вычитывается, чтобы извлечь сообщение сервера.
        Если тело прочитать не удалось (обрыв соединения), сообщение пустое,
        но ApiError всё равно бросается.
        """
        status_code = response.status_code
        if ErrorHandler.is_success(status_code):
            return

        try:
            body = response.http_response.content
        except requests.exceptions.RequestException:
            body = b""

        message = ErrorHandler.extract_message(body)
        error_class = error_class_for_status(status_code)
        raise error_class(response, message)


def check_response(response: Response) -> None:
    """Module-level shortcut for ErrorHandler.check_response."""
    ErrorHandler.check_response(response)
