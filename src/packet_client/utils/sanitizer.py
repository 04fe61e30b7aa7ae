# src/packet_client/utils/sanitizer.py
"""
Маскирование учётных данных перед логированием.

X-Auth-Token и X-Consumer-Token уходят в каждом запросе, поэтому всё, что
попадает в лог (заголовки, поля записи, URL), проходит через эти функции.
"""

import re
from typing import Any, Dict, Set

MASK = "***REDACTED***"

# Список чувствительных полей (case-insensitive, частичное совпадение)
SENSITIVE_KEYS: Set[str] = {
    'password', 'passwd', 'token', 'secret', 'api_key', 'apikey',
    'authorization', 'auth', 'cookie', 'session', 'credentials',
    'x-auth-token', 'x-consumer-token', 'consumer_token',
}

# Регулярные выражения для поиска токенов внутри строк
SENSITIVE_PATTERNS = [
    (re.compile(r'(X-(?:Auth|Consumer)-Token[\s:=]+)([^\s&,;]+)', re.IGNORECASE), r'\1' + MASK),
    (re.compile(r'(Bearer\s+)([A-Za-z0-9\-._~+/]+=*)', re.IGNORECASE), r'\1' + MASK),
    (re.compile(r'([?&](?:api_key|token|auth_token)=)([^&\s]+)', re.IGNORECASE), r'\1' + MASK),
]


def _is_sensitive_key(key: str) -> bool:
    key = key.lower()
    return any(sensitive in key for sensitive in SENSITIVE_KEYS)


def mask_sensitive_data(data: Any, mask: str = MASK) -> Any:
    """
    Рекурсивно маскирует чувствительные данные в словарях, списках, строках.

    Args:
        data: Данные для маскирования
        mask: Строка-заменитель

    Returns:
        Копия данных с замаскированными чувствительными полями

    Examples:
        >>> mask_sensitive_data({"X-Auth-Token": "abc", "Accept": "application/json"})
        {'X-Auth-Token': '***REDACTED***', 'Accept': 'application/json'}
    """
    if isinstance(data, str):
        result = data
        for pattern, replacement in SENSITIVE_PATTERNS:
            result = pattern.sub(replacement.replace(MASK, mask), result)
        return result

    if isinstance(data, dict):
        return {
            key: mask if _is_sensitive_key(str(key)) else mask_sensitive_data(value, mask)
            for key, value in data.items()
        }

    if isinstance(data, (list, tuple)):
        return type(data)(mask_sensitive_data(item, mask) for item in data)

    return data


def mask_headers(headers: Dict[str, str], mask: str = MASK) -> Dict[str, str]:
    """
    Маскирует чувствительные заголовки HTTP.

    Examples:
        >>> mask_headers({"X-Consumer-Token": "ct", "User-Agent": "packet-client/0.1.0"})
        {'X-Consumer-Token': '***REDACTED***', 'User-Agent': 'packet-client/0.1.0'}
    """
    return mask_sensitive_data(dict(headers), mask)
