"""
Migraine Care — Помилки HTTP клієнта

Чотири взаємовиключні види помилок з одним базовим класом:
- RequestTimeout: дедлайн минув раніше, ніж завершився запит
- NetworkFailure: з'єднання, DNS, TLS, обірвана передача
- HttpError: статус не 2xx
- DecodeFailure: статус 2xx, але тіло не JSON
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Вид помилки клієнта"""
    TIMEOUT = "timeout"
    NETWORK = "network"
    HTTP = "http"
    DECODE = "decode"


class ClientError(Exception):
    """Базова помилка TimedJsonClient"""

    kind: ErrorKind

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.url = url


class RequestTimeout(ClientError):
    kind = ErrorKind.TIMEOUT

    def __init__(self, timeout_seconds: float, url: Optional[str] = None):
        super().__init__(f"Request exceeded {timeout_seconds:g}s deadline", url)
        self.timeout_seconds = timeout_seconds


class NetworkFailure(ClientError):
    kind = ErrorKind.NETWORK

    def __init__(self, cause: BaseException, url: Optional[str] = None):
        super().__init__(f"Network failure: {cause}", url)
        self.cause = cause


class HttpError(ClientError):
    kind = ErrorKind.HTTP

    def __init__(self, status: int, message: str, url: Optional[str] = None):
        super().__init__(message, url)
        self.status = status


class DecodeFailure(ClientError):
    kind = ErrorKind.DECODE

    def __init__(self, status: int, body: str, url: Optional[str] = None):
        super().__init__(f"Response with status {status} is not valid JSON", url)
        self.status = status
        self.body = body
