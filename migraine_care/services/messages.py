"""Migraine Care — Тексти помилок для користувача"""

from ..client import ClientError, DecodeFailure, HttpError, NetworkFailure, RequestTimeout


def describe_error(error: Exception) -> str:
    """Один рядок для банера помилки в інтерфейсі"""
    if isinstance(error, RequestTimeout):
        return f"Запит тривав надто довго (понад {error.timeout_seconds:g} с)"
    if isinstance(error, NetworkFailure):
        where = f" ({error.url})" if error.url else ""
        return f"Backend недоступний{where}. Перевірте, що сервер запущено"
    if isinstance(error, HttpError):
        return f"Помилка сервера {error.status}: {error.message}"
    if isinstance(error, DecodeFailure):
        return f"Сервер повернув відповідь не у форматі JSON (статус {error.status})"
    if isinstance(error, ClientError):
        return error.message
    return str(error) or error.__class__.__name__
