"""
Migraine Care — HTTP клієнт

TimedJsonClient: JSON запит з дедлайном і закритою таксономією помилок.
"""

from .types import HttpMethod, Request
from .errors import (
    ErrorKind,
    ClientError,
    RequestTimeout,
    NetworkFailure,
    HttpError,
    DecodeFailure,
)
from .timed_client import TimedJsonClient

__all__ = [
    "HttpMethod",
    "Request",
    "ErrorKind",
    "ClientError",
    "RequestTimeout",
    "NetworkFailure",
    "HttpError",
    "DecodeFailure",
    "TimedJsonClient",
]
