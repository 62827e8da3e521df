"""
Migraine Care — Типи HTTP запиту
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class HttpMethod(str, Enum):
    """Дозволені HTTP методи"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@dataclass(frozen=True)
class Request:
    """
    Один JSON запит.

    path додається до base_url клієнта без змін, тому має бути порожнім
    або починатися з "/" чи "?". body=None означає запит без тіла.

    Приклад:
        Request(HttpMethod.POST, "/sessions", body={"patient": "P001"})
    """
    method: HttpMethod
    path: str = ""
    body: Any = None
    headers: Optional[Dict[str, str]] = None

    def __post_init__(self):
        if not isinstance(self.method, HttpMethod):
            object.__setattr__(self, "method", HttpMethod(str(self.method).upper()))
        if self.path and not self.path.startswith(("/", "?")):
            raise ValueError(f"Request path must start with '/' or '?': {self.path!r}")
        if self.headers is not None:
            object.__setattr__(self, "headers", dict(self.headers))
