"""
Migraine Care — TimedJsonClient

Один JSON обмін з жорстким дедлайном:
    config = ClientConfig(base_url="http://localhost:3000/api", timeout_seconds=30)
    client = TimedJsonClient(config)
    sessions = client.get("/sessions")

Кожен виклик send():
- робить рівно одну спробу (без повторів, max_retries не читається)
- має власний дедлайн timeout_seconds, відлік від початку виклику
- при перевищенні дедлайну таймер обриває з'єднання, виклик кидає RequestTimeout
- повертає декодований JSON або кидає один з ClientError
"""

import json
import logging
import socket
import threading
import time
from typing import Any, Dict, List, Optional

import requests
from requests.adapters import HTTPAdapter

from ..config.settings import ClientConfig
from .errors import ClientError, DecodeFailure, HttpError, NetworkFailure, RequestTimeout
from .types import HttpMethod, Request


logger = logging.getLogger(__name__)

BASE_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

CHUNK_SIZE = 8192

# Ключі, в яких сервер повертає текст помилки
SERVER_MESSAGE_KEYS = ("error", "message", "detail")


class _Deadline:
    """Дедлайн одного виклику"""

    def __init__(self, seconds: float):
        self.seconds = seconds
        self.expires_at = time.monotonic() + seconds

    def remaining(self) -> float:
        return self.expires_at - time.monotonic()

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0


# =============================================================================
# Обрив з'єднання по дедлайну
# =============================================================================

def _tracking_pool(pool_cls, register):
    """Пул urllib3, що передає кожне нове з'єднання в register"""

    class TrackingPool(pool_cls):
        def _new_conn(self):
            conn = super()._new_conn()
            register(conn)
            return conn

    TrackingPool.__name__ = f"Tracking{pool_cls.__name__}"
    return TrackingPool


class _AbortableAdapter(HTTPAdapter):
    """
    HTTPAdapter одного виклику, який пам'ятає свої з'єднання.

    abort() робить shutdown сокетів, тому заблоковане читання
    заголовків чи тіла одразу повертається з іншого потоку.
    """

    def __init__(self):
        self.connections: List[Any] = []
        self._lock = threading.Lock()
        super().__init__(max_retries=0)

    def init_poolmanager(self, *args, **kwargs):
        super().init_poolmanager(*args, **kwargs)
        self._track(self.poolmanager)

    def proxy_manager_for(self, proxy, **proxy_kwargs):
        manager = super().proxy_manager_for(proxy, **proxy_kwargs)
        self._track(manager)
        return manager

    def _track(self, manager) -> None:
        if getattr(manager, "_tracked", False):
            return
        manager.pool_classes_by_scheme = {
            scheme: _tracking_pool(pool_cls, self._register)
            for scheme, pool_cls in manager.pool_classes_by_scheme.items()
        }
        manager._tracked = True

    def _register(self, conn) -> None:
        with self._lock:
            self.connections.append(conn)

    def abort(self) -> bool:
        """
        Обірвати всі з'єднання.

        Returns:
            True, якщо якесь з'єднання ще не має сокета (встановлюється)
        """
        with self._lock:
            connections = list(self.connections)

        pending = not connections
        for conn in connections:
            sock = getattr(conn, "sock", None)
            if sock is None:
                pending = True
                continue
            try:
                sock.shutdown(socket.SHUT_RDWR)
            except OSError:
                # Сокет вже закритий іншою стороною
                pass
        return pending


class _Watchdog:
    """
    Таймер дедлайну одного виклику.

    Після cancel() жоден обрив вже не відбудеться: спрацювання
    і скасування виконуються під одним lock.
    """

    RETRY_SECONDS = 0.05

    def __init__(self, adapter: _AbortableAdapter, seconds: float):
        self.adapter = adapter
        self.fired = False
        self._cancelled = False
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._schedule(seconds)

    def _schedule(self, seconds: float) -> None:
        timer = threading.Timer(seconds, self._fire)
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _fire(self) -> None:
        with self._lock:
            if self._cancelled:
                return
            self.fired = True
            if self.adapter.abort():
                # З'єднання ще встановлюється: повторити, коли з'явиться сокет
                self._schedule(self.RETRY_SECONDS)

    def cancel(self) -> None:
        with self._lock:
            self._cancelled = True
            if self._timer is not None:
                self._timer.cancel()


def server_message(body: bytes) -> Optional[str]:
    """Витягнути текст помилки з JSON тіла відповіді, якщо він там є"""
    try:
        data = json.loads(body)
    except ValueError:
        return None

    if not isinstance(data, dict):
        return None

    for key in SERVER_MESSAGE_KEYS:
        value = data.get(key)
        # OpenAI: {"error": {"message": "...", "type": "..."}}
        if isinstance(value, dict):
            value = value.get("message")
        if isinstance(value, str) and value.strip():
            return value
    return None


class TimedJsonClient:
    """
    HTTP клієнт з дедлайном на кожен запит.

    Зберігає лише незмінну конфігурацію; кожен виклик має власну
    requests.Session, тому один екземпляр можна використовувати
    з кількох потоків одночасно.
    """

    def __init__(self, config: ClientConfig):
        self.config = config

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def timeout_seconds(self) -> float:
        return self.config.timeout_seconds

    def url_for(self, path: str) -> str:
        return f"{self.config.base_url}{path}"

    def _headers_for(self, request: Request) -> Dict[str, str]:
        headers = dict(BASE_HEADERS)
        headers.update(self.config.default_headers)
        if request.headers:
            headers.update(request.headers)
        return headers

    # ------------------------------------------------------------------
    # send
    # ------------------------------------------------------------------

    def send(self, request: Request) -> Any:
        """
        Виконати запит.

        Returns:
            Декодований JSON (None для 204 No Content)

        Raises:
            RequestTimeout, NetworkFailure, HttpError, DecodeFailure
        """
        url = self.url_for(request.path)
        data = None
        if request.body is not None:
            data = json.dumps(request.body, ensure_ascii=False).encode("utf-8")

        adapter = _AbortableAdapter()
        session = requests.Session()
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        deadline = _Deadline(self.config.timeout_seconds)
        watchdog = _Watchdog(adapter, self.config.timeout_seconds)
        logger.debug("%s %s", request.method.value, url)

        response = None
        try:
            # (connect, read): жоден етап не може чекати довше за дедлайн
            wait = max(deadline.remaining(), 0.001)
            response = session.request(
                request.method.value,
                url,
                data=data,
                headers=self._headers_for(request),
                timeout=(wait, wait),
                stream=True,
            )
            body = self._read_body(response, deadline)
            # Обірване таймером тіло може виглядати як завершене
            if watchdog.fired or deadline.expired:
                raise RequestTimeout(self.config.timeout_seconds)
        except (requests.exceptions.RequestException, OSError) as e:
            if watchdog.fired or deadline.expired or isinstance(e, requests.exceptions.Timeout):
                error: ClientError = RequestTimeout(self.config.timeout_seconds, url)
            else:
                error = NetworkFailure(e, url)
            logger.warning("%s %s failed: %s", request.method.value, url, error.message)
            raise error from e
        except RequestTimeout as e:
            e.url = url
            logger.warning("%s %s failed: %s", request.method.value, url, e.message)
            raise
        finally:
            watchdog.cancel()
            # Закриває з'єднання, якщо тіло не дочитане
            if response is not None:
                response.close()
            session.close()

        elapsed_ms = (self.config.timeout_seconds - deadline.remaining()) * 1000
        logger.debug(
            "%s %s → %s (%.1fms)",
            request.method.value, url, response.status_code, elapsed_ms,
        )
        return self._decode(response, body, url)

    def _read_body(self, response: requests.Response, deadline: _Deadline) -> bytes:
        chunks = []
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            chunks.append(chunk)
            if deadline.expired:
                raise RequestTimeout(self.config.timeout_seconds)
        return b"".join(chunks)

    def _decode(self, response: requests.Response, body: bytes, url: str) -> Any:
        status = response.status_code

        if not 200 <= status < 300:
            message = server_message(body)
            if not message:
                reason = (response.reason or "").strip()
                message = f"Error {status}: {reason}" if reason else f"Error {status}"
            logger.warning("%s → HTTP %s: %s", url, status, message)
            raise HttpError(status, message, url)

        if status == 204:
            return None

        try:
            return json.loads(body)
        except ValueError as e:
            text = body[:200].decode("utf-8", errors="replace")
            logger.warning("%s → HTTP %s with non-JSON body", url, status)
            raise DecodeFailure(status, text, url) from e

    # ------------------------------------------------------------------
    # Зручні обгортки
    # ------------------------------------------------------------------

    def get(self, path: str, headers: Optional[Dict[str, str]] = None) -> Any:
        return self.send(Request(HttpMethod.GET, path, headers=headers))

    def post(self, path: str, body: Any = None, headers: Optional[Dict[str, str]] = None) -> Any:
        return self.send(Request(HttpMethod.POST, path, body=body, headers=headers))

    def put(self, path: str, body: Any = None, headers: Optional[Dict[str, str]] = None) -> Any:
        return self.send(Request(HttpMethod.PUT, path, body=body, headers=headers))

    def patch(self, path: str, body: Any = None, headers: Optional[Dict[str, str]] = None) -> Any:
        return self.send(Request(HttpMethod.PATCH, path, body=body, headers=headers))

    def delete(self, path: str, headers: Optional[Dict[str, str]] = None) -> Any:
        return self.send(Request(HttpMethod.DELETE, path, headers=headers))
