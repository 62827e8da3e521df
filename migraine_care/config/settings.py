"""
Migraine Care — Налаштування системи

Всі параметри зібрані в dataclass-и для:
- Типізації та валідації
- Явної передачі в клієнт (жодних глобальних звернень до env всередині)
- Серіалізації в YAML
"""

import os
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Dict, List, Optional


# =============================================================================
# ENUMS
# =============================================================================

class BackendKind(str, Enum):
    """Куди зберігаються сесії"""
    REST = "rest"            # власний backend (/sessions, /ai/consult)
    SUPABASE = "supabase"    # hosted database REST API (/rest/v1/...)


# =============================================================================
# HTTP CLIENT CONFIGURATION
# =============================================================================

DEFAULT_API_URL = "http://localhost:3000/api"
DEFAULT_TIMEOUT_SECONDS = 30.0


def normalize_base_url(url: str) -> str:
    """Додати схему, якщо її немає (production URL задається як голий хост)"""
    url = url.strip()
    if not url:
        raise ValueError("base_url must not be empty")
    if "://" not in url:
        url = f"https://{url}"
    if not url.startswith(("http://", "https://")):
        raise ValueError(f"Unsupported URL scheme: {url}")
    return url


@dataclass(frozen=True)
class ClientConfig:
    """
    Параметри TimedJsonClient.

    Незмінний після створення: один екземпляр на процес.
    """
    base_url: str = DEFAULT_API_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    # Не використовується: повторних спроб немає
    max_retries: int = 3

    default_headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        # frozen dataclass: обхід через object.__setattr__
        object.__setattr__(self, "base_url", normalize_base_url(self.base_url))
        object.__setattr__(self, "default_headers", dict(self.default_headers))

    @classmethod
    def for_supabase(
        cls,
        url: str,
        anon_key: str,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> "ClientConfig":
        """Конфігурація для прямого доступу до таблиць Supabase"""
        return cls(
            base_url=f"{normalize_base_url(url).rstrip('/')}/rest/v1",
            timeout_seconds=timeout_seconds,
            default_headers={
                "apikey": anon_key,
                "Authorization": f"Bearer {anon_key}",
                "Prefer": "return=representation",
            },
        )


# =============================================================================
# AI PROVIDERS CONFIGURATION
# =============================================================================

DEEPSEEK_SYSTEM_PROMPT = (
    "Ти медичний асистент, що спеціалізується на неврології та лікуванні мігрені. "
    "Надавай точний клінічний аналіз і рекомендації, засновані на доказовій медицині."
)

OPENAI_SYSTEM_PROMPT = (
    "Ти система штучного інтелекту для предиктивного аналізу мігрені. "
    "Використовуй статистичні моделі та машинне навчання, щоб давати прогнози та рекомендації."
)


@dataclass
class AIProviderConfig:
    """Параметри одного chat-completion провайдера"""
    name: str
    label: str
    base_url: str
    model: str
    system_prompt: str
    api_key: Optional[str] = None
    temperature: float = 0.7
    max_tokens: int = 500
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def client_config(self) -> ClientConfig:
        """ClientConfig з Bearer ключем провайдера"""
        headers = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return ClientConfig(
            base_url=self.base_url,
            timeout_seconds=self.timeout_seconds,
            max_retries=0,
            default_headers=headers,
        )


def _default_deepseek() -> AIProviderConfig:
    return AIProviderConfig(
        name="deepseek",
        label="DeepSeek (клінічний аналіз)",
        base_url="https://api.deepseek.com/v1",
        model="deepseek-chat",
        system_prompt=DEEPSEEK_SYSTEM_PROMPT,
    )


def _default_openai() -> AIProviderConfig:
    return AIProviderConfig(
        name="openai",
        label="Copilot (предиктивний аналіз)",
        base_url="https://api.openai.com/v1",
        model="gpt-4",
        system_prompt=OPENAI_SYSTEM_PROMPT,
    )


@dataclass
class AIConfig:
    """Два провайдери AI-консультації"""
    deepseek: AIProviderConfig = field(default_factory=_default_deepseek)
    openai: AIProviderConfig = field(default_factory=_default_openai)


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class MigraineCareConfig:
    """
    Головна конфігурація Migraine Care.

    Створюється один раз при старті (from_env / YAML) і передається далі.

    Приклад:
        config = MigraineCareConfig.from_env()
        client = TimedJsonClient(config.client_config())
    """
    version: str = "0.1.0"

    backend: BackendKind = BackendKind.REST
    api: ClientConfig = field(default_factory=ClientConfig)

    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None

    ai: AIConfig = field(default_factory=AIConfig)

    def client_config(self) -> ClientConfig:
        """ClientConfig для обраного backend"""
        if self.backend == BackendKind.SUPABASE:
            if not self.supabase_url or not self.supabase_anon_key:
                raise ValueError("Supabase backend selected but credentials are missing")
            return ClientConfig.for_supabase(
                self.supabase_url,
                self.supabase_anon_key,
                timeout_seconds=self.api.timeout_seconds,
            )
        return self.api

    def warnings(self) -> List[str]:
        """Перевірка наявності облікових даних"""
        messages = []
        if self.backend == BackendKind.SUPABASE and not (self.supabase_url and self.supabase_anon_key):
            messages.append("Відсутні облікові дані Supabase")
        if not self.ai.deepseek.is_configured:
            messages.append("Відсутній API ключ DeepSeek")
        if not self.ai.openai.is_configured:
            messages.append("Відсутній API ключ OpenAI")
        return messages

    def to_dict(self) -> dict:
        data = asdict(self)
        data["backend"] = self.backend.value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "MigraineCareConfig":
        """Відновити конфігурацію зі словника (наприклад, з YAML)"""
        data = dict(data or {})
        ai_data = data.pop("ai", None) or {}
        api_data = data.pop("api", None) or {}

        ai = AIConfig()
        for name in ("deepseek", "openai"):
            provider = getattr(ai, name)
            for key, value in (ai_data.get(name) or {}).items():
                if hasattr(provider, key):
                    setattr(provider, key, value)

        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        if "backend" in known:
            known["backend"] = BackendKind(known["backend"])

        return cls(api=ClientConfig(**api_data), ai=ai, **known)

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "MigraineCareConfig":
        """Створити конфігурацію з environment variables"""
        env = os.environ if environ is None else environ

        timeout = float(env.get("MIGRAINE_TIMEOUT", DEFAULT_TIMEOUT_SECONDS))

        ai = AIConfig()
        ai.deepseek.api_key = env.get("DEEPSEEK_API_KEY") or None
        ai.openai.api_key = env.get("OPENAI_API_KEY") or None
        for provider in (ai.deepseek, ai.openai):
            provider.timeout_seconds = timeout

        return cls(
            backend=BackendKind(env.get("MIGRAINE_BACKEND", BackendKind.REST.value).lower()),
            api=ClientConfig(
                base_url=env.get("MIGRAINE_API_URL", DEFAULT_API_URL),
                timeout_seconds=timeout,
                max_retries=int(env.get("MIGRAINE_MAX_RETRIES", "3")),
            ),
            supabase_url=env.get("SUPABASE_URL") or None,
            supabase_anon_key=env.get("SUPABASE_ANON_KEY") or None,
            ai=ai,
        )


def get_default_config() -> MigraineCareConfig:
    """Отримати конфігурацію за замовчуванням"""
    return MigraineCareConfig()
