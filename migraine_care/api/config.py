"""
Migraine Care — API Configuration

Налаштування dev backend (FastAPI).
"""

from dataclasses import dataclass, field
import os


def _bool_env(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "y"}


@dataclass
class APIConfig:
    """Конфігурація API сервера"""

    # Сервер
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = True
    reload: bool = False

    # CORS
    cors_origins: list = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list = field(default_factory=lambda: ["*"])
    cors_allow_headers: list = field(default_factory=lambda: ["*"])

    # Початкові демонстраційні дані
    seed_samples: bool = True

    # API
    api_prefix: str = "/api"
    api_version: str = "0.1.0"
    api_title: str = "Migraine Care API"
    api_description: str = "Dev backend для спостереження пацієнтів з мігренню"

    @classmethod
    def from_env(cls) -> 'APIConfig':
        """Створити конфігурацію з environment variables"""
        return cls(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("API_PORT", "3000")),
            debug=_bool_env("API_DEBUG", "true"),
            seed_samples=_bool_env("API_SEED_SAMPLES", "true"),
        )
