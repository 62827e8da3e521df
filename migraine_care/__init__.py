"""
Migraine Care — Спостереження пацієнтів з мігренню

Модулі:
- config: Конфігурація (backend, таймаут, AI провайдери)
- client: TimedJsonClient — JSON запит з дедлайном
- schemas: Сесії, пацієнти, лікування, AI-консультації
- services: Збереження сесій та AI-консультація
- analytics: Агрегації для графіків
- api: Dev backend (FastAPI)
- web_ui: Веб-інтерфейс (Streamlit)
"""

__version__ = "0.1.0"

from .config import MigraineCareConfig, get_default_config
