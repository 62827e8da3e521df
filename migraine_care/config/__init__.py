"""Migraine Care — Модуль конфігурації"""
from .settings import (
    MigraineCareConfig,
    get_default_config,
    ClientConfig,
    AIConfig,
    AIProviderConfig,
    BackendKind,
)
from .loader import save_config, load_config, save_yaml, load_yaml

__all__ = [
    "MigraineCareConfig",
    "get_default_config",
    "ClientConfig",
    "AIConfig",
    "AIProviderConfig",
    "BackendKind",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
]
