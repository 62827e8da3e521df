"""
Migraine Care — API Routes

Експорт всіх роутерів.
"""

from .health import router as health_router
from .sessions import router as sessions_router
from .clinic import router as clinic_router
from .ai import router as ai_router

__all__ = [
    'health_router',
    'sessions_router',
    'clinic_router',
    'ai_router',
]
