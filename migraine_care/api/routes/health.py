"""
Migraine Care — Health Routes

Health check та інформація про сервер.
"""

from fastapi import APIRouter, Depends

from ... import __version__
from ..dependencies import (
    ClinicStore,
    SessionStore,
    get_clinic_store,
    get_consultant,
    get_session_store,
)
from ..models import HealthResponse
from ...services import AIConsultant

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    sessions: SessionStore = Depends(get_session_store),
    clinic: ClinicStore = Depends(get_clinic_store),
    consultant: AIConsultant = Depends(get_consultant),
) -> HealthResponse:
    """
    Перевірка стану сервера.

    Повертає кількість записів у сховищах і кількість
    налаштованих AI провайдерів (з API ключем).
    """
    providers = [consultant.deepseek, consultant.openai]
    return HealthResponse(
        status="ok",
        version=__version__,
        sessions=len(sessions.sessions),
        patients=len(clinic.patients),
        treatments=len(clinic.treatments),
        ai_providers=sum(1 for p in providers if p.config.is_configured),
    )


@router.get("/")
async def root():
    """Головна сторінка API"""
    return {
        "name": "Migraine Care API",
        "version": __version__,
        "description": "Dev backend для спостереження пацієнтів з мігренню",
        "docs": "/docs",
        "health": "/health",
    }
