"""
Migraine Care — REST API модуль

FastAPI dev backend з тим самим контрактом, що й production backend.

Компоненти:
- app.py: FastAPI application
- routes/: API endpoints
- models.py: Pydantic моделі відповідей
- dependencies.py: In-memory сховища та AI консультант

Запуск:
    uvicorn migraine_care.api.app:app --reload --port 3000

Endpoints:
    GET    /health                       - Health check
    GET    /api/sessions                 - Список сесій
    GET    /api/sessions/patient/{name}  - Сесії пацієнта
    POST   /api/sessions                 - Створити сесію
    PUT    /api/sessions/{id}            - Оновити сесію
    DELETE /api/sessions/{id}            - Видалити сесію
    POST   /api/ai/consult               - AI-консультація

    GET    /api/pacientes                - Пацієнти
    GET    /api/sesiones/paciente/{id}   - Сесії пацієнта
    POST   /api/sesiones                 - Створити клінічну сесію
    PUT    /api/sesiones/{id}            - Оновити клінічну сесію
    GET    /api/tratamientos             - Довідник лікування
    POST   /api/ia/consultar             - AI-консультація (клінічна)
"""

from .app import app, create_app
from .dependencies import get_session_store, get_clinic_store, get_consultant


__all__ = [
    "app",
    "create_app",
    "get_session_store",
    "get_clinic_store",
    "get_consultant",
]
