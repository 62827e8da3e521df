"""
Migraine Care — API Models

Pydantic моделі відповідей, яких немає в migraine_care.schemas.
"""

from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Відповідь health check"""
    status: str = "ok"
    version: str
    sessions: int
    patients: int
    treatments: int
    ai_providers: int


class DeleteResponse(BaseModel):
    deleted: bool
    id: int


class ErrorResponse(BaseModel):
    """Відповідь з помилкою (формат, який читає TimedJsonClient)"""
    error: str
    detail: Optional[str] = None
