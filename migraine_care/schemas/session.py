"""
Migraine Care — Сесія спостереження (проста схема)

Одна таблиця sessions:
- SessionKPIs: показники мігрені за сесію
- FollowUpSession: запис сесії з діагнозом і голосом за AI
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# Мітки голосу за кращу AI-консультацію
VOTE_AI_1 = "IA-1"
VOTE_AI_2 = "IA-2"


class SessionKPIs(BaseModel):
    """
    KPI мігрені.

    Приклад:
        kpis = SessionKPIs(frequency=3, intensity=7, duration=4,
                           triggers="Стрес", medication="Ібупрофен 600мг")
    """
    frequency: int = Field(default=0, ge=0, description="Епізодів на місяць")
    intensity: int = Field(default=0, ge=0, le=10, description="Інтенсивність болю 0-10")
    duration: float = Field(default=0, ge=0, description="Тривалість епізоду (години)")
    triggers: str = Field(default="", description="Тригери")
    medication: str = Field(default="", description="Поточні ліки")


class FollowUpSession(BaseModel):
    """
    Сесія спостереження пацієнта.

    id=None означає, що сесія ще не збережена.
    Поля голосу мають camelCase alias (формат backend API).
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    patient: str = Field(..., min_length=1)
    date: datetime.date = Field(default_factory=datetime.date.today)
    kpis: SessionKPIs = Field(default_factory=SessionKPIs)
    diagnosis: str = ""
    progress: int = Field(default=0, ge=0, le=100, description="Прогрес лікування (%)")
    ai_vote: Optional[str] = Field(default=None, alias="aiVote")
    ai_vote_reason: Optional[str] = Field(default=None, alias="aiVoteReason")

    @classmethod
    def new(cls, patient: str = "Новий пацієнт") -> "FollowUpSession":
        """Порожня сесія на сьогодні"""
        return cls(patient=patient)

    @property
    def is_saved(self) -> bool:
        return self.id is not None

    def vote(self, provider: str, reason: Optional[str] = None) -> None:
        """Позначити, яка AI дала кращий результат"""
        self.ai_vote = provider
        self.ai_vote_reason = reason

    def to_payload(self) -> dict:
        """Тіло запиту до REST backend"""
        return self.model_dump(mode="json", by_alias=True)

    def to_row(self) -> dict:
        """Рядок таблиці sessions (Supabase), без id"""
        return self.model_dump(mode="json", exclude={"id"})
