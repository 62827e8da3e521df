"""
Migraine Care — Демонстраційні дані

Використовуються інтерфейсом як резерв, коли backend недоступний,
і для початкового наповнення dev backend.
"""

import datetime
from typing import List

from ..schemas import (
    AIOpinion,
    ClinicalConsultation,
    DEEPSEEK_LABEL,
    FollowUpSession,
    OPENAI_LABEL,
    Patient,
    SessionKPIs,
    Treatment,
    VOTE_AI_1,
)


def sample_sessions() -> List[FollowUpSession]:
    return [
        FollowUpSession(
            id=1,
            date=datetime.date(2024, 11, 15),
            patient="María González",
            kpis=SessionKPIs(
                frequency=3,
                intensity=7,
                duration=4,
                triggers="Стрес, недосипання",
                medication="Ібупрофен 600мг",
            ),
            diagnosis="Епізодична мігрень помірного ступеня з частковою відповіддю на лікування",
            progress=45,
        ),
        FollowUpSession(
            id=2,
            date=datetime.date(2024, 11, 22),
            patient="María González",
            kpis=SessionKPIs(
                frequency=2,
                intensity=5,
                duration=3,
                triggers="Зміни погоди",
                medication="Ібупрофен 600мг + Суматриптан",
            ),
            diagnosis="Помітне покращення, продовжувати поточне лікування",
            progress=65,
            ai_vote=VOTE_AI_1,
        ),
    ]


def sample_patients() -> List[Patient]:
    return [
        Patient(
            id=1,
            code="P001",
            full_name="María González",
            gender="Жіноча",
            birth_date=datetime.date(1985, 5, 15),
            email="maria@example.com",
            phone="999888777",
        ),
        Patient(
            id=2,
            code="P002",
            full_name="Juan Pérez",
            gender="Чоловіча",
            birth_date=datetime.date(1990, 8, 22),
            email="juan@example.com",
            phone="999777666",
        ),
    ]


def sample_treatments() -> List[Treatment]:
    return [
        Treatment(id=1, name="Ібупрофен", common_dose="600мг"),
        Treatment(id=2, name="Суматриптан", common_dose="50мг"),
        Treatment(id=3, name="Топірамат", common_dose="25мг"),
        Treatment(id=4, name="Пропранолол", common_dose="40мг"),
    ]


def fallback_opinions() -> ClinicalConsultation:
    """Резервні відповіді, коли консультація недоступна"""
    return ClinicalConsultation(
        ai1=AIOpinion(
            name=DEEPSEEK_LABEL,
            diagnosis="Епізодична мігрень за наявними симптомами",
            treatment="Розглянути превентивне лікування, якщо частота >4/міс",
            confidence=0.85,
        ),
        ai2=AIOpinion(
            name=OPENAI_LABEL,
            diagnosis="Патерн мігрені з помірною тенденцією",
            treatment="Контроль тригерів і фармакотерапія",
            confidence=0.78,
        ),
    )
