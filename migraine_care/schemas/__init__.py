"""
Migraine Care — Схеми даних

Pydantic моделі для:
- session: проста схема (одна таблиця сесій)
- clinic: пацієнт → сесія → лікування
- consultation: відповіді AI-консультації
"""

from .session import (
    SessionKPIs,
    FollowUpSession,
    VOTE_AI_1,
    VOTE_AI_2,
)
from .clinic import (
    Patient,
    Treatment,
    PrescribedTreatment,
    SessionSymptoms,
    SessionTriggers,
    CurrentMedication,
    ClinicalKPIs,
    ClinicalSession,
    SESSION_TYPES,
    DISABILITY_LEVELS,
)
from .consultation import (
    ProviderReply,
    ConsultationReport,
    AIOpinion,
    ClinicalConsultation,
    DEEPSEEK_LABEL,
    OPENAI_LABEL,
    NOT_AVAILABLE,
)

__all__ = [
    # Session
    "SessionKPIs",
    "FollowUpSession",
    "VOTE_AI_1",
    "VOTE_AI_2",
    # Clinic
    "Patient",
    "Treatment",
    "PrescribedTreatment",
    "SessionSymptoms",
    "SessionTriggers",
    "CurrentMedication",
    "ClinicalKPIs",
    "ClinicalSession",
    "SESSION_TYPES",
    "DISABILITY_LEVELS",
    # Consultation
    "ProviderReply",
    "ConsultationReport",
    "AIOpinion",
    "ClinicalConsultation",
    "DEEPSEEK_LABEL",
    "OPENAI_LABEL",
    "NOT_AVAILABLE",
]
