"""
Migraine Care — Сервіси

Тонкі обгортки над TimedJsonClient:
- SessionsAPI: проста схема через REST backend
- SupabaseSessionStore: проста схема напряму в базу даних
- ClinicAPI: пацієнти, сесії, лікування
- AIConsultant: DeepSeek + OpenAI
"""

from .sessions_api import SessionsAPI
from .supabase_store import SupabaseSessionStore
from .clinic_api import ClinicAPI
from .ai_consult import (
    AIConsultant,
    ChatCompletionProvider,
    ConsultationError,
    build_clinical_prompt,
    build_predictive_prompt,
    extract_content,
)
from .samples import sample_sessions, sample_patients, sample_treatments, fallback_opinions
from .messages import describe_error

__all__ = [
    "SessionsAPI",
    "SupabaseSessionStore",
    "ClinicAPI",
    "AIConsultant",
    "ChatCompletionProvider",
    "ConsultationError",
    "build_clinical_prompt",
    "build_predictive_prompt",
    "extract_content",
    "sample_sessions",
    "sample_patients",
    "sample_treatments",
    "fallback_opinions",
    "describe_error",
]
