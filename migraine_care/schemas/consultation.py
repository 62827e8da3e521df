"""
Migraine Care — Результати AI-консультації

Текст від моделей відображається як є, без структурування.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from .clinic import ClinicalSession


DEEPSEEK_LABEL = "DeepSeek (клінічний аналіз)"
OPENAI_LABEL = "Copilot (предиктивний аналіз)"
NOT_AVAILABLE = "Недоступно"


class ProviderReply(BaseModel):
    """Відповідь одного провайдера: або текст, або помилка"""
    provider: str
    text: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def display_text(self) -> str:
        if not self.ok:
            return f"Помилка: {self.error}"
        return self.text or ""

    @classmethod
    def from_backend(cls, provider: str, value: Any) -> "ProviderReply":
        """
        Backend повертає для кожного провайдера рядок
        або {"error": true, "message": "..."}.
        """
        if isinstance(value, str):
            return cls(provider=provider, text=value)
        if isinstance(value, dict) and value.get("error"):
            return cls(provider=provider, error=str(value.get("message") or "невідома помилка"))
        return cls(provider=provider, error="відповідь відсутня")

    def to_backend(self) -> Any:
        if self.ok:
            return self.text
        return {"error": True, "message": self.error}


class ConsultationReport(BaseModel):
    """Консультація для простої схеми (DeepSeek + OpenAI)"""
    deepseek: ProviderReply
    openai: ProviderReply

    @classmethod
    def from_payload(cls, payload: Any) -> "ConsultationReport":
        payload = payload if isinstance(payload, dict) else {}
        return cls(
            deepseek=ProviderReply.from_backend(DEEPSEEK_LABEL, payload.get("deepseek")),
            openai=ProviderReply.from_backend(OPENAI_LABEL, payload.get("openai")),
        )

    def to_payload(self) -> dict:
        return {
            "deepseek": self.deepseek.to_backend(),
            "openai": self.openai.to_backend(),
        }


class AIOpinion(BaseModel):
    """Структурована думка AI для клінічної схеми"""
    name: str
    diagnosis: str = NOT_AVAILABLE
    treatment: str = NOT_AVAILABLE
    confidence: float = Field(default=0.0, ge=0, le=1)

    @classmethod
    def from_backend(cls, name: str, value: Any) -> "AIOpinion":
        value = value if isinstance(value, dict) else {}
        return cls(
            name=name,
            diagnosis=value.get("diagnostico") or NOT_AVAILABLE,
            treatment=value.get("tratamiento") or NOT_AVAILABLE,
            confidence=value.get("confianza") or 0.0,
        )

    def to_backend(self) -> dict:
        return {
            "diagnostico": self.diagnosis,
            "tratamiento": self.treatment,
            "confianza": self.confidence,
        }


class ClinicalConsultation(BaseModel):
    """Консультація для клінічної схеми: {"ia1": {...}, "ia2": {...}}"""
    ai1: AIOpinion
    ai2: AIOpinion

    @classmethod
    def from_payload(cls, payload: Any) -> "ClinicalConsultation":
        payload = payload if isinstance(payload, dict) else {}
        return cls(
            ai1=AIOpinion.from_backend(DEEPSEEK_LABEL, payload.get("ia1")),
            ai2=AIOpinion.from_backend(OPENAI_LABEL, payload.get("ia2")),
        )

    def to_payload(self) -> dict:
        return {"ia1": self.ai1.to_backend(), "ia2": self.ai2.to_backend()}

    def apply_to(self, session: ClinicalSession) -> None:
        """Скопіювати відповіді AI у сесію"""
        session.ai1_diagnosis = self.ai1.diagnosis
        session.ai1_treatment = self.ai1.treatment
        session.ai1_confidence = self.ai1.confidence
        session.ai2_diagnosis = self.ai2.diagnosis
        session.ai2_treatment = self.ai2.treatment
        session.ai2_confidence = self.ai2.confidence
