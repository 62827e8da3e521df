"""
Migraine Care — AI-консультація

Два chat-completion провайдери (OpenAI-сумісний API):
- DeepSeek: клінічний аналіз
- OpenAI: предиктивний аналіз

Текст відповіді повертається як є. Помилка одного провайдера
не скасовує відповідь іншого.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional

from ..client import ClientError, TimedJsonClient
from ..config import AIConfig, AIProviderConfig
from ..schemas import (
    AIOpinion,
    ClinicalConsultation,
    ConsultationReport,
    ProviderReply,
    SessionKPIs,
)


logger = logging.getLogger(__name__)

SEE_FULL_ANALYSIS = "Див. повний аналіз вище"


class ConsultationError(ValueError):
    """Провайдер не налаштований або повернув відповідь без тексту"""


# =============================================================================
# Prompts
# =============================================================================

def _kpi_lines(kpis: SessionKPIs) -> str:
    return (
        f"- Частота: {kpis.frequency} епізодів/міс\n"
        f"- Інтенсивність: {kpis.intensity}/10\n"
        f"- Тривалість: {kpis.duration:g} год\n"
        f"- Тригери: {kpis.triggers or 'не вказано'}\n"
        f"- Поточні ліки: {kpis.medication or 'не вказано'}"
    )


def build_clinical_prompt(kpis: SessionKPIs) -> str:
    return (
        "Проаналізуй дані пацієнта з мігренню:\n"
        f"{_kpi_lines(kpis)}\n\n"
        "Надай:\n"
        "1. Клінічний діагноз\n"
        "2. Аналіз патернів\n"
        "3. Рекомендації щодо лікування"
    )


def build_predictive_prompt(kpis: SessionKPIs) -> str:
    return (
        "Зроби предиктивний аналіз цих даних про мігрень:\n"
        f"{_kpi_lines(kpis)}\n\n"
        "Надай:\n"
        "1. Предиктивний аналіз\n"
        "2. Ймовірність покращення\n"
        "3. Виявлені фактори ризику\n"
        "4. Персоналізовані рекомендації"
    )


def _section(payload: dict, key: str) -> dict:
    value = payload.get(key)
    return value if isinstance(value, dict) else {}


def kpis_from_clinical(payload: dict) -> SessionKPIs:
    """
    Звести дані клінічної сесії (колонки backend) до SessionKPIs,
    щоб використати ті самі промпти.
    """
    kpis = _section(payload, "kpis")
    triggers = _section(payload, "desencadenantes")
    medication = _section(payload, "medicacion_actual")

    trigger_names = []
    if triggers.get("estres"):
        trigger_names.append("стрес")
    if triggers.get("falta_sueno"):
        trigger_names.append("недосипання")
    trigger_names.extend(triggers.get("alimentos") or [])

    return SessionKPIs(
        frequency=kpis.get("frecuencia_episodios") or 0,
        intensity=kpis.get("intensidad_dolor") or 0,
        duration=kpis.get("duracion_horas") or 0,
        triggers=", ".join(str(t) for t in trigger_names),
        medication=", ".join(str(m) for m in medication.get("medicamentos") or []),
    )


# =============================================================================
# Providers
# =============================================================================

def extract_content(payload: Any) -> str:
    """choices[0].message.content з відповіді chat completion"""
    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise ConsultationError("Відповідь моделі не містить тексту") from e
    if not isinstance(content, str):
        raise ConsultationError("Відповідь моделі не містить тексту")
    return content


class ChatCompletionProvider:
    """Один OpenAI-сумісний endpoint /chat/completions"""

    def __init__(self, config: AIProviderConfig, client: Optional[TimedJsonClient] = None):
        self.config = config
        self.client = client or TimedJsonClient(config.client_config())

    @property
    def label(self) -> str:
        return self.config.label

    def complete(self, prompt: str) -> str:
        if not self.config.is_configured:
            raise ConsultationError(f"API ключ для {self.config.name} не налаштовано")

        payload = self.client.post("/chat/completions", {
            "model": self.config.model,
            "messages": [
                {"role": "system", "content": self.config.system_prompt},
                {"role": "user", "content": prompt},
            ],
            "temperature": self.config.temperature,
            "max_tokens": self.config.max_tokens,
        })
        return extract_content(payload)

    def reply(self, prompt: str) -> ProviderReply:
        """complete(), але помилка стає частиною відповіді"""
        try:
            return ProviderReply(provider=self.label, text=self.complete(prompt))
        except (ClientError, ConsultationError) as e:
            logger.warning("%s consultation failed: %s", self.config.name, e)
            return ProviderReply(provider=self.label, error=str(e))


class AIConsultant:
    """
    Паралельний запит до обох провайдерів.

    Приклад:
        consultant = AIConsultant.from_config(config.ai)
        report = consultant.consult(session.kpis)
    """

    def __init__(self, deepseek: ChatCompletionProvider, openai: ChatCompletionProvider):
        self.deepseek = deepseek
        self.openai = openai

    @classmethod
    def from_config(cls, config: AIConfig) -> "AIConsultant":
        return cls(
            deepseek=ChatCompletionProvider(config.deepseek),
            openai=ChatCompletionProvider(config.openai),
        )

    def consult(self, kpis: SessionKPIs) -> ConsultationReport:
        with ThreadPoolExecutor(max_workers=2) as pool:
            deepseek = pool.submit(self.deepseek.reply, build_clinical_prompt(kpis))
            openai = pool.submit(self.openai.reply, build_predictive_prompt(kpis))
            return ConsultationReport(deepseek=deepseek.result(), openai=openai.result())

    def consult_clinical(self, payload: dict) -> ClinicalConsultation:
        """Консультація для клінічної схеми; повний текст іде в поле diagnosis"""
        report = self.consult(kpis_from_clinical(payload))
        return ClinicalConsultation(
            ai1=_opinion(report.deepseek),
            ai2=_opinion(report.openai),
        )


def _opinion(reply: ProviderReply) -> AIOpinion:
    if not reply.ok:
        return AIOpinion(name=reply.provider, diagnosis=reply.display_text)
    return AIOpinion(
        name=reply.provider,
        diagnosis=reply.text or "",
        treatment=SEE_FULL_ANALYSIS,
    )
