"""
Migraine Care — Агрегації для графіків

Чисті функції над списками сесій. Порожній вхід дає нулі.
"""

from collections import Counter
from typing import Dict, List, Sequence

import numpy as np

from ..schemas import ClinicalSession, FollowUpSession, VOTE_AI_1, VOTE_AI_2


CHART_COLORS = ["#ef4444", "#f59e0b", "#10b981", "#3b82f6", "#8b5cf6", "#ec4899"]

MIGRAINE_KEYWORDS = ("мігрен", "епізод", "migraña", "episodio", "migraine")

UNSPECIFIED_TYPE = "Не вказано"


def _mean(values: Sequence[float], decimals: int = 1) -> float:
    if len(values) == 0:
        return 0.0
    return round(float(np.mean(values)), decimals)


def _label(index: int) -> str:
    return f"S{index + 1}"


# =============================================================================
# Проста схема
# =============================================================================

def progress_series(sessions: List[FollowUpSession]) -> List[Dict]:
    return [
        {"session": _label(i), "date": s.date.isoformat(), "progress": s.progress}
        for i, s in enumerate(sessions)
    ]


def kpi_evolution(sessions: List[FollowUpSession]) -> List[Dict]:
    return [
        {
            "session": _label(i),
            "frequency": s.kpis.frequency,
            "intensity": s.kpis.intensity,
            "duration": s.kpis.duration,
        }
        for i, s in enumerate(sessions)
    ]


def is_migraine_diagnosis(diagnosis: str) -> bool:
    text = (diagnosis or "").lower()
    return any(keyword in text for keyword in MIGRAINE_KEYWORDS)


def diagnosis_distribution(sessions: List[FollowUpSession]) -> List[Dict]:
    """Скільки сесій з діагнозом мігрені і без"""
    with_migraine = sum(1 for s in sessions if is_migraine_diagnosis(s.diagnosis))
    return [
        {"name": "З мігренню", "value": with_migraine, "color": "#ef4444"},
        {"name": "Без мігрені", "value": len(sessions) - with_migraine, "color": "#10b981"},
    ]


def ai_vote_distribution(sessions: List[FollowUpSession]) -> List[Dict]:
    votes = Counter(s.ai_vote for s in sessions if s.ai_vote)
    return [
        {"name": VOTE_AI_1, "value": votes.get(VOTE_AI_1, 0), "color": "#3b82f6"},
        {"name": VOTE_AI_2, "value": votes.get(VOTE_AI_2, 0), "color": "#8b5cf6"},
    ]


def session_summary(sessions: List[FollowUpSession]) -> Dict:
    return {
        "total": len(sessions),
        "average_progress": round(_mean([s.progress for s in sessions], 0)),
        "average_intensity": _mean([s.kpis.intensity for s in sessions]),
        "voted": sum(1 for s in sessions if s.ai_vote),
    }


# =============================================================================
# Клінічна схема
# =============================================================================

def clinical_kpi_evolution(sessions: List[ClinicalSession]) -> List[Dict]:
    return [
        {
            "session": _label(i),
            "date": s.session_date.isoformat(),
            "intensity": s.kpis.pain_intensity,
            "frequency": s.kpis.episode_frequency,
            "duration": s.kpis.duration_hours,
            "quality_of_life": s.kpis.quality_of_life,
        }
        for i, s in enumerate(sessions)
    ]


def migraine_type_distribution(sessions: List[ClinicalSession]) -> List[Dict]:
    """Кількість сесій за типом мігрені; кольори по колу"""
    counts = Counter(s.migraine_type or UNSPECIFIED_TYPE for s in sessions)
    return [
        {"name": name, "value": value, "color": CHART_COLORS[i % len(CHART_COLORS)]}
        for i, (name, value) in enumerate(counts.items())
    ]


def ai_confidence_comparison(sessions: List[ClinicalSession]) -> List[Dict]:
    """Впевненість обох AI у відсотках, лише для сесій з обома значеннями"""
    with_ai = [s for s in sessions if s.has_ai_confidences]
    return [
        {
            "session": _label(i),
            VOTE_AI_1: round(s.ai1_confidence * 100),
            VOTE_AI_2: round(s.ai2_confidence * 100),
        }
        for i, s in enumerate(with_ai)
    ]


def clinical_summary(sessions: List[ClinicalSession]) -> Dict:
    return {
        "total": len(sessions),
        "average_pain_intensity": _mean([s.kpis.pain_intensity for s in sessions]),
        "average_quality_of_life": _mean([s.kpis.quality_of_life for s in sessions]),
        "with_ai": sum(1 for s in sessions if s.ai1_confidence),
    }
