"""Migraine Care — Аналітика для графіків"""

from .aggregations import (
    progress_series,
    kpi_evolution,
    is_migraine_diagnosis,
    diagnosis_distribution,
    ai_vote_distribution,
    session_summary,
    clinical_kpi_evolution,
    migraine_type_distribution,
    ai_confidence_comparison,
    clinical_summary,
    CHART_COLORS,
)

__all__ = [
    "progress_series",
    "kpi_evolution",
    "is_migraine_diagnosis",
    "diagnosis_distribution",
    "ai_vote_distribution",
    "session_summary",
    "clinical_kpi_evolution",
    "migraine_type_distribution",
    "ai_confidence_comparison",
    "clinical_summary",
    "CHART_COLORS",
]
