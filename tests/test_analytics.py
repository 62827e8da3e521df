"""
Тести для модуля analytics

Запуск: pytest tests/test_analytics.py -v
"""


def clinical_sessions():
    from migraine_care.schemas import ClinicalSession

    return [
        ClinicalSession.model_validate({
            "id": 1, "paciente_id": 1, "fecha_sesion": "2024-10-01",
            "tipo_migrana": "Мігрень без аури",
            "kpis": {"intensidad_dolor": 8, "puntaje_calidad_vida": 4},
            "confianza_ia_1": 0.85, "confianza_ia_2": 0.784,
        }),
        ClinicalSession.model_validate({
            "id": 2, "paciente_id": 1, "fecha_sesion": "2024-11-01",
            "tipo_migrana": "Мігрень без аури",
            "kpis": {"intensidad_dolor": 5, "puntaje_calidad_vida": 7},
        }),
        ClinicalSession.model_validate({
            "id": 3, "paciente_id": 1, "fecha_sesion": "2024-12-01",
            "kpis": {"intensidad_dolor": 4, "puntaje_calidad_vida": 8},
        }),
    ]


def test_progress_and_kpis():
    from migraine_care import analytics
    from migraine_care.services import sample_sessions

    sessions = sample_sessions()

    progress = analytics.progress_series(sessions)
    kpis = analytics.kpi_evolution(sessions)

    assert progress == [
        {"session": "S1", "date": "2024-11-15", "progress": 45},
        {"session": "S2", "date": "2024-11-22", "progress": 65},
    ]
    assert kpis[1] == {"session": "S2", "frequency": 2, "intensity": 5, "duration": 3}

    print(f"✓ progress: {[p['progress'] for p in progress]}")


def test_diagnosis_distribution():
    """Діагноз з ключовим словом мігрені / без"""
    from migraine_care import analytics
    from migraine_care.services import sample_sessions

    distribution = analytics.diagnosis_distribution(sample_sessions())

    assert [d["name"] for d in distribution] == ["З мігренню", "Без мігрені"]
    assert [d["value"] for d in distribution] == [1, 1]
    assert analytics.is_migraine_diagnosis("Migraña crónica")
    assert not analytics.is_migraine_diagnosis("")


def test_ai_vote_distribution():
    from migraine_care import analytics
    from migraine_care.services import sample_sessions

    votes = analytics.ai_vote_distribution(sample_sessions())

    assert votes[0]["name"] == "IA-1" and votes[0]["value"] == 1
    assert votes[1]["name"] == "IA-2" and votes[1]["value"] == 0


def test_session_summary():
    from migraine_care import analytics
    from migraine_care.services import sample_sessions

    summary = analytics.session_summary(sample_sessions())

    assert summary == {"total": 2, "average_progress": 55, "average_intensity": 6.0, "voted": 1}


def test_empty_inputs():
    """Порожній список — нулі, без помилок numpy"""
    from migraine_care import analytics

    assert analytics.session_summary([]) == {
        "total": 0, "average_progress": 0, "average_intensity": 0.0, "voted": 0,
    }
    assert analytics.clinical_summary([])["average_pain_intensity"] == 0.0
    assert analytics.progress_series([]) == []
    assert [d["value"] for d in analytics.diagnosis_distribution([])] == [0, 0]
    assert analytics.migraine_type_distribution([]) == []
    assert analytics.ai_confidence_comparison([]) == []


def test_clinical_aggregations():
    from migraine_care import analytics

    sessions = clinical_sessions()

    evolution = analytics.clinical_kpi_evolution(sessions)
    types = analytics.migraine_type_distribution(sessions)
    comparison = analytics.ai_confidence_comparison(sessions)
    summary = analytics.clinical_summary(sessions)

    assert [e["intensity"] for e in evolution] == [8, 5, 4]
    assert evolution[0]["date"] == "2024-10-01"
    assert types == [
        {"name": "Мігрень без аури", "value": 2, "color": analytics.CHART_COLORS[0]},
        {"name": "Не вказано", "value": 1, "color": analytics.CHART_COLORS[1]},
    ]
    assert comparison == [{"session": "S1", "IA-1": 85, "IA-2": 78}]
    assert summary == {
        "total": 3,
        "average_pain_intensity": 5.7,
        "average_quality_of_life": 6.3,
        "with_ai": 1,
    }

    print(f"✓ clinical summary: {summary}")
