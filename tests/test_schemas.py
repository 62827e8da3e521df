"""
Тести для модуля schemas

Запуск: pytest tests/test_schemas.py -v
Або демо: python tests/test_schemas.py
"""

import datetime

import pytest


def test_follow_up_session():
    """Тест моделі FollowUpSession"""
    from migraine_care.schemas import FollowUpSession

    session = FollowUpSession.new()

    assert session.id is None
    assert not session.is_saved
    assert session.patient == "Новий пацієнт"
    assert session.date == datetime.date.today()
    assert session.kpis.intensity == 0
    assert session.progress == 0

    print(f"✓ FollowUpSession: {session.patient}, {session.date}")


def test_follow_up_session_validation():
    from pydantic import ValidationError

    from migraine_care.schemas import FollowUpSession

    with pytest.raises(ValidationError):
        FollowUpSession(patient="")
    with pytest.raises(ValidationError):
        FollowUpSession(patient="P001", progress=120)
    with pytest.raises(ValidationError):
        FollowUpSession(patient="P001", kpis={"intensity": 11})


def test_follow_up_session_wire_format():
    """Голос за AI — camelCase на дроті"""
    from migraine_care.schemas import FollowUpSession, VOTE_AI_2

    session = FollowUpSession.model_validate({
        "id": 3,
        "patient": "María González",
        "date": "2024-11-22",
        "kpis": {"frequency": 2, "intensity": 5, "duration": 3},
        "aiVote": "IA-1",
        "aiVoteReason": "Точніший діагноз",
    })

    assert session.is_saved
    assert session.ai_vote == "IA-1"
    assert session.date == datetime.date(2024, 11, 22)

    session.vote(VOTE_AI_2)
    payload = session.to_payload()

    assert payload["aiVote"] == "IA-2"
    assert payload["aiVoteReason"] is None
    assert payload["date"] == "2024-11-22"
    assert payload["kpis"]["duration"] == 3

    print(f"✓ Wire: aiVote={payload['aiVote']}")


def test_follow_up_session_row():
    """Рядок Supabase — без id, snake_case"""
    from migraine_care.schemas import FollowUpSession

    session = FollowUpSession(id=5, patient="P001", ai_vote="IA-1")

    row = session.to_row()

    assert "id" not in row
    assert row["ai_vote"] == "IA-1"
    assert row["patient"] == "P001"


def test_patient():
    """Тест моделі Patient (іспанські колонки)"""
    from migraine_care.schemas import Patient

    patient = Patient.model_validate({
        "id": 1,
        "codigo_paciente": "P001",
        "nombre_completo": "María González",
        "genero": "Жіноча",
        "fecha_nacimiento": "1985-05-15",
        "correo_electronico": "maria@example.com",
        "telefono": "999888777",
        "created_at": "2024-01-01T00:00:00",
    })

    assert patient.code == "P001"
    assert patient.full_name == "María González"
    assert patient.age(today=datetime.date(2024, 5, 14)) == 38
    assert patient.age(today=datetime.date(2024, 5, 15)) == 39
    assert patient.to_payload()["nombre_completo"] == "María González"

    print(f"✓ Patient: {patient.code} {patient.full_name}")


def test_patient_without_birth_date():
    from migraine_care.schemas import Patient

    assert Patient(full_name="Juan Pérez").age() is None


def test_clinical_session_treatments():
    """Додавання, видалення та остаточне лікування"""
    from migraine_care.schemas import ClinicalSession, Treatment

    session = ClinicalSession.new(patient_id=1)
    ibuprofen = Treatment(id=1, name="Ібупрофен", common_dose="600мг")
    sumatriptan = Treatment(id=2, name="Суматриптан", common_dose="50мг")

    prescribed = session.add_treatment(ibuprofen)
    session.add_treatment(sumatriptan)

    assert prescribed.treatment_id == 1
    assert prescribed.dose == "600мг"
    assert prescribed.frequency == "За призначенням"
    assert prescribed.duration_days == 30
    assert session.final_treatment is None

    session.set_final_treatment(1)
    assert session.final_treatment.treatment_name == "Суматриптан"

    session.set_final_treatment(0)
    assert [t.is_final for t in session.prescribed_treatments] == [True, False]

    removed = session.remove_treatment(0)
    assert removed.treatment_name == "Ібупрофен"
    assert len(session.prescribed_treatments) == 1

    with pytest.raises(IndexError):
        session.set_final_treatment(3)

    print(f"✓ Treatments: {len(session.prescribed_treatments)}")


def test_clinical_session_wire_format():
    from migraine_care.schemas import ClinicalSession

    session = ClinicalSession.model_validate({
        "id": 4,
        "paciente_id": 1,
        "fecha_sesion": "2024-11-15",
        "tipo_sesion": "Inicial",
        "sintomas": {"dolor_cabeza": "пульсуючий", "nauseas": True},
        "desencadenantes": {"estres": True, "alimentos": ["шоколад"]},
        "kpis": {"intensidad_dolor": 8, "nivel_discapacidad": "Severo"},
        "confianza_ia_1": 0.9,
    })

    assert session.symptoms.nausea is True
    assert session.triggers.foods == ["шоколад"]
    assert session.kpis.pain_intensity == 8
    assert session.kpis.sleep_quality == 3
    assert not session.has_ai_confidences

    payload = session.to_payload()
    assert payload["paciente_id"] == 1
    assert payload["kpis"]["intensidad_dolor"] == 8
    assert payload["confianza_ia_1"] == 0.9

    consultation = session.consultation_payload()
    assert set(consultation) == {"sintomas", "desencadenantes", "medicacion_actual", "kpis", "tipo_migrana"}


def test_provider_reply_from_backend():
    """Рядок або {"error": true, "message": ...}"""
    from migraine_care.schemas import ProviderReply

    ok = ProviderReply.from_backend("DeepSeek", "Аналіз")
    failed = ProviderReply.from_backend("OpenAI", {"error": True, "message": "quota"})
    missing = ProviderReply.from_backend("OpenAI", None)

    assert ok.ok and ok.display_text == "Аналіз"
    assert not failed.ok and failed.display_text == "Помилка: quota"
    assert failed.to_backend() == {"error": True, "message": "quota"}
    assert not missing.ok

    print(f"✓ ProviderReply: {failed.display_text}")


def test_consultation_report_payload():
    from migraine_care.schemas import ConsultationReport

    report = ConsultationReport.from_payload({
        "deepseek": "Клінічний аналіз",
        "openai": {"error": True, "message": "timeout"},
    })

    assert report.deepseek.text == "Клінічний аналіз"
    assert report.openai.error == "timeout"
    assert report.to_payload() == {
        "deepseek": "Клінічний аналіз",
        "openai": {"error": True, "message": "timeout"},
    }

    empty = ConsultationReport.from_payload(None)
    assert not empty.deepseek.ok and not empty.openai.ok


def test_clinical_consultation_apply():
    """Відповіді AI копіюються в сесію"""
    from migraine_care.schemas import ClinicalConsultation, ClinicalSession, NOT_AVAILABLE

    consultation = ClinicalConsultation.from_payload({
        "ia1": {"diagnostico": "Мігрень без аури", "tratamiento": "Триптани", "confianza": 0.85},
        "ia2": {"diagnostico": "Хронічна мігрень"},
    })
    session = ClinicalSession.new(patient_id=2)

    consultation.apply_to(session)

    assert session.ai1_diagnosis == "Мігрень без аури"
    assert session.ai1_confidence == 0.85
    assert session.ai2_treatment == NOT_AVAILABLE
    assert session.ai2_confidence == 0.0
    assert consultation.to_payload()["ia1"]["confianza"] == 0.85


def demo():
    print("=" * 60)
    print("Migraine Care — Тест schemas")
    print("=" * 60)

    print("\n--- 1. FollowUpSession ---")
    test_follow_up_session()
    test_follow_up_session_wire_format()

    print("\n--- 2. Patient ---")
    test_patient()

    print("\n--- 3. ClinicalSession ---")
    test_clinical_session_treatments()

    print("\n--- 4. ProviderReply ---")
    test_provider_reply_from_backend()

    print("\n" + "=" * 60)
    print("✅ Всі тести пройдено успішно!")
    print("=" * 60)


if __name__ == "__main__":
    demo()
