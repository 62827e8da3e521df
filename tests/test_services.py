"""
Тести для модуля services

Замість мережі — FakeClient, що записує виклики
і повертає заготовлені відповіді.

Запуск: pytest tests/test_services.py -v
"""

import datetime

import pytest


class FakeClient:
    """Той самий інтерфейс, що й TimedJsonClient"""

    def __init__(self, responses=None, error=None):
        self.responses = responses or {}
        self.error = error
        self.calls = []

    def _call(self, method, path, body=None):
        self.calls.append((method, path, body))
        if self.error is not None:
            raise self.error
        return self.responses.get((method, path))

    def get(self, path, headers=None):
        return self._call("GET", path)

    def post(self, path, body=None, headers=None):
        return self._call("POST", path, body)

    def put(self, path, body=None, headers=None):
        return self._call("PUT", path, body)

    def patch(self, path, body=None, headers=None):
        return self._call("PATCH", path, body)

    def delete(self, path, headers=None):
        return self._call("DELETE", path)


SESSION_ROW = {
    "id": 1,
    "patient": "María González",
    "date": "2024-11-15",
    "kpis": {"frequency": 3, "intensity": 7, "duration": 4, "triggers": "Стрес", "medication": ""},
    "diagnosis": "Епізодична мігрень",
    "progress": 45,
    "aiVote": None,
    "aiVoteReason": None,
}


# =============================================================================
# SessionsAPI
# =============================================================================

def test_list_sessions():
    from migraine_care.services import SessionsAPI

    client = FakeClient({("GET", "/sessions"): [SESSION_ROW]})

    sessions = SessionsAPI(client).list_sessions()

    assert len(sessions) == 1
    assert sessions[0].patient == "María González"
    assert sessions[0].kpis.intensity == 7

    print(f"✓ list_sessions: {len(sessions)}")


def test_list_sessions_empty_body():
    """None від backend — порожній список"""
    from migraine_care.services import SessionsAPI

    assert SessionsAPI(FakeClient()).list_sessions() == []


def test_list_by_patient_quotes_name():
    from migraine_care.services import SessionsAPI

    client = FakeClient()

    SessionsAPI(client).list_by_patient("María González")

    assert client.calls == [("GET", "/sessions/patient/Mar%C3%ADa%20Gonz%C3%A1lez", None)]


def test_save_new_session_posts_without_id():
    """Нова сесія (id=None) → POST /sessions без id"""
    from migraine_care.schemas import FollowUpSession
    from migraine_care.services import SessionsAPI

    client = FakeClient({("POST", "/sessions"): dict(SESSION_ROW, id=9)})
    session = FollowUpSession(patient="María González", date=datetime.date(2024, 11, 15))

    saved = SessionsAPI(client).save(session)

    method, path, body = client.calls[0]
    assert (method, path) == ("POST", "/sessions")
    assert "id" not in body
    assert body["date"] == "2024-11-15"
    assert saved.id == 9

    print(f"✓ create → id={saved.id}")


def test_save_existing_session_puts():
    from migraine_care.schemas import FollowUpSession
    from migraine_care.services import SessionsAPI

    client = FakeClient({("PUT", "/sessions/1"): SESSION_ROW})
    session = FollowUpSession.model_validate(SESSION_ROW)
    session.vote("IA-2", "Кращий прогноз")

    SessionsAPI(client).save(session)

    method, path, body = client.calls[0]
    assert (method, path) == ("PUT", "/sessions/1")
    assert body["aiVote"] == "IA-2"
    assert body["aiVoteReason"] == "Кращий прогноз"


def test_delete_session():
    from migraine_care.services import SessionsAPI

    client = FakeClient()

    assert SessionsAPI(client).delete(3) is None
    assert client.calls == [("DELETE", "/sessions/3", None)]


def test_consult_ai_through_backend():
    from migraine_care.schemas import FollowUpSession
    from migraine_care.services import SessionsAPI

    client = FakeClient({("POST", "/ai/consult"): {
        "deepseek": "Клінічний аналіз",
        "openai": {"error": True, "message": "quota exceeded"},
    }})

    report = SessionsAPI(client).consult_ai(FollowUpSession.model_validate(SESSION_ROW))

    assert client.calls[0][2]["kpis"]["intensity"] == 7
    assert report.deepseek.text == "Клінічний аналіз"
    assert report.openai.error == "quota exceeded"


def test_client_errors_propagate():
    """Помилки клієнта не перехоплюються сервісом"""
    from migraine_care.client import HttpError
    from migraine_care.services import SessionsAPI

    client = FakeClient(error=HttpError(500, "Internal server error"))

    with pytest.raises(HttpError):
        SessionsAPI(client).list_sessions()


# =============================================================================
# SupabaseSessionStore
# =============================================================================

def test_supabase_list_sessions():
    from migraine_care.services import SupabaseSessionStore

    row = dict(SESSION_ROW)
    row["ai_vote"] = row.pop("aiVote")
    row["ai_vote_reason"] = row.pop("aiVoteReason")
    client = FakeClient({("GET", "/sessions?select=*&order=date.desc"): [row]})

    sessions = SupabaseSessionStore(client).list_sessions()

    assert sessions[0].id == 1


def test_supabase_save_new_and_existing():
    """Новий рядок — POST, збережений — PATCH ?id=eq.{id}"""
    from migraine_care.schemas import FollowUpSession
    from migraine_care.services import SupabaseSessionStore

    client = FakeClient({
        ("POST", "/sessions"): [dict(SESSION_ROW, id=10)],
        ("PATCH", "/sessions?id=eq.10"): [dict(SESSION_ROW, id=10, progress=70)],
    })
    store = SupabaseSessionStore(client)

    created = store.save(FollowUpSession(patient="María González"))
    created.progress = 70
    updated = store.save(created)

    assert created.id == 10
    assert updated.progress == 70
    assert client.calls[0][0:2] == ("POST", "/sessions")
    assert "id" not in client.calls[0][2]
    assert client.calls[1][0:2] == ("PATCH", "/sessions?id=eq.10")
    assert "ai_vote" in client.calls[1][2]

    print(f"✓ Supabase save: id={updated.id}")


def test_supabase_empty_representation():
    from migraine_care.schemas import FollowUpSession
    from migraine_care.services import SupabaseSessionStore

    client = FakeClient({("POST", "/sessions"): []})

    with pytest.raises(ValueError):
        SupabaseSessionStore(client).save(FollowUpSession(patient="P001"))


def test_supabase_delete():
    from migraine_care.services import SupabaseSessionStore

    client = FakeClient()

    SupabaseSessionStore(client).delete(4)

    assert client.calls == [("DELETE", "/sessions?id=eq.4", None)]


# =============================================================================
# ClinicAPI
# =============================================================================

def test_clinic_lists():
    from migraine_care.services import ClinicAPI

    client = FakeClient({
        ("GET", "/pacientes"): [{"id": 1, "codigo_paciente": "P001", "nombre_completo": "María González"}],
        ("GET", "/tratamientos"): [{"id": 1, "nombre_tratamiento": "Ібупрофен", "dosis_comun": "600мг"}],
        ("GET", "/sesiones/paciente/1"): [{"id": 5, "paciente_id": 1, "fecha_sesion": "2024-11-15"}],
    })
    api = ClinicAPI(client)

    patients = api.list_patients()
    treatments = api.list_treatments()
    sessions = api.list_patient_sessions(1)

    assert patients[0].full_name == "María González"
    assert treatments[0].common_dose == "600мг"
    assert sessions[0].session_date == datetime.date(2024, 11, 15)


def test_clinic_save_session():
    from migraine_care.schemas import ClinicalSession
    from migraine_care.services import ClinicAPI

    client = FakeClient({
        ("POST", "/sesiones"): {"id": 8, "paciente_id": 1},
        ("PUT", "/sesiones/8"): {"id": 8, "paciente_id": 1, "diagnostico_final": "Мігрень"},
    })
    api = ClinicAPI(client)

    created = api.save_session(ClinicalSession.new(patient_id=1))
    created.final_diagnosis = "Мігрень"
    updated = api.save_session(created)

    assert created.id == 8
    assert "id" not in client.calls[0][2]
    assert client.calls[1][0:2] == ("PUT", "/sesiones/8")
    assert updated.final_diagnosis == "Мігрень"


def test_clinic_consult_ai():
    from migraine_care.schemas import ClinicalSession
    from migraine_care.services import ClinicAPI

    client = FakeClient({("POST", "/ia/consultar"): {
        "ia1": {"diagnostico": "Мігрень з аурою", "tratamiento": "Триптани", "confianza": 0.8},
        "ia2": {"diagnostico": "Епізодична мігрень", "tratamiento": "Профілактика", "confianza": 0.7},
    }})

    consultation = ClinicAPI(client).consult_ai(ClinicalSession.new(patient_id=1))

    assert set(client.calls[0][2]) == {"sintomas", "desencadenantes", "medicacion_actual", "kpis", "tipo_migrana"}
    assert consultation.ai1.confidence == 0.8
    assert consultation.ai2.treatment == "Профілактика"


# =============================================================================
# Тексти помилок та демо-дані
# =============================================================================

def test_describe_error():
    from migraine_care.client import DecodeFailure, HttpError, NetworkFailure, RequestTimeout
    from migraine_care.services import describe_error

    assert describe_error(RequestTimeout(30.0)) == "Запит тривав надто довго (понад 30 с)"
    assert "http://localhost:3000/api" in describe_error(
        NetworkFailure(ConnectionError("refused"), "http://localhost:3000/api")
    )
    assert describe_error(HttpError(404, "not found")) == "Помилка сервера 404: not found"
    assert "JSON" in describe_error(DecodeFailure(200, "<html>"))
    assert describe_error(ValueError("bad")) == "bad"


def test_sample_data():
    from migraine_care.services import fallback_opinions, sample_patients, sample_sessions, sample_treatments

    sessions = sample_sessions()

    assert [s.progress for s in sessions] == [45, 65]
    assert all(s.is_saved for s in sessions)
    assert [p.code for p in sample_patients()] == ["P001", "P002"]
    assert len(sample_treatments()) == 4
    assert fallback_opinions().ai1.confidence == 0.85
