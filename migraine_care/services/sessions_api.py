"""
Migraine Care — Сесії через REST backend

Endpoints:
    GET    /sessions
    GET    /sessions/patient/{patient}
    POST   /sessions
    PUT    /sessions/{id}
    DELETE /sessions/{id}
    POST   /ai/consult
"""

import logging
from typing import List
from urllib.parse import quote

from ..client import TimedJsonClient
from ..schemas import ConsultationReport, FollowUpSession


logger = logging.getLogger(__name__)


class SessionsAPI:
    """Тонка обгортка над TimedJsonClient для простої схеми"""

    def __init__(self, client: TimedJsonClient):
        self.client = client

    def list_sessions(self) -> List[FollowUpSession]:
        data = self.client.get("/sessions") or []
        return [FollowUpSession.model_validate(item) for item in data]

    def list_by_patient(self, patient: str) -> List[FollowUpSession]:
        data = self.client.get(f"/sessions/patient/{quote(patient, safe='')}") or []
        return [FollowUpSession.model_validate(item) for item in data]

    def create(self, session: FollowUpSession) -> FollowUpSession:
        payload = session.to_payload()
        payload.pop("id", None)
        saved = self.client.post("/sessions", payload)
        logger.info("Created session for %s", session.patient)
        return FollowUpSession.model_validate(saved)

    def update(self, session_id: int, session: FollowUpSession) -> FollowUpSession:
        saved = self.client.put(f"/sessions/{session_id}", session.to_payload())
        logger.info("Updated session %s", session_id)
        return FollowUpSession.model_validate(saved)

    def delete(self, session_id: int) -> None:
        self.client.delete(f"/sessions/{session_id}")
        logger.info("Deleted session %s", session_id)

    def save(self, session: FollowUpSession) -> FollowUpSession:
        """Створити нову або оновити збережену сесію"""
        if session.is_saved:
            return self.update(session.id, session)
        return self.create(session)

    def consult_ai(self, session: FollowUpSession) -> ConsultationReport:
        payload = self.client.post("/ai/consult", session.to_payload())
        return ConsultationReport.from_payload(payload)
