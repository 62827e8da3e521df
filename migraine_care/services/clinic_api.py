"""
Migraine Care — Клінічна схема через REST backend

Endpoints:
    GET  /pacientes
    GET  /sesiones/paciente/{id}
    GET  /tratamientos
    POST /sesiones, PUT /sesiones/{id}
    POST /ia/consultar
"""

import logging
from typing import List

from ..client import TimedJsonClient
from ..schemas import ClinicalConsultation, ClinicalSession, Patient, Treatment


logger = logging.getLogger(__name__)


class ClinicAPI:
    """Пацієнти, їх сесії та довідник лікування"""

    def __init__(self, client: TimedJsonClient):
        self.client = client

    def list_patients(self) -> List[Patient]:
        return [Patient.model_validate(p) for p in self.client.get("/pacientes") or []]

    def list_patient_sessions(self, patient_id: int) -> List[ClinicalSession]:
        data = self.client.get(f"/sesiones/paciente/{patient_id}") or []
        return [ClinicalSession.model_validate(s) for s in data]

    def list_treatments(self) -> List[Treatment]:
        return [Treatment.model_validate(t) for t in self.client.get("/tratamientos") or []]

    def save_session(self, session: ClinicalSession) -> ClinicalSession:
        payload = session.to_payload()
        if session.is_saved:
            saved = self.client.put(f"/sesiones/{session.id}", payload)
        else:
            payload.pop("id", None)
            saved = self.client.post("/sesiones", payload)
        logger.info("Saved clinical session for patient %s", session.patient_id)
        return ClinicalSession.model_validate(saved)

    def consult_ai(self, session: ClinicalSession) -> ClinicalConsultation:
        payload = self.client.post("/ia/consultar", session.consultation_payload())
        return ClinicalConsultation.from_payload(payload)
