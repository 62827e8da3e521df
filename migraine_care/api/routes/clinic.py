"""
Migraine Care — Clinic Routes

Клінічна схема (шляхи збігаються з production backend):
    GET  /pacientes, POST /pacientes
    GET  /sesiones/paciente/{paciente_id}
    POST /sesiones, PUT /sesiones/{sesion_id}
    GET  /tratamientos
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import ClinicStore, get_clinic_store
from ...schemas import ClinicalSession, Patient, Treatment

router = APIRouter(tags=["Clinic"])


@router.get("/pacientes", response_model=List[Patient])
async def list_patients(store: ClinicStore = Depends(get_clinic_store)):
    return store.patients.select()


@router.post("/pacientes", response_model=Patient, status_code=201)
async def create_patient(patient: Patient, store: ClinicStore = Depends(get_clinic_store)):
    return store.patients.insert(patient)


@router.get(
    "/sesiones/paciente/{paciente_id}",
    response_model=List[ClinicalSession],
)
async def list_patient_sessions(paciente_id: int, store: ClinicStore = Depends(get_clinic_store)):
    if not store.patients.get(paciente_id):
        raise HTTPException(status_code=404, detail=f"Пацієнта {paciente_id} не знайдено")
    return store.patient_sessions(paciente_id)


@router.post("/sesiones", response_model=ClinicalSession, status_code=201)
async def create_clinical_session(
    session: ClinicalSession,
    store: ClinicStore = Depends(get_clinic_store),
):
    if not store.patients.get(session.patient_id):
        raise HTTPException(status_code=400, detail=f"Пацієнта {session.patient_id} не існує")
    return store.sessions.insert(session)


@router.put("/sesiones/{sesion_id}", response_model=ClinicalSession)
async def update_clinical_session(
    sesion_id: int,
    session: ClinicalSession,
    store: ClinicStore = Depends(get_clinic_store),
):
    updated = store.sessions.replace(sesion_id, session)
    if not updated:
        raise HTTPException(status_code=404, detail=f"Сесію {sesion_id} не знайдено")
    return updated


@router.get("/tratamientos", response_model=List[Treatment])
async def list_treatments(store: ClinicStore = Depends(get_clinic_store)):
    return store.treatments.select()
