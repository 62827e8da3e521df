"""
Migraine Care — Sessions Routes

Проста схема: CRUD таблиці сесій.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import SessionStore, get_session_store
from ..models import DeleteResponse
from ...schemas import FollowUpSession

router = APIRouter(prefix="/sessions", tags=["Sessions"])


def _not_found(session_id: int) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Сесію {session_id} не знайдено")


@router.get("", response_model=List[FollowUpSession])
async def list_sessions(store: SessionStore = Depends(get_session_store)):
    """Усі сесії, новіші першими"""
    return store.list_sessions()


@router.get("/patient/{patient}", response_model=List[FollowUpSession])
async def list_patient_sessions(patient: str, store: SessionStore = Depends(get_session_store)):
    """Сесії одного пацієнта (за іменем)"""
    return store.list_sessions(patient=patient)


@router.get("/{session_id}", response_model=FollowUpSession)
async def get_session(session_id: int, store: SessionStore = Depends(get_session_store)):
    session = store.sessions.get(session_id)
    if not session:
        raise _not_found(session_id)
    return session


@router.post("", response_model=FollowUpSession, status_code=201)
async def create_session(session: FollowUpSession, store: SessionStore = Depends(get_session_store)):
    """
    Створити сесію. id у тілі ігнорується.

    Приклад:
    ```json
    {
        "patient": "María González",
        "date": "2024-11-15",
        "kpis": {"frequency": 3, "intensity": 7, "duration": 4},
        "diagnosis": "Епізодична мігрень",
        "progress": 45
    }
    ```
    """
    return store.sessions.insert(session)


@router.put("/{session_id}", response_model=FollowUpSession)
async def update_session(
    session_id: int,
    session: FollowUpSession,
    store: SessionStore = Depends(get_session_store),
):
    updated = store.sessions.replace(session_id, session)
    if not updated:
        raise _not_found(session_id)
    return updated


@router.delete("/{session_id}", response_model=DeleteResponse)
async def delete_session(session_id: int, store: SessionStore = Depends(get_session_store)):
    if not store.sessions.delete(session_id):
        raise _not_found(session_id)
    return DeleteResponse(deleted=True, id=session_id)
