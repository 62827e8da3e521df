"""
Migraine Care — API Dependencies

In-memory сховища та AI консультант для FastAPI.
"""

import threading
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

from ..config import MigraineCareConfig
from ..schemas import ClinicalSession, FollowUpSession, Patient, Treatment
from ..services import (
    AIConsultant,
    sample_patients,
    sample_sessions,
    sample_treatments,
)


Model = TypeVar("Model", bound=BaseModel)


class InMemoryTable(Generic[Model]):
    """
    Таблиця з автоінкрементним id.
    Зберігає копії моделей, тому зміни ззовні не потрапляють у сховище.
    """

    def __init__(self):
        self._rows: Dict[int, Model] = {}
        self._next_id = 1
        self.lock = threading.Lock()

    def insert(self, row: Model) -> Model:
        with self.lock:
            row_id = self._next_id
            self._next_id += 1
            stored = row.model_copy(update={"id": row_id}, deep=True)
            self._rows[row_id] = stored
        return stored.model_copy(deep=True)

    def get(self, row_id: int) -> Optional[Model]:
        row = self._rows.get(row_id)
        return row.model_copy(deep=True) if row else None

    def replace(self, row_id: int, row: Model) -> Optional[Model]:
        with self.lock:
            if row_id not in self._rows:
                return None
            stored = row.model_copy(update={"id": row_id}, deep=True)
            self._rows[row_id] = stored
        return stored.model_copy(deep=True)

    def delete(self, row_id: int) -> bool:
        with self.lock:
            return self._rows.pop(row_id, None) is not None

    def select(self, where: Optional[Callable[[Model], bool]] = None) -> List[Model]:
        with self.lock:
            rows = list(self._rows.values())
        return [r.model_copy(deep=True) for r in rows if where is None or where(r)]

    def __len__(self) -> int:
        return len(self._rows)


class SessionStore:
    """Проста схема: таблиця sessions"""

    def __init__(self, seed: bool = False):
        self.sessions: InMemoryTable[FollowUpSession] = InMemoryTable()
        if seed:
            for session in sample_sessions():
                self.sessions.insert(session)

    def list_sessions(self, patient: Optional[str] = None) -> List[FollowUpSession]:
        """Сесії, новіші першими"""
        rows = self.sessions.select(
            None if patient is None else (lambda s: s.patient == patient)
        )
        return sorted(rows, key=lambda s: (s.date, s.id), reverse=True)


class ClinicStore:
    """Клінічна схема: пацієнти, сесії, довідник лікування"""

    def __init__(self, seed: bool = False):
        self.patients: InMemoryTable[Patient] = InMemoryTable()
        self.sessions: InMemoryTable[ClinicalSession] = InMemoryTable()
        self.treatments: InMemoryTable[Treatment] = InMemoryTable()
        if seed:
            for patient in sample_patients():
                self.patients.insert(patient)
            for treatment in sample_treatments():
                self.treatments.insert(treatment)

    def patient_sessions(self, patient_id: int) -> List[ClinicalSession]:
        rows = self.sessions.select(lambda s: s.patient_id == patient_id)
        return sorted(rows, key=lambda s: (s.session_date, s.id))


# Глобальні сховища (наповнюються при старті додатку)
session_store = SessionStore()
clinic_store = ClinicStore()

_consultant: Optional[AIConsultant] = None
_consultant_lock = threading.Lock()


def seed_stores() -> None:
    """Замінити глобальні сховища на наповнені демонстраційними даними"""
    global session_store, clinic_store
    session_store = SessionStore(seed=True)
    clinic_store = ClinicStore(seed=True)


# Dependency functions для FastAPI
def get_session_store() -> SessionStore:
    """Dependency: сховище простої схеми"""
    return session_store


def get_clinic_store() -> ClinicStore:
    """Dependency: сховище клінічної схеми"""
    return clinic_store


def get_consultant() -> AIConsultant:
    """Dependency: AI консультант (створюється один раз з env)"""
    global _consultant
    if _consultant is None:
        with _consultant_lock:
            if _consultant is None:
                _consultant = AIConsultant.from_config(MigraineCareConfig.from_env().ai)
    return _consultant
