"""
Migraine Care — Сесії напряму в Supabase (PostgREST)

Клієнт має бути створений з ClientConfig.for_supabase(...):
base_url вже містить /rest/v1, а заголовки apikey/Authorization/Prefer
додаються до кожного запиту.
"""

import logging
from typing import Any, List

from ..client import TimedJsonClient
from ..schemas import FollowUpSession


logger = logging.getLogger(__name__)

TABLE = "sessions"


def first_row(payload: Any) -> Any:
    """Prefer: return=representation повертає список рядків"""
    if isinstance(payload, list):
        if not payload:
            raise ValueError("Supabase returned an empty representation")
        return payload[0]
    return payload


class SupabaseSessionStore:
    """Таблиця sessions через REST API бази даних"""

    def __init__(self, client: TimedJsonClient, table: str = TABLE):
        self.client = client
        self.table = table

    def list_sessions(self) -> List[FollowUpSession]:
        data = self.client.get(f"/{self.table}?select=*&order=date.desc") or []
        return [FollowUpSession.model_validate(row) for row in data]

    def save(self, session: FollowUpSession) -> FollowUpSession:
        row = session.to_row()
        if session.is_saved:
            payload = self.client.patch(f"/{self.table}?id=eq.{session.id}", row)
        else:
            payload = self.client.post(f"/{self.table}", row)
        saved = FollowUpSession.model_validate(first_row(payload))
        logger.info("Saved session %s to %s", saved.id, self.table)
        return saved

    def delete(self, session_id: int) -> None:
        self.client.delete(f"/{self.table}?id=eq.{session_id}")
        logger.info("Deleted session %s from %s", session_id, self.table)
