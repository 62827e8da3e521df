"""
Migraine Care — Підключення Web UI до backend

Конфігурація читається один раз при старті процесу Streamlit.
"""

from typing import List, Optional, Tuple

import streamlit as st

from migraine_care.client import ClientError, TimedJsonClient
from migraine_care.config import BackendKind, MigraineCareConfig
from migraine_care.schemas import FollowUpSession
from migraine_care.services import (
    ClinicAPI,
    SessionsAPI,
    SupabaseSessionStore,
    describe_error,
    sample_sessions,
)


@st.cache_resource
def get_config() -> MigraineCareConfig:
    return MigraineCareConfig.from_env()


@st.cache_resource
def get_client() -> TimedJsonClient:
    return TimedJsonClient(get_config().client_config())


def get_sessions_api() -> SessionsAPI:
    return SessionsAPI(get_client())


def get_supabase_store() -> Optional[SupabaseSessionStore]:
    if get_config().backend != BackendKind.SUPABASE:
        return None
    return SupabaseSessionStore(get_client())


def get_clinic_api() -> ClinicAPI:
    return ClinicAPI(get_client())


def load_sessions() -> Tuple[List[FollowUpSession], Optional[str]]:
    """Сесії з backend; при помилці — демонстраційні дані і текст помилки"""
    store = get_supabase_store()
    try:
        if store is not None:
            return store.list_sessions(), None
        return get_sessions_api().list_sessions(), None
    except ClientError as e:
        return sample_sessions(), describe_error(e)


def save_session(session: FollowUpSession) -> FollowUpSession:
    store = get_supabase_store()
    if store is not None:
        return store.save(session)
    return get_sessions_api().save(session)


def backend_status() -> Tuple[bool, str]:
    """(онлайн, опис) для бічної панелі"""
    config = get_config()
    if config.backend == BackendKind.SUPABASE:
        return True, "Supabase"
    try:
        get_client().get("/sessions")
        return True, config.api.base_url
    except ClientError as e:
        return False, describe_error(e)
