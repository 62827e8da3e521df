"""
Migraine Care — Sessions Page

Сесії спостереження: список, нова/редагування, AI-консультація, голос.
"""

import streamlit as st

from migraine_care.client import ClientError
from migraine_care.config import BackendKind
from migraine_care.schemas import FollowUpSession, SessionKPIs, VOTE_AI_1, VOTE_AI_2
from migraine_care.services import AIConsultant, describe_error
from migraine_care.web_ui.backend import get_config, get_sessions_api, load_sessions, save_session

st.set_page_config(
    page_title="Сесії — Migraine Care",
    page_icon="📝",
    layout="wide",
)

st.title("📝 Сесії спостереження")

# Ініціалізація session state
if "sessions" not in st.session_state:
    sessions, error = load_sessions()
    st.session_state.sessions = sessions
    st.session_state.sessions_error = error
if "current" not in st.session_state:
    st.session_state.current = None
if "consultation" not in st.session_state:
    st.session_state.consultation = None

if st.session_state.sessions_error:
    st.error(f"❌ {st.session_state.sessions_error}")
    st.caption("Показано демонстраційні дані")


def consult(session: FollowUpSession):
    """AI-консультація через backend або напряму до провайдерів"""
    config = get_config()
    if config.backend == BackendKind.SUPABASE:
        return AIConsultant.from_config(config.ai).consult(session.kpis)
    return get_sessions_api().consult_ai(session)


def store_saved(saved: FollowUpSession, previous_id):
    sessions = st.session_state.sessions
    for i, s in enumerate(sessions):
        if previous_id is not None and s.id == previous_id:
            sessions[i] = saved
            return
    sessions.insert(0, saved)


if st.button("➕ Нова сесія", type="primary"):
    st.session_state.current = FollowUpSession.new()
    st.session_state.consultation = None

current = st.session_state.current

if current is not None:
    st.divider()
    st.subheader("Редагування сесії" if current.is_saved else "Нова сесія")

    col1, col2 = st.columns(2)
    current.patient = col1.text_input("Пацієнт", value=current.patient) or current.patient
    current.date = col2.date_input("Дата", value=current.date)

    st.markdown("**KPI**")
    c1, c2, c3 = st.columns(3)
    kpis = SessionKPIs(
        frequency=c1.number_input("Епізодів/міс", min_value=0, value=current.kpis.frequency),
        intensity=c2.slider("Інтенсивність", 0, 10, current.kpis.intensity),
        duration=c3.number_input("Тривалість (год)", min_value=0.0, value=float(current.kpis.duration)),
        triggers=st.text_input("Тригери", value=current.kpis.triggers),
        medication=st.text_input("Поточні ліки", value=current.kpis.medication),
    )
    current.kpis = kpis
    current.diagnosis = st.text_area("Діагноз", value=current.diagnosis)
    current.progress = st.slider("Прогрес (%)", 0, 100, current.progress)

    col_ai, col_save = st.columns(2)

    if col_ai.button("🤖 AI-консультація", use_container_width=True):
        with st.spinner("Запит до AI..."):
            try:
                st.session_state.consultation = consult(current)
            except ClientError as e:
                st.error(f"❌ Помилка AI-консультації: {describe_error(e)}")

    report = st.session_state.consultation
    if report is not None:
        for vote, reply in ((VOTE_AI_1, report.deepseek), (VOTE_AI_2, report.openai)):
            with st.expander(f"{vote}: {reply.provider}", expanded=True):
                st.markdown(reply.display_text)
                if reply.ok:
                    reason = st.text_input("Чому ця відповідь краща?", key=f"reason_{vote}")
                    if st.button(f"👍 Голосувати за {vote}", key=f"vote_{vote}"):
                        current.vote(vote, reason or None)
                        st.success(f"Голос: {vote}")

    if current.ai_vote:
        st.caption(f"Голос за AI: {current.ai_vote} {current.ai_vote_reason or ''}")

    if col_save.button("💾 Зберегти", use_container_width=True):
        try:
            saved = save_session(current)
        except ClientError as e:
            st.error(f"❌ Не вдалося зберегти сесію: {describe_error(e)}")
        else:
            store_saved(saved, current.id)
            st.session_state.current = None
            st.session_state.consultation = None
            st.rerun()

st.divider()

# Список сесій
sessions = st.session_state.sessions
if not sessions:
    st.info("Сесій ще немає")

for session in sessions:
    with st.container(border=True):
        col1, col2 = st.columns([4, 1])
        col1.markdown(f"**{session.patient}** · {session.date.isoformat()}")
        col1.caption(session.diagnosis or "—")
        col1.markdown(
            f"Частота: {session.kpis.frequency}/міс · "
            f"Інтенсивність: {session.kpis.intensity}/10 · "
            f"Тривалість: {session.kpis.duration:g} год · "
            f"Прогрес: {session.progress}%"
        )
        if session.ai_vote:
            col1.caption(f"🤖 Голос: {session.ai_vote}")
        if col2.button("✏️ Редагувати", key=f"edit_{session.id}"):
            st.session_state.current = session.model_copy(deep=True)
            st.session_state.consultation = None
            st.rerun()
