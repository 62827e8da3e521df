"""
Migraine Care — Patients Page

Клінічна схема: пацієнт → сесії → призначене лікування.
"""

import streamlit as st

from migraine_care.client import ClientError
from migraine_care.schemas import ClinicalSession, DISABILITY_LEVELS, SESSION_TYPES
from migraine_care.services import describe_error, fallback_opinions, sample_patients
from migraine_care.web_ui.backend import get_clinic_api

st.set_page_config(
    page_title="Пацієнти — Migraine Care",
    page_icon="👥",
    layout="wide",
)

st.title("👥 Пацієнти")

api = get_clinic_api()

# Ініціалізація session state
if "patients" not in st.session_state:
    try:
        st.session_state.patients = api.list_patients()
    except ClientError as e:
        st.session_state.patients = sample_patients()
        st.error(f"❌ {describe_error(e)}")
if "treatments" not in st.session_state:
    try:
        st.session_state.treatments = api.list_treatments()
    except ClientError:
        st.session_state.treatments = []
if "clinical_current" not in st.session_state:
    st.session_state.clinical_current = None
if "clinical_consultation" not in st.session_state:
    st.session_state.clinical_consultation = None

patients = st.session_state.patients
if not patients:
    st.info("Пацієнтів ще немає")
    st.stop()

patient = st.selectbox(
    "Пацієнт",
    options=patients,
    format_func=lambda p: f"{p.code} — {p.full_name}",
)

age = patient.age()
st.caption(
    f"{patient.gender or '—'} · "
    f"{f'{age} р.' if age is not None else 'вік невідомий'} · "
    f"{patient.email or '—'} · {patient.phone or '—'}"
)


def load_patient_sessions(patient_id: int):
    try:
        return api.list_patient_sessions(patient_id)
    except ClientError as e:
        st.error(f"❌ {describe_error(e)}")
        return []


sessions = load_patient_sessions(patient.id)
st.session_state.clinical_sessions = sessions

if st.button("➕ Нова сесія", type="primary"):
    st.session_state.clinical_current = ClinicalSession.new(patient_id=patient.id)
    st.session_state.clinical_consultation = None

current = st.session_state.clinical_current

if current is not None and current.patient_id == patient.id:
    st.divider()
    st.subheader("Клінічна сесія")

    col1, col2 = st.columns(2)
    current.session_date = col1.date_input("Дата сесії", value=current.session_date)
    current.session_type = col2.selectbox(
        "Тип сесії",
        SESSION_TYPES,
        index=SESSION_TYPES.index(current.session_type) if current.session_type in SESSION_TYPES else 1,
    )

    st.markdown("**Симптоми**")
    s1, s2, s3, s4 = st.columns(4)
    current.symptoms.headache = s1.text_input("Головний біль", value=current.symptoms.headache)
    current.symptoms.nausea = s2.checkbox("Нудота", value=current.symptoms.nausea)
    current.symptoms.photophobia = s3.checkbox("Фотофобія", value=current.symptoms.photophobia)
    current.symptoms.phonophobia = s4.checkbox("Фонофобія", value=current.symptoms.phonophobia)

    st.markdown("**Тригери**")
    t1, t2 = st.columns(2)
    current.triggers.stress = t1.checkbox("Стрес", value=current.triggers.stress)
    current.triggers.lack_of_sleep = t2.checkbox("Недосипання", value=current.triggers.lack_of_sleep)

    st.markdown("**KPI**")
    k1, k2, k3, k4 = st.columns(4)
    kpis = current.kpis
    kpis.pain_intensity = k1.slider("Інтенсивність болю", 0, 10, kpis.pain_intensity)
    kpis.episode_frequency = k2.number_input("Епізодів/міс", min_value=0, value=kpis.episode_frequency)
    kpis.duration_hours = k3.number_input("Тривалість (год)", min_value=0.0, value=float(kpis.duration_hours))
    kpis.disability_level = k4.selectbox(
        "Інвалідизація",
        DISABILITY_LEVELS,
        index=DISABILITY_LEVELS.index(kpis.disability_level) if kpis.disability_level in DISABILITY_LEVELS else 1,
    )
    k5, k6, k7 = st.columns(3)
    kpis.quality_of_life = k5.slider("Якість життя", 0, 10, kpis.quality_of_life)
    kpis.lost_work_days = k6.number_input("Втрачених робочих днів", min_value=0, value=kpis.lost_work_days)
    kpis.sleep_quality = k7.slider("Якість сну", 1, 5, kpis.sleep_quality)

    current.migraine_type = st.text_input(
        "Тип мігрені", value=current.migraine_type, placeholder="Напр.: епізодична мігрень без аури"
    )
    a1, a2 = st.columns(2)
    current.aura_present = a1.checkbox("Аура", value=current.aura_present)
    current.chronic_condition = a2.checkbox("Хронічний стан", value=current.chronic_condition)
    current.final_diagnosis = st.text_area("Остаточний діагноз лікаря", value=current.final_diagnosis)

    # Лікування
    st.markdown("**Призначене лікування**")
    treatments = st.session_state.treatments
    if treatments:
        choice = st.selectbox(
            "Додати лікування",
            options=[None] + treatments,
            format_func=lambda t: "—" if t is None else f"{t.name} ({t.common_dose or '—'})",
        )
        if choice is not None and st.button("➕ Додати"):
            current.add_treatment(choice)
            st.rerun()

    for i, prescribed in enumerate(current.prescribed_treatments):
        p1, p2, p3 = st.columns([4, 1, 1])
        final_mark = " ✅" if prescribed.is_final else ""
        p1.markdown(
            f"{prescribed.treatment_name} · {prescribed.dose} · "
            f"{prescribed.frequency} · {prescribed.duration_days} дн.{final_mark}"
        )
        if p2.button("Остаточне", key=f"final_{i}"):
            current.set_final_treatment(i)
            st.rerun()
        if p3.button("🗑️", key=f"remove_{i}"):
            current.remove_treatment(i)
            st.rerun()

    col_ai, col_save = st.columns(2)

    if col_ai.button("🤖 AI-консультація", use_container_width=True):
        with st.spinner("Запит до AI..."):
            try:
                consultation = api.consult_ai(current)
            except ClientError as e:
                st.error(f"❌ Помилка AI-консультації: {describe_error(e)}")
                consultation = fallback_opinions()
            consultation.apply_to(current)
            st.session_state.clinical_consultation = consultation

    consultation = st.session_state.clinical_consultation
    if consultation is not None:
        for opinion in (consultation.ai1, consultation.ai2):
            with st.expander(f"{opinion.name} · впевненість {opinion.confidence * 100:.0f}%", expanded=True):
                st.markdown(f"**Діагноз:** {opinion.diagnosis}")
                st.markdown(f"**Лікування:** {opinion.treatment}")

    if col_save.button("💾 Зберегти", use_container_width=True):
        try:
            api.save_session(current)
        except ClientError as e:
            st.error(f"❌ Не вдалося зберегти сесію: {describe_error(e)}")
        else:
            st.session_state.clinical_current = None
            st.session_state.clinical_consultation = None
            st.rerun()

st.divider()

if not sessions:
    st.info("У пацієнта ще немає сесій")

for session in sessions:
    with st.container(border=True):
        st.markdown(f"**{session.session_type}** · {session.session_date.isoformat()}")
        if session.migraine_type:
            st.markdown(session.migraine_type)
        st.caption(session.final_diagnosis or "—")
        st.markdown(
            f"Інтенсивність: {session.kpis.pain_intensity}/10 · "
            f"Частота: {session.kpis.episode_frequency}/міс · "
            f"Тривалість: {session.kpis.duration_hours:g} год · "
            f"Інвалідизація: {session.kpis.disability_level}"
        )
        if session.has_ai_confidences:
            st.caption(
                f"IA-1: {session.ai1_confidence * 100:.0f}% · IA-2: {session.ai2_confidence * 100:.0f}%"
            )
        if st.button("✏️ Редагувати", key=f"edit_clinical_{session.id}"):
            st.session_state.clinical_current = session.model_copy(deep=True)
            st.session_state.clinical_consultation = None
            st.rerun()
