"""
Migraine Care — Analytics Page

Графіки динаміки KPI, розподілу діагнозів та AI.
"""

import pandas as pd
import streamlit as st

from migraine_care import analytics
from migraine_care.web_ui.backend import load_sessions

st.set_page_config(
    page_title="Аналітика — Migraine Care",
    page_icon="📊",
    layout="wide",
)

st.title("📊 Аналітика")

flow = st.radio("Дані", ["Сесії спостереження", "Клінічні сесії пацієнта"], horizontal=True)


def pie_frame(rows):
    return pd.DataFrame(rows).set_index("name")[["value"]]


if flow == "Сесії спостереження":
    sessions = st.session_state.get("sessions")
    if sessions is None:
        sessions, error = load_sessions()
        if error:
            st.warning(f"⚠️ {error} — показано демонстраційні дані")

    summary = analytics.session_summary(sessions)
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Сесій", summary["total"])
    col2.metric("Середній прогрес", f"{summary['average_progress']}%")
    col3.metric("Середня інтенсивність", f"{summary['average_intensity']}/10")
    col4.metric("Голосів за AI", summary["voted"])

    if not sessions:
        st.info("Немає даних для графіків")
        st.stop()

    st.subheader("Прогрес лікування")
    st.line_chart(pd.DataFrame(analytics.progress_series(sessions)).set_index("session")[["progress"]])

    st.subheader("Динаміка KPI")
    st.line_chart(pd.DataFrame(analytics.kpi_evolution(sessions)).set_index("session"))

    col_a, col_b = st.columns(2)
    with col_a:
        st.subheader("Діагнози")
        st.bar_chart(pie_frame(analytics.diagnosis_distribution(sessions)))
    with col_b:
        st.subheader("Голоси за AI")
        st.bar_chart(pie_frame(analytics.ai_vote_distribution(sessions)))

else:
    sessions = st.session_state.get("clinical_sessions") or []
    if not sessions:
        st.info("Оберіть пацієнта на сторінці «Пацієнти»")
        st.stop()

    summary = analytics.clinical_summary(sessions)
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Сесій", summary["total"])
    col2.metric("Середня інтенсивність", f"{summary['average_pain_intensity']}/10")
    col3.metric("Середня якість життя", f"{summary['average_quality_of_life']}/10")
    col4.metric("З AI-консультацією", summary["with_ai"])

    st.subheader("Динаміка KPI")
    st.line_chart(pd.DataFrame(analytics.clinical_kpi_evolution(sessions)).set_index("session").drop(columns="date"))

    st.subheader("Типи мігрені")
    st.bar_chart(pie_frame(analytics.migraine_type_distribution(sessions)))

    comparison = analytics.ai_confidence_comparison(sessions)
    if comparison:
        st.subheader("Впевненість AI (%)")
        st.bar_chart(pd.DataFrame(comparison).set_index("session"))
