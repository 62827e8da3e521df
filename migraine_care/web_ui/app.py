"""
Migraine Care — Web UI (Streamlit)

Веб-інтерфейс для спостереження пацієнтів з мігренню.

Запуск:
    streamlit run migraine_care/web_ui/app.py

    або:

    python scripts/run_web.py
"""

import streamlit as st

from migraine_care.web_ui.backend import backend_status, get_config


def main():
    # Налаштування сторінки
    st.set_page_config(
        page_title="Migraine Care — Спостереження мігрені",
        page_icon="🩺",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    config = get_config()

    # Sidebar
    with st.sidebar:
        st.title("Migraine Care")
        st.caption("Спостереження пацієнтів з мігренню")

        st.divider()

        st.markdown("""
        ### 📋 Навігація

        - 📝 **Сесії** — Сесії спостереження
        - 👥 **Пацієнти** — Пацієнти та лікування
        - 📊 **Аналітика** — Графіки KPI
        """)

        st.divider()

        st.markdown("### ⚙️ Статус")
        online, detail = backend_status()
        if online:
            st.success("🟢 Backend Online")
        else:
            st.warning("🟡 Backend Offline")
        st.caption(detail)

        for message in config.warnings():
            st.caption(f"⚠️ {message}")

    # Головний контент
    st.title("🩺 Migraine Care")
    st.subheader("Спостереження пацієнтів з мігренню")

    st.markdown("""
    ---

    ### 👋 Ласкаво просимо!

    **Migraine Care** допомагає лікарю вести сесії спостереження:

    - 📝 **KPI сесії** — частота, інтенсивність, тривалість, тригери, ліки
    - 🤖 **AI-консультація** — DeepSeek (клінічний аналіз) і OpenAI (предиктивний аналіз)
    - 📊 **Аналітика** — динаміка показників і розподіл діагнозів

    ---

    ### ⚠️ Важливо

    > Відповіді AI показуються як є і **не замінюють** рішення лікаря.
    """)

    col1, col2, col3 = st.columns(3)
    col1.metric("Backend", config.backend.value)
    col2.metric("Таймаут запиту", f"{config.api.timeout_seconds:g} с")
    col3.metric("AI провайдерів", sum(1 for p in (config.ai.deepseek, config.ai.openai) if p.is_configured))


if __name__ == "__main__":
    main()
