"""
Migraine Care — Web UI Module

Streamlit веб-інтерфейс.

Запуск:
    streamlit run migraine_care/web_ui/app.py

    або:

    python scripts/run_web.py

Сторінки:
    - 🩺 Home — Статус backend
    - 📝 Sessions — Сесії спостереження
    - 👥 Patients — Пацієнти та лікування
    - 📊 Analytics — Графіки

Вимоги:
    - Streamlit >= 1.30.0
    - Backend (python scripts/run_api.py або production URL у MIGRAINE_API_URL)
"""
