#!/usr/bin/env python3
"""
Migraine Care — Запуск Web UI (Streamlit)

Запуск:
    python scripts/run_web.py
    python scripts/run_web.py --port 8501
    python scripts/run_web.py --api-url http://localhost:3000/api

Примітка:
    Перед запуском Web UI переконайтесь, що backend працює:
    python scripts/run_api.py
"""

import os
import sys
import subprocess
import argparse
from pathlib import Path

# Шлях до проекту
project_root = Path(__file__).parent.parent
web_ui_path = project_root / "migraine_care" / "web_ui" / "app.py"


def main():
    parser = argparse.ArgumentParser(description='Migraine Care Web UI')
    parser.add_argument('--port', type=int, default=8501, help='Port (default: 8501)')
    parser.add_argument('--host', default='localhost', help='Host (default: localhost)')
    parser.add_argument('--api-url', default=None, help='Backend URL (default: MIGRAINE_API_URL)')

    args = parser.parse_args()

    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(project_root), env.get("PYTHONPATH")]))
    if args.api_url:
        env["MIGRAINE_API_URL"] = args.api_url

    print("=" * 60)
    print("🩺 Migraine Care — Web UI (Streamlit)")
    print("=" * 60)
    print(f"   App: {web_ui_path}")
    print(f"   URL: http://{args.host}:{args.port}")
    print(f"   Backend: {env.get('MIGRAINE_API_URL', 'http://localhost:3000/api')}")
    print("=" * 60)
    print()
    print("⚠️  Переконайтесь, що backend запущено:")
    print("    python scripts/run_api.py")
    print()
    print("=" * 60)

    # Перевіряємо чи є streamlit
    try:
        import streamlit
        print(f"✅ Streamlit version: {streamlit.__version__}")
    except ImportError:
        print("❌ Streamlit не встановлено!")
        print("   Встановіть: python -m pip install streamlit")
        sys.exit(1)

    # Перевіряємо чи існує файл
    if not web_ui_path.exists():
        print(f"❌ Файл не знайдено: {web_ui_path}")
        sys.exit(1)

    print()
    print("🚀 Запуск Streamlit...")
    print()

    # Запускаємо Streamlit
    cmd = [
        sys.executable, "-m", "streamlit", "run",
        str(web_ui_path),
        "--server.port", str(args.port),
        "--server.address", args.host,
        "--browser.gatherUsageStats", "false",
    ]

    try:
        subprocess.run(cmd, env=env)
    except KeyboardInterrupt:
        print("\n🛑 Зупинено")


if __name__ == "__main__":
    main()
