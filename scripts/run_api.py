#!/usr/bin/env python3
"""
Migraine Care — Запуск dev backend

Запуск:
    python scripts/run_api.py
    python scripts/run_api.py --port 8080
    python scripts/run_api.py --host 127.0.0.1 --port 3000 --no-samples
"""

import os
import sys
import argparse
from pathlib import Path

# Додаємо корінь проекту до path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def main():
    parser = argparse.ArgumentParser(description='Migraine Care API Server')
    parser.add_argument('--host', default='0.0.0.0', help='Host (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=3000, help='Port (default: 3000)')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload')
    parser.add_argument('--no-samples', action='store_true', help='Start with empty stores')

    args = parser.parse_args()

    # Конфігурація читається в create_app() з env
    os.environ["API_HOST"] = args.host
    os.environ["API_PORT"] = str(args.port)
    if args.no_samples:
        os.environ["API_SEED_SAMPLES"] = "false"

    print("=" * 60)
    print("🩺 Migraine Care — API Server")
    print("=" * 60)
    print(f"   Host: {args.host}")
    print(f"   Port: {args.port}")
    print(f"   Reload: {args.reload}")
    print(f"   Samples: {not args.no_samples}")
    print("=" * 60)

    try:
        import uvicorn
    except ImportError:
        print("❌ uvicorn не встановлено!")
        print("   Встановіть: pip install uvicorn[standard]")
        sys.exit(1)

    # Запускаємо сервер
    uvicorn.run(
        "migraine_care.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
