"""
Migraine Care — FastAPI Application

Dev backend, що реалізує REST контракт front-end (в пам'яті).

Запуск:
    uvicorn migraine_care.api.app:app --reload --port 3000

    або:

    python scripts/run_api.py
"""

from contextlib import asynccontextmanager
from typing import Optional
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import __version__
from . import dependencies
from .config import APIConfig
from .routes import (
    health_router,
    sessions_router,
    clinic_router,
    ai_router,
)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "Некоректні дані"


def create_app(config: Optional[APIConfig] = None) -> FastAPI:
    """Створити FastAPI додаток"""
    config = config or APIConfig.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifecycle manager — наповнення сховищ при старті"""
        print("=" * 60)
        print("🩺 Migraine Care API Starting...")
        print("=" * 60)

        if config.seed_samples:
            dependencies.seed_stores()
            print("   ✅ Демонстраційні дані завантажено")

        providers = dependencies.get_consultant()
        for provider in (providers.deepseek, providers.openai):
            mark = "✅" if provider.config.is_configured else "⚠️"
            print(f"   {mark} {provider.label}")

        print("=" * 60)
        print(f"📍 Swagger UI: http://{config.host}:{config.port}/docs")
        print("=" * 60)

        yield

        print("🛑 Migraine Care API Stopping...")

    app = FastAPI(
        title=config.api_title,
        description=config.api_description,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=config.cors_allow_credentials,
        allow_methods=config.cors_allow_methods,
        allow_headers=config.cors_allow_headers,
    )

    # Middleware для логування запитів
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time

        # Логуємо тільки API запити
        if request.url.path.startswith(config.api_prefix):
            print(f"📨 {request.method} {request.url.path} → {response.status_code} ({process_time*1000:.1f}ms)")

        return response

    # Помилки у форматі {"error": "..."}
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=422, content={"error": _validation_message(exc)})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        print(f"❌ Error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "detail": str(exc) if config.debug else None,
            },
        )

    # Підключаємо роутери
    app.include_router(health_router)
    app.include_router(sessions_router, prefix=config.api_prefix)
    app.include_router(clinic_router, prefix=config.api_prefix)
    app.include_router(ai_router, prefix=config.api_prefix)

    return app


app = create_app()
