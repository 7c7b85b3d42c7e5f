import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.http.health import router as health_router
from app.api.http.auth import router as auth_router
from app.api.http.posts import router as posts_router
from app.core.auth import BearerTokenIdentityResolver
from app.core.config import DEFAULT_JWT_SECRET, Settings, settings as default_settings
from app.core.db import Database
from app.core.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Сборка приложения; движок БД создается один раз в lifespan"""
    settings = settings or default_settings
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.jwt_secret == DEFAULT_JWT_SECRET:
            logger.warning("JWT_SECRET is not set, using the insecure default")

        database = Database(settings.database_url, echo=settings.sql_echo)
        if settings.create_schema:
            await database.create_all()

        app.state.database = database
        app.state.identity_resolver = BearerTokenIdentityResolver(settings)
        logger.info(f"{settings.project_name} started")
        try:
            yield
        finally:
            await database.dispose()

    app = FastAPI(
        title=settings.project_name,
        description="Personal blog: users manage their own posts",
        version=settings.api_version,
        lifespan=lifespan
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(posts_router)

    @app.get("/")
    async def root():
        """Корневой эндпоинт"""
        return {
            "message": f"{settings.project_name} API",
            "version": settings.api_version,
            "docs": "/docs",
            "health": "/health"
        }

    return app


app = create_app()
