"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from schoolpulse.admin.router import router as admin_router
from schoolpulse.assessments.router import router as assessments_router
from schoolpulse.config import get_settings
from schoolpulse.health.router import router as health_router
from schoolpulse.middleware import setup_middleware
from schoolpulse.questions.router import router as questions_router
from schoolpulse.questions.seed import seed_questions
from schoolpulse.rituals.router import router as rituals_router
from schoolpulse.rituals.seed import seed_micro_rituals
from schoolpulse.schools.router import router as schools_router
from schoolpulse.scoring.router import router as scoring_router
from schoolpulse.storage import close_storage, get_storage, init_storage
from schoolpulse.users.router import router as users_router

logger = structlog.get_logger()


async def seed_reference_data() -> None:
    """Seed the question bank and micro-ritual catalogue (idempotent)."""
    async for storage in get_storage():
        await seed_questions(storage)
        await seed_micro_rituals(storage)
        await storage.commit()
        break


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup and shutdown lifecycle."""
    settings = get_settings()
    await init_storage(
        settings.storage_backend,
        database_url=settings.database_url,
        create_schema=settings.database_create_tables,
    )
    await seed_reference_data()
    logger.info("storage_ready", backend=settings.storage_backend)

    yield

    await close_storage()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="SchoolPulse API",
        description="School-community relationship health survey",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    setup_middleware(app, settings)
    app.include_router(health_router, tags=["Health"])
    app.include_router(schools_router)
    app.include_router(scoring_router)
    app.include_router(users_router)
    app.include_router(questions_router)
    app.include_router(assessments_router)
    app.include_router(rituals_router)
    app.include_router(admin_router)

    return app


app = create_app()
