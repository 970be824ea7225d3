"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import career_paths, roadmaps, skills
from app.core.config import Settings, get_settings
from app.core.database import Database
from app.core.errors import register_exception_handlers
from app.core.logging import configure_logging, get_logger
from app.services import career_path_service

logger = get_logger(__name__)


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Settings to use (defaults to the cached environment settings)
        database: Pre-built database; one is created from settings at startup otherwise
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        # Startup
        configure_logging(debug=settings.DEBUG)
        logger.info(
            "Starting Pathfinder",
            version=settings.APP_VERSION,
            env=settings.ENV,
            debug=settings.DEBUG,
        )
        db = database or Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
        app.state.database = db
        await db.create_all()
        if settings.SEED_CAREER_PATHS:
            async with db.session() as session:
                await career_path_service.seed_career_paths(session)
        yield
        # Shutdown
        logger.info("Shutting down Pathfinder")
        await db.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="AI-generated career roadmaps with per-skill progress tracking",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next):
        """Attach method and path to every log line of the request."""
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(method=request.method, path=request.url.path)
        return await call_next(request)

    # Include routers
    app.include_router(roadmaps.router, prefix="/api")
    app.include_router(skills.router, prefix="/api")
    app.include_router(career_paths.router, prefix="/api")

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.APP_VERSION,
            "env": settings.ENV,
        }

    @app.get("/")
    async def root() -> dict:
        """Root endpoint."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs": "/docs",
        }

    return app


app = create_app()
