import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskboard.config.settings import Settings, configure_logging
from taskboard.database import Database
from taskboard.routers import admin, auth, tasks

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the API around an explicit settings object and database handle"""
    settings = settings or Settings()
    database = database or Database.from_settings(settings)

    app = FastAPI(title="Taskboard API")
    app.state.settings = settings
    app.state.database = database

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Route registration
    app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
    app.include_router(tasks.router, prefix="/api/tasks", tags=["Tasks"])
    app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])

    # Startup and shutdown events
    @app.on_event("startup")
    def startup_event():
        if settings.uses_default_secret:
            logger.warning("SECRET_KEY is not set, using the insecure default")
        database.create_all()
        logger.info("Starting Taskboard API...")

    @app.on_event("shutdown")
    def shutdown_event():
        logger.info("Shutting down Taskboard API...")
        database.dispose()

    # Root route
    @app.get("/")
    def read_root():
        return {"message": "Taskboard API"}

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


settings = Settings()
configure_logging(settings.log_level)
app = create_app(settings)
