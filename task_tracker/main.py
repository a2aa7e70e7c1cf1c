import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .database import create_db_engine, create_session_factory, create_tables
from .error_handlers import register_error_handlers
from .observability import setup_logging
from .routers import dashboard, employees, tasks
from .schemas.common import HealthResponse
from .seed import seed_database

logger = logging.getLogger(__name__)


def create_app(database_url: Optional[str] = None, seed: Optional[bool] = None) -> FastAPI:
    """Build the API bound to its own engine.

    Each app owns its engine, so tests can run against independent in-memory
    databases.
    """
    database_url = database_url or config.DATABASE_URL
    seed = config.SEED_DATABASE if seed is None else seed

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(config.LOG_LEVEL, config.LOG_FORMAT)
        create_tables(app.state.engine)
        if seed:
            with app.state.session_factory() as db:
                seed_database(db)
        logger.info("Employee Task Tracker API started")
        yield
        app.state.engine.dispose()
        logger.info("Employee Task Tracker API shutting down")

    app = FastAPI(
        title="Employee Task Tracker API",
        description="Employees, their tasks, and dashboard statistics",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.engine = create_db_engine(database_url)
    app.state.session_factory = create_session_factory(app.state.engine)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(employees.router, prefix="/api", tags=["employees"])
    app.include_router(tasks.router, prefix="/api", tags=["tasks"])
    app.include_router(dashboard.router, prefix="/api", tags=["dashboard"])

    register_error_handlers(app)

    @app.get("/api/health", response_model=HealthResponse)
    def health_check():
        return {
            "status": "OK",
            "message": "Employee Task Tracker API is running",
            "timestamp": datetime.now(timezone.utc),
        }

    return app


app = create_app()
