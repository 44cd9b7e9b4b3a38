"""
FastAPI application factory.
"""
from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI
from motor.motor_asyncio import AsyncIOMotorDatabase

from employee_api import __version__
from employee_api.config import Settings, settings as default_settings
from employee_api.database import Database
from employee_api.middleware.error_handler import add_exception_handlers
from employee_api.routers import employees, health

logger = logging.getLogger(__name__)


def create_app(
    database: Optional[AsyncIOMotorDatabase] = None,
    config: Optional[Settings] = None
) -> FastAPI:
    """
    Build the application.

    Args:
        database: Motor database to serve from. When omitted, a client is
            opened from settings at startup and closed at shutdown.
        config: Settings override

    Returns:
        Configured FastAPI instance
    """
    config = config or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.db is not None:
            yield
            return

        connection = Database.from_settings(config)
        await connection.connect()
        app.state.db = connection.get_db()
        logger.info(f"🚀 {config.PROJECT_NAME} started")
        try:
            yield
        finally:
            connection.close()
            app.state.db = None

    app = FastAPI(title=config.PROJECT_NAME, version=__version__, lifespan=lifespan)
    app.state.db = database

    add_exception_handlers(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(employees.router, prefix="/employees", tags=["Employees"])

    return app
