"""
MongoDB connection management.
One Motor client is opened at start-up and shared by every request.
"""
from typing import Optional
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from employee_api.config import Settings
from employee_api.exceptions import ConfigurationError, DatabaseError

logger = logging.getLogger(__name__)


class Collections:
    """MongoDB collection names."""

    EMPLOYEES = "employees"


class Database:
    """
    Owns the Motor client for the lifetime of the application.

    The instance is created by the application factory and stored on
    ``app.state``; nothing else holds a reference to the client.
    """

    def __init__(self, mongo_url: str, db_name: str, timeout_ms: int = 5000):
        """
        Initialize connection parameters.

        Args:
            mongo_url: MongoDB connection string
            db_name: Database name
            timeout_ms: Server selection timeout in milliseconds
        """
        self.mongo_url = mongo_url
        self.db_name = db_name
        self.timeout_ms = timeout_ms
        self._client: Optional[AsyncIOMotorClient] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a Database from application settings."""
        return cls(settings.MONGO_URL, settings.DB_NAME, settings.MONGO_TIMEOUT_MS)

    async def connect(self) -> None:
        """
        Open the client and verify the server is reachable.

        Raises:
            DatabaseError: If the server does not answer a ping
        """
        if self._client is None:
            self._client = AsyncIOMotorClient(
                self.mongo_url,
                serverSelectionTimeoutMS=self.timeout_ms
            )

        try:
            await self._client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"❌ MongoDB not reachable at startup: {e}")
            self._client.close()
            self._client = None
            raise DatabaseError("Could not connect to MongoDB", details={"db_name": self.db_name}) from e

        logger.info(f"✅ Connected to MongoDB database '{self.db_name}'")

    def get_db(self) -> AsyncIOMotorDatabase:
        """
        Get the database handle.

        Raises:
            ConfigurationError: If connect() has not been awaited
        """
        if self._client is None:
            raise ConfigurationError("Database is not connected")
        return self._client[self.db_name]

    def close(self) -> None:
        """Close the client if it is open."""
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("MongoDB connection closed")
