# database.py
"""
Exercise Tracker MongoDB Database Connection.

Uses Motor async driver with Beanie ODM.
"""

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from beanie import init_beanie
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class Database:
    """MongoDB database connection manager."""

    client: Optional[AsyncIOMotorClient] = None
    _initialized: bool = False

    @classmethod
    async def connect_db(cls, database_url: str, database_name: str):
        """
        Connect to MongoDB.

        Args:
            database_url: MongoDB connection string
            database_name: Database name to use
        """
        # Skip if already initialized (prevents multiple worker initialization)
        if cls._initialized:
            return

        try:
            cls.client = AsyncIOMotorClient(
                database_url,
                serverSelectionTimeoutMS=5000,  # 5 second timeout
                maxPoolSize=50,
                minPoolSize=0
            )

            db = cls.client[database_name]

            # Test connection with ping
            await cls.client.admin.command('ping')
            logger.info(f"Connected to MongoDB: {database_name}")

            await cls.init_models(db)

        except Exception as e:
            logger.error(f"Error connecting to MongoDB: {e}")
            if cls.client:
                cls.client.close()
                cls.client = None
            raise

    @classmethod
    async def init_models(cls, db: AsyncIOMotorDatabase):
        """
        Bind the Beanie document models to a database.

        Args:
            db: Motor (or API-compatible) database handle
        """
        from app.models.mongodb import UserDocument, ExerciseDocument

        await init_beanie(
            database=db,
            document_models=[
                UserDocument,
                ExerciseDocument,
            ]
        )
        logger.info("Beanie ODM initialized with all models")
        cls._initialized = True

    @classmethod
    async def close_db(cls):
        """Close MongoDB connection."""
        if cls.client:
            cls.client.close()
            cls.client = None
            cls._initialized = False
            logger.info("MongoDB connection closed")

    @classmethod
    async def ping(cls) -> bool:
        """Test MongoDB connection."""
        if not cls.client:
            return False
        try:
            await cls.client.admin.command('ping')
            return True
        except Exception:
            return False
