"""
FastAPI dependencies for dependency injection.
"""
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorDatabase


async def get_database(request: Request) -> AsyncIOMotorDatabase:
    """
    Dependency returning the Motor database attached to the application.

    Usage:
        @router.get("/items")
        async def list_items(db: AsyncIOMotorDatabase = Depends(get_database)):
            ...
    """
    return request.app.state.db
