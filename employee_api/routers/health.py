"""
Liveness endpoints.
"""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/ping", response_class=PlainTextResponse)
async def ping() -> str:
    logger.info("Received GET request to /ping")
    return "pong ping pong"


@router.get("/", response_class=PlainTextResponse)
async def hello() -> str:
    logger.info("Received GET request to /")
    return "hello"
