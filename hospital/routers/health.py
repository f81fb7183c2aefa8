"""Health check endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from hospital.config import settings
from hospital.core.logging import logger
from hospital.database import Database
from hospital.dependencies import get_database

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "hospital-api",
        "environment": settings.ENVIRONMENT,
    }


@router.get("/ready")
async def readiness_check(database: Database = Depends(get_database)):
    """Readiness check: the database answers a ping."""
    try:
        await database.ping()
    except PyMongoError as e:
        logger.error(f"Readiness check failed: {e}")
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return {"status": "ready"}
