import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from iot_fleet.database import get_db

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

@router.get("/healthz")
def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "iot-fleet-api"}

@router.get("/api/v1/health")
def api_health_check(db: Session = Depends(get_db)):
    """
    API health check, including database connectivity.
    Status values: "ok", "degraded"
    """
    health_status = {"status": "ok", "api_version": "v1", "db": "ok"}
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database ping failed: {e}")
        health_status["db"] = "error"
        health_status["status"] = "degraded"
    return health_status
