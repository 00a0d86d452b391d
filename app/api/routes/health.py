from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import redis
from typing import Dict, Any

from app.core.config import settings
from app.core.rate_limiter import get_redis_client
from app.db.session import get_db

router = APIRouter(prefix="/health", tags=["Health Checks"])


@router.get("")
async def health_check() -> Dict[str, str]:
    """
    Simple health check to verify the API service is running.
    """
    return {"status": "ok", "service": settings.PROJECT_NAME}


@router.get("/readiness")
def readiness_check(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Check if the application is ready to accept traffic.

    The database is required; Redis only backs rate limiting, so it is
    reported but skipped while rate limiting is disabled.
    """
    db_status = "ok"
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        db_status = f"error: {e}"

    redis_status = "disabled"
    if settings.RATE_LIMIT_ENABLED:
        redis_status = "ok"
        try:
            get_redis_client().ping()
        except redis.RedisError as e:
            redis_status = f"error: {e}"

    all_healthy = db_status == "ok" and redis_status in ("ok", "disabled")

    return {
        "status": "ok" if all_healthy else "degraded",
        "database": db_status,
        "redis": redis_status,
        "version": settings.VERSION,
    }


@router.get("/version")
async def version_info() -> Dict[str, str]:
    return {
        "name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
    }
