from datetime import datetime, timezone
from typing import Dict, Any

import structlog
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from sqlalchemy import text

from ... import __version__
from ...core.cache import TTLCache
from ...services.notification_queue import NotificationQueue
from ..dependencies import get_db, get_list_cache, get_notification_queue

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(
    db: Session = Depends(get_db),
    queue: NotificationQueue = Depends(get_notification_queue),
    cache: TTLCache = Depends(get_list_cache),
) -> Dict[str, Any]:
    try:
        db.execute(text("SELECT 1"))
    except Exception as e:
        logger.error("Database health check failed", error=str(e))
        raise HTTPException(
            status_code=503,
            detail={
                "status": "unhealthy",
                "database": "unhealthy",
                "error": "Database connectivity failed",
                "timestamp": datetime.now(timezone.utc).isoformat()
            }
        )

    queue_status = queue.status()
    return {
        "status": "healthy",
        "service": "Noticias API",
        "version": __version__,
        "database": "healthy",
        "queue": {"pending": queue_status.pending, "processing": queue_status.processing},
        "cache": cache.get_stats(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
