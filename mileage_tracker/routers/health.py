# mileage_tracker/routers/health.py
"""
System health check endpoint.
Returns status of backend + DB + notification webhook reachability.
"""

import requests
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import text
from mileage_tracker.database import get_db
from mileage_tracker.config import settings
from datetime import datetime

router = APIRouter()


@router.get("/health", summary="System health check")
def health_check(db: Session = Depends(get_db)):
    """
    Returns:
    - Backend status
    - Database connectivity
    - Notification webhook reachability (only when NOTIFY_WEBHOOK_URL is set)
    """
    result = {
        "status": "ok",
        "timestamp": datetime.utcnow().isoformat(),
        "backend": "ok",
        "database": "unknown",
        "notifications": "disabled",
    }

    try:
        db.execute(text("SELECT 1"))
        result["database"] = "ok"
    except Exception as e:
        result["database"] = f"error: {str(e)}"
        result["status"] = "degraded"

    if settings.NOTIFY_WEBHOOK_URL:
        try:
            resp = requests.head(settings.NOTIFY_WEBHOOK_URL, timeout=3)
            result["notifications"] = "ok" if resp.status_code < 500 else f"http_{resp.status_code}"
        except requests.exceptions.ConnectionError:
            result["notifications"] = "unreachable"
            result["status"] = "degraded"
        except requests.exceptions.RequestException as e:
            result["notifications"] = f"error: {str(e)}"

    return {"success": True, "data": result}
