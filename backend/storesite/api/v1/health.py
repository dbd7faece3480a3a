"""Health check endpoints."""

import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from storesite.core.config import settings
from storesite.core.dependencies import get_store
from storesite.core.exceptions import StorageUnavailableError
from storesite.services.record_store import RecordStore

router = APIRouter()

_started_at = time.monotonic()


@router.get("/health")
async def health_check(store: RecordStore = Depends(get_store)):
    """Check storage connectivity. 503 when the database is unreachable."""
    db_status = "ok"
    try:
        await store.ping()
    except StorageUnavailableError:
        db_status = "error"

    status = "ok" if db_status == "ok" else "unhealthy"
    return JSONResponse(
        status_code=200 if status == "ok" else 503,
        content={
            "status": status,
            "db": db_status,
            "version": settings.APP_VERSION,
            "uptime": round(time.monotonic() - _started_at, 3),
        },
    )


@router.get("/health/quick")
async def quick_health_check():
    return {"status": "ok", "uptime": round(time.monotonic() - _started_at, 3)}
