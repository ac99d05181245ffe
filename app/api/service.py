# app/api/service.py

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from app.db.engine import get_engine, ping
from app.models.service import HealthOut, StatusOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["service"])


@router.get("/health", response_model=HealthOut, response_model_exclude_none=True)
def health_check():
    """
    Liveness plus a database probe. 500 when the database can't be reached.
    """
    timestamp = datetime.now(timezone.utc).isoformat()

    try:
        ping(get_engine())
    except SQLAlchemyError as e:
        logger.error("Health check: database unreachable: %s", e)
        body = HealthOut(
            status="ERROR",
            service=settings.SERVICE_NAME,
            timestamp=timestamp,
            database="disconnected",
            error=str(e),
        )
        return JSONResponse(status_code=500, content=body.model_dump())

    return HealthOut(
        status="OK",
        service=settings.SERVICE_NAME,
        timestamp=timestamp,
        database="connected",
    )


@router.get("/api/v1/status", response_model=StatusOut)
def service_status() -> StatusOut:
    return StatusOut(
        status="running",
        version=settings.VERSION,
        domain=settings.DOMAIN,
    )
