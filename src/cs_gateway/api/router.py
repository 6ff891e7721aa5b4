"""Health checks for both services. Responses are not wrapped in ApiResponse.

GET /health      todo API: database only
GET /api/health  blog API: database + redis, environment, uptime

The database is required: DISCONNECTED → 503 "unhealthy". Redis only backs
the cache and sessions, so losing it reports "degraded" with 200.
"""

import time
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from config.settings import settings
from src.cs_common.database import check_database
from src.cs_common.enums import ConnectionStatus
from src.cs_common.redis_client import check_redis

router = APIRouter(tags=["health"])

_STARTED_AT = time.monotonic()

DatabaseStatus = Annotated[ConnectionStatus, Depends(check_database)]
RedisStatus = Annotated[ConnectionStatus, Depends(check_redis)]


@router.get("/health")
async def todo_health(database: DatabaseStatus) -> JSONResponse:
    if database is ConnectionStatus.DISCONNECTED:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "database": database.value},
        )
    return JSONResponse(content={"status": "healthy", "database": database.value})


@router.get("/api/health")
async def blog_health(database: DatabaseStatus, redis: RedisStatus) -> JSONResponse:
    body = {
        "database": database.value,
        "redis": redis.value,
        "environment": settings.ENVIRONMENT,
        "uptime": round(time.monotonic() - _STARTED_AT, 3),
    }
    if database is ConnectionStatus.DISCONNECTED:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", **body},
        )
    overall = "healthy" if redis is ConnectionStatus.CONNECTED else "degraded"
    return JSONResponse(content={"status": overall, **body})
