"""FastAPI application entry point: todo API and blog API in one process.

Run with: uvicorn src.main:app --reload --port 3001
(uvicorn[standard] picks uvloop automatically.)
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from config.settings import settings
from src.cs_blog.api.router import router as post_router
from src.cs_common.database import check_database, engine
from src.cs_common.enums import ConnectionStatus
from src.cs_common.errors import AppError, StoreUnavailableError
from src.cs_common.redis_client import check_redis, close_redis
from src.cs_common.response import error_response
from src.cs_gateway.api.router import router as health_router
from src.cs_gateway.middleware.request_log import RequestLogMiddleware
from src.cs_session.api.router import router as session_router
from src.cs_todo.api.router import router as todo_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: DB must answer, Redis is reported. Shutdown: dispose both."""
    # Startup
    if await check_database() is ConnectionStatus.DISCONNECTED:
        raise StoreUnavailableError("Database unreachable at startup")
    redis_status = await check_redis()
    logger.info(
        "%s started: env=%s cache=%s redis=%s",
        settings.APP_NAME,
        settings.ENVIRONMENT,
        settings.CACHE_BACKEND,
        redis_status.value,
    )
    yield
    # Shutdown
    await engine.dispose()
    await close_redis()


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CORS_ORIGIN],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(exc.code, exc.message, request)
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return await app_error_handler(request, StoreUnavailableError())


app.include_router(health_router)
app.include_router(todo_router)
app.include_router(post_router, prefix="/api")
app.include_router(session_router, prefix="/api")
