"""FastAPI dependencies that hand each request its own Session.

Usage in any router:
    from src.cs_session.api.dependencies import CurrentSession, SessionSvc

    @router.get("/thing")
    async def thing(response: Response, session: CurrentSession, svc: SessionSvc):
        session.data["seen"] = True
        await svc.commit(session, response)
"""

from typing import Annotated

from fastapi import Depends, Request

from src.cs_common.redis_client import get_redis
from src.cs_session.application.service import SessionService
from src.cs_session.domain.models import Session
from src.cs_session.domain.repository import SessionStoreProtocol
from src.cs_session.infrastructure.redis_store import RedisSessionStore


async def get_session_store() -> SessionStoreProtocol:
    return RedisSessionStore(await get_redis())


async def get_session_service(
    store: Annotated[SessionStoreProtocol, Depends(get_session_store)],
) -> SessionService:
    return SessionService(store)


async def get_session(
    request: Request,
    service: Annotated[SessionService, Depends(get_session_service)],
) -> Session:
    return await service.load(request.cookies.get(service.cookie_name))


CurrentSession = Annotated[Session, Depends(get_session)]
SessionSvc = Annotated[SessionService, Depends(get_session_service)]
