"""SessionService — cookie value in, Session capability out, and back.

load():   valid cookie + live data → existing session; anything else → a new
          empty session with a fresh id.
commit(): persists a modified session and (re)issues the cookie. Unmodified
          sessions are not written, so anonymous visitors leave no trace.
"""

import uuid

from starlette.responses import Response

from config.settings import settings
from src.cs_session.application.token import decode_session_id, encode_session_id
from src.cs_session.domain.models import Session
from src.cs_session.domain.repository import SessionStoreProtocol


class SessionService:
    def __init__(
        self,
        store: SessionStoreProtocol,
        ttl_seconds: int = settings.SESSION_TTL_SECONDS,
        cookie_name: str = settings.SESSION_COOKIE_NAME,
        secure_cookie: bool = settings.ENVIRONMENT == "production",
    ) -> None:
        self._store = store
        self._ttl = ttl_seconds
        self.cookie_name = cookie_name
        self._secure = secure_cookie

    async def load(self, cookie_value: str | None) -> Session:
        session_id = decode_session_id(cookie_value) if cookie_value else None
        if session_id is not None:
            data = await self._store.load(session_id)
            if data is not None:
                return Session(session_id=session_id, data=data, is_new=False)
        return Session(session_id=uuid.uuid4().hex)

    async def commit(self, session: Session, response: Response) -> None:
        if not session.modified:
            return
        await self._store.save(session.session_id, session.data, self._ttl)
        session.mark_saved()
        response.set_cookie(
            key=self.cookie_name,
            value=encode_session_id(session.session_id),
            max_age=self._ttl,
            httponly=True,
            secure=self._secure,
            samesite="lax",
        )

    async def destroy(self, session: Session, response: Response) -> None:
        await self._store.destroy(session.session_id)
        response.delete_cookie(self.cookie_name)
